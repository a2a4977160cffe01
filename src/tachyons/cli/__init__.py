from tachyons.cli.main import cli

__all__ = ["cli"]
