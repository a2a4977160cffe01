"""tachyons CLI entry point: Click group with subcommands."""

import logging

import click

from tachyons import __version__


@click.group()
@click.version_option(version=__version__, prog_name="tachyons")
@click.option("-v", "--verbose", is_flag=True, help="Log compiler activity.")
def cli(verbose: bool) -> None:
    """Tachyons - compile utility class themes and resolve class strings."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from tachyons.cli.build import build  # noqa: E402
from tachyons.cli.resolve import resolve  # noqa: E402

cli.add_command(build)
cli.add_command(resolve)
