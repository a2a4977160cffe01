"""Loading theme configuration files for the CLI commands."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from tachyons.context import StyleContext
from tachyons.errors import ConfigError


def load_context(theme_file: str) -> StyleContext:
    """Read a JSON theme file and compile it into a fresh context.

    Exits with code 1 on unreadable JSON or invalid configuration.
    """
    path = Path(theme_file)
    try:
        config = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        click.echo(f"Invalid JSON in {path.name}: {exc}", err=True)
        sys.exit(1)

    context = StyleContext()
    try:
        context.build(config)
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)
    return context
