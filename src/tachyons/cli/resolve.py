"""CLI command: tachyons resolve -- resolve a class string against a theme."""

from __future__ import annotations

import json
import sys

import click

from tachyons.cli.theme import load_context


@click.command()
@click.argument("theme", type=click.Path(exists=True, dir_okay=False))
@click.argument("classes", nargs=-1, required=True)
def resolve(theme: str, classes: tuple[str, ...]) -> None:
    """Resolve CLASSES against a compiled JSON THEME and print the styles.

    Exits with code 1 if any class did not resolve.
    """
    context = load_context(theme)

    resolved = []
    unresolved = []
    for token in " ".join(classes).split():
        found = context.transform_style(None, None, token)
        if found:
            resolved.extend(found)
        else:
            unresolved.append(token)

    click.echo(json.dumps(resolved, indent=2, sort_keys=True))

    if unresolved:
        click.echo(f"Unresolved: {', '.join(unresolved)}", err=True)
        sys.exit(1)
