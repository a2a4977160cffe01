"""CLI command: tachyons build -- compile a theme and print the stylesheet."""

from __future__ import annotations

import json

import click

from tachyons.cli.theme import load_context


@click.command()
@click.argument("theme", type=click.Path(exists=True, dir_okay=False))
@click.option("--sizes", "show_sizes", is_flag=True, help="Print the sizes table instead of the styles.")
def build(theme: str, show_sizes: bool) -> None:
    """Compile a JSON THEME file and print the result as JSON.

    The theme holds the same keys as tachyons.build(): rem, font_rem, colors,
    fonts, custom_styles, cls_prop_name, style_prop_name and cls_map.
    """
    context = load_context(theme)
    table = context.sizes if show_sizes else context.styles
    click.echo(json.dumps(table, indent=2, sort_keys=True))
