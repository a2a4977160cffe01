"""tachyons - utility class strings resolved into style objects.

Compile once, then resolve class props anywhere in an element tree::

    import tachyons

    tachyons.build({"rem": 16, "colors": {"red": "#ff0000"}})

    @tachyons.wrap
    def card(title):
        return h("View", {"cls": "pa3 bg-red br2"}, title)

The package-level ``styles``, ``sizes`` and ``options`` belong to
``default_context``; treat them as read-only and change them through
:func:`build`. Use a separate :class:`StyleContext` for independent themes.
"""

from __future__ import annotations

from typing import Any

from tachyons.context import StyleContext, StyleFactory
from tachyons.errors import ConfigError, TachyonsError
from tachyons.model import Element, Options, StyleObject, clone_element, create_element, is_element

__version__ = "0.1.0"

default_context = StyleContext()

styles = default_context.styles
sizes = default_context.sizes
options = default_context.options

h = create_element


def build(config: dict[str, Any] | None = None, create: StyleFactory | None = None, **overrides: Any) -> None:
    """Compile the process-wide stylesheet; see :meth:`StyleContext.build`."""
    default_context.build(config, create, **overrides)


def transform_style(element: Any, style: Any, cls: Any) -> list[StyleObject] | None:
    return default_context.transform_style(element, style, cls)


def recursive_style(tree: Any) -> Any:
    return default_context.recursive_style(tree)


def wrap(component_or_function: Any) -> Any:
    return default_context.wrap(component_or_function)


__all__ = [
    "ConfigError",
    "Element",
    "Options",
    "StyleContext",
    "StyleObject",
    "TachyonsError",
    "build",
    "clone_element",
    "create_element",
    "default_context",
    "h",
    "is_element",
    "options",
    "recursive_style",
    "sizes",
    "styles",
    "transform_style",
    "wrap",
]
