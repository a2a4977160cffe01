"""Compiled style state and the operations that read it.

A ``StyleContext`` owns one compiled stylesheet, one sizes table and one
``Options`` record. :meth:`StyleContext.build` is the only writer:

- the stylesheet is replaced wholesale on every build,
- sizes and options are merged forward.

Building must not run while a tree is being transformed against the same
context. Transform passes only read the state and may run side by side.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable

from tachyons.compiler import check_config, compile_stylesheet
from tachyons.errors import ConfigError
from tachyons.model.options import Options, StyleObject
from tachyons.resolver import transform_style
from tachyons.transforms.classes import ClassStyleTransform, recursive_style
from tachyons.wrap import wrap

__all__ = ["StyleContext", "StyleFactory"]

logger = logging.getLogger("tachyons")

StyleFactory = Callable[[dict[str, StyleObject]], Mapping[str, StyleObject]]


def _copy_styles(stylesheet: dict[str, StyleObject]) -> dict[str, StyleObject]:
    return {token: dict(style) for token, style in stylesheet.items()}


class StyleContext:
    """Holds compiled styles and resolves class strings against them."""

    def __init__(self, options: Options | None = None) -> None:
        self.styles: dict[str, StyleObject] = {}
        self.sizes: dict[str, float] = {}
        self.options = options or Options()

    def build(
        self,
        config: Mapping[str, Any] | None = None,
        create: StyleFactory | None = None,
        **overrides: Any,
    ) -> None:
        """Compile the stylesheet from *config* merged over the current options.

        *create* finalizes the plain ``token -> style`` mapping for the host
        runtime and is called once; by default every style object is copied.
        Keyword *overrides* are merged over *config*.
        """
        if config is not None and not isinstance(config, Mapping):
            raise ConfigError(f"Configuration must be a mapping, got {type(config).__name__}")
        updated: dict[str, Any] = dict(config or {})
        updated.update(overrides)
        check_config(updated)

        candidate = self.options.copy()
        candidate.merge(updated)
        if updated.get("cls_prop_name_cap") is None:
            candidate.cls_prop_name_cap = candidate.cls_prop_name[:1].upper() + candidate.cls_prop_name[1:]

        stylesheet, sizes = compile_stylesheet(candidate)
        finalized = (create or _copy_styles)(stylesheet)

        self.styles.clear()
        self.styles.update(finalized)
        self.sizes.update(sizes)
        self.options.merge(updated)
        self.options.cls_prop_name_cap = candidate.cls_prop_name_cap
        logger.info("Compiled %d styles (rem=%s)", len(self.styles), self.options.rem)

    def reset(self) -> None:
        """Drop compiled styles and sizes and restore default options in place."""
        self.styles.clear()
        self.sizes.clear()
        defaults = Options()
        for name in Options.field_names():
            setattr(self.options, name, getattr(defaults, name))

    def transform_style(self, element: Any, style: Any, cls: Any) -> list[StyleObject] | None:
        """Resolve *cls* on top of *style* for *element*; see :mod:`tachyons.resolver`."""
        return transform_style(element, style, cls, self.styles, self.options)

    def recursive_style(self, tree: Any) -> Any:
        return recursive_style(tree, self.styles, self.options)

    def transform(self) -> ClassStyleTransform:
        """Return a transform bound to this context's current state."""
        return ClassStyleTransform(self.styles, self.options)

    def wrap(self, component_or_function: Any) -> Any:
        """Decorate a component class or render function; see :func:`tachyons.wrap.wrap`."""
        return wrap(component_or_function, self.recursive_style)

