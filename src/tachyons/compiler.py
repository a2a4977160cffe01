"""Stylesheet compiler: expands rem-scaled tables and theme entries into tokens.

The compiled stylesheet is assembled in a fixed order so that later groups
win on key collisions:

1. static groups (borders, flexbox, font weights, images, text, opacity)
2. rem-scaled tables (heights, widths, spacing, type scale, radii, ...)
3. absolute positioning helpers
4. colors (``bg-<name>``, ``<name>``, ``b--<name>``, ``tint-<name>``)
5. font families (``ff-<name>``)
6. custom styles

Keys are finally normalized from hyphens to underscores.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from tachyons.errors import ConfigError
from tachyons.model.options import Options, StyleObject
from tachyons.scales import REM_SCALED, STATIC_GROUPS, scale_styles
from tachyons.util import b_, bg, hyphens_to_underscores, tint

__all__ = ["check_config", "compile_stylesheet", "expand_scale"]

logger = logging.getLogger("tachyons.compiler")

_MAPPING_KEYS = ("colors", "fonts", "custom_styles", "fn", "cls_map")
_UNIT_KEYS = ("rem", "font_rem")
_NAME_KEYS = ("cls_prop_name", "cls_prop_name_cap", "style_prop_name")


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def expand_scale(
    table: Mapping[str, Any],
    rem: float,
    font_rem: float | None = None,
    sizes: dict[str, float] | None = None,
) -> dict[str, StyleObject]:
    """Multiply every value of a scale *table* by the unit *rem*.

    ``fontSize`` values use *font_rem* instead when it is set. The scaled
    magnitude of each token is recorded in *sizes* if given.
    """
    result: dict[str, StyleObject] = {}
    for key, style in table.items():
        if not isinstance(style, Mapping):
            raise ConfigError(f"Scale entry {key!r} must be a mapping, got {style!r}", key=key)
        scaled: StyleObject = {}
        for name, value in style.items():
            if not _is_number(value):
                raise ConfigError(
                    f"Scale entry {key!r} has non-numeric {name!r}: {value!r}", key=key
                )
            unit = font_rem if name == "fontSize" and font_rem else rem
            scaled[name] = value * unit
            if sizes is not None:
                sizes[key] = value * unit
        result[key] = scaled
    return result


def check_config(config: Mapping[str, Any]) -> None:
    """Raise ConfigError for malformed values; log and ignore unknown keys."""
    if not isinstance(config, Mapping):
        raise ConfigError(f"Configuration must be a mapping, got {type(config).__name__}")

    known = Options.field_names()
    for key in config:
        if key not in known:
            logger.warning("Ignoring unknown option %r", key)

    for key in _UNIT_KEYS:
        value = config.get(key)
        if value is None:
            continue
        if not _is_number(value) or value <= 0:
            raise ConfigError(f"Option {key!r} must be a positive number, got {value!r}", key=key)

    for key in _MAPPING_KEYS:
        value = config.get(key)
        if value is not None and not isinstance(value, Mapping):
            raise ConfigError(f"Option {key!r} must be a mapping, got {value!r}", key=key)

    for key in _NAME_KEYS:
        value = config.get(key)
        if value is not None and not (isinstance(value, str) and value):
            raise ConfigError(f"Option {key!r} must be a non-empty string, got {value!r}", key=key)

    for name, fn in (config.get("fn") or {}).items():
        if not callable(fn):
            raise ConfigError(f"Transform function {name!r} is not callable", key="fn")

    for token, style in (config.get("custom_styles") or {}).items():
        if not isinstance(style, Mapping):
            raise ConfigError(f"Custom style {token!r} must be a mapping, got {style!r}", key="custom_styles")


def compile_stylesheet(options: Options) -> tuple[dict[str, StyleObject], dict[str, float]]:
    """Build the token -> style mapping and the token -> size mapping for *options*.

    Both mappings come back with underscore-normalized keys.
    """
    stylesheet: dict[str, StyleObject] = {}
    for group in STATIC_GROUPS:
        stylesheet.update(group)

    sizes: dict[str, float] = {}
    for table in REM_SCALED:
        stylesheet.update(expand_scale(table, options.rem, options.font_rem, sizes))

    stylesheet.update(scale_styles(options.rem))

    for name, value in options.colors.items():
        stylesheet[f"bg-{name}"] = bg(value)
        stylesheet[name] = {"color": value}
        stylesheet[f"b--{name}"] = b_(value)
        stylesheet[f"tint-{name}"] = tint(value)

    for name, value in options.fonts.items():
        stylesheet[f"ff-{name}"] = {"fontFamily": value}

    stylesheet.update(options.custom_styles)

    return hyphens_to_underscores(stylesheet), hyphens_to_underscores(sizes)
