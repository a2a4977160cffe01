"""Helpers shared by the compiler, the resolver and the scale tables."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Callable

__all__ = [
    "b_",
    "bg",
    "class_names",
    "hyphens_to_underscores",
    "map_value",
    "merge",
    "tint",
]

_BARE_HEX_RE = re.compile(r"^(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def map_value(table: Mapping[str, Any], fn: Callable[[Any], Any]) -> dict[str, Any]:
    """Return a new dict with *fn* applied to every value of *table*."""
    return {key: fn(value) for key, value in table.items()}


def hyphens_to_underscores(table: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of *table* with ``-`` replaced by ``_`` in every key."""
    return {key.replace("-", "_"): value for key, value in table.items()}


def merge(target: dict[str, Any], source: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge *source* into *target* in place and return *target*.

    Nested mappings are merged key by key; any other value replaces the one in
    *target*. Mappings coming from *source* are copied so later merges never
    write into the caller's objects.
    """
    for key, value in source.items():
        current = target.get(key)
        if isinstance(value, Mapping) and isinstance(current, dict):
            merge(current, value)
        elif isinstance(value, Mapping):
            target[key] = merge({}, value)
        else:
            target[key] = value
    return target


def class_names(*args: Any) -> str:
    """Join every truthy class token found in *args* with single spaces.

    Accepts strings, numbers, (nested) lists and tuples, and mappings whose
    keys are kept when their value is truthy. ``None`` and booleans are
    skipped; anything else is stringified.
    """
    classes: list[str] = []
    for arg in args:
        if arg is None or isinstance(arg, bool):
            continue
        if isinstance(arg, str):
            if arg:
                classes.append(arg)
        elif isinstance(arg, (int, float)):
            if arg:
                classes.append(str(arg))
        elif isinstance(arg, (list, tuple)):
            inner = class_names(*arg)
            if inner:
                classes.append(inner)
        elif isinstance(arg, Mapping):
            classes.extend(str(key) for key, flag in arg.items() if flag)
        else:
            classes.append(str(arg))
    return " ".join(classes)


# ---------------------------------------------------------------------------
# Built-in transform functions
# ---------------------------------------------------------------------------


def _color(value: str) -> str:
    # Tokens cannot carry "#", so a bare hex argument gets it back.
    if _BARE_HEX_RE.match(value):
        return f"#{value}"
    return value


def bg(color: str, element: Any = None) -> dict[str, str]:
    """Background color style, e.g. ``bg_ff0000`` or ``bg-red``."""
    return {"backgroundColor": _color(color)}


def b_(color: str, element: Any = None) -> dict[str, str]:
    """Border color style, e.g. ``b--red``."""
    return {"borderColor": _color(color)}


def tint(color: str, element: Any = None) -> dict[str, str]:
    """Image tint color style, e.g. ``tint_ff0000``."""
    return {"tintColor": _color(color)}
