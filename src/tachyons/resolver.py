"""Token resolver: turns a utility class string into a list of style objects.

Each token is looked up in the compiled stylesheet first. Tokens without an
entry are read as a function call: the token is split on every underscore not
followed by another underscore, the head names a transform function and the
rest are its string arguments::

    tint_ff0000   -> tint("ff0000")
    b__red        -> b_("red")

Tokens that resolve neither way are logged and skipped.
"""

from __future__ import annotations

import functools
import inspect
import logging
import re
from collections.abc import Mapping
from typing import Any

from tachyons.model.options import Options, StyleObject
from tachyons.util import class_names

__all__ = ["accepts_element", "split_call", "to_class_string", "transform_style"]

logger = logging.getLogger("tachyons.resolver")

_CALL_SPLIT_RE = re.compile(r"_(?=[^_])")


def to_class_string(source: Any) -> str:
    """Normalize a token source (string, list, mapping, ...) to one string."""
    if isinstance(source, str):
        return source
    if isinstance(source, (list, tuple)):
        return class_names(*source)
    return class_names(source)


@functools.lru_cache(maxsize=None)
def accepts_element(fn: Any) -> bool:
    """Return True if transform function *fn* takes an ``element`` keyword."""
    try:
        parameters = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        return False
    return any(
        p.kind is inspect.Parameter.VAR_KEYWORD
        or (p.name == "element" and p.kind is not inspect.Parameter.POSITIONAL_ONLY)
        for p in parameters
    )


def split_call(token: str) -> tuple[str, list[str]]:
    """Split a function-style token into ``(name, args)``."""
    name, *args = _CALL_SPLIT_RE.split(token)
    return name, args


def transform_style(
    element: Any,
    style: Any,
    cls: Any,
    stylesheet: Mapping[str, StyleObject],
    options: Options,
) -> list[StyleObject] | None:
    """Resolve the token source *cls* on top of the existing *style* value.

    Returns the new style list, with *style* first and token styles after it
    in authoring order, or ``None`` when *cls* holds no tokens.
    """
    if cls is None:
        return None
    tokens = to_class_string(cls).replace("-", "_").split()
    if not tokens:
        return None

    if isinstance(style, (list, tuple)):
        resolved = list(style)
    elif isinstance(style, Mapping):
        resolved = [style]
    else:
        resolved = []

    for token in tokens:
        found = stylesheet.get(token)
        if found is not None:
            resolved.append(found)
            continue
        name, args = split_call(token)
        fn = options.fn.get(name)
        if callable(fn):
            if accepts_element(fn):
                resolved.append(fn(*args, element=element))
            else:
                resolved.append(fn(*args))
        else:
            logger.warning("style '%s' not found", token)

    return resolved
