"""Absolute positioning helpers.

Offsets are in rem, so they are produced by :func:`scale_styles` once the unit
is known. ``top-1`` is one rem from the top, ``top--1`` is minus one rem.
"""

from __future__ import annotations

_SIDES = ("top", "right", "bottom", "left")
_STEPS = (0, 1, 2)


def scale_styles(rem: float) -> dict[str, dict[str, object]]:
    """Return the absolute-positioning entries for a base unit of *rem*."""
    result: dict[str, dict[str, object]] = {
        "absolute": {"position": "absolute"},
        "relative": {"position": "relative"},
        "absolute-fill": {
            "position": "absolute",
            "top": 0,
            "right": 0,
            "bottom": 0,
            "left": 0,
        },
    }
    for side in _SIDES:
        for step in _STEPS:
            result[f"{side}-{step}"] = {side: step * rem}
            if step:
                result[f"{side}--{step}"] = {side: -step * rem}
    return result
