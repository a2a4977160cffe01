"""Margin and padding scales, in rem.

``pa2`` is padding 0.5rem, ``mh3`` is horizontal margin 1rem, and so on.
"""

_steps = [0, 0.25, 0.5, 1, 2, 4, 8, 16]

_properties = {
    "a": "",
    "l": "Left",
    "r": "Right",
    "t": "Top",
    "b": "Bottom",
    "v": "Vertical",
    "h": "Horizontal",
}

spacing: dict[str, dict[str, float]] = {}
for _prefix, _base in (("p", "padding"), ("m", "margin")):
    for _suffix, _side in _properties.items():
        for _i, _step in enumerate(_steps):
            spacing[f"{_prefix}{_suffix}{_i}"] = {f"{_base}{_side}": _step}
