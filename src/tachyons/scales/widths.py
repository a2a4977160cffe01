"""Width scales, in rem."""

from tachyons.util import map_value

_scale = {
    "w1": 1,
    "w2": 2,
    "w3": 4,
    "w4": 8,
    "w5": 16,
}

widths = map_value(_scale, lambda val: {"width": val})
min_widths = {f"min-{key}": {"minWidth": val} for key, val in _scale.items()}
max_widths = {f"max-{key}": {"maxWidth": val} for key, val in _scale.items()}
