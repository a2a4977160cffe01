"""Height scales, in rem."""

from tachyons.util import map_value

_scale = {
    "h1": 1,
    "h2": 2,
    "h3": 4,
    "h4": 8,
    "h5": 16,
}

heights = map_value(_scale, lambda val: {"height": val})
min_heights = {f"min-{key}": {"minHeight": val} for key, val in _scale.items()}
max_heights = {f"max-{key}": {"maxHeight": val} for key, val in _scale.items()}
