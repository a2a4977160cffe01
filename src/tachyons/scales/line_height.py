from tachyons.util import map_value

_scale = {
    "lh-solid": 1,
    "lh-title": 1.25,
    "lh-copy": 1.5,
}

line_height = map_value(_scale, lambda val: {"lineHeight": val})
