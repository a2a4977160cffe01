"""Border widths and styles (unscaled) and border radii (in rem)."""

from tachyons.util import map_value

styles = {
    "ba": {"borderWidth": 1},
    "bt": {"borderTopWidth": 1},
    "br": {"borderRightWidth": 1},
    "bb": {"borderBottomWidth": 1},
    "bl": {"borderLeftWidth": 1},
    "bn": {"borderWidth": 0},
    "b--solid": {"borderStyle": "solid"},
    "b--dashed": {"borderStyle": "dashed"},
    "b--dotted": {"borderStyle": "dotted"},
}

_radii = {
    "br0": 0,
    "br1": 0.125,
    "br2": 0.25,
    "br3": 0.5,
    "br4": 1,
}

radii = map_value(_radii, lambda val: {"borderRadius": val})
