"""Built-in style tables.

``STATIC_GROUPS`` are copied as-is; ``REM_SCALED`` tables hold multipliers of
the base unit and go through the scale expander, in this order.
"""

from tachyons.scales import borders
from tachyons.scales.absolute import scale_styles
from tachyons.scales.flexbox import flexbox
from tachyons.scales.font_weights import font_weights
from tachyons.scales.heights import heights, max_heights, min_heights
from tachyons.scales.images import images
from tachyons.scales.line_height import line_height
from tachyons.scales.opacity import opacity
from tachyons.scales.spacing import spacing
from tachyons.scales.text import text
from tachyons.scales.tracked import tracked
from tachyons.scales.type_scale import type_scale
from tachyons.scales.widths import max_widths, min_widths, widths

STATIC_GROUPS = [
    borders.styles,
    flexbox,
    font_weights,
    images,
    text,
    opacity,
]

REM_SCALED = [
    heights,
    min_heights,
    max_heights,
    widths,
    min_widths,
    max_widths,
    spacing,
    type_scale,
    borders.radii,
    line_height,
    tracked,
]

__all__ = ["REM_SCALED", "STATIC_GROUPS", "scale_styles"]
