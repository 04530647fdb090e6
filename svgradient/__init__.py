"""svgradient: SVG-style linear and radial gradients rasterized into pixel buffers."""

from .colors import (
    ColorBase,
    ColorNRGBA,
    ColorRGBA,
    ColorNRGBA64,
    ColorRGBA64,
    NRGBA,
    RGBA,
    blend,
    blend_channels,
)
from .gradients import (
    Stop,
    StopTable,
    resolve,
    draw_linear,
    draw_horizontal_linear,
    draw_vertical_linear,
    draw_general_linear,
    draw_radial,
    draw_centered_radial,
    draw_focused_radial,
)
from .canvas import Bounds, Canvas, ArrayCanvas, PILCanvas
from .errors import InvalidBoundsError

__version__ = "0.1.0"

__all__ = [
    # colors
    "ColorBase",
    "ColorNRGBA",
    "ColorRGBA",
    "ColorNRGBA64",
    "ColorRGBA64",
    "NRGBA",
    "RGBA",
    "blend",
    "blend_channels",
    # stops and gradients
    "Stop",
    "StopTable",
    "resolve",
    "draw_linear",
    "draw_horizontal_linear",
    "draw_vertical_linear",
    "draw_general_linear",
    "draw_radial",
    "draw_centered_radial",
    "draw_focused_radial",
    # canvases
    "Bounds",
    "Canvas",
    "ArrayCanvas",
    "PILCanvas",
    "InvalidBoundsError",
]
