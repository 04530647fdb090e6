from .stops import Stop, StopTable, resolve
from .linear import (
    draw_linear,
    draw_horizontal_linear,
    draw_vertical_linear,
    draw_general_linear,
)
from .radial import draw_radial, draw_centered_radial, draw_focused_radial

__all__ = [
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
]
