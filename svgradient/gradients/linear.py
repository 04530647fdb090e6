"""
Linear gradients
================

Coordinates are fractions of the canvas width (x) and height (y); values
outside [0, 1] are allowed. The gradient runs from (x0, y0) to (x1, y1)
and both ``x0 <= x1`` and ``y0 <= y1`` must hold.

Purely horizontal or purely vertical vectors take a fast path that
resolves one color per column (row) and replicates it. Everything else
projects each pixel onto the gradient vector.
"""

from __future__ import annotations

import math
import numpy as np

from ..canvas.canvas import Canvas, write_pixels
from ..errors import check_bounds
from .geometry_helpers import fill_first, pixel_grid
from .stops import StopTable, StopsInput


def _draw_axis(canvas: Canvas, start: float, end: float, table: StopTable, vertical: bool) -> None:
    bb = canvas.bounds
    length = bb.height if vertical else bb.width

    start, end = start * length, end * length
    coords = np.arange(length, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        ratio = (coords - start) / (end - start)

    line = table.resolve_many(ratio)
    if vertical:
        pixels = np.broadcast_to(line[:, None, :], (bb.height, bb.width, 4))
    else:
        pixels = np.broadcast_to(line[None, :, :], (bb.height, bb.width, 4))
    write_pixels(canvas, pixels)


def draw_horizontal_linear(canvas: Canvas, x0: float, x1: float, stops: StopsInput) -> None:
    """
    Draw a purely horizontal linear gradient; every column is uniform.

    Args:
        canvas: Target canvas
        x0, x1: Start and end as fractions of the canvas width, x0 <= x1
        stops: Color stops; an empty sequence draws nothing

    Raises:
        InvalidBoundsError: x0 > x1
    """
    check_bounds("x", x0, x1)
    table = StopTable.coerce(stops)
    if not len(table):
        return
    _draw_axis(canvas, x0, x1, table, vertical=False)


def draw_vertical_linear(canvas: Canvas, y0: float, y1: float, stops: StopsInput) -> None:
    """
    Draw a purely vertical linear gradient; every row is uniform.

    Raises:
        InvalidBoundsError: y0 > y1
    """
    check_bounds("y", y0, y1)
    table = StopTable.coerce(stops)
    if not len(table):
        return
    _draw_axis(canvas, y0, y1, table, vertical=True)


def draw_general_linear(
    canvas: Canvas,
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    stops: StopsInput,
) -> None:
    """
    Draw a linear gradient along an arbitrary vector.

    Pixels behind the start line (the line through the start point,
    perpendicular to the vector) take the first color outright. The rest
    are positioned by their distance from the start line divided by the
    vector length. Coincident endpoints paint the first color everywhere.

    Raises:
        InvalidBoundsError: x0 > x1 or y0 > y1
    """
    check_bounds("x", x0, x1)
    check_bounds("y", y0, y1)
    table = StopTable.coerce(stops)
    if not len(table):
        return

    bb = canvas.bounds
    width, height = bb.width, bb.height

    x0, y0 = x0 * width, y0 * height
    x1, y1 = x1 * width, y1 * height

    dx, dy = x1 - x0, y1 - y0
    px0, py0 = x0 - dy, y0 + dx
    mag = math.hypot(dx, dy)
    if mag == 0:
        fill_first(canvas, table)
        return

    fy, fx = pixel_grid(bb)

    # is the pixel before the start of the gradient?
    s0 = (px0 - x0) * (fy - y0) - (py0 - y0) * (fx - x0)

    # distance of the pixel from the start line
    u = ((fx - x0) * (px0 - x0) + (fy - y0) * (py0 - y0)) / (mag * mag)
    x2, y2 = x0 + u * (px0 - x0), y0 + u * (py0 - y0)
    d = np.hypot(fx - x2, fy - y2) / mag

    pixels = table.resolve_many(d)
    pixels[s0 > 0] = table.first_color8()
    write_pixels(canvas, pixels)


def draw_linear(
    canvas: Canvas,
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    stops: StopsInput,
) -> None:
    """
    Draw a linear gradient from (x0, y0) to (x1, y1).

    Horizontal and vertical vectors are handed to the axis fast paths.
    Both bounds are checked before anything is drawn.

    Args:
        canvas: Target canvas
        x0, y0: Start point as fractions of width and height
        x1, y1: End point as fractions of width and height
        stops: Color stops; an empty sequence draws nothing

    Raises:
        InvalidBoundsError: x0 > x1 or y0 > y1
    """
    check_bounds("x", x0, x1)
    check_bounds("y", y0, y1)

    if y0 == y1 and x0 != x1:
        draw_horizontal_linear(canvas, x0, x1, stops)
    elif x0 == x1 and y0 != y1:
        draw_vertical_linear(canvas, y0, y1, stops)
    else:
        draw_general_linear(canvas, x0, y0, x1, y1, stops)
