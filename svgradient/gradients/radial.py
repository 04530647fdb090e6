"""
Radial gradients
================

The circle is given by its center (cx, cy) as fractions of width and
height and its radius r as a fraction of the width. The focus (fx, fy) is
where position 0 sits; when it coincides with the center the cheaper
elliptical distance field is used.
"""

from __future__ import annotations

import math
import warnings
import numpy as np

from ..canvas.canvas import Canvas, write_pixels
from ..defaults import FOCUS_INSET
from .geometry_helpers import fill_last, pixel_grid
from .stops import StopTable, StopsInput


def draw_centered_radial(canvas: Canvas, cx: float, cy: float, r: float, stops: StopsInput) -> None:
    """
    Draw a radial gradient whose focus is its center.

    The radius scales with each axis (``r * width`` horizontally,
    ``r * height`` vertically), so non-square canvases get an ellipse.
    A zero radius puts every pixel outside the circle.
    """
    table = StopTable.coerce(stops)
    if not len(table):
        return

    bb = canvas.bounds
    if bb.empty:
        return
    if r == 0:
        fill_last(canvas, table)
        return

    width, height = bb.width, bb.height
    a, b = r * width, r * height
    cx, cy = cx * width, cy * height

    y, x = pixel_grid(bb)
    position = np.sqrt(((x - cx) / a) ** 2 + ((y - cy) / b) ** 2)
    write_pixels(canvas, table.resolve_many(position))


def draw_focused_radial(
    canvas: Canvas,
    cx: float,
    cy: float,
    r: float,
    fx: float,
    fy: float,
    stops: StopsInput,
) -> None:
    """
    Draw a radial gradient with the focus away from the center.

    Each pixel's position is the ratio of its distance from the focus to
    the distance from the focus to the circle along the same ray. A focus
    on or outside the circle is pulled in to ``FOCUS_INSET`` pixels inside
    it (to the center for radii under that), with a warning.
    """
    table = StopTable.coerce(stops)
    if not len(table):
        return

    bb = canvas.bounds
    if bb.empty:
        return
    if r == 0:
        fill_last(canvas, table)
        return

    width, height = float(bb.width), float(bb.height)

    fx, fy = (fx - cx) * width, (fy - cy) * height
    cx, cy = cx * width, cy * height
    r *= width

    # keep the focus strictly inside the circle
    fmag = math.hypot(fx, fy)
    if fmag >= r and fmag > 0:
        inset = max(r - FOCUS_INSET, 0.0)
        warnings.warn(
            f"Radial gradient focus lies {fmag:.3f}px from the center, outside "
            f"radius {r:.3f}px; moved to {inset:.3f}px",
            UserWarning,
            stacklevel=2,
        )
        fx, fy = fx * inset / fmag, fy * inset / fmag

    r2 = r * r
    mul = r / (r2 - (fx * fx + fy * fy))
    yrat = height / width

    y, x = pixel_grid(bb)
    dx = x - cx - fx
    dy = (y - cy - fy) / yrat

    d2 = dx * fy - dy * fx
    d3 = r2 * (dx * dx + dy * dy) - d2 * d2
    # abs() absorbs tiny negative rounding residue
    position = (dx * fx + dy * fy + np.sqrt(np.abs(d3))) * mul / r

    write_pixels(canvas, table.resolve_many(position))


def draw_radial(
    canvas: Canvas,
    cx: float,
    cy: float,
    r: float,
    fx: float,
    fy: float,
    stops: StopsInput,
) -> None:
    """
    Draw a radial gradient.

    Args:
        canvas: Target canvas
        cx, cy: Circle center as fractions of width and height
        r: Radius as a fraction of the width
        fx, fy: Focus as fractions of width and height
        stops: Color stops; an empty sequence draws nothing
    """
    if fx == cx and fy == cy:
        draw_centered_radial(canvas, cx, cy, r, stops)
    else:
        draw_focused_radial(canvas, cx, cy, r, fx, fy, stops)
