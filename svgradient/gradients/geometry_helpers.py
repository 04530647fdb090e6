from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..canvas.canvas import Bounds, Canvas, fill
from .stops import StopTable


def pixel_grid(bounds: Bounds) -> Tuple[NDArray, NDArray]:
    """
    Local pixel coordinates of every pixel in ``bounds``.

    Returns:
        (ys, xs) float64 arrays of shape (height, width), counted from the
        bounds' min corner
    """
    ys, xs = np.indices((bounds.height, bounds.width), dtype=np.float64)
    return ys, xs


def fill_first(canvas: Canvas, table: StopTable) -> None:
    fill(canvas, table.first_color8())


def fill_last(canvas: Canvas, table: StopTable) -> None:
    fill(canvas, table.resolve_many(np.array([np.inf]))[0])
