from __future__ import annotations

import numpy as np
from numpy import ndarray as NDArray
from typing import NamedTuple, Protocol, runtime_checkable

from ..colors.rgba import ColorNRGBA
from ..types.color_types import Color


class Bounds(NamedTuple):
    """Integer pixel rectangle; ``max`` corners are exclusive."""
    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y

    @property
    def empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


@runtime_checkable
class Canvas(Protocol):
    """A mutable pixel buffer: bounds plus a single-pixel setter."""

    @property
    def bounds(self) -> Bounds: ...

    def set(self, x: int, y: int, color: Color) -> None: ...


@runtime_checkable
class BlockCanvas(Canvas, Protocol):
    """A canvas that can also take a whole (height, width, 4) block at once."""

    def set_block(self, pixels: NDArray) -> None: ...


def write_pixels(canvas: Canvas, pixels: NDArray) -> None:
    """
    Write a (height, width, 4) straight 8-bit block covering ``canvas.bounds``.

    Canvases implementing ``set_block`` take the block in one call; any
    other canvas gets one ``set`` per pixel, in row order.
    """
    if isinstance(canvas, BlockCanvas):
        canvas.set_block(pixels)
        return

    bb = canvas.bounds
    # identical rows/columns share one color object
    cache: dict[bytes, ColorNRGBA] = {}
    for y in range(bb.height):
        row = pixels[y]
        for x in range(bb.width):
            key = row[x].tobytes()
            color = cache.get(key)
            if color is None:
                color = cache[key] = ColorNRGBA(tuple(int(v) for v in row[x]))
            canvas.set(x + bb.min_x, y + bb.min_y, color)


def fill(canvas: Canvas, rgba8: NDArray) -> None:
    """Fill the canvas with one straight 8-bit color."""
    bb = canvas.bounds
    write_pixels(canvas, np.broadcast_to(np.asarray(rgba8, dtype=np.uint8), (bb.height, bb.width, 4)))
