from __future__ import annotations

import numpy as np
from numpy import ndarray as NDArray
from typing import Optional, Tuple

from ..colors.color_base import to_nrgba8
from ..types.color_types import Color
from .canvas import Bounds


class ArrayCanvas:
    """
    Canvas backed by a numpy ``(height, width, 4)`` uint8 array of straight
    (non-premultiplied) RGBA.

    Args:
        width, height: Size in pixels
        origin: (min_x, min_y) of the canvas coordinate system
        pixels: Optional existing array to draw into; it is used in place
    """

    def __init__(
        self,
        width: int,
        height: int,
        origin: Tuple[int, int] = (0, 0),
        pixels: Optional[NDArray] = None,
    ) -> None:
        if pixels is None:
            pixels = np.zeros((height, width, 4), dtype=np.uint8)
        elif pixels.shape != (height, width, 4):
            raise ValueError(
                f"`pixels` shape {pixels.shape} does not match expected {(height, width, 4)}"
            )
        elif pixels.dtype != np.uint8:
            raise TypeError(f"ArrayCanvas expects a uint8 array, got {pixels.dtype}")
        self.pixels = pixels
        ox, oy = origin
        self._bounds = Bounds(ox, oy, ox + width, oy + height)

    @classmethod
    def from_array(cls, pixels: NDArray, origin: Tuple[int, int] = (0, 0)) -> "ArrayCanvas":
        height, width = pixels.shape[:2]
        return cls(width, height, origin, pixels)

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    def set(self, x: int, y: int, color: Color) -> None:
        bb = self._bounds
        if not (bb.min_x <= x < bb.max_x and bb.min_y <= y < bb.max_y):
            return
        self.pixels[y - bb.min_y, x - bb.min_x] = to_nrgba8(color)

    def set_block(self, pixels: NDArray) -> None:
        self.pixels[...] = pixels

    def at(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """Straight 8-bit channels at canvas coordinate (x, y)."""
        bb = self._bounds
        return tuple(int(v) for v in self.pixels[y - bb.min_y, x - bb.min_x])  # type: ignore[return-value]
