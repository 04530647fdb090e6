from __future__ import annotations

import numpy as np
from numpy import ndarray as NDArray
from PIL import Image
from typing import Optional, Tuple

from ..colors.color_base import to_nrgba8
from ..types.color_types import Color
from .canvas import Bounds


class PILCanvas:
    """
    Canvas over an RGBA ``PIL.Image``.

    Args:
        image: Target image; converted copies are not made, so it must be
               in "RGBA" mode
        box: Optional (left, upper, right, lower) sub-rectangle to draw in;
             defaults to the whole image
    """

    def __init__(self, image: Image.Image, box: Optional[Tuple[int, int, int, int]] = None) -> None:
        if image.mode != "RGBA":
            raise ValueError(f"PILCanvas expects an RGBA image, got mode {image.mode!r}")
        self.image = image
        if box is None:
            box = (0, 0, image.width, image.height)
        self._bounds = Bounds(*box)

    @classmethod
    def new(cls, width: int, height: int) -> "PILCanvas":
        return cls(Image.new("RGBA", (width, height), (0, 0, 0, 0)))

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    def set(self, x: int, y: int, color: Color) -> None:
        self.image.putpixel((x, y), to_nrgba8(color))

    def set_block(self, pixels: NDArray) -> None:
        block = Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))
        self.image.paste(block, (self._bounds.min_x, self._bounds.min_y))
