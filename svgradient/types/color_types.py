from __future__ import annotations
from typing import Protocol, Sequence, Tuple, Union, runtime_checkable
import numpy as np
from numpy import ndarray

IntVector = Tuple[int, ...]
RGBA16 = Tuple[int, int, int, int]
RGBA8 = Tuple[int, int, int, int]
ColorElement = Union[IntVector, Sequence[int]]


@runtime_checkable
class Color(Protocol):
    """Anything exposing four alpha-premultiplied 16-bit channels."""

    def rgba16(self) -> RGBA16: ...


def rgba16_array(colors: Sequence[Color]) -> ndarray:
    """
    Stack the 16-bit channels of several colors into an (N, 4) array.

    Args:
        colors: Colors to stack

    Returns:
        float64 array, one row per color
    """
    if not colors:
        return np.zeros((0, 4), dtype=np.float64)
    return np.array([c.rgba16() for c in colors], dtype=np.float64)
