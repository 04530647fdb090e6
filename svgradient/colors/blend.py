"""
Channel-wise color blending.

Both colors are read through their alpha-premultiplied 16-bit view and
mixed per channel as ``a * (1 - x) + b * x``. The mix is truncated toward
zero and shifted down to 8 bits; the low byte becomes the output channel.
Truncation (not rounding) keeps output identical to the classic integer
pipeline this mirrors.
"""

from __future__ import annotations

import numpy as np
from numpy import ndarray as NDArray
from typing import Union

from ..defaults import OUTPUT_SHIFT, CHANNEL_MAX_8
from ..types.color_types import Color
from .rgba import ColorNRGBA


def blend_channels(
    a16: NDArray,
    b16: NDArray,
    x: Union[float, NDArray],
) -> NDArray:
    """
    Blend 16-bit channel rows and reduce them to 8 bits.

    Args:
        a16: (..., 4) channels of the first color(s)
        b16: (..., 4) channels of the second color(s), broadcastable to a16
        x: Mix ratio(s), broadcast over the last axis; values outside [0, 1]
           extrapolate

    Returns:
        uint8 array of shape (..., 4)
    """
    a16 = np.asarray(a16, dtype=np.float64)
    b16 = np.asarray(b16, dtype=np.float64)
    x = np.asarray(x, dtype=np.float64)
    if x.ndim:
        x = x[..., None]

    mixed = a16 * (1.0 - x) + b16 * x
    scaled = np.trunc(mixed).astype(np.int64)
    return ((scaled >> OUTPUT_SHIFT) & CHANNEL_MAX_8).astype(np.uint8)


def blend(c0: Color, c1: Color, x: float) -> ColorNRGBA:
    """
    Blend two colors at ratio ``x``.

    ``x == 0`` yields ``c0``'s 16-bit channels shifted down to 8 bits, and
    ``x == 1`` does the same for ``c1``. For opaque colors that is the
    color itself; translucent straight colors come back premultiplied.
    """
    channels = blend_channels(np.array(c0.rgba16()), np.array(c1.rgba16()), float(x))
    return ColorNRGBA(tuple(int(v) for v in channels))
