"""
svgradient color classes
========================

Immutable four-channel colors. Every class exposes ``rgba16()``, its
alpha-premultiplied 16-bit view, which is what blending works on, and
``nrgba8()`` for straight 8-bit output.

>>> from svgradient.colors import ColorNRGBA, blend
>>> red = ColorNRGBA((255, 0, 0, 255))
>>> blue = ColorNRGBA.from_hex("#0000ff")
>>> blend(red, blue, 0.5)
ColorNRGBA(127, 0, 127, 255)

Color Classes
-------------
    - ColorNRGBA: straight alpha, 8-bit channels
    - ColorRGBA: premultiplied alpha, 8-bit channels
    - ColorNRGBA64: straight alpha, 16-bit channels
    - ColorRGBA64: premultiplied alpha, 16-bit channels
"""

from .color_base import ColorBase
from .rgba import (
    ColorNRGBA,
    ColorRGBA,
    ColorNRGBA64,
    ColorRGBA64,
    NRGBA,
    RGBA,
    get_color_class,
)
from .blend import blend, blend_channels

__all__ = [
    "ColorBase",
    "ColorNRGBA",
    "ColorRGBA",
    "ColorNRGBA64",
    "ColorRGBA64",
    "NRGBA",
    "RGBA",
    "get_color_class",
    "blend",
    "blend_channels",
]
