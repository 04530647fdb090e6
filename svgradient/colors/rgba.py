from __future__ import annotations
from typing import ClassVar, Tuple
from ..defaults import CHANNEL_MAX_8, CHANNEL_MAX_16, OUTPUT_SHIFT, WIDEN_8_TO_16
from ..types.color_types import IntVector, RGBA16
from .color_base import ColorBase, build_registry, unpremultiply


class ColorNRGBA(ColorBase):
    """Straight-alpha color with 8-bit channels, the usual way to author stops."""
    mode: ClassVar[str] = "nrgba"
    maxima: ClassVar[Tuple[int, int, int, int]] = (255, 255, 255, 255)

    def rgba16(self) -> RGBA16:
        r, g, b, a = self._value
        return (
            r * WIDEN_8_TO_16 * a // CHANNEL_MAX_8,
            g * WIDEN_8_TO_16 * a // CHANNEL_MAX_8,
            b * WIDEN_8_TO_16 * a // CHANNEL_MAX_8,
            a * WIDEN_8_TO_16,
        )

    def nrgba8(self) -> IntVector:
        return self._value

    @classmethod
    def _from_rgba16(cls, rgba: RGBA16) -> IntVector:
        return tuple(v >> OUTPUT_SHIFT for v in unpremultiply(rgba))

    @classmethod
    def from_hex(cls, code: str) -> "ColorNRGBA":
        """
        Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa``.

        Args:
            code: Hex color string, leading ``#`` optional

        Returns:
            ColorNRGBA; alpha defaults to 255 when omitted
        """
        digits = code.strip().lstrip("#")
        if len(digits) in (3, 4):
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) == 6:
            digits += "ff"
        if len(digits) != 8:
            raise ValueError(f"Invalid hex color: {code!r}")
        try:
            channels = tuple(int(digits[i:i + 2], 16) for i in range(0, 8, 2))
        except ValueError:
            raise ValueError(f"Invalid hex color: {code!r}") from None
        return cls(channels)


class ColorRGBA(ColorBase):
    """Premultiplied-alpha color with 8-bit channels."""
    mode: ClassVar[str] = "rgba"
    maxima: ClassVar[Tuple[int, int, int, int]] = (255, 255, 255, 255)

    def rgba16(self) -> RGBA16:
        r, g, b, a = self._value
        return (r * WIDEN_8_TO_16, g * WIDEN_8_TO_16, b * WIDEN_8_TO_16, a * WIDEN_8_TO_16)

    @classmethod
    def _from_rgba16(cls, rgba: RGBA16) -> IntVector:
        return tuple(v >> OUTPUT_SHIFT for v in rgba)


class ColorNRGBA64(ColorBase):
    mode: ClassVar[str] = "nrgba64"
    maxima: ClassVar[Tuple[int, int, int, int]] = (65535, 65535, 65535, 65535)

    def rgba16(self) -> RGBA16:
        r, g, b, a = self._value
        return (r * a // CHANNEL_MAX_16, g * a // CHANNEL_MAX_16, b * a // CHANNEL_MAX_16, a)

    @classmethod
    def _from_rgba16(cls, rgba: RGBA16) -> IntVector:
        return unpremultiply(rgba)


class ColorRGBA64(ColorBase):
    mode: ClassVar[str] = "rgba64"
    maxima: ClassVar[Tuple[int, int, int, int]] = (65535, 65535, 65535, 65535)

    def rgba16(self) -> RGBA16:
        return self._value  # type: ignore[return-value]

    @classmethod
    def _from_rgba16(cls, rgba: RGBA16) -> IntVector:
        return tuple(rgba)


NRGBA = ColorNRGBA
RGBA = ColorRGBA

mode_to_class = build_registry(
    ColorNRGBA,
    ColorRGBA,
    ColorNRGBA64,
    ColorRGBA64,
)


def get_color_class(mode: str) -> type[ColorBase]:
    color_class = mode_to_class.get(mode.lower())
    if color_class is None:
        raise ValueError(f"Unsupported color mode: {mode}")
    return color_class
