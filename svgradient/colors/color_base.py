from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Tuple, cast
from collections.abc import Sized
from numpy import ndarray
import numpy as np
from ..types.color_types import ColorElement, IntVector, RGBA16, RGBA8
from ..defaults import CHANNEL_MAX_16, NUM_CHANNELS, OUTPUT_SHIFT


class ColorBase(ABC):
    __slots__ = ('_value',)  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = NUM_CHANNELS
    mode:       ClassVar[str]
    maxima:     ClassVar[IntVector]
    _is_frozen: bool = False   # class-level default (instance gets its own slot)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorElement | ndarray | ColorBase) -> None:
        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode == self.mode:
                value = value.value
            else:
                value = self._from_rgba16(value.rgba16())

        # ---- Handle array input ----
        if isinstance(value, ndarray):
            if value.ndim != 1:
                raise ValueError(f"{self.mode} expects a 1-dimensional array, got shape {value.shape}")
            value = tuple(value.tolist())

        if not isinstance(value, Sized) or isinstance(value, str):
            raise TypeError(f"{self.mode} expects a {self.num_channels}-channel tuple, got {type(value).__name__}")
        if len(value) != self.num_channels:
            raise ValueError(f"{self.mode} expects {self.num_channels} channels, got {len(value)}")

        # type enforcement and clamping
        value = tuple(
            max(0, min(int(v), m)) for v, m in zip(cast(Tuple[Any, ...], value), self.maxima)
        )

        # safe assignment; __setattr__ still allows it during init
        self._value = value

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> IntVector:
        return self._value

    @property
    def alpha(self) -> int:
        return self._value[-1]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}{self._value!r}"

    # ------------------ CHANNEL VIEWS ------------------
    @abstractmethod
    def rgba16(self) -> RGBA16:
        """Alpha-premultiplied channels at 16-bit depth."""
        raise NotImplementedError

    def nrgba8(self) -> RGBA8:
        """Straight (non-premultiplied) channels at 8-bit depth."""
        r, g, b, a = unpremultiply(self.rgba16())
        return (r >> OUTPUT_SHIFT, g >> OUTPUT_SHIFT, b >> OUTPUT_SHIFT, a >> OUTPUT_SHIFT)

    @classmethod
    @abstractmethod
    def _from_rgba16(cls, rgba: RGBA16) -> IntVector:
        raise NotImplementedError

    def __array__(self, dtype=None, copy=None) -> ndarray:
        """Enable numpy array interface (straight 8-bit channels)."""
        return np.asarray(self.nrgba8(), dtype=dtype or np.uint8)


def unpremultiply(rgba: RGBA16) -> RGBA16:
    """Undo alpha premultiplication of 16-bit channels."""
    r, g, b, a = rgba
    if a == CHANNEL_MAX_16:
        return (r, g, b, a)
    if a == 0:
        return (0, 0, 0, 0)
    return (r * CHANNEL_MAX_16 // a, g * CHANNEL_MAX_16 // a, b * CHANNEL_MAX_16 // a, a)


def build_registry(*classes: type[ColorBase]) -> dict[str, type[ColorBase]]:
    return {cls.mode: cls for cls in classes}


def to_nrgba8(color) -> RGBA8:
    """Straight 8-bit channels of any color exposing ``rgba16()``."""
    if isinstance(color, ColorBase):
        return color.nrgba8()
    r, g, b, a = unpremultiply(tuple(int(v) for v in color.rgba16()))
    return (r >> OUTPUT_SHIFT, g >> OUTPUT_SHIFT, b >> OUTPUT_SHIFT, a >> OUTPUT_SHIFT)
