from __future__ import annotations

import warnings
import numpy as np
from numpy import ndarray as NDArray
from typing import Iterable, Iterator, NamedTuple, Sequence, Tuple, Union

from ..colors.blend import blend_channels
from ..colors.color_base import to_nrgba8
from ..colors.rgba import ColorNRGBA
from ..types.color_types import Color, rgba16_array


class Stop(NamedTuple):
    """A gradient control point: ``color`` sits at ``position``.

    ``position`` is normally in [0, 1] but values outside the range are
    accepted and shift where the ramp starts or ends.
    """
    position: float
    color: Color


StopsInput = Union["StopTable", Sequence[Stop], Sequence[Tuple[float, Color]]]


class StopTable:
    """
    Ordered color stops with position-to-color resolution.

    Positions are expected in non-decreasing order; the table does not
    sort them. Lookup semantics:

    - a single stop, or a position <= 0 or before the first stop, gives the first color
    - a position >= the last stop's position gives the last color
    - anything else blends between the first stop whose position exceeds
      the query and the stop before it
    """

    __slots__ = ("_stops", "_positions", "_channels", "_exact")

    def __init__(self, stops: Iterable[Union[Stop, Tuple[float, Color]]] = ()) -> None:
        self._stops: Tuple[Stop, ...] = tuple(Stop(float(p), c) for p, c in stops)
        self._positions = np.array([s.position for s in self._stops], dtype=np.float64)
        self._channels = rgba16_array([s.color for s in self._stops])
        self._exact = np.array([to_nrgba8(s.color) for s in self._stops], dtype=np.uint8).reshape(-1, 4)

        if np.any(np.diff(self._positions) < 0):
            warnings.warn(
                f"Gradient stop positions are not in non-decreasing order: "
                f"{self._positions.tolist()}; color lookup is undefined",
                UserWarning,
                stacklevel=2,
            )

    @classmethod
    def from_pairs(cls, *pairs: Tuple[float, Color]) -> "StopTable":
        return cls(pairs)

    @classmethod
    def coerce(cls, stops: StopsInput) -> "StopTable":
        if isinstance(stops, StopTable):
            return stops
        return cls(stops)

    def __len__(self) -> int:
        return len(self._stops)

    def __iter__(self) -> Iterator[Stop]:
        return iter(self._stops)

    def __getitem__(self, index: int) -> Stop:
        return self._stops[index]

    def __repr__(self) -> str:
        return f"StopTable({list(self._stops)!r})"

    @property
    def first(self) -> Stop:
        return self._stops[0]

    @property
    def last(self) -> Stop:
        return self._stops[-1]

    @property
    def positions(self) -> NDArray:
        return self._positions

    def first_color8(self) -> NDArray:
        """First stop's color as straight 8-bit channels."""
        return self._exact[0]

    def resolve_many(self, positions: NDArray) -> NDArray:
        """
        Resolve an array of gradient positions to 8-bit colors.

        Args:
            positions: float array of any shape

        Returns:
            uint8 array of shape ``positions.shape + (4,)``

        Notes:
            NaN positions fall through every bracket and resolve to the
            last color.
        """
        if not self._stops:
            raise ValueError("Cannot resolve a position against an empty stop table")

        t = np.asarray(positions, dtype=np.float64)
        n = len(self._stops)
        if n == 1:
            return np.broadcast_to(self.first_color8(), t.shape + (4,)).copy()

        # index of the first stop (from the second) whose position exceeds t
        upper = np.searchsorted(self._positions[1:], t, side="right") + 1
        upper = np.minimum(upper, n - 1)
        lower = upper - 1

        lo_pos = self._positions[lower]
        hi_pos = self._positions[upper]
        with np.errstate(divide="ignore", invalid="ignore"):
            local = (t - lo_pos) / (hi_pos - lo_pos)

        with np.errstate(invalid="ignore"):
            out = blend_channels(self._channels[lower], self._channels[upper], local)

        # clamp-left / clamp-right copy the end colors without blending
        head = (t <= 0) | (t < self._positions[0])
        tail = ~head & ((t >= self._positions[-1]) | np.isnan(t))
        out[head] = self._exact[0]
        out[tail] = self._exact[-1]
        return out

    def resolve(self, position: float) -> ColorNRGBA:
        channels = self.resolve_many(np.array([position], dtype=np.float64))[0]
        return ColorNRGBA(tuple(int(v) for v in channels))


def resolve(position: float, stops: StopsInput) -> ColorNRGBA:
    """Resolve ``position`` to a color against ``stops``."""
    return StopTable.coerce(stops).resolve(position)
