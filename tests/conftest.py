import pytest

from svgradient import ArrayCanvas, Bounds, ColorNRGBA, StopTable


class SetOnlyCanvas:
    """Minimal canvas exposing only bounds and set(), like a foreign buffer."""

    def __init__(self, width, height, origin=(0, 0)):
        ox, oy = origin
        self.bounds = Bounds(ox, oy, ox + width, oy + height)
        self.writes = {}

    def set(self, x, y, color):
        self.writes[(x, y)] = color.nrgba8()


@pytest.fixture
def red():
    return ColorNRGBA((255, 0, 0, 255))


@pytest.fixture
def green16():
    return ColorNRGBA((0, 255, 0, 16))


@pytest.fixture
def blue():
    return ColorNRGBA((0, 0, 255, 255))


@pytest.fixture
def reference_stops(red, green16, blue):
    return StopTable.from_pairs((0.0, red), (0.5, green16), (1.0, blue))


@pytest.fixture
def gray_stops():
    return StopTable.from_pairs(
        (0.0, ColorNRGBA((0, 0, 0, 255))),
        (1.0, ColorNRGBA((255, 255, 255, 255))),
    )


@pytest.fixture
def make_canvas():
    def _make(width, height, origin=(0, 0)):
        return ArrayCanvas(width, height, origin)
    return _make


@pytest.fixture
def set_only_canvas():
    return SetOnlyCanvas
