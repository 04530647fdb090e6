import numpy as np
import pytest

from svgradient import ColorNRGBA, Stop, StopTable, resolve

BLACK = ColorNRGBA((0, 0, 0, 255))
GRAY = ColorNRGBA((100, 100, 100, 255))
WHITE = ColorNRGBA((255, 255, 255, 255))


@pytest.fixture
def three_stops():
    return StopTable([Stop(0.0, BLACK), Stop(0.5, GRAY), Stop(1.0, WHITE)])


def test_single_stop_everywhere():
    table = StopTable([(0.3, GRAY)])
    for position in (-1.0, 0.0, 0.3, 0.5, 2.0):
        assert table.resolve(position) == GRAY


def test_clamp_left(three_stops):
    assert three_stops.resolve(0.0) == BLACK
    assert three_stops.resolve(-3.5) == BLACK


def test_clamp_right(three_stops):
    assert three_stops.resolve(1.0) == WHITE
    assert three_stops.resolve(7.0) == WHITE


def test_clamp_returns_translucent_stop_unchanged(reference_stops, red, green16):
    table = StopTable([(0.0, green16), (1.0, red)])
    assert table.resolve(-1.0) == green16
    assert reference_stops.resolve(1.0).value == (0, 0, 255, 255)


def test_interior_stop_hit_exactly(three_stops):
    assert three_stops.resolve(0.5) == GRAY


def test_interpolates_inside_bracket(three_stops):
    # 100 * 257 * 0.5 = 12850 -> 50
    assert three_stops.resolve(0.25) == ColorNRGBA((50, 50, 50, 255))
    upper = three_stops.resolve(0.75).value
    assert 100 < upper[0] < 255


def test_resolve_is_idempotent(reference_stops):
    for position in np.linspace(-0.5, 1.5, 41):
        assert reference_stops.resolve(position) == reference_stops.resolve(position)


def test_resolve_many_matches_scalar(reference_stops):
    positions = np.linspace(-0.25, 1.25, 61)
    many = reference_stops.resolve_many(positions)
    assert many.shape == (61, 4)
    for position, row in zip(positions, many):
        assert tuple(row.tolist()) == reference_stops.resolve(position).value


def test_resolve_many_keeps_shape(three_stops):
    out = three_stops.resolve_many(np.zeros((3, 2)))
    assert out.shape == (3, 2, 4)
    assert np.all(out == np.array(BLACK.value, dtype=np.uint8))


def test_bracket_index_is_monotonic():
    # gray ramp: red channel rises with position
    table = StopTable.from_pairs((0.0, BLACK), (0.3, GRAY), (1.0, WHITE))
    reds = table.resolve_many(np.linspace(-0.1, 1.1, 200))[:, 0].astype(int)
    assert np.all(np.diff(reds) >= 0)


def test_nan_resolves_to_last(three_stops):
    assert three_stops.resolve(float("nan")) == WHITE


def test_module_level_resolve_accepts_pairs():
    assert resolve(0.0, [(0.0, BLACK), (1.0, WHITE)]) == BLACK
    assert resolve(1.0, [(0.0, BLACK), (1.0, WHITE)]) == WHITE


def test_empty_table():
    table = StopTable()
    assert len(table) == 0
    with pytest.raises(ValueError):
        table.resolve(0.5)


def test_unsorted_stops_warn():
    with pytest.warns(UserWarning, match="non-decreasing"):
        StopTable([(1.0, WHITE), (0.0, BLACK)])


def test_table_accessors(three_stops):
    assert len(three_stops) == 3
    assert three_stops.first == Stop(0.0, BLACK)
    assert three_stops.last.color == WHITE
    assert [s.position for s in three_stops] == [0.0, 0.5, 1.0]
    assert three_stops[1].color == GRAY
    assert StopTable.coerce(three_stops) is three_stops


class SixteenBitOnly:
    """A color from elsewhere: only the premultiplied 16-bit view."""

    def rgba16(self):
        return (32768, 0, 0, 32768)


def test_stops_accept_any_color_with_rgba16():
    table = StopTable([(0.0, SixteenBitOnly()), (1.0, WHITE)])
    # clamped ends are un-premultiplied, blends work on the 16-bit view
    assert table.resolve(-1.0).value == (255, 0, 0, 128)
    assert table.resolve(0.5).value == (191, 127, 127, 191)


def test_positions_before_a_late_first_stop_clamp():
    table = StopTable([(0.3, BLACK), (1.0, WHITE)])
    for position in (0.0, 0.1, 0.29):
        assert table.resolve(position) == BLACK
    assert np.all(table.resolve_many(np.linspace(0.0, 0.29, 30)) == np.array(BLACK.value, dtype=np.uint8))
    assert table.resolve(0.3) == BLACK
    assert 0 < table.resolve(0.65).value[0] < 255


def test_late_first_stop_keeps_ramp_monotonic():
    table = StopTable([(0.3, BLACK), (0.6, GRAY), (1.0, WHITE)])
    reds = table.resolve_many(np.linspace(-0.5, 1.5, 201))[:, 0].astype(int)
    assert np.all(np.diff(reds) >= 0)
