import numpy as np

from svgradient.colors import ColorNRGBA, ColorRGBA64, blend, blend_channels


def test_blend_endpoints(red, blue):
    assert blend(red, blue, 0.0) == red
    assert blend(red, blue, 1.0) == blue


def test_blend_midpoint(red, blue):
    assert blend(red, blue, 0.5) == ColorNRGBA((127, 0, 127, 255))


def test_blend_interpolates_premultiplied_channels(red, green16):
    # green at alpha 16 is 4112/4112 premultiplied, which shifts down to 16
    assert blend(red, green16, 1.0).value == (0, 16, 0, 16)
    assert blend(green16, red, 0.0).value == (0, 16, 0, 16)


def test_blend_truncates_instead_of_rounding():
    # 1023 * 0.5 = 511.5 -> 511 -> 1, rounding would give 512 -> 2
    out = blend_channels(np.array([1023, 0, 0, 0]), np.zeros(4), 0.5)
    assert out.tolist() == [1, 0, 0, 0]

    low = ColorRGBA64((1023, 0, 0, 65535))
    high = ColorRGBA64((0, 0, 0, 65535))
    assert blend(low, high, 0.5).value == (1, 0, 0, 255)


def test_blend_extrapolation_keeps_low_byte():
    zero = np.zeros(4)
    full = np.full(4, 65535.0)
    # 65535 * 1.5 = 98302.5 -> 98302 >> 8 = 383 -> low byte 127
    assert blend_channels(zero, full, 1.5).tolist() == [127] * 4
    # -32767.5 -> -32767 >> 8 = -128 -> low byte 128
    assert blend_channels(zero, full, -0.5).tolist() == [128] * 4


def test_blend_channels_array_form():
    a = np.tile([65535.0, 0.0, 0.0, 65535.0], (5, 1))
    b = np.tile([0.0, 0.0, 65535.0, 65535.0], (5, 1))
    x = np.linspace(0.0, 1.0, 5)
    out = blend_channels(a, b, x)
    assert out.shape == (5, 4)
    assert out.dtype == np.uint8
    assert out[0].tolist() == [255, 0, 0, 255]
    assert out[-1].tolist() == [0, 0, 255, 255]
    assert np.all(np.diff(out[:, 0].astype(int)) <= 0)
    assert np.all(np.diff(out[:, 2].astype(int)) >= 0)
