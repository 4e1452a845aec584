import numpy as np
from chromapick.conversions import (
    rgb_to_hsv, rgb_to_hsl, rgb_to_hwb, rgb_to_cmyk, rgb_to_hue,
    hsv_to_hsl, hsl_to_hsv,
    np_rgb_to_hsv, np_rgb_to_hsl, np_rgb_to_hwb, np_rgb_to_cmyk,
)
from samples import samples_rgb_hsv, samples_rgb_hsl, samples_rgb_hwb, samples_rgb_cmyk


def test_rgb_to_hsv():
    for rgb, hsv in samples_rgb_hsv.items():
        assert rgb_to_hsv(*rgb) == hsv, f"{rgb} -> {rgb_to_hsv(*rgb)}, expected {hsv}"


def test_rgb_to_hsl():
    for rgb, hsl in samples_rgb_hsl.items():
        assert rgb_to_hsl(*rgb) == hsl, f"{rgb} -> {rgb_to_hsl(*rgb)}, expected {hsl}"


def test_rgb_to_hwb():
    for rgb, hwb in samples_rgb_hwb.items():
        assert rgb_to_hwb(*rgb) == hwb, f"{rgb} -> {rgb_to_hwb(*rgb)}, expected {hwb}"


def test_rgb_to_cmyk():
    for rgb, cmyk in samples_rgb_cmyk.items():
        assert rgb_to_cmyk(*rgb) == cmyk, f"{rgb} -> {rgb_to_cmyk(*rgb)}, expected {cmyk}"


def test_rgb_to_hue():
    assert rgb_to_hue(83, 140, 181) == 205
    assert rgb_to_hue(255, 0, 0) == 0
    # just below a full turn rounds up to 360, not 0
    assert rgb_to_hue(255, 0, 1) == 360
    assert rgb_to_hue(128, 128, 128) == 0


def test_hsv_to_hsl_keeps_hue():
    assert hsv_to_hsl(205, 54, 71) == (205, 40, 52)
    assert hsv_to_hsl(120, 100, 100) == (120, 100, 50)
    # achromatic extremes keep their hue too
    assert hsv_to_hsl(300, 0, 100) == (300, 0, 100)
    assert hsv_to_hsl(300, 50, 0) == (300, 0, 0)


def test_hsl_to_hsv_keeps_hue():
    assert hsl_to_hsv(205, 40, 52) == (205, 54, 71)
    assert hsl_to_hsv(120, 100, 50) == (120, 100, 100)


def test_hsl_to_hsv_black_uses_fallback_saturation():
    assert hsl_to_hsv(0, 0, 0) == (0, 0, 0)
    assert hsl_to_hsv(210, 40, 0, fallback_s=37) == (210, 37, 0)


def test_vectorized_from_rgb():
    colors = np.array(list(samples_rgb_hsv.keys()))
    assert np.array_equal(np_rgb_to_hsv(colors), np.array(list(samples_rgb_hsv.values())))
    assert np.array_equal(np_rgb_to_hsl(colors), np.array(list(samples_rgb_hsl.values())))
    assert np.array_equal(np_rgb_to_cmyk(colors), np.array(list(samples_rgb_cmyk.values())))

    hwb_colors = np.array(list(samples_rgb_hwb.keys()))
    assert np.array_equal(np_rgb_to_hwb(hwb_colors), np.array(list(samples_rgb_hwb.values())))


def test_vectorized_keeps_leading_shape():
    image = np.zeros((4, 5, 3), dtype=np.uint8)
    image[..., 0] = 255
    assert np_rgb_to_hsv(image).shape == (4, 5, 3)
    assert np_rgb_to_cmyk(image).shape == (4, 5, 4)
    assert np.all(np_rgb_to_hsl(image) == (0, 100, 50))
