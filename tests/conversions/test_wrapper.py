import numpy as np
import pytest
from chromapick.conversions import convert, np_convert
from chromapick.exceptions import MalformedHexError, UnknownModelError


def test_convert_from_rgb():
    assert convert((83, 140, 181), "rgb", "hsv") == (205, 54, 71)
    assert convert((83, 140, 181), "rgba", "hsl") == (205, 40, 52)
    assert convert((83, 140, 181), "rgb", "hwb") == (205, 33, 29)
    assert convert((83, 140, 181), "rgb", "cmyk") == (54, 23, 0, 29)
    assert convert((83, 140, 181), "rgb", "hex") == "#538CB5"


def test_convert_carries_alpha_between_rgba_and_hex():
    assert convert((83, 140, 181, 31), "rgba", "hex") == "#538CB51F"
    assert convert("#538CB51F", "hex", "rgba") == (83, 140, 181, 31)
    assert convert("#538CB5", "hex", "rgba") == (83, 140, 181)
    # other models have no alpha channel
    assert convert((83, 140, 181, 31), "rgba", "hsv") == (205, 54, 71)


def test_convert_between_non_rgb_models():
    assert convert((205, 54, 71), "hsv", "hex") == "#538CB5"
    assert convert((205, 54, 71), "hsv", "hsl") == (205, 40, 52)
    assert convert((205, 40, 52), "hsl", "hsv") == (205, 54, 71)
    assert convert((54, 23, 0, 29), "cmyk", "hwb") == (206, 33, 29)
    assert convert("#538CB5", "hex", "cmyk") == (54, 23, 0, 29)


def test_convert_same_model_is_identity():
    assert convert([1, 2, 3], "hsv", "hsv") == (1, 2, 3)
    assert convert("#538CB5", "hex", "hex") == "#538CB5"


def test_convert_errors():
    with pytest.raises(UnknownModelError):
        convert((1, 2, 3), "lab", "rgb")
    with pytest.raises(MalformedHexError):
        convert("#12", "hex", "rgb")


def test_np_convert():
    colors = np.array([[83, 140, 181], [255, 0, 0]])
    assert np.array_equal(np_convert(colors, "rgb", "hsv"), [[205, 54, 71], [0, 100, 100]])
    assert np.array_equal(np_convert(np.array([[205, 54, 71]]), "hsv", "rgb"), [[83, 140, 181]])
    assert np.array_equal(np_convert(np.array([[205, 54, 71]]), "hsv", "cmyk"), [[54, 23, 0, 29]])


def test_np_convert_drops_alpha_from_rgba():
    colors = np.array([[83, 140, 181, 31]])
    assert np.array_equal(np_convert(colors, "rgba", "rgb"), colors)
    assert np.array_equal(np_convert(colors, "rgba", "hsl"), [[205, 40, 52]])


def test_np_convert_rejects_hex():
    with pytest.raises(ValueError):
        np_convert(np.array([[0, 0, 0]]), "rgb", "hex")
