import pytest
from chromapick.colors import RGBA, HSV, HSL, HWB, CMYK, HEX, Channel, model_classes
from chromapick.exceptions import ArityMismatchError, OutOfRangeChannelError, UnknownModelError
from chromapick.types import ColorModel


def test_registry_covers_every_model():
    assert set(model_classes) == set(ColorModel)
    assert model_classes[ColorModel.HWB] is HWB


def test_model_lookup_by_name():
    assert ColorModel.from_name(" RGB ") is ColorModel.RGBA
    assert ColorModel.from_name("hwb") is ColorModel.HWB
    assert ColorModel.from_name(ColorModel.HEX) is ColorModel.HEX
    with pytest.raises(UnknownModelError):
        ColorModel.from_name("lab")


def test_channel_bounds():
    assert RGBA.channel_names() == ("r", "g", "b", "a")
    assert HSV.channel_names() == ("h", "s", "v")
    assert HWB.channel_names() == ("h", "w", "b")
    assert CMYK.num_channels() == 4

    assert HSL.channel("h").maximum == 360
    assert HSL.channel("l").maximum == 100
    assert RGBA.channel("a").maximum == 255


def test_defaults():
    assert RGBA().values == (0, 0, 0, 255)
    assert HSV().values == (0, 0, 0)
    assert HEX().values == (0, 0, 0, 255)
    assert HEX().to_string() == "#000000"


def test_channel_properties():
    hsv = HSV((205, 54, 71))
    assert (hsv.h, hsv.s, hsv.v) == (205, 54, 71)
    hwb = HWB((205, 33, 29))
    assert hwb.b == 29
    rgba = RGBA((83, 140, 181, 31))
    assert rgba.rgb == (83, 140, 181)
    assert rgba.a == 31


def test_channel_properties_are_read_only():
    hsv = HSV((205, 54, 71))
    with pytest.raises(AttributeError):
        hsv.h = 10


def test_validate_rejects_out_of_range():
    with pytest.raises(OutOfRangeChannelError) as info:
        HSV.validate((361, 0, 0))
    assert info.value.channel == "h"
    assert info.value.maximum == 360

    with pytest.raises(OutOfRangeChannelError):
        RGBA((0, 0, 256, 0))
    with pytest.raises(OutOfRangeChannelError):
        CMYK.validate((0, 0, -1, 0))


def test_validate_rejects_wrong_arity():
    with pytest.raises(ArityMismatchError) as info:
        HSL.validate((1, 2))
    assert (info.value.expected, info.value.actual) == (3, 2)


def test_validate_rejects_non_numbers():
    channel = Channel("x", 0, 10)
    assert not channel.contains(True)
    assert not channel.contains("5")
    assert channel.contains(10)
    with pytest.raises(OutOfRangeChannelError):
        channel.validate(None)


def test_unknown_channel():
    with pytest.raises(UnknownModelError):
        HSV.channel("l")
    with pytest.raises(KeyError):
        HSV((1, 2, 3)).get("x")


def test_in_range():
    assert HSV.in_range((360, 100, 100))
    assert not HSV.in_range((360, 100))
    assert not HSV.in_range((360, 101, 100))


def test_to_string_with_and_without_suffixes():
    assert HSV((205, 54, 71)).to_string() == "205°, 54%, 71%"
    assert HSV((205, 54, 71)).to_string(with_suffix=False) == "205 54 71"
    assert HSL((205, 40, 52)).to_string() == "205°, 40%, 52%"
    assert HWB((205, 33, 29)).to_string() == "205°, 33%, 29%"
    assert CMYK((54, 23, 0, 29)).to_string() == "54%, 23%, 0%, 29%"
    assert str(RGBA((83, 140, 181, 31))) == "83, 140, 181, 31"
    assert RGBA((83, 140, 181, 31)).to_string(include_alpha=False) == "83, 140, 181"


def test_set_suffix():
    hsv = HSV((205, 54, 71))
    hsv.set_suffix(" deg / ")
    assert hsv.to_string() == "205 deg / 54%, 71%"
    hsv.set_suffix("|", "|", "")
    assert hsv.to_string() == "205|54|71"
    with pytest.raises(ArityMismatchError):
        hsv.set_suffix("a", "b", "c", "d")


def test_hex_record():
    hex_record = HEX((83, 140, 181, 31))
    assert hex_record.to_string() == "#538CB5"
    assert hex_record.to_string(with_alpha=True) == "#538CB51F"
    assert hex_record.hex_string == "#538CB5"
    assert hex_record.to_color_int() == 525569205
    assert repr(hex_record) == "HEX('#538CB51F')"
    assert HEX((83, 140, 181, 31), upper=False).to_string() == "#538cb5"
    assert HEX.is_hex("#538cb5")
    assert not HEX.is_hex("#538cb5", with_alpha=True)


def test_equality_and_repr():
    assert HSV((205, 54, 71)) == HSV((205, 54, 71))
    assert HSV((205, 54, 71)) == (205, 54, 71)
    assert HSV((1, 2, 3)) != HSL((1, 2, 3))
    assert repr(HSV((205, 54, 71))) == "HSV(h=205, s=54, v=71)"
    assert list(CMYK((54, 23, 0, 29))) == [54, 23, 0, 29]
    assert len(RGBA()) == 4
