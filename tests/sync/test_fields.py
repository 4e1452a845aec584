import pytest
from chromapick.exceptions import ArityMismatchError, MalformedHexError, OutOfRangeChannelError
from chromapick.sync import FIELD_SPECS, TextField, format_field, parse_field
from chromapick.types import ColorModel, FieldKind


def test_every_kind_has_a_spec():
    assert set(FIELD_SPECS) == set(FieldKind)
    assert FIELD_SPECS[FieldKind.HWB_B].channels == ("b",)
    assert FIELD_SPECS[FieldKind.HEXA].is_hex
    assert FIELD_SPECS[FieldKind.CMYK].model == ColorModel.CMYK


@pytest.mark.parametrize("kind, expected", [
    (FieldKind.RGB, "83, 140, 181"),
    (FieldKind.RGBA, "83, 140, 181, 31"),
    (FieldKind.RGBA_A, "31"),
    (FieldKind.HSV, "205°, 54%, 71%"),
    (FieldKind.HSV_H, "205"),
    (FieldKind.HSL, "205°, 40%, 52%"),
    (FieldKind.HWB, "205°, 33%, 29%"),
    (FieldKind.CMYK, "54%, 23%, 0%, 29%"),
    (FieldKind.CMYK_Y, "0"),
    (FieldKind.HEX, "#538CB5"),
    (FieldKind.HEXA, "#538CB51F"),
])
def test_format_field(converter, kind, expected):
    assert format_field(kind, converter) == expected


def test_format_field_while_editing_drops_suffixes(converter):
    assert format_field(FieldKind.HSV, converter, editing=True) == "205 54 71"
    assert format_field(FieldKind.RGB, converter, editing=True) == "83 140 181"
    assert format_field(FieldKind.HSV_S, converter, editing=True) == "54"
    assert format_field(FieldKind.HEX, converter, editing=True) == "#538CB5"


def test_parse_single_channel():
    assert parse_field(FieldKind.HSV_H, "205") == {"h": 205}
    assert parse_field(FieldKind.HSV_H, " 2a05° ") == {"h": 205}
    assert parse_field(FieldKind.RGBA_A, "0") == {"a": 0}


def test_parse_multi_channel():
    assert parse_field(FieldKind.HSV, "205°, 54%, 71%") == {"h": 205, "s": 54, "v": 71}
    assert parse_field(FieldKind.HSV, "  205   54 71 ") == {"h": 205, "s": 54, "v": 71}
    assert parse_field(FieldKind.CMYK, "54 23 0 29") == {"c": 54, "m": 23, "y": 0, "k": 29}
    assert parse_field(FieldKind.RGB, "83, 140, 181") == {"r": 83, "g": 140, "b": 181}


@pytest.mark.parametrize("kind, text", [
    (FieldKind.HSV, "205 54"),
    (FieldKind.HSV, "205 54 71 10"),
    (FieldKind.HSV, ""),
    (FieldKind.HSV_H, ""),
    (FieldKind.HSV_H, "abc"),
    (FieldKind.RGBA, "1 2 3"),
])
def test_parse_rejects_wrong_arity(kind, text):
    with pytest.raises(ArityMismatchError):
        parse_field(kind, text)


@pytest.mark.parametrize("kind, text", [
    (FieldKind.HSV, "361 54 71"),
    (FieldKind.HSV_S, "101"),
    (FieldKind.RGBA_A, "256"),
    (FieldKind.CMYK, "0 0 0 101"),
])
def test_parse_rejects_out_of_range(kind, text):
    with pytest.raises(OutOfRangeChannelError):
        parse_field(kind, text)


def test_parse_hex():
    assert parse_field(FieldKind.HEX, "#538cb5") == "#538CB5"
    assert parse_field(FieldKind.HEXA, "538CB51F") == "#538CB51F"
    with pytest.raises(MalformedHexError):
        parse_field(FieldKind.HEX, "#538CB51F")
    with pytest.raises(MalformedHexError):
        parse_field(FieldKind.HEXA, "#538CB5")


def test_text_field_events():
    events = []
    field = TextField("x", tag="hsv_h")
    field.text_changed.connect(lambda f, text: events.append(("text", text)))
    field.focused.connect(lambda f: events.append("focused"))
    field.unfocused.connect(lambda f: events.append("unfocused"))
    field.committed.connect(lambda f: events.append("committed"))

    field.focus()
    field.focus()
    field.text = "12"
    field.unfocus()
    field.unfocus()
    field.focus()
    field.commit()

    assert events == ["focused", ("text", "12"), "unfocused", "focused", "committed"]
    assert not field.has_focus
    assert field.text == "12"
    assert repr(field) == "TextField('12', tag='hsv_h')"


def test_field_kind_from_tag():
    assert FieldKind.from_tag("HSV_H") is FieldKind.HSV_H
    assert FieldKind.from_tag(" hexa ") is FieldKind.HEXA
    with pytest.raises(ValueError):
        FieldKind.from_tag("lab_l")
    with pytest.warns(UserWarning):
        assert FieldKind.from_tag("lab_l", strict=False) is None
