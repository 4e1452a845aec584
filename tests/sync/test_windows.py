import pytest
from chromapick import ColorHolder
from chromapick.sync import (
    ColorWindow, HueSlider, AlphaSlider, ValueSlider, SaturationValuePlane, SaturationLightnessPlane, HueSaturationDisc,
    VERTICAL,
)
from chromapick.types import ColorModel, WindowKind


def attach(window, converter):
    holder = ColorHolder()
    holder.on_convert(converter)
    window.converter = converter
    window.holder = holder
    window.update()
    window.redraw()
    return window


def test_window_kinds_and_channels():
    assert HueSlider().kind is WindowKind.HUE
    assert HueSlider().channels == ("h",)
    assert SaturationLightnessPlane().model == ColorModel.HSL
    assert HueSaturationDisc().channels == ("h", "s")


def test_window_size_must_be_positive():
    with pytest.raises(ValueError):
        HueSlider(0, 10)
    with pytest.raises(ValueError):
        SaturationValuePlane(10, 10).resize(10, -1)
    with pytest.raises(ValueError):
        HueSlider(orientation="diagonal")


def test_color_window_is_abstract():
    with pytest.raises(TypeError):
        ColorWindow()

    class Unfinished(ColorWindow):
        def _create_ranges(self):
            pass

    with pytest.raises(TypeError):
        Unfinished()


def test_slider_selector_stays_on_the_surface():
    slider = ValueSlider(10, 200, orientation=VERTICAL)
    slider.move_selector(-5, 250)
    assert slider.selector == (5, 200)
    assert slider.channel_values() == {"v": 0}
    slider.move_selector(50, -1)
    assert slider.selector == (5, 0)
    assert slider.channel_values() == {"v": 100}


def test_hue_slider_runs_from_360_down_to_0():
    slider = HueSlider(360, 20)
    slider.move_selector(155, 3)
    assert slider.channel_values() == {"h": 205}
    assert slider.selector == (155, 10)

    slider.move_selector(-20, 0)
    assert slider.channel_values() == {"h": 360}
    slider.move_selector(400, 0)
    assert slider.channel_values() == {"h": 0}


def test_vertical_value_slider():
    slider = ValueSlider(10, 200, orientation=VERTICAL)
    slider.move_selector(0, 50)
    assert slider.channel_values() == {"v": 75}
    assert slider.selector == (5, 50)


def test_alpha_slider_rounds_half_up():
    slider = AlphaSlider(100, 10)
    slider.move_selector(50, 0)
    assert slider.range.current == 127.5
    assert slider.channel_values() == {"a": 128}


def test_sv_plane():
    plane = SaturationValuePlane(100, 100)
    plane.move_selector(54, 29)
    assert plane.channel_values() == {"s": 54, "v": 71}
    plane.move_selector(150, -10)
    assert plane.channel_values() == {"s": 100, "v": 100}
    assert plane.selector == (100, 0)


def test_sl_plane_axes_are_inverted():
    plane = SaturationLightnessPlane(200, 100)
    plane.move_selector(0, 0)
    assert plane.channel_values() == {"s": 100, "l": 100}
    plane.move_selector(200, 100)
    assert plane.channel_values() == {"s": 0, "l": 0}


def test_move_selector_emits(converter):
    moved = []
    plane = SaturationValuePlane()
    plane.selector_moved.connect(moved.append)
    plane.move_selector(10, 10)
    assert moved == [plane]


def test_update_places_selector_from_converter(converter):
    slider = attach(HueSlider(360, 20), converter)
    assert slider.range.current == 205
    assert slider.selector == pytest.approx((155, 10))
    assert slider.update_count == 1

    plane = attach(SaturationValuePlane(200, 100), converter)
    assert plane.selector == pytest.approx((108, 29))


def test_disc_angle_and_distance():
    disc = HueSaturationDisc(200, 200)
    # straight right of the center
    disc.move_selector(150, 100)
    assert disc.channel_values() == {"h": 0, "s": 50}
    # straight below the center in surface coordinates
    disc.move_selector(100, 200)
    assert disc.channel_values() == {"h": 90, "s": 100}
    # straight left of the center
    disc.move_selector(25, 100)
    assert disc.channel_values() == {"h": 180, "s": 75}


def test_disc_clamps_selector_to_the_edge():
    disc = HueSaturationDisc(200, 100)
    assert disc.radius == 50
    disc.move_selector(100, -400)
    assert disc.channel_values() == {"h": 270, "s": 100}
    assert disc.selector == pytest.approx((100, 0))


def test_disc_update_round_trips_selector(converter):
    disc = attach(HueSaturationDisc(200, 200), converter)
    x, y = disc.selector
    disc.move_selector(x, y)
    assert disc.channel_values() == {"h": 205, "s": 54}


def test_layers(converter):
    alpha = attach(AlphaSlider(), converter)
    assert alpha.layer == (0x00538CB5, 0xFF538CB5)

    value = attach(ValueSlider(), converter)
    assert value.layer == 0xFF0095FF

    disc = attach(HueSaturationDisc(), converter)
    # black overlay opacity for v = 71
    assert disc.layer == 74
    assert disc.redraw_count == 1


def test_detached_window_has_no_layer():
    slider = ValueSlider()
    slider.update()
    slider.redraw()
    assert slider.layer is None
    assert slider.update_count == 0
    assert slider.redraw_count == 1


def test_resize_keeps_value(converter):
    plane = attach(SaturationValuePlane(100, 100), converter)
    plane.resize(200, 50)
    assert plane.channel_values() == {"s": 54, "v": 71}
    assert plane.selector == pytest.approx((108, 14.5))
