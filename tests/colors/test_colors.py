import numpy as np
import pytest

from pixelcolor.colors import (
    Rgb555, Bgr555, Rgb565, Bgr565, Rgb888, Bgr888, Gray8, BinaryColor,
    get_color_class, convert_color,
)
from pixelcolor.types.color_types import ColorMode


def test_value_is_storage_order():
    assert Rgb565.new(1, 2, 3).value == (1, 2, 3)
    assert Bgr565.new(1, 2, 3).value == (3, 2, 1)
    assert Bgr888((3, 2, 1)).rgb == (1, 2, 3)


def test_channel_accessors(rgb_class):
    c = rgb_class.new(1, 2, 3)
    assert (c.r, c.g, c.b) == (1, 2, 3)


def test_channels_dict():
    assert Bgr555.new(1, 2, 3).channels == {"b": 3, "g": 2, "r": 1}
    assert Gray8(7).channels == {"y": 7}


def test_maxima_constants():
    assert (Rgb555.MAX_R, Rgb555.MAX_G, Rgb555.MAX_B) == (31, 31, 31)
    assert (Bgr565.MAX_R, Bgr565.MAX_G, Bgr565.MAX_B) == (31, 63, 31)
    assert (Rgb888.MAX_R, Rgb888.MAX_G, Rgb888.MAX_B) == (255, 255, 255)
    assert Gray8.MAX_Y == 255


def test_named_constants(rgb_class):
    c = rgb_class
    assert c.BLACK.rgb == (0, 0, 0)
    assert c.WHITE.rgb == (c.MAX_R, c.MAX_G, c.MAX_B)
    assert c.RED.rgb == (c.MAX_R, 0, 0)
    assert c.GREEN.rgb == (0, c.MAX_G, 0)
    assert c.BLUE.rgb == (0, 0, c.MAX_B)
    assert c.YELLOW.rgb == (c.MAX_R, c.MAX_G, 0)
    assert c.MAGENTA.rgb == (c.MAX_R, 0, c.MAX_B)
    assert c.CYAN.rgb == (0, c.MAX_G, c.MAX_B)
    assert isinstance(c.RED, c)


def test_values_are_clamped():
    assert Rgb565((40, 70, -5)).value == (31, 63, 0)
    assert Gray8(300).value == 255
    assert Gray8(-1).value == 0


def test_immutable():
    c = Rgb565((1, 2, 3))
    with pytest.raises(AttributeError):
        c._value = (0, 0, 0)


def test_rejects_wrong_shape():
    with pytest.raises(ValueError):
        Rgb565((1, 2))
    with pytest.raises(ValueError):
        Gray8((1, 2))


def test_rejects_non_integer_channels():
    with pytest.raises(TypeError):
        Rgb888((0.5, 0, 0))
    with pytest.raises(TypeError):
        Gray8(True)


def test_accepts_numpy_integers():
    c = Rgb888(tuple(np.array([1, 2, 3], dtype=np.uint8)))
    assert c.value == (1, 2, 3)
    assert all(type(v) is int for v in c.value)


def test_equality_and_hash():
    assert Rgb565((1, 2, 3)) == Rgb565((1, 2, 3))
    assert Rgb565((1, 2, 3)) != Bgr565((1, 2, 3))
    assert len({Rgb565((1, 2, 3)), Rgb565((1, 2, 3)), Gray8(3)}) == 2


def test_repr():
    assert repr(Bgr565.new(1, 2, 3)) == "Bgr565(b=3, g=2, r=1)"
    assert repr(Gray8(9)) == "Gray8(y=9)"
    assert repr(BinaryColor.ON) == "BinaryColor.ON"


def test_raw_round_trip(rgb_class):
    c = rgb_class.new(1, 2, 3)
    assert rgb_class.from_raw(c.to_raw()) == c


def test_raw_values():
    assert Rgb565.RED.to_raw() == 0xF800
    assert Bgr565.RED.to_raw() == 0x001F
    assert Rgb555.WHITE.to_raw() == 0x7FFF
    assert Bgr888.BLUE.to_raw() == 0xFF0000
    assert Gray8.from_raw(0x80) == Gray8(128)
    assert BinaryColor.from_raw(1) is BinaryColor.ON


def test_get_color_class():
    assert get_color_class("rgb565") is Rgb565
    assert get_color_class(ColorMode.GRAY8) is Gray8
    assert get_color_class("BINARY") is BinaryColor
    assert get_color_class(Bgr888) is Bgr888
    with pytest.raises(ValueError):
        get_color_class("cmyk")
    with pytest.raises(ValueError):
        get_color_class(int)


def test_convert_color():
    assert convert_color((31, 0, 0), "rgb565") == Rgb565.RED
    assert convert_color(Rgb565.RED, "bgr888") == Bgr888.RED
    assert convert_color(1, "binary") is BinaryColor.ON


def test_frozen_flag_lives_in_slot(rgb_class):
    color = rgb_class.BLACK
    assert "_is_frozen" not in vars(color)
    with pytest.raises(AttributeError):
        color._is_frozen = False
