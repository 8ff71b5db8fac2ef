import itertools

import pytest

from pixelcolor.conversions import convert, ColorMode, ChannelRangeWarning
from pixelcolor.conversions.wrapper import CONVERT_SCALAR, CONVERT_NUMPY
from pixelcolor.types.color_types import RGB_MODES


def test_graph_covers_every_ordered_pair():
    for pair in itertools.product(ColorMode, repeat=2):
        assert pair in CONVERT_SCALAR
        assert pair in CONVERT_NUMPY


def test_convert_returns_tuple():
    result = convert((31, 63, 31), "rgb565", "rgb888")
    assert isinstance(result, tuple)
    assert result == (255, 255, 255)


def test_same_mode_keeps_in_range_values():
    assert convert((1, 2, 3), "rgb565", "rgb565") == (1, 2, 3)
    assert convert([1, 2, 3], "bgr888", "bgr888") == (1, 2, 3)
    assert convert(42, "gray8", "gray8") == 42
    assert convert(1, "binary", "binary") == 1


def test_same_mode_clamps_like_other_pairs():
    with pytest.warns(ChannelRangeWarning):
        assert convert((40, 70, 40), "rgb565", "rgb565") == (31, 63, 31)
    with pytest.warns(ChannelRangeWarning):
        assert convert((40, 70, 40), "rgb565", "bgr565") == (31, 63, 31)
    with pytest.warns(ChannelRangeWarning):
        assert convert(300, "gray8", "gray8") == 255
    with pytest.warns(ChannelRangeWarning):
        assert convert(2, "binary", "binary") == 1


def test_mode_names_are_case_insensitive():
    assert convert((31, 0, 0), "RGB555", ColorMode.RGB888) == (255, 0, 0)


def test_storage_order_is_respected():
    # Bgr565 stores (b, g, r)
    assert convert((31, 0, 0), "rgb565", "bgr565") == (0, 0, 31)
    assert convert((0, 0, 255), "bgr888", "rgb565") == (31, 0, 0)


def test_same_depth_opposite_order_is_permutation():
    for r, g, b in [(1, 2, 3), (31, 0, 17), (0, 63, 5)]:
        assert convert((r, g, b), "rgb565", "bgr565") == (b, g, r)
        assert convert((r, g, b), "bgr565", "rgb565") == (b, g, r)
    assert convert((10, 20, 30), "rgb888", "bgr888") == (30, 20, 10)
    assert convert((10, 20, 30), "rgb555", "bgr555") == (30, 20, 10)


def test_rgb_to_gray_and_back():
    assert convert((255, 0, 0), "rgb888", "gray8") == 85
    assert convert((31, 63, 0), "rgb565", "gray8") == 170
    assert convert(255, "gray8", "rgb565") == (31, 63, 31)
    assert convert(128, "gray8", "bgr565") == (16, 32, 16)
    # single-element tuples are accepted for gray
    assert convert((0,), "gray8", "rgb888") == (0, 0, 0)


def test_binary_threshold_and_expansion():
    assert convert((255, 0, 0), "rgb888", "binary") == 0
    assert convert((255, 255, 0), "rgb888", "binary") == 1
    assert convert(127, "gray8", "binary") == 0
    assert convert(128, "gray8", "binary") == 1
    for mode in RGB_MODES:
        assert convert(0, "binary", mode) == (0, 0, 0)
    assert convert(1, "binary", "bgr565") == (31, 63, 31)
    assert convert(1, "binary", "gray8") == 255
    assert convert(0, "binary", "gray8") == 0


def test_unknown_mode_raises():
    with pytest.raises(ValueError):
        convert((1, 2, 3), "rgb444", "rgb888")


def test_wrong_channel_count_raises():
    with pytest.raises(ValueError):
        convert((1, 2), "rgb565", "rgb888")
    with pytest.raises(ValueError):
        convert((1, 2, 3), "gray8", "rgb888")
