import itertools
import warnings

import numpy as np
import pytest

from pixelcolor.conversions import convert_channel, np_convert_channel, ChannelRangeWarning

DEPTHS = (1, 31, 63, 255)


def test_zero_maps_to_zero():
    for from_max, to_max in itertools.product(DEPTHS, repeat=2):
        assert convert_channel(0, from_max, to_max) == 0


def test_endpoints_map_to_endpoints():
    for from_max, to_max in itertools.product(DEPTHS, repeat=2):
        assert convert_channel(from_max, from_max, to_max) == to_max


def test_identity_when_depths_match():
    for depth in DEPTHS:
        for v in range(depth + 1):
            assert convert_channel(v, depth, depth) == v


def test_monotonic():
    for from_max, to_max in itertools.product(DEPTHS, repeat=2):
        out = [convert_channel(v, from_max, to_max) for v in range(from_max + 1)]
        assert out == sorted(out)
        assert all(0 <= v <= to_max for v in out)


@pytest.mark.parametrize("lo,hi", [(31, 63), (31, 255), (63, 255), (1, 255)])
def test_round_trip_through_wider_depth(lo, hi):
    for v in range(lo + 1):
        assert convert_channel(convert_channel(v, lo, hi), hi, lo) == v


def test_rounds_half_up():
    # 1 * 255 / 2 = 127.5
    assert convert_channel(1, 2, 255) == 128
    # 16 * 31 / 255 = 1.945...
    assert convert_channel(16, 255, 31) == 2
    # 8 * 31 / 255 = 0.972...
    assert convert_channel(8, 255, 31) == 1
    assert convert_channel(4, 255, 31) == 0


def test_known_values():
    assert convert_channel(16, 31, 255) == 132
    assert convert_channel(32, 63, 255) == 130
    assert convert_channel(128, 255, 31) == 16
    assert convert_channel(128, 255, 63) == 32


def test_accepts_numpy_integers():
    assert convert_channel(np.uint8(255), 255, 31) == 31
    assert isinstance(convert_channel(np.uint8(255), 255, 31), int)


def test_out_of_range_is_clamped_with_warning():
    with pytest.warns(ChannelRangeWarning):
        assert convert_channel(40, 31, 255) == 255
    with pytest.warns(ChannelRangeWarning):
        assert convert_channel(-3, 31, 255) == 0


def test_in_range_does_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        convert_channel(31, 31, 255)


def test_rejects_non_integers():
    with pytest.raises(TypeError):
        convert_channel(1.5, 31, 255)
    with pytest.raises(TypeError):
        convert_channel(True, 1, 255)


def test_rejects_bad_maxima():
    with pytest.raises(ValueError):
        convert_channel(0, 0, 255)
    with pytest.raises(ValueError):
        convert_channel(0, 31, -1)


def test_np_convert_channel_matches_scalar():
    for from_max, to_max in itertools.product(DEPTHS, repeat=2):
        values = np.arange(from_max + 1, dtype=np.uint8)
        expected = [convert_channel(int(v), from_max, to_max) for v in values]
        result = np_convert_channel(values, from_max, to_max)
        assert result.dtype == np.uint8
        assert result.tolist() == expected


def test_np_convert_channel_does_not_overflow_uint8():
    values = np.array([255, 254, 128], dtype=np.uint8)
    assert np_convert_channel(values, 255, 255).tolist() == [255, 254, 128]


def test_np_convert_channel_clamps_with_warning():
    with pytest.warns(ChannelRangeWarning):
        result = np_convert_channel(np.array([-1, 40]), 31, 255)
    assert result.tolist() == [0, 255]


def test_np_convert_channel_rejects_floats():
    with pytest.raises(TypeError):
        np_convert_channel(np.array([0.5]), 31, 255)


@pytest.mark.parametrize("to_max,dtype", [(1023, np.uint16), (65535, np.uint16), (2**20 - 1, np.uint32)])
def test_np_convert_channel_widens_dtype_for_large_maxima(to_max, dtype):
    values = np.arange(256, dtype=np.uint8)
    expected = [convert_channel(int(v), 255, to_max) for v in values]
    result = np_convert_channel(values, 255, to_max)
    assert result.dtype == dtype
    assert result.tolist() == expected
    assert result[-1] == to_max
