"""Packing of channel values into the raw integer storage used by display panels.

Channels are laid out most significant field first in the mode's storage
order, so ``Rgb565`` stores ``r << 11 | g << 5 | b`` and ``Bgr565`` stores
``b << 11 | g << 5 | r``.
"""
import warnings
from typing import Union

import numpy as np

from .channel import ChannelRangeWarning
from ..types.color_types import ColorElement, ColorMode, to_color_mode
from ..types.pixel_format import mode_bits_per_pixel, mode_channel_bits, mode_maxima


def pack(value: ColorElement, mode: Union[str, ColorMode]) -> int:
    """
    Pack a storage-order pixel value into its raw integer representation.

    Raises:
        ValueError: if ``value`` has the wrong number of channels or a channel
            does not fit its bit field.
    """
    mode = to_color_mode(mode)
    widths = mode_channel_bits[mode]
    channels = tuple(value) if isinstance(value, (tuple, list)) else (value,)
    if len(channels) != len(widths):
        raise ValueError(f"{mode.value} expects {len(widths)} channel(s), got {value!r}")

    raw = 0
    for channel, bits, maximum in zip(channels, widths, mode_maxima[mode]):
        channel = int(channel)
        if not 0 <= channel <= maximum:
            raise ValueError(f"Channel value {channel} does not fit in {bits} bit(s)")
        raw = (raw << bits) | channel
    return raw


def unpack(raw: int, mode: Union[str, ColorMode]) -> ColorElement:
    """
    Split a raw integer into storage-order channels.

    Returns a tuple for RGB modes and a plain int for ``gray8`` and ``binary``.
    """
    mode = to_color_mode(mode)
    raw = int(raw)
    if not 0 <= raw < (1 << mode_bits_per_pixel[mode]):
        raise ValueError(
            f"Raw value {raw:#x} does not fit in {mode_bits_per_pixel[mode]} bits for {mode.value}"
        )

    channels = []
    for bits in reversed(mode_channel_bits[mode]):
        channels.append(raw & ((1 << bits) - 1))
        raw >>= bits
    channels.reverse()

    if len(channels) == 1:
        return channels[0]
    return tuple(channels)


def np_pack(color: np.ndarray, mode: Union[str, ColorMode]) -> np.ndarray:
    """
    Pack an array of pixels (channels on the last axis) into ``uint32`` raw values.

    Channels that do not fit their bit field are clamped with a ``ChannelRangeWarning``.
    """
    mode = to_color_mode(mode)
    widths = mode_channel_bits[mode]
    arr = np.asarray(color)
    if arr.ndim == 0 or arr.shape[-1] != len(widths):
        raise ValueError(
            f"{mode.value} expects last dimension to be {len(widths)}, got shape {arr.shape}"
        )

    maxima = np.array(mode_maxima[mode])
    arr = arr.astype(np.int64)
    if arr.size and ((arr < 0).any() or (arr > maxima).any()):
        warnings.warn(
            f"Channel values outside {mode.value} bit fields were clamped",
            ChannelRangeWarning,
            stacklevel=2,
        )
        arr = np.clip(arr, 0, maxima)
    raw = np.zeros(arr.shape[:-1], dtype=np.uint32)
    for index, bits in enumerate(widths):
        raw = (raw << np.uint32(bits)) | arr[..., index].astype(np.uint32)
    return raw


def np_unpack(raw: np.ndarray, mode: Union[str, ColorMode]) -> np.ndarray:
    """Inverse of ``np_pack``; returns a ``uint8`` array with a trailing channel axis."""
    mode = to_color_mode(mode)
    values = np.asarray(raw).astype(np.uint32)

    channels = []
    for bits in reversed(mode_channel_bits[mode]):
        channels.append(values & np.uint32((1 << bits) - 1))
        values = values >> np.uint32(bits)
    channels.reverse()
    return np.stack(channels, axis=-1).astype(np.uint8)
