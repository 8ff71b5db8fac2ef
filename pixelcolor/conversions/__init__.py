"""
pixelcolor Conversions
======================

Integer-exact conversions between the fixed-bit-depth pixel formats used by
embedded displays, with scalar and vectorized (numpy) implementations.

Features
--------
- Channel rescaling between bit depths with round-half-up integer arithmetic
- Every ordered pair of rgb555, bgr555, rgb565, bgr565, rgb888, bgr888, gray8, binary
- Unweighted intensity reduction for grayscale, fixed midpoint threshold for binary
- Raw storage packing (e.g. ``r << 11 | g << 5 | b`` for rgb565)

Conversion Functions
-------------------

Channels:
    convert_channel(value, from_max, to_max)
        Rescale one channel value
    np_convert_channel(values, from_max, to_max)
        Vectorized channel rescale

Intensity:
    intensity(r, g, b, maxima)
        Truncated average of the channels rescaled to 8 bits
    np_intensity(r, g, b, maxima)
        Vectorized intensity

Storage:
    pack(value, mode) / unpack(raw, mode)
    np_pack(array, mode) / np_unpack(raw, mode)

High-Level API
-------------
    convert(color, from_mode, to_mode)
        Universal pixel converter for a single value
    np_convert(color, from_mode, to_mode)
        Vectorized universal converter

Examples
--------
>>> from pixelcolor.conversions import convert, convert_channel
>>> convert_channel(31, 31, 255)
255
>>> convert((31, 0, 0), "rgb565", "bgr888")
(0, 0, 255)
>>> convert((255, 255, 0), "rgb888", "gray8")
170
"""

from .channel import convert_channel, np_convert_channel, ChannelRangeWarning
from .intensity import intensity, np_intensity
from .storage import pack, unpack, np_pack, np_unpack
from .wrapper import convert, np_convert

from ..types.color_types import ColorMode

__all__ = [
    # Channels
    'convert_channel',
    'np_convert_channel',
    'ChannelRangeWarning',

    # Intensity
    'intensity',
    'np_intensity',

    # Storage
    'pack',
    'unpack',
    'np_pack',
    'np_unpack',

    # High-level API
    'convert',
    'np_convert',

    # Types
    'ColorMode',
]
