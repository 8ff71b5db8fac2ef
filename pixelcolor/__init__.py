"""
pixelcolor - Pixel Color Conversions for Embedded Displays
==========================================================

A small library for converting between the fixed-bit-depth pixel formats used
by embedded graphics and display panels, so drawing code written against one
color type renders correctly on a panel that uses another.

Key Features
------------
- RGB formats at 5-5-5, 5-6-5 and 8-8-8 bits, in RGB and BGR channel order
- 8-bit grayscale and single-bit binary colors
- Integer-exact channel rescaling with round-half-up (no floating point)
- Conversion between every ordered pair of supported types
- Vectorized conversions and framebuffer encoding for numpy pixel arrays
- Immutable color instances for safe sharing

Quick Start
-----------
>>> from pixelcolor import Rgb565, Rgb888, Gray8, BinaryColor
>>>
>>> panel = Rgb565(Rgb888((255, 128, 0)))
>>> panel.value
(31, 32, 0)
>>> Gray8(panel).luma
128
>>> panel.convert("binary")
BinaryColor.ON

Modules
-------
- colors: Pixel color classes (Rgb555 ... Bgr888, Gray8, BinaryColor)
- conversions: Channel rescaling, intensity and the conversion graph
- framebuffer: Encoding pixel arrays to and from display framebuffer bytes
"""

from .colors import (
    PixelColorBase, RgbColorBase,
    Rgb555, Bgr555,
    Rgb565, Bgr565,
    Rgb888, Bgr888,
    Gray8, BinaryColor,
    color_convert, convert_color, get_color_class,
)

from .conversions import (
    convert, np_convert,
    convert_channel, np_convert_channel,
    intensity, np_intensity,
    ChannelRangeWarning,
)

from .framebuffer import encode_pixels, decode_pixels, image_to_pixels, pixels_to_image

from .types.color_types import ColorMode, ChannelOrder
from .types.pixel_format import INTENSITY_THRESHOLD

__version__ = "1.0.0"

__all__ = [
    # Color classes
    "PixelColorBase", "RgbColorBase",
    "Rgb555", "Bgr555",
    "Rgb565", "Bgr565",
    "Rgb888", "Bgr888",
    "Gray8", "BinaryColor",
    "color_convert", "convert_color", "get_color_class",

    # Conversions
    "convert", "np_convert",
    "convert_channel", "np_convert_channel",
    "intensity", "np_intensity",
    "ChannelRangeWarning",

    # Framebuffers
    "encode_pixels", "decode_pixels",
    "image_to_pixels", "pixels_to_image",

    # Types
    "ColorMode", "ChannelOrder",
    "INTENSITY_THRESHOLD",

    # Version
    "__version__",
]
