"""
pixelcolor Color Classes
========================

Immutable pixel color value types for the formats used by embedded display
panels.

Features
--------
- Immutable color instances (frozen after initialization)
- Channel values clamped to the bit depth of each channel
- Storage-order ``value`` tuples with order-independent ``r``/``g``/``b`` access
- Named constants (``BLACK``, ``WHITE``, ``RED``, ``GREEN``, ``BLUE``,
  ``YELLOW``, ``MAGENTA``, ``CYAN``) on every RGB class
- Conversion between any two types by construction or ``convert()``
- Raw storage packing via ``to_raw()`` / ``from_raw()``

Usage
-----
>>> from pixelcolor.colors import Rgb565, Rgb888, Bgr888, Gray8, BinaryColor
>>>
>>> c = Rgb565.new(31, 0, 0)
>>> Bgr888(c).value
(0, 0, 255)
>>> Gray8(Rgb888.YELLOW).luma
170
>>> BinaryColor.from_color(Rgb565.RED)
BinaryColor.OFF
>>> Rgb565(BinaryColor.ON) == Rgb565.WHITE
True
>>> hex(Rgb565.RED.to_raw())
'0xf800'

Color Classes
-------------
RGB family:
    - Rgb555 / Bgr555: 5 bits per channel
    - Rgb565 / Bgr565: 5 bits red and blue, 6 bits green
    - Rgb888 / Bgr888: 8 bits per channel
Grayscale:
    - Gray8: 8-bit luma
Binary:
    - BinaryColor: OFF / ON

Notes
-----
- Out-of-range channel values are clamped during initialization
- Converting a color by construction (``Rgb565(other)``) never raises for a
  supported source type
"""

from .binary import BinaryColor
from .color_base import PixelColorBase
from .rgb import RgbColorBase, Rgb555, Bgr555, Rgb565, Bgr565, Rgb888, Bgr888, RGB_CLASSES
from .gray import Gray8
from .color import color_convert, convert_color, get_color_class, unified_mode_to_class


__all__ = [
    'PixelColorBase', 'RgbColorBase',
    'Rgb555', 'Bgr555', 'Rgb565', 'Bgr565', 'Rgb888', 'Bgr888', 'RGB_CLASSES',
    'Gray8', 'BinaryColor',
    'color_convert', 'convert_color', 'get_color_class', 'unified_mode_to_class',
]
