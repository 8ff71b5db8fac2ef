from __future__ import annotations
from typing import Union

from .binary import BinaryColor
from .color_base import PixelColorBase
from .gray import Gray8
from .rgb import rgb_mode_to_class
from ..types.color_types import ColorMode, to_color_mode

ColorClass = Union[type[PixelColorBase], type[BinaryColor]]

unified_mode_to_class: dict[ColorMode, ColorClass] = {
    **rgb_mode_to_class,
    ColorMode.GRAY8: Gray8,
    ColorMode.BINARY: BinaryColor,
}


def get_color_class(mode: Union[str, ColorMode, ColorClass]) -> ColorClass:
    """
    Resolve a mode name (or an already resolved color class) to its color class.

    Raises:
        ValueError: if the mode is not supported.
    """
    if isinstance(mode, type):
        if mode not in unified_mode_to_class.values():
            raise ValueError(f"Unsupported color class: {mode.__name__}")
        return mode
    return unified_mode_to_class[to_color_mode(mode)]


def color_convert(self: Union[PixelColorBase, BinaryColor], to: Union[str, ColorMode, ColorClass]):
    """
    Convert this color to another pixel color type.

    Args:
        to: Target mode name (e.g. ``"rgb565"``), ``ColorMode`` or color class.

    Returns:
        New color instance of the target type.
    """
    cls = get_color_class(to)
    if cls is BinaryColor:
        return BinaryColor.from_color(self)
    return cls(self)


PixelColorBase.convert = color_convert
BinaryColor.convert = color_convert


def convert_color(value, mode: Union[str, ColorMode]):
    """Build a color of ``mode`` from a raw value tuple or convert an existing color."""
    color_class = get_color_class(mode)
    if isinstance(value, (PixelColorBase, BinaryColor)):
        return value.convert(color_class)
    if color_class is BinaryColor:
        return BinaryColor(value)
    return color_class(value)
