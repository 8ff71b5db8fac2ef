from __future__ import annotations
from enum import Enum
from typing import Any, Callable, TypeVar

from ..conversions import convert
from ..conversions.storage import unpack
from ..types.color_types import ColorMode

T = TypeVar("T")


class BinaryColor(Enum):
    """Two-state color used by monochrome displays."""

    OFF = 0
    ON = 1

    # Attached in color.py
    convert: Callable[..., Any]

    @property
    def mode(self) -> ColorMode:
        return ColorMode.BINARY

    @property
    def is_on(self) -> bool:
        return self is BinaryColor.ON

    @property
    def is_off(self) -> bool:
        return self is BinaryColor.OFF

    def invert(self) -> BinaryColor:
        return BinaryColor.OFF if self is BinaryColor.ON else BinaryColor.ON

    def map_color(self, off_value: T, on_value: T) -> T:
        """Select ``off_value`` or ``on_value`` depending on the state."""
        return on_value if self is BinaryColor.ON else off_value

    def to_raw(self) -> int:
        return self.value

    @classmethod
    def from_raw(cls, raw: int) -> BinaryColor:
        return cls(unpack(raw, ColorMode.BINARY))

    @classmethod
    def from_color(cls, color: Any) -> BinaryColor:
        """
        Threshold a pixel color to a binary color.

        RGB and grayscale colors are ``ON`` when their intensity is at least 128.
        """
        if isinstance(color, BinaryColor):
            return color
        if not hasattr(color, "mode") or not hasattr(color, "value"):
            raise TypeError(f"Cannot convert {type(color).__name__} to BinaryColor")
        return cls(convert(color.value, color.mode, ColorMode.BINARY))

    def __repr__(self) -> str:
        return f"BinaryColor.{self.name}"
