from __future__ import annotations
from typing import Any, Callable, ClassVar, Tuple, Union, cast
import numpy as np

from ..conversions import convert
from ..conversions.storage import pack, unpack
from ..types.color_types import ColorElement, ColorMode, ChannelOrder
from ..types.pixel_format import channel_order_names
from ..utils import get_dimension
from .binary import BinaryColor


class PixelColorBase:
    __slots__ = ('_value', '_is_frozen')  # immutability is enforced by __setattr__

    num_channels: ClassVar[int] = 1
    mode:           ClassVar[ColorMode]
    channel_order:  ClassVar[ChannelOrder]
    maxima:         ClassVar[Union[int, Tuple[int, ...]]]
    null_value:     ClassVar[Union[int, Tuple[int, ...]]]
    bits_per_pixel: ClassVar[int]
    # def color_convert(self, to: type | ColorMode | str) -> PixelColorBase | BinaryColor
    convert: Callable[..., Any]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Union[ColorElement, PixelColorBase, BinaryColor]) -> None:
        maxima_dim = get_dimension(self.maxima)

        if self.num_channels != maxima_dim:
            raise ValueError(f"{self.mode} expects {self.maxima!r}-shaped maxima")

        # ---- Handle color input ----
        if isinstance(value, BinaryColor):
            # OFF -> black, ON -> white
            value = value.map_color(self.null_value, self.maxima)
        elif isinstance(value, PixelColorBase):
            value = convert(value.value, value.mode, self.mode)

        value_dim = get_dimension(value)
        if maxima_dim != value_dim:
            raise ValueError(f"{self.mode.value} expects {self.maxima!r}-shaped value, got {value!r}")

        # ---- type enforcement and clamping ----
        if isinstance(self.maxima, tuple):
            value = tuple(
                max(0, min(self._coerce(v), m))
                for v, m in zip(cast(Tuple[Any, ...], value), self.maxima)
            )
        else:
            if isinstance(value, (tuple, list)):
                value = value[0]
            value = max(0, min(self._coerce(value), self.maxima))

        # safe assignment; __setattr__ still allows it during init
        self._value = value

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    @staticmethod
    def _coerce(channel: Any) -> int:
        if isinstance(channel, bool) or not isinstance(channel, (int, np.integer)):
            raise TypeError(f"Channel values must be integers, got {channel!r}")
        return int(channel)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorElement:
        return self._value

    @property
    def channels(self) -> dict[str, int]:
        """Channel values keyed by name, in storage order."""
        names = channel_order_names[self.channel_order]
        values = self._value if isinstance(self._value, tuple) else (self._value,)
        return dict(zip(names, values))

    # ------------------ RAW STORAGE ------------------
    def to_raw(self) -> int:
        return pack(self._value, self.mode)

    @classmethod
    def from_raw(cls, raw: int):
        return cls(unpack(raw, cls.mode))

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelColorBase):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        body = ", ".join(f"{name}={v}" for name, v in self.channels.items())
        return f"{self.__class__.__name__}({body})"


def build_registry(*classes: type[PixelColorBase]):
    return {cls.mode: cls for cls in classes}
