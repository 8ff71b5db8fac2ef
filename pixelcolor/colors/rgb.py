from __future__ import annotations
from typing import ClassVar, Tuple

from ..types.color_types import ColorMode, ChannelOrder
from ..types.pixel_format import rgb_indices
from .color_base import PixelColorBase, build_registry


class RgbColorBase(PixelColorBase):
    """
    Three-channel pixel color.

    ``value`` holds the channels in storage order, so ``Bgr565(...).value`` is
    ``(b, g, r)``. Use ``new(r, g, b)`` and the ``r``/``g``/``b`` properties to
    work with red, green and blue regardless of the order.
    """
    num_channels: ClassVar[int] = 3
    maxima:     ClassVar[Tuple[int, int, int]]
    null_value: ClassVar[Tuple[int, int, int]] = (0, 0, 0)
    MAX_R: ClassVar[int]
    MAX_G: ClassVar[int]
    MAX_B: ClassVar[int]

    # Named constants, attached below for every concrete class
    BLACK:   ClassVar[RgbColorBase]
    WHITE:   ClassVar[RgbColorBase]
    RED:     ClassVar[RgbColorBase]
    GREEN:   ClassVar[RgbColorBase]
    BLUE:    ClassVar[RgbColorBase]
    YELLOW:  ClassVar[RgbColorBase]
    MAGENTA: ClassVar[RgbColorBase]
    CYAN:    ClassVar[RgbColorBase]

    @classmethod
    def new(cls, r: int, g: int, b: int):
        """Build a color from red, green and blue, whatever the storage order."""
        rgb = (r, g, b)
        ri, gi, bi = rgb_indices[cls.channel_order]
        return cls((rgb[ri], rgb[gi], rgb[bi]))

    @property
    def r(self) -> int:
        return self._value[rgb_indices[self.channel_order][0]]

    @property
    def g(self) -> int:
        return self._value[rgb_indices[self.channel_order][1]]

    @property
    def b(self) -> int:
        return self._value[rgb_indices[self.channel_order][2]]

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self.r, self.g, self.b


class Rgb555(RgbColorBase):
    mode: ClassVar[ColorMode] = ColorMode.RGB555
    channel_order: ClassVar[ChannelOrder] = ChannelOrder.RGB
    maxima: ClassVar[Tuple[int, int, int]] = (31, 31, 31)
    bits_per_pixel: ClassVar[int] = 15
    MAX_R, MAX_G, MAX_B = 31, 31, 31


class Bgr555(RgbColorBase):
    mode: ClassVar[ColorMode] = ColorMode.BGR555
    channel_order: ClassVar[ChannelOrder] = ChannelOrder.BGR
    maxima: ClassVar[Tuple[int, int, int]] = (31, 31, 31)
    bits_per_pixel: ClassVar[int] = 15
    MAX_R, MAX_G, MAX_B = 31, 31, 31


class Rgb565(RgbColorBase):
    mode: ClassVar[ColorMode] = ColorMode.RGB565
    channel_order: ClassVar[ChannelOrder] = ChannelOrder.RGB
    maxima: ClassVar[Tuple[int, int, int]] = (31, 63, 31)
    bits_per_pixel: ClassVar[int] = 16
    MAX_R, MAX_G, MAX_B = 31, 63, 31


class Bgr565(RgbColorBase):
    mode: ClassVar[ColorMode] = ColorMode.BGR565
    channel_order: ClassVar[ChannelOrder] = ChannelOrder.BGR
    maxima: ClassVar[Tuple[int, int, int]] = (31, 63, 31)
    bits_per_pixel: ClassVar[int] = 16
    MAX_R, MAX_G, MAX_B = 31, 63, 31


class Rgb888(RgbColorBase):
    mode: ClassVar[ColorMode] = ColorMode.RGB888
    channel_order: ClassVar[ChannelOrder] = ChannelOrder.RGB
    maxima: ClassVar[Tuple[int, int, int]] = (255, 255, 255)
    bits_per_pixel: ClassVar[int] = 24
    MAX_R, MAX_G, MAX_B = 255, 255, 255


class Bgr888(RgbColorBase):
    mode: ClassVar[ColorMode] = ColorMode.BGR888
    channel_order: ClassVar[ChannelOrder] = ChannelOrder.BGR
    maxima: ClassVar[Tuple[int, int, int]] = (255, 255, 255)
    bits_per_pixel: ClassVar[int] = 24
    MAX_R, MAX_G, MAX_B = 255, 255, 255


RGB_CLASSES = (Rgb555, Bgr555, Rgb565, Bgr565, Rgb888, Bgr888)

for _cls in RGB_CLASSES:
    _r, _g, _b = _cls.MAX_R, _cls.MAX_G, _cls.MAX_B
    _cls.BLACK = _cls.new(0, 0, 0)
    _cls.WHITE = _cls.new(_r, _g, _b)
    _cls.RED = _cls.new(_r, 0, 0)
    _cls.GREEN = _cls.new(0, _g, 0)
    _cls.BLUE = _cls.new(0, 0, _b)
    _cls.YELLOW = _cls.new(_r, _g, 0)
    _cls.MAGENTA = _cls.new(_r, 0, _b)
    _cls.CYAN = _cls.new(0, _g, _b)
del _cls, _r, _g, _b


rgb_mode_to_class = build_registry(*RGB_CLASSES)
