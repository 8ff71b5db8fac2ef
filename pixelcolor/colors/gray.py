from __future__ import annotations
from typing import ClassVar

from ..types.color_types import ColorMode, ChannelOrder
from ..types.pixel_format import GRAY_MAX
from .color_base import PixelColorBase


class Gray8(PixelColorBase):
    """8-bit grayscale color; ``value`` is the luma as a plain int."""
    num_channels: ClassVar[int] = 1
    mode: ClassVar[ColorMode] = ColorMode.GRAY8
    channel_order: ClassVar[ChannelOrder] = ChannelOrder.GRAY
    maxima: ClassVar[int] = GRAY_MAX
    null_value: ClassVar[int] = 0
    bits_per_pixel: ClassVar[int] = 8
    MAX_Y: ClassVar[int] = GRAY_MAX

    BLACK: ClassVar[Gray8]
    WHITE: ClassVar[Gray8]

    @property
    def luma(self) -> int:
        return self._value


Gray8.BLACK = Gray8(0)
Gray8.WHITE = Gray8(GRAY_MAX)
