from __future__ import annotations
from enum import Enum
from typing import Tuple, Union

IntVector = Tuple[int, ...]
RgbTriple = Tuple[int, int, int]
ColorElement = Union[int, IntVector]


class ColorMode(str, Enum):
    RGB555 = "rgb555"
    BGR555 = "bgr555"
    RGB565 = "rgb565"
    BGR565 = "bgr565"
    RGB888 = "rgb888"
    BGR888 = "bgr888"
    GRAY8 = "gray8"
    BINARY = "binary"


class ChannelOrder(str, Enum):
    RGB = "rgb"
    BGR = "bgr"
    GRAY = "gray"
    BINARY = "binary"


RGB_MODES = (
    ColorMode.RGB555, ColorMode.BGR555,
    ColorMode.RGB565, ColorMode.BGR565,
    ColorMode.RGB888, ColorMode.BGR888,
)


def to_color_mode(mode: Union[str, ColorMode]) -> ColorMode:
    """
    Normalize a mode name to a ``ColorMode`` member.

    Args:
        mode: Mode name such as ``"rgb565"`` (case-insensitive) or a ``ColorMode``.

    Returns:
        The matching ``ColorMode``.

    Raises:
        ValueError: if the name is not a supported pixel color mode.
    """
    if isinstance(mode, ColorMode):
        return mode
    if not isinstance(mode, str):
        raise TypeError(f"Color mode must be a string, got {type(mode).__name__}")
    try:
        return ColorMode(mode.lower())
    except ValueError:
        raise ValueError(
            f"Unknown color mode {mode!r}; expected one of {[m.value for m in ColorMode]}"
        ) from None

