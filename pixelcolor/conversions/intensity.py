from typing import Tuple

import numpy as np

from .channel import convert_channel, np_convert_channel
from ..types.pixel_format import GRAY_MAX, INTENSITY_THRESHOLD


def intensity(r: int, g: int, b: int, maxima: Tuple[int, int, int] = (GRAY_MAX, GRAY_MAX, GRAY_MAX)) -> int:
    """
    Unweighted HSI intensity of an RGB color.

    Each channel is first rescaled to 8 bits, then the three are averaged with
    truncating integer division, so pure red gives ``255 // 3 == 85``.

    Args:
        r, g, b: Channel values.
        maxima: Per-channel maxima of the source, in red, green, blue order.

    Returns:
        Intensity in ``[0, 255]``.
    """
    r_max, g_max, b_max = maxima
    total = (
        convert_channel(r, r_max, GRAY_MAX)
        + convert_channel(g, g_max, GRAY_MAX)
        + convert_channel(b, b_max, GRAY_MAX)
    )
    return total // 3


def np_intensity(
    r: np.ndarray,
    g: np.ndarray,
    b: np.ndarray,
    maxima: Tuple[int, int, int] = (GRAY_MAX, GRAY_MAX, GRAY_MAX),
) -> np.ndarray:
    r_max, g_max, b_max = maxima
    total = (
        np_convert_channel(r, r_max, GRAY_MAX).astype(np.uint16)
        + np_convert_channel(g, g_max, GRAY_MAX)
        + np_convert_channel(b, b_max, GRAY_MAX)
    )
    return (total // 3).astype(np.uint8)


def exceeds_threshold(value: int) -> bool:
    """True when an 8-bit intensity maps to the "on" binary state."""
    return value >= INTENSITY_THRESHOLD


def np_exceeds_threshold(values: np.ndarray) -> np.ndarray:
    return np.asarray(values) >= INTENSITY_THRESHOLD
