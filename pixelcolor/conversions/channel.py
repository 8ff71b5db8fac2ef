import warnings

import numpy as np
from boundednumbers import clamp


class ChannelRangeWarning(UserWarning):
    """Issued when a channel value outside ``[0, from_max]`` is clamped before rescaling."""


def _check_maxima(from_max: int, to_max: int) -> None:
    if from_max < 1:
        raise ValueError(f"from_max must be at least 1, got {from_max}")
    if to_max < 0:
        raise ValueError(f"to_max must not be negative, got {to_max}")


def convert_channel(value: int, from_max: int, to_max: int) -> int:
    """
    Rescale one channel value from ``[0, from_max]`` to ``[0, to_max]``.

    The result is the nearest integer to ``value * to_max / from_max`` with ties
    rounded up, computed as ``(value * to_max + from_max // 2) // from_max``.

    Args:
        value: Source channel value.
        from_max: Largest value of the source channel (bit-depth maximum).
        to_max: Largest value of the destination channel.

    Returns:
        Destination channel value in ``[0, to_max]``.

    Raises:
        TypeError: if ``value`` is not an integer (``bool`` included).
        ValueError: if ``from_max < 1`` or ``to_max < 0``.
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"Channel values must be integers, got {type(value).__name__}")
    _check_maxima(from_max, to_max)

    value = int(value)
    if not 0 <= value <= from_max:
        warnings.warn(
            f"Channel value {value} outside [0, {from_max}] was clamped",
            ChannelRangeWarning,
            stacklevel=2,
        )
        value = int(clamp(value, 0, from_max))

    return (value * to_max + from_max // 2) // from_max


def np_convert_channel(values: np.ndarray, from_max: int, to_max: int) -> np.ndarray:
    """
    Vectorized ``convert_channel`` over an integer array.

    The result uses the smallest unsigned dtype that holds ``to_max``, so
    ``uint8`` for every pixel depth up to 8 bits.
    """
    _check_maxima(from_max, to_max)

    arr = np.asarray(values)
    if not np.issubdtype(arr.dtype, np.integer):
        raise TypeError(f"Channel arrays must have an integer dtype, got {arr.dtype}")

    # int64 keeps 255 * 255 + 127 and negative inputs representable
    wide = arr.astype(np.int64)
    if wide.size and (wide.min() < 0 or wide.max() > from_max):
        warnings.warn(
            f"Channel values outside [0, {from_max}] were clamped",
            ChannelRangeWarning,
            stacklevel=2,
        )
        wide = np.clip(wide, 0, from_max)

    out_dtype = np.min_scalar_type(to_max)
    return ((wide * to_max + from_max // 2) // from_max).astype(out_dtype)
