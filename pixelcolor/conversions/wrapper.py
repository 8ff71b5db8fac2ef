import numpy as np
from functools import partial
from typing import Callable, Dict, Tuple, Union, cast

from .channel import convert_channel, np_convert_channel
from .intensity import intensity, np_intensity, exceeds_threshold, np_exceeds_threshold
from ..types.color_types import (
    ColorElement, ColorMode, RgbTriple, RGB_MODES, to_color_mode,
)
from ..types.pixel_format import (
    GRAY_MAX, mode_channel_order, mode_maxima, mode_num_channels, rgb_indices, rgb_maxima,
)
from ..utils import get_dimension


# ---------------------------------------------------------------------------
# Storage order <-> red, green, blue
# ---------------------------------------------------------------------------

def storage_to_rgb(value: Tuple[int, int, int], mode: ColorMode) -> RgbTriple:
    r, g, b = rgb_indices[mode_channel_order[mode]]
    return value[r], value[g], value[b]


def rgb_to_storage(rgb: RgbTriple, mode: ColorMode) -> Tuple[int, int, int]:
    # The index permutation is an involution, so the same lookup works both ways
    return storage_to_rgb(rgb, mode)


def _np_split(color: np.ndarray, mode: ColorMode) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    r, g, b = rgb_indices[mode_channel_order[mode]]
    return color[..., r], color[..., g], color[..., b]


def _np_join(r: np.ndarray, g: np.ndarray, b: np.ndarray, mode: ColorMode) -> np.ndarray:
    channels = (r, g, b)
    ri, gi, bi = rgb_indices[mode_channel_order[mode]]
    return np.stack([channels[ri], channels[gi], channels[bi]], axis=-1)


# ---------------------------------------------------------------------------
# Scalar conversions
# ---------------------------------------------------------------------------

def rgb_to_rgb(value: Tuple[int, int, int], from_mode: ColorMode, to_mode: ColorMode) -> Tuple[int, int, int]:
    r, g, b = storage_to_rgb(value, from_mode)
    fr, fg, fb = rgb_maxima(from_mode)
    tr, tg, tb = rgb_maxima(to_mode)
    return rgb_to_storage(
        (convert_channel(r, fr, tr), convert_channel(g, fg, tg), convert_channel(b, fb, tb)),
        to_mode,
    )


def rgb_to_gray(value: Tuple[int, int, int], from_mode: ColorMode) -> int:
    r, g, b = storage_to_rgb(value, from_mode)
    return intensity(r, g, b, rgb_maxima(from_mode))


def gray_to_rgb(value: int, to_mode: ColorMode) -> Tuple[int, int, int]:
    tr, tg, tb = rgb_maxima(to_mode)
    return rgb_to_storage(
        (
            convert_channel(value, GRAY_MAX, tr),
            convert_channel(value, GRAY_MAX, tg),
            convert_channel(value, GRAY_MAX, tb),
        ),
        to_mode,
    )


def rgb_to_binary(value: Tuple[int, int, int], from_mode: ColorMode) -> int:
    return int(exceeds_threshold(rgb_to_gray(value, from_mode)))


def gray_to_binary(value: int) -> int:
    # Intensity of (y, y, y) is y itself
    return int(exceeds_threshold(convert_channel(value, GRAY_MAX, GRAY_MAX)))


def binary_to_rgb(value: int, to_mode: ColorMode) -> Tuple[int, int, int]:
    return cast(Tuple[int, int, int], mode_maxima[to_mode] if value else (0, 0, 0))


def binary_to_gray(value: int) -> int:
    return GRAY_MAX if value else 0


def _build_scalar_graph() -> Dict[Tuple[ColorMode, ColorMode], Callable[[ColorElement], ColorElement]]:
    graph: Dict[Tuple[ColorMode, ColorMode], Callable] = {}
    for from_mode in RGB_MODES:
        for to_mode in RGB_MODES:
            graph[(from_mode, to_mode)] = partial(rgb_to_rgb, from_mode=from_mode, to_mode=to_mode)
        graph[(from_mode, ColorMode.GRAY8)] = partial(rgb_to_gray, from_mode=from_mode)
        graph[(ColorMode.GRAY8, from_mode)] = partial(gray_to_rgb, to_mode=from_mode)
        graph[(from_mode, ColorMode.BINARY)] = partial(rgb_to_binary, from_mode=from_mode)
        graph[(ColorMode.BINARY, from_mode)] = partial(binary_to_rgb, to_mode=from_mode)
    graph[(ColorMode.GRAY8, ColorMode.BINARY)] = gray_to_binary
    graph[(ColorMode.BINARY, ColorMode.GRAY8)] = binary_to_gray
    # Rescaling a depth onto itself is the identity in range and clamps outside it
    graph[(ColorMode.GRAY8, ColorMode.GRAY8)] = partial(convert_channel, from_max=GRAY_MAX, to_max=GRAY_MAX)
    graph[(ColorMode.BINARY, ColorMode.BINARY)] = partial(convert_channel, from_max=1, to_max=1)
    return graph


# Every ordered pair of modes, identity pairs included
CONVERT_SCALAR = _build_scalar_graph()


# ---------------------------------------------------------------------------
# Vectorized conversions (arrays whose last axis holds the channels)
# ---------------------------------------------------------------------------

def np_rgb_to_rgb(color: np.ndarray, from_mode: ColorMode, to_mode: ColorMode) -> np.ndarray:
    r, g, b = _np_split(color, from_mode)
    fr, fg, fb = rgb_maxima(from_mode)
    tr, tg, tb = rgb_maxima(to_mode)
    return _np_join(
        np_convert_channel(r, fr, tr),
        np_convert_channel(g, fg, tg),
        np_convert_channel(b, fb, tb),
        to_mode,
    )


def np_rgb_to_gray(color: np.ndarray, from_mode: ColorMode) -> np.ndarray:
    r, g, b = _np_split(color, from_mode)
    return np_intensity(r, g, b, rgb_maxima(from_mode))[..., None]


def np_gray_to_rgb(color: np.ndarray, to_mode: ColorMode) -> np.ndarray:
    y = color[..., 0]
    tr, tg, tb = rgb_maxima(to_mode)
    return _np_join(
        np_convert_channel(y, GRAY_MAX, tr),
        np_convert_channel(y, GRAY_MAX, tg),
        np_convert_channel(y, GRAY_MAX, tb),
        to_mode,
    )


def np_rgb_to_binary(color: np.ndarray, from_mode: ColorMode) -> np.ndarray:
    return np_exceeds_threshold(np_rgb_to_gray(color, from_mode)).astype(np.uint8)


def np_gray_to_binary(color: np.ndarray) -> np.ndarray:
    y = np_convert_channel(color, GRAY_MAX, GRAY_MAX)
    return np_exceeds_threshold(y).astype(np.uint8)


def np_binary_to_rgb(color: np.ndarray, to_mode: ColorMode) -> np.ndarray:
    on = color[..., 0] != 0
    white = np.array(mode_maxima[to_mode], dtype=np.uint8)
    return np.where(on[..., None], white, np.zeros_like(white))


def np_binary_to_gray(color: np.ndarray) -> np.ndarray:
    return np.where(color != 0, GRAY_MAX, 0).astype(np.uint8)


def _build_numpy_graph() -> Dict[Tuple[ColorMode, ColorMode], Callable[[np.ndarray], np.ndarray]]:
    graph: Dict[Tuple[ColorMode, ColorMode], Callable] = {}
    for from_mode in RGB_MODES:
        for to_mode in RGB_MODES:
            graph[(from_mode, to_mode)] = partial(np_rgb_to_rgb, from_mode=from_mode, to_mode=to_mode)
        graph[(from_mode, ColorMode.GRAY8)] = partial(np_rgb_to_gray, from_mode=from_mode)
        graph[(ColorMode.GRAY8, from_mode)] = partial(np_gray_to_rgb, to_mode=from_mode)
        graph[(from_mode, ColorMode.BINARY)] = partial(np_rgb_to_binary, from_mode=from_mode)
        graph[(ColorMode.BINARY, from_mode)] = partial(np_binary_to_rgb, to_mode=from_mode)
    graph[(ColorMode.GRAY8, ColorMode.BINARY)] = np_gray_to_binary
    graph[(ColorMode.BINARY, ColorMode.GRAY8)] = np_binary_to_gray
    graph[(ColorMode.GRAY8, ColorMode.GRAY8)] = partial(np_convert_channel, from_max=GRAY_MAX, to_max=GRAY_MAX)
    graph[(ColorMode.BINARY, ColorMode.BINARY)] = partial(np_convert_channel, from_max=1, to_max=1)
    return graph


# Every ordered pair of modes, identity pairs included
CONVERT_NUMPY = _build_numpy_graph()


# ---------------------------------------------------------------------------
# High-level API
# ---------------------------------------------------------------------------

def convert(
    color: ColorElement,
    from_mode: Union[str, ColorMode],
    to_mode: Union[str, ColorMode],
) -> ColorElement:
    """
    Convert a single pixel value between two color modes.

    RGB-family values are tuples in the mode's storage order (``(b, g, r)`` for
    the BGR modes), ``gray8`` values are ints and ``binary`` values are 0 or 1.
    Channels outside the source range are clamped with a ``ChannelRangeWarning``,
    also when both modes are the same.

    Args:
        color: Source pixel value.
        from_mode: Mode of ``color``.
        to_mode: Mode to convert to.

    Returns:
        The converted value in the representation of ``to_mode``.

    Raises:
        ValueError: if a mode is unknown or ``color`` has the wrong number of channels.
    """
    fm, tm = to_color_mode(from_mode), to_color_mode(to_mode)

    expected = mode_num_channels[fm]
    if get_dimension(color) != expected:
        raise ValueError(f"{fm.value} expects {expected} channel(s), got {color!r}")

    if expected == 3:
        color = tuple(cast(Tuple[int, ...], color))
    elif isinstance(color, (tuple, list)):
        color = color[0]
    return CONVERT_SCALAR[(fm, tm)](color)


def np_convert(
    color: np.ndarray,
    from_mode: Union[str, ColorMode],
    to_mode: Union[str, ColorMode],
) -> np.ndarray:
    """
    Convert an array of pixels between two color modes.

    The last axis holds the channels in storage order; ``gray8`` and ``binary``
    arrays use a last axis of length 1. The result has dtype ``uint8``.
    """
    fm, tm = to_color_mode(from_mode), to_color_mode(to_mode)
    arr = np.asarray(color)

    expected = mode_num_channels[fm]
    if arr.ndim == 0 or arr.shape[-1] != expected:
        raise ValueError(
            f"{fm.value} expects last dimension to be {expected}, got shape {arr.shape}"
        )
    if not np.issubdtype(arr.dtype, np.integer) and arr.dtype != np.bool_:
        raise TypeError(f"Pixel arrays must have an integer dtype, got {arr.dtype}")

    if arr.dtype == np.bool_:
        arr = arr.astype(np.uint8)
    return CONVERT_NUMPY[(fm, tm)](arr)


__all__ = [
    "convert", "np_convert", "CONVERT_SCALAR", "CONVERT_NUMPY",
    "storage_to_rgb", "rgb_to_storage",
]
