"""
Framebuffer encoding for pixel arrays.

Pixel arrays hold one pixel per element of the leading axes with the channels
in storage order on the last axis (length 1 for ``gray8`` and ``binary``).
Encoded buffers are row-major:

- 15/16-bit modes use 2 bytes per pixel, 24-bit modes 3 bytes, ``gray8`` 1 byte.
- ``binary`` packs 8 pixels per byte, most significant bit first, and pads
  every row to a whole byte (the layout of MONO_HLSB framebuffers).
"""
from __future__ import annotations
from pathlib import Path
from typing import Literal, Union

import numpy as np

from .conversions import np_convert, np_pack, np_unpack
from .types.color_types import ColorMode, to_color_mode
from .types.pixel_format import mode_bytes_per_pixel

ByteOrder = Literal["little", "big"]


def _check_byteorder(byteorder: str) -> None:
    if byteorder not in ("little", "big"):
        raise ValueError(f"byteorder must be 'little' or 'big', got {byteorder!r}")


def encode_pixels(
    pixels: np.ndarray,
    mode: Union[str, ColorMode],
    byteorder: ByteOrder = "little",
) -> bytes:
    """
    Encode a pixel array of ``mode`` into framebuffer bytes.

    Args:
        pixels: Array of shape ``(..., channels)``; ``binary`` arrays must be at
            least 2D (rows, width, 1) so rows can be padded.
        mode: Color mode of ``pixels``.
        byteorder: Byte order of multi-byte pixels.

    Returns:
        The encoded buffer.
    """
    mode = to_color_mode(mode)
    _check_byteorder(byteorder)
    arr = np.asarray(pixels)

    if mode == ColorMode.BINARY:
        if arr.ndim < 2 or arr.shape[-1] != 1:
            raise ValueError(f"binary pixels need shape (..., width, 1), got {arr.shape}")
        bits = arr[..., 0] != 0
        return np.packbits(bits, axis=-1, bitorder="big").tobytes()

    raw = np_pack(arr, mode)
    nbytes = mode_bytes_per_pixel[mode]
    shifts = [8 * i for i in range(nbytes)]
    if byteorder == "big":
        shifts.reverse()
    planes = [(raw >> np.uint32(shift)) & np.uint32(0xFF) for shift in shifts]
    return np.stack(planes, axis=-1).astype(np.uint8).tobytes()


def decode_pixels(
    data: bytes,
    mode: Union[str, ColorMode],
    width: int,
    byteorder: ByteOrder = "little",
) -> np.ndarray:
    """
    Decode framebuffer bytes into a ``(rows, width, channels)`` ``uint8`` array.

    Raises:
        ValueError: if ``data`` is not a whole number of rows.
    """
    mode = to_color_mode(mode)
    _check_byteorder(byteorder)
    if width < 1:
        raise ValueError(f"width must be positive, got {width}")
    buf = np.frombuffer(data, dtype=np.uint8)

    if mode == ColorMode.BINARY:
        row_bytes = (width + 7) // 8
        if buf.size % row_bytes:
            raise ValueError(f"{buf.size} bytes is not a whole number of {row_bytes}-byte rows")
        bits = np.unpackbits(buf.reshape(-1, row_bytes), axis=-1, bitorder="big")
        return bits[:, :width, None].astype(np.uint8)

    nbytes = mode_bytes_per_pixel[mode]
    row_bytes = nbytes * width
    if buf.size % row_bytes:
        raise ValueError(f"{buf.size} bytes is not a whole number of {row_bytes}-byte rows")
    planes = buf.reshape(-1, width, nbytes).astype(np.uint32)

    order = range(nbytes) if byteorder == "little" else reversed(range(nbytes))
    raw = np.zeros(planes.shape[:-1], dtype=np.uint32)
    for shift, index in enumerate(order):
        raw |= planes[..., index] << np.uint32(8 * shift)
    return np_unpack(raw, mode)


def image_to_pixels(image, mode: Union[str, ColorMode]) -> np.ndarray:
    """
    Convert a Pillow image (or an image file path) to a pixel array of ``mode``.

    The image is read as 8-bit RGB and converted through ``rgb888``.
    """
    from PIL import Image

    if isinstance(image, (str, Path)):
        with Image.open(image) as opened:
            rgb = np.asarray(opened.convert("RGB"), dtype=np.uint8)
    else:
        rgb = np.asarray(image.convert("RGB"), dtype=np.uint8)
    return np_convert(rgb, ColorMode.RGB888, mode)


def pixels_to_image(pixels: np.ndarray, mode: Union[str, ColorMode]):
    """Render a pixel array of ``mode`` as an RGB Pillow image for previewing."""
    from PIL import Image

    rgb = np_convert(np.asarray(pixels), mode, ColorMode.RGB888)
    return Image.fromarray(np.ascontiguousarray(rgb, dtype=np.uint8))
