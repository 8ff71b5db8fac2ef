"""Basic pixelcolor usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from pixelcolor import (
    Rgb565,
    Bgr565,
    Rgb888,
    Gray8,
    BinaryColor,
    convert,
    np_convert,
    encode_pixels,
)


def demonstrate_colors() -> None:
    # Construct typed colors and convert them for a narrower panel.
    accent = Rgb888((255, 128, 64))
    panel = Rgb565(accent)
    print("RGB888 -> RGB565:", panel.value, hex(panel.to_raw()))

    swapped = Bgr565(panel)
    print("RGB565 -> BGR565 (storage order):", swapped.value)

    print("Grayscale intensity:", Gray8(accent).luma)
    print("Monochrome panel:", BinaryColor.from_color(accent))
    print("Back from binary:", Rgb565(BinaryColor.ON))


def demonstrate_tuples() -> None:
    # Work on plain tuples when there is no need for color objects.
    print("rgb555 -> bgr888:", convert((31, 16, 0), "rgb555", "bgr888"))
    print("gray8 -> rgb565:", convert(128, "gray8", "rgb565"))


def demonstrate_arrays() -> None:
    # Convert a whole image buffer at once and pack it for the display.
    rng = np.random.default_rng(0)
    image = rng.integers(0, 256, size=(4, 8, 3), dtype=np.uint8)
    panel = np_convert(image, "rgb888", "rgb565")
    data = encode_pixels(panel, "rgb565", byteorder="big")
    print("Framebuffer bytes:", len(data))

    mono = np_convert(image, "rgb888", "binary")
    print("Monochrome framebuffer bytes:", len(encode_pixels(mono, "binary")))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_tuples()
    demonstrate_arrays()
