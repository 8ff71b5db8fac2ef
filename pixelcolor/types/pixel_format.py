# No dependencies besides the mode enums
from .color_types import ColorMode, ChannelOrder

# Bit widths per channel, in storage order (most significant field first)
mode_channel_bits = {
    ColorMode.RGB555: (5, 5, 5),
    ColorMode.BGR555: (5, 5, 5),
    ColorMode.RGB565: (5, 6, 5),
    ColorMode.BGR565: (5, 6, 5),
    ColorMode.RGB888: (8, 8, 8),
    ColorMode.BGR888: (8, 8, 8),
    ColorMode.GRAY8: (8,),
    ColorMode.BINARY: (1,),
}

mode_channel_order = {
    ColorMode.RGB555: ChannelOrder.RGB,
    ColorMode.BGR555: ChannelOrder.BGR,
    ColorMode.RGB565: ChannelOrder.RGB,
    ColorMode.BGR565: ChannelOrder.BGR,
    ColorMode.RGB888: ChannelOrder.RGB,
    ColorMode.BGR888: ChannelOrder.BGR,
    ColorMode.GRAY8: ChannelOrder.GRAY,
    ColorMode.BINARY: ChannelOrder.BINARY,
}

channel_order_names = {
    ChannelOrder.RGB: ("r", "g", "b"),
    ChannelOrder.BGR: ("b", "g", "r"),
    ChannelOrder.GRAY: ("y",),
    ChannelOrder.BINARY: ("on",),
}

# Storage positions of the red, green and blue channels.
# The permutation is its own inverse, so it maps storage -> rgb and rgb -> storage.
rgb_indices = {
    ChannelOrder.RGB: (0, 1, 2),
    ChannelOrder.BGR: (2, 1, 0),
}

mode_maxima = {
    mode: tuple((1 << bits) - 1 for bits in widths)
    for mode, widths in mode_channel_bits.items()
}

mode_num_channels = {mode: len(widths) for mode, widths in mode_channel_bits.items()}

mode_bits_per_pixel = {mode: sum(widths) for mode, widths in mode_channel_bits.items()}

# Bytes used by one pixel in a framebuffer; binary pixels are bit-packed instead
mode_bytes_per_pixel = {
    mode: (bits + 7) // 8
    for mode, bits in mode_bits_per_pixel.items()
    if mode != ColorMode.BINARY
}

GRAY_MAX = 255
INTENSITY_THRESHOLD = 128


def rgb_maxima(mode: ColorMode) -> tuple[int, int, int]:
    """Per-channel maxima of an RGB mode in red, green, blue order."""
    maxima = mode_maxima[mode]
    r, g, b = rgb_indices[mode_channel_order[mode]]
    return maxima[r], maxima[g], maxima[b]
