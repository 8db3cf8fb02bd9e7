"""Shared palette construction and block scatter for BC1-BC5"""
import numpy as np
from numba import jit


@jit(nopython=True, cache=True)
def scatter_blocks_jit(palettes, indices, bits, output, channel, blocks_x):
    """
    JIT-compiled scatter of palette entries into the output image

    Args:
        palettes: (num_blocks, entries, n) uint8 palette per block
        indices: (num_blocks,) int64 packed little-endian pixel indices
        bits: Index width in bits
        output: (height, width, channels) uint8 image
        channel: First output channel written, n channels are written
        blocks_x: Blocks per row
    """
    height = output.shape[0]
    width = output.shape[1]
    num_channels = palettes.shape[2]
    mask = (1 << bits) - 1

    for block_idx in range(palettes.shape[0]):
        x_start = (block_idx % blocks_x) * 4
        y_start = (block_idx // blocks_x) * 4
        idx_bits = indices[block_idx]

        for pixel_idx in range(16):
            out_y = y_start + pixel_idx // 4
            out_x = x_start + pixel_idx % 4
            if out_y < height and out_x < width:
                entry = (idx_bits >> (pixel_idx * bits)) & mask
                for c in range(num_channels):
                    output[out_y, out_x, channel + c] = palettes[block_idx, entry, c]


def pack_indices(index_bytes: np.ndarray) -> np.ndarray:
    """Pack up to 8 little-endian index bytes per block into one int64"""
    packed = np.zeros(index_bytes.shape[0], dtype=np.uint64)
    for i in range(index_bytes.shape[1]):
        packed |= index_bytes[:, i].astype(np.uint64) << np.uint64(8 * i)
    return packed.view(np.int64)


def _expand_rgb565(packed: np.ndarray) -> np.ndarray:
    """Unpack RGB565 to RGB888 by replicating the high bits, shape (n, 3)"""
    r = ((packed >> 11) & 0x1F) << 3
    r |= r >> 5
    g = ((packed >> 5) & 0x3F) << 2
    g |= g >> 6
    b = (packed & 0x1F) << 3
    b |= b >> 5
    return np.stack([r, g, b], axis=-1)


def color_palette(blocks: np.ndarray, offset: int, allow_three_color: bool) -> np.ndarray:
    """
    Build the 4-entry RGBA palette of each block's colour endpoints

    BC1 switches to 3-colour mode with a transparent black fourth entry when
    color0 <= color1. BC2 and BC3 always interpolate four colours.
    """
    c0 = blocks[:, offset].astype(np.uint16) | (blocks[:, offset + 1].astype(np.uint16) << 8)
    c1 = blocks[:, offset + 2].astype(np.uint16) | (blocks[:, offset + 3].astype(np.uint16) << 8)
    e0 = _expand_rgb565(c0)
    e1 = _expand_rgb565(c1)

    if allow_three_color:
        four_color_mode = c0 > c1
    else:
        four_color_mode = np.ones(len(blocks), dtype=np.bool_)
    four = four_color_mode[:, None]

    palette = np.zeros((len(blocks), 4, 4), dtype=np.uint8)
    palette[:, 0, :3] = e0
    palette[:, 1, :3] = e1
    palette[:, 2, :3] = np.where(four, (2 * e0 + e1) // 3, (e0 + e1) // 2)
    palette[:, 3, :3] = np.where(four, (e0 + 2 * e1) // 3, 0)
    palette[:, :3, 3] = 255
    palette[:, 3, 3] = np.where(four_color_mode, 255, 0)
    return palette


def interpolated_palette(value0: np.ndarray, value1: np.ndarray) -> np.ndarray:
    """
    Build the 8-entry single channel palette used by BC3 alpha, BC4 and BC5

    With value0 > value1 six values are interpolated in sevenths, otherwise
    four are interpolated in fifths and the last two entries are 0 and 255.
    """
    v0 = value0.astype(np.uint16)
    v1 = value1.astype(np.uint16)
    eight_value_mode = v0 > v1

    palette = np.zeros((len(v0), 8), dtype=np.uint8)
    palette[:, 0] = v0
    palette[:, 1] = v1
    for i in range(1, 7):
        eight = ((7 - i) * v0 + i * v1) // 7
        if i <= 4:
            six = ((5 - i) * v0 + i * v1) // 5
        else:
            six = np.full_like(v0, 0 if i == 5 else 255)
        palette[:, i + 1] = np.where(eight_value_mode, eight, six)

    return palette[:, :, None]


def decode_color_block(blocks, offset, allow_three_color, output, blocks_x):
    """Decode the 8-byte colour part at offset into RGBA channels 0-3"""
    palette = color_palette(blocks, offset, allow_three_color)
    indices = pack_indices(blocks[:, offset + 4:offset + 8])
    scatter_blocks_jit(palette, indices, 2, output, 0, blocks_x)


def decode_interpolated_block(blocks, offset, output, channel, blocks_x):
    """Decode the 8-byte BC4-style part at offset into a single channel"""
    palette = interpolated_palette(blocks[:, offset], blocks[:, offset + 1])
    indices = pack_indices(blocks[:, offset + 2:offset + 8])
    scatter_blocks_jit(palette, indices, 3, output, channel, blocks_x)
