"""BC4 texture decompressor"""
import numpy as np
from .base import TextureDecompressor
from .blocks import decode_interpolated_block


class BC4Decompressor(TextureDecompressor):
    """
    BC4 texture decompressor

    BC4 stores a single interpolated channel in 8-byte blocks:
    - 1 byte: value0 endpoint
    - 1 byte: value1 endpoint
    - 6 bytes: 16 3-bit indices (48 bits total)

    Output is R8, a single channel.
    """
    BLOCK_SIZE = 8
    CHANNELS = 1

    def _decode_blocks(self, blocks: np.ndarray, output: np.ndarray, blocks_x: int) -> None:
        decode_interpolated_block(blocks, 0, output, 0, blocks_x)
