"""BC5 texture decompressor"""
import numpy as np
from .base import TextureDecompressor
from .blocks import decode_interpolated_block


class BC5Decompressor(TextureDecompressor):
    """
    BC5 texture decompressor

    BC5 is two BC4 blocks side by side (typically a normal map):
    - 8 bytes: red channel
    - 8 bytes: green channel

    Output is RG8, two channels.
    """
    BLOCK_SIZE = 16
    CHANNELS = 2

    def _decode_blocks(self, blocks: np.ndarray, output: np.ndarray, blocks_x: int) -> None:
        decode_interpolated_block(blocks, 0, output, 0, blocks_x)
        decode_interpolated_block(blocks, 8, output, 1, blocks_x)
