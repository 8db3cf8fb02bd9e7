"""BC3 (DXT5) texture decompressor"""
import numpy as np
from .base import TextureDecompressor
from .blocks import decode_color_block, decode_interpolated_block


class BC3Decompressor(TextureDecompressor):
    """
    BC3 (DXT5) texture decompressor

    BC3 stores 4x4 pixel blocks in 16 bytes each:
    - 1 byte: alpha0 endpoint
    - 1 byte: alpha1 endpoint
    - 6 bytes: 16 3-bit alpha indices (48 bits total)
    - 8 bytes: BC1 colour block, always in 4-colour mode
    """
    BLOCK_SIZE = 16
    CHANNELS = 4

    def _decode_blocks(self, blocks: np.ndarray, output: np.ndarray, blocks_x: int) -> None:
        decode_color_block(blocks, 8, False, output, blocks_x)
        decode_interpolated_block(blocks, 0, output, 3, blocks_x)
