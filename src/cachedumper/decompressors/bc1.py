"""BC1 (DXT1) texture decompressor"""
import numpy as np
from .base import TextureDecompressor
from .blocks import decode_color_block


class BC1Decompressor(TextureDecompressor):
    """
    BC1 (DXT1) texture decompressor - NumPy palettes + Numba scatter

    BC1 stores 4x4 pixel blocks in 8 bytes each:
    - 2 bytes: color0 (RGB565)
    - 2 bytes: color1 (RGB565)
    - 4 bytes: 16 2-bit indices (one per pixel)

    Blocks with color0 <= color1 use 3-colour mode, where index 3 is
    transparent black. Output is RGBA8.
    """
    BLOCK_SIZE = 8
    CHANNELS = 4

    def _decode_blocks(self, blocks: np.ndarray, output: np.ndarray, blocks_x: int) -> None:
        decode_color_block(blocks, 0, True, output, blocks_x)
