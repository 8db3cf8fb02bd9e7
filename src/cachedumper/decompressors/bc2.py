"""BC2 (DXT3) texture decompressor"""
import numpy as np
from .base import TextureDecompressor
from .blocks import decode_color_block, pack_indices, scatter_blocks_jit

# 4-bit alpha expanded to 8 bits: 0x0 -> 0x00, 0x1 -> 0x11, ... 0xF -> 0xFF
_ALPHA4_TO_ALPHA8 = (np.arange(16, dtype=np.uint8) * 17).reshape(1, 16, 1)


class BC2Decompressor(TextureDecompressor):
    """
    BC2 (DXT3) texture decompressor

    BC2 stores 4x4 pixel blocks in 16 bytes each:
    - 8 bytes: explicit alpha (4 bits per pixel, 16 pixels)
    - 8 bytes: BC1 colour block, always in 4-colour mode

    Output is RGBA8 with straight alpha.
    """
    BLOCK_SIZE = 16
    CHANNELS = 4

    def _decode_blocks(self, blocks: np.ndarray, output: np.ndarray, blocks_x: int) -> None:
        decode_color_block(blocks, 8, False, output, blocks_x)

        # Explicit alpha is a 4-bit index into a fixed 16-entry ramp
        alpha_palette = np.ascontiguousarray(np.broadcast_to(_ALPHA4_TO_ALPHA8, (len(blocks), 16, 1)))
        alpha_indices = pack_indices(blocks[:, 0:8])
        scatter_blocks_jit(alpha_palette, alpha_indices, 4, output, 3, blocks_x)
