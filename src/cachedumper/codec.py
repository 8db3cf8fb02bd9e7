"""Bridge from block-compressed TCO layouts to the block decompressors"""
from dataclasses import dataclass
from typing import Dict, Type

import numpy as np

from .decompressors import (
    TextureDecompressor,
    BC1Decompressor,
    BC2Decompressor,
    BC3Decompressor,
    BC4Decompressor,
    BC5Decompressor,
)
from .enums import BlockFormat
from .errors import BlockDecodeError

DECOMPRESSORS: Dict[BlockFormat, Type[TextureDecompressor]] = {
    BlockFormat.BC1: BC1Decompressor,
    BlockFormat.BC2: BC2Decompressor,
    BlockFormat.BC3: BC3Decompressor,
    BlockFormat.BC4: BC4Decompressor,
    BlockFormat.BC5: BC5Decompressor,
}


@dataclass(frozen=True)
class BlockImageDescription:
    """Description of the compressed image handed to the block codec"""
    width: int
    height: int
    mip_levels: int
    format: BlockFormat
    depth: int = 1  # Always a 2D texture
    array_size: int = 1

    def mip_size(self, level: int) -> int:
        """Size in bytes of the given mip level"""
        decompressor = DECOMPRESSORS[self.format]()
        width = max(1, self.width >> level)
        height = max(1, self.height >> level)
        return decompressor.required_size(width, height)


def decode_blocks(payload: bytes, width: int, height: int, num_mips: int, block_format: BlockFormat) -> np.ndarray:
    """
    Decode the base mip level of a block-compressed payload

    Args:
        payload: Decompressed TCO payload, mip levels from largest to smallest
        width: Base level width in pixels
        height: Base level height in pixels
        num_mips: Mip levels stored in the payload, 0 is treated as 1
        block_format: Source block format

    Returns:
        Newly allocated numpy array of shape (height, width, channels) with
        dtype uint8: 4 channels for BC1-BC3, 1 for BC4, 2 for BC5

    Raises:
        BlockDecodeError: The description is invalid or the block stream is short
    """
    if block_format not in DECOMPRESSORS:
        raise BlockDecodeError(f"Unsupported block format: {block_format}")
    if width == 0 or height == 0:
        raise BlockDecodeError(f"Failed to initialize block image: invalid dimensions {width}x{height}")

    description = BlockImageDescription(
        width=width,
        height=height,
        mip_levels=max(1, num_mips),
        format=BlockFormat(block_format),
    )

    # Only mip 0 is decoded, smaller levels that follow it are ignored
    base_size = description.mip_size(0)
    if len(payload) < base_size:
        raise BlockDecodeError(
            f"Failed to decompress image data: base level needs {base_size} bytes, got {len(payload)}"
        )

    decompressor = DECOMPRESSORS[description.format]()
    try:
        return decompressor.decompress(payload, description.width, description.height)
    except ValueError as e:
        raise BlockDecodeError(f"Failed to decompress image data: {e}") from e
