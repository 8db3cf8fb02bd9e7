"""Base class for block texture decompression"""
from abc import ABC, abstractmethod
from typing import Tuple
import numpy as np


class TextureDecompressor(ABC):
    """
    Base class for 4x4 block texture decompression

    Subclasses set the block size in bytes and the number of channels they
    produce, and fill the output array block by block.
    """
    BLOCK_SIZE: int = 16
    CHANNELS: int = 4

    @staticmethod
    def block_grid(width: int, height: int) -> Tuple[int, int]:
        """Number of 4x4 blocks covering the texture horizontally and vertically"""
        return (width + 3) // 4, (height + 3) // 4

    def required_size(self, width: int, height: int) -> int:
        """Size in bytes of one mip level of the given dimensions"""
        blocks_x, blocks_y = self.block_grid(width, height)
        return blocks_x * blocks_y * self.BLOCK_SIZE

    def decompress(self, data: bytes, width: int, height: int) -> np.ndarray:
        """
        Decompress one mip level of block data

        Args:
            data: Block stream, at least required_size(width, height) bytes
            width: Texture width in pixels
            height: Texture height in pixels

        Returns:
            numpy array of shape (height, width, CHANNELS) with dtype uint8
        """
        size = self.required_size(width, height)
        if len(data) < size:
            raise ValueError(
                f"{type(self).__name__}: expected {size} bytes of block data "
                f"for {width}x{height}, got {len(data)}"
            )

        blocks_x, _ = self.block_grid(width, height)
        blocks = np.frombuffer(data, dtype=np.uint8, count=size).reshape(-1, self.BLOCK_SIZE)
        output = np.zeros((height, width, self.CHANNELS), dtype=np.uint8)

        self._decode_blocks(blocks, output, blocks_x)

        return output

    @abstractmethod
    def _decode_blocks(self, blocks: np.ndarray, output: np.ndarray, blocks_x: int) -> None:
        """Fill output from blocks, an array of shape (num_blocks, BLOCK_SIZE)"""
        pass
