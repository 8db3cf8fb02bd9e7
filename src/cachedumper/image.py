"""Canonical 8-bit pixel buffer"""
from dataclasses import dataclass
import numpy as np


@dataclass
class PixelBuffer:
    """
    Decoded image, one byte per channel.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        channels: Channels per pixel (1, 2 or 4)
        data: numpy array of shape (height, width, channels) with dtype uint8
        borrowed: True when data is a read-only view over the decompressed
            payload rather than an array of its own
    """
    width: int
    height: int
    channels: int
    data: np.ndarray
    borrowed: bool = False

    bytes_per_channel = 1

    def __post_init__(self) -> None:
        expected = (self.height, self.width, self.channels)
        if self.data.shape != expected or self.data.dtype != np.uint8:
            raise ValueError(
                f"Pixel data must be uint8 with shape {expected}, "
                f"got {self.data.dtype} {self.data.shape}"
            )

    @property
    def size(self) -> int:
        """Buffer length in bytes"""
        return self.width * self.height * self.channels * self.bytes_per_channel

    def tobytes(self) -> bytes:
        return self.data.tobytes()
