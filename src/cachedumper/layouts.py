"""Texel layout unpacking

Turns a decompressed TCO payload into a PixelBuffer with one byte per
channel. Each layout tag maps to a LayoutInfo in LAYOUT_TABLE; the reserved
tag has no entry and is rejected like any unknown value.

Several layouts do not contain what their name says:
- R11G11B10 payloads are plain RGBA8 and are passed through.
- R16 and R32 both step over the payload two 16-bit words at a time and use
  only the first word. R32 divides by the 32-bit maximum, so every real
  value maps to 0.
- R24G8 steps over three 32-bit words per pixel and uses only the first.

Rescaling is done in single precision and truncated toward zero.
"""
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

import numpy as np

from .codec import decode_blocks
from .enums import BlockFormat, TCOLayout
from .errors import BlockDecodeError, UnsupportedLayoutError
from .headers import TCOHeader
from .image import PixelBuffer

UINT16_MAX = 0xFFFF
UINT32_MAX = 0xFFFFFFFF
R24_MASK = 0xFFFFFF00

# (payload, header, channels) -> (pixel data, borrowed)
Unpacker = Callable[[bytes, TCOHeader, int], Tuple[np.ndarray, bool]]


@dataclass(frozen=True)
class LayoutInfo:
    """How one layout tag is unpacked"""
    name: str
    channels: int
    unpack: Unpacker


def rescale(values: np.ndarray, divisor: int) -> np.ndarray:
    """Map integer values to bytes as uint8((float(v) / divisor) * 255) in float32"""
    scaled = (values.astype(np.float32) / np.float32(divisor)) * np.float32(255)
    return scaled.astype(np.uint8)


def _pixel_groups(payload: bytes, stride: int, pixel_count: int) -> np.ndarray:
    """Whole stride-byte groups of the payload, at most one per pixel, shape (n, stride)"""
    usable = min(len(payload) // stride, pixel_count)
    if usable == 0:
        return np.zeros((0, stride), dtype=np.uint8)
    return np.frombuffer(payload, dtype=np.uint8, count=usable * stride).reshape(usable, stride)


def _u16(groups: np.ndarray, offset: int) -> np.ndarray:
    return groups[:, offset].astype(np.uint16) | (groups[:, offset + 1].astype(np.uint16) << 8)


def _u32(groups: np.ndarray, offset: int) -> np.ndarray:
    word = np.zeros(len(groups), dtype=np.uint32)
    for i in range(4):
        word |= groups[:, offset + i].astype(np.uint32) << np.uint32(8 * i)
    return word


def _passthrough(payload: bytes, header: TCOHeader, channels: int) -> Tuple[np.ndarray, bool]:
    """Use the first width*height*channels payload bytes as they are"""
    size = header.width * header.height * channels
    if size and len(payload) >= size:
        return np.frombuffer(payload, dtype=np.uint8, count=size), True

    data = np.zeros(size, dtype=np.uint8)
    available = min(len(payload), size)
    if available:
        data[:available] = np.frombuffer(payload, dtype=np.uint8, count=available)
    return data, False


def _rg16(payload: bytes, header: TCOHeader, channels: int) -> Tuple[np.ndarray, bool]:
    """Two 16-bit channels per pixel"""
    pixel_count = header.width * header.height
    groups = _pixel_groups(payload, 4, pixel_count)

    data = np.zeros((pixel_count, channels), dtype=np.uint8)
    data[:len(groups), 0] = rescale(_u16(groups, 0), UINT16_MAX)
    data[:len(groups), 1] = rescale(_u16(groups, 2), UINT16_MAX)
    return data, False


def _first_word_of_pair(divisor: int) -> Unpacker:
    """Single channel from the first of every two 16-bit words"""
    def unpack(payload: bytes, header: TCOHeader, channels: int) -> Tuple[np.ndarray, bool]:
        pixel_count = header.width * header.height
        groups = _pixel_groups(payload, 4, pixel_count)

        data = np.zeros((pixel_count, channels), dtype=np.uint8)
        data[:len(groups), 0] = rescale(_u16(groups, 0), divisor)
        return data, False

    return unpack


def _r32g8(payload: bytes, header: TCOHeader, channels: int) -> Tuple[np.ndarray, bool]:
    """3-byte groups: 16-bit red, 8-bit green"""
    pixel_count = header.width * header.height
    groups = _pixel_groups(payload, 3, pixel_count)

    data = np.zeros((pixel_count, channels), dtype=np.uint8)
    data[:len(groups), 0] = rescale(_u16(groups, 0), UINT16_MAX)
    data[:len(groups), 1] = groups[:, 2]
    return data, False


def _r24g8(payload: bytes, header: TCOHeader, channels: int) -> Tuple[np.ndarray, bool]:
    """12-byte groups, first 32-bit word: red in the top 24 bits, green in the low byte"""
    pixel_count = header.width * header.height
    groups = _pixel_groups(payload, 12, pixel_count)
    words = _u32(groups, 0)

    data = np.zeros((pixel_count, channels), dtype=np.uint8)
    data[:len(groups), 0] = rescale(words & np.uint32(R24_MASK), R24_MASK)
    data[:len(groups), 1] = (words & np.uint32(0xFF)).astype(np.uint8)
    return data, False


def _block(block_format: BlockFormat) -> Unpacker:
    def unpack(payload: bytes, header: TCOHeader, channels: int) -> Tuple[np.ndarray, bool]:
        data = decode_blocks(payload, header.width, header.height, header.numMips, block_format)
        return data, False

    return unpack


LAYOUT_TABLE: Dict[TCOLayout, LayoutInfo] = {
    TCOLayout.BC1: LayoutInfo('BC1', 4, _block(BlockFormat.BC1)),
    TCOLayout.BC2: LayoutInfo('BC2', 4, _block(BlockFormat.BC2)),
    TCOLayout.BC3: LayoutInfo('BC3', 4, _block(BlockFormat.BC3)),
    TCOLayout.BC4: LayoutInfo('BC4', 1, _block(BlockFormat.BC4)),
    TCOLayout.BC5: LayoutInfo('BC5', 2, _block(BlockFormat.BC5)),
    TCOLayout.R11G11B10: LayoutInfo('R11G11B10', 4, _passthrough),
    TCOLayout.RGBA8: LayoutInfo('RGBA8', 4, _passthrough),
    TCOLayout.RG16: LayoutInfo('RG16', 2, _rg16),
    TCOLayout.R16: LayoutInfo('R16', 1, _first_word_of_pair(UINT16_MAX)),
    TCOLayout.R32: LayoutInfo('R32', 1, _first_word_of_pair(UINT32_MAX)),
    TCOLayout.R32G8: LayoutInfo('R32G8', 2, _r32g8),
    TCOLayout.R24G8: LayoutInfo('R24G8', 2, _r24g8),
    TCOLayout.R8: LayoutInfo('R8', 1, _passthrough),
}


def get_layout_info(layout: int) -> LayoutInfo:
    """
    Look up the unpacking rule for a layout tag

    Raises:
        UnsupportedLayoutError: The tag is reserved or unknown
    """
    try:
        return LAYOUT_TABLE[TCOLayout(layout)]
    except (ValueError, KeyError):
        raise UnsupportedLayoutError(layout) from None


def channel_count(layout: int) -> int:
    """Number of output channels for a layout tag"""
    return get_layout_info(layout).channels


def unpack_layout(payload: bytes, header: TCOHeader) -> PixelBuffer:
    """
    Convert a decompressed payload to a PixelBuffer

    Args:
        payload: Decompressed texel data
        header: TCO header of the file

    Returns:
        PixelBuffer of header.width x header.height pixels. Passthrough
        layouts return a read-only view over payload (borrowed=True).

    Raises:
        UnsupportedLayoutError: The layout tag is reserved or unknown
        BlockDecodeError: A block-compressed payload could not be decoded, or
            the pixel buffer for the header dimensions cannot be allocated
    """
    info = get_layout_info(header.layout)
    try:
        data, borrowed = info.unpack(payload, header, info.channels)
    except (MemoryError, OverflowError, ValueError) as e:
        raise BlockDecodeError(
            f"Failed to allocate {header.width}x{header.height} pixel buffer: {e}"
        ) from e

    return PixelBuffer(
        width=header.width,
        height=header.height,
        channels=info.channels,
        data=data.reshape(header.height, header.width, info.channels),
        borrowed=borrowed,
    )


__all__ = [
    'LAYOUT_TABLE',
    'LayoutInfo',
    'channel_count',
    'get_layout_info',
    'rescale',
    'unpack_layout',
]
