"""LZ4 payload decompression"""
import lz4.block

from .errors import DecompressionError


def decompress_payload(compressed: bytes, compressed_size: int, decompressed_size: int) -> bytes:
    """
    Decompress the LZ4 block that follows the TCO headers.

    Args:
        compressed: Bytes following the headers
        compressed_size: Size of the LZ4 block from the compressed data header
        decompressed_size: Expected size of the texel payload

    Returns:
        Payload of exactly decompressed_size bytes. A short but valid block
        is zero-padded.

    Raises:
        DecompressionError: The block is truncated, corrupt or empty, or
            decompressed_size cannot be allocated
    """
    if compressed_size > len(compressed):
        raise DecompressionError(
            f"Failed to decompress file data: compressedSize {compressed_size} "
            f"exceeds the {len(compressed)} bytes remaining"
        )

    try:
        payload = lz4.block.decompress(
            compressed[:compressed_size],
            uncompressed_size=decompressed_size,
        )
    except (lz4.block.LZ4BlockError, OverflowError, ValueError, MemoryError) as e:
        # decompressedSize is a u32, lz4 rejects sizes past the signed 32-bit range
        raise DecompressionError(f"Failed to decompress file data: {e}") from e

    if not payload:
        raise DecompressionError("Failed to decompress file data")

    if len(payload) < decompressed_size:
        payload += b'\x00' * (decompressed_size - len(payload))

    return payload
