"""Tests for LZ4 payload decompression"""
import lz4.block
import pytest

from cachedumper.errors import DecompressionError
from cachedumper.payload import decompress_payload


class TestDecompressPayload:
    def test_round_trip(self) -> None:
        payload = bytes(range(256)) * 8
        compressed = lz4.block.compress(payload, store_size=False)

        result = decompress_payload(compressed, len(compressed), len(payload))

        assert result == payload

    def test_ignores_bytes_after_block(self) -> None:
        payload = b"texel data " * 10
        compressed = lz4.block.compress(payload, store_size=False)

        result = decompress_payload(compressed + b"\xff" * 5, len(compressed), len(payload))

        assert result == payload

    def test_compressed_size_exceeds_data(self) -> None:
        compressed = lz4.block.compress(b"abc" * 10, store_size=False)
        with pytest.raises(DecompressionError, match="exceeds"):
            decompress_payload(compressed, len(compressed) + 1, 30)

    def test_corrupt_block(self) -> None:
        with pytest.raises(DecompressionError) as exc_info:
            decompress_payload(b"\xff" * 16, 16, 64)
        assert exc_info.value.kind == "DecompressionFailure"

    def test_output_larger_than_declared(self) -> None:
        payload = b"\x22" * 100
        compressed = lz4.block.compress(payload, store_size=False)
        with pytest.raises(DecompressionError):
            decompress_payload(compressed, len(compressed), 50)

    @pytest.mark.parametrize(
        "decompressed_size",
        [
            pytest.param(0x80000000, id="past signed 32-bit"),
            pytest.param(0xFFFFFFFF, id="u32 max"),
        ],
    )
    def test_declared_size_out_of_range(self, decompressed_size: int) -> None:
        payload = bytes(range(16))
        compressed = lz4.block.compress(payload, store_size=False)
        with pytest.raises(DecompressionError, match="Failed to decompress file data"):
            decompress_payload(compressed, len(compressed), decompressed_size)
