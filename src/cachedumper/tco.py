"""Main TCO file handler"""
from typing import Optional

from .enums import layout_name
from .headers import BaseHeader, CompressedDataHeader, TCOHeader, parse_headers
from .image import PixelBuffer
from .layouts import unpack_layout
from .payload import decompress_payload


class TCO:
    """Texture cache object: compressed headers plus an LZ4 texel payload"""
    def __init__(self) -> None:
        self.base_header: BaseHeader = BaseHeader()
        self.data_header: CompressedDataHeader = CompressedDataHeader()
        self.header: TCOHeader = TCOHeader()
        self.compressed: bytes = b''  # Everything after the headers

    def __str__(self) -> str:
        """Return debug string representation of TCO file"""
        lines = [
            f"File is COMPRESSED: compressedSize: {self.data_header.compressedSize}, "
            f"decompressedSize: {self.data_header.decompressedSize}, "
            f"dataHeaderSize: {self.data_header.dataHeaderSize}",
            f"TCO header: width: {self.header.width}, height: {self.header.height}, "
            f"layout: {layout_name(self.header.layout)}, numMips: {self.header.numMips}, "
            f"flipV: {str(self.header.flipV).lower()}",
        ]
        return "\n".join(lines)

    @classmethod
    def from_bytes(cls, data: bytes) -> 'TCO':
        """
        Read TCO from bytes

        Raises:
            TruncatedHeaderError: The data ends inside a header
            UnsupportedFlagError: The file is not the compressed variant
            HeaderSizeMismatchError: dataHeaderSize is not 24
        """
        tco = cls()
        tco.base_header, tco.data_header, tco.header, offset = parse_headers(data)
        tco.compressed = data[offset:]
        return tco

    @property
    def width(self) -> int:
        return self.header.width

    @property
    def height(self) -> int:
        return self.header.height

    @property
    def flip_v(self) -> bool:
        return self.header.flipV

    def decompress(self) -> bytes:
        """Decompress the texel payload to exactly decompressedSize bytes"""
        return decompress_payload(
            self.compressed,
            self.data_header.compressedSize,
            self.data_header.decompressedSize,
        )

    def to_image(self, payload: Optional[bytes] = None) -> PixelBuffer:
        """
        Decode the texture to an 8-bit pixel buffer

        Args:
            payload: Already decompressed payload, decompressed here when None

        Returns:
            PixelBuffer with the channel count of the header layout

        Raises:
            DecompressionError: The payload could not be decompressed
            UnsupportedLayoutError: The layout tag is reserved or unknown
            BlockDecodeError: Block-compressed data could not be decoded
        """
        if payload is None:
            payload = self.decompress()
        return unpack_layout(payload, self.header)
