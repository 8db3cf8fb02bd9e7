"""TCO header structures"""
import struct
from typing import Tuple, Type, TypeVar

from .enums import FileFlag, TCOLayout
from .errors import HeaderSizeMismatchError, TruncatedHeaderError, UnsupportedFlagError

T = TypeVar('T', 'BaseHeader', 'CompressedDataHeader', 'TCOHeader')


class BaseHeader:
    """Base header (4 bytes), the variant flag shared by every TCO file"""
    SIZE = 4
    FORMAT = '<I'

    def __init__(self) -> None:
        self.flag: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> 'BaseHeader':
        """Read BaseHeader from 4 bytes of data"""
        if len(data) < cls.SIZE:
            raise ValueError(f"Expected {cls.SIZE} bytes for BaseHeader, got {len(data)}")

        header = cls()
        (header.flag,) = struct.unpack(cls.FORMAT, data[:cls.SIZE])
        return header


class CompressedDataHeader:
    """Compressed data header (24 bytes), starts at offset 0 and repeats the flag"""
    SIZE = 24
    FORMAT = '<I8sIII'

    def __init__(self) -> None:
        self.flag: int = FileFlag.COMPRESSED
        self.reserved: bytes = b'\x00' * 8  # Opaque
        self.dataHeaderSize: int = TCOHeader.SIZE  # Size of the TCO header that follows
        self.compressedSize: int = 0  # LZ4 payload size in the file
        self.decompressedSize: int = 0  # Payload size after decompression

    @classmethod
    def from_bytes(cls, data: bytes) -> 'CompressedDataHeader':
        """Read CompressedDataHeader from 24 bytes of data"""
        if len(data) < cls.SIZE:
            raise ValueError(f"Expected {cls.SIZE} bytes for CompressedDataHeader, got {len(data)}")

        header = cls()
        values = struct.unpack(cls.FORMAT, data[:cls.SIZE])
        header.flag = values[0]
        header.reserved = values[1]
        header.dataHeaderSize = values[2]
        header.compressedSize = values[3]
        header.decompressedSize = values[4]
        return header

    def to_bytes(self) -> bytes:
        return struct.pack(
            self.FORMAT, self.flag, self.reserved,
            self.dataHeaderSize, self.compressedSize, self.decompressedSize,
        )


class TCOHeader:
    """TCO texture header (24 bytes)"""
    SIZE = 24
    FORMAT = '<IIIiI?3x'

    def __init__(self) -> None:
        self.flag: int = FileFlag.COMPRESSED
        self.width: int = 0
        self.height: int = 0
        self.layout: int = TCOLayout.RGBA8  # Raw tag, may be outside TCOLayout
        self.numMips: int = 1
        self.flipV: bool = False

    @classmethod
    def from_bytes(cls, data: bytes) -> 'TCOHeader':
        """Read TCOHeader from 24 bytes of data"""
        if len(data) < cls.SIZE:
            raise ValueError(f"Expected {cls.SIZE} bytes for TCOHeader, got {len(data)}")

        header = cls()
        values = struct.unpack(cls.FORMAT, data[:cls.SIZE])
        header.flag = values[0]
        header.width = values[1]
        header.height = values[2]
        header.layout = values[3]
        header.numMips = values[4]
        header.flipV = values[5]
        return header

    def to_bytes(self) -> bytes:
        return struct.pack(
            self.FORMAT, self.flag, self.width, self.height,
            int(self.layout), self.numMips, self.flipV,
        )


class HeaderCursor:
    """
    Sequential reader over the start of a TCO file.

    A read only succeeds when strictly more bytes remain than the size of
    the structure, so a header that ends exactly at the end of the data is
    rejected. A TCO file always carries a payload after its headers.
    """

    def __init__(self, data: bytes) -> None:
        self.data = data
        self.offset = 0

    @property
    def remaining(self) -> int:
        return len(self.data) - self.offset

    def read(self, header_cls: Type[T], error: str, advance: bool = True) -> T:
        """
        Read one header structure at the current offset.

        Args:
            header_cls: Header class with SIZE and from_bytes
            error: Message of the TruncatedHeaderError raised on a short read
            advance: Move the cursor past the structure

        Returns:
            The parsed header
        """
        if self.remaining <= header_cls.SIZE:
            raise TruncatedHeaderError(error)

        header = header_cls.from_bytes(self.data[self.offset:self.offset + header_cls.SIZE])
        if advance:
            self.offset += header_cls.SIZE
        return header


def parse_headers(data: bytes) -> Tuple[BaseHeader, CompressedDataHeader, TCOHeader, int]:
    """
    Parse and validate the three fixed headers at the start of a TCO file.

    Args:
        data: Complete file contents

    Returns:
        (base header, compressed data header, TCO header, payload offset)

    Raises:
        TruncatedHeaderError: The data ends before a header is complete
        UnsupportedFlagError: The file is not the compressed variant
        HeaderSizeMismatchError: dataHeaderSize is not the TCO header size
    """
    if len(data) < TCOHeader.SIZE:
        raise TruncatedHeaderError("File is incomplete or malformed")

    cursor = HeaderCursor(data)

    base = cursor.read(BaseHeader, "Failed to read base header", advance=False)
    if base.flag != FileFlag.COMPRESSED:
        raise UnsupportedFlagError(base.flag)

    comp = cursor.read(CompressedDataHeader, "Failed to read compressed data header")
    if comp.dataHeaderSize != TCOHeader.SIZE:
        raise HeaderSizeMismatchError(comp.dataHeaderSize)

    tco = cursor.read(TCOHeader, "Failed to read TCO header")

    return base, comp, tco, cursor.offset
