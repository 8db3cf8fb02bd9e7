"""cachedumper - Convert cached TCO textures to TGA images"""

__version__ = "0.1.0"

# Main TCO class
from .tco import TCO

# Header structures
from .headers import (
    BaseHeader,
    CompressedDataHeader,
    TCOHeader,
    parse_headers,
)

# Enumerations
from .enums import BlockFormat, FileFlag, TCOLayout

# Errors
from .errors import (
    TCOError,
    FileReadError,
    TruncatedHeaderError,
    UnsupportedFlagError,
    HeaderSizeMismatchError,
    DecompressionError,
    UnsupportedLayoutError,
    BlockDecodeError,
    WriteError,
)

# Pipeline stages
from .image import PixelBuffer
from .payload import decompress_payload
from .layouts import LAYOUT_TABLE, unpack_layout
from .codec import decode_blocks
from .writer import write_image

# CLI entry point
from .cli import main

__all__ = [
    '__version__',
    'TCO',
    'BaseHeader',
    'CompressedDataHeader',
    'TCOHeader',
    'parse_headers',
    'BlockFormat',
    'FileFlag',
    'TCOLayout',
    'TCOError',
    'FileReadError',
    'TruncatedHeaderError',
    'UnsupportedFlagError',
    'HeaderSizeMismatchError',
    'DecompressionError',
    'UnsupportedLayoutError',
    'BlockDecodeError',
    'WriteError',
    'PixelBuffer',
    'decompress_payload',
    'LAYOUT_TABLE',
    'unpack_layout',
    'decode_blocks',
    'write_image',
    'main',
]
