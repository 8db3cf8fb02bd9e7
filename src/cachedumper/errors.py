"""Per-file error types

Every stage of the decode pipeline raises a subclass of TCOError. The
pipeline catches them per file, so none of them ever ends a batch.
"""


class TCOError(Exception):
    """Base class for errors that stop processing of a single file"""
    kind = 'TCOError'


class FileReadError(TCOError):
    """The input file could not be read from disk"""
    kind = 'FileReadFailure'


class TruncatedHeaderError(TCOError):
    """Not enough bytes for one of the fixed headers"""
    kind = 'TruncatedHeader'


class UnsupportedFlagError(TCOError):
    """The base header flag is not the compressed variant"""
    kind = 'UnsupportedFlag'

    def __init__(self, flag: int) -> None:
        super().__init__(f"File has unsupported type flag: {flag}")
        self.flag = flag


class HeaderSizeMismatchError(TCOError):
    """dataHeaderSize does not match the TCO header size"""
    kind = 'HeaderSizeMismatch'

    def __init__(self, size: int) -> None:
        super().__init__(f"File dataHeaderSize ({size}) did not match TCOHeader size")
        self.size = size


class DecompressionError(TCOError):
    """The LZ4 payload could not be decompressed"""
    kind = 'DecompressionFailure'


class UnsupportedLayoutError(TCOError):
    """Reserved or unknown layout tag"""
    kind = 'UnsupportedLayout'

    def __init__(self, layout: int) -> None:
        super().__init__(f"TCO Layout ({layout}) is not currently supported")
        self.layout = layout


class BlockDecodeError(TCOError):
    """The block codec rejected the payload"""
    kind = 'DecodeFailure'


class WriteError(TCOError):
    """The image encoder failed to write the output file"""
    kind = 'WriteFailure'
