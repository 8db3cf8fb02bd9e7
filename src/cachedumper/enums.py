"""TCO enumerations"""
from enum import IntEnum


class FileFlag(IntEnum):
    """Container variant stored in the first header word"""
    COMPRESSED = 4


class TCOLayout(IntEnum):
    """Texel layout tag stored in the TCO header"""
    BC1 = 0
    BC2 = 1
    BC3 = 2
    BC4 = 3
    BC5 = 4
    NOT_USED = 5  # Reserved, never decoded
    R11G11B10 = 6
    RGBA8 = 7
    RG16 = 8
    R16 = 9
    R32 = 10
    R32G8 = 11
    R24G8 = 12
    R8 = 13


class BlockFormat(IntEnum):
    """Block-compressed source formats understood by the block codec"""
    BC1 = 1
    BC2 = 2
    BC3 = 3
    BC4 = 4
    BC5 = 5


def layout_name(value: int) -> str:
    """Return the display name of a layout tag, 'ERROR' for unknown values"""
    try:
        layout = TCOLayout(value)
    except ValueError:
        return 'ERROR'
    if layout == TCOLayout.NOT_USED:
        return 'NOT USED'
    return layout.name
