"""Block texture decompressor implementations"""
from .base import TextureDecompressor
from .bc1 import BC1Decompressor
from .bc2 import BC2Decompressor
from .bc3 import BC3Decompressor
from .bc4 import BC4Decompressor
from .bc5 import BC5Decompressor

__all__ = [
    'TextureDecompressor',
    'BC1Decompressor',
    'BC2Decompressor',
    'BC3Decompressor',
    'BC4Decompressor',
    'BC5Decompressor',
]
