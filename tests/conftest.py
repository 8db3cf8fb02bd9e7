"""Shared fixtures for building TCO files in memory"""
from pathlib import Path
from typing import Callable, Optional

import lz4.block
import pytest

from cachedumper.enums import TCOLayout
from cachedumper.headers import CompressedDataHeader, TCOHeader


def make_tco(
    layout: int,
    width: int,
    height: int,
    payload: bytes,
    flag: int = 4,
    flip_v: bool = False,
    num_mips: int = 1,
    data_header_size: int = 24,
    decompressed_size: Optional[int] = None,
) -> bytes:
    """Build a complete TCO file with an LZ4 block compressed payload"""
    compressed = lz4.block.compress(payload, store_size=False)

    comp = CompressedDataHeader()
    comp.flag = flag
    comp.dataHeaderSize = data_header_size
    comp.compressedSize = len(compressed)
    comp.decompressedSize = len(payload) if decompressed_size is None else decompressed_size

    tco = TCOHeader()
    tco.flag = flag
    tco.width = width
    tco.height = height
    tco.layout = layout
    tco.numMips = num_mips
    tco.flipV = flip_v

    return comp.to_bytes() + tco.to_bytes() + compressed


@pytest.fixture
def build_tco() -> Callable[..., bytes]:
    """Factory fixture returning make_tco"""
    return make_tco


@pytest.fixture
def rgba_tco() -> bytes:
    """2x2 RGBA8 texture with distinct bytes"""
    return make_tco(TCOLayout.RGBA8, 2, 2, bytes(range(16)))


@pytest.fixture
def texture_dirs(tmp_path: Path):
    """Input and output directories for batch runs"""
    input_dir = tmp_path / "Textures"
    output_dir = tmp_path / "Textures_OUT"
    input_dir.mkdir()
    output_dir.mkdir()
    return input_dir, output_dir
