"""Dump configuration"""
import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_INPUT_DIR = Path('./Textures')
DEFAULT_OUTPUT_DIR = Path('./Textures_OUT')
TCO_EXTENSION = '.tco'
OUTPUT_EXTENSION = '.tga'


def default_thread_count() -> int:
    """One worker per hardware thread, at least one"""
    return max(os.cpu_count() or 1, 1)


@dataclass
class DumpConfig:
    """
    Settings of one dump run

    Attributes:
        input_dir: Directory scanned (non-recursively) for TCO files
        output_dir: Directory receiving one TGA per input file
        extension: File name suffix of the input files
        num_threads: Number of worker threads
    """
    input_dir: Path = DEFAULT_INPUT_DIR
    output_dir: Path = DEFAULT_OUTPUT_DIR
    extension: str = TCO_EXTENSION
    num_threads: int = field(default_factory=default_thread_count)

    def __post_init__(self) -> None:
        self.input_dir = Path(self.input_dir)
        self.output_dir = Path(self.output_dir)
        if self.num_threads < 1:
            raise ValueError(f"num_threads must be at least 1, got {self.num_threads}")

    def output_path(self, source: Path) -> Path:
        """Output file for a source file: the full source name plus .tga"""
        return self.output_dir / f"{source.name}{OUTPUT_EXTENSION}"
