"""Per-file decode pipeline"""
from pathlib import Path
from typing import Optional

from .config import DumpConfig
from .errors import FileReadError, TCOError
from .sinks import ConsoleSink, ErrorLog
from .tco import TCO
from .writer import write_image


def read_file(path: Path) -> bytes:
    """
    Read a complete input file

    Raises:
        FileReadError: The file is missing or could not be read
    """
    try:
        return path.read_bytes()
    except OSError as e:
        raise FileReadError(f"Failed to read file '{path}': {e}") from e


def dump_file(path: Path, config: DumpConfig, console: ConsoleSink) -> Path:
    """
    Decode one TCO file and write it as TGA

    Returns:
        Path of the written image

    Raises:
        TCOError: Any stage failed, nothing was written
    """
    data = read_file(path)

    tco = TCO.from_bytes(data)
    console.print(str(tco) + "\n")

    pixels = tco.to_image()

    out_path = config.output_path(path)
    write_image(pixels, tco.flip_v, out_path)
    return out_path


def process_file(path: Path, config: DumpConfig, console: ConsoleSink, errors: ErrorLog) -> Optional[Path]:
    """
    Run the pipeline for one file, recording any failure instead of raising

    Returns:
        Path of the written image, or None when the file failed
    """
    console.print(f"\nReading TCO file '{path.name}'")

    try:
        out_path = dump_file(path, config, console)
    except FileReadError as e:
        console.alert("File Read Error", str(e))
        errors.record(path.name, str(e))
        return None
    except TCOError as e:
        errors.record(path.name, str(e))
        return None
    except Exception as e:
        # Last resort, a failing file must never stop the worker
        errors.record(path.name, f"Unexpected error: {e}")
        return None

    console.print(f"Wrote output file '{out_path}'")
    return out_path
