"""Batch processing of a directory of TCO files"""
from dataclasses import dataclass, field
from pathlib import Path
from threading import Thread
from typing import List, Sequence, TypeVar

from .config import DumpConfig
from .pipeline import process_file
from .sinks import ConsoleSink, ErrorLog

T = TypeVar('T')

SEPARATOR = "\n\n-------------------------------------------------\n"


@dataclass
class BatchResult:
    """Outcome of a batch run"""
    files: List[Path] = field(default_factory=list)
    written: List[Path] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)


def find_tco_files(input_dir: Path, extension: str) -> List[Path]:
    """Regular files directly inside input_dir whose name ends with extension"""
    return sorted(
        path for path in input_dir.iterdir()
        if path.is_file() and path.name.endswith(extension)
    )


def partition(items: Sequence[T], num_workers: int) -> List[Sequence[T]]:
    """
    Split items into contiguous chunks of ceil(len / num_workers) items.

    Trailing workers may receive an empty chunk. The result always has
    num_workers entries.
    """
    chunk_size = (len(items) + num_workers - 1) // num_workers
    chunks = []
    for i in range(num_workers):
        start = min(i * chunk_size, len(items))
        end = min(start + chunk_size, len(items))
        chunks.append(items[start:end])
    return chunks


def _worker(chunk: Sequence[Path], config: DumpConfig, console: ConsoleSink,
            errors: ErrorLog, written: List[Path]) -> None:
    for path in chunk:
        out_path = process_file(path, config, console, errors)
        if out_path is not None:
            written.append(out_path)


def run_batch(files: Sequence[Path], config: DumpConfig, console: ConsoleSink, errors: ErrorLog) -> BatchResult:
    """
    Process files on config.num_threads worker threads

    Each worker owns one contiguous chunk of the file list. A failing file
    only adds an entry to errors.
    """
    chunks = partition(files, config.num_threads)
    written_per_worker: List[List[Path]] = [[] for _ in chunks]

    threads = [
        Thread(target=_worker, args=(chunk, config, console, errors, written))
        for chunk, written in zip(chunks, written_per_worker)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    result = BatchResult(files=list(files), errors=errors.messages)
    for written in written_per_worker:
        result.written.extend(written)
    return result


def print_summary(result: BatchResult, console: ConsoleSink) -> None:
    """Print the collected errors and the closing line"""
    if result.errors:
        console.print(SEPARATOR)
        console.print("The following ERRORS were encountered:\n")
        for message in result.errors:
            console.print(message)

    console.print(SEPARATOR)
    console.print("CacheDumper Finished.")


def dump_directory(config: DumpConfig, console: ConsoleSink) -> BatchResult:
    """
    Find and dump every TCO file of config.input_dir

    The caller makes sure both directories exist.
    """
    files = find_tco_files(config.input_dir, config.extension)
    console.print(f"Found {len(files)} TCO files")

    if not files:
        return BatchResult()

    console.print(f"Using {config.num_threads} threads")

    errors = ErrorLog(console)
    result = run_batch(files, config, console, errors)
    print_summary(result, console)
    return result
