"""Command-line interface for cachedumper"""
import argparse
from pathlib import Path
from typing import List, Optional

from .batch import dump_directory
from .config import DEFAULT_INPUT_DIR, DEFAULT_OUTPUT_DIR, DumpConfig, default_thread_count
from .sinks import ConsoleSink


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='cachedumper',
        description='Convert cached TCO texture files to TGA images',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  cachedumper                                   # Textures/*.tco -> Textures_OUT/*.tga
  cachedumper --input-dir Cache/Textures        # Read from another directory
  cachedumper --output-dir dumped --threads 4   # Custom output, 4 worker threads
        """
    )

    parser.add_argument('--input-dir', type=Path, default=DEFAULT_INPUT_DIR,
                        help=f'Directory containing .tco files (default: {DEFAULT_INPUT_DIR})')
    parser.add_argument('--output-dir', type=Path, default=DEFAULT_OUTPUT_DIR,
                        help=f'Directory for the .tga output (default: {DEFAULT_OUTPUT_DIR})')
    parser.add_argument('--threads', type=int, default=None,
                        help='Number of worker threads (default: one per hardware thread)')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line interface for cachedumper, always returns 0"""
    args = build_parser().parse_args(argv)
    console = ConsoleSink()

    threads = args.threads if args.threads is not None else default_thread_count()
    try:
        config = DumpConfig(input_dir=args.input_dir, output_dir=args.output_dir, num_threads=threads)
    except ValueError as e:
        console.print(f"Error: {e}")
        return 0

    if not config.input_dir.exists():
        console.print(
            f"{config.input_dir} directory did not exist. "
            f"Make sure the program is running in Scrap Mechanic/Cache/ !"
        )
        return 0

    if not config.output_dir.exists():
        try:
            config.output_dir.mkdir()
        except OSError:
            console.print(
                f"failed to create {config.output_dir} directory! Make sure the directory "
                f"has write permissions or create it yourself."
            )
            return 0

    dump_directory(config, console)
    return 0


if __name__ == "__main__":
    main()
