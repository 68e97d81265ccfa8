"""Command-line entry point for compressing and decompressing files."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from huffcode.huffman import compress_file, decompress_file

_DEFAULT_PATHS = {
    "compress": (Path("../input.txt"), Path("../output.txt")),
    "decompress": (Path("../output.txt"), Path("../output2.txt")),
}


def _parse(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="huffcode", description="Compress or decompress a file with Huffman coding."
    )
    parser.add_argument(
        "mode", nargs="?", help="'compress' or 'decompress'; read from stdin when omitted"
    )
    parser.add_argument("-i", "--input", type=Path, help="file to read")
    parser.add_argument("-o", "--output", type=Path, help="file to write")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the command; return the process exit status."""
    args = _parse(argv)
    mode = args.mode
    if mode is None:
        words = sys.stdin.read().split()
        mode = words[0] if words else ""
    if mode not in _DEFAULT_PATHS:
        return 0

    default_input, default_output = _DEFAULT_PATHS[mode]
    source = args.input or default_input
    target = args.output or default_output

    start = time.process_time()
    try:
        if mode == "compress":
            compress_file(source, target)
        else:
            decompress_file(source, target)
    except (OSError, ValueError) as exc:
        print(f"huffcode: {exc}", file=sys.stderr)
        return 1
    elapsed = time.process_time() - start

    source_size = source.stat().st_size
    target_size = target.stat().st_size
    print(f"Time taken: {elapsed}sec")
    if mode == "compress":
        ratio = target_size / source_size if source_size else float("inf")
        print(f"Input File Size : {source_size} bytes.")
        print(f"Compressed File Size : {target_size} bytes.")
        print(f"Compression Ratio : {ratio}")
    else:
        print(f"Input File (Compressed) Size : {source_size} bytes.")
        print(f"DeCompressed File Size : {target_size} bytes.")
    return 0


if __name__ == "__main__":
    sys.exit(main())