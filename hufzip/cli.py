"""Command line entry point: compress or decompress a file."""

from __future__ import annotations

import argparse
import sys

from hufzip.tree import HuffmanTree


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hufzip", description="Compress or decompress a file with Huffman coding."
    )
    parser.add_argument("operation", help="c to compress, d to decompress")
    parser.add_argument("input", help="file to read")
    parser.add_argument("output", help="file to write")
    return parser


def main(argv=None) -> int:
    """Run the command and return its exit status."""
    args = _build_parser().parse_args(argv)
    choice = args.operation
    try:
        if choice in ("c", "C"):
            tree = HuffmanTree.from_file(args.input)
            tree.compress(args.input, args.output)
            print("File compressed successfully!")
        elif choice in ("d", "D"):
            HuffmanTree.decompress(args.input, args.output)
            print("File decompressed successfully!")
        else:
            print("Invalid choice. Please enter 'c' for compress or 'd' for decompress.")
            return 1
    except (OSError, ValueError, EOFError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())