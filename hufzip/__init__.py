"""Huffman-coding file compressor and decompressor, with a command-line tool."""

__version__ = "0.1.0"
__all__ = ["__version__"]