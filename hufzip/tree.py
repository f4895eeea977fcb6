"""Huffman tree construction and the compressed file format.

Format: a 4-byte big-endian original length, the tree in pre-order
(bit 1 followed by the byte for a leaf, bit 0 for an internal node),
then the code bits of every input byte, zero-padded to a whole byte.
"""

from __future__ import annotations

import io
import os
from collections.abc import Iterator, Sequence
from typing import Optional

from hufzip.bitio import BitReader, BitWriter
from hufzip.frequency import FrequencyCounter
from hufzip.minheap import MinHeap
from hufzip.node import HuffmanNode

_MAX_SIZE = 0xFFFFFFFF


def _assign_codes(node: HuffmanNode, prefix: str = "") -> Iterator[tuple[int, str]]:
    if node.is_leaf():
        yield node.data, prefix or "0"
        return
    if node.left is not None:
        yield from _assign_codes(node.left, prefix + "0")
    if node.right is not None:
        yield from _assign_codes(node.right, prefix + "1")


def _serialize(writer: BitWriter, node: HuffmanNode) -> None:
    if node.is_leaf():
        writer.write_bit(True)
        writer.write_byte(node.data)
    else:
        writer.write_bit(False)
        _serialize(writer, node.left)
        _serialize(writer, node.right)


def _read_node(reader: BitReader) -> tuple[HuffmanNode, bool]:
    if reader.read_bit():
        return HuffmanNode.leaf(reader.read_byte(), 0), False
    return HuffmanNode.internal(0, None, None), True


def _deserialize(reader: BitReader) -> HuffmanNode:
    root, internal = _read_node(reader)
    pending = [root] if internal else []
    while pending:
        parent = pending[-1]
        child, internal = _read_node(reader)
        if parent.left is None:
            parent.left = child
        else:
            parent.right = child
            pending.pop()
        if internal:
            pending.append(child)
    return root


class HuffmanTree:
    """A Huffman code tree together with its byte-to-code map."""

    def __init__(self, root: Optional[HuffmanNode] = None) -> None:
        self.root = root
        self._codes: dict[int, str] = dict(_assign_codes(root)) if root else {}

    @classmethod
    def from_file(cls, path: str | os.PathLike) -> HuffmanTree:
        """Build the tree from the byte frequencies of a file."""
        counter = FrequencyCounter()
        counter.count(path)
        return cls._from_frequencies(counter.frequencies())

    @classmethod
    def from_bytes(cls, data: bytes) -> HuffmanTree:
        """Build the tree from the byte frequencies of ``data``."""
        counter = FrequencyCounter()
        counter.count_bytes(data)
        return cls._from_frequencies(counter.frequencies())

    @classmethod
    def _from_frequencies(cls, freqs: Sequence[int]) -> HuffmanTree:
        leaves = [
            HuffmanNode.leaf(value, freq) for value, freq in enumerate(freqs) if freq > 0
        ]
        if not leaves:
            return cls(None)
        if len(leaves) == 1:
            return cls(leaves[0])
        heap = MinHeap()
        for leaf in leaves:
            heap.insert(leaf)
        while len(heap) > 1:
            left = heap.extract_min()
            right = heap.extract_min()
            heap.insert(HuffmanNode.internal(left.freq + right.freq, left, right))
        return cls(heap.extract_min())

    def code_map(self) -> dict[int, str]:
        """Return the code of every byte value in the tree as a string of '0'/'1'."""
        return dict(self._codes)

    def encode(self, data: bytes) -> bytes:
        """Return the compressed form of ``data``."""
        if self.root is None:
            raise ValueError("Cannot encode with an empty tree.")
        if len(data) > _MAX_SIZE:
            raise ValueError("Input too large for a 32-bit size header.")
        out = io.BytesIO()
        writer = BitWriter(out)
        for byte in len(data).to_bytes(4, "big"):
            writer.write_byte(byte)
        _serialize(writer, self.root)
        for byte in data:
            code = self._codes.get(byte)
            if code is None:
                raise ValueError(f"No Huffman code for character: {byte}")
            for bit in code:
                writer.write_bit(bit == "1")
        writer.flush()
        return out.getvalue()

    def compress(self, input_path: str | os.PathLike, output_path: str | os.PathLike) -> None:
        """Compress the file at ``input_path`` into ``output_path``."""
        with open(input_path, "rb") as source:
            data = source.read()
        encoded = self.encode(data)
        with open(output_path, "wb") as target:
            target.write(encoded)

    @staticmethod
    def decode(data: bytes) -> bytes:
        """Return the original bytes from a compressed payload."""
        reader = BitReader(io.BytesIO(data))
        size = 0
        for _ in range(4):
            size = (size << 8) | reader.read_byte()
        root = _deserialize(reader)
        if root.is_leaf():
            return bytes((root.data,)) * size
        out = bytearray()
        current = root
        while len(out) < size:
            current = current.right if reader.read_bit() else current.left
            if current is None:
                raise ValueError("Tree traversal failed.")
            if current.is_leaf():
                out.append(current.data)
                current = root
        return bytes(out)

    @staticmethod
    def decompress(input_path: str | os.PathLike, output_path: str | os.PathLike) -> None:
        """Decompress the file at ``input_path`` into ``output_path``."""
        with open(input_path, "rb") as source:
            data = source.read()
        decoded = HuffmanTree.decode(data)
        with open(output_path, "wb") as target:
            target.write(decoded)