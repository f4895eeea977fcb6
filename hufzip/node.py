"""Nodes of a Huffman code tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class HuffmanNode:
    """A tree node: a leaf carries a byte value, an internal node two children."""

    data: int
    freq: int
    left: Optional[HuffmanNode] = None
    right: Optional[HuffmanNode] = None

    @classmethod
    def leaf(cls, data: int, freq: int) -> HuffmanNode:
        """Create a leaf holding the byte value ``data``."""
        return cls(data, freq)

    @classmethod
    def internal(
        cls, freq: int, left: Optional[HuffmanNode], right: Optional[HuffmanNode]
    ) -> HuffmanNode:
        """Create an internal node joining two subtrees."""
        return cls(0, freq, left, right)

    def is_leaf(self) -> bool:
        """Return True when the node has no children."""
        return self.left is None and self.right is None