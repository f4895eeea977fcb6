"""A binary min-heap of Huffman nodes ordered by frequency."""

from __future__ import annotations

from hufzip.node import HuffmanNode


class MinHeap:
    """Min-heap keyed on node frequency.

    The sift rules fix how equal frequencies are ordered, which in turn
    fixes the shape of the trees built from it.
    """

    def __init__(self) -> None:
        self._items: list[HuffmanNode] = []

    def insert(self, node: HuffmanNode) -> None:
        """Add a node to the heap."""
        items = self._items
        items.append(node)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[parent].freq <= items[index].freq:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def extract_min(self) -> HuffmanNode:
        """Remove and return the node with the lowest frequency."""
        items = self._items
        if not items:
            raise IndexError("extract_min from an empty heap")
        smallest = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return smallest

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            smallest = index
            left = 2 * index + 1
            right = left + 1
            if left < size and items[left].freq < items[smallest].freq:
                smallest = left
            if right < size and items[right].freq < items[smallest].freq:
                smallest = right
            if smallest == index:
                return
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)