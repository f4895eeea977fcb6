import random

import pytest

from hufzip.minheap import MinHeap
from hufzip.node import HuffmanNode


def test_extracts_in_frequency_order():
    rng = random.Random(1234)
    freqs = [rng.randint(0, 100) for _ in range(200)]
    heap = MinHeap()
    for value, freq in enumerate(freqs):
        heap.insert(HuffmanNode.leaf(value % 256, freq))
    assert len(heap) == len(freqs)
    extracted = [heap.extract_min().freq for _ in range(len(freqs))]
    assert extracted == sorted(freqs)
    assert len(heap) == 0


def test_equal_frequencies_follow_sift_rules():
    a = HuffmanNode.leaf(1, 1)
    b = HuffmanNode.leaf(2, 1)
    c = HuffmanNode.leaf(3, 1)
    heap = MinHeap()
    for node in (a, b, c):
        heap.insert(node)
    order = [heap.extract_min() for _ in range(3)]
    assert order[0] is a
    assert order[1] is c
    assert order[2] is b


def test_extract_from_empty_heap_raises():
    with pytest.raises(IndexError):
        MinHeap().extract_min()


def test_truthiness_tracks_contents():
    heap = MinHeap()
    assert not heap
    heap.insert(HuffmanNode.leaf(0, 5))
    assert heap
    assert len(heap) == 1
    heap.extract_min()
    assert not heap


def test_interleaved_insert_and_extract():
    heap = MinHeap()
    for freq in (5, 3, 8):
        heap.insert(HuffmanNode.leaf(0, freq))
    assert heap.extract_min().freq == 3
    heap.insert(HuffmanNode.leaf(0, 1))
    assert [heap.extract_min().freq for _ in range(3)] == [1, 5, 8]