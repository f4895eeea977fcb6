# hufzip

hufzip compresses files with Huffman coding and restores them byte for byte.
You can run it as a command or call it from Python.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package gives you the `hufzip` command. It takes an operation
letter, an input file and an output file:

```
hufzip c original.txt compressed.huf
hufzip d compressed.huf decompressed.txt
```

- `c` or `C` compresses the input into the output and prints
  `File compressed successfully!`.
- `d` or `D` decompresses the input into the output and prints
  `File decompressed successfully!`.
- Any other letter prints a reminder of the valid choices and exits with
  status 1.

If a file cannot be opened, the input cannot be encoded, or a compressed file
is damaged or cut short, the command prints `Error: ...` to standard error and
exits with status 1. On success it exits with status 0.

To see the usage summary:

```
hufzip --help
```

## Python API

```python
from hufzip.tree import HuffmanTree

# Build a tree from a file's byte frequencies, then compress the file with it.
tree = HuffmanTree.from_file("original.txt")
tree.compress("original.txt", "compressed.huf")

# Decompressing needs no tree: the compressed file carries its own.
HuffmanTree.decompress("compressed.huf", "decompressed.txt")
```

You can also work on bytes in memory:

```python
from hufzip.tree import HuffmanTree

data = b"abracadabra"
tree = HuffmanTree.from_bytes(data)
packed = tree.encode(data)
assert HuffmanTree.decode(packed) == data

print(tree.code_map())  # byte value -> its code as a string of '0' and '1'
```

`encode` raises `ValueError` when the tree is empty, when a byte has no code
in the tree, or when the input is longer than a 32-bit length can record.
`decode` raises `EOFError` when the data ends too soon and `ValueError` when
the bits do not lead to a leaf of the stored tree.

The modules also expose the parts the codec is built from:

- `hufzip.node.HuffmanNode`: a tree node, made with `HuffmanNode.leaf(data, freq)`
  or `HuffmanNode.internal(freq, left, right)`; `is_leaf()` tells them apart.
- `hufzip.minheap.MinHeap`: a priority queue of nodes ordered by frequency,
  with `insert`, `extract_min` (raises `IndexError` when empty), `len()` and
  truth testing.
- `hufzip.bitio.BitWriter` and `hufzip.bitio.BitReader`: write and read single
  bits and bytes on a binary stream, most significant bit first. `BitWriter`
  is a context manager that flushes pending bits, zero-padded, on exit.
- `hufzip.frequency.FrequencyCounter`: counts how often each byte value occurs
  in a file (`count`) or a bytes object (`count_bytes`); `frequencies()` gives
  all 256 counts and `unique_count()` the number of distinct values seen.

## File format

A compressed file has three parts, one after the other:

1. The length of the original data as a 4-byte big-endian unsigned integer.
2. The Huffman tree in pre-order. An internal node is written as the bit `0`,
   followed by its left and then its right subtree. A leaf is written as the
   bit `1`, followed by the 8 bits of its byte.
3. The code of each input byte in turn, where `0` means go left and `1` means
   go right. The last byte is padded with zero bits.

If the input holds only one distinct byte value, that byte gets the code `0`,
and decompression repeats it as many times as the stored length says.

## Limitations

- An empty file cannot be compressed: it yields an empty tree, and encoding
  with an empty tree raises `ValueError`.
- Inputs must be smaller than 4 GiB, the largest length the header can hold.
- Whole files are read into memory; there is no streaming mode.