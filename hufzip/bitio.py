"""Bit-level writing and reading over binary streams, most significant bit first."""

from __future__ import annotations

from typing import BinaryIO


class BitWriter:
    """Packs bits into bytes, MSB first, and writes them to a binary stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._buffer = 0
        self._count = 0

    def write_bit(self, bit) -> None:
        """Append one bit (any truthy value is a one)."""
        self._buffer = ((self._buffer << 1) | (1 if bit else 0)) & 0xFF
        self._count += 1
        if self._count == 8:
            self._stream.write(bytes((self._buffer,)))
            self._buffer = 0
            self._count = 0

    def write_byte(self, byte: int) -> None:
        """Append the eight bits of a byte value."""
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"byte value out of range: {byte}")
        if self._count == 0:
            self._stream.write(bytes((byte,)))
            return
        for shift in range(7, -1, -1):
            self.write_bit((byte >> shift) & 1)

    def flush(self) -> None:
        """Write any pending bits, padded with zeros, and flush the stream."""
        if self._count:
            padded = (self._buffer << (8 - self._count)) & 0xFF
            self._stream.write(bytes((padded,)))
            self._buffer = 0
            self._count = 0
        self._stream.flush()

    def __enter__(self) -> BitWriter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.flush()


class BitReader:
    """Reads bits, MSB first, from a binary stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._buffer = 0
        self._count = 0

    def read_bit(self) -> bool:
        """Return the next bit; raise EOFError when the stream is exhausted."""
        if self._count == 0:
            chunk = self._stream.read(1)
            if not chunk:
                raise EOFError("Unexpected end of file while reading bits.")
            self._buffer = chunk[0]
            self._count = 8
        self._count -= 1
        return bool((self._buffer >> self._count) & 1)

    def read_byte(self) -> int:
        """Return the next eight bits as a byte value."""
        value = 0
        for _ in range(8):
            value = (value << 1) | self.read_bit()
        return value