import pytest

from hufzip.frequency import TABLE_SIZE, FrequencyCounter


def test_counts_each_byte():
    counter = FrequencyCounter()
    counter.count_bytes(b"hello")
    freqs = counter.frequencies()
    assert len(freqs) == TABLE_SIZE
    assert freqs[ord("l")] == 2
    assert freqs[ord("h")] == 1
    assert freqs[ord("z")] == 0
    assert counter.unique_count() == 4
    assert sum(freqs) == len(b"hello")


def test_counts_accumulate():
    counter = FrequencyCounter()
    counter.count_bytes(b"ab")
    counter.count_bytes(b"bc")
    freqs = counter.frequencies()
    assert freqs[ord("b")] == 2
    assert counter.unique_count() == 3


def test_empty_counter():
    counter = FrequencyCounter()
    assert counter.unique_count() == 0
    assert sum(counter.frequencies()) == 0


def test_counts_file(tmp_path):
    data = bytes(range(256)) + b"\x00\x00"
    path = tmp_path / "input.bin"
    path.write_bytes(data)
    counter = FrequencyCounter()
    counter.count(path)
    assert counter.unique_count() == 256
    assert counter.frequencies()[0] == 3
    assert sum(counter.frequencies()) == len(data)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        FrequencyCounter().count(tmp_path / "absent.txt")