import pytest
from utils.text import chunks, normalize


def test_normalize_default_alphabet():
    assert normalize("Привет,\n  Мир!") == "привет мир"
    assert normalize("Ёлка\t\tи ель") == "ёлка и ель"


def test_normalize_custom_alphabet():
    assert normalize("Hello мир", alphabet="a-z") == "hello "


def test_chunks_keep_trailing_part():
    assert chunks("10010110", 3) == ["100", "101", "10"]
    assert chunks("1001", 2) == ["10", "01"]
    assert chunks("", 8) == []


def test_chunk_size_must_be_positive():
    with pytest.raises(ValueError):
        chunks("10", 0)
