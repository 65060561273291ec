"""Tests for text chunking."""

import pytest

from multilities.errors import InvalidArgumentError
from multilities.text.chunks import split_equally, split_every

TEXTS = ["", "a", "123456789", "0123456789", "The quick brown fox jumps over the lazy dog"]


def test_split_every_from_left():
    assert split_every("123456789", 3) == ["123", "456", "789"]
    assert split_every("123456789", 4) == ["1234", "5678", "9"]
    assert split_every("123456789", 5) == ["12345", "6789"]
    assert split_every("12", 5) == ["12"]
    assert split_every("", 3) == []


def test_split_every_from_right():
    assert split_every("123456789", 4, start_from_right=True) == ["1", "2345", "6789"]
    assert split_every("1234567", 3, start_from_right=True) == ["1", "234", "567"]
    assert split_every("123456", 3, start_from_right=True) == ["123", "456"]


@pytest.mark.parametrize("text", TEXTS)
@pytest.mark.parametrize("length", [1, 2, 3, 7, 50])
@pytest.mark.parametrize("start_from_right", [False, True])
def test_split_every_pieces(text, length, start_from_right):
    pieces = split_every(text, length, start_from_right)
    assert "".join(pieces) == text
    full = pieces[1:] if start_from_right else pieces[:-1]
    assert all(len(piece) == length for piece in full)
    assert all(0 < len(piece) <= length for piece in pieces)


@pytest.mark.parametrize("length", [0, -2])
def test_split_every_rejects_non_positive_length(length):
    with pytest.raises(InvalidArgumentError):
        split_every("123", length)


def test_split_equally():
    assert split_equally("123456789", 3) == ["123", "456", "789"]
    assert split_equally("0123456789", 4) == ["012", "345", "67", "89"]
    assert split_equally("0123456789", 5) == ["01", "23", "45", "67", "89"]
    assert split_equally("ab", 4) == ["a", "b", "", ""]


@pytest.mark.parametrize("text", TEXTS)
@pytest.mark.parametrize("n", [1, 2, 3, 4, 11])
def test_split_equally_pieces(text, n):
    pieces = split_equally(text, n)
    assert len(pieces) == n
    assert "".join(pieces) == text
    lengths = [len(piece) for piece in pieces]
    assert max(lengths) - min(lengths) <= 1
    assert lengths == sorted(lengths, reverse=True)


def test_split_equally_rejects_zero_chunks():
    with pytest.raises(InvalidArgumentError):
        split_equally("abc", 0)
