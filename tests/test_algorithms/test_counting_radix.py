"""
Unit tests for counting sort and radix sort.
"""

import random

import pytest

from dsakit.algorithms.sort import ascii_scheme, counting_sort, radix_sort, uint_scheme


def test_counting_sort_integers():
    """Test sorting non-negative integers by value."""
    arr = [5, 0, 3, 3, 9, 1, 0]
    counting_sort(arr)

    assert arr == [0, 0, 1, 3, 3, 5, 9]


def test_counting_sort_by_key_is_stable():
    """Test sorting strings by length keeps ties in input order."""
    words = ["counting", "hello", "a", "bb", "c", "world"]
    counting_sort(words, key=len)

    assert words == ["a", "c", "bb", "hello", "world", "counting"]


@pytest.mark.parametrize("cached", [True, False])
def test_counting_sort_uncached(cached):
    """Test both key evaluation strategies agree."""
    rng = random.Random(8)
    records = [(rng.randint(0, 20), i) for i in range(300)]
    expected = sorted(records, key=lambda r: r[0])

    counting_sort(records, key=lambda r: r[0], cached=cached)

    assert records == expected


@pytest.mark.parametrize("bad", [[3, -1, 2], [1, 2.5, 0], [-7]])
def test_counting_sort_invalid_keys_leave_list_unchanged(bad):
    """Test invalid keys are rejected before anything moves."""
    arr = list(bad)

    with pytest.raises(ValueError, match="non-negative integers"):
        counting_sort(arr)

    assert arr == bad


def test_counting_sort_invalid_key_function():
    """Test a key function producing a negative key."""
    arr = ["x", "yy", "zzz"]

    with pytest.raises(ValueError):
        counting_sort(arr, key=lambda s: 1 - len(s), cached=False)

    assert arr == ["x", "yy", "zzz"]


def test_counting_sort_trivial():
    """Test empty and single-item lists."""
    empty = []
    counting_sort(empty)
    assert empty == []

    single = [4]
    counting_sort(single)
    assert single == [4]


def test_radix_sort_uint_scheme():
    """Test digit-wise radix sort of unsigned integers."""
    rng = random.Random(16)
    arr = [rng.getrandbits(32) for _ in range(500)] + [0, 0xFFFFFFFF]
    expected = sorted(arr)

    radix_sort(arr, uint_scheme(width=32, radix_bits=8))

    assert arr == expected


def test_radix_sort_custom_projections():
    """Test magnitude first, then sign; negatives end up by increasing magnitude."""
    arr = [3, -1, 7, -4, 0, -5, 1, -2]

    radix_sort(arr, [abs, lambda x: 0 if x < 0 else 1])

    assert arr == [-1, -2, -4, -5, 0, 1, 3, 7]


def test_radix_sort_ascii_scheme():
    """Test lexicographic order for str and bytes."""
    words = ["banana", "apple", "app", "cherry", "a", "band"]
    radix_sort(words, ascii_scheme(max(len(w) for w in words)))
    assert words == sorted(words)

    raw = [b"zeta", b"alpha", b"al", b"beta"]
    radix_sort(raw, ascii_scheme(5))
    assert raw == sorted(raw)


def test_uint_scheme_validation():
    """Test non-positive widths are rejected."""
    with pytest.raises(ValueError, match="must be positive"):
        uint_scheme(width=0)

    with pytest.raises(ValueError):
        uint_scheme(radix_bits=-1)

    assert len(uint_scheme(width=32, radix_bits=8)) == 4
