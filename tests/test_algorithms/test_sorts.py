"""
Unit tests for the comparison sorts.
Every sort must agree with sorted() on the same input.
"""

import random

import pytest

from dsakit.algorithms.comparator import ReverseComparator
from dsakit.algorithms.sort import (
    binary_quick_sort,
    insertion_sort,
    intro_sort,
    merge_sort,
    ternary_partition,
    ternary_quick_sort,
    tim_sort,
)
from dsakit.algorithms.sort.tim_sort import _min_run_length

COMPARISON_SORTS = [
    insertion_sort,
    merge_sort,
    binary_quick_sort,
    ternary_quick_sort,
    intro_sort,
    tim_sort,
]

STABLE_SORTS = [insertion_sort, merge_sort, tim_sort]


def make_inputs():
    rng = random.Random(2024)
    return {
        "empty": [],
        "single": [1],
        "pair": [2, 1],
        "random": [rng.randint(-10_000, 10_000) for _ in range(500)],
        "sorted": list(range(300)),
        "reversed": list(range(300, 0, -1)),
        "duplicates": [rng.randint(0, 4) for _ in range(400)],
        "all_equal": [7] * 100,
        "sawtooth": [i % 17 for i in range(600)],
        "organ_pipe": list(range(150)) + list(range(150, 0, -1)),
    }


@pytest.mark.parametrize("sort", COMPARISON_SORTS, ids=lambda f: f.__name__)
@pytest.mark.parametrize("case", list(make_inputs()))
def test_matches_sorted(sort, case):
    """Test each sort against sorted() on varied inputs."""
    arr = make_inputs()[case]
    expected = sorted(arr)

    assert sort(arr) is None
    assert arr == expected


@pytest.mark.parametrize("sort", COMPARISON_SORTS, ids=lambda f: f.__name__)
def test_key_and_compare(sort):
    """Test key= and compare= orderings."""
    words = ["banana", "Apple", "cherry", "date", "Fig"]

    by_key = list(words)
    sort(by_key, key=str.lower)
    assert by_key == sorted(words, key=str.lower)

    descending = [5, 1, 4, 2, 3]
    sort(descending, compare=ReverseComparator())
    assert descending == [5, 4, 3, 2, 1]

    with pytest.raises(ValueError):
        sort([2, 1], key=abs, compare=ReverseComparator())


@pytest.mark.parametrize("sort", STABLE_SORTS, ids=lambda f: f.__name__)
def test_stability(sort):
    """Test equal keys keep their original order."""
    rng = random.Random(99)
    records = [(rng.randint(0, 9), i) for i in range(1000)]

    sort(records, key=lambda r: r[0])

    assert records == sorted(records, key=lambda r: r[0])
    for (k1, i1), (k2, i2) in zip(records, records[1:]):
        if k1 == k2:
            assert i1 < i2


def test_tim_sort_descending_runs_stay_stable():
    """Test equal items inside a reversed run keep their order."""
    records = [(3, "a"), (2, "b"), (2, "c"), (1, "d")] * 50

    tim_sort(records, key=lambda r: r[0])

    assert records == sorted(records, key=lambda r: r[0])


def test_ternary_partition_example():
    """Test the dual-pivot partition on a small list."""
    v = [3, 1, 4, 1, 5]

    assert ternary_partition(v) == (3, 4)
    assert v == [1, 1, 3, 4, 5]


def test_ternary_partition_layout():
    """Test the three regions around both pivots."""
    rng = random.Random(5)
    for _ in range(50):
        v = [rng.randint(0, 20) for _ in range(rng.randint(2, 40))]
        i, j = ternary_partition(v)
        p1, p2 = v[i - 1], v[j]

        assert p1 <= p2
        assert all(x <= p1 for x in v[:i - 1])
        assert all(p1 < x < p2 for x in v[i:j])
        assert all(x >= p2 for x in v[j + 1:])


def test_ternary_partition_too_short():
    """Test partitioning fewer than two items."""
    with pytest.raises(ValueError, match="at least 2"):
        ternary_partition([1])


def test_intro_sort_adversarial_input():
    """Test intro sort on many equal items and long inputs."""
    arr = [0, 1] * 2000 + list(range(5000, 0, -1))
    expected = sorted(arr)

    intro_sort(arr)

    assert arr == expected


@pytest.mark.parametrize("n, expected", [(0, 0), (10, 10), (64, 64), (65, 32), (100, 50), (1000, 62)])
def test_min_run_length(n, expected):
    """Test minimum run length by halving."""
    assert _min_run_length(n) == expected
