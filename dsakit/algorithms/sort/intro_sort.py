"""
Intro sort.

Ternary quick sort with a recursion budget of 2 * floor(log2 n).
Ranges shorter than INSERTION_THRESHOLD are finished with insertion
sort; a range that exhausts the budget is heapsorted.
"""

from typing import Any, List, Optional

from dsakit.algorithms.comparator import Compare, Key, resolve_compare
from dsakit.algorithms.heap_on_slice import max_heap
from dsakit.algorithms.sort.insertion_sort import insertion_sort_range
from dsakit.algorithms.sort.quick_sort import select_pivots, ternary_partition_range

INSERTION_THRESHOLD = 16


def intro_sort(
    arr: List[Any],
    key: Optional[Key] = None,
    compare: Optional[Compare] = None
) -> None:
    """
    Sort arr in place with intro sort. O(n log n) worst case, not stable.

    Args:
        arr: List to sort
        key: Optional key function
        compare: Optional comparator (negative, zero, positive)

    Example:
        >>> v = [3, 1, 4, 1, 5]
        >>> intro_sort(v)
        >>> v
        [1, 1, 3, 4, 5]
    """
    n = len(arr)
    if n == 0:
        return
    max_depth = 2 * (n.bit_length() - 1)
    _intro_sort(arr, 0, n, resolve_compare(key, compare), max_depth)


def _intro_sort(arr: List[Any], lo: int, hi: int, compare: Compare, depth: int) -> None:
    if hi - lo < INSERTION_THRESHOLD:
        insertion_sort_range(arr, lo, hi, compare)
        return
    if depth == 0:
        _heapsort_range(arr, lo, hi, compare)
        return

    select_pivots(arr, lo, hi)
    i, j = ternary_partition_range(arr, lo, hi, compare)

    _intro_sort(arr, lo, i - 1, compare, depth - 1)
    _intro_sort(arr, i, j, compare, depth - 1)
    _intro_sort(arr, j + 1, hi, compare, depth - 1)


def _heapsort_range(arr: List[Any], lo: int, hi: int, compare: Compare) -> None:
    chunk = arr[lo:hi]
    max_heap.heapsort(chunk, compare=compare)
    arr[lo:hi] = chunk
