"""
Quick sort: binary (Lomuto) and ternary (dual-pivot) variants.

Both recurse only into the smaller partitions and loop over the largest
one, so recursion depth stays O(log n) whatever the input.
"""

from typing import Any, List, Optional, Tuple

from dsakit.algorithms.comparator import Compare, Key, resolve_compare


def binary_quick_sort(
    arr: List[Any],
    key: Optional[Key] = None,
    compare: Optional[Compare] = None
) -> None:
    """
    Sort arr in place with a two-way partition quick sort.

    Average O(n log n), worst case O(n^2). Not stable.

    Example:
        >>> v = [3, 1, 4, 1, 5]
        >>> binary_quick_sort(v)
        >>> v
        [1, 1, 3, 4, 5]
    """
    _binary_quick_sort(arr, 0, len(arr), resolve_compare(key, compare))


def ternary_partition(
    arr: List[Any],
    key: Optional[Key] = None,
    compare: Optional[Compare] = None
) -> Tuple[int, int]:
    """
    Partition arr into three parts around two pivots (Dutch national flag).

    The pivots are the first and last items, swapped first if out of order.

    Returns:
        (i, j) such that arr[i - 1] is pivot 1 and arr[j] is pivot 2,
        arr[:i - 1] <= pivot 1, pivot 1 < arr[i:j] < pivot 2 and
        arr[j + 1:] >= pivot 2

    Raises:
        ValueError: If arr has fewer than two items

    Example:
        >>> v = [3, 1, 4, 1, 5]
        >>> ternary_partition(v)
        (3, 4)
        >>> v
        [1, 1, 3, 4, 5]
    """
    if len(arr) < 2:
        raise ValueError(f"ternary_partition needs at least 2 items, got {len(arr)}")
    return ternary_partition_range(arr, 0, len(arr), resolve_compare(key, compare))


def ternary_quick_sort(
    arr: List[Any],
    key: Optional[Key] = None,
    compare: Optional[Compare] = None
) -> None:
    """
    Sort arr in place with a three-way (dual-pivot) quick sort.

    Average O(n log n). Not stable.
    """
    _ternary_quick_sort(arr, 0, len(arr), resolve_compare(key, compare))


def _partition(arr: List[Any], lo: int, hi: int, compare: Compare) -> int:
    """Lomuto partition of arr[lo:hi]; returns the pivot's final index."""
    mid = (lo + hi - 1) // 2
    arr[mid], arr[hi - 1] = arr[hi - 1], arr[mid]
    pivot = arr[hi - 1]

    store = lo
    for i in range(lo, hi):
        if compare(arr[i], pivot) <= 0:
            arr[store], arr[i] = arr[i], arr[store]
            store += 1
    return store - 1


def _binary_quick_sort(arr: List[Any], lo: int, hi: int, compare: Compare) -> None:
    while hi - lo > 1:
        p = _partition(arr, lo, hi, compare)
        if p - lo < hi - p - 1:
            _binary_quick_sort(arr, lo, p, compare)
            lo = p + 1
        else:
            _binary_quick_sort(arr, p + 1, hi, compare)
            hi = p


def ternary_partition_range(arr: List[Any], lo: int, hi: int, compare: Compare) -> Tuple[int, int]:
    """ternary_partition on arr[lo:hi]; hi - lo must be at least 2."""
    end = hi - 1
    if compare(arr[lo], arr[end]) > 0:
        arr[lo], arr[end] = arr[end], arr[lo]

    # [lo, i): <= pivot 1, [i, j): between, (k, end): >= pivot 2
    i = j = lo + 1
    k = end - 1
    while j <= k:
        if compare(arr[j], arr[lo]) <= 0:
            arr[i], arr[j] = arr[j], arr[i]
            i += 1
            j += 1
        elif compare(arr[j], arr[end]) >= 0:
            arr[j], arr[k] = arr[k], arr[j]
            k -= 1
        else:
            j += 1

    arr[lo], arr[i - 1] = arr[i - 1], arr[lo]
    arr[j], arr[end] = arr[end], arr[j]
    return i, j


def select_pivots(arr: List[Any], lo: int, hi: int) -> None:
    """Move the items at one and two thirds of arr[lo:hi] to its ends."""
    third = (hi - lo) // 3
    if third:
        arr[lo], arr[lo + third] = arr[lo + third], arr[lo]
        arr[hi - 1], arr[hi - 1 - third] = arr[hi - 1 - third], arr[hi - 1]


def _ternary_quick_sort(arr: List[Any], lo: int, hi: int, compare: Compare) -> None:
    while hi - lo > 1:
        select_pivots(arr, lo, hi)
        i, j = ternary_partition_range(arr, lo, hi, compare)
        parts = sorted(((lo, i - 1), (i, j), (j + 1, hi)), key=lambda r: r[1] - r[0])
        for part_lo, part_hi in parts[:2]:
            _ternary_quick_sort(arr, part_lo, part_hi, compare)
        lo, hi = parts[2]
