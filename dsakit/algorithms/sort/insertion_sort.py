"""
Insertion sort.

Stable, in place, O(n^2). Also used by intro_sort and tim_sort for short ranges.
"""

from typing import Any, List, Optional

from dsakit.algorithms.comparator import Compare, Key, resolve_compare


def insertion_sort(
    arr: List[Any],
    key: Optional[Key] = None,
    compare: Optional[Compare] = None
) -> None:
    """
    Sort arr in place with insertion sort.

    Args:
        arr: List to sort
        key: Optional key function
        compare: Optional comparator (negative, zero, positive)

    Example:
        >>> v = [3, 1, 4, 1, 5]
        >>> insertion_sort(v)
        >>> v
        [1, 1, 3, 4, 5]
    """
    insertion_sort_range(arr, 0, len(arr), resolve_compare(key, compare))


def insertion_sort_range(arr: List[Any], lo: int, hi: int, compare: Compare) -> None:
    """Sort arr[lo:hi] in place. Items equal to an earlier item stay after it."""
    for i in range(lo + 1, hi):
        item = arr[i]
        j = i
        while j > lo and compare(arr[j - 1], item) > 0:
            arr[j] = arr[j - 1]
            j -= 1
        arr[j] = item
