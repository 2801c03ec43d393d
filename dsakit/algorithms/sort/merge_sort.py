"""
Bottom-up merge sort.

Non-recursive: runs of width 1, 2, 4, ... are merged pairwise between
the list and a single scratch buffer of the same length.
"""

from typing import Any, List, Optional

from dsakit.algorithms.comparator import Compare, Key, resolve_compare


def merge_sort(
    arr: List[Any],
    key: Optional[Key] = None,
    compare: Optional[Compare] = None
) -> None:
    """
    Sort arr in place with a stable, non-recursive merge sort. O(n log n).

    Args:
        arr: List to sort
        key: Optional key function
        compare: Optional comparator (negative, zero, positive)
    """
    compare = resolve_compare(key, compare)
    n = len(arr)
    if n <= 1:
        return

    src = list(arr)
    dst = [None] * n
    width = 1
    while width < n:
        for begin in range(0, n, 2 * width):
            mid = min(begin + width, n)
            end = min(begin + 2 * width, n)
            _merge(src, dst, begin, mid, end, compare)
        src, dst = dst, src
        width <<= 1

    arr[:] = src


def _merge(src: List[Any], dst: List[Any], begin: int, mid: int, end: int, compare: Compare) -> None:
    # Ties go to the left run, which keeps the sort stable.
    left, right = begin, mid
    for i in range(begin, end):
        if right == end or (left < mid and compare(src[left], src[right]) <= 0):
            dst[i] = src[left]
            left += 1
        else:
            dst[i] = src[right]
            right += 1
