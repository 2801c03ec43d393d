"""
Tim sort.

Splits the list into natural runs (strictly descending runs are reversed),
extends short runs to the minimum run length with insertion sort, and
merges runs kept on a stack so that, from the top, each run is shorter
than the one below it and shorter than the sum of the two below it.
"""

from typing import Any, List, Optional, Tuple

from dsakit.algorithms.comparator import Compare, Key, resolve_compare
from dsakit.algorithms.sort.insertion_sort import insertion_sort_range

MAX_MIN_RUN = 64

Run = Tuple[int, int]  # (start, length)


def tim_sort(
    arr: List[Any],
    key: Optional[Key] = None,
    compare: Optional[Compare] = None
) -> None:
    """
    Sort arr in place with a stable tim sort. O(n log n), O(n) on sorted input.

    Args:
        arr: List to sort
        key: Optional key function
        compare: Optional comparator (negative, zero, positive)
    """
    compare = resolve_compare(key, compare)
    n = len(arr)
    if n < 2:
        return

    min_run = _min_run_length(n)
    runs: List[Run] = []

    lo = 0
    while lo < n:
        run_len = _count_run_and_make_ascending(arr, lo, n, compare)
        if run_len < min_run:
            forced = min(min_run, n - lo)
            insertion_sort_range(arr, lo, lo + forced, compare)
            run_len = forced

        runs.append((lo, run_len))
        _merge_collapse(arr, runs, compare)
        lo += run_len

    while len(runs) > 1:
        i = len(runs) - 2
        if i > 0 and runs[i - 1][1] < runs[i + 1][1]:
            i -= 1
        _merge_at(arr, runs, i, compare)


def _min_run_length(n: int) -> int:
    """Halve n until it is at most MAX_MIN_RUN."""
    min_run = n
    while min_run > MAX_MIN_RUN:
        min_run >>= 1
    return min_run


def _count_run_and_make_ascending(arr: List[Any], lo: int, hi: int, compare: Compare) -> int:
    run_hi = lo + 1
    if run_hi == hi:
        return 1

    if compare(arr[run_hi], arr[lo]) < 0:
        # Strictly descending only, so reversing keeps equal items in order
        run_hi += 1
        while run_hi < hi and compare(arr[run_hi], arr[run_hi - 1]) < 0:
            run_hi += 1
        arr[lo:run_hi] = arr[lo:run_hi][::-1]
    else:
        run_hi += 1
        while run_hi < hi and compare(arr[run_hi], arr[run_hi - 1]) >= 0:
            run_hi += 1

    return run_hi - lo


def _merge_collapse(arr: List[Any], runs: List[Run], compare: Compare) -> None:
    while len(runs) > 1:
        i = len(runs) - 2
        if (i > 0 and runs[i - 1][1] <= runs[i][1] + runs[i + 1][1]) or \
                (i > 1 and runs[i - 2][1] <= runs[i - 1][1] + runs[i][1]):
            if runs[i - 1][1] < runs[i + 1][1]:
                i -= 1
        elif runs[i][1] > runs[i + 1][1]:
            break
        _merge_at(arr, runs, i, compare)


def _merge_at(arr: List[Any], runs: List[Run], i: int, compare: Compare) -> None:
    start_a, len_a = runs[i]
    start_b, len_b = runs[i + 1]
    runs[i] = (start_a, len_a + len_b)
    del runs[i + 1]
    _merge_runs(arr, start_a, start_b, start_b + len_b, compare)


def _merge_runs(arr: List[Any], lo: int, mid: int, hi: int, compare: Compare) -> None:
    left = arr[lo:mid]
    i, j, k = 0, mid, lo
    while i < len(left) and j < hi:
        if compare(arr[j], left[i]) < 0:
            arr[k] = arr[j]
            j += 1
        else:
            arr[k] = left[i]
            i += 1
        k += 1
    # Leftover right-run items are already in place
    arr[k:k + len(left) - i] = left[i:]
