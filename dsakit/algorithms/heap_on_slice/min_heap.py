"""
Min-heap operations on plain lists.

The smallest item sits at index 0 and every parent orders before or
equal to its children. No container is involved: each function works in
place on arr[:size] (size defaults to len(arr)), so a list can serve as
a priority queue, be sorted, or have single keys adjusted without copying.

Every function accepts key= or compare= to override natural ordering.

Example:
    >>> arr = [3, 1, 4, 1, 5, 9, 2, 6]
    >>> heapify(arr)
    >>> arr[0]
    1
    >>> heap_pushpop(arr, 0)
    0
    >>> size = heap_pop(arr)   # root moved to arr[size]
    >>> is_heap(arr, size=size)
    True
"""

from typing import Any, List, Optional

from dsakit.algorithms.comparator import Compare, Key, resolve_compare
from dsakit.algorithms.heap_on_slice import _heap

__all__ = [
    "is_heap",
    "heapify",
    "heap_pushpop",
    "heap_pop",
    "heap_reverse_sort",
    "adjust_heap",
]


def is_heap(
    arr: List[Any],
    key: Optional[Key] = None,
    compare: Optional[Compare] = None,
    size: Optional[int] = None
) -> bool:
    """
    Check whether arr[:size] is a valid min-heap. O(n).

    Empty and single-item lists are always heaps.
    """
    return _heap.is_heap(arr, resolve_compare(key, compare), _heap.heap_size(arr, size))


def heapify(
    arr: List[Any],
    key: Optional[Key] = None,
    compare: Optional[Compare] = None,
    size: Optional[int] = None
) -> None:
    """Rearrange arr[:size] into a min-heap in place. O(n)."""
    _heap.heapify(arr, resolve_compare(key, compare), _heap.heap_size(arr, size))


def heap_pushpop(
    arr: List[Any],
    x: Any,
    key: Optional[Key] = None,
    compare: Optional[Compare] = None,
    size: Optional[int] = None
) -> Any:
    """
    Push x onto the heap, then pop and return the smallest item. O(log n).

    Returns x itself when the heap is empty or x orders before or equal
    to the root; the heap is left untouched in that case.
    """
    return _heap.heap_pushpop(arr, x, resolve_compare(key, compare), _heap.heap_size(arr, size))


def heap_pop(
    arr: List[Any],
    key: Optional[Key] = None,
    compare: Optional[Compare] = None,
    size: Optional[int] = None
) -> int:
    """
    Move the smallest item to the end of the heap region. O(log n).

    Args:
        arr: List holding a min-heap in arr[:size]
        size: Heap length, defaults to len(arr)

    Returns:
        New heap size; the popped item is at arr[new_size]

    Raises:
        IndexError: If the heap is empty
    """
    return _heap.heap_pop(arr, resolve_compare(key, compare), _heap.heap_size(arr, size))


def heap_reverse_sort(
    arr: List[Any],
    key: Optional[Key] = None,
    compare: Optional[Compare] = None,
    size: Optional[int] = None
) -> None:
    """
    Sort arr[:size] in place in descending order using heapsort. O(n log n).

    For ascending order use max_heap.heapsort.
    """
    _heap.heap_reverse_sort(arr, resolve_compare(key, compare), _heap.heap_size(arr, size))


def adjust_heap(
    arr: List[Any],
    idx: int,
    key: Optional[Key] = None,
    compare: Optional[Compare] = None,
    size: Optional[int] = None
) -> bool:
    """
    Restore the heap after arr[idx] was changed (increase/decrease key). O(log n).

    Returns:
        True if any item moved

    Raises:
        IndexError: If idx is outside the heap
    """
    return _heap.adjust_heap(arr, idx, resolve_compare(key, compare), _heap.heap_size(arr, size))
