"""
Max-heap operations on plain lists.

Mirror of min_heap with the comparator reversed: the largest item sits at
index 0. heapsort() sorts ascending in place.
"""

from typing import Any, List, Optional

from dsakit.algorithms.comparator import Compare, Key, Reverse, resolve_compare
from dsakit.algorithms.heap_on_slice import _heap

__all__ = [
    "is_heap",
    "heapify",
    "heap_pushpop",
    "heap_pop",
    "heapsort",
    "adjust_heap",
]


def _reversed(key: Optional[Key], compare: Optional[Compare]) -> Compare:
    return Reverse(resolve_compare(key, compare))


def is_heap(
    arr: List[Any],
    key: Optional[Key] = None,
    compare: Optional[Compare] = None,
    size: Optional[int] = None
) -> bool:
    """Check whether arr[:size] is a valid max-heap. O(n)."""
    return _heap.is_heap(arr, _reversed(key, compare), _heap.heap_size(arr, size))


def heapify(
    arr: List[Any],
    key: Optional[Key] = None,
    compare: Optional[Compare] = None,
    size: Optional[int] = None
) -> None:
    """Rearrange arr[:size] into a max-heap in place. O(n)."""
    _heap.heapify(arr, _reversed(key, compare), _heap.heap_size(arr, size))


def heap_pushpop(
    arr: List[Any],
    x: Any,
    key: Optional[Key] = None,
    compare: Optional[Compare] = None,
    size: Optional[int] = None
) -> Any:
    """
    Push x onto the heap, then pop and return the largest item. O(log n).

    Returns x itself when the heap is empty or x orders after or equal to the root.
    """
    return _heap.heap_pushpop(arr, x, _reversed(key, compare), _heap.heap_size(arr, size))


def heap_pop(
    arr: List[Any],
    key: Optional[Key] = None,
    compare: Optional[Compare] = None,
    size: Optional[int] = None
) -> int:
    """
    Move the largest item to the end of the heap region. O(log n).

    Returns:
        New heap size; the popped item is at arr[new_size]

    Raises:
        IndexError: If the heap is empty
    """
    return _heap.heap_pop(arr, _reversed(key, compare), _heap.heap_size(arr, size))


def heapsort(
    arr: List[Any],
    key: Optional[Key] = None,
    compare: Optional[Compare] = None,
    size: Optional[int] = None
) -> None:
    """Sort arr[:size] in place in ascending order. O(n log n), not stable."""
    _heap.heap_reverse_sort(arr, _reversed(key, compare), _heap.heap_size(arr, size))


def adjust_heap(
    arr: List[Any],
    idx: int,
    key: Optional[Key] = None,
    compare: Optional[Compare] = None,
    size: Optional[int] = None
) -> bool:
    """
    Restore the max-heap after arr[idx] was changed. O(log n).

    Returns:
        True if any item moved

    Raises:
        IndexError: If idx is outside the heap
    """
    return _heap.adjust_heap(arr, idx, _reversed(key, compare), _heap.heap_size(arr, size))
