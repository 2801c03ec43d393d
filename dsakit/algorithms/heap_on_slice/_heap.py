"""
Binary heap primitives shared by min_heap and max_heap.

Every function works on the prefix arr[:size] of a list, ordered so that
compare(parent, child) <= 0. For a heap of n items, indices [0, n // 2)
are internal nodes and [n // 2, n) are leaves; this holds for n == 0 too.
"""

from typing import Any, List, Optional

from dsakit.algorithms.comparator import Compare


def heap_size(arr: List[Any], size: Optional[int]) -> int:
    if size is None:
        return len(arr)
    if not 0 <= size <= len(arr):
        raise ValueError(f"Heap size {size} out of range for list of length {len(arr)}")
    return size


def is_heap(arr: List[Any], compare: Compare, size: int) -> bool:
    for idx in range(size // 2):
        left, right = 2 * idx + 1, 2 * idx + 2
        if left < size and compare(arr[idx], arr[left]) > 0:
            return False
        if right < size and compare(arr[idx], arr[right]) > 0:
            return False
    return True


def move_upward(arr: List[Any], idx: int, compare: Compare) -> bool:
    """Sift arr[idx] toward the root. Returns True if it moved."""
    moved = False
    while idx > 0:
        parent = (idx - 1) // 2
        if compare(arr[idx], arr[parent]) >= 0:
            break
        arr[idx], arr[parent] = arr[parent], arr[idx]
        idx = parent
        moved = True
    return moved


def move_downward(arr: List[Any], idx: int, compare: Compare, size: int) -> bool:
    """Sift arr[idx] toward the leaves of arr[:size]. Returns True if it moved."""
    moved = False
    while True:
        left = 2 * idx + 1
        right = left + 1
        smallest = idx
        if left < size and compare(arr[left], arr[smallest]) < 0:
            smallest = left
        if right < size and compare(arr[right], arr[smallest]) < 0:
            smallest = right
        if smallest == idx:
            return moved
        arr[idx], arr[smallest] = arr[smallest], arr[idx]
        idx = smallest
        moved = True


def heapify(arr: List[Any], compare: Compare, size: int) -> None:
    for idx in reversed(range(size // 2)):
        move_downward(arr, idx, compare, size)


def heap_pushpop(arr: List[Any], x: Any, compare: Compare, size: int) -> Any:
    # Push then pop: x comes straight back unless the root orders before it.
    if size and compare(arr[0], x) < 0:
        arr[0], x = x, arr[0]
        move_downward(arr, 0, compare, size)
    return x


def heap_pop(arr: List[Any], compare: Compare, size: int) -> int:
    if size == 0:
        raise IndexError("pop from empty heap")
    last = size - 1
    if last:
        arr[0], arr[last] = arr[last], arr[0]
        move_downward(arr, 0, compare, last)
    return last


def heap_reverse_sort(arr: List[Any], compare: Compare, size: int) -> None:
    heapify(arr, compare, size)
    while size:
        size = heap_pop(arr, compare, size)


def adjust_heap(arr: List[Any], idx: int, compare: Compare, size: int) -> bool:
    if not 0 <= idx < size:
        raise IndexError(f"Heap index {idx} out of range for heap of size {size}")
    return move_upward(arr, idx, compare) or move_downward(arr, idx, compare, size)
