"""
Binary min-heap container.

MinHeap keeps its items in a Python list arranged as a complete binary
tree: the children of index i live at 2i+1 and 2i+2, and no child orders
before its parent. Ordering comes from a comparator callable
compare(a, b) -> int (negative when a comes first), a key function,
or the items' natural ordering.
"""

from typing import Any, Callable, Iterable, List, Optional

__all__ = [
    "MinHeap",
    "PeekMut",
]


def _natural_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _parent(i: int) -> int:
    return (i - 1) >> 1


class MinHeap:
    """
    Priority queue whose root is the smallest item under its comparator.

    Example:
        >>> heap = MinHeap([3, 2, 1, 5, 4])
        >>> heap.pop()
        1
        >>> heap.top()
        2
    """

    def __init__(
        self,
        iterable: Optional[Iterable[Any]] = None,
        compare: Optional[Callable[[Any, Any], int]] = None,
        key: Optional[Callable[[Any], Any]] = None
    ):
        """
        Build a heap, optionally from existing items in O(n).

        Args:
            iterable: Initial items
            compare: Comparator returning negative, zero or positive
            key: Key function; items are ordered by key(item)

        Raises:
            ValueError: If both compare and key are given
        """
        if compare is not None and key is not None:
            raise ValueError("Pass either compare or key, not both")

        if key is not None:
            compare = lambda a, b: _natural_compare(key(a), key(b))

        self._compare = compare or _natural_compare
        self._data: List[Any] = list(iterable) if iterable is not None else []
        self._build()

    def push(self, item: Any) -> None:
        """Add item to the heap. O(log n)."""
        data = self._data
        data.append(item)
        idx = len(data) - 1
        while idx > 0:
            parent = _parent(idx)
            if self._compare(data[parent], data[idx]) <= 0:
                break
            data[parent], data[idx] = data[idx], data[parent]  # pull up
            idx = parent

    def extend(self, items: Iterable[Any]) -> None:
        """Add many items at once, rebuilding the heap. O(n)."""
        self._data.extend(items)
        self._build()

    def pop(self) -> Any:
        """
        Remove and return the root. O(log n).

        Raises:
            IndexError: If the heap is empty
        """
        if not self._data:
            raise IndexError("pop from empty heap")
        data = self._data
        data[0], data[-1] = data[-1], data[0]
        item = data.pop()
        self._sift_down(0)
        return item

    def top(self) -> Optional[Any]:
        """Return the root without removing it, or None if the heap is empty."""
        return self._data[0] if self._data else None

    def peek_mut(self) -> "PeekMut":
        """
        Get a mutable handle to the root.

        Use as a context manager; the heap invariant is restored on exit.

        Raises:
            IndexError: If the heap is empty
        """
        if not self._data:
            raise IndexError("peek_mut on empty heap")
        return PeekMut(self)

    def is_empty(self) -> bool:
        """Return True if the heap holds no items."""
        return not self._data

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __repr__(self) -> str:
        return f"MinHeap({self._data!r})"

    def _build(self) -> None:
        for idx in reversed(range(len(self._data) // 2)):
            self._sift_down(idx)

    def _sift_down(self, idx: int) -> None:
        data = self._data
        size = len(data)
        while True:
            left = 2 * idx + 1
            right = left + 1
            smallest = idx
            if left < size and self._compare(data[left], data[smallest]) < 0:
                smallest = left
            if right < size and self._compare(data[right], data[smallest]) < 0:
                smallest = right
            if smallest == idx:
                return
            data[idx], data[smallest] = data[smallest], data[idx]  # push down
            idx = smallest


class PeekMut:
    """
    Mutable handle to the root of a MinHeap.

    While the handle is open the root may be replaced through `value`.
    Leaving the `with` block (or calling restore()) sifts the root down
    so the heap is valid again.

    Example:
        >>> heap = MinHeap([1, 5, 3])
        >>> with heap.peek_mut() as root:
        ...     root.value = 9
        >>> heap.top()
        3
    """

    def __init__(self, heap: MinHeap):
        self._heap = heap

    @property
    def value(self) -> Any:
        """Current root item."""
        return self._heap._data[0]

    @value.setter
    def value(self, item: Any) -> None:
        self._heap._data[0] = item

    def restore(self) -> None:
        """Re-establish the heap invariant after the root was changed."""
        self._heap._sift_down(0)

    def __enter__(self) -> "PeekMut":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()
