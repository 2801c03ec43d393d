"""
Unit tests for the MinHeap container.
"""

import random

import pytest

from dsakit.collections import MinHeap, PeekMut


def assert_heap(heap):
    data = heap._data
    for i in range(1, len(data)):
        assert heap._compare(data[(i - 1) // 2], data[i]) <= 0


def drain(heap):
    out = []
    while heap:
        out.append(heap.pop())
    return out


def test_build_and_pop_in_order():
    """Test building from an iterable and popping everything."""
    items = [random.Random(7).randint(0, 100) for _ in range(200)]
    heap = MinHeap(items)

    assert len(heap) == 200
    assert_heap(heap)
    assert drain(heap) == sorted(items)
    assert heap.is_empty()


def test_push_keeps_invariant():
    """Test push restores the heap after every insertion."""
    rng = random.Random(11)
    heap = MinHeap()
    for _ in range(100):
        heap.push(rng.randint(-50, 50))
        assert_heap(heap)

    assert len(heap) == 100


def test_extend():
    """Test extend adds items and rebuilds."""
    heap = MinHeap([5, 3])
    heap.extend([4, 1, 2])

    assert_heap(heap)
    assert heap.top() == 1
    assert drain(heap) == [1, 2, 3, 4, 5]


def test_empty_heap():
    """Test empty-heap behaviour."""
    heap = MinHeap()

    assert heap.top() is None
    assert not heap
    assert heap.is_empty()

    with pytest.raises(IndexError, match="empty heap"):
        heap.pop()

    with pytest.raises(IndexError):
        heap.peek_mut()


def test_custom_ordering():
    """Test compare= and key= orderings."""
    by_distance = MinHeap([1, 9, 4, 6], compare=lambda a, b: abs(a - 5) - abs(b - 5))
    assert by_distance.pop() in (4, 6)

    by_key = MinHeap(["ccc", "a", "bb"], key=len)
    assert drain(by_key) == ["a", "bb", "ccc"]

    max_first = MinHeap([1, 3, 2], compare=lambda a, b: b - a)
    assert drain(max_first) == [3, 2, 1]


def test_compare_and_key_rejected():
    """Test passing both compare and key."""
    with pytest.raises(ValueError, match="not both"):
        MinHeap(compare=lambda a, b: 0, key=len)


def test_peek_mut_restores_invariant():
    """Test replacing the root through peek_mut."""
    heap = MinHeap([1, 5, 3, 7, 4])

    with heap.peek_mut() as root:
        assert isinstance(root, PeekMut)
        assert root.value == 1
        root.value = 10

    assert_heap(heap)
    assert heap.top() == 3
    assert drain(heap) == [3, 4, 5, 7, 10]


def test_peek_mut_explicit_restore():
    """Test restore() without a with block."""
    heap = MinHeap([2, 8, 6])
    root = heap.peek_mut()
    root.value = 9
    root.restore()

    assert heap.top() == 6
    assert_heap(heap)


def test_repr():
    """Test repr shows the underlying list."""
    assert repr(MinHeap([1])) == "MinHeap([1])"
