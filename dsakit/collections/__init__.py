"""
Collections topic module.

Container data structures:
- MinHeap: comparator-ordered binary min-heap (priority queue)
- PeekMut: mutable handle to a MinHeap's root
"""

from dsakit.collections import binary_heap
from dsakit.collections.binary_heap import MinHeap, PeekMut

__all__ = [
    "binary_heap",
    "MinHeap",
    "PeekMut",
]
