"""
Binary heap operations applied directly to lists.

Rather than a container, this package provides the heap algorithms
themselves, so callers can:
- build a priority queue on a list they already own
- implement increase/decrease-key via adjust_heap
- heapsort in place

min_heap and max_heap expose the same function names, so use them
through their module namespace.
"""

from dsakit.algorithms.heap_on_slice import max_heap, min_heap

__all__ = [
    "min_heap",
    "max_heap",
]
