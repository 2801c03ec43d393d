"""
Algorithms topic module.

- Comparators: DefaultComparator, ReverseComparator, Reverse
- Heap operations on lists: min_heap, max_heap (see heap_on_slice)
- Sorting: insertion, merge, binary/ternary quick, intro, tim, counting, radix
"""

from dsakit.algorithms import heap_on_slice, sort
from dsakit.algorithms.comparator import DefaultComparator, Reverse, ReverseComparator
from dsakit.algorithms.heap_on_slice import max_heap, min_heap
from dsakit.algorithms.sort import (
    ascii_scheme,
    binary_quick_sort,
    counting_sort,
    insertion_sort,
    intro_sort,
    merge_sort,
    radix_sort,
    ternary_partition,
    ternary_quick_sort,
    tim_sort,
    uint_scheme,
)

__all__ = [
    "DefaultComparator",
    "ReverseComparator",
    "Reverse",
    "heap_on_slice",
    "min_heap",
    "max_heap",
    "sort",
    "insertion_sort",
    "merge_sort",
    "binary_quick_sort",
    "ternary_partition",
    "ternary_quick_sort",
    "intro_sort",
    "tim_sort",
    "counting_sort",
    "radix_sort",
    "uint_scheme",
    "ascii_scheme",
]
