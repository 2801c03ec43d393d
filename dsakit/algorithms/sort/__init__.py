"""
Sorting algorithms.

All functions sort a list in place and return None, like list.sort().
Comparison sorts accept key= or compare=; counting and radix sort work
on non-negative integer keys.
"""

from dsakit.algorithms.sort.counting_sort import counting_sort
from dsakit.algorithms.sort.insertion_sort import insertion_sort
from dsakit.algorithms.sort.intro_sort import intro_sort
from dsakit.algorithms.sort.merge_sort import merge_sort
from dsakit.algorithms.sort.quick_sort import binary_quick_sort, ternary_partition, ternary_quick_sort
from dsakit.algorithms.sort.radix_sort import ascii_scheme, radix_sort, uint_scheme
from dsakit.algorithms.sort.tim_sort import tim_sort

__all__ = [
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
