"""
LSD radix sort.

A radix sort is a sequence of stable counting sorts, one per projection
of the item onto a small non-negative integer (a digit, a byte, a sign
bit). Projections run first to last, so the least significant one goes
first. uint_scheme() and ascii_scheme() build the common schemes.

Example:
    >>> data = [0x12345678, 0, 0xFFFFFFFF, 42, 17]
    >>> radix_sort(data, uint_scheme(width=32, radix_bits=4))
    >>> data == sorted(data)
    True
"""

from typing import Any, Callable, Iterable, List

from dsakit.algorithms.sort.counting_sort import counting_sort

Projection = Callable[[Any], int]


def radix_sort(arr: List[Any], projections: Iterable[Projection]) -> None:
    """
    Sort arr in place with one stable counting-sort pass per projection.

    Args:
        arr: List to sort
        projections: Key functions, least significant first

    Raises:
        ValueError: If a projection yields a negative or non-integer key.
            Passes that already ran stay applied.
    """
    for projection in projections:
        counting_sort(arr, key=projection)


def uint_scheme(width: int = 32, radix_bits: int = 8) -> List[Projection]:
    """
    Digit projections for non-negative integers of up to `width` bits.

    Args:
        width: Number of significant bits to sort on
        radix_bits: Bits per digit; each pass counts up to 2**radix_bits keys

    Returns:
        Projections from least to most significant digit

    Raises:
        ValueError: If width or radix_bits is not positive
    """
    if width <= 0 or radix_bits <= 0:
        raise ValueError(f"width and radix_bits must be positive, got {width} and {radix_bits}")

    mask = (1 << radix_bits) - 1
    return [
        (lambda x, shift=shift: (x >> shift) & mask)
        for shift in range(0, width, radix_bits)
    ]


def ascii_scheme(max_len: int) -> List[Projection]:
    """
    Character projections for lexicographic order of str or bytes items.

    Position max_len - 1 is projected first and position 0 last; positions
    past the end of a shorter item project to 0, so prefixes sort first.

    Args:
        max_len: Length of the longest item
    """
    def at(position: int) -> Projection:
        def project(item: Any) -> int:
            if position >= len(item):
                return 0
            c = item[position]
            return c if isinstance(c, int) else ord(c)
        return project

    return [at(position) for position in reversed(range(max_len))]
