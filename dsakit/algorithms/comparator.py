"""
Comparator callables shared by the heap and sort algorithms.

A comparator is any callable compare(a, b) -> int returning a negative
number when a orders before b, zero when they are equal and a positive
number when b orders before a. Every algorithm also accepts a key
function instead; resolve_compare() turns either into a comparator.
"""

from typing import Any, Callable, Optional

Compare = Callable[[Any, Any], int]
Key = Callable[[Any], Any]


class DefaultComparator:
    """Natural ordering: compare(a, b) follows a < b."""

    def __call__(self, a: Any, b: Any) -> int:
        return (a > b) - (a < b)

    def __repr__(self) -> str:
        return "DefaultComparator()"


class ReverseComparator:
    """
    Reversed natural ordering.

    Using a min-heap with ReverseComparator is equivalent to using
    a max-heap with DefaultComparator.
    """

    def __call__(self, a: Any, b: Any) -> int:
        return (b > a) - (b < a)

    def __repr__(self) -> str:
        return "ReverseComparator()"


class Reverse:
    """
    Wraps any comparator and reverses its order.

    The wrapped comparator may depend on its own state, e.g. distance
    from a center value; Reverse keeps a reference to that instance.
    """

    def __init__(self, comparator: Compare):
        self.comparator = comparator

    def __call__(self, a: Any, b: Any) -> int:
        return self.comparator(b, a)

    def __repr__(self) -> str:
        return f"Reverse({self.comparator!r})"


NATURAL_ORDER = DefaultComparator()


def key_to_compare(key: Key) -> Compare:
    """Build a comparator that orders items by key(item)."""
    def compare(a: Any, b: Any) -> int:
        ka, kb = key(a), key(b)
        return (ka > kb) - (ka < kb)
    return compare


def resolve_compare(key: Optional[Key] = None, compare: Optional[Compare] = None) -> Compare:
    """
    Pick the comparator an algorithm should use.

    Args:
        key: Optional key function
        compare: Optional comparator

    Returns:
        compare if given, a key-based comparator if key is given, natural order otherwise

    Raises:
        ValueError: If both key and compare are given
    """
    if key is not None and compare is not None:
        raise ValueError("Pass either key or compare, not both")
    if compare is not None:
        return compare
    if key is not None:
        return key_to_compare(key)
    return NATURAL_ORDER
