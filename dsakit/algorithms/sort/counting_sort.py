"""
Counting sort.

Stable sort on non-negative integer keys: count each key, accumulate the
counts into end positions, then place items from the back so equal keys
keep their relative order. O(n + k) for k = largest key.

Example:
    >>> v = [4, 2, 2, 8, 3, 3, 1]
    >>> counting_sort(v)
    >>> v
    [1, 2, 2, 3, 3, 4, 8]
    >>> words = ["counting", "hello", "a", "bb"]
    >>> counting_sort(words, key=len)
    >>> words
    ['a', 'bb', 'hello', 'counting']
"""

from typing import Any, Callable, Iterable, List, Optional


def counting_sort(
    arr: List[Any],
    key: Optional[Callable[[Any], int]] = None,
    cached: bool = True
) -> None:
    """
    Sort arr in place by non-negative integer keys.

    Every key is checked before arr is modified, so a bad key leaves
    the list exactly as it was.

    Args:
        arr: List to sort
        key: Maps an item to its integer key; the item itself when None
        cached: Compute each key once and store it. With False, key is
            called twice per item instead, trading time for memory.

    Raises:
        ValueError: If a key is negative or not an integer
    """
    if key is None:
        keys: Optional[List[int]] = arr
    elif cached:
        keys = [key(item) for item in arr]
    else:
        keys = None

    counter = _accumulated_counter(keys if keys is not None else map(key, arr))
    if len(arr) <= 1:
        return

    positions = [0] * len(arr)
    for idx in reversed(range(len(arr))):
        k = keys[idx] if keys is not None else key(arr[idx])
        counter[k] -= 1
        positions[idx] = counter[k]

    ordered = [None] * len(arr)
    for idx, pos in enumerate(positions):
        ordered[pos] = arr[idx]
    arr[:] = ordered


def _accumulated_counter(keys: Iterable[Any]) -> List[int]:
    """Count keys, then turn counts into exclusive end positions."""
    counter: List[int] = []
    for k in keys:
        if not isinstance(k, int) or k < 0:
            raise ValueError(f"Counting sort keys must be non-negative integers, got {k!r}")
        if k >= len(counter):
            counter.extend([0] * (k + 1 - len(counter)))
        counter[k] += 1

    for i in range(1, len(counter)):
        counter[i] += counter[i - 1]
    return counter
