"""Helpers over sequences: maximum subarray, binary search, suffixes, sorting."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator, Sequence
from operator import itemgetter
from typing import Any


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane)."""
    it = iter(values)
    try:
        best = current = next(it)
    except StopIteration:
        raise ValueError("max_subarray_sum() of an empty sequence") from None
    for value in it:
        current = max(current + value, value)
        best = max(best, current)
    return best


def binary_search(values: Sequence[Any], key: Any) -> int:
    """Return an index of ``key`` in the sorted ``values``, or -1 if absent."""
    index = bisect_left(values, key)
    if index < len(values) and values[index] == key:
        return index
    return -1


def suffixes(s: str) -> Iterator[str]:
    """Yield every non-empty suffix of ``s``, longest first."""
    for start in range(len(s)):
        yield s[start:]


def sort_by_second(pairs: Iterable[tuple[Any, Any]]) -> list[tuple[Any, Any]]:
    """Return the pairs sorted in ascending order of their second element."""
    return sorted(pairs, key=itemgetter(1))