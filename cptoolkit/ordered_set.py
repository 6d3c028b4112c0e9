"""Sorted set with order-statistic queries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from sortedcontainers import SortedList


class OrderedSet:
    """Set of distinct values kept in ascending order, indexable by rank."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items = SortedList(set(items))

    def add(self, value: Any) -> None:
        """Insert ``value`` unless it is already present."""
        if value not in self._items:
            self._items.add(value)

    def discard(self, value: Any) -> None:
        """Remove ``value`` if present."""
        self._items.discard(value)

    def find_by_order(self, k: int) -> Any:
        """Return the ``k``-th smallest value, counting from 0."""
        if not 0 <= k < len(self._items):
            raise IndexError(f"order {k} outside 0..{len(self._items) - 1}")
        return self._items[k]

    def order_of_key(self, value: Any) -> int:
        """Return how many stored values are strictly less than ``value``."""
        return self._items.bisect_left(value)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"