"""A priority queue kept as an ascending sorted sequence."""

from __future__ import annotations

from bisect import insort_left
from collections.abc import Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """A queue whose front is always its smallest element.

    A new element is placed before any elements that compare equal to it.
    """

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, value: T) -> None:
        """Insert ``value`` in sorted position."""
        insort_left(self._items, value)

    def pop(self) -> None:
        """Remove the smallest element; does nothing on an empty queue."""
        if self._items:
            del self._items[0]

    def top(self) -> T:
        """Return the smallest element; raise IndexError when empty."""
        if not self._items:
            raise IndexError("PriorityQueue is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def copy(self) -> PriorityQueue[T]:
        """Return an independent copy holding the same elements."""
        result: PriorityQueue[T] = PriorityQueue()
        result._items = list(self._items)
        return result

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"PriorityQueue({self._items!r})"