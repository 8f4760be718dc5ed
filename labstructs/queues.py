"""FIFO queues: one backed by a growable ring buffer, one by a linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")

_INITIAL_CAPACITY = 8


class QueueArr(Generic[T]):
    """A queue stored in a circular array that doubles when it fills up."""

    __slots__ = ("_buffer", "_head", "_size")

    def __init__(self) -> None:
        self._buffer: list[Any] = []
        self._head = 0
        self._size = 0

    def _grow(self) -> None:
        capacity = len(self._buffer)
        new_capacity = capacity * 2 if capacity else _INITIAL_CAPACITY
        items = list(self._iter_values())
        self._buffer = items + [None] * (new_capacity - len(items))
        self._head = 0

    def _iter_values(self) -> Iterator[T]:
        capacity = len(self._buffer)
        for offset in range(self._size):
            yield self._buffer[(self._head + offset) % capacity]

    def push(self, value: T) -> None:
        """Append ``value`` at the back of the queue."""
        if self._size == len(self._buffer):
            self._grow()
        tail = (self._head + self._size) % len(self._buffer)
        self._buffer[tail] = value
        self._size += 1

    def pop(self) -> None:
        """Remove the front element; does nothing on an empty queue."""
        if not self._size:
            return
        self._buffer[self._head] = None
        self._head = (self._head + 1) % len(self._buffer)
        self._size -= 1
        if not self._size:
            self._head = 0

    def top(self) -> T:
        """Return the front element; raise IndexError when empty."""
        if not self._size:
            raise IndexError("Queue is empty")
        return self._buffer[self._head]

    def is_empty(self) -> bool:
        return self._size == 0

    def count(self) -> int:
        """Return the number of elements in the queue."""
        return self._size

    def clear(self) -> None:
        self._buffer = [None] * len(self._buffer)
        self._head = 0
        self._size = 0

    def copy(self) -> QueueArr[T]:
        """Return an independent copy holding the same elements in order."""
        result: QueueArr[T] = QueueArr()
        items = list(self._iter_values())
        result._buffer = items + [None] * (len(self._buffer) - len(items))
        result._size = len(items)
        return result

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return self._iter_values()

    def __repr__(self) -> str:
        return f"QueueArr({list(self._iter_values())!r})"


@dataclass(slots=True)
class _Node:
    value: Any
    next: _Node | None = None


class QueueLst(Generic[T]):
    """A queue stored as a singly linked list with head and tail references."""

    __slots__ = ("_head", "_tail", "_size")

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0

    def push(self, value: T) -> None:
        """Append ``value`` at the back of the queue."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop(self) -> None:
        """Remove the front element; does nothing on an empty queue."""
        if self._head is None:
            return
        self._head = self._head.next
        self._size -= 1
        if self._head is None:
            self._tail = None

    def top(self) -> T:
        """Return the front element; raise IndexError when empty."""
        if self._head is None:
            raise IndexError("Queue is empty")
        return self._head.value

    def is_empty(self) -> bool:
        return self._head is None

    def clear(self) -> None:
        self._head = None
        self._tail = None
        self._size = 0

    def copy(self) -> QueueLst[T]:
        """Return an independent copy holding the same elements in order."""
        result: QueueLst[T] = QueueLst()
        for value in self:
            result.push(value)
        return result

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"QueueLst({list(self)!r})"