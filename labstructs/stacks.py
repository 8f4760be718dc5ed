"""LIFO stacks: one backed by a growable array, one by a linked list."""

from __future__ import annotations

from typing import Any, Generic, NamedTuple, TypeVar

T = TypeVar("T")


class StackArr(Generic[T]):
    """A stack stored in a contiguous array."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, value: T) -> None:
        self._items.append(value)

    def pop(self) -> None:
        """Remove the top element; does nothing on an empty stack."""
        if self._items:
            self._items.pop()

    def top(self) -> T:
        """Return the top element; raise IndexError when empty."""
        if not self._items:
            raise IndexError("Stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def copy(self) -> StackArr[T]:
        result: StackArr[T] = StackArr()
        result._items = list(self._items)
        return result

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"StackArr({self._items!r})"


class _Node(NamedTuple):
    value: Any
    next: _Node | None


class StackLst(Generic[T]):
    """A stack stored as a singly linked list of immutable nodes."""

    __slots__ = ("_head", "_size")

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._size = 0

    def push(self, value: T) -> None:
        self._head = _Node(value, self._head)
        self._size += 1

    def pop(self) -> None:
        """Remove the top element; does nothing on an empty stack."""
        if self._head is not None:
            self._head = self._head.next
            self._size -= 1

    def top(self) -> T:
        """Return the top element; raise IndexError when empty."""
        if self._head is None:
            raise IndexError("Stack is empty")
        return self._head.value

    def is_empty(self) -> bool:
        return self._head is None

    def clear(self) -> None:
        self._head = None
        self._size = 0

    def copy(self) -> StackLst[T]:
        # Nodes are immutable, so the copy can share them safely.
        result: StackLst[T] = StackLst()
        result._head = self._head
        result._size = self._size
        return result

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        values = []
        node = self._head
        while node is not None:
            values.append(node.value)
            node = node.next
        return f"StackLst({values[::-1]!r})"