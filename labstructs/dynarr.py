"""A resizable array of floats that starts zero-filled."""

from __future__ import annotations


class DynArr:
    """An array of floats with bounds-checked indexing and explicit resizing."""

    __slots__ = ("_data",)

    def __init__(self, size: int | None = None) -> None:
        if size is None:
            self._data: list[float] = []
            return
        if size < 0:
            raise ValueError("Negative array size")
        if size == 0:
            raise ValueError("Array of zero size")
        self._data = [0.0] * size

    def __len__(self) -> int:
        return len(self._data)

    def resize(self, size: int) -> None:
        """Change the size; new elements are zero."""
        if size < 0:
            raise ValueError("Negative array size")
        if size == 0:
            raise ValueError("Array of zero size")
        current = len(self._data)
        if size < current:
            del self._data[size:]
        else:
            self._data.extend([0.0] * (size - current))

    def _check_index(self, i: int) -> None:
        if i < 0:
            raise IndexError("Negative index")
        if i >= len(self._data):
            raise IndexError("Index out of range")

    def __getitem__(self, i: int) -> float:
        self._check_index(i)
        return self._data[i]

    def __setitem__(self, i: int, value: float) -> None:
        self._check_index(i)
        self._data[i] = float(value)

    def copy(self) -> DynArr:
        """Return an independent copy."""
        result = DynArr()
        result._data = list(self._data)
        return result

    def __repr__(self) -> str:
        return f"DynArr({self._data!r})"