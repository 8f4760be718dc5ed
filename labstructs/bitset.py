"""Fixed-size sets of bits with element access and bitwise operators."""

from __future__ import annotations

from typing import Callable


class BitSet:
    """A sequence of bits whose size is fixed until it is resized.

    Binary operators align the operands at their last bits: the shorter
    operand is padded with zeros at the front, and the result takes the
    longer size.
    """

    __slots__ = ("_bits",)

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError("The size must not be negative")
        self._bits = [False] * size

    def __len__(self) -> int:
        return len(self._bits)

    def resize(self, size: int) -> None:
        """Change the size, keeping existing bits and adding zeros at the end."""
        if size <= 0:
            raise ValueError("The size must be greater than zero")
        current = len(self._bits)
        if size < current:
            del self._bits[size:]
        else:
            self._bits.extend([False] * (size - current))

    def _check_index(self, idx: int) -> None:
        if not 0 <= idx < len(self._bits):
            raise IndexError("Not correct index")

    def __getitem__(self, idx: int) -> bool:
        self._check_index(idx)
        return self._bits[idx]

    def __setitem__(self, idx: int, val: bool) -> None:
        self._check_index(idx)
        self._bits[idx] = bool(val)

    def fill(self, val: bool) -> None:
        """Set every bit to ``val``."""
        self._bits = [bool(val)] * len(self._bits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitSet):
            return NotImplemented
        return self._bits == other._bits

    __hash__ = None  # mutable

    def __invert__(self) -> BitSet:
        result = BitSet(len(self._bits))
        result._bits = [not bit for bit in self._bits]
        return result

    def copy(self) -> BitSet:
        result = BitSet()
        result._bits = list(self._bits)
        return result

    def _combine(self, other: BitSet, op: Callable[[bool, bool], bool]) -> None:
        width = max(len(self._bits), len(other._bits))
        left = [False] * (width - len(self._bits)) + self._bits
        right = [False] * (width - len(other._bits)) + other._bits
        self.resize(width)
        self._bits = [op(a, b) for a, b in zip(left, right)]

    def __iand__(self, other: object) -> BitSet:
        if not isinstance(other, BitSet):
            return NotImplemented
        self._combine(other, lambda a, b: a and b)
        return self

    def __ior__(self, other: object) -> BitSet:
        if not isinstance(other, BitSet):
            return NotImplemented
        self._combine(other, lambda a, b: a or b)
        return self

    def __ixor__(self, other: object) -> BitSet:
        if not isinstance(other, BitSet):
            return NotImplemented
        self._combine(other, lambda a, b: a != b)
        return self

    def __and__(self, other: object) -> BitSet:
        if not isinstance(other, BitSet):
            return NotImplemented
        result = self.copy()
        result &= other
        return result

    def __or__(self, other: object) -> BitSet:
        if not isinstance(other, BitSet):
            return NotImplemented
        result = self.copy()
        result |= other
        return result

    def __xor__(self, other: object) -> BitSet:
        if not isinstance(other, BitSet):
            return NotImplemented
        result = self.copy()
        result ^= other
        return result

    def __repr__(self) -> str:
        return "BitSet(" + "".join("1" if bit else "0" for bit in self._bits) + ")"