"""Exact rational numbers kept in lowest terms."""

from __future__ import annotations

import math
import operator
import re

_PATTERN = re.compile(r"\s*([+-]?\d+)\s*/\s*(\d+)\s*")


class Rational:
    """A fraction ``num/den`` with a positive denominator, always reduced."""

    __slots__ = ("_num", "_den")

    SEPARATOR = "/"

    def __init__(self, num: int = 0, den: int = 1) -> None:
        num = operator.index(num)
        den = operator.index(den)
        if den == 0:
            raise ValueError("Zero denominator in Rational")
        if den < 0:
            num, den = -num, -den
        divisor = math.gcd(num, den)
        self._num = num // divisor
        self._den = den // divisor

    @property
    def num(self) -> int:
        return self._num

    @property
    def den(self) -> int:
        return self._den

    @staticmethod
    def _coerce(value: object) -> Rational | None:
        if isinstance(value, Rational):
            return value
        if isinstance(value, int):
            return Rational(value)
        return None

    def __add__(self, other: object) -> Rational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(self._num * rhs._den + self._den * rhs._num, self._den * rhs._den)

    def __radd__(self, other: object) -> Rational:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + self

    def __sub__(self, other: object) -> Rational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(self._num * rhs._den - self._den * rhs._num, self._den * rhs._den)

    def __rsub__(self, other: object) -> Rational:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> Rational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(self._num * rhs._num, self._den * rhs._den)

    def __rmul__(self, other: object) -> Rational:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs * self

    def __truediv__(self, other: object) -> Rational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if rhs._num == 0:
            raise ZeroDivisionError("Division by zero")
        return Rational(self._num * rhs._den, self._den * rhs._num)

    def __rtruediv__(self, other: object) -> Rational:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def _cross(self, other: object) -> tuple[int, int] | None:
        rhs = self._coerce(other)
        if rhs is None:
            return None
        return self._num * rhs._den, rhs._num * self._den

    def __eq__(self, other: object) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] == pair[1]

    def __lt__(self, other: object) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] < pair[1]

    def __le__(self, other: object) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] <= pair[1]

    def __gt__(self, other: object) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] > pair[1]

    def __ge__(self, other: object) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] >= pair[1]

    def __hash__(self) -> int:
        return hash(self._num) if self._den == 1 else hash((self._num, self._den))

    def __neg__(self) -> Rational:
        return Rational(-self._num, self._den)

    def __abs__(self) -> Rational:
        return Rational(abs(self._num), self._den)

    def __pow__(self, n: int) -> Rational:
        if not isinstance(n, int):
            return NotImplemented
        if self._num == 0 and n == 0:
            raise ValueError("Zero to the zero degree")
        if n >= 0:
            return Rational(self._num**n, self._den**n)
        if self._num == 0:
            raise ZeroDivisionError("Zero to a negative degree")
        return Rational(self._den ** (-n), self._num ** (-n))

    def __str__(self) -> str:
        return f"{self._num}{self.SEPARATOR}{self._den}"

    def __repr__(self) -> str:
        return f"Rational({self._num}, {self._den})"

    @classmethod
    def parse(cls, text: str) -> Rational:
        """Read a fraction written as ``num/den`` with ``den > 0``."""
        match = _PATTERN.fullmatch(text)
        if match is None:
            raise ValueError(f"cannot parse a rational number from {text!r}")
        den = int(match.group(2))
        if den <= 0:
            raise ValueError(f"non-positive denominator in {text!r}")
        return cls(int(match.group(1)), den)