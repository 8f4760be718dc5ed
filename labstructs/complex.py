"""Complex numbers with tolerant equality and a brace text notation."""

from __future__ import annotations

import re as _re
import sys
from dataclasses import dataclass
from numbers import Real

_EPS = 2 * sys.float_info.epsilon
_NUMBER = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_PATTERN = _re.compile(rf"\s*\{{\s*({_NUMBER})\s*,\s*({_NUMBER})\s*\}}\s*")


@dataclass(frozen=True, slots=True, eq=False)
class Complex:
    """A complex number ``re + im*i`` written as ``{re,im}``."""

    re: float = 0.0
    im: float = 0.0

    LEFT_BRACE = "{"
    SEPARATOR = ","
    RIGHT_BRACE = "}"

    def __post_init__(self) -> None:
        object.__setattr__(self, "re", float(self.re))
        object.__setattr__(self, "im", float(self.im))

    @staticmethod
    def _coerce(value: object) -> Complex | None:
        if isinstance(value, Complex):
            return value
        if isinstance(value, Real):
            return Complex(float(value))
        return None

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return abs(self.re - rhs.re) <= _EPS and abs(self.im - rhs.im) <= _EPS

    __hash__ = None  # equality is approximate

    def __neg__(self) -> Complex:
        return Complex(-self.re, -self.im)

    def __add__(self, other: object) -> Complex:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(self.re + rhs.re, self.im + rhs.im)

    def __radd__(self, other: object) -> Complex:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + self

    def __sub__(self, other: object) -> Complex:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(self.re - rhs.re, self.im - rhs.im)

    def __rsub__(self, other: object) -> Complex:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> Complex:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(
            self.re * rhs.re - self.im * rhs.im,
            self.re * rhs.im + self.im * rhs.re,
        )

    def __rmul__(self, other: object) -> Complex:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs * self

    def __truediv__(self, other: object) -> Complex:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if rhs == Complex():
            raise ZeroDivisionError("Division by zero")
        denom = rhs.re**2 + rhs.im**2
        return Complex(
            (self.re * rhs.re + self.im * rhs.im) / denom,
            (self.im * rhs.re - self.re * rhs.im) / denom,
        )

    def __rtruediv__(self, other: object) -> Complex:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def __pow__(self, n: int) -> Complex:
        if not isinstance(n, int):
            return NotImplemented
        is_zero = self == Complex()
        if is_zero and n == 0:
            raise ValueError("Zero to the zero degree")
        if is_zero:
            return Complex()
        base = self if n > 0 else 1.0 / self
        result = Complex(1.0)
        for _ in range(abs(n)):
            result = base * result
        return result

    def __abs__(self) -> float:
        return (self.re**2 + self.im**2) ** 0.5

    def conjugate(self) -> Complex:
        """Return the complex conjugate."""
        return Complex(self.re, -self.im)

    def __str__(self) -> str:
        return f"{self.LEFT_BRACE}{self.re:g}{self.SEPARATOR}{self.im:g}{self.RIGHT_BRACE}"

    @classmethod
    def parse(cls, text: str) -> Complex:
        """Read a number written as ``{re,im}``; raise ValueError otherwise."""
        match = _PATTERN.fullmatch(text)
        if match is None:
            raise ValueError(f"cannot parse a complex number from {text!r}")
        return cls(float(match.group(1)), float(match.group(2)))