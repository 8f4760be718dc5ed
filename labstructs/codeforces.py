"""Solutions to three short contest problems, reading whole inputs as text."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import accumulate

_RED_ROW = "RRRRRRRR"
_ROWS = 8
_LETTERS = "abcdefghijklmnopqrstuvwxyz"


class _Reader:
    """Reads whitespace-separated words or single characters from text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _skip_space(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1
        if self._pos >= len(self._text):
            raise ValueError("unexpected end of input")

    def word(self) -> str:
        self._skip_space()
        start = self._pos
        while self._pos < len(self._text) and not self._text[self._pos].isspace():
            self._pos += 1
        return self._text[start:self._pos]

    def integer(self) -> int:
        return int(self.word())

    def char(self) -> str:
        self._skip_space()
        ch = self._text[self._pos]
        self._pos += 1
        return ch


def _lines(answers: Iterable[str]) -> str:
    return "".join(f"{answer}\n" for answer in answers)


def stripes_winner(grid: Iterable[str]) -> str:
    """Return ``"R"`` if some row is painted entirely red, else ``"B"``."""
    for row in grid:
        if row == _RED_ROW:
            return "R"
    return "B"


def solve_1742c(text: str) -> str:
    """Answer each 8x8 stripes grid in the input with ``R`` or ``B``."""
    reader = _Reader(text)
    cases = reader.integer()
    return _lines(
        stripes_winner([reader.word() for _ in range(_ROWS)]) for _ in range(cases)
    )


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _can_balance(values: list[int]) -> bool:
    k = _truncating_div(sum(values), len(values))
    if values[0] < k or values[-1] > k:
        return False
    excess = [v - k for v in values]
    prefixes = accumulate(excess)
    return all(prefix >= need for prefix, need in zip(prefixes, excess[1:]))


def solve_1883b(text: str) -> str:
    """Answer ``YES`` or ``NO`` for each array in the input."""
    reader = _Reader(text)
    cases = reader.integer()
    answers = []
    for _ in range(cases):
        n = reader.integer()
        values = [reader.integer() for _ in range(n)]
        answers.append("YES" if _can_balance(values) else "NO")
    return _lines(answers)


def solve_1883c(text: str) -> str:
    """Answer each case with its number followed by ``yes`` or ``no``.

    Letter counts carry over from one case to the next.
    """
    reader = _Reader(text)
    cases = reader.integer()
    counts: Counter[str] = Counter()
    answers = []
    for case in range(1, cases + 1):
        n = reader.integer()
        k = reader.integer()
        counts.update(reader.char() for _ in range(n))
        odd = sum(counts[letter] % 2 for letter in _LETTERS)
        slack = k - odd
        if (n - k) % 2 == 0:
            ok = slack >= 0 and slack % 2 == 0
        else:
            ok = slack >= -1 and slack % 2 != 0
        answers.append(f"{case}{'yes' if ok else 'no'}")
    return _lines(answers)