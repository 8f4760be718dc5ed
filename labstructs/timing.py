"""Measure how long it takes to push a run of integers onto a stack."""

from __future__ import annotations

import argparse
import time
from typing import Protocol, Sequence

from labstructs.stacks import StackArr


class _Stack(Protocol):
    def push(self, value: int) -> None: ...

    def clear(self) -> None: ...


def time_of_push(stack: _Stack, num: int, repeats: int = 100) -> float:
    """Return the mean time in nanoseconds to push ``0..num-1`` onto ``stack``.

    The stack is cleared after every run.
    """
    if repeats <= 0:
        raise ValueError("repeats must be positive")
    total = 0
    for _ in range(repeats):
        start = time.perf_counter_ns()
        for value in range(num):
            stack.push(value)
        end = time.perf_counter_ns()
        stack.clear()
        total += end - start
    return total / repeats


def main(argv: Sequence[str] | None = None) -> int:
    """Print the mean push time for every size from 0 up to ``--sizes``."""
    parser = argparse.ArgumentParser(description="Time pushes onto an array stack.")
    parser.add_argument("--sizes", type=int, default=100, help="number of sizes to time")
    parser.add_argument("--repeats", type=int, default=100, help="runs per size")
    args = parser.parse_args(argv)

    stack: StackArr[int] = StackArr()
    for size in range(args.sizes):
        print(f"{time_of_push(stack, size, args.repeats):.10f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())