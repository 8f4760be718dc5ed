# labstructs

Small value types and classic containers, each with a short and predictable
interface. The package has no dependencies outside the standard library.

| Module | Contents |
| --- | --- |
| `labstructs.complex` | `Complex`: a complex number. Equality allows a small tolerance. The text form is `{re,im}`. |
| `labstructs.rational` | `Rational`: a fraction kept in lowest terms with a positive denominator. The text form is `num/den`. |
| `labstructs.bitset` | `BitSet`: a fixed-size sequence of bits with `&`, `|`, `^` and `~`. |
| `labstructs.dynarr` | `DynArr`: a resizable array of floats. New slots are filled with zeros. |
| `labstructs.stacks` | `StackArr` and `StackLst`: LIFO stacks, one backed by an array and one by a linked list. |
| `labstructs.queues` | `QueueArr` and `QueueLst`: FIFO queues, one backed by a ring buffer and one by a linked list. |
| `labstructs.priority_queue` | `PriorityQueue`: a queue that always has its smallest item at the front. |
| `labstructs.timing` | `time_of_push` and the `labstructs-timing` command. |
| `labstructs.codeforces` | Solvers for three short contest problems. |

## Installation

```
pip install labstructs
```

To run the test suite:

```
pip install "labstructs[test]"
pytest
```

## Numbers

```python
from labstructs.complex import Complex
from labstructs.rational import Rational

z = Complex(1.0, 2.0)
w = Complex(3.0, -1.0)
print(z + w, z * w, z / w, abs(z), z ** 3, z.conjugate())
print(Complex.parse("{1.5,-2}"))

r = Rational(3, 9)
print(r)                    # 1/3
print(r.num, r.den)         # 1 3
print(r + 1, 2 / r, r < 1, r ** -2)
print(Rational.parse("2 / 3"))
```

`Complex` is immutable and mixes with plain real numbers in arithmetic and
comparison. Two values are equal when both parts differ by no more than twice
the machine epsilon, so `Complex` values are not hashable. `str()` writes
`{re,im}`; `Complex.parse` reads the same form, with spaces allowed around the
parts, and raises `ValueError` for anything else.

`Rational` mixes with `int` in arithmetic and in all six comparisons.
`str()` writes `num/den`; `Rational.parse` reads an integer, a `/` and a
positive integer, with spaces allowed around them, and raises `ValueError`
otherwise.

Errors:

- `Rational(1, 0)` raises `ValueError`.
- Dividing by a zero `Complex` or a zero `Rational` raises `ZeroDivisionError`.
- Raising zero to the power zero raises `ValueError`, for both types. A zero
  `Rational` raised to a negative power raises `ZeroDivisionError`; a zero
  `Complex` raised to any non-zero power gives zero.

## Bits and arrays

```python
from labstructs.bitset import BitSet
from labstructs.dynarr import DynArr

a = BitSet(5)
b = BitSet(5)
a[0] = True
b[1] = True
print((a | b)[1], len(a))   # True 5
a.fill(True)
print((~a)[0])              # False
a.resize(8)

d = DynArr(4)
d[1] = 1.0
d.resize(8)
print(len(d), d[1], d[7])   # 8 1.0 0.0
e = d.copy()
```

`BitSet` binary operators line the operands up at their last bits: the
shorter one is padded with zeros at the front, and the result has the longer
size. The in-place forms `&=`, `|=` and `^=` change the left operand the same
way. Two bit sets are equal when they hold the same bits in the same order.
`BitSet.copy()` returns an independent copy.

Both types check their indices: a negative index or one past the end raises
`IndexError` (negative indices do not count from the end). `BitSet.resize` and
`DynArr.resize` raise `ValueError` for a size that is not positive; so does
`DynArr(0)` or a negative size. `DynArr()` with no argument is an empty array.

## Stacks and queues

All containers share the same small interface: `push`, `pop`, `top`,
`is_empty`, `clear` and `copy`, and all support `len()`. `QueueArr` also has
`count()`. The queues and `PriorityQueue` can be iterated from front to back.

```python
from labstructs.stacks import StackArr, StackLst
from labstructs.queues import QueueArr, QueueLst
from labstructs.priority_queue import PriorityQueue

stack = StackLst()
for word in ("cat", "ice", "sea"):
    stack.push(word)
print(stack.top())          # sea

queue = QueueArr()
for n in (1, 2, 3):
    queue.push(n)
print(queue.top(), queue.count(), list(queue))   # 1 3 [1, 2, 3]

pq = PriorityQueue()
for x in (3.4, 1.2, 5.6):
    pq.push(x)
print(pq.top())             # 1.2
```

`pop` on an empty container does nothing. `top` on an empty container raises
`IndexError`. `copy` returns a container with the same items that changes
independently of the original. `PriorityQueue` items must be mutually
comparable; a new item is placed before items that compare equal to it.

## Timing pushes

`labstructs.timing.time_of_push(stack, num, repeats=100)` pushes the integers
`0` to `num - 1` onto a stack, clears it, repeats this `repeats` times, and
returns the average time of one round in nanoseconds. Any object with `push`
and `clear` methods will do. A `repeats` that is not positive raises
`ValueError`.

The command times a `StackArr` for every size from 0 up to, but not
including, `--sizes` (default 100), with `--repeats` rounds each (default 100),
and prints one average per line with ten decimal places:

```
labstructs-timing
labstructs-timing --sizes 20 --repeats 10
```

The same can be run with `python -m labstructs.timing`. The command only
prints the numbers; it draws no chart.

## Contest problems

`labstructs.codeforces` solves three short contest problems. Each solver takes
the whole problem input as text and returns the output as text, one answer per
line:

- `solve_1742c(text)`: for each case of eight rows, `R` if some row is
  `RRRRRRRR`, otherwise `B`. `stripes_winner(grid)` answers one case for an
  iterable of rows.
- `solve_1883b(text)`: `YES` or `NO` for each array.
- `solve_1883c(text)`: each line is the case number followed directly by `yes`
  or `no` (for example `1yes`). Letter counts carry over from one case to the
  next.

Input that ends early raises `ValueError`.