import pytest

from labstructs.priority_queue import PriorityQueue

F1, F2, F3, F4 = 1.2, 3.4, 5.6, 7.8


def test_source_scenario():
    q1 = PriorityQueue()
    assert q1.is_empty() is True

    q1.push(F1)
    assert q1.is_empty() is False
    assert q1.top() == F1

    q1.push(F3)
    q1.push(F2)
    assert q1.is_empty() is False
    assert q1.top() == F1

    q2 = PriorityQueue()
    q2.push(F1)
    q2.pop()
    assert q2.is_empty() is True

    q1.pop()
    assert q1.top() == F2

    q1.clear()
    assert q1.is_empty() is True

    for value in (F1, F2, F3, F4):
        q1.push(value)
        assert q1.top() == F1
    assert q1.is_empty() is False
    q1.clear()
    assert q1.is_empty() is True

    q1.push(F4)
    assert q1.top() == F4
    q1.push(F3)
    assert q1.top() == F3
    q1.push(F2)
    assert q1.top() == F2
    q1.push(F1)
    assert q1.top() == F1

    q1.pop()
    assert q1.top() == F2
    q1.pop()
    assert q1.top() == F3
    q1.pop()
    assert q1.top() == F4
    q1.pop()
    assert q1.is_empty() is True

    q1.push(F2)
    assert q1.top() == F2
    q1.push(F1)
    assert q1.top() == F1
    q1.push(F3)
    assert q1.top() == F1
    q1.push(F4)
    assert q1.top() == F1


def test_top_of_empty_raises():
    with pytest.raises(IndexError):
        PriorityQueue().top()


def test_pop_on_empty_is_harmless():
    q = PriorityQueue()
    q.pop()
    assert q.is_empty() is True
    assert len(q) == 0


def test_copy_is_independent():
    q = PriorityQueue()
    for value in (F3, F1, F2):
        q.push(value)
    c = q.copy()
    c.pop()
    assert c.top() == F2
    assert q.top() == F1
    assert len(q) == 3
    assert len(c) == 2


def test_drains_in_sorted_order():
    q = PriorityQueue()
    values = [5, 3, 9, 1, 3, 7, 0]
    for v in values:
        q.push(v)
    drained = []
    while not q.is_empty():
        drained.append(q.top())
        q.pop()
    assert drained == sorted(values)


def test_equal_element_goes_before_existing():
    q = PriorityQueue()
    first = (1, "a")
    q.push(first)
    q.push((1, "a"))
    assert len(q) == 2
    assert q.top() == first