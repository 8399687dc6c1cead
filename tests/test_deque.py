import random

import pytest

from stlkit.deque import Deque, DequeIterator


def _filled(n):
    q = Deque()
    for i in range(n):
        q.push_back(i)
    return q


def test_push_pop():
    q = Deque()
    q.push_back(1)
    q.push_front(2)
    q.push_back(3)

    assert q.size() == 3
    assert len(q) == 3
    assert q.front() == 2
    assert q.back() == 3
    assert q.at(1) == 1

    q.insert(0, 5)
    q.insert(3, 6)
    q.insert(2, 7)
    assert str(q) == "[5 2 7 1 6 3]"

    assert q.pop_back() == 3
    assert str(q) == "[5 2 7 1 6]"

    assert q.pop_front() == 5
    assert str(q) == "[2 7 1 6]"


def test_erase():
    q = Deque()
    assert q.empty()
    for i in range(5):
        q.push_back(i + 1)
    assert not q.empty()

    q.erase_at(1)
    assert str(q) == "[1 3 4 5]"
    q.erase_at(0)
    assert str(q) == "[3 4 5]"

    q.push_front(6)
    q.push_back(7)
    q.push_front(8)
    assert str(q) == "[8 6 3 4 5 7]"

    q.erase_range(3, 5)
    assert str(q) == "[8 6 3 7]"

    q.clear()
    assert q.empty()


def test_iterator():
    q = _filled(10)
    n = 0
    it = q.begin()
    while not it == q.end():
        assert it.value == n
        n += 1
        it.next()
    assert n == 10

    n = 9
    it = q.last()
    while it.is_valid():
        assert it.value == n
        n -= 1
        it.prev()
    assert n == -1

    it = q.first().iterator_at(5).clone()
    assert isinstance(it, DequeIterator)
    assert it.position == 5
    assert it.value == 5

    it.value = 555
    assert it.value == 555
    assert q.at(5) == 555


def test_random_against_list():
    rng = random.Random(12345)
    q = Deque()
    a = []
    for i in range(11000):
        k = rng.randrange(1 << 30)
        op = k % 6
        if op == 0:
            q.push_back(i)
            a.append(i)
        elif op == 1:
            q.push_front(i)
            a.insert(0, i)
        elif op == 2:
            q.pop_front()
            if a:
                a.pop(0)
        elif op == 3:
            q.pop_back()
            if a:
                a.pop()
        elif op == 4:
            if q.size() == 0:
                continue
            k %= q.size()
            a.insert(k, i)
            q.insert(k, i)
        else:
            if q.size() == 0:
                continue
            k %= q.size()
            q.erase_at(k)
            del a[k]
        assert list(q) == a
    assert str(q) == "[" + " ".join(str(v) for v in a) + "]"


@pytest.mark.parametrize(
    "pos, expected",
    [
        (0, "[5 0 1 2 3 4]"),
        (1, "[0 5 1 2 3 4]"),
        (2, "[0 1 5 2 3 4]"),
        (3, "[0 1 2 5 3 4]"),
        (4, "[0 1 2 3 5 4]"),
    ],
)
def test_insert_into_five(pos, expected):
    q = _filled(5)
    assert str(q) == "[0 1 2 3 4]"
    q.insert(pos, 5)
    assert str(q) == expected


def test_insert_before_last_of_six():
    q = _filled(6)
    assert str(q) == "[0 1 2 3 4 5]"
    q.insert(5, 6)
    assert str(q) == "[0 1 2 3 4 6 5]"


@pytest.mark.parametrize(
    "pos, expected",
    [
        (0, "[5 4 0 1 2 3]"),
        (1, "[4 5 0 1 2 3]"),
        (2, "[4 0 5 1 2 3]"),
        (3, "[4 0 1 5 2 3]"),
    ],
)
def test_insert_after_push_front(pos, expected):
    q = _filled(4)
    q.push_front(4)
    assert str(q) == "[4 0 1 2 3]"
    q.insert(pos, 5)
    assert str(q) == expected


def test_insert_at_end_and_out_of_range():
    q = _filled(3)
    q.insert(3, 9)
    assert str(q) == "[0 1 2 9]"
    q.insert(10, 7)
    q.insert(-1, 7)
    assert str(q) == "[0 1 2 9]"


def test_empty_reads_give_none():
    q = Deque()
    assert q.front() is None
    assert q.back() is None
    assert q.pop_front() is None
    assert q.pop_back() is None
    assert q.at(0) is None
    assert len(q) == 0


def test_at_out_of_range_is_none():
    q = _filled(3)
    assert q.at(3) is None
    assert q.at(-1) is None
    assert q.at(2) == 2


def test_set_out_of_range_raises():
    q = _filled(3)
    with pytest.raises(IndexError):
        q.set(3, 1)
    with pytest.raises(IndexError):
        q.set(-1, 1)
    q.set(1, 42)
    assert list(q) == [0, 42, 2]


def test_iterator_set_out_of_range_is_ignored():
    q = _filled(2)
    it = q.end()
    it.value = 99
    assert list(q) == [0, 1]
    assert it.value is None


def test_erase_invalid_is_ignored():
    q = _filled(4)
    q.erase_at(4)
    q.erase_at(-1)
    q.erase_range(2, 2)
    q.erase_range(3, 1)
    q.erase_range(0, 5)
    assert list(q) == [0, 1, 2, 3]


def test_erase_range_front_part():
    q = _filled(6)
    q.erase_range(0, 2)
    assert list(q) == [2, 3, 4, 5]
    q.erase_range(1, 4)
    assert list(q) == [2]


def test_large_push_front_order():
    q = Deque()
    for i in range(1000):
        q.push_front(i)
    assert q.front() == 999
    assert q.back() == 0
    assert q.at(500) == 499
    assert list(q) == list(range(999, -1, -1))


def test_iterator_bounds_and_equality():
    q = _filled(2)
    it = q.begin()
    it.next().next().next()
    assert it.position == 2
    assert it == q.end()
    back = q.begin()
    back.prev().prev()
    assert back.position == -1
    assert not back.is_valid()
    other = _filled(2)
    assert not (q.begin() == other.begin())