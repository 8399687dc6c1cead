from stlkit.simplelist import ListIterator, SimpleList


def _filled(n):
    lst = SimpleList()
    for i in range(1, n + 1):
        lst.push_back(i)
    return lst


def test_list():
    lst = SimpleList()
    assert len(lst) == 0
    lst.push_back(1)
    assert len(lst) == 1
    assert lst.front_node().value == 1
    assert lst.back_node().value == 1
    lst.push_front(2)
    assert len(lst) == 2
    assert str(lst) == "[2 1]"

    lst.push_back(3)
    lst.push_back(4)
    assert str(lst) == "[2 1 3 4]"

    lst.move_to_front(lst.front_node(), lst.front_node().next())
    assert str(lst) == "[1 2 3 4]"

    lst.move_to_back(lst.front_node(), lst.front_node().next())
    assert str(lst) == "[1 3 4 2]"

    ret = []
    lst.traversal(lambda v: ret.append(v) or True)
    assert ret == [1, 3, 4, 2]


def test_insert_after():
    lst = _filled(5)
    lst.insert_after(6, lst.front_node())
    assert str(lst) == "[1 6 2 3 4 5]"
    lst.insert_after(7, lst.front_node().next())
    assert str(lst) == "[1 6 7 2 3 4 5]"
    lst.insert_after(8, lst.back_node())
    assert str(lst) == "[1 6 7 2 3 4 5 8]"
    assert lst.back_node().value == 8


def test_remove():
    lst = _filled(5)
    assert lst.remove(None, lst.front_node()) == 1
    assert str(lst) == "[2 3 4 5]"
    assert lst.remove(lst.front_node(), lst.front_node().next()) == 3
    assert str(lst) == "[2 4 5]"
    lst.push_front(6)
    assert str(lst) == "[6 2 4 5]"
    assert len(lst) == 4


def test_remove_tail_updates_back():
    lst = _filled(3)
    pre = lst.front_node().next()
    lst.remove(pre, lst.back_node())
    assert lst.back_node() is pre
    lst.push_back(9)
    assert list(lst) == [1, 2, 9]


def test_remove_none_returns_none():
    lst = _filled(2)
    assert lst.remove(None, None) is None
    assert len(lst) == 2


def test_traversal_stops():
    lst = _filled(5)
    seen = []

    def visit(v):
        seen.append(v)
        return v < 3

    lst.traversal(visit)
    assert seen == [1, 2, 3]
    assert seen == list(lst)[:3]
    assert len(lst) == 5


def test_list_iterator():
    lst = _filled(5)
    expected = 1
    it = ListIterator(lst.front_node())
    while it.is_valid():
        assert it.value == expected
        it.value = expected * 2
        expected += 1
        it.next()
    assert expected == 6
    it = ListIterator(lst.front_node())
    assert it.value == 2
    assert it == it.clone()
    assert list(lst) == [2, 4, 6, 8, 10]