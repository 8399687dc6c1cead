import pytest

from stlkit.ketama import Ketama

NODES = ("1.1.1.1", "2.2.2.2", "3.3.3.3")
KEYS = [str(i) for i in range(200)]


def test_empty_ring_returns_none():
    k = Ketama()
    assert k.empty() is True
    assert k.get("anything") is None


def test_get_returns_added_node_and_is_deterministic():
    k = Ketama(replicas=7, thread_safe=True)
    k.add(*NODES)
    assert k.empty() is False
    first = [k.get(key) for key in KEYS]
    assert all(node in NODES for node in first)
    assert [k.get(key) for key in KEYS] == first

    other = Ketama(replicas=7)
    other.add(*NODES)
    assert [other.get(key) for key in KEYS] == first


def test_remove_only_moves_keys_of_removed_node():
    k = Ketama(replicas=7)
    k.add(*NODES)
    before = {key: k.get(key) for key in KEYS}
    k.remove("1.1.1.1")
    after = {key: k.get(key) for key in KEYS}
    for key in KEYS:
        assert after[key] != "1.1.1.1"
        if before[key] != "1.1.1.1":
            assert after[key] == before[key]


def test_add_only_moves_keys_to_new_node():
    k = Ketama(replicas=7)
    k.add("2.2.2.2", "3.3.3.3")
    before = {key: k.get(key) for key in KEYS}
    k.add("4.4.4.4")
    after = {key: k.get(key) for key in KEYS}
    for key in KEYS:
        assert after[key] in (before[key], "4.4.4.4")
    assert "4.4.4.4" in after.values()


def test_remove_all_empties_ring():
    k = Ketama()
    k.add(*NODES)
    k.remove(*NODES)
    assert k.empty() is True
    assert k.get("x") is None


def test_remove_unknown_node_changes_nothing():
    k = Ketama(replicas=5)
    k.add("2.2.2.2")
    k.remove("9.9.9.9")
    assert k.get("key") == "2.2.2.2"


def test_single_node_takes_every_key():
    k = Ketama(replicas=3)
    k.add("only")
    assert {k.get(key) for key in KEYS} == {"only"}


def test_negative_replicas_rejected():
    with pytest.raises(ValueError):
        Ketama(replicas=-1)