import struct

import pytest

from stlkit.bloom import BloomFilter, estimate_parameters


def test_bloomfilter():
    b = BloomFilter(10000, 7, thread_safe=True)
    assert b.contains("aa") is False
    b.add("aa")
    assert b.contains("aa") is True

    other = BloomFilter.from_data(b.data(), thread_safe=True)
    assert other.contains("aa") is True

    b = BloomFilter.with_estimates(100000, 0.0001, thread_safe=True)
    b.add("bbbbb")
    assert b.contains("bbbbb") is True


def test_in_operator():
    b = BloomFilter(1000, 3)
    b.add("hello")
    assert "hello" in b
    assert "hello" in BloomFilter.from_data(b.data())


def test_no_false_negatives():
    b = BloomFilter.with_estimates(500, 0.01)
    words = [f"item-{i}" for i in range(500)]
    for w in words:
        b.add(w)
    assert all(w in b for w in words)


def test_data_header():
    b = BloomFilter(10000, 7)
    data = b.data()
    assert data[:16] == struct.pack("<QQ", 10000, 7)
    assert len(data) == 16 + 10000 // 8


def test_round_trip_preserves_bytes():
    b = BloomFilter(300, 4)
    for w in ("x", "y", "z"):
        b.add(w)
    assert BloomFilter.from_data(b.data()).data() == b.data()


def test_estimate_parameters_grow_with_stricter_rate():
    m1, k1 = estimate_parameters(1000, 0.1)
    m2, k2 = estimate_parameters(1000, 0.001)
    assert m2 > m1
    assert k2 > k1
    assert m1 > 0 and k1 > 0


@pytest.mark.parametrize("n, p", [(0, 0.1), (10, 0.0), (10, 1.0), (10, 1.5)])
def test_estimate_parameters_rejects_bad_input(n, p):
    with pytest.raises(ValueError):
        estimate_parameters(n, p)


def test_from_data_too_short():
    with pytest.raises(ValueError):
        BloomFilter.from_data(b"\x00" * 8)


def test_zero_bits_rejected():
    with pytest.raises(ValueError):
        BloomFilter(0, 3)