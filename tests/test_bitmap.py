import pytest

from stlkit.bitmap import Bitmap


def test_set_unset_all():
    bm = Bitmap(100)
    for k in range(100):
        assert bm.is_set(k) is False
        bm.set(k)
        assert bm.is_set(k) is True

    for k in range(100):
        assert bm.is_set(k) is True
        bm.unset(k)
        assert bm.is_set(k) is False

    assert bm.set(10) is True
    assert bm.set(1000) is False
    assert bm.unset(1000) is False

    bm.clear()
    assert bm.is_set(10) is False


def test_size_rounds_up_to_byte():
    assert Bitmap(100).size() == 104
    assert Bitmap(8).size() == 8
    assert len(Bitmap(100).data()) == Bitmap(100).size() // 8


def test_from_data():
    bm = Bitmap(100)
    bm.set(6)
    bm.set(20)
    bm.set(77)

    bm2 = Bitmap.from_data(bm.data())
    assert bm.size() == bm2.size()
    for i in range(100):
        assert bm.is_set(i) == bm2.is_set(i)


def test_data_layout_is_lsb_first():
    bm = Bitmap(16)
    bm.set(0)
    bm.set(9)
    assert bm.data() == bytes([0x01, 0x02])


def test_resize():
    bm = Bitmap(100)
    bm.set(6)
    bm.set(20)
    bm.set(77)

    bm.resize(1000)
    assert bm.is_set(6) is True
    assert bm.is_set(20) is True
    assert bm.is_set(77) is True

    bm.resize(10)
    assert bm.is_set(6) is True
    assert bm.is_set(20) is False
    assert bm.is_set(77) is False


def test_negative_position_is_out_of_range():
    bm = Bitmap(8)
    assert bm.set(-1) is False
    assert bm.is_set(-1) is False


def test_negative_size_raises():
    with pytest.raises(ValueError):
        Bitmap(-1)