import pytest

from binheap.datastructures.slot_array import SlotArray


def test_new_slots_are_empty():
    s = SlotArray(4)
    assert s.capacity == 4
    assert len(s) == 4
    assert list(s) == [None, None, None, None]


def test_set_get_and_bounds():
    s = SlotArray(2)
    s[0] = "a"
    s[1] = "b"
    assert s[0] == "a" and s[1] == "b"
    with pytest.raises(IndexError):
        s[2]
    with pytest.raises(IndexError):
        s[-1] = "x"


def test_grow_doubles_and_keeps_positions():
    s = SlotArray(3)
    for i in range(3):
        s[i] = i * 10
    s.grow()
    assert s.capacity == 6
    assert list(s) == [0, 10, 20, None, None, None]
    s[5] = 50
    assert s[5] == 50


def test_clear_and_swap():
    s = SlotArray(3)
    s[0], s[1] = "x", "y"
    s.swap(0, 1)
    assert (s[0], s[1]) == ("y", "x")
    s.clear(0)
    assert s[0] is None
    with pytest.raises(IndexError):
        s.swap(0, 3)


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        SlotArray(0)
