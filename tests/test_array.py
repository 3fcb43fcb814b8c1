import pytest

from memadt.array import Array


def _make(*items):
    arr = Array()
    for item in items:
        arr.push_back(item)
    return arr


def test_push_back_keeps_order():
    arr = _make("c", "a", "b")
    assert list(arr) == ["c", "a", "b"]
    assert len(arr) == 3
    assert arr[1] == "a"
    assert list(reversed(arr)) == ["b", "a", "c"]


def test_pop_front_moves_last_to_front():
    arr = _make(1, 2, 3)
    arr.pop_front()
    assert list(arr) == [3, 2]


def test_pop_front_single_and_empty():
    arr = _make(7)
    arr.pop_front()
    assert len(arr) == 0
    arr.pop_front()
    assert len(arr) == 0


def test_pop_back():
    arr = _make(1, 2, 3)
    arr.pop_back()
    assert list(arr) == [1, 2]
    arr.clear()
    arr.pop_back()
    assert list(arr) == []


def test_erase_value_fills_hole_with_last():
    arr = _make(1, 2, 3, 4)
    assert arr.erase(2) is True
    assert list(arr) == [1, 4, 3]
    assert arr.erase(99) is False
    assert len(arr) == 3


def test_erase_last_element():
    arr = _make(1, 2, 3)
    assert arr.erase_at(2) is True
    assert list(arr) == [1, 2]


def test_erase_at_empty_and_out_of_range():
    arr = Array()
    assert arr.erase_at(0) is False
    arr.push_back(5)
    with pytest.raises(IndexError):
        arr.erase_at(1)


def test_find():
    arr = _make("x", "y", "x")
    assert arr.find("x") == 0
    assert arr.find("y") == 1
    assert arr.find("z") is None


def test_sort_orders_elements():
    arr = _make("dd", "aa", "cc", "bb")
    arr.sort()
    values = list(arr)
    assert values == sorted(values)
    assert sorted(values) == ["aa", "bb", "cc", "dd"]


def test_clear():
    arr = _make(1, 2)
    arr.clear()
    assert len(arr) == 0
    assert list(arr) == []