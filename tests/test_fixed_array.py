import pytest

from algolab.fixed_array import FixedArray, array_of


def test_holds_initial_values():
    arr = FixedArray(3, [1, 2, 3])
    assert list(arr) == [1, 2, 3]
    assert arr.size() == 3
    assert len(arr) == 3
    assert not arr.empty()


def test_short_initialiser_is_padded():
    arr = FixedArray(3, [1])
    assert list(arr) == [1, None, None]


def test_too_many_values_rejected():
    with pytest.raises(ValueError):
        FixedArray(1, [1, 2])


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        FixedArray(-1)


def test_at_out_of_range_message():
    arr = FixedArray(3, [1, 2, 3])
    assert arr.at(1) == 2
    with pytest.raises(IndexError, match="out of range at index 3, size 3"):
        arr.at(3)
    with pytest.raises(IndexError):
        arr.at(-1)


def test_empty_array_at_raises():
    arr = FixedArray(0)
    assert arr.empty()
    with pytest.raises(IndexError, match="size 0"):
        arr.at(0)


def test_fill_sets_every_slot():
    arr = FixedArray(4)
    arr.fill(7)
    assert all(value == 7 for value in arr)
    assert arr.size() == 4


def test_swap_exchanges_contents():
    first = FixedArray(2, ["a", "b"])
    second = FixedArray(2, ["x", "y"])
    first.swap(second)
    assert list(first) == ["x", "y"]
    assert list(second) == ["a", "b"]


def test_swap_size_mismatch():
    with pytest.raises(ValueError):
        FixedArray(2).swap(FixedArray(3))


def test_front_back_and_reverse():
    arr = FixedArray(3, [1, 2, 3])
    assert arr.front() == 1
    assert arr.back() == 3
    assert list(reversed(arr)) == [3, 2, 1]
    with pytest.raises(IndexError):
        FixedArray(0).back()


def test_setitem_round_trip():
    arr = FixedArray(2)
    arr[1] = "v"
    assert arr[1] == "v"
    assert arr.at(1) == "v"


def test_array_of_deduces_size():
    arr = array_of(1, 2, 3)
    assert arr.size() == 3
    assert arr == FixedArray(3, [1, 2, 3])


def test_array_of_needs_values():
    with pytest.raises(TypeError):
        array_of()