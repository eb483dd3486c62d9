import pytest

from chaincoll.array import Array
from chaincoll.common import default_cmp


def _float_array():
    array = Array(10)
    i = 0.27
    while i < 10:
        array.set(int(i), i)
        i += 1
    return array


def test_float_set_and_get():
    array = _float_array()
    i = 0.27
    while i < 10:
        assert array.get(int(i)) == pytest.approx(i, abs=1e-6)
        i += 1


def test_float_reverse_partial_then_whole():
    array = _float_array()
    array.reverse(3, 7)
    array.reverse(0, len(array))
    expected = [9.27, 8.27, 7.27, 3.27, 4.27, 5.27, 6.27, 2.27, 1.27, 0.27]
    assert list(array) == pytest.approx(expected)


def test_records_iterate_in_order():
    array = Array(10)
    for i in range(10):
        array.set(i, {"index": i, "payload": bytearray(10)})
    assert [record["index"] for record in array] == list(range(10))
    assert all(len(record["payload"]) == 10 for record in array)


def test_fill_value():
    array = Array(3, fill=0)
    assert list(array) == [0, 0, 0]
    assert len(array) == 3


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Array(-1)


@pytest.mark.parametrize("index", [3, 10, -1])
def test_get_out_of_range(index):
    array = Array(3)
    with pytest.raises(IndexError):
        array.get(index)


def test_set_out_of_range():
    array = Array(3)
    with pytest.raises(IndexError):
        array.set(3, "x")
    with pytest.raises(IndexError):
        array[5] = "x"


def test_item_access():
    array = Array(2)
    array[1] = "b"
    assert array[1] == "b"
    assert array.get(0) is None


def test_is_valid_index():
    array = Array(4)
    assert array.is_valid_index(0)
    assert array.is_valid_index(3)
    assert not array.is_valid_index(4)
    assert not array.is_valid_index(-1)


def test_swap_and_compare():
    array = Array(2)
    array[0], array[1] = 5, 2
    assert array.compare(default_cmp, 0, 1) > 0
    array.swap(0, 1)
    assert list(array) == [2, 5]
    assert array.compare(default_cmp, 0, 1) < 0


def test_reverse_clamps_end():
    array = Array(5)
    for i in range(5):
        array[i] = i
    array.reverse(2, 100)
    assert list(array) == [0, 1, 4, 3, 2]


def test_reverse_empty_range_rejected():
    array = Array(5)
    with pytest.raises(ValueError):
        array.reverse(2, 2)


def test_reverse_start_out_of_range():
    array = Array(5)
    with pytest.raises(IndexError):
        array.reverse(5, 7)