import random

import pytest

from chaincoll.array import Array
from chaincoll.array_sort import sort_bubble, sort_quick
from chaincoll.common import default_cmp

SAMPLE = "A quick brown fox jumps over the lazy dog."

PEOPLE = [("Harry", 10), ("Albus", 109), ("Severus", 50)]


def _cmp_char_desc(left, right):
    return -(ord(left) - ord(right))


def _array_of(values):
    array = Array(len(values))
    for index, value in enumerate(values):
        array[index] = value
    return array


def _cmp_name_desc(left, right):
    return -((left[0] > right[0]) - (left[0] < right[0]))


def _cmp_age_desc(left, right):
    return -(left[1] - right[1])


def test_quick_sort_chars_descending():
    array = _array_of(list(SAMPLE[:10]))
    sort_quick(array, _cmp_char_desc)
    assert "".join(array) == "urqkicbA  "


def test_bubble_sort_chars_descending():
    array = _array_of(list(SAMPLE[:10]))
    sort_bubble(array, _cmp_char_desc)
    assert "".join(array) == "urqkicbA  "


def test_bubble_sort_records_by_name_then_age():
    array = _array_of(PEOPLE)
    sort_bubble(array, _cmp_name_desc)
    assert array.get(0)[1] == 50
    sort_bubble(array, _cmp_age_desc)
    assert array.get(0)[1] == 109


@pytest.mark.parametrize("sort", [sort_quick, sort_bubble])
def test_sorts_random_ints(sort):
    rng = random.Random(1234)
    values = [rng.randint(-50, 50) for _ in range(200)]
    array = _array_of(values)
    sort(array, default_cmp)
    assert list(array) == sorted(values)


@pytest.mark.parametrize("sort", [sort_quick, sort_bubble])
@pytest.mark.parametrize("values", [[], [1], [2, 1], [3, 3, 3], list(range(50))])
def test_sorts_edge_cases(sort, values):
    array = _array_of(values)
    sort(array, default_cmp)
    assert list(array) == sorted(values)


def test_quick_sort_handles_long_sorted_input():
    values = list(range(3000))
    array = _array_of(values[::-1])
    sort_quick(array, default_cmp)
    assert list(array) == values


@pytest.mark.parametrize("sort", [sort_quick, sort_bubble])
def test_missing_cmp_rejected(sort):
    with pytest.raises(ValueError):
        sort(_array_of([2, 1]), None)