import random

import pytest

from algolab.linked_list import (
    ListNode,
    add_two_numbers,
    find_middle,
    from_values,
    merge_two_lists,
    reverse_k_group,
    reverse_list,
    sort_list,
    sort_values_in_place,
    swap_pairs,
    to_values,
)

SAMPLES = [[], [7], [4, 3, 2, 1], [5, -1, 3, 3, 0, 9], list(range(10, 0, -1))]


def _digits_to_int(digits):
    return int("".join(str(d) for d in reversed(digits))) if digits else 0


@pytest.mark.parametrize("values", SAMPLES)
def test_round_trip(values):
    assert to_values(from_values(values)) == values


def test_empty_list_is_none():
    assert from_values([]) is None
    assert to_values(None) == []


@pytest.mark.parametrize("values", SAMPLES)
def test_sort_list(values):
    assert to_values(sort_list(from_values(values))) == sorted(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_sort_values_in_place_keeps_nodes(values):
    head = from_values(values)
    result = sort_values_in_place(head)
    assert result is head
    assert to_values(result) == sorted(values)


def test_sort_list_random():
    rng = random.Random(3)
    values = [rng.randint(-50, 50) for _ in range(200)]
    assert to_values(sort_list(from_values(values))) == sorted(values)


def test_find_middle_even_length():
    assert find_middle(from_values([1, 2, 3, 4])).val == 2


def test_find_middle_single():
    node = ListNode(5)
    assert find_middle(node) is node


def test_find_middle_empty_raises():
    with pytest.raises(ValueError):
        find_middle(None)


def test_merge_two_lists():
    a, b = [1, 3, 5, 7], [2, 2, 6]
    merged = merge_two_lists(from_values(a), from_values(b))
    assert to_values(merged) == sorted(a + b)


def test_merge_with_empty():
    assert to_values(merge_two_lists(None, from_values([1, 2]))) == [1, 2]


@pytest.mark.parametrize("values", SAMPLES)
def test_reverse_list(values):
    assert to_values(reverse_list(from_values(values))) == values[::-1]


@pytest.mark.parametrize("values", SAMPLES)
def test_swap_pairs_matches_groups_of_two(values):
    swapped = to_values(swap_pairs(from_values(values)))
    grouped = to_values(reverse_k_group(from_values(values), 2))
    assert swapped == grouped
    assert sorted(swapped) == sorted(values)


def test_reverse_k_group_source_example():
    head = from_values([1, 2, 3, 4, 5])
    assert to_values(reverse_k_group(head, 2)) == [2, 1, 4, 3, 5]


@pytest.mark.parametrize("values", SAMPLES)
def test_reverse_k_group_identity_and_full(values):
    assert to_values(reverse_k_group(from_values(values), 1)) == values
    if values:
        full = reverse_k_group(from_values(values), len(values))
        assert to_values(full) == values[::-1]


def test_reverse_k_group_too_large_keeps_list():
    assert to_values(reverse_k_group(from_values([1, 2, 3]), 4)) == [1, 2, 3]


def test_reverse_k_group_rejects_zero():
    with pytest.raises(ValueError):
        reverse_k_group(from_values([1, 2]), 0)


@pytest.mark.parametrize(
    "a, b", [([2, 4, 3], [5, 6, 4]), ([9, 9, 9], [1]), ([0], [0]), ([5], [5])]
)
def test_add_two_numbers(a, b):
    total = to_values(add_two_numbers(from_values(a), from_values(b)))
    assert _digits_to_int(total) == _digits_to_int(a) + _digits_to_int(b)
    assert all(0 <= d <= 9 for d in total)