import random

import pytest

from estruturas.sorting import (
    adjacent_duplicates,
    bubble_sort,
    bubble_sort_early_exit,
    bubble_sort_from_middle,
    insertion_sort,
    quick_sort,
    recursive_sum,
    selection_sort,
)

IMPROVED_INPUT = [16, 8, 0, 3, 4, 7, 13, 22, 6, 5, 1, 24, 12, 9, 77, 11, 12, 87, 33, 56, 89, 56, 32, 90, 34]
MIDDLE_INPUT = [16, 8, 0, 3, 4, 7, 13, 22, 6, 5, 1, 24, 12, 9, 77, 34, 11, 45, 76, 89, 100, 2, 33]
REPEATED_INPUT = [25, 4, 6, 7, 9, 0, 1, 2, 5, 8, 77, 99, 4, 25, 10, 38, 40, 55, 20, 44, 35, 38, 99, 10, 65, 50]

INPUTS = [
    IMPROVED_INPUT,
    MIDDLE_INPUT,
    REPEATED_INPUT,
    [],
    [42],
    [2, 1],
    list(range(20, 0, -1)),
    [5, 5, 5, 5],
    [-3, 10, -7, 0, 2],
]


@pytest.mark.parametrize("values", INPUTS)
def test_sorters_produce_sorted_permutation(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert bubble_sort_early_exit(values) == expected
    assert bubble_sort_from_middle(values) == expected
    assert selection_sort(values) == expected
    assert insertion_sort(values) == expected
    assert quick_sort(values, random.Random(7)) == expected


def test_sorters_leave_input_untouched():
    values = list(MIDDLE_INPUT)
    bubble_sort(values)
    assert values == MIDDLE_INPUT
    bubble_sort_early_exit(values)
    assert values == MIDDLE_INPUT
    bubble_sort_from_middle(values)
    assert values == MIDDLE_INPUT
    selection_sort(values)
    assert values == MIDDLE_INPUT
    insertion_sort(values)
    assert values == MIDDLE_INPUT
    quick_sort(values, random.Random(7))
    assert values == MIDDLE_INPUT


def test_sorters_accept_any_iterable():
    expected = [1, 2, 3]
    assert bubble_sort(iter((3, 1, 2))) == expected
    assert bubble_sort_early_exit(iter((3, 1, 2))) == expected
    assert bubble_sort_from_middle(iter((3, 1, 2))) == expected
    assert selection_sort(iter((3, 1, 2))) == expected
    assert insertion_sort(iter((3, 1, 2))) == expected
    assert quick_sort(iter((3, 1, 2)), random.Random(7)) == expected


def test_quick_sort_without_rng():
    rng = random.Random(1)
    values = [rng.randint(0, 49) for _ in range(200)]
    assert quick_sort(values) == sorted(values)


def test_quick_sort_is_independent_of_seed():
    assert quick_sort(REPEATED_INPUT, random.Random(1)) == quick_sort(REPEATED_INPUT, random.Random(99))


def test_adjacent_duplicates_small_example():
    assert adjacent_duplicates([3, 1, 3]) == [(1, 2, 3)]


def test_adjacent_duplicates_invariants():
    ordered = sorted(REPEATED_INPUT)
    found = adjacent_duplicates(REPEATED_INPUT)
    assert len(found) == len(REPEATED_INPUT) - len(set(REPEATED_INPUT))
    for first, second, value in found:
        assert second == first + 1
        assert ordered[first] == ordered[second] == value


def test_adjacent_duplicates_none_when_distinct():
    assert adjacent_duplicates(range(10)) == []


@pytest.mark.parametrize("values", [IMPROVED_INPUT, MIDDLE_INPUT, [], [7], list(range(5000))])
def test_recursive_sum_matches_builtin(values):
    assert recursive_sum(values) == sum(values)