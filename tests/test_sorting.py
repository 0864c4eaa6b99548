import random

import pytest

from dsakit.sorting import bubble_sort, merge_sort, merge_sorted, selection_sort


def test_sorts_source_example():
    data = [12, 11, 13, 5, 6, 7]
    expected = [5, 6, 7, 11, 12, 13]
    assert merge_sort(data) == expected
    assert bubble_sort(data) == expected
    assert selection_sort(data) == expected


def test_sorts_do_not_modify_input():
    data = [3, 1, 2]
    merge_sort(data)
    bubble_sort(data)
    selection_sort(data)
    assert data == [3, 1, 2]


@pytest.mark.parametrize("seed", range(5))
def test_sorts_random(seed):
    rng = random.Random(seed)
    data = [rng.randint(-50, 50) for _ in range(rng.randint(0, 40))]
    expected = sorted(data)
    assert merge_sort(data) == expected
    assert bubble_sort(data) == expected
    assert selection_sort(data) == expected


def test_sorts_trivial():
    assert merge_sort([]) == []
    assert bubble_sort([]) == []
    assert selection_sort([]) == []
    assert merge_sort([9]) == [9]
    assert bubble_sort([9]) == [9]
    assert selection_sort([9]) == [9]


def test_merge_sort_is_stable():
    pairs = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]

    class Key:
        def __init__(self, pair):
            self.pair = pair

        def __lt__(self, other):
            return self.pair[0] < other.pair[0]

        def __le__(self, other):
            return self.pair[0] <= other.pair[0]

    result = [k.pair for k in merge_sort(Key(p) for p in pairs)]
    assert result == sorted(pairs, key=lambda p: p[0])


def test_merge_sorted_combines():
    first = [1, 4, 9, 12]
    second = [2, 3, 10]
    assert merge_sorted(first, second) == sorted(first + second)


def test_merge_sorted_with_empty():
    assert merge_sorted([], [1, 2]) == [1, 2]
    assert merge_sorted([5, 6], []) == [5, 6]
    assert merge_sorted([], []) == []


def test_merge_sorted_length_is_preserved():
    rng = random.Random(7)
    first = sorted(rng.randint(0, 20) for _ in range(15))
    second = sorted(rng.randint(0, 20) for _ in range(9))
    merged = merge_sorted(first, second)
    assert len(merged) == len(first) + len(second)
    assert merged == sorted(merged)