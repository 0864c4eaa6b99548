import pytest

from dsakit.searching import binary_search, linear_search

DATA = [2, 5, 8, 12, 16, 23, 38, 56, 72, 91]


@pytest.mark.parametrize("target", DATA)
def test_binary_search_finds_every_element(target):
    index = binary_search(DATA, target)
    assert DATA[index] == target


@pytest.mark.parametrize("target", [0, 3, 100, 13])
def test_binary_search_missing(target):
    assert binary_search(DATA, target) is None


def test_binary_search_empty():
    assert binary_search([], 1) is None


def test_binary_search_single():
    assert binary_search([4], 4) == 0
    assert binary_search([4], 5) is None


def test_linear_search_first_occurrence():
    data = [7, 3, 9, 3, 1]
    assert linear_search(data, 3) == data.index(3)


def test_linear_search_missing():
    assert linear_search([1, 2, 3], 4) is None
    assert linear_search([], 4) is None


def test_search_functions_agree_on_sorted_unique_data():
    for target in range(0, 100):
        assert binary_search(DATA, target) == linear_search(DATA, target)