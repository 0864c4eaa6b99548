"""Classic comparison sorts and the merge of two sorted sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def merge_sorted(first: Sequence[Any], second: Sequence[Any]) -> list[Any]:
    """Merge two ascending sequences into one ascending list.

    On ties the element of ``second`` is taken first.
    """
    result: list[Any] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            result.append(first[i])
            i += 1
        else:
            result.append(second[j])
            j += 1
    result.extend(first[i:])
    result.extend(second[j:])
    return result


def _merge_stable(left: list[Any], right: list[Any]) -> list[Any]:
    result: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new ascending list using a stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge_stable(merge_sort(items[:middle]), merge_sort(items[middle:]))


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new ascending list using bubble sort."""
    items = list(values)
    n = len(items)
    for sweep in range(n - 1):
        for j in range(n - sweep - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new ascending list using selection sort."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        smallest = min(range(i, n), key=items.__getitem__)
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]
    return items