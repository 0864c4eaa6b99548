"""Linear and binary search over sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in the ascending ``values``, or None."""
    first, last = 0, len(values) - 1
    while first <= last:
        mid = (first + last) // 2
        if values[mid] < target:
            first = mid + 1
        elif values[mid] == target:
            return mid
        else:
            last = mid - 1
    return None


def linear_search(values: Sequence[Any], target: Any) -> int | None:
    """Return the index of the first occurrence of ``target``, or None."""
    return next((i for i, value in enumerate(values) if value == target), None)