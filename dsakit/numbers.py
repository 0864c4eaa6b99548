"""Small numeric routines: primes, aggregates, factorials and sequences."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from math import isqrt


def primes_up_to(n: int) -> list[int]:
    """Return every prime from 2 to ``n`` inclusive (sieve of Eratosthenes)."""
    if n < 2:
        return []
    composite = [False] * (n + 1)
    for i in range(2, isqrt(n) + 1):
        if not composite[i]:
            for j in range(2 * i, n + 1, i):
                composite[j] = True
    return [i for i in range(2, n + 1) if not composite[i]]


def min_max(values: Iterable[int]) -> tuple[int, int]:
    """Return ``(smallest, largest)`` of a non-empty sequence."""
    items = iter(values)
    try:
        first = next(items)
    except StopIteration:
        raise ValueError("min_max() needs at least one value") from None
    smallest = largest = first
    for value in items:
        if value > largest:
            largest = value
        if value < smallest:
            smallest = value
    return smallest, largest


def array_sum(values: Iterable[int]) -> int:
    """Return the sum of the values (0 for none)."""
    return sum(values)


def factorial(n: int) -> int:
    """Return the product 1 * 2 * ... * n; the empty product 1 when n < 1."""
    result = 1
    for i in range(1, n + 1):
        result *= i
    return result


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with F(0) = 0 and F(1) = 1."""
    if n < 0:
        raise ValueError("Fibonacci index must not be negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def _fibonacci_terms() -> Iterator[int]:
    current, following = 0, 1
    while True:
        yield current
        current, following = following, current + following


def fibonacci_sequence(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers, starting from F(0)."""
    terms = _fibonacci_terms()
    return [next(terms) for _ in range(max(count, 0))]


def count_max_diff_pairs(values: Iterable[int]) -> int:
    """Count ordered pairs (i, j), i != j, whose difference is the largest possible.

    When every value is equal, every ordered pair qualifies: n * (n - 1).
    Otherwise it is twice the product of how often the minimum and the
    maximum occur.
    """
    items = list(values)
    if not items:
        raise ValueError("count_max_diff_pairs() needs at least one value")
    smallest, largest = min(items), max(items)
    if smallest == largest:
        return len(items) * (len(items) - 1)
    return 2 * items.count(smallest) * items.count(largest)


def perfect_permutation(n: int) -> list[int]:
    """Return a permutation of 1..n with no fixed point where one exists.

    For n == 1 the only permutation, ``[1]``, is returned.
    """
    if n < 1:
        raise ValueError("permutation length must be at least 1")
    if n == 1:
        return [1]
    return [*range(2, n + 1), 1]