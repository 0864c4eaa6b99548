"""Substring search: the naive scan and a finite-automaton matcher."""

from __future__ import annotations


def _require_pattern(pattern: str) -> None:
    if not pattern:
        raise ValueError("pattern must not be empty")


def naive_search(text: str, pattern: str) -> list[int]:
    """Return every index at which ``pattern`` occurs in ``text`` (overlaps included)."""
    _require_pattern(pattern)
    m = len(pattern)
    return [i for i in range(len(text) - m + 1) if text[i : i + m] == pattern]


def _next_state(pattern: str, state: int, char: str) -> int:
    if state < len(pattern) and char == pattern[state]:
        return state + 1
    # Longest prefix of the pattern that is a suffix of pattern[:state] + char.
    for candidate in range(state, 0, -1):
        if (
            pattern[candidate - 1] == char
            and pattern[: candidate - 1] == pattern[state - candidate + 1 : state]
        ):
            return candidate
    return 0


def build_transition_table(pattern: str) -> list[dict[str, int]]:
    """Build the automaton's transition table for ``pattern``.

    Entry ``table[state][char]`` is the next state; characters that do not
    occur in the pattern are absent and always lead back to state 0.
    """
    _require_pattern(pattern)
    alphabet = sorted(set(pattern))
    return [
        {char: _next_state(pattern, state, char) for char in alphabet}
        for state in range(len(pattern) + 1)
    ]


def automaton_search(text: str, pattern: str) -> list[int]:
    """Return every index at which ``pattern`` occurs, scanning ``text`` once."""
    table = build_transition_table(pattern)
    m = len(pattern)
    matches = []
    state = 0
    for i, char in enumerate(text):
        state = table[state].get(char, 0)
        if state == m:
            matches.append(i - m + 1)
    return matches