"""Elementary string operations."""

from __future__ import annotations


def _require_char(value: str, name: str) -> None:
    if len(value) != 1:
        raise ValueError(f"{name} must be a single character")


def strings_equal(first: str, second: str) -> bool:
    """Return True when both strings have the same characters in the same order."""
    return len(first) == len(second) and all(a == b for a, b in zip(first, second))


def concatenate(first: str, second: str) -> str:
    """Join two strings with a single space between them."""
    return f"{first} {second}"


def remove_char(text: str, char: str) -> str:
    """Return ``text`` with every occurrence of ``char`` removed."""
    _require_char(char, "char")
    return "".join(c for c in text if c != char)


def insert_at(text: str, insertion: str, position: int) -> str:
    """Return ``text`` with ``insertion`` placed before index ``position``."""
    if not 0 <= position <= len(text):
        raise ValueError(f"position {position} is outside 0..{len(text)}")
    return text[:position] + insertion + text[position:]


def string_length(text: str) -> int:
    """Return the number of characters in ``text``."""
    return sum(1 for _ in text)


def replace_char(text: str, old: str, new: str) -> str:
    """Return ``text`` with every ``old`` character replaced by ``new``."""
    _require_char(old, "old")
    _require_char(new, "new")
    return "".join(new if c == old else c for c in text)


def reverse(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]