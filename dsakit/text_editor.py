"""A tiny line-oriented text buffer with a menu-driven editor."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import TextIO

MAX_TEXT_SIZE = 1000
"""Default buffer capacity; the text holds at most one character less."""

_WORD_SEPARATORS = frozenset(" \t\n")


def count_lines(text: str) -> int:
    """Return the number of newlines plus one for the last line."""
    return text.count("\n") + 1


def count_words(text: str) -> int:
    """Count runs of characters separated by spaces, tabs or newlines."""
    words = 0
    in_word = False
    for char in text:
        if char in _WORD_SEPARATORS:
            in_word = False
        elif not in_word:
            words += 1
            in_word = True
    return words


def read_text(path: str | Path, limit: int = MAX_TEXT_SIZE) -> str:
    """Read at most ``limit - 1`` characters from the file at ``path``."""
    if limit < 1:
        raise ValueError("limit must be at least 1")
    with open(path, encoding="utf-8") as handle:
        return handle.read(limit - 1)


def write_text(path: str | Path, text: str) -> None:
    """Write ``text`` to the file at ``path``, replacing its contents."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)


class TextBuffer:
    """Editable text limited to ``capacity - 1`` characters."""

    def __init__(self, text: str = "", capacity: int = MAX_TEXT_SIZE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._check_size(len(text))
        self.text = text

    def _check_size(self, size: int) -> None:
        if size > self.capacity - 1:
            raise ValueError(
                f"text of {size} characters exceeds the capacity of {self.capacity - 1}"
            )

    def find(self, pattern: str) -> int | None:
        """Return the position of the first occurrence of ``pattern``, or None."""
        position = self.text.find(pattern)
        return None if position < 0 else position

    def insert(self, position: int, text: str) -> None:
        """Insert ``text`` before index ``position``."""
        if not 0 <= position <= len(self.text):
            raise ValueError(f"position {position} is outside 0..{len(self.text)}")
        self._check_size(len(self.text) + len(text))
        self.text = self.text[:position] + text + self.text[position:]

    def delete(self, position: int, length: int) -> None:
        """Remove ``length`` characters starting at index ``position``."""
        if length < 0:
            raise ValueError("length must not be negative")
        if position < 0 or position + length > len(self.text):
            raise ValueError(
                f"cannot delete {length} characters at {position} "
                f"from text of length {len(self.text)}"
            )
        self.text = self.text[:position] + self.text[position + length :]

    def append(self, text: str) -> None:
        """Add ``text`` at the end."""
        self._check_size(len(self.text) + len(text))
        self.text += text

    def replace(self, old: str, new: str) -> bool:
        """Replace the first occurrence of ``old``; return whether one was found."""
        position = self.find(old)
        if position is None:
            return False
        self._check_size(len(self.text) - len(old) + len(new))
        self.delete(position, len(old))
        self.insert(position, new)
        return True

    def stats(self) -> tuple[int, int, int]:
        """Return ``(lines, characters, words)`` for the current text."""
        return count_lines(self.text), len(self.text), count_words(self.text)

    def save(self, path: str | Path) -> None:
        """Write the current text to ``path``."""
        write_text(path, self.text)


_MENU = (
    "\nMenu:\n"
    "1. Count lines, characters, and words\n"
    "2. Find a pattern\n"
    "3. Insert text at a specific position\n"
    "4. Delete text from a specific position\n"
    "5. Append text to the end\n"
    "6. Replace text\n"
    "7. Save and exit\n"
)


class _Prompter:
    """Reads whitespace-separated tokens after printing a prompt."""

    def __init__(self, stream: TextIO, out: TextIO) -> None:
        self._tokens = self._split(stream)
        self._out = out

    @staticmethod
    def _split(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def word(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError("input ended") from None

    def number(self, prompt: str) -> int | None:
        token = self.word(prompt)
        try:
            return int(token)
        except ValueError:
            return None


def _run(buffer: TextBuffer, filename: str, ask: _Prompter, out: TextIO) -> None:
    while True:
        out.write(_MENU)
        choice = ask.number("Enter your choice: ")
        try:
            if choice == 1:
                lines, characters, words = buffer.stats()
                out.write(f"Lines: {lines}\nCharacters: {characters}\nWords: {words}\n")
            elif choice == 2:
                position = buffer.find(ask.word("Enter a pattern to find: "))
                if position is None:
                    out.write("Pattern not found in the text.\n")
                else:
                    out.write(f"Pattern found at position: {position}\n")
            elif choice == 3:
                position = ask.number("Enter position to insert: ")
                insertion = ask.word("Enter text to insert: ")
                if position is None:
                    raise ValueError("position must be a number")
                buffer.insert(position, insertion)
            elif choice == 4:
                position = ask.number("Enter position to delete from: ")
                length = ask.number("Enter number of characters to delete: ")
                if position is None or length is None:
                    raise ValueError("position and length must be numbers")
                buffer.delete(position, length)
            elif choice == 5:
                buffer.append(ask.word("Enter text to append: "))
            elif choice == 6:
                old = ask.word("Enter old text to replace: ")
                new = ask.word("Enter new text: ")
                buffer.replace(old, new)
            elif choice == 7:
                buffer.save(filename)
                out.write("Text saved to file. Exiting...\n")
                return
            else:
                out.write("Invalid choice! Please try again.\n")
        except ValueError as error:
            out.write(f"Error: {error}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive editor; the file name may be given as the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    out = sys.stdout
    ask = _Prompter(sys.stdin, out)
    try:
        filename = args[0] if args else ask.word("Enter the filename: ")
        try:
            text = read_text(filename)
        except OSError:
            out.write("File not found or could not be opened.\n")
            text = ""
        _run(TextBuffer(text), filename, ask, out)
    except EOFError:
        out.write("\n")
        return 1
    except OSError:
        out.write("File could not be opened for writing.\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())