"""Tower of Hanoi move generation."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """One disk moved from one peg to another."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"Move disk {self.disk} from peg {self.source} to peg {self.target}"


def _moves(disks: int, source: str, target: str, auxiliary: str) -> Iterator[Move]:
    if disks == 1:
        yield Move(1, source, target)
        return
    yield from _moves(disks - 1, source, auxiliary, target)
    yield Move(disks, source, target)
    yield from _moves(disks - 1, auxiliary, target, source)


def hanoi_moves(
    disks: int, source: str = "A", target: str = "C", auxiliary: str = "B"
) -> list[Move]:
    """Return the moves that carry ``disks`` disks from ``source`` to ``target``."""
    if disks < 1:
        raise ValueError("number of disks must be at least 1")
    return list(_moves(disks, source, target, auxiliary))