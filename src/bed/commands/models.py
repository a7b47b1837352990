"""Dataclasses describing parsed editor commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Range:
    """Inclusive 1-based line span. ``start > end`` selects nothing."""

    start: int
    end: int

    def __len__(self) -> int:
        return max(0, self.end - self.start + 1)

    def indices(self) -> range:
        """0-based indices covered by the span."""

        return range(self.start - 1, self.end)


@dataclass(frozen=True, slots=True)
class Quit:
    pass


@dataclass(frozen=True, slots=True)
class Print:
    range: Range


@dataclass(frozen=True, slots=True)
class NPrint:
    range: Range


@dataclass(frozen=True, slots=True)
class Move:
    line: int


@dataclass(frozen=True, slots=True)
class Change:
    pass


@dataclass(frozen=True, slots=True)
class Write:
    pass


@dataclass(frozen=True, slots=True)
class NoOp:
    """Input that matched no command; ``text`` is kept for the diagnostic."""

    text: str = ""


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """Input that looked like a command but could not be evaluated."""

    text: str
    reason: str


Command = Union[Quit, Print, NPrint, Move, Change, Write, NoOp, ParseFailure]

__all__ = [
    "Change",
    "Command",
    "Move",
    "NPrint",
    "NoOp",
    "ParseFailure",
    "Print",
    "Quit",
    "Range",
    "Write",
]
