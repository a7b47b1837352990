"""Formatting of buffer lines for plain and numbered printing."""

from __future__ import annotations

from typing import Callable, Optional

from .highlight import RESET

GUTTER_SEPARATOR = " │ "

LineFilter = Callable[[str], str]


def gutter_width(line_count: int) -> int:
    """Digits needed for the largest line number in the buffer."""

    return len(str(max(line_count, 0)))


def render_line(text: str, highlighter: Optional[LineFilter] = None) -> str:
    if highlighter is None:
        return text
    return highlighter(text) + RESET


def render_numbered(
    number: int,
    text: str,
    *,
    width: int,
    highlighter: Optional[LineFilter] = None,
) -> str:
    return f"{number:>{width}}{GUTTER_SEPARATOR}{render_line(text, highlighter)}"


__all__ = [
    "GUTTER_SEPARATOR",
    "LineFilter",
    "gutter_width",
    "render_line",
    "render_numbered",
]
