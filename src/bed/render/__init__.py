"""Line rendering: gutters and optional syntax highlighting."""

from .highlight import RESET, Highlighter, highlighter_for
from .lines import (
    GUTTER_SEPARATOR,
    LineFilter,
    gutter_width,
    render_line,
    render_numbered,
)

__all__ = [
    "GUTTER_SEPARATOR",
    "RESET",
    "Highlighter",
    "LineFilter",
    "gutter_width",
    "highlighter_for",
    "render_line",
    "render_numbered",
]
