"""Print and numbered-print actions."""

from __future__ import annotations

from bed.buffer import ensure_range
from bed.commands import NPrint, Print
from bed.context import ModeContext, ModeResult
from bed.render import gutter_width, render_line, render_numbered


def print_lines(context: ModeContext, command: Print) -> ModeResult:
    span = command.range
    ensure_range(context.buffer.document, span.start, span.end)
    output = tuple(
        render_line(context.buffer.line(index), context.highlighter)
        for index in span.indices()
    )
    return ModeResult(status="print", output=output)


def print_numbered(context: ModeContext, command: NPrint) -> ModeResult:
    span = command.range
    document = context.buffer.document
    ensure_range(document, span.start, span.end)
    width = gutter_width(document.line_count)
    output = tuple(
        render_numbered(
            index + 1,
            document.get_line(index),
            width=width,
            highlighter=context.highlighter,
        )
        for index in span.indices()
    )
    return ModeResult(status="print", output=output)


__all__ = ["print_lines", "print_numbered"]
