"""Actions that move the current line or change and save the buffer."""

from __future__ import annotations

from typing import Sequence

from bed.buffer import ensure_line, write_buffer
from bed.commands import Change, Move, Quit, Write
from bed.context import ModeContext, ModeResult
from bed.errors import FileError


def move_to(context: ModeContext, command: Move) -> ModeResult:
    line = ensure_line(context.buffer.document, command.line)
    context.state.set_line(line)
    return ModeResult(status="move")


def begin_change(context: ModeContext, command: Change) -> ModeResult:
    del command
    # An empty buffer has no current line but can still receive text.
    if context.buffer.line_count():
        ensure_line(context.buffer.document, context.state.current_line)
    return ModeResult(status="change_start", switch_to="change")


def apply_change(context: ModeContext, lines: Sequence[str]) -> ModeResult:
    """Replace the current line with ``lines``.

    The newline that ended the old line is kept, so the joined text goes in
    without a trailing newline of its own.
    """

    buffer = context.buffer
    state = context.state
    text = "\n".join(lines)
    if buffer.line_count() == 0:
        buffer.insert(0, text)
        state.set_line(buffer.line_count())
    else:
        index = ensure_line(buffer.document, state.current_line) - 1
        buffer.replace_line(index, text)
        state.clamp(buffer.line_count())
    context.bus.emit("buffer.changed", {"lines": len(lines)})
    return ModeResult(status="change_commit", switch_to="command")


def write_file(context: ModeContext, command: Write) -> ModeResult:
    del command
    if context.path is None:
        raise FileError("no current filename", path="")
    written = write_buffer(context.buffer, context.path)
    context.bus.emit("buffer.written", {"path": str(context.path), "bytes": written})
    return ModeResult(status="write")


def quit_session(context: ModeContext, command: Quit) -> ModeResult:
    del command
    context.bus.emit("session.quit", None)
    return ModeResult(status="quit", quit=True)


__all__ = ["apply_change", "begin_change", "move_to", "quit_session", "write_file"]
