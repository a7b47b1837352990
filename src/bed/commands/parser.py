"""Turn one line of user input into a ``Command``."""

from __future__ import annotations

import re

from bed.errors import ParseError
from bed.runtime import telemetry

from .address import match_address, parse_line_number, resolve_range
from .models import (
    Change,
    Command,
    Move,
    NoOp,
    NPrint,
    ParseFailure,
    Print,
    Quit,
    Write,
)

QUIT_RE = re.compile(r"^(q|quit)$")
CHANGE_RE = re.compile(r"^c\s*$")
MOVE_RE = re.compile(r"^(\d+)$", re.ASCII)
WRITE_RE = re.compile(r"^w\s*$")


def parse_command(raw: str, current_line: int, max_line: int) -> Command:
    """Classify ``raw`` into exactly one command variant.

    Rules are tried in a fixed order: quit, the print family, change, a
    bare line number, write. Never raises; bad input comes back as
    ``NoOp`` or ``ParseFailure``.
    """

    text = raw.strip()
    try:
        command = _classify(text, current_line, max_line)
    except ParseError as exc:
        command = ParseFailure(text=text, reason=str(exc))

    if isinstance(command, (NoOp, ParseFailure)):
        telemetry.record_event(
            "command.rejected",
            level="debug",
            data={"text": text, "variant": type(command).__name__},
        )
    return command


def _classify(text: str, current_line: int, max_line: int) -> Command:
    if QUIT_RE.match(text):
        return Quit()

    address = match_address(text)
    if address is not None:
        span = resolve_range(address, current_line, max_line)
        if address.suffix == "n":
            return NPrint(range=span)
        return Print(range=span)

    if CHANGE_RE.match(text):
        return Change()

    move = MOVE_RE.match(text)
    if move is not None:
        return Move(line=parse_line_number(move.group(1), text))

    if WRITE_RE.match(text):
        return Write()

    return NoOp(text=text)


__all__ = ["parse_command"]
