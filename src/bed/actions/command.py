"""Dispatch parsed commands to their actions."""

from __future__ import annotations

from typing import Any, Callable, Dict, Type

from bed.commands import (
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
from bed.context import ModeContext, ModeResult
from bed.errors import BedError
from bed.runtime import telemetry

from .editing import begin_change, move_to, quit_session, write_file
from .printing import print_lines, print_numbered

CommandHandler = Callable[[ModeContext, Any], ModeResult]


def execute_command(context: ModeContext, command: Command) -> ModeResult:
    """Run ``command`` and fold recoverable errors into the result."""

    handler = _COMMAND_HANDLERS[type(command)]
    try:
        return handler(context, command)
    except BedError as exc:
        return _command_error(context, command, str(exc))


def _command_error(context: ModeContext, command: Command, reason: str) -> ModeResult:
    context.bus.emit("command.error", reason)
    telemetry.record_event(
        "command.error",
        level="debug",
        data={"command": type(command).__name__, "reason": reason},
    )
    return ModeResult(status="error", message=reason)


def _handle_noop(context: ModeContext, command: NoOp) -> ModeResult:
    return _command_error(context, command, f"unknown command: {command.text}")


def _handle_parse_failure(context: ModeContext, command: ParseFailure) -> ModeResult:
    return _command_error(context, command, command.reason)


_COMMAND_HANDLERS: Dict[Type[Any], CommandHandler] = {
    Quit: quit_session,
    Print: print_lines,
    NPrint: print_numbered,
    Move: move_to,
    Change: begin_change,
    Write: write_file,
    NoOp: _handle_noop,
    ParseFailure: _handle_parse_failure,
}


__all__ = ["execute_command"]
