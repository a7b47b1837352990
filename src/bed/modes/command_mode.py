"""Command mode: parse each input line and execute it."""

from __future__ import annotations

from bed.actions import execute_command
from bed.commands import parse_command
from bed.runtime import telemetry

from .base_mode import Mode, ModeResult


class CommandMode(Mode):
    name = "command"

    def handle_line(self, line: str) -> ModeResult:
        state = self.context.state
        command = parse_command(
            line, state.current_line, self.context.buffer.line_count()
        )
        self.context.bus.emit("command.submit", line.strip())
        with telemetry.span(
            "command::execute",
            component="commands",
            metadata={"command": type(command).__name__},
        ):
            return execute_command(self.context, command)

