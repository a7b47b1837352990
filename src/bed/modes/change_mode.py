"""Change mode: collect replacement text until a lone ``.`` line."""

from __future__ import annotations

from typing import List, Optional

from bed.actions import apply_change
from bed.errors import BedError
from bed.runtime.config import CHANGE_TERMINATOR

from .base_mode import Mode, ModeContext, ModeResult


def _strip_newline(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


class ChangeMode(Mode):
    name = "change"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self._collected: List[str] = []

    @property
    def pending_lines(self) -> tuple[str, ...]:
        return tuple(self._collected)

    def on_enter(self, previous: Optional[str]) -> None:
        del previous
        self._collected.clear()

    def on_exit(self, next_mode: Optional[str]) -> None:
        del next_mode
        self._collected.clear()

    def handle_line(self, line: str) -> ModeResult:
        # Input is taken verbatim; only the exact terminator ends the mode.
        text = _strip_newline(line)
        if text == CHANGE_TERMINATOR:
            return self._commit()
        self._collected.append(text)
        return ModeResult(status="change_line")

    def handle_eof(self) -> ModeResult:
        # Input ended mid-change: keep what was typed, then stop.
        result = self._commit()
        result.quit = True
        result.switch_to = None
        return result

    def _commit(self) -> ModeResult:
        try:
            return apply_change(self.context, list(self._collected))
        except BedError as exc:
            self.context.bus.emit("command.error", str(exc))
            return ModeResult(status="error", message=str(exc), switch_to="command")
