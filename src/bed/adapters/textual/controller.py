"""Textual-free glue between a ModeManager and UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from bed.modes import ModeManager, ModeResult


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    write_output: Callable[[str], None]
    write_error: Callable[[str], None] = _noop
    update_status: Callable[[str], None] = _noop
    update_prompt: Callable[[str], None] = _noop
    request_exit: Callable[[], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualBedAdapter:
    """Feeds submitted input lines to the manager and reports back."""

    PROMPTS = {"command": ":", "change": ""}

    def __init__(
        self, manager: ModeManager, hooks: TextualUIHooks, *, prompt: str = ":"
    ) -> None:
        self.manager = manager
        self.hooks = hooks
        self.prompts = dict(self.PROMPTS, command=prompt)
        self._subscribe_events()
        self._refresh_status()

    def submit(self, text: str) -> ModeResult:
        """Dispatch one line typed into the command input."""

        self._log_state("line ->", text=text)
        result = self.manager.handle_line(text)
        self._after_mode_result(result)
        self._log_state("result <-", status=result.status, message=result.message)
        return result

    def close_input(self) -> ModeResult:
        """Treat the input as exhausted, as end-of-file does on a terminal."""

        result = self.manager.handle_eof()
        self._after_mode_result(result)
        return result

    def _after_mode_result(self, result: ModeResult) -> None:
        for line in result.output:
            self.hooks.write_output(line)
        if result.is_error and result.message:
            self.hooks.write_error(f"? {result.message}")
        self._refresh_status()
        if self.manager.terminated:
            self.hooks.request_exit()

    def _subscribe_events(self) -> None:
        bus = self.manager.context.bus
        for event in (
            "command.submit",
            "command.error",
            "buffer.changed",
            "buffer.written",
            "session.quit",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _refresh_status(self) -> None:
        mode = self.manager.active_mode
        mode_name = mode.name if mode else "?"
        state = self.manager.context.state
        buffer = self.manager.context.buffer
        self.hooks.update_prompt(self.prompts.get(mode_name, ""))
        self.hooks.update_status(
            f"{buffer.name}  line {state.current_line}/{buffer.line_count()}"
            f"  [{mode_name}]"
        )

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        active_mode = self.manager.active_mode
        return {
            "mode": active_mode.name if active_mode else "?",
            "current_line": self.manager.context.state.current_line,
            "buffer_version": self.manager.context.buffer.document.version,
        }


__all__ = ["TextualBedAdapter", "TextualUIHooks"]
