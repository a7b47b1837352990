"""Mode manager: the REPL state machine behind every host."""

from __future__ import annotations

from typing import Dict, Optional, Type

from bed.runtime import telemetry

from .base_mode import Mode, ModeContext, ModeResult


class ModeManager:
    """Owns the active mode, routes input lines, and tracks termination.

    Hosts feed one line at a time through ``handle_line`` and stop once
    ``terminated`` is set, either by a quit command or by ``handle_eof``.
    """

    def __init__(self, context: ModeContext) -> None:
        self.context = context
        self._modes: Dict[str, Mode] = {}
        self._active: Optional[str] = None
        self.terminated = False
        self.logger = telemetry.get_logger("bed.modes")

    @property
    def active_mode(self) -> Optional[Mode]:
        if self._active is None:
            return None
        return self._modes.get(self._active)

    def register_mode(self, mode_cls: Type[Mode]) -> Mode:
        mode = mode_cls(self.context)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name}' already registered")
        self._modes[mode.name] = mode
        if self._active is None:
            self._active = mode.name
            mode.on_enter(None)
        return mode

    def switch_mode(self, name: str) -> None:
        if name not in self._modes:
            raise KeyError(f"Unknown mode '{name}'")
        previous = self.active_mode
        if previous and previous.name == name:
            return
        if previous:
            previous.on_exit(name)
        self._active = name
        self._modes[name].on_enter(previous.name if previous else None)
        telemetry.record_event("mode.switch", level="debug", data={"mode": name})

    def handle_line(self, line: str) -> ModeResult:
        mode = self._require_running()
        with telemetry.span(
            name=f"mode::{mode.name}",
            component=True,
            metadata={"mode": mode.name},
        ):
            result = mode.handle_line(line)
        return self._after_mode_result(result)

    def handle_eof(self) -> ModeResult:
        mode = self._require_running()
        return self._after_mode_result(mode.handle_eof())

    def _require_running(self) -> Mode:
        if self.terminated:
            raise RuntimeError("Session already terminated")
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No active mode registered")
        return mode

    def _after_mode_result(self, result: ModeResult) -> ModeResult:
        if result.switch_to:
            self.switch_mode(result.switch_to)
        if result.quit:
            self.terminated = True
            self.logger.debug("session terminated in %s mode", self._active)
        return result
