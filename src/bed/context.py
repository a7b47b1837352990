"""Shared state and result types passed between modes and actions."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple

from bed.buffer import Buffer, EditorState
from bed.render import LineFilter


@dataclass(slots=True)
class ModeResult:
    """Outcome of feeding one input line to a mode.

    ``output`` holds lines for standard output; ``message`` is the
    diagnostic written to the error stream when ``status`` is ``"error"``.
    """

    status: str = "ok"
    output: Tuple[str, ...] = ()
    message: Optional[str] = None
    switch_to: Optional[str] = None
    quit: bool = False

    @property
    def is_error(self) -> bool:
        return self.status == "error"


@dataclass(slots=True)
class ModeContext:
    """Everything a mode may read or mutate while handling input."""

    buffer: Buffer
    state: EditorState
    bus: "ModeBus"
    path: Optional[Path] = None
    highlighter: Optional[LineFilter] = None


class ModeBus:
    """Minimal event bus so hosts can observe what the modes do."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


__all__ = ["ModeBus", "ModeContext", "ModeResult"]
