"""Base class for editor modes."""

from __future__ import annotations

from typing import Optional

from bed.context import ModeBus, ModeContext, ModeResult


class Mode:
    """Base class all concrete editor modes inherit from."""

    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    def on_enter(
        self, previous: Optional[str]
    ) -> None:  # pragma: no cover - default no-op
        del previous

    def on_exit(
        self, next_mode: Optional[str]
    ) -> None:  # pragma: no cover - default no-op
        del next_mode

    def handle_line(
        self, line: str
    ) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError

    def handle_eof(self) -> ModeResult:
        """Invoked by the manager when input runs out while this mode is active."""

        return ModeResult(status="eof", quit=True)


__all__ = ["Mode", "ModeBus", "ModeContext", "ModeResult"]
