"""Builders that wire a buffer, its state, and the modes together."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from bed.buffer import Buffer, EditorState, read_buffer
from bed.modes import ChangeMode, CommandMode, ModeBus, ModeContext, ModeManager
from bed.render import LineFilter, highlighter_for
from bed.runtime import EditorConfig, telemetry


def create_manager(
    buffer: Buffer,
    *,
    path: Optional[Path] = None,
    highlighter: Optional[LineFilter] = None,
    bus: Optional[ModeBus] = None,
) -> ModeManager:
    """Build a manager in command mode with the cursor on the last line."""

    context = ModeContext(
        buffer=buffer,
        state=EditorState.at_end(buffer.line_count()),
        bus=bus or ModeBus(),
        path=path,
        highlighter=highlighter,
    )
    manager = ModeManager(context)
    manager.register_mode(CommandMode)
    manager.register_mode(ChangeMode)
    return manager


def open_session(
    path: Path | str,
    *,
    config: Optional[EditorConfig] = None,
    bus: Optional[ModeBus] = None,
) -> ModeManager:
    """Load ``path`` and return a manager ready to take commands.

    Raises ``FileError`` when the file cannot be read or decoded.
    """

    settings = config or EditorConfig()
    target = Path(path)
    buffer = read_buffer(target)
    highlighter = (
        highlighter_for(target, theme=settings.theme) if settings.highlight else None
    )
    telemetry.record_event(
        "session.open",
        data={
            "path": str(target),
            "lines": buffer.line_count(),
            "highlight": highlighter.name if highlighter else "off",
        },
    )
    return create_manager(buffer, path=target, highlighter=highlighter, bus=bus)


__all__ = ["create_manager", "open_session"]
