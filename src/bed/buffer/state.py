"""Current-line tracking for an editing session."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class EditorState:
    """Mutable cursor info tied to a buffer.

    ``current_line`` is 1-based; ``0`` means the buffer is empty and there
    is no current line.
    """

    current_line: int = 0

    @classmethod
    def at_end(cls, line_count: int) -> "EditorState":
        return cls(current_line=line_count)

    def set_line(self, line: int) -> None:
        self.current_line = line

    def clamp(self, line_count: int) -> None:
        if line_count <= 0:
            self.current_line = 0
        else:
            self.current_line = max(1, min(self.current_line, line_count))
