"""Terminal syntax highlighting for printed lines, via pygments."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from pygments import highlight as pygments_highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import get_lexer_for_filename
from pygments.lexers.special import TextLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from bed.runtime import telemetry

RESET = "\x1b[0m"


@dataclass(slots=True)
class Highlighter:
    """Colours single lines with a lexer picked from the file name."""

    lexer: Any
    formatter: Any

    def __call__(self, line: str) -> str:
        styled = pygments_highlight(line, self.lexer, self.formatter)
        # pygments always terminates its output with a newline.
        return styled.rstrip("\n")

    @property
    def name(self) -> str:
        return str(self.lexer.name)


def highlighter_for(path: Path | str, *, theme: str) -> Optional[Highlighter]:
    """Return a highlighter for ``path`` or ``None`` when none applies."""

    filename = Path(path).name
    try:
        lexer = get_lexer_for_filename(filename, stripnl=False, ensurenl=False)
    except ClassNotFound:
        return None
    # Plain text has no tokens to colour.
    if isinstance(lexer, TextLexer):
        return None
    try:
        style = get_style_by_name(theme)
    except ClassNotFound:
        telemetry.record_event(
            "highlight.unknown_theme", level="warning", data={"theme": theme}
        )
        style = get_style_by_name("default")
    return Highlighter(lexer=lexer, formatter=Terminal256Formatter(style=style))


__all__ = ["RESET", "Highlighter", "highlighter_for"]
