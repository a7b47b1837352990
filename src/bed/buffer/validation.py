"""Address validation helpers shared across buffer services."""

from __future__ import annotations

from bed.errors import AddressError

from .document import LineDocument


def ensure_line(document: LineDocument, line: int) -> int:
    """Return ``line`` if it names an existing 1-based line."""

    if line < 1 or line > document.line_count:
        raise AddressError(address=line)
    return line


def ensure_range(document: LineDocument, start: int, end: int) -> tuple[int, int]:
    """Validate an inclusive 1-based range.

    A range with ``start > end`` is degenerate and selects nothing, so it is
    returned untouched.
    """

    if start > end:
        return start, end
    ensure_line(document, start)
    ensure_line(document, end)
    return start, end
