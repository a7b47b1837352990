"""Line address grammar for the print family of commands.

``[a][,][b]<suffix>`` where both numbers are optional and the suffix is a
single letter. Whether the comma is present decides the defaults:

* with a comma, a missing ``a`` means line 1 and a missing ``b`` means the
  last line, so ``,p`` covers the whole buffer;
* without one, the single number (or the current line) is both ends.
"""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Optional

from bed.errors import ParseError

from .models import Range

MAX_LINE = sys.maxsize

ADDRESS_RE = re.compile(
    r"""
    ^
    (?P<start>\d+)?     # first address
    (?P<comma>,)?
    \s?
    (?P<end>\d+)?       # second address
    \s?
    (?P<suffix>[pn])    # command letter
    $
    """,
    re.VERBOSE | re.ASCII,
)


@dataclass(frozen=True, slots=True)
class AddressMatch:
    """Raw captures of an address prefix, before defaults are applied."""

    start: Optional[int]
    end: Optional[int]
    comma: bool
    suffix: str


def _to_line(raw: Optional[str], text: str) -> Optional[int]:
    if raw is None:
        return None
    return parse_line_number(raw, text)


def parse_line_number(digits: str, text: str) -> int:
    """Convert a run of ASCII digits, rejecting values above ``MAX_LINE``."""

    # int() refuses very long digit strings, so bound the length first.
    significant = digits.lstrip("0") or "0"
    if len(significant) > len(str(MAX_LINE)):
        raise ParseError("line number out of range", text=text)
    value = int(significant)
    if value > MAX_LINE:
        raise ParseError("line number out of range", text=text)
    return value


def match_address(text: str) -> Optional[AddressMatch]:
    """Match ``text`` against the address grammar.

    Returns ``None`` when the grammar does not apply and raises
    ``ParseError`` when a number is too large to address a line.
    """

    match = ADDRESS_RE.match(text)
    if match is None:
        return None
    return AddressMatch(
        start=_to_line(match["start"], text),
        end=_to_line(match["end"], text),
        comma=match["comma"] is not None,
        suffix=match["suffix"],
    )


def resolve_range(address: AddressMatch, current_line: int, max_line: int) -> Range:
    if address.comma:
        start = address.start if address.start is not None else 1
        end = address.end if address.end is not None else max_line
        return Range(start, end)
    line = address.start if address.start is not None else current_line
    return Range(line, line)


def parse_range(text: str, current_line: int, max_line: int) -> Optional[Range]:
    """Shortcut for ``resolve_range(match_address(text), ...)``."""

    address = match_address(text)
    if address is None:
        return None
    return resolve_range(address, current_line, max_line)


__all__ = [
    "ADDRESS_RE",
    "MAX_LINE",
    "parse_line_number",
    "AddressMatch",
    "match_address",
    "parse_range",
    "resolve_range",
]
