"""Command language: address grammar, parser, and command variants."""

from .address import AddressMatch, match_address, parse_range, resolve_range
from .models import (
    Change,
    Command,
    Move,
    NoOp,
    NPrint,
    ParseFailure,
    Print,
    Quit,
    Range,
    Write,
)
from .parser import parse_command

__all__ = [
    "AddressMatch",
    "Change",
    "Command",
    "Move",
    "NPrint",
    "NoOp",
    "ParseFailure",
    "Print",
    "Quit",
    "Range",
    "Write",
    "match_address",
    "parse_command",
    "parse_range",
    "resolve_range",
]
