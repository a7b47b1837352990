"""Editing verbs invoked by the modes."""

from .command import execute_command
from .editing import apply_change, begin_change, move_to, quit_session, write_file
from .printing import print_lines, print_numbered

__all__ = [
    "apply_change",
    "begin_change",
    "execute_command",
    "move_to",
    "print_lines",
    "print_numbered",
    "quit_session",
    "write_file",
]
