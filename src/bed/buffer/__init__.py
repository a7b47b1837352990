"""Buffer abstractions: line-indexed storage, editor state, file I/O."""

from .buffer import Buffer, BufferDelta, Transaction
from .document import LineDocument
from .files import read_buffer, write_buffer
from .state import EditorState
from .validation import ensure_line, ensure_range

__all__ = [
    "Buffer",
    "BufferDelta",
    "EditorState",
    "LineDocument",
    "Transaction",
    "ensure_line",
    "ensure_range",
    "read_buffer",
    "write_buffer",
]
