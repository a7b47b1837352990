"""High-level buffer façade over a ``LineDocument``."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Iterator, Optional

from bed.runtime import telemetry

from .document import LineDocument


@dataclass(slots=True)
class BufferDelta:
    version: int
    line_count: int
    label: str


class Buffer:
    """The document being edited plus the name it is known by."""

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[LineDocument] = None,
    ) -> None:
        self.name = name
        self.document = document or LineDocument()

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "Buffer":
        return cls(name=name, document=LineDocument.from_text(text))

    @classmethod
    def from_bytes(cls, data: bytes, *, name: str = "default") -> "Buffer":
        # Decode once so invalid UTF-8 fails at load time, not on first print.
        data.decode("utf-8")
        return cls(name=name, document=LineDocument(data=data))

    def line_count(self) -> int:
        return self.document.line_count

    def line(self, index: int) -> str:
        return self.document.get_line(index)

    def lines(self) -> Iterator[str]:
        return self.document.lines()

    def byte_offset_of_line(self, index: int) -> int:
        return self.document.byte_of_line(index)

    def byte_length_of_line(self, index: int) -> int:
        return self.document.byte_len_of_line(index)

    def text(self) -> str:
        return self.document.text()

    def to_bytes(self) -> bytes:
        return self.document.data

    def delete(self, start: int, end: int) -> BufferDelta:
        return self.replace(start, end, "", label="delete")

    def insert(self, offset: int, text: str) -> BufferDelta:
        return self.replace(offset, offset, text, label="insert")

    def replace(self, start: int, end: int, text: str, *, label: str) -> BufferDelta:
        """Swap bytes ``[start:end]`` for ``text`` in one published step.

        Both edits apply to a detached document; ``self.document`` only
        changes once the insert has succeeded.
        """

        with Transaction(self, label) as tx:
            updated = self.document.delete(start, end).insert(start, text)
            tx.publish(updated)

        return BufferDelta(
            version=self.document.version,
            line_count=self.document.line_count,
            label=label,
        )

    def replace_line(self, index: int, text: str) -> BufferDelta:
        """Replace the content of line ``index``, keeping its newline."""

        start = self.byte_offset_of_line(index)
        end = start + self.byte_length_of_line(index)
        return self.replace(start, end, text, label="replace_line")


class Transaction(AbstractContextManager["Transaction"]):
    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None
        self._before_version = buffer.document.version

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def publish(self, document: LineDocument) -> None:
        self.buffer.document = document

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            telemetry.record_event(
                "buffer.edit",
                level="debug",
                data={
                    "label": self.label,
                    "from_version": self._before_version,
                    "to_version": self.buffer.document.version,
                },
            )
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False
