"""Line-indexed text storage for bed buffers."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Iterator, Tuple

from bed.errors import AddressError

NEWLINE = b"\n"


def _scan_line_starts(data: bytes) -> Tuple[int, ...]:
    if not data:
        return ()
    starts = [0]
    pos = data.find(NEWLINE)
    while pos != -1 and pos + 1 < len(data):
        starts.append(pos + 1)
        pos = data.find(NEWLINE, pos + 1)
    return tuple(starts)


@dataclass(frozen=True, slots=True)
class LineDocument:
    """UTF-8 text with a precomputed table of line start offsets.

    Documents are immutable: ``delete`` and ``insert`` return a new
    document whose offset table is rebuilt from scratch, so an offset
    taken from one version is never reused against another. A trailing
    newline terminates the last line instead of opening an empty one,
    which makes ``b""`` a zero-line document.
    """

    data: bytes = b""
    version: int = 0
    _starts: Tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_starts", _scan_line_starts(self.data))

    @classmethod
    def from_text(cls, text: str) -> "LineDocument":
        return cls(data=text.encode("utf-8"))

    @property
    def line_count(self) -> int:
        return len(self._starts)

    @property
    def byte_length(self) -> int:
        return len(self.data)

    def text(self) -> str:
        return self.data.decode("utf-8")

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= self.line_count:
            raise AddressError(address=index + 1)

    def byte_of_line(self, index: int) -> int:
        self._check_index(index)
        return self._starts[index]

    def byte_len_of_line(self, index: int) -> int:
        """Length of line ``index`` in bytes, excluding its newline."""

        self._check_index(index)
        if index + 1 < self.line_count:
            end = self._starts[index + 1] - 1
        elif self.data.endswith(NEWLINE):
            end = len(self.data) - 1
        else:
            end = len(self.data)
        return end - self._starts[index]

    def line_of_byte(self, offset: int) -> int:
        """Return the 0-based index of the line containing ``offset``."""

        if offset < 0 or offset > len(self.data) or not self._starts:
            raise AddressError("offset out of range", address=offset)
        return bisect_right(self._starts, offset) - 1

    def get_line(self, index: int) -> str:
        start = self.byte_of_line(index)
        end = start + self.byte_len_of_line(index)
        return self.data[start:end].decode("utf-8")

    def lines(self) -> Iterator[str]:
        for index in range(self.line_count):
            yield self.get_line(index)

    def _check_span(self, start: int, end: int) -> None:
        if start < 0 or end < start or end > len(self.data):
            raise AddressError("byte range out of range", address=(start, end))

    def delete(self, start: int, end: int) -> "LineDocument":
        """Return a document with bytes ``[start:end]`` removed."""

        self._check_span(start, end)
        return LineDocument(
            data=self.data[:start] + self.data[end:], version=self.version + 1
        )

    def insert(self, offset: int, text: str) -> "LineDocument":
        """Return a document with ``text`` inserted at byte ``offset``."""

        self._check_span(offset, offset)
        encoded = text.encode("utf-8")
        return LineDocument(
            data=self.data[:offset] + encoded + self.data[offset:],
            version=self.version + 1,
        )
