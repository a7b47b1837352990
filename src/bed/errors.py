"""Exception hierarchy shared by the buffer, parser, and executor."""

from __future__ import annotations

from pathlib import Path


class BedError(RuntimeError):
    """Base class for recoverable editor errors."""


class AddressError(BedError):
    """Raised when a line address falls outside the buffer."""

    def __init__(
        self, message: str = "invalid address", *, address: object = None
    ) -> None:
        super().__init__(message)
        self.address = address


class ParseError(BedError):
    """Raised when command text matches the grammar but cannot be evaluated."""

    def __init__(self, message: str, *, text: str = "") -> None:
        super().__init__(message)
        self.text = text


class FileError(BedError):
    """Raised when the backing file cannot be read or written."""

    def __init__(self, message: str, *, path: Path | str) -> None:
        super().__init__(message)
        self.path = Path(path)


__all__ = ["AddressError", "BedError", "FileError", "ParseError"]
