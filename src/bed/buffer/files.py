"""Loading and saving buffers as plain UTF-8 files."""

from __future__ import annotations

from pathlib import Path

from bed.errors import FileError
from bed.runtime import telemetry

from .buffer import Buffer


def read_buffer(path: Path | str) -> Buffer:
    """Load ``path`` into a new buffer named after it."""

    target = Path(path)
    with telemetry.span("files::read", metadata={"path": str(target)}):
        try:
            data = target.read_bytes()
        except OSError as exc:
            raise FileError(f"{target}: {exc.strerror or exc}", path=target) from exc
        try:
            return Buffer.from_bytes(data, name=str(target))
        except UnicodeDecodeError as exc:
            raise FileError(f"{target}: not valid UTF-8", path=target) from exc


def write_buffer(buffer: Buffer, path: Path | str) -> int:
    """Overwrite ``path`` with the buffer contents; return bytes written."""

    target = Path(path)
    data = buffer.to_bytes()
    with telemetry.span("files::write", metadata={"path": str(target)}):
        try:
            target.write_bytes(data)
        except OSError as exc:
            raise FileError(f"{target}: {exc.strerror or exc}", path=target) from exc
    telemetry.record_event(
        "buffer.write", data={"path": str(target), "bytes": len(data)}
    )
    return len(data)
