"""Command-line entry point: ``bed <filename>``."""

from __future__ import annotations

import argparse
import os
import sys
from typing import NoReturn, Optional, Sequence, TextIO

from bed.errors import FileError
from bed.modes import ModeManager, ModeResult
from bed.runtime import EditorConfig, telemetry
from bed.session import open_session


class _ArgumentParser(argparse.ArgumentParser):
    """Usage errors exit with status 1 rather than argparse's 2."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = _ArgumentParser(
        prog="bed", description="A basic line editor in the spirit of ed."
    )
    parser.add_argument("filename", help="File to edit")
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=os.getenv(f"{telemetry.ENV_PREFIX}LOG_PRESET") or None,
        help="Logging preset (default: BED_LOG_PRESET, else BED_LOG_* variables)",
    )
    args = parser.parse_args(argv)
    if args.log_preset is not None and args.log_preset not in telemetry.PRESETS:
        parser.error(f"unknown log preset '{args.log_preset}'")
    return args


def emit_result(result: ModeResult, *, stdout: TextIO, stderr: TextIO) -> None:
    for line in result.output:
        stdout.write(f"{line}\n")
    if result.is_error and result.message:
        stderr.write(f"? {result.message}\n")
    stdout.flush()


def run_repl(
    manager: ModeManager,
    *,
    stdin: TextIO,
    stdout: TextIO,
    stderr: TextIO,
    prompt: str = ":",
) -> None:
    """Read lines from ``stdin`` until quit or end of input."""

    while not manager.terminated:
        if manager.active_mode and manager.active_mode.name == "command":
            stdout.write(prompt)
            stdout.flush()
        line = stdin.readline()
        if not line:
            result = manager.handle_eof()
        else:
            result = manager.handle_line(line)
        emit_result(result, stdout=stdout, stderr=stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset)
    config = EditorConfig.from_env(tty=sys.stdout.isatty())
    try:
        manager = open_session(args.filename, config=config)
    except FileError as exc:
        sys.stderr.write(f"bed: {exc}\n")
        return 1

    with telemetry.span("session", component=True, metadata={"file": args.filename}):
        run_repl(
            manager,
            stdin=sys.stdin,
            stdout=sys.stdout,
            stderr=sys.stderr,
            prompt=config.prompt,
        )
    return 0


if __name__ == "__main__":  # pragma: no cover - manual entry point
    sys.exit(main())
