"""Executable Textual app that hosts the bed editor."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, Input, RichLog, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use bed.adapters.textual.app"
    ) from exc

from bed.errors import FileError
from bed.modes import ModeManager
from bed.runtime import EditorConfig, telemetry
from bed.session import open_session

from .controller import TextualBedAdapter, TextualUIHooks


class BedApp(App[None]):
    """Output log above a single-line command input."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#output {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+d", "end_input", "End input"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, manager: ModeManager, *, prompt: str = ":") -> None:
        super().__init__()
        self.manager = manager
        self.prompt = prompt
        self.adapter: TextualBedAdapter | None = None
        self._output: RichLog | None = None
        self._status: Static | None = None
        self._input: Input | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        self._output = RichLog(id="output", markup=False, wrap=False)
        self._status = Static("", id="status-line")
        self._input = Input(placeholder=self.prompt, id="command-input")
        yield self._output
        yield self._status
        yield self._input
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            write_output=self._write_output,
            write_error=self._write_error,
            update_status=self._update_status,
            update_prompt=self._update_prompt,
            request_exit=self.exit,
        )
        self.adapter = TextualBedAdapter(self.manager, hooks, prompt=self.prompt)
        if self._input:
            self._input.focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if not self.adapter or self.manager.terminated:
            return
        value = event.value
        event.input.value = ""
        if self._output:
            self._output.write(Text(f"{self._input_prefix()}{value}", style="dim"))
        self.adapter.submit(value)

    def action_end_input(self) -> None:
        if self.adapter and not self.manager.terminated:
            self.adapter.close_input()

    def _input_prefix(self) -> str:
        mode = self.manager.active_mode
        return self.prompt if mode and mode.name == "command" else ""

    def _write_output(self, line: str) -> None:
        if self._output:
            self._output.write(Text.from_ansi(line))

    def _write_error(self, line: str) -> None:
        if self._output:
            self._output.write(Text(line, style="bold red"))

    def _update_status(self, status: str) -> None:
        if self._status:
            self._status.update(status)

    def _update_prompt(self, prompt: str) -> None:
        if self._input:
            self._input.placeholder = prompt or "."


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="bed-tui", description="Run the bed editor inside a Textual UI."
    )
    parser.add_argument("filename", help="File to edit")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    # Console logging would draw over the Textual screen.
    settings = telemetry.TelemetryConfig.from_env()
    settings.console = False
    telemetry.configure(config=settings)
    config = EditorConfig.from_env()
    try:
        manager = open_session(args.filename, config=config)
    except FileError as exc:
        sys.stderr.write(f"bed: {exc}\n")
        return 1
    BedApp(manager, prompt=config.prompt).run()
    return 0


if __name__ == "__main__":  # pragma: no cover - manual demo
    sys.exit(main())
