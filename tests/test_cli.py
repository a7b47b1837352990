from __future__ import annotations

import io
import json
import sys
from pathlib import Path

import pytest

from bed import cli
from bed.buffer import Buffer
from bed.session import create_manager


def run_script(
    text: str, script: str, *, path: Path | None = None
) -> tuple[str, str]:
    manager = create_manager(Buffer.from_text(text), path=path)
    stdout, stderr = io.StringIO(), io.StringIO()
    cli.run_repl(
        manager, stdin=io.StringIO(script), stdout=stdout, stderr=stderr, prompt=":"
    )
    return stdout.getvalue(), stderr.getvalue()


def test_repl_prompts_and_prints() -> None:
    out, err = run_script("a\nb\n", ",p\nq\n")

    assert out == ":a\nb\n:"
    assert err == ""


def test_repl_reports_errors_on_stderr_and_continues() -> None:
    out, err = run_script("a\nb\n", "zzz\n9\np\nq\n")

    assert err == "? unknown command: zzz\n? invalid address\n"
    assert out.endswith(":b\n:")


def test_repl_does_not_prompt_while_collecting_change() -> None:
    out, _ = run_script("a\nb\n", "1\nc\nx\n.\n,n\nq\n")

    assert out == ":::1 │ x\n2 │ b\n:"


def test_repl_stops_at_end_of_input() -> None:
    out, err = run_script("a\n", "p\n")

    assert out == ":a\n:"
    assert err == ""


def test_main_edits_and_writes_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    target = tmp_path / "poem.txt"
    target.write_text("roses\nviolets\n", encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\nc\ntulips\n.\nw\nq\n"))
    monkeypatch.setenv("BED_HIGHLIGHT", "0")

    status = cli.main([str(target)])

    assert status == 0
    assert target.read_text(encoding="utf-8") == "tulips\nviolets\n"
    assert "?" not in capsys.readouterr().err


def test_main_quit_does_not_save(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    target = tmp_path / "keep.txt"
    target.write_text("keep\n", encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", io.StringIO("c\nlost\n.\nq\n"))

    assert cli.main([str(target)]) == 0
    assert target.read_text(encoding="utf-8") == "keep\n"


def test_main_missing_file_exits_nonzero(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    status = cli.main([str(tmp_path / "absent.txt")])

    assert status == 1
    assert "absent.txt" in capsys.readouterr().err


def test_main_without_arguments_prints_usage(
    capsys: pytest.CaptureFixture[str],
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert excinfo.value.code == 1
    assert "usage" in capsys.readouterr().err.lower()


def test_main_rejects_unknown_log_preset(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(tmp_path / "x.txt"), "--log-preset", "verbose"])

    assert excinfo.value.code == 1
    assert "usage" in capsys.readouterr().err.lower()


def test_main_applies_log_preset_from_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    target = tmp_path / "log.txt"
    target.write_text("one\n", encoding="utf-8")
    log_file = tmp_path / "bed.log"
    monkeypatch.setattr(sys, "stdin", io.StringIO("zzz\nq\n"))
    monkeypatch.setenv("BED_LOG_PRESET", "production")
    monkeypatch.setenv("BED_LOG_FILE", str(log_file))

    assert cli.main([str(target)]) == 0

    records = [json.loads(line) for line in log_file.read_text().splitlines()]
    assert any(record.get("event") == "session.open" for record in records)
