"""Regression tests for the optional Rich dependency.

These tests verify every command still works, in plain text on stderr,
when Rich cannot be imported.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from cachedir.cli import exit_codes
from cachedir.cli.app import main
from cachedir.cli.console import ConsoleUnavailableError, get_rich_console


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_is_tagged_falls_back_to_plain_stderr(
    tagged_dir: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    code = main(["is-tagged", str(tagged_dir)])
    assert code == exit_codes.TAGGED
    assert capsys.readouterr().err == f"{tagged_dir} is tagged with CACHEDIR.TAG\n"


def test_errors_fall_back_to_plain_stderr(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    code = main(["is-tagged", str(tmp_path / "missing")])
    assert code == exit_codes.CHECK_FAILED
    err = capsys.readouterr().err
    assert err.startswith("Error: cannot check ")
    assert "No such file or directory" in err


def test_get_rich_console_raises_when_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(ConsoleUnavailableError, match="rich is not installed"):
        get_rich_console()
