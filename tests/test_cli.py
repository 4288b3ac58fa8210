# tests/test_cli.py
"""
Tests for the chronos-md command-line interface (CLI).

Scope
-----
These tests verify the interaction layer provided by Typer:
1.  **Command Registration**: `parse`, `check`, `highlight` and `--help`.
2.  **Argument Validation**: Typer's `exists=True` check and locale validation.
3.  **Rendering**: tables and JSON output for real documents.
4.  **Exit Codes**: `check` and `parse --strict` fail on error diagnostics.

We use `typer.testing.CliRunner` to invoke the app in-process.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from chronos_md.cli import app
from chronos_md.core.settings import load_settings

GOOD = """\
# history
> ORDERBY start
- [2020-02-29] Leap {G1} #red
@ [2020~2021] Build
"""

BAD = """\
- [2021-02-29] Not a leap day
- [2022] Fine
"""


@pytest.fixture  # type: ignore[misc]
def runner() -> CliRunner:
    """Create a fresh CliRunner for each test."""
    return CliRunner()


@pytest.fixture  # type: ignore[misc]
def good_file(tmp_path: Path) -> Path:
    path = tmp_path / "good.md"
    path.write_text(GOOD, encoding="utf-8")
    return path


@pytest.fixture  # type: ignore[misc]
def bad_file(tmp_path: Path) -> Path:
    path = tmp_path / "bad.md"
    path.write_text(BAD, encoding="utf-8")
    return path


def test_cli_help_shows_usage(runner: CliRunner) -> None:
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0, f"Help failed: {result.output}"
    assert "chronos-md" in result.output
    for command in ("parse", "check", "highlight"):
        assert command in result.output


def test_parse_fails_on_missing_file(runner: CliRunner) -> None:
    """Typer should enforce `exists=True` for the input file argument."""
    result = runner.invoke(app, ["parse", "ghost.md"])
    assert result.exit_code != 0
    assert "does not exist" in result.output


def test_parse_renders_tables(runner: CliRunner, good_file: Path) -> None:
    result = runner.invoke(app, ["parse", str(good_file), "--locale", "en"])
    assert result.exit_code == 0, result.output
    assert "Items" in result.output
    assert "Leap" in result.output
    assert "G1" in result.output
    assert "No diagnostics." in result.output


def test_parse_json_is_valid(runner: CliRunner, good_file: Path) -> None:
    result = runner.invoke(app, ["parse", str(good_file), "--json", "-l", "en"])
    assert result.exit_code == 0, result.output

    payload = json.loads(result.stdout)
    assert payload["kind"] == "chronos_parse.v1"
    assert [item["kind"] for item in payload["items"]] == ["event", "period"]
    assert payload["flags"]["order_by"] == "start"
    assert payload["errors"] == []


def test_parse_reports_but_succeeds_without_strict(runner: CliRunner, bad_file: Path) -> None:
    result = runner.invoke(app, ["parse", str(bad_file), "-l", "en"])
    assert result.exit_code == 0, result.output
    assert "Diagnostics" in result.output


def test_parse_strict_fails_on_errors(runner: CliRunner, bad_file: Path) -> None:
    result = runner.invoke(app, ["parse", str(bad_file), "--strict", "-l", "en"])
    assert result.exit_code == 1


def test_check_exit_codes(runner: CliRunner, good_file: Path, bad_file: Path) -> None:
    ok = runner.invoke(app, ["check", str(good_file), "-l", "en"])
    assert ok.exit_code == 0, ok.output
    assert "2 item(s) parsed" in ok.output

    failed = runner.invoke(app, ["check", str(bad_file), "-l", "en"])
    assert failed.exit_code == 1
    assert "1 error(s)" in failed.output


def test_invalid_locale_exits_with_usage_code(runner: CliRunner, good_file: Path) -> None:
    result = runner.invoke(app, ["check", str(good_file), "--locale", "xx"])
    assert result.exit_code == 2
    assert "Invalid locale" in result.output


def test_highlight_labels_each_line(runner: CliRunner, good_file: Path) -> None:
    result = runner.invoke(app, ["highlight", str(good_file)])
    assert result.exit_code == 0, result.output
    for kind in ("comment", "flag", "event", "period"):
        assert kind in result.output


def test_bad_locale_from_env_exits_with_usage_code(
    runner: CliRunner, good_file: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """CHRONOS_LOCALE is validated when the CLI builds its parse options."""
    monkeypatch.setenv("CHRONOS_LOCALE", "fr_FR")
    load_settings.cache_clear()
    try:
        result = runner.invoke(app, ["check", str(good_file)])
    finally:
        load_settings.cache_clear()
    assert result.exit_code == 2
    assert "Invalid locale" in result.output
