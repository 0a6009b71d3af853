# topmark:header:start
#
#   project      : RecordJSON
#   file         : test_group_options.py
#   file_relpath : tests/cli/test_group_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for group-level options and shared state."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from recordjson.cli.errors import RecordJsonUsageError
from recordjson.cli.exit_codes import ExitCode
from recordjson.cli.options import ColorMode, resolve_color_mode, resolve_verbosity
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_no_subcommand_prints_help() -> None:
    result = run_cli([])

    assert_SUCCESS(result)
    assert "Hint: use 'recordjson format [INPUT]'" in result.output
    assert "Commands:" in result.output


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    result = run_cli(["-v", "-q", "version"])

    assert_exit(result, ExitCode.USAGE_ERROR)
    assert "mutually exclusive" in result.output


@mark_cli
def test_missing_config_file_is_config_error(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--config", "absent.toml", "format"], input_text="{}")

    assert_exit(result, ExitCode.CONFIG_ERROR)
    assert "Config file not found" in result.output


@mark_cli
def test_config_diagnostics_are_warned(tmp_path: Path) -> None:
    (tmp_path / "recordjson.toml").write_text(
        "[serializer]\npretty_print = 1\n", encoding="utf-8"
    )

    result = run_cli_in(tmp_path, ["format"], input_text="1")

    assert_SUCCESS(result)
    assert "[config] [serializer] pretty_print: expected a boolean" in result.output


@mark_cli
def test_quiet_suppresses_config_diagnostics(tmp_path: Path) -> None:
    (tmp_path / "recordjson.toml").write_text(
        "[serializer]\npretty_print = 1\n", encoding="utf-8"
    )

    result = run_cli_in(tmp_path, ["-q", "format"], input_text="1")

    assert_SUCCESS(result)
    assert result.output == "1\n"


def test_resolve_verbosity() -> None:
    assert resolve_verbosity(0, 0) == 0
    assert resolve_verbosity(2, 0) == 2
    assert resolve_verbosity(0, 1) == -1
    with pytest.raises(RecordJsonUsageError):
        resolve_verbosity(1, 1)


@pytest.mark.parametrize(
    ("mode", "isatty", "expected"),
    [
        (ColorMode.ALWAYS, False, True),
        (ColorMode.NEVER, True, False),
        (ColorMode.AUTO, True, True),
        (ColorMode.AUTO, False, False),
    ],
)
def test_resolve_color_mode(
    monkeypatch: pytest.MonkeyPatch, mode: ColorMode, isatty: bool, expected: bool
) -> None:
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)

    assert resolve_color_mode(cli_mode=mode, stdout_isatty=isatty) is expected


def test_no_color_env_disables_auto_color(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")

    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=True) is False
