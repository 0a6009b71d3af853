# topmark:header:start
#
#   project      : RecordJSON
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

import json

from recordjson.constants import RECORDJSON_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli


def test_version_outputs_installed_version() -> None:
    """It should output the installed version string (exact match)."""
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.output.strip() == RECORDJSON_VERSION


def test_version_verbose_adds_heading() -> None:
    result = run_cli(["--no-color", "-v", "version"])

    assert_SUCCESS(result)
    assert "RecordJSON version:" in result.output
    assert RECORDJSON_VERSION in result.output


def test_version_json_format() -> None:
    result = run_cli(["version", "--format", "JSON"])

    assert_SUCCESS(result)
    assert json.loads(result.output) == {"version": RECORDJSON_VERSION}


def test_version_markdown_format() -> None:
    result = run_cli(["version", "--format", "markdown"])

    assert_SUCCESS(result)
    assert result.output.startswith("# RecordJSON Version")


def test_version_rejects_unknown_format() -> None:
    result = run_cli(["version", "--format", "yaml"])

    assert result.exit_code == 2
    assert "Must be one of: default, json, markdown" in result.output
