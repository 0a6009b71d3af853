# topmark:header:start
#
#   project      : RecordJSON
#   file         : test_console.py
#   file_relpath : tests/cli/test_console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the Click-backed console."""

from __future__ import annotations

import io

from recordjson.cli.console import ClickConsole


def test_output_and_diagnostics_use_separate_streams() -> None:
    out, err = io.StringIO(), io.StringIO()
    console = ClickConsole(enable_color=False, out=out, err=err)

    console.print('{"a":1}')
    console.warn("[config] ignored key")
    console.error("boom")

    assert out.getvalue() == '{"a":1}\n'
    assert err.getvalue() == "[config] ignored key\nboom\n"


def test_styled_is_plain_without_color() -> None:
    assert ClickConsole(enable_color=False).styled("v", bold=True) == "v"


def test_colored_error_carries_ansi_codes() -> None:
    err = io.StringIO()
    console = ClickConsole(enable_color=True, err=err)

    console.error("boom")

    assert "\x1b[" in err.getvalue()
    assert "boom" in err.getvalue()
