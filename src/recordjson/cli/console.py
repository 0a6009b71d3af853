# topmark:header:start
#
#   project      : RecordJSON
#   file         : console.py
#   file_relpath : src/recordjson/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-backed implementation of `ConsoleLike`.

Streams are resolved on each write so that `click.testing.CliRunner`, which swaps
``sys.stdout`` / ``sys.stderr`` per invocation, captures the output.
"""

from __future__ import annotations

import sys
from typing import Any, Final, TextIO

import click

WARN_COLOR: Final[str] = "yellow"
ERROR_COLOR: Final[str] = "bright_red"


class ClickConsole:
    """Console writing command output to stdout and diagnostics to stderr.

    Args:
        enable_color (bool): Emit ANSI styling.
        out (TextIO | None): Output stream; None means the current ``sys.stdout``.
        err (TextIO | None): Diagnostics stream; None means the current ``sys.stderr``.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self._out = out
        self._err = err

    def print(self, text: str = "") -> None:
        click.echo(text, file=self._out or sys.stdout, color=self.enable_color)

    def warn(self, text: str) -> None:
        self._diagnostic(text, WARN_COLOR)

    def error(self, text: str) -> None:
        self._diagnostic(text, ERROR_COLOR)

    def styled(self, text: str, **style: Any) -> str:
        return click.style(text, **style) if self.enable_color else text

    def _diagnostic(self, text: str, color: str) -> None:
        click.echo(
            self.styled(text, fg=color), file=self._err or sys.stderr, color=self.enable_color
        )
