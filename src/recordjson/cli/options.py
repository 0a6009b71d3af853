# topmark:header:start
#
#   project      : RecordJSON
#   file         : options.py
#   file_relpath : src/recordjson/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the RecordJSON CLI.

This module centralizes reusable options (verbosity, color, selection, layout)
and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from recordjson.cli.errors import RecordJsonUsageError

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v`` / ``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: Positive for verbose, negative for quiet, 0 for the default.

    Raises:
        RecordJsonUsageError: If both flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise RecordJsonUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return verbose_count - quiet_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase program-output verbosity.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress informational output (warnings and errors are still shown).",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode (ColorMode | None): Explicit color mode from CLI options.
        stdout_isatty (bool | None): Whether stdout is a TTY; if None, auto-detected.

    Returns:
        bool: True if color output should be enabled.

    Behavior:
        Honors --color and --no-color CLI flags, then the FORCE_COLOR and NO_COLOR
        environment variables, and finally enables color only on a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_layout_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--pretty/--compact`` and ``--ascii/--no-ascii`` options to a command.

    Both default to None so that unset flags defer to the configuration.
    """
    f = click.option(
        "--pretty/--compact",
        "pretty_print",
        default=None,
        help="Indent the JSON output (default: from config, else compact).",
    )(f)
    f = click.option(
        "--ascii/--no-ascii",
        "ensure_ascii",
        default=None,
        help="Escape non-ASCII characters (default: from config, else escaped).",
    )(f)
    return f
