# topmark:header:start
#
#   project      : RecordJSON
#   file         : logging.py
#   file_relpath : src/recordjson/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics logging for RecordJSON.

Library code logs through `get_logger(__name__)`. The returned `RecordJsonLogger`
adds a TRACE level below DEBUG, used for per-relation traversal decisions
(followed, skipped or ignored includes) that would drown regular DEBUG output.

Logging is silent (CRITICAL) unless a level is passed to `setup_logging` or set in
the ``RECORDJSON_LOG_LEVEL`` environment variable. Records are written to stderr:
stdout is reserved for the JSON documents the CLI emits.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, TextIO, cast

from yachalk import chalk

from recordjson.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_FORMAT: Final[str] = "%(levelname)s %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "%(levelname)s %(name)s:%(lineno)d %(message)s"

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}

# Highest threshold first; the first entry not above the record level wins.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright.bold),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class RecordJsonLogger(logging.Logger):
    """Logger with a `trace` method for the TRACE level."""

    def trace(self, msg: object, *args: object) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self.log(TRACE_LEVEL, msg, *args, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(RecordJsonLogger)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors the ``[LEVEL]`` tag of each record by severity."""

    def formatMessage(self, record: logging.LogRecord) -> str:  # noqa: N802
        """Format ``record`` with a colored, bracketed level name.

        Args:
            record (logging.LogRecord): The record to format.

        Returns:
            str: The formatted line.
        """
        style: Callable[[str], str] = chalk.dim
        for threshold, level_style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                style = level_style
                break
        tagged = logging.makeLogRecord(record.__dict__)
        tagged.levelname = style(f"[{record.levelname}]")
        return super().formatMessage(tagged)


def resolve_log_level_name(value: str) -> int | None:
    """Map a level name (``"TRACE"``, ``"debug"``) or a numeric string to a logging level.

    Args:
        value (str): The level name or number.

    Returns:
        int | None: The logging level, or None when ``value`` is not recognized.
    """
    name: str = value.strip().upper()
    if name.isdigit():
        return int(name)
    return _LEVEL_NAMES.get(name)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``RECORDJSON_LOG_LEVEL``, or None if unset or unknown."""
    value: str | None = os.environ.get(LOG_LEVEL_ENV_VAR)
    return resolve_log_level_name(value) if value else None


def setup_logging(level: int | None = None, *, stream: TextIO | None = None) -> None:
    """(Re)configure the root logger with a single colored handler.

    Args:
        level (int | None): Logging level; None consults ``RECORDJSON_LOG_LEVEL`` and
            falls back to CRITICAL.
        stream (TextIO | None): Destination stream; defaults to ``sys.stderr``.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger: logging.Logger = logging.getLogger()
    root_logger.setLevel(level)
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stderr)
    fmt: str = LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT
    handler.setFormatter(ChalkFormatter(fmt))
    root_logger.addHandler(handler)


def get_logger(name: str) -> RecordJsonLogger:
    """Return the `RecordJsonLogger` registered under ``name``."""
    return cast("RecordJsonLogger", logging.getLogger(name))
