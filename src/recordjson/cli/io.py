# topmark:header:start
#
#   project      : RecordJSON
#   file         : io.py
#   file_relpath : src/recordjson/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input handling utilities for Click commands.

Commands take their JSON input either from a file path or from STDIN (``-``).
This module reads the text and maps filesystem and decoding problems to CLI
errors with sysexits-aligned exit codes.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from recordjson.cli.errors import (
    RecordJsonDataError,
    RecordJsonFileNotFoundError,
    RecordJsonIOError,
    RecordJsonUsageError,
)
from recordjson.config.logging import get_logger
from recordjson.core import codec
from recordjson.core.errors import DecodeFailure

if TYPE_CHECKING:
    from recordjson.config.logging import RecordJsonLogger

logger: RecordJsonLogger = get_logger(__name__)

STDIN_SENTINEL = "-"


def describe_source(source: str) -> str:
    """Return a human-readable name for an input source."""
    return "<stdin>" if source == STDIN_SENTINEL else source


def read_input_text(source: str, *, encoding: str = "utf-8") -> str:
    """Read the text of a CLI input source.

    Args:
        source (str): A file path, or ``-`` for STDIN.
        encoding (str): Text encoding of the file.

    Returns:
        str: The text read.

    Raises:
        RecordJsonFileNotFoundError: If the path does not exist.
        RecordJsonUsageError: If the path is a directory.
        RecordJsonIOError: If the file cannot be read or decoded.
    """
    if source == STDIN_SENTINEL:
        logger.debug("Reading JSON input from STDIN")
        return sys.stdin.read()

    path = Path(source)
    logger.debug("Reading JSON input from %s", path)
    if path.is_dir():
        raise RecordJsonUsageError(f"Expected a file, got a directory: {path}")
    try:
        return path.read_text(encoding=encoding)
    except FileNotFoundError as exc:
        raise RecordJsonFileNotFoundError(f"File not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise RecordJsonIOError(f"Cannot decode {path} as {encoding}: {exc}") from exc
    except OSError as exc:
        raise RecordJsonIOError(f"Cannot read {path}: {exc}") from exc


def read_json_document(source: str) -> object:
    """Read and decode the JSON document of a CLI input source.

    Args:
        source (str): A file path, or ``-`` for STDIN.

    Returns:
        object: The decoded document.

    Raises:
        RecordJsonDataError: If the input is not valid JSON.
    """
    text: str = read_input_text(source)
    try:
        return codec.decode(text)
    except DecodeFailure as exc:
        raise RecordJsonDataError(f"Invalid JSON in {describe_source(source)}: {exc}") from exc
