# topmark:header:start
#
#   project      : RecordJSON
#   file         : test_config_logging.py
#   file_relpath : tests/config/test_config_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for RecordJSON logging helpers."""

from __future__ import annotations

import io
import logging

import pytest

from recordjson.config.logging import (
    TRACE_LEVEL,
    ChalkFormatter,
    RecordJsonLogger,
    get_logger,
    resolve_env_log_level,
    resolve_log_level_name,
    setup_logging,
)
from recordjson.constants import LOG_LEVEL_ENV_VAR


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" Warning ", logging.WARNING),
        ("15", 15),
        ("loud", None),
    ],
)
def test_resolve_log_level_name(value: str, expected: int | None) -> None:
    assert resolve_log_level_name(value) == expected


def test_resolve_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    assert resolve_env_log_level() is None

    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "INFO")

    assert resolve_env_log_level() == logging.INFO


def test_get_logger_supports_trace(caplog: pytest.LogCaptureFixture) -> None:
    logger = get_logger("recordjson.tests.trace")
    caplog.set_level(TRACE_LEVEL, logger="recordjson.tests.trace")

    logger.trace("walking %s", "author")

    assert isinstance(logger, RecordJsonLogger)
    assert [r.levelname for r in caplog.records] == ["TRACE"]
    assert "walking author" in caplog.text


def test_chalk_formatter_brackets_level_name() -> None:
    record = logging.makeLogRecord(
        {
            "name": "recordjson",
            "levelno": logging.WARNING,
            "levelname": "WARNING",
            "msg": "x=%s",
            "args": (1,),
        }
    )

    line: str = ChalkFormatter("%(levelname)s %(message)s").format(record)

    assert "[WARNING]" in line
    assert line.endswith("x=1")
    assert record.levelname == "WARNING"


def test_setup_logging_writes_to_given_stream() -> None:
    stream = io.StringIO()
    try:
        setup_logging(logging.INFO, stream=stream)
        get_logger("recordjson.tests.stream").info("loaded %d layers", 2)
        get_logger("recordjson.tests.stream").debug("hidden")
    finally:
        setup_logging(TRACE_LEVEL)

    output: str = stream.getvalue()
    assert "[INFO]" in output
    assert "loaded 2 layers" in output
    assert "hidden" not in output
