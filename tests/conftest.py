# topmark:header:start
#
#   project      : RecordJSON
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the RecordJSON test suite.

This file sets up global fixtures, shared record builders and the logging
configuration for test runs.

Notes:
    Tests should respect the immutable/mutable configuration split: build
    configs with `recordjson.config.MutableConfig`, then `freeze()` them into a
    `recordjson.config.Config` for API calls.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from recordjson.config import MutableConfig, logging
from recordjson.constants import LOG_LEVEL_ENV_VAR
from recordjson.core.memory import Record

if TYPE_CHECKING:
    from pathlib import Path

    from recordjson.config import Config

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_recordjson_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure RecordJSON's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    RECORDJSON_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so traversal decisions are exercised in tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test from an isolated temporary project directory.

    Config discovery walks upward from the working directory; starting from a
    fresh ``tmp_path`` keeps developer config files out of the picture.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        **overrides (Any): Attribute overrides applied to the mutable builder.

    Returns:
        Config: An immutable configuration snapshot for use in tests.
    """
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()


def make_book() -> Record:
    """Return a small record graph used across serializer tests.

    Layout::

        book {id, title}
          author (has-one) {id, name}
            publisher (has-one) {id, name}
          tags (has-many) [{id, label}, {id, label}]
    """
    publisher = Record(values={"id": 3, "name": "Chilton"})
    author = Record(values={"id": 7, "name": "Herbert"}, has_one={"publisher": publisher})
    tags: list[Record] = [
        Record(values={"id": 10, "label": "scifi"}),
        Record(values={"id": 11, "label": "classic"}),
    ]
    return Record(
        values={"id": 1, "title": "Dune"},
        has_one={"author": author},
        has_many={"tags": tags},
    )


@pytest.fixture
def book() -> Record:
    """A fresh book record graph (see `make_book`)."""
    return make_book()
