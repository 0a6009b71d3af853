# topmark:header:start
#
#   project      : RecordJSON
#   file         : io.py
#   file_relpath : src/recordjson/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for RecordJSON configuration.

Parsing is done with `tomlkit` and returned as plain `dict` structures.

Two families of value getters exist:
- *Unchecked* getters (`get_table_value`): return defaults and only emit **debug** logs.
- *Checked* getters: validate the expected shape and append a warning to a
  diagnostics list (and also log a warning), returning None so the caller keeps
  its default.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from recordjson.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from recordjson.config.logging import RecordJsonLogger

TomlTable = dict[str, Any]

logger: RecordJsonLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``recordjson.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def to_toml(table: TomlTable) -> str:
    """Render a plain TOML table as text.

    ``None`` values are dropped since TOML has no null.

    Args:
        table (TomlTable): The table to render.

    Returns:
        str: The TOML document.
    """

    def _strip_none(value: Any) -> Any:
        if isinstance(value, dict):
            return {
                k: _strip_none(v) for k, v in cast("TomlTable", value).items() if v is not None
            }
        return value

    return tomlkit.dumps(_strip_none(table))


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table ``key`` of ``table``, or an empty dict if absent or not a table."""
    value: Any = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.debug("Expected a table for %r, got %r", key, value)
    return {}


def get_bool_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: list[str],
) -> bool | None:
    """Extract an optional boolean, recording a warning when the value has the wrong type.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        where (str): Section name used in the warning message.
        diagnostics (list[str]): Collected warnings; appended to in place.

    Returns:
        bool | None: The boolean value, or None when absent or invalid.
    """
    value: Any = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    message: str = f"[{where}] {key}: expected a boolean, got {type(value).__name__}; ignored"
    logger.warning(message)
    diagnostics.append(message)
    return None


def get_string_list_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: list[str],
) -> list[str] | None:
    """Extract an optional list of strings, recording a warning for wrong-shaped values.

    A single string is accepted and wrapped in a list. Non-string items inside a list
    are dropped (with a warning).

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        where (str): Section name used in the warning message.
        diagnostics (list[str]): Collected warnings; appended to in place.

    Returns:
        list[str] | None: The list of strings, or None when absent or invalid.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        message: str = (
            f"[{where}] {key}: expected a list of strings, got {type(value).__name__}; ignored"
        )
        logger.warning(message)
        diagnostics.append(message)
        return None
    items: list[str] = []
    for item in cast("list[Any]", value):
        if isinstance(item, str):
            items.append(item)
        else:
            message = f"[{where}] {key}: ignoring non-string entry {item!r}"
            logger.warning(message)
            diagnostics.append(message)
    return items
