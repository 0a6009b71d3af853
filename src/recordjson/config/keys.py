# topmark:header:start
#
#   project      : RecordJSON
#   file         : keys.py
#   file_relpath : src/recordjson/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for RecordJSON configuration.

These keys define the external configuration schema as it appears in
``recordjson.toml`` and in ``[tool.recordjson]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by RecordJSON configuration."""

    # pyproject.toml nesting: [tool.recordjson]
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TOOL_NAME: Final[str] = "recordjson"

    # [serializer]
    SECTION_SERIALIZER: Final[str] = "serializer"

    KEY_FIELDS: Final[str] = "fields"
    KEY_INCLUDE: Final[str] = "include"
    KEY_PRETTY_PRINT: Final[str] = "pretty_print"
    KEY_ENSURE_ASCII: Final[str] = "ensure_ascii"

    # [deserializer]
    SECTION_DESERIALIZER: Final[str] = "deserializer"

    KEY_ALLOWED_FIELDS: Final[str] = "allowed_fields"
