# topmark:header:start
#
#   project      : RecordJSON
#   file         : constants.py
#   file_relpath : src/recordjson/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RecordJSON Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

RECORDJSON_VERSION: str = get_version("recordjson")

# Config file names looked up during discovery:
RECORDJSON_TOML_NAME: Final[str] = "recordjson.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"

# Environment variable consulted for the internal log level:
LOG_LEVEL_ENV_VAR: Final[str] = "RECORDJSON_LOG_LEVEL"

JSON_CONTENT_TYPE: Final[str] = "application/json"

# Separator between relation names in a deep include path (e.g. "author/publisher"):
INCLUDE_PATH_SEPARATOR: Final[str] = "/"

# Indentation unit emitted by the pretty-printer:
INDENT_UNIT: Final[str] = "  "
