# topmark:header:start
#
#   project      : RecordJSON
#   file         : __init__.py
#   file_relpath : src/recordjson/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RecordJSON CLI subcommands."""

from __future__ import annotations
