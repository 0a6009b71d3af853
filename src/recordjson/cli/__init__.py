# topmark:header:start
#
#   project      : RecordJSON
#   file         : __init__.py
#   file_relpath : src/recordjson/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for RecordJSON."""

from __future__ import annotations
