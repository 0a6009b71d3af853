# topmark:header:start
#
#   project      : RecordJSON
#   file         : __init__.py
#   file_relpath : src/recordjson/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for RecordJSON.

Re-exports the configuration model (`Config`, `MutableConfig`) so callers can
write ``from recordjson.config import Config``. Logging helpers live in
`recordjson.config.logging`.
"""

from __future__ import annotations

from recordjson.config.model import ArgsLike, Config, MutableConfig

__all__ = [
    "ArgsLike",
    "Config",
    "MutableConfig",
]
