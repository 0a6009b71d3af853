# topmark:header:start
#
#   project      : RecordJSON
#   file         : __init__.py
#   file_relpath : src/recordjson/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core record/JSON conversion for RecordJSON.

Modules:
    * `records`: the `RecordLike` capability protocol traversal code depends on.
    * `memory`: an in-memory `Record` implementation and document loaders.
    * `selection`: field / include-path normalization and deep-include decomposition.
    * `serializer`: record graph → JSON (`to_json`, `all_to_json`).
    * `deserializer`: flat JSON → record (`from_json`).
    * `formatter`: single-pass JSON pretty-printer (`format_json`).
    * `codec`: wrappers around the `json` encode/decode primitives.
    * `http`: response header helper (`set_json_content_type`).

This package is Click/console-free.
"""

from __future__ import annotations
