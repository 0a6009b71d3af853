# topmark:header:start
#
#   project      : RecordJSON
#   file         : __init__.py
#   file_relpath : src/recordjson/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RecordJSON package.

RecordJSON converts graphs of related records to JSON (selecting fields and
following has-one / has-many relations to any depth), applies flat JSON
documents back onto records, and pretty-prints compact JSON text. It exposes
both a CLI and a small typed API.
"""

from __future__ import annotations

from recordjson.core.deserializer import from_json
from recordjson.core.formatter import format_json
from recordjson.core.http import set_json_content_type
from recordjson.core.memory import Record, records_from_document
from recordjson.core.records import RecordLike
from recordjson.core.selection import Selection
from recordjson.core.serializer import (
    all_to_json,
    build_structure,
    build_structure_many,
    to_json,
)

__all__ = [
    "Record",
    "RecordLike",
    "Selection",
    "all_to_json",
    "build_structure",
    "build_structure_many",
    "format_json",
    "from_json",
    "records_from_document",
    "set_json_content_type",
    "to_json",
]
