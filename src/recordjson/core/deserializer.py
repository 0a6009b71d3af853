# topmark:header:start
#
#   project      : RecordJSON
#   file         : deserializer.py
#   file_relpath : src/recordjson/core/deserializer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Flat JSON → record assignment.

`from_json` decodes a JSON object and assigns its members onto a record
through [`RecordLike.set_field`][recordjson.core.records.RecordLike.set_field].
Only keys listed in ``allowed_fields`` are assigned; other keys are skipped
silently. Values are assigned as decoded, without coercion or validation
against the record's field types.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from recordjson.config.logging import get_logger
from recordjson.core import codec
from recordjson.core.errors import DecodeFailure
from recordjson.core.selection import normalize_names

if TYPE_CHECKING:
    from recordjson.config.logging import RecordJsonLogger
    from recordjson.config.model import Config
    from recordjson.core.records import RecordLike
    from recordjson.core.selection import NamesArg

logger: RecordJsonLogger = get_logger(__name__)


def from_json(
    record: RecordLike,
    json_text: str | bytes,
    allowed_fields: NamesArg = None,
    *,
    config: Config | None = None,
) -> bool:
    """Assign the members of a JSON object onto ``record``.

    Args:
        record (RecordLike): The record to update in place.
        json_text (str | bytes): A JSON document expected to hold a flat object.
        allowed_fields (str | Iterable[str] | None): The "safe" field names. If empty,
            ``config.allowed_fields`` is used, then all declared fields of ``record``.
        config (Config | None): Optional configuration supplying defaults.

    Returns:
        bool: True once every allowed key has been assigned; False if ``json_text`` is
            not valid JSON or does not hold an object. On False the record is untouched.
    """
    allowed: list[str] = normalize_names(allowed_fields)
    if not allowed and config is not None:
        allowed = list(config.allowed_fields)
    if not allowed:
        allowed = list(record.fields)

    try:
        data: object = codec.decode(json_text)
    except DecodeFailure as exc:
        logger.warning("Cannot apply JSON to record: %s", exc)
        return False

    if not isinstance(data, Mapping):
        logger.warning(
            "Cannot apply JSON to record: expected an object, got %s", type(data).__name__
        )
        return False

    for key, value in data.items():
        if key in allowed:
            record.set_field(key, value)
        else:
            logger.trace("Skipping key %r: not an allowed field", key)
    return True
