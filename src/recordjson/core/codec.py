# topmark:header:start
#
#   project      : RecordJSON
#   file         : codec.py
#   file_relpath : src/recordjson/core/codec.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON encode/decode primitives.

Thin wrappers around `json.dumps` / `json.loads` that:
- convert a few common non-JSON scalars (see `_encode_default`),
- reject values that have no JSON representation (NaN/Infinity, invalid UTF-8
  ``bytes``, arbitrary objects), and
- turn every failure into an `EncodeFailure` / `DecodeFailure`.

Conventions:
- `encode()` emits compact JSON (``","`` / ``":"`` separators) by default; this is
  the canonical form consumed by the pretty-printer.
- `json.dumps()` does not append a trailing newline, and neither does `encode()`.
"""

from __future__ import annotations

import json
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from pathlib import PurePath
from typing import Final

from recordjson.core.errors import DecodeFailure, EncodeFailure

COMPACT_SEPARATORS: Final[tuple[str, str]] = (",", ":")


def _encode_default(obj: object) -> object:
    """Convert values `json` cannot handle natively.

    Conversions:
      - bytes -> str (strict UTF-8; invalid sequences raise `UnicodeDecodeError`)
      - Enum -> Enum.value
      - datetime / date -> ISO-8601 string
      - Decimal -> float
      - PurePath -> str

    Raises:
        TypeError: For any other type.
    """
    if isinstance(obj, (bytes, bytearray)):
        return bytes(obj).decode("utf-8")
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if isinstance(obj, Decimal):
        return float(obj)
    if isinstance(obj, PurePath):
        return str(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def encode(value: object, *, ensure_ascii: bool = True, compact: bool = True) -> str:
    """Encode a structured value as JSON text.

    Args:
        value (object): Mapping / sequence / scalar tree to encode.
        ensure_ascii (bool): Escape non-ASCII characters as ``\\uXXXX``.
        compact (bool): Use compact separators. When False, `json`'s default
            ``", "`` / ``": "`` separators are used.

    Returns:
        str: The JSON text (no trailing newline).

    Raises:
        EncodeFailure: If any value in the tree cannot be represented.
    """
    try:
        return json.dumps(
            value,
            ensure_ascii=ensure_ascii,
            allow_nan=False,
            separators=COMPACT_SEPARATORS if compact else None,
            default=_encode_default,
        )
    except (TypeError, ValueError, RecursionError) as exc:
        # UnicodeDecodeError is a ValueError; NaN/Infinity raise ValueError
        raise EncodeFailure("Cannot encode value as JSON", cause=exc) from exc


def _reject_constant(name: str) -> object:
    """Reject the non-standard ``NaN`` / ``Infinity`` / ``-Infinity`` literals `json` accepts."""
    raise ValueError(f"Invalid JSON constant: {name}")


def decode(text: str | bytes) -> object:
    """Decode JSON text into Python values.

    Args:
        text (str | bytes): The JSON document. ``bytes`` must be UTF-8 (or UTF-16/32 with BOM,
            as accepted by `json.loads`).

    Returns:
        object: The decoded value (object keys keep document order).

    Raises:
        DecodeFailure: If ``text`` is not a valid JSON document.
    """
    if not isinstance(text, (str, bytes, bytearray)):
        raise DecodeFailure(f"Expected JSON text, got {type(text).__name__}")
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        # json.JSONDecodeError and UnicodeDecodeError are ValueErrors
        raise DecodeFailure("Cannot decode JSON text", cause=exc) from exc
