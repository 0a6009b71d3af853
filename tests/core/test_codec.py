# topmark:header:start
#
#   project      : RecordJSON
#   file         : test_codec.py
#   file_relpath : tests/core/test_codec.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the JSON encode/decode primitives."""

from __future__ import annotations

import math
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from pathlib import PurePosixPath

import pytest

from recordjson.core import codec
from recordjson.core.errors import DecodeFailure, EncodeFailure, RecordJsonError


class Color(Enum):
    RED = "red"


def test_encode_is_compact_by_default() -> None:
    assert codec.encode({"a": [1, 2]}) == '{"a":[1,2]}'
    assert codec.encode({"a": [1, 2]}, compact=False) == '{"a": [1, 2]}'


def test_encode_converts_common_scalars() -> None:
    value = {
        "color": Color.RED,
        "day": date(2025, 1, 2),
        "at": datetime(2025, 1, 2, 3, 4, 5),
        "price": Decimal("1.5"),
        "path": PurePosixPath("/tmp/x"),
        "raw": b"abc",
    }

    assert codec.encode(value) == (
        '{"color":"red","day":"2025-01-02","at":"2025-01-02T03:04:05",'
        '"price":1.5,"path":"/tmp/x","raw":"abc"}'
    )


@pytest.mark.parametrize(
    "value",
    [math.nan, -math.inf, b"\xc3\x28", {1, 2}, object()],
    ids=["nan", "-inf", "invalid-utf8", "set", "object"],
)
def test_encode_failure(value: object) -> None:
    with pytest.raises(EncodeFailure) as excinfo:
        codec.encode({"v": value})

    assert isinstance(excinfo.value, RecordJsonError)
    assert excinfo.value.cause is not None
    assert str(excinfo.value).startswith("Cannot encode value as JSON: ")


def test_encode_self_referencing_structure_fails() -> None:
    loop: list[object] = []
    loop.append(loop)

    with pytest.raises(EncodeFailure):
        codec.encode(loop)


def test_decode_keeps_member_order() -> None:
    assert list(codec.decode('{"b":1,"a":2}')) == ["b", "a"]  # type: ignore[arg-type]


@pytest.mark.parametrize("text", ["", "{", "NaN", "[Infinity]", "-Infinity", b"\xff"])
def test_decode_failure(text: str | bytes) -> None:
    with pytest.raises(DecodeFailure):
        codec.decode(text)


def test_decode_rejects_non_text() -> None:
    with pytest.raises(DecodeFailure, match="Expected JSON text"):
        codec.decode(None)  # type: ignore[arg-type]


def test_error_without_cause_str() -> None:
    assert str(DecodeFailure("plain")) == "plain"
