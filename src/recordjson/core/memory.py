# topmark:header:start
#
#   project      : RecordJSON
#   file         : memory.py
#   file_relpath : src/recordjson/core/memory.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-memory record implementation.

`Record` is a small, mutable implementation of
[`RecordLike`][recordjson.core.records.RecordLike] backed by plain dicts. It
is used by the CLI (records are built from JSON documents) and is convenient in
tests and scripts.

Document mapping (`Record.from_mapping`):
    - a nested JSON object becomes a has-one relation;
    - a non-empty JSON array whose items are all objects becomes a has-many relation;
    - everything else (scalars, ``null``, empty arrays, arrays of scalars) is a field.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from recordjson.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from recordjson.config.logging import RecordJsonLogger

logger: RecordJsonLogger = get_logger(__name__)


def _is_record_list(value: object) -> bool:
    return (
        isinstance(value, list)
        and len(value) > 0
        and all(isinstance(item, Mapping) for item in value)
    )


@dataclass
class Record:
    """Mutable in-memory record.

    Attributes:
        values (dict[str, object]): Field values keyed by field name.
        has_one (dict[str, Record | None]): Has-one relations; ``None`` marks an absent
            related record.
        has_many (dict[str, list[Record]]): Has-many relations.
        declared_fields (list[str] | None): Explicit field declaration. When None, the
            declared fields are the keys of ``values`` in insertion order.
    """

    values: dict[str, object] = field(default_factory=lambda: {})
    has_one: dict[str, Record | None] = field(default_factory=lambda: {})
    has_many: dict[str, list[Record]] = field(default_factory=lambda: {})
    declared_fields: list[str] | None = None

    # ---------------------------- RecordLike ----------------------------
    @property
    def fields(self) -> Sequence[str]:
        """Declared field names (explicit declaration, else the keys of ``values``)."""
        if self.declared_fields is not None:
            return list(self.declared_fields)
        return list(self.values)

    def get_field(self, name: str) -> object:
        """Return the value of field ``name``; unset or unknown fields read as ``None``."""
        return self.values.get(name)

    def set_field(self, name: str, value: object) -> None:
        """Assign ``value`` to field ``name``."""
        self.values[name] = value

    def has_relation_one(self, name: str) -> bool:
        """Return True if ``name`` is a has-one relation."""
        return name in self.has_one

    def get_relation_one(self, name: str) -> Record | None:
        """Return the has-one related record, or None when absent."""
        return self.has_one.get(name)

    def has_relation_many(self, name: str) -> bool:
        """Return True if ``name`` is a has-many relation."""
        return name in self.has_many

    def get_relation_many(self, name: str) -> Sequence[Record]:
        """Return the has-many related records (empty when ``name`` is unknown)."""
        return list(self.has_many.get(name, []))

    # ---------------------------- Conversions ----------------------------
    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Record:
        """Build a record graph from a decoded JSON object.

        Args:
            data (Mapping[str, Any]): The decoded JSON object.

        Returns:
            Record: The root record; nested objects and arrays of objects are
                turned into related records recursively.
        """
        record = cls()
        for key, value in data.items():
            if isinstance(value, Mapping):
                record.has_one[key] = cls.from_mapping(value)
            elif _is_record_list(value):
                record.has_many[key] = [cls.from_mapping(item) for item in value]
            else:
                record.values[key] = value
        logger.trace(
            "Built record: fields=%s has_one=%s has_many=%s",
            list(record.values),
            list(record.has_one),
            list(record.has_many),
        )
        return record

    def to_mapping(self, *, include_relations: bool = False) -> dict[str, object]:
        """Return the record's fields (and optionally its relations) as a plain dict.

        Args:
            include_relations (bool): If True, related records are converted recursively
                (has-one → dict or None, has-many → list of dicts).

        Returns:
            dict[str, object]: The record as a mapping.
        """
        result: dict[str, object] = {name: self.get_field(name) for name in self.fields}
        if include_relations:
            for name, one in self.has_one.items():
                result[name] = None if one is None else one.to_mapping(include_relations=True)
            for name, many in self.has_many.items():
                result[name] = [item.to_mapping(include_relations=True) for item in many]
        return result


def records_from_document(data: object) -> Record | list[Record]:
    """Build records from a decoded JSON document.

    Args:
        data (object): The decoded document: a JSON object (one record) or an array of
            JSON objects (a record collection).

    Returns:
        Record | list[Record]: A single record for an object, a list for an array.

    Raises:
        ValueError: If the document is neither an object nor an array of objects.
    """
    if isinstance(data, Mapping):
        return Record.from_mapping(data)
    if isinstance(data, list) and all(isinstance(item, Mapping) for item in data):
        return [Record.from_mapping(item) for item in data]
    raise ValueError("Expected a JSON object or an array of JSON objects")
