# topmark:header:start
#
#   project      : RecordJSON
#   file         : records.py
#   file_relpath : src/recordjson/core/records.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic record interface.

This protocol defines the small surface the serializer and deserializer use to
read and write records. Implementations may wrap an ORM model, a dataclass, or
plain dictionaries; the conversion code never touches a concrete record type.

A record exposes three kinds of named members:

- scalar *fields* (``fields`` lists the declared names, in order),
- *has-one* relations (a single related record, possibly absent),
- *has-many* relations (an ordered sequence of related records).

Which names are relations is decided by the implementation alone; a name that
is not reported as a relation is treated as a plain field.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence


@runtime_checkable
class RecordLike(Protocol):
    """Minimal capability interface for records handled by RecordJSON."""

    @property
    def fields(self) -> Sequence[str]:
        """Declared field names, in emission order ("all fields")."""
        ...

    def get_field(self, name: str) -> object:
        """Return the value of field ``name`` (``None`` when unset or unknown)."""
        ...

    def set_field(self, name: str, value: object) -> None:
        """Assign ``value`` to field ``name``."""
        ...

    def has_relation_one(self, name: str) -> bool:
        """Return True if ``name`` is a has-one relation of this record."""
        ...

    def get_relation_one(self, name: str) -> RecordLike | None:
        """Return the record related through has-one relation ``name``, if any."""
        ...

    def has_relation_many(self, name: str) -> bool:
        """Return True if ``name`` is a has-many relation of this record."""
        ...

    def get_relation_many(self, name: str) -> Sequence[RecordLike]:
        """Return the ordered records related through has-many relation ``name``."""
        ...


def is_relation(record: RecordLike, name: str) -> bool:
    """Return True if ``name`` is a has-one or has-many relation of ``record``."""
    return record.has_relation_one(name) or record.has_relation_many(name)
