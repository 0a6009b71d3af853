# topmark:header:start
#
#   project      : RecordJSON
#   file         : serializer.py
#   file_relpath : src/recordjson/core/serializer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Record graph → JSON serialization.

Two layers:

- `build_structure` / `build_structure_many` wrap their arguments in one
  immutable [`Selection`][recordjson.core.selection.Selection] per call, walk
  the records and return plain dicts/lists (no encoding). Each nested level
  receives `Selection.descend` of its parent.
- `to_json` / `all_to_json` build the structure once and encode it, returning
  ``None`` when encoding fails. No partial text is ever returned.

Selection rules for one record:

1. ``fields`` defaults to all declared fields of the record.
2. Names in ``fields`` that are relations are appended to ``include`` (if not
   already present) instead of being emitted as values.
3. Every include entry naming a relation of the record is followed; the
   related record(s) are emitted with all their fields and with the include
   paths nested under that relation (see
   [`deep_includes`][recordjson.core.selection.deep_includes]).
4. Include entries that name no relation are ignored.

There is no cycle detection: depth is bounded by the include paths the caller
supplies, since nested levels only ever receive shorter paths.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from recordjson.config.logging import get_logger
from recordjson.core import codec
from recordjson.core.errors import EncodeFailure
from recordjson.core.formatter import format_json
from recordjson.core.records import is_relation
from recordjson.core.selection import Selection, normalize_names

if TYPE_CHECKING:
    from collections.abc import Iterable

    from recordjson.config.logging import RecordJsonLogger
    from recordjson.config.model import Config
    from recordjson.core.records import RecordLike
    from recordjson.core.selection import NamesArg

logger: RecordJsonLogger = get_logger(__name__)


def build_structure(
    record: RecordLike,
    fields: NamesArg = None,
    include: NamesArg = None,
) -> dict[str, object]:
    """Build the JSON-ready mapping for a single record.

    Args:
        record (RecordLike): The record to serialize.
        fields (str | Iterable[str] | None): Field names to emit; empty means all declared
            fields. Relation names are promoted into ``include``.
        include (str | Iterable[str] | None): Relation paths to follow
            (e.g. ``"author"``, ``"author/publisher"``).

    Returns:
        dict[str, object]: A freshly allocated mapping owned by the caller.
    """
    return _build(record, Selection.of(fields, include))


def build_structure_many(
    records: Iterable[RecordLike],
    fields: NamesArg = None,
    include: NamesArg = None,
) -> list[dict[str, object]]:
    """Build JSON-ready mappings for a collection of records, preserving order.

    Args:
        records (Iterable[RecordLike]): The records to serialize.
        fields (str | Iterable[str] | None): Field names applied to every record.
        include (str | Iterable[str] | None): Relation paths applied to every record.

    Returns:
        list[dict[str, object]]: One mapping per record, in input order.
    """
    selection: Selection = Selection.of(fields, include)
    return [_build(record, selection) for record in records]


def _build(record: RecordLike, selection: Selection) -> dict[str, object]:
    field_names: tuple[str, ...] = selection.fields or tuple(record.fields)
    include_paths: list[str] = list(selection.include)

    result: dict[str, object] = {}

    for name in field_names:
        if is_relation(record, name):
            if name not in include_paths:
                include_paths.append(name)
        else:
            result[name] = record.get_field(name)

    # Relation names from ``fields`` now count as includes of this level
    level: Selection = Selection(include=tuple(include_paths))

    for relation in include_paths:
        if record.has_relation_one(relation):
            related: RecordLike | None = record.get_relation_one(relation)
            result[relation] = (
                None if related is None else _build(related, level.descend(relation))
            )
        elif record.has_relation_many(relation):
            nested: Selection = level.descend(relation)
            result[relation] = [
                _build(item, nested) for item in record.get_relation_many(relation)
            ]
        else:
            logger.trace(
                "Ignoring include %r: not a relation of %s", relation, type(record).__name__
            )

    return result


def _resolve(
    fields: NamesArg,
    include: NamesArg,
    pretty_print: bool | None,
    config: Config | None,
) -> tuple[list[str], list[str], bool, bool]:
    """Merge explicit arguments with config defaults (explicit arguments win)."""
    field_names: list[str] = normalize_names(fields)
    include_paths: list[str] = normalize_names(include)
    pretty: bool = bool(pretty_print)
    ensure_ascii: bool = True
    if config is not None:
        field_names = field_names or list(config.fields)
        include_paths = include_paths or list(config.include)
        pretty = config.pretty_print if pretty_print is None else pretty
        ensure_ascii = config.ensure_ascii
    return field_names, include_paths, pretty, ensure_ascii


def _encode(value: object, *, pretty_print: bool, ensure_ascii: bool) -> str | None:
    try:
        text: str = codec.encode(value, ensure_ascii=ensure_ascii)
    except EncodeFailure as exc:
        logger.warning("JSON encoding failed: %s", exc)
        return None
    if pretty_print:
        return format_json(text, ensure_ascii=ensure_ascii)
    return text


def to_json(
    record: RecordLike,
    fields: NamesArg = None,
    include: NamesArg = None,
    *,
    pretty_print: bool | None = None,
    config: Config | None = None,
) -> str | None:
    """Convert a record (and selected related records) into JSON text.

    Args:
        record (RecordLike): The record to convert.
        fields (str | Iterable[str] | None): Field names to include; empty means all
            declared fields (or ``config.fields`` when a config is given).
        include (str | Iterable[str] | None): Relation paths to recurse into.
        pretty_print (bool | None): Format the JSON for legibility. None defers to
            ``config.pretty_print`` (False without a config).
        config (Config | None): Optional configuration supplying defaults.

    Returns:
        str | None: The JSON text, or None if the structure cannot be encoded.
    """
    field_names, include_paths, pretty, ensure_ascii = _resolve(
        fields, include, pretty_print, config
    )
    structure: dict[str, object] = build_structure(record, field_names, include_paths)
    return _encode(structure, pretty_print=pretty, ensure_ascii=ensure_ascii)


def all_to_json(
    records: Iterable[RecordLike],
    fields: NamesArg = None,
    include: NamesArg = None,
    *,
    pretty_print: bool | None = None,
    config: Config | None = None,
) -> str | None:
    """Convert a collection of records into a JSON array.

    The whole array is encoded once; if any element cannot be encoded the call
    fails as a whole.

    Args:
        records (Iterable[RecordLike]): The records to convert, in order.
        fields (str | Iterable[str] | None): Field names applied to every record.
        include (str | Iterable[str] | None): Relation paths applied to every record.
        pretty_print (bool | None): Format the JSON for legibility. None defers to
            ``config.pretty_print`` (False without a config).
        config (Config | None): Optional configuration supplying defaults.

    Returns:
        str | None: The JSON text, or None if the structure cannot be encoded.
    """
    field_names, include_paths, pretty, ensure_ascii = _resolve(
        fields, include, pretty_print, config
    )
    structures: list[dict[str, object]] = build_structure_many(
        records, field_names, include_paths
    )
    return _encode(structures, pretty_print=pretty, ensure_ascii=ensure_ascii)
