# topmark:header:start
#
#   project      : RecordJSON
#   file         : selection.py
#   file_relpath : src/recordjson/core/selection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Field and include-path selection.

A selection is the caller's description of what a serialization call emits:

- ``fields``: field names to emit; empty means "all declared fields";
- ``include``: relation paths to follow, e.g. ``"author"`` or
  ``"author/publisher"``. A path means "follow the first relation, then apply
  the rest of the path one level deeper".

Include entries are compared by exact string value. No separator
canonicalization is performed (``"a//b"`` and ``"a/b"`` are different entries).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from recordjson.constants import INCLUDE_PATH_SEPARATOR

NamesArg = str | Iterable[str] | None


def normalize_names(value: NamesArg) -> list[str]:
    """Normalize a field / include argument into a fresh list.

    Args:
        value (str | Iterable[str] | None): ``None`` or empty → ``[]``; a single string is
            wrapped; any other iterable is copied in order.

    Returns:
        list[str]: The normalized names.
    """
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


def deep_includes(relation: str, include: Iterable[str]) -> list[str]:
    """Return the include paths to pass one level down into ``relation``.

    An entry qualifies when it differs from ``relation`` and starts with
    ``relation + "/"``; the prefix match ignores case. The ``relation/`` prefix is
    stripped from qualifying entries. The remainder is not validated: malformed
    suffixes simply fail to match anything at the next level.

    Args:
        relation (str): The relation being followed.
        include (Iterable[str]): The include paths of the current level.

    Returns:
        list[str]: The sub-paths for the related record(s), in order.

    Example:
        ```python
        deep_includes("author", ["author", "author/publisher", "tags"])
        # -> ["publisher"]
        ```
    """
    prefix: str = f"{relation}{INCLUDE_PATH_SEPARATOR}"
    # lower() may change the length; strip by the original prefix length
    return [
        path[len(prefix) :]
        for path in include
        if path != relation and path.lower().startswith(prefix.lower())
    ]


@dataclass(frozen=True, slots=True)
class Selection:
    """Immutable per-call selection of fields and include paths.

    Attributes:
        fields (tuple[str, ...]): Field names to emit; empty means all declared fields.
        include (tuple[str, ...]): Relation paths to follow.
    """

    fields: tuple[str, ...] = ()
    include: tuple[str, ...] = ()

    @classmethod
    def of(cls, fields: NamesArg = None, include: NamesArg = None) -> Selection:
        """Build a selection from loosely typed arguments.

        Args:
            fields (str | Iterable[str] | None): Field names (single name or sequence).
            include (str | Iterable[str] | None): Include paths (single path or sequence).

        Returns:
            Selection: The normalized selection.
        """
        return cls(
            fields=tuple(normalize_names(fields)),
            include=tuple(normalize_names(include)),
        )

    def descend(self, relation: str) -> Selection:
        """Return the selection applied to records reached through ``relation``.

        Nested levels always emit all fields and receive the deep includes of
        ``relation``.
        """
        return Selection(include=tuple(deep_includes(relation, self.include)))
