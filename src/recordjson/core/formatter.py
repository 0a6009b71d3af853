# topmark:header:start
#
#   project      : RecordJSON
#   file         : formatter.py
#   file_relpath : src/recordjson/core/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Single-pass JSON pretty-printer.

`format_json` first canonicalizes its input (decode, then compact re-encode) and
then scans the canonical text once, left to right, tracking two pieces of state:

- ``indent_level``: current nesting depth (starts at 0);
- ``in_string``: whether the scan is inside a string literal.

Outside string literals:

| char       | output                                                        |
|------------|---------------------------------------------------------------|
| ``{`` ``[``| char, newline, ``indent_level + 1`` indent units; depth + 1    |
| ``}`` ``]``| depth - 1; newline, ``indent_level`` indent units, char       |
| ``,``      | ``,``, newline, ``indent_level`` indent units                 |
| ``:``      | ``": "``                                                      |

Inside string literals every character is copied verbatim. A ``"`` toggles
``in_string`` unless it is escaped, i.e. preceded by an odd-length run of
backslashes. The scan relies on the canonical form (no insignificant
whitespace, normalized escaping); it is not meant for arbitrary input.

Empty containers are expanded like any other: ``{}`` becomes ``{``, a line
holding one indent unit, then ``}``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from recordjson.config.logging import get_logger
from recordjson.constants import INDENT_UNIT
from recordjson.core import codec
from recordjson.core.errors import DecodeFailure, EncodeFailure

if TYPE_CHECKING:
    from recordjson.config.logging import RecordJsonLogger

logger: RecordJsonLogger = get_logger(__name__)


def canonicalize(json_text: str | bytes, *, ensure_ascii: bool = True) -> str:
    """Return the compact canonical form of ``json_text``.

    Args:
        json_text (str | bytes): A JSON document.
        ensure_ascii (bool): Escape non-ASCII characters in the canonical form.

    Returns:
        str: The decoded-then-re-encoded document.

    Raises:
        DecodeFailure: If ``json_text`` is not valid JSON.
        EncodeFailure: If the decoded document cannot be re-encoded.
    """
    return codec.encode(codec.decode(json_text), ensure_ascii=ensure_ascii)


def _is_escaped(text: str, index: int) -> bool:
    """Return True if the character at ``index`` is preceded by an unescaped backslash."""
    backslashes: int = 0
    pos: int = index - 1
    while pos >= 0 and text[pos] == "\\":
        backslashes += 1
        pos -= 1
    return backslashes % 2 == 1


def indent_canonical(text: str, indent: str = INDENT_UNIT) -> str:
    """Indent canonical compact JSON text in a single forward scan.

    Args:
        text (str): Compact canonical JSON (see `canonicalize`).
        indent (str): Indentation unit.

    Returns:
        str: The indented text.
    """
    out: list[str] = []
    indent_level: int = 0
    in_string: bool = False

    for index, char in enumerate(text):
        if char == '"':
            if not _is_escaped(text, index):
                in_string = not in_string
            out.append(char)
        elif in_string:
            out.append(char)
        elif char in "{[":
            out.append(char + "\n" + indent * (indent_level + 1))
            indent_level += 1
        elif char in "}]":
            indent_level -= 1
            out.append("\n" + indent * indent_level + char)
        elif char == ",":
            out.append(",\n" + indent * indent_level)
        elif char == ":":
            out.append(": ")
        else:
            out.append(char)

    return "".join(out)


def format_json(json_text: str | bytes, *, ensure_ascii: bool = True) -> str | None:
    """Format a JSON document for legibility.

    Args:
        json_text (str | bytes): The JSON document to format.
        ensure_ascii (bool): Escape non-ASCII characters in the output.

    Returns:
        str | None: The indented document, or None if ``json_text`` is not valid JSON.

    Example:
        ```python
        format_json('{"a":1,"b":[1,2]}')
        # '{\\n  "a": 1,\\n  "b": [\\n    1,\\n    2\\n  ]\\n}'
        ```
    """
    try:
        canonical: str = canonicalize(json_text, ensure_ascii=ensure_ascii)
    except (DecodeFailure, EncodeFailure) as exc:
        logger.warning("Cannot format JSON: %s", exc)
        return None
    logger.trace("Formatting %d characters of canonical JSON", len(canonical))
    return indent_canonical(canonical)
