# topmark:header:start
#
#   project      : RecordJSON
#   file         : http.py
#   file_relpath : src/recordjson/core/http.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Response header helper."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from recordjson.constants import JSON_CONTENT_TYPE

if TYPE_CHECKING:
    from collections.abc import MutableMapping

CONTENT_TYPE_HEADER: Final[str] = "Content-Type"


def set_json_content_type(headers: MutableMapping[str, str]) -> None:
    """Mark an outgoing response as JSON by setting its ``Content-Type`` header.

    Works with any mutable header mapping (a plain dict, or a framework's response
    header object). An existing ``Content-Type`` entry is replaced.

    Args:
        headers (MutableMapping[str, str]): The response headers to update in place.
    """
    headers[CONTENT_TYPE_HEADER] = JSON_CONTENT_TYPE
