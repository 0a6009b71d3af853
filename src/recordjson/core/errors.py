# topmark:header:start
#
#   project      : RecordJSON
#   file         : errors.py
#   file_relpath : src/recordjson/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Internal failure signals raised by the JSON codec.

These exceptions never cross the public API: `to_json`, `all_to_json`,
`from_json` and `format_json` catch them at their boundary and report a
sentinel result (``None`` / ``False``) instead. They carry the underlying
cause so that the boundary can log something useful.
"""

from __future__ import annotations


class RecordJsonError(Exception):
    """Base class for RecordJSON failures.

    Attributes:
        message (str): Human-readable description of the failure.
        cause (BaseException | None): The exception raised by the underlying primitive, if any.
    """

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"


class EncodeFailure(RecordJsonError):
    """A structure holds a value that cannot be represented as JSON."""


class DecodeFailure(RecordJsonError):
    """Input text is not a valid JSON document."""
