# topmark:header:start
#
#   project      : RecordJSON
#   file         : console_api.py
#   file_relpath : src/recordjson/cli/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output sink protocol shared by the RecordJSON commands.

Commands never write to streams directly: results go through `ConsoleLike.print`
(stdout) and user-facing problems through `warn` / `error` (stderr). Tests can pass
any object with this shape.
"""

from __future__ import annotations

from typing import Any, Protocol


class ConsoleLike(Protocol):
    """Where commands send JSON documents and user-facing diagnostics."""

    enable_color: bool

    def print(self, text: str = "") -> None:
        """Emit a line of command output (usually a JSON document)."""
        ...

    def warn(self, text: str) -> None: ...

    def error(self, text: str) -> None: ...

    def styled(self, text: str, **style: Any) -> str:
        """Return ``text`` styled with `click.style` keywords, or unchanged without color."""
        ...
