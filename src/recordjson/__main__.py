# topmark:header:start
#
#   project      : RecordJSON
#   file         : __main__.py
#   file_relpath : src/recordjson/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running RecordJSON via ``python -m recordjson``.

It delegates directly to :func:`recordjson.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how RecordJSON is launched.

Examples:
    Pretty-print a JSON file::

        python -m recordjson format data.json
"""

from __future__ import annotations

from recordjson.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
