# topmark:header:start
#
#   project      : RecordJSON
#   file         : format.py
#   file_relpath : src/recordjson/cli/commands/format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RecordJSON `format` command.

Pretty-prints a JSON document (file or STDIN) with two-space indentation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from recordjson.cli.cmd_common import get_console, resolve_config
from recordjson.cli.errors import RecordJsonDataError
from recordjson.cli.io import STDIN_SENTINEL, describe_source, read_input_text
from recordjson.core.formatter import format_json

if TYPE_CHECKING:
    from recordjson.cli.console_api import ConsoleLike
    from recordjson.config.model import Config


@click.command(
    name="format",
    help="Pretty-print a JSON document. Reads STDIN when INPUT is '-' or omitted.",
)
@click.argument("source", metavar="[INPUT]", default=STDIN_SENTINEL, required=False)
@click.option(
    "--ascii/--no-ascii",
    "ensure_ascii",
    default=None,
    help="Escape non-ASCII characters (default: from config, else escaped).",
)
@click.pass_context
def format_command(ctx: click.Context, source: str, ensure_ascii: bool | None) -> None:
    """Pretty-print a JSON document.

    Args:
        ctx (click.Context): The Click context.
        source (str): Input path, or ``-`` for STDIN.
        ensure_ascii (bool | None): Escape non-ASCII characters; None defers to config.

    Raises:
        RecordJsonDataError: If the input is not valid JSON.
    """
    console: ConsoleLike = get_console(ctx)
    config: Config = resolve_config(ctx, {"ensure_ascii": ensure_ascii})

    text: str = read_input_text(source)
    formatted: str | None = format_json(text, ensure_ascii=config.ensure_ascii)
    if formatted is None:
        raise RecordJsonDataError(f"Invalid JSON in {describe_source(source)}")
    console.print(formatted)
