# topmark:header:start
#
#   project      : RecordJSON
#   file         : version.py
#   file_relpath : src/recordjson/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RecordJSON `version` command.

Prints the current RecordJSON version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from recordjson.cli.cli_types import EnumChoiceParam, OutputFormat
from recordjson.cli.cmd_common import get_console, get_effective_verbosity
from recordjson.constants import RECORDJSON_VERSION
from recordjson.core import codec

if TYPE_CHECKING:
    from recordjson.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of RecordJSON.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of RecordJSON.

    Args:
        output_format (OutputFormat | None): Optional output format (text, json or markdown).
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    vlevel = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        console.print(codec.encode({"version": RECORDJSON_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# RecordJSON Version\n")
        console.print(f"**RecordJSON version: {RECORDJSON_VERSION}**")
    else:  # Plain text (default)
        if vlevel > 0:
            console.print(console.styled("RecordJSON version:\n", bold=True, underline=True))
            console.print(f"    {console.styled(RECORDJSON_VERSION, bold=True)}")
        else:
            console.print(console.styled(RECORDJSON_VERSION, bold=True))
