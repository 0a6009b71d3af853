# topmark:header:start
#
#   project      : RecordJSON
#   file         : apply.py
#   file_relpath : src/recordjson/cli/commands/apply.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RecordJSON `apply` command.

Loads TARGET (a JSON object) as a record, assigns the keys of PATCH (a JSON
object) that are allowed fields, and prints the resulting record.

Allowed fields default to ``[deserializer] allowed_fields`` from the config and
then to the fields TARGET already has, so a patch cannot add new keys unless
they are allowed explicitly with ``--allow``. Relations of TARGET are kept as-is.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

import click

from recordjson.cli.cmd_common import get_console, resolve_config
from recordjson.cli.errors import RecordJsonDataError
from recordjson.cli.io import describe_source, read_input_text, read_json_document
from recordjson.cli.options import common_layout_options
from recordjson.config.logging import get_logger
from recordjson.core import codec
from recordjson.core.deserializer import from_json
from recordjson.core.errors import EncodeFailure
from recordjson.core.formatter import indent_canonical
from recordjson.core.memory import Record

if TYPE_CHECKING:
    from recordjson.cli.console_api import ConsoleLike
    from recordjson.config.logging import RecordJsonLogger
    from recordjson.config.model import Config

logger: RecordJsonLogger = get_logger(__name__)


@click.command(
    name="apply",
    help="Apply the allowed keys of a JSON PATCH object to a TARGET record.",
)
@click.argument("target")
@click.argument("patch")
@click.option(
    "-a",
    "--allow",
    "allowed_fields",
    multiple=True,
    help="Field the patch may set (repeatable). Default: config, else TARGET's fields.",
)
@common_layout_options
@click.pass_context
def apply_command(
    ctx: click.Context,
    target: str,
    patch: str,
    allowed_fields: tuple[str, ...],
    pretty_print: bool | None,
    ensure_ascii: bool | None,
) -> None:
    """Patch a record and print the result.

    Args:
        ctx (click.Context): The Click context.
        target (str): Path of the target record document (or ``-`` for STDIN).
        patch (str): Path of the patch document (or ``-`` for STDIN).
        allowed_fields (tuple[str, ...]): ``--allow`` values.
        pretty_print (bool | None): ``--pretty/--compact``; None defers to config.
        ensure_ascii (bool | None): ``--ascii/--no-ascii``; None defers to config.

    Raises:
        RecordJsonDataError: If TARGET or PATCH is not a JSON object.
    """
    console: ConsoleLike = get_console(ctx)
    config: Config = resolve_config(
        ctx,
        {
            "allowed_fields": allowed_fields,
            "pretty_print": pretty_print,
            "ensure_ascii": ensure_ascii,
        },
    )

    document: object = read_json_document(target)
    if not isinstance(document, Mapping):
        raise RecordJsonDataError(f"{describe_source(target)}: expected a JSON object")
    record: Record = Record.from_mapping(document)

    patch_text: str = read_input_text(patch)
    if not from_json(record, patch_text, config=config):
        raise RecordJsonDataError(f"{describe_source(patch)}: not a valid JSON object")
    logger.debug("Patched record fields: %s", list(record.fields))

    try:
        text: str = codec.encode(
            record.to_mapping(include_relations=True), ensure_ascii=config.ensure_ascii
        )
    except EncodeFailure as exc:
        raise RecordJsonDataError(f"Cannot encode patched record: {exc}") from exc
    console.print(indent_canonical(text) if config.pretty_print else text)
