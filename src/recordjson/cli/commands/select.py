# topmark:header:start
#
#   project      : RecordJSON
#   file         : select.py
#   file_relpath : src/recordjson/cli/commands/select.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RecordJSON `select` command.

Loads a JSON document as a record graph and re-serializes it with a field
selection and include paths:

- a JSON object is one record (`to_json`);
- an array of objects is a record collection (`all_to_json`).

Nested objects are has-one relations and arrays of objects are has-many
relations; they are only emitted when named by ``--include`` (or by
``--field``, which promotes relation names into the include list).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from recordjson.cli.cmd_common import get_console, resolve_config
from recordjson.cli.errors import RecordJsonDataError
from recordjson.cli.io import STDIN_SENTINEL, describe_source, read_json_document
from recordjson.cli.options import common_layout_options
from recordjson.config.logging import get_logger
from recordjson.core.memory import Record, records_from_document
from recordjson.core.serializer import all_to_json, to_json

if TYPE_CHECKING:
    from recordjson.cli.console_api import ConsoleLike
    from recordjson.config.logging import RecordJsonLogger
    from recordjson.config.model import Config

logger: RecordJsonLogger = get_logger(__name__)


@click.command(
    name="select",
    help="Serialize selected fields and relations of a JSON record (or array of records).",
)
@click.argument("source", metavar="[INPUT]", default=STDIN_SENTINEL, required=False)
@click.option(
    "-f",
    "--field",
    "fields",
    multiple=True,
    help="Field to emit (repeatable). Default: all fields.",
)
@click.option(
    "-i",
    "--include",
    "include",
    multiple=True,
    help="Relation path to follow, e.g. 'author' or 'author/publisher' (repeatable).",
)
@common_layout_options
@click.pass_context
def select_command(
    ctx: click.Context,
    source: str,
    fields: tuple[str, ...],
    include: tuple[str, ...],
    pretty_print: bool | None,
    ensure_ascii: bool | None,
) -> None:
    """Serialize a record graph with the given selection.

    Args:
        ctx (click.Context): The Click context.
        source (str): Input path, or ``-`` for STDIN.
        fields (tuple[str, ...]): ``--field`` values.
        include (tuple[str, ...]): ``--include`` values.
        pretty_print (bool | None): ``--pretty/--compact``; None defers to config.
        ensure_ascii (bool | None): ``--ascii/--no-ascii``; None defers to config.

    Raises:
        RecordJsonDataError: If the input is not a JSON object or array of objects,
            or cannot be encoded.
    """
    console: ConsoleLike = get_console(ctx)
    config: Config = resolve_config(
        ctx,
        {
            "fields": fields,
            "include": include,
            "pretty_print": pretty_print,
            "ensure_ascii": ensure_ascii,
        },
    )

    document: object = read_json_document(source)
    try:
        records: Record | list[Record] = records_from_document(document)
    except ValueError as exc:
        raise RecordJsonDataError(f"{describe_source(source)}: {exc}") from exc

    if isinstance(records, Record):
        text: str | None = to_json(records, config=config)
    else:
        logger.debug("Serializing %d records", len(records))
        text = all_to_json(records, config=config)

    if text is None:
        raise RecordJsonDataError(f"Cannot encode records from {describe_source(source)}")
    console.print(text)
