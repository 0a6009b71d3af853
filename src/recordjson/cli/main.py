# topmark:header:start
#
#   project      : RecordJSON
#   file         : main.py
#   file_relpath : src/recordjson/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RecordJSON command line interface.

Key ideas:
- Group-level options are initialized once and placed into ``ctx.obj``
  (``console``, ``verbosity_level``, ``log_level``, ``config``).
- Subcommands read their input from a file or STDIN and write JSON to stdout.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from recordjson.cli.commands.apply import apply_command
from recordjson.cli.commands.format import format_command
from recordjson.cli.commands.select import select_command
from recordjson.cli.commands.version import version_command
from recordjson.cli.console import ClickConsole
from recordjson.cli.errors import RecordJsonConfigError
from recordjson.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from recordjson.config.logging import get_logger, resolve_env_log_level, setup_logging
from recordjson.config.model import MutableConfig

if TYPE_CHECKING:
    from recordjson.cli.console_api import ConsoleLike
    from recordjson.config.logging import RecordJsonLogger

logger: RecordJsonLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Initialize shared state (verbosity, color, logging, config) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_path (Path | None): Explicit config file from ``--config``.

    Raises:
        RecordJsonConfigError: If ``--config`` names a file that does not exist.
    """
    ctx.ensure_object(dict)

    # Configure program-output verbosity:
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Configure internal logging via env:
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else ColorMode(color_mode or "auto")
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)

    if config_path is not None and not config_path.is_file():
        raise RecordJsonConfigError(f"Config file not found: {config_path}")
    ctx.obj["config"] = MutableConfig.load_merged(config_path=config_path)
    logger.debug("Loaded config layers: %s", ctx.obj["config"].config_files)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="RecordJSON CLI: serialize, patch and pretty-print JSON records.",
)
@common_verbose_options
@common_color_options
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Read settings from this TOML file instead of discovering one.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Entry point for the RecordJSON CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_path=config_path,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'recordjson format [INPUT]' to pretty-print JSON.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(format_command)

cli.add_command(select_command)

cli.add_command(apply_command)

if __name__ == "__main__":
    cli()
