# topmark:header:start
#
#   project      : RecordJSON
#   file         : cmd_common.py
#   file_relpath : src/recordjson/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small helpers shared by several commands. They only encapsulate plumbing
(reading shared state from the Click context, applying CLI overrides to the
configuration) and leave messages and exit code policy to the commands.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from recordjson.cli.console import ClickConsole
from recordjson.config.logging import get_logger
from recordjson.config.model import MutableConfig

if TYPE_CHECKING:
    from recordjson.cli.console_api import ConsoleLike
    from recordjson.config.logging import RecordJsonLogger
    from recordjson.config.model import ArgsLike, Config

logger: RecordJsonLogger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity for this command (0 when unset)."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return int(obj.get("verbosity_level", 0))


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the context, creating a plain one if missing."""
    ctx.ensure_object(dict)
    console: ConsoleLike | None = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return console


def resolve_config(ctx: click.Context, overrides: ArgsLike) -> Config:
    """Return the effective configuration with CLI overrides applied.

    The group stores the merged (defaults + file) builder in ``ctx.obj["config"]``;
    this helper layers the command's overrides on a copy and freezes it. Config
    diagnostics are reported as warnings unless ``--quiet`` is in effect.

    Args:
        ctx (click.Context): The current Click context.
        overrides (ArgsLike): CLI-style mapping (see `MutableConfig.apply_cli_args`).

    Returns:
        Config: The frozen effective configuration.
    """
    ctx.ensure_object(dict)
    base: MutableConfig = ctx.obj.get("config") or MutableConfig.load_merged()
    config: Config = base.merge_with(MutableConfig()).apply_cli_args(overrides).freeze()
    logger.debug("Effective config: %s", config)

    if get_effective_verbosity(ctx) >= 0:
        console: ConsoleLike = get_console(ctx)
        for message in config.diagnostics:
            console.warn(f"[config] {message}")
    return config
