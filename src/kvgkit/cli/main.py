# topmark:header:start
#
#   project      : KvgKit
#   file         : main.py
#   file_relpath : src/kvgkit/cli/main.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""KvgKit command-line interface.

Group-level options (verbosity, color, config file) are resolved once and
stored in ``ctx.obj``; subcommands read them back through
`kvgkit.cli.cmd_common` and `kvgkit.cli.console.get_console`.
"""

from __future__ import annotations

from pathlib import Path

import click

from kvgkit.cli.commands.check import check_command
from kvgkit.cli.commands.config import config_command
from kvgkit.cli.commands.rebase import rebase_command
from kvgkit.cli.commands.renumber import renumber_command
from kvgkit.cli.commands.strip import strip_command
from kvgkit.cli.commands.version import version_command
from kvgkit.cli.console import ClickConsole
from kvgkit.cli.errors import KvgConfigError
from kvgkit.cli.options import (
    ColorMode,
    common_color_options,
    common_config_options,
    common_verbose_options,
    log_level_for_verbosity,
    resolve_color_mode,
    resolve_verbosity,
)
from kvgkit.config.logging import get_logger, resolve_env_log_level, setup_logging
from kvgkit.config.model import Config, load_config

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_path: str | None,
) -> None:
    """Initialize shared state (verbosity, color, logging, config) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_path (str | None): Explicit config file from ``--config``.

    Raises:
        KvgConfigError: If the configuration cannot be loaded.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    # The environment wins over -v for internal logging.
    level_env: int | None = resolve_env_log_level()
    log_level: int = level_env if level_env is not None else log_level_for_verbosity(level_cli)
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    console = ClickConsole(enable_color=enable_color)
    ctx.obj["console"] = console

    try:
        config: Config = load_config(Path(config_path) if config_path else None)
    except (OSError, RuntimeError) as exc:
        raise KvgConfigError(f"Cannot load configuration: {exc}") from exc
    logger.debug("Effective config: %s", config)
    if level_cli >= 0:
        for diagnostic in config.diagnostics:
            console.warn(f"config: {diagnostic.message}")
    ctx.obj["config"] = config


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="KvgKit: canonicalize, renumber and strip KanjiVG files.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    config_path: str | None,
) -> None:
    """Entry point for the KvgKit CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
        config_path=config_path,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'kvgkit check [PATHS...]' to find non-canonical files.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(config_command)

cli.add_command(check_command)

cli.add_command(renumber_command)

cli.add_command(rebase_command)

cli.add_command(strip_command)

if __name__ == "__main__":
    cli()
