# topmark:header:start
#
#   project      : KvgKit
#   file         : config.py
#   file_relpath : src/kvgkit/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""KvgKit `config` command group.

Subcommands:
    * ``config dump``: print the effective configuration as TOML;
    * ``config init``: print the commented default configuration, optionally
      nested under ``[tool.kvgkit]`` for inclusion in ``pyproject.toml``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from kvgkit.cli.cmd_common import get_config
from kvgkit.cli.console import get_console
from kvgkit.config.io import load_default_toml_text, nest_toml_under_section
from kvgkit.config.keys import Toml

if TYPE_CHECKING:
    from kvgkit.cli.console import ConsoleLike
    from kvgkit.config.model import Config


@click.group(name="config", help="Inspect or generate KvgKit configuration.")
def config_command() -> None:
    """Configuration commands."""


@config_command.command(name="dump", help="Print the effective configuration as TOML.")
def config_dump_command() -> None:
    """Print the configuration in effect, after discovery and overrides."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console()
    config: Config = get_config(ctx)

    if config.config_files:
        sources: str = ", ".join(str(p) for p in config.config_files)
        console.print(f"# Loaded from: {sources}")
    else:
        console.print("# Built-in defaults")
    console.print(config.to_toml(), nl=False)


@config_command.command(name="init", help="Print a starter configuration file.")
@click.option(
    "--pyproject",
    is_flag=True,
    help=f"Nest the settings under [{Toml.SECTION_TOOL}.{Toml.SECTION_KVGKIT}] for pyproject.toml.",
)
def config_init_command(*, pyproject: bool) -> None:
    """Print the packaged default configuration.

    Args:
        pyproject (bool): Wrap the document for inclusion in ``pyproject.toml``.
    """
    console: ConsoleLike = get_console()
    text: str = load_default_toml_text()
    if pyproject:
        text = nest_toml_under_section(text, f"{Toml.SECTION_TOOL}.{Toml.SECTION_KVGKIT}")
    console.print(text, nl=False)
