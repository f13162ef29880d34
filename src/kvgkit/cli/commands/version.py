# topmark:header:start
#
#   project      : KvgKit
#   file         : version.py
#   file_relpath : src/kvgkit/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""KvgKit `version` command.

Prints the KvgKit version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from kvgkit.cli.cmd_common import get_effective_verbosity
from kvgkit.cli.console import get_console
from kvgkit.constants import KVGKIT_VERSION

if TYPE_CHECKING:
    from kvgkit.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of KvgKit.",
)
def version_command() -> None:
    """Show the current version of KvgKit."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console()

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("KvgKit version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(KVGKIT_VERSION, bold=True)}")
    else:
        console.print(console.styled(KVGKIT_VERSION, bold=True))
