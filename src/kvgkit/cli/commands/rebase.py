# topmark:header:start
#
#   project      : KvgKit
#   file         : rebase.py
#   file_relpath : src/kvgkit/cli/commands/rebase.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""KvgKit `rebase` command.

Gives a file a new base identifier, e.g. after copying ``05b57.svg`` to
``05b57-Kaisho.svg``. Every identifier in the file is derived again from the
new base. Performs a dry run by default and writes with ``--apply``.

Examples:
    $ kvgkit rebase --apply 05b57-Kaisho.svg kvg:05b57-Kaisho
    $ kvgkit rebase 05b57-Kaisho.svg     # base taken from the file name
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from kvgkit.cli.cmd_common import (
    get_config,
    get_effective_verbosity,
    process_file,
    report_result_problems,
)
from kvgkit.cli.console import get_console
from kvgkit.cli.errors import KvgDecodeError, KvgUsageError
from kvgkit.cli.exit_codes import ExitCode
from kvgkit.cli.io import write_kanji_bytes
from kvgkit.cli.options import apply_option
from kvgkit.codec import encode
from kvgkit.core.errors import ValidationError
from kvgkit.naming import base_tail, parse_file_name
from kvgkit.renumber import get_base, set_base
from kvgkit.utils.diff import make_patch, render_patch

if TYPE_CHECKING:
    from kvgkit.cli.cmd_common import FileResult
    from kvgkit.cli.console import ConsoleLike
    from kvgkit.config.model import Config
    from kvgkit.diagnostic.model import DiagnosticLog
    from kvgkit.model import Document
    from kvgkit.naming import FileName


def _base_from_file_name(path: Path) -> str:
    parsed: FileName | None = parse_file_name(path.name)
    if parsed is None:
        raise KvgUsageError(
            f"Cannot derive a base identifier from {path.name!r}; pass BASE explicitly."
        )
    return parsed.base


@click.command(
    name="rebase",
    help="Set a new base identifier and renumber the file (dry-run). Use --apply to write.",
)
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("base", required=False)
@apply_option
@click.option("--diff", "show_diff", is_flag=True, help="Show a unified diff of the change.")
def rebase_command(
    *,
    file: Path,
    base: str | None,
    apply_changes: bool,
    show_diff: bool,
) -> None:
    """Rebase FILE onto BASE (default: the base implied by the file name).

    Args:
        file (Path): The KanjiVG file.
        base (str | None): New base identifier, with the ``kvg:`` prefix.
        apply_changes (bool): Write the result back to ``file``.
        show_diff (bool): Print a colorized unified diff.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console()
    config: Config = get_config(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    new_base: str = base if base is not None else _base_from_file_name(file)
    try:
        base_tail(new_base)
    except ValidationError as exc:
        raise KvgUsageError(str(exc)) from exc

    old_base: list[str] = []

    def _rebased(document: Document, diagnostics: DiagnosticLog) -> bytes:
        old_base.append(get_base(document).prefixed)
        set_base(document, new_base, diagnostics)
        return encode(document, diagnostics=diagnostics)

    result: FileResult = process_file(file, config, _rebased)
    if result.error is not None:
        raise KvgDecodeError(f"{result.name}: {result.error}")
    report_result_problems(console, result, vlevel)

    if not result.changed:
        console.print(f"{result.name}: already based on {new_base}")
        return

    if show_diff:
        patch: list[str] = make_patch(result.original, result.output, result.name)
        console.print(render_patch(patch), nl=False)
    if apply_changes:
        write_kanji_bytes(file, result.output)
        console.print(f"{result.name}: {old_base[0]} -> {new_base}")
        return
    console.print(f"{result.name}: would rebase {old_base[0]} -> {new_base}")
    ctx.exit(ExitCode.WOULD_CHANGE)
