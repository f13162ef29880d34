# topmark:header:start
#
#   project      : KvgKit
#   file         : renumber.py
#   file_relpath : src/kvgkit/cli/commands/renumber.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""KvgKit `renumber` command.

Rewrites files in canonical form: identifiers re-derived from the base
identifier, labels renumbered, styles reset, canonical layout. Performs a dry
run by default and writes with ``--apply``.

Examples:
    $ kvgkit renumber kanji/
    $ kvgkit renumber --apply kanji/05b57.svg
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from kvgkit.cli.cmd_common import (
    exit_code_for,
    exit_if_no_files,
    get_config,
    get_effective_verbosity,
    process_file,
    report_result_problems,
)
from kvgkit.cli.console import get_console
from kvgkit.cli.exit_codes import ExitCode
from kvgkit.cli.io import write_kanji_bytes
from kvgkit.cli.options import apply_option, paths_argument
from kvgkit.codec import encode
from kvgkit.config.logging import get_logger
from kvgkit.file_resolver import resolve_kanji_files

if TYPE_CHECKING:
    from pathlib import Path

    from kvgkit.cli.cmd_common import FileResult
    from kvgkit.cli.console import ConsoleLike
    from kvgkit.config.logging import KvgLogger
    from kvgkit.config.model import Config
    from kvgkit.diagnostic.model import DiagnosticLog
    from kvgkit.model import Document

logger: KvgLogger = get_logger(__name__)


def _renumbered(document: Document, diagnostics: DiagnosticLog) -> bytes:
    # encode() runs the full renumbering pass.
    return encode(document, diagnostics=diagnostics)


@click.command(
    name="renumber",
    help="Renumber identifiers and labels (dry-run). Use --apply to rewrite the files.",
)
@paths_argument
@apply_option
def renumber_command(*, paths: tuple[str, ...], apply_changes: bool) -> None:
    """Renumber every file and rewrite the ones that change.

    Args:
        paths (tuple[str, ...]): Files and directories; defaults to the corpus directory.
        apply_changes (bool): Write changed files; otherwise only report them.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console()
    config: Config = get_config(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    files: list[Path] = resolve_kanji_files(paths, config)
    if exit_if_no_files(console, files):
        return

    results: list[FileResult] = []
    for path in files:
        result: FileResult = process_file(path, config, _renumbered)
        results.append(result)
        report_result_problems(console, result, vlevel)
        if not result.changed:
            continue
        if apply_changes:
            write_kanji_bytes(path, result.output)
            console.print(f"{console.styled('renumbered', fg='green')}: {result.name}")
        else:
            console.print(f"{console.styled('would renumber', fg='yellow')}: {result.name}")

    n_changed: int = sum(1 for r in results if r.changed)
    if vlevel >= 0:
        verb: str = "renumbered" if apply_changes else "would be renumbered"
        console.print(f"{n_changed} of {len(results)} file(s) {verb}.")

    code: ExitCode = exit_code_for(results, dry_run=not apply_changes)
    if code != ExitCode.SUCCESS:
        ctx.exit(code)
