# topmark:header:start
#
#   project      : KvgKit
#   file         : check.py
#   file_relpath : src/kvgkit/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""KvgKit `check` command.

Reports the files whose bytes differ from their canonical encoding (the
output of ``decode`` followed by ``encode``). Nothing is written.

Examples:
    $ kvgkit check kanji/
    $ kvgkit check --diff kanji/05b57.svg
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
from kvgkit.cli.options import paths_argument
from kvgkit.codec import encode
from kvgkit.file_resolver import resolve_kanji_files
from kvgkit.utils.diff import make_patch, render_patch

if TYPE_CHECKING:
    from pathlib import Path

    from kvgkit.cli.cmd_common import FileResult
    from kvgkit.cli.console import ConsoleLike
    from kvgkit.config.model import Config
    from kvgkit.diagnostic.model import DiagnosticLog
    from kvgkit.model import Document


def _canonical(document: Document, diagnostics: DiagnosticLog) -> bytes:
    return encode(document, diagnostics=diagnostics)


@click.command(
    name="check",
    help="Report KanjiVG files that are not in canonical form.",
    epilog="""\
\b
Exit status:
  0  every file is canonical
  2  some files would change (run `kvgkit renumber --apply`)
  65 some files could not be decoded
""",
)
@paths_argument
@click.option("--diff", "show_diff", is_flag=True, help="Show a unified diff for each file.")
def check_command(*, paths: tuple[str, ...], show_diff: bool) -> None:
    """Compare each file with its canonical encoding.

    Args:
        paths (tuple[str, ...]): Files and directories; defaults to the corpus directory.
        show_diff (bool): Print a colorized unified diff for files that would change.
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
        result: FileResult = process_file(path, config, _canonical)
        results.append(result)
        report_result_problems(console, result, vlevel)
        if result.changed:
            console.print(f"{console.styled('would change', fg='yellow')}: {result.name}")
            if show_diff:
                patch: list[str] = make_patch(result.original, result.output, result.name)
                # Click strips the ANSI styling when color is off.
                console.print(render_patch(patch), nl=False)
        elif result.error is None and vlevel > 0:
            console.print(f"{console.styled('ok', fg='green')}: {result.name}")

    n_changed: int = sum(1 for r in results if r.changed)
    n_failed: int = sum(1 for r in results if r.error is not None)
    if vlevel >= 0:
        console.print(
            f"{len(results)} file(s) checked, {n_changed} would change, {n_failed} failed."
        )

    code: ExitCode = exit_code_for(results, dry_run=True)
    if code != ExitCode.SUCCESS:
        ctx.exit(code)
