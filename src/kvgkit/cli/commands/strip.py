# topmark:header:start
#
#   project      : KvgKit
#   file         : strip.py
#   file_relpath : src/kvgkit/cli/commands/strip.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""KvgKit `strip` command.

Writes copies of the given files without any ``kvg:*`` attribute and without
the ATTLIST declarations in the heading, for XML tool chains that reject them.
The originals are never modified.

Examples:
    $ kvgkit strip kanji/
    $ kvgkit strip --output-dir /tmp/plain kanji/04e00.svg
"""

from __future__ import annotations

from pathlib import Path
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
from kvgkit.cli.options import paths_argument
from kvgkit.file_resolver import resolve_kanji_files
from kvgkit.strip import encode_stripped

if TYPE_CHECKING:
    from kvgkit.cli.cmd_common import FileResult
    from kvgkit.cli.console import ConsoleLike
    from kvgkit.config.model import Config


@click.command(
    name="strip",
    help="Write copies of KanjiVG files without the kvg:* attributes.",
)
@paths_argument
@click.option(
    "--output-dir",
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory receiving the stripped copies (default: [strip] output_dir).",
)
def strip_command(*, paths: tuple[str, ...], output_dir: Path | None) -> None:
    """Strip each file into the output directory.

    Args:
        paths (tuple[str, ...]): Files and directories; defaults to the corpus directory.
        output_dir (Path | None): Overrides the configured output directory.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console()
    config: Config = get_config(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    target_dir: Path = output_dir if output_dir is not None else config.strip_dir
    files: list[Path] = resolve_kanji_files(paths, config)
    if exit_if_no_files(console, files):
        return

    results: list[FileResult] = []
    for path in files:
        result: FileResult = process_file(path, config, encode_stripped)
        results.append(result)
        report_result_problems(console, result, vlevel)
        if result.error is not None:
            continue
        destination: Path = target_dir / path.name
        write_kanji_bytes(destination, result.output)
        if vlevel > 0:
            console.print(f"{result.name} -> {destination}")

    n_written: int = sum(1 for r in results if r.error is None)
    if vlevel >= 0:
        console.print(f"{n_written} file(s) written to {target_dir}.")

    code: ExitCode = exit_code_for(results, dry_run=False)
    if code != ExitCode.SUCCESS:
        ctx.exit(code)
