# topmark:header:start
#
#   project      : KvgKit
#   file         : cmd_common.py
#   file_relpath : src/kvgkit/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small helpers shared by the commands: access to the per-invocation state on
the Click context, the decode/transform/encode step applied to each file, and
the exit code policy. Output wording is left to the commands.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import click

from kvgkit.cli.exit_codes import ExitCode
from kvgkit.cli.io import read_kanji_bytes
from kvgkit.codec import decode
from kvgkit.config.logging import get_logger
from kvgkit.core.errors import DecodeError, ValidationError
from kvgkit.diagnostic.model import DiagnosticLog, StructuralWarning
from kvgkit.file_resolver import relative_name

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from pathlib import Path

    from kvgkit.cli.console import ConsoleLike
    from kvgkit.config.logging import KvgLogger
    from kvgkit.config.model import Config
    from kvgkit.model import Document

logger: KvgLogger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored by the group (0 when unset)."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return int(obj.get("verbosity_level", 0))


def get_config(ctx: click.Context) -> Config:
    """Return the configuration loaded by the group callback."""
    ctx.ensure_object(dict)
    config: Config = ctx.obj["config"]
    return config


@dataclass
class FileResult:
    """Outcome of running one file through a transformation.

    Attributes:
        path (Path): The file.
        name (str): ``path`` relative to the corpus root, for display.
        original (bytes): Contents read from disk.
        output (bytes): Encoded result; empty when ``error`` is set.
        error (str | None): Why the file could not be processed.
        diagnostics (DiagnosticLog): Structural warnings met on the way.
    """

    path: Path
    name: str
    original: bytes = b""
    output: bytes = b""
    error: str | None = None
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    @property
    def changed(self) -> bool:
        """True when the encoded output differs from the file contents."""
        return self.error is None and self.output != self.original


def process_file(
    path: Path,
    config: Config,
    transform: Callable[[Document, DiagnosticLog], bytes],
) -> FileResult:
    """Decode ``path`` and encode it again through ``transform``.

    Decode and validation errors are captured in the result so that a batch
    can continue; I/O errors propagate as CLI errors.

    Args:
        path (Path): The file to process.
        config (Config): Supplies the corpus root for display names.
        transform (Callable[[Document, DiagnosticLog], bytes]): Mutates the decoded
            document as needed and returns the bytes to compare or write.

    Returns:
        FileResult: The outcome.
    """
    result = FileResult(path=path, name=relative_name(path, config))
    result.original = read_kanji_bytes(path)
    try:
        document: Document = decode(result.original, result.diagnostics)
        result.output = transform(document, result.diagnostics)
    except (DecodeError, ValidationError) as exc:
        logger.debug("Failed to process %s: %s", path, exc)
        result.error = str(exc)
    return result


def report_result_problems(console: ConsoleLike, result: FileResult, verbosity: int) -> None:
    """Print the error of ``result`` and, when verbose, its structural warnings."""
    if result.error is not None:
        console.error(f"{result.name}: {result.error}")
    if verbosity < 1:
        return
    for diagnostic in result.diagnostics:
        if isinstance(diagnostic, StructuralWarning):
            console.warn(f"{result.name}: [{diagnostic.kind.value}] {diagnostic.message}")


def exit_code_for(results: Sequence[FileResult], *, dry_run: bool) -> ExitCode:
    """Apply the exit code policy shared by the batch commands.

    A file that failed to decode wins over everything (`ExitCode.DATA_ERROR`);
    otherwise a dry run that found changes yields `ExitCode.WOULD_CHANGE`.
    """
    if any(r.error is not None for r in results):
        return ExitCode.DATA_ERROR
    if dry_run and any(r.changed for r in results):
        return ExitCode.WOULD_CHANGE
    return ExitCode.SUCCESS


def exit_if_no_files(console: ConsoleLike, files: Sequence[Path]) -> bool:
    """Print a hint and return True when there is nothing to process."""
    if files:
        return False
    console.print(console.styled("No KanjiVG files to process.", fg="blue"))
    return True
