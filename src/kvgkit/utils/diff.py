# topmark:header:start
#
#   project      : KvgKit
#   file         : diff.py
#   file_relpath : src/kvgkit/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""Unified diffs between a file and its canonical encoding.

`make_patch` produces the diff lines, `render_patch` colorizes them for the
``check --diff`` preview.
"""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

from kvgkit.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from kvgkit.config.logging import KvgLogger

logger: KvgLogger = get_logger(__name__)


def make_patch(before: bytes, after: bytes, name: str) -> list[str]:
    """Return the unified diff turning ``before`` into ``after``.

    Both sides are decoded as UTF-8 (undecodable bytes are replaced).

    Args:
        before (bytes): Current file contents.
        after (bytes): Canonical contents.
        name (str): File name shown in the ``---``/``+++`` lines.

    Returns:
        list[str]: Diff lines including their line endings; empty when equal.
    """
    a: list[str] = before.decode("utf-8", errors="replace").splitlines(keepends=True)
    b: list[str] = after.decode("utf-8", errors="replace").splitlines(keepends=True)
    patch: list[str] = list(
        difflib.unified_diff(a, b, fromfile=f"{name} (current)", tofile=f"{name} (canonical)")
    )
    logger.trace("Patch for %s: %d line(s)", name, len(patch))
    return patch


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as either a sequence of lines or a single string.
        show_line_numbers: Whether to prefix output with line numbers.

    Returns:
        The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = [line.rstrip("\n") for line in patch]

    def process_line(line: str) -> str:
        # Show tabs and carriage returns explicitly.
        content = line.replace("\r", "\\r").replace("\t", "\\t")
        if not line:
            return content
        match line[0]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.white(content)

    if show_line_numbers:
        return "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{process_line(line)}\n" for line in lines)
