# topmark:header:start
#
#   project      : KvgKit
#   file         : file_resolver.py
#   file_relpath : src/kvgkit/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""Resolve the KanjiVG files a command should process.

Positional arguments are expanded (files kept as-is, directories walked
recursively), restricted to the configured extension, and filtered against
the editor backup patterns. With no arguments the whole corpus directory is
used. The result is sorted for deterministic output.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from kvgkit.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from kvgkit.config.logging import KvgLogger
    from kvgkit.config.model import Config

logger: KvgLogger = get_logger(__name__)


def backup_spec(config: Config) -> PathSpec:
    """Compile the configured backup patterns into a gitwildmatch spec."""
    return PathSpec.from_lines(GitWildMatchPattern, list(config.backup_patterns))


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or the path itself as fallback) for matching."""
    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def resolve_kanji_files(paths: Iterable[str | Path], config: Config) -> list[Path]:
    """Return the KanjiVG files designated by ``paths``.

    Args:
        paths (Iterable[str | Path]): Files and directories; empty means the
            configured corpus directory.
        config (Config): Supplies the corpus root, extension and backup patterns.

    Returns:
        list[Path]: Sorted, de-duplicated list of existing files.
    """
    inputs: list[Path] = [Path(p) for p in paths] or [config.corpus_root]
    spec: PathSpec = backup_spec(config)
    logger.debug(
        "Resolving %d input path(s), backup patterns: %s", len(inputs), config.backup_patterns
    )

    candidates: set[Path] = set()
    for p in inputs:
        if p.is_dir():
            for f in p.rglob(f"*{config.file_extension}"):
                if f.is_file() and not spec.match_file(_rel_for_match(f, p)):
                    candidates.add(f)
                else:
                    logger.trace("Skipping %s", f)
        elif p.is_file():
            # Explicit files are kept unless they look like editor backups.
            if spec.match_file(p.name):
                logger.info("Skipping editor backup file: %s", p)
            else:
                candidates.add(p)
        else:
            logger.warning("No such file or directory: %s", p)

    result: list[Path] = sorted(candidates)
    logger.debug("Resolved %d file(s)", len(result))
    return result


def relative_name(path: Path, config: Config) -> str:
    """Return ``path`` relative to the corpus root, or unchanged if outside it."""
    return _rel_for_match(path, config.corpus_root)
