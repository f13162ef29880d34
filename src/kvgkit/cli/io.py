# topmark:header:start
#
#   project      : KvgKit
#   file         : io.py
#   file_relpath : src/kvgkit/cli/io.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""File reading and writing for CLI commands.

The core never touches the file system; commands go through these helpers,
which turn `OSError` into CLI errors with the matching exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kvgkit.cli.errors import KvgFileNotFoundError, KvgIOError
from kvgkit.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from kvgkit.config.logging import KvgLogger

logger: KvgLogger = get_logger(__name__)


def read_kanji_bytes(path: Path) -> bytes:
    """Return the raw contents of ``path``.

    Raises:
        KvgFileNotFoundError: If ``path`` does not exist.
        KvgIOError: On any other read error.
    """
    try:
        return path.read_bytes()
    except FileNotFoundError as exc:
        raise KvgFileNotFoundError(f"No such file: {path}") from exc
    except OSError as exc:
        raise KvgIOError(f"Cannot read {path}: {exc}") from exc


def write_kanji_bytes(path: Path, data: bytes) -> None:
    """Write ``data`` to ``path``, creating missing parent directories.

    Raises:
        KvgIOError: If the file or its directory cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as exc:
        raise KvgIOError(f"Cannot write {path}: {exc}") from exc
    logger.info("Wrote %s (%d bytes)", path, len(data))
