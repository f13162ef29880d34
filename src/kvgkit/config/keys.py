# topmark:header:start
#
#   project      : KvgKit
#   file         : keys.py
#   file_relpath : src/kvgkit/config/keys.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""Canonical TOML table and key names for KvgKit configuration.

These strings are the external configuration API as it appears in
``kvgkit.toml`` and in ``[tool.kvgkit]`` inside ``pyproject.toml``. Renaming
one is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML table names and keys used by KvgKit configuration.

    The ordering of the keys mirrors ``kvgkit-default.toml``.
    """

    # [tool.kvgkit] in pyproject.toml
    SECTION_TOOL: Final[str] = "tool"
    SECTION_KVGKIT: Final[str] = "kvgkit"

    # [corpus]
    SECTION_CORPUS: Final[str] = "corpus"

    KEY_KANJI_DIR: Final[str] = "kanji_dir"
    KEY_FILE_EXTENSION: Final[str] = "file_extension"
    KEY_BACKUP_PATTERNS: Final[str] = "backup_patterns"

    # [strip]
    SECTION_STRIP: Final[str] = "strip"

    KEY_OUTPUT_DIR: Final[str] = "output_dir"
