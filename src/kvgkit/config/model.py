# topmark:header:start
#
#   project      : KvgKit
#   file         : model.py
#   file_relpath : src/kvgkit/config/model.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""Runtime configuration for the KvgKit collaborators.

The core (codec, renumbering, queries) takes no configuration: everything it
needs is passed explicitly. `Config` only serves the file-system side: where
the corpus lives, which files to pick up and where stripped copies go.

Resolution:
    1. start from the packaged defaults (`Config.from_defaults`);
    2. overlay the first config file found by `discover_config_file`, or the
       file given explicitly (``--config``);
    3. relative paths are resolved against the directory of the file that
       declared them.

Malformed values never abort loading: they are recorded in
`Config.diagnostics` and the previous value is kept.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

from kvgkit.config.io import (
    get_string_value_or_none,
    get_table_value,
    is_any_list,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
)
from kvgkit.config.keys import Toml
from kvgkit.config.logging import get_logger
from kvgkit.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME
from kvgkit.diagnostic.model import Diagnostic, DiagnosticLevel

if TYPE_CHECKING:
    from kvgkit.config.io import TomlTable
    from kvgkit.config.logging import KvgLogger

logger: KvgLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable configuration snapshot.

    Attributes:
        kanji_dir (Path | None): Directory holding the KanjiVG files; None means
            the current working directory.
        file_extension (str): Extension of KanjiVG files (``.svg``).
        backup_patterns (tuple[str, ...]): gitwildmatch patterns of editor backup
            and lock files to skip.
        strip_dir (Path): Output directory of ``kvgkit strip``.
        config_files (tuple[Path, ...]): Files the values were read from.
        diagnostics (tuple[Diagnostic, ...]): Problems met while loading.
    """

    kanji_dir: Path | None = None
    file_extension: str = ".svg"
    backup_patterns: tuple[str, ...] = (".#*", "\\#*", "*~")
    strip_dir: Path = Path("stripped")
    config_files: tuple[Path, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = field(default=(), compare=False)

    @property
    def corpus_root(self) -> Path:
        """The directory KanjiVG file names are relative to."""
        return self.kanji_dir if self.kanji_dir is not None else Path.cwd()

    @classmethod
    @functools.cache
    def from_defaults(cls) -> Config:
        """Return the configuration described by the packaged defaults."""
        return cls().merge_toml_dict(load_defaults_dict(), base=None)

    @classmethod
    def from_toml_file(cls, path: Path, *, base: Config | None = None) -> Config:
        """Overlay the settings of ``path`` on ``base`` (the defaults by default).

        ``pyproject.toml`` files contribute their ``[tool.kvgkit]`` table only.

        Args:
            path (Path): A ``kvgkit.toml`` or ``pyproject.toml`` file.
            base (Config | None): Configuration to overlay.

        Returns:
            Config: The merged configuration, with ``path`` appended to
                ``config_files``.
        """
        logger.debug("Loading config from %s", path)
        start: Config = base if base is not None else cls.from_defaults()
        data: TomlTable = extract_kvgkit_table(path, load_toml_dict(path))
        merged: Config = start.merge_toml_dict(data, base=path.resolve().parent)
        return replace(merged, config_files=(*merged.config_files, path))

    def merge_toml_dict(self, data: TomlTable, *, base: Path | None) -> Config:
        """Return a copy of this config updated from a parsed ``kvgkit`` table.

        Args:
            data (TomlTable): The ``kvgkit.toml`` document or ``[tool.kvgkit]`` table.
            base (Path | None): Directory that relative paths are resolved against;
                None leaves them relative.

        Returns:
            Config: The updated configuration.
        """
        diagnostics: list[Diagnostic] = list(self.diagnostics)

        def warn(message: str) -> None:
            logger.warning("%s", message)
            diagnostics.append(Diagnostic(DiagnosticLevel.WARNING, message))

        def as_path(raw: str) -> Path:
            p = Path(raw).expanduser()
            if base is not None and not p.is_absolute():
                p = base / p
            return p

        corpus: TomlTable = get_table_value(data, Toml.SECTION_CORPUS)
        strip: TomlTable = get_table_value(data, Toml.SECTION_STRIP)

        kanji_dir: Path | None = self.kanji_dir
        raw_dir: str | None = get_string_value_or_none(corpus, Toml.KEY_KANJI_DIR)
        if raw_dir is not None:
            kanji_dir = as_path(raw_dir) if raw_dir else None

        file_extension: str = self.file_extension
        raw_ext: str | None = get_string_value_or_none(corpus, Toml.KEY_FILE_EXTENSION)
        if raw_ext is not None:
            if raw_ext.startswith(".") and len(raw_ext) > 1:
                file_extension = raw_ext
            else:
                warn(f"Ignoring invalid {Toml.KEY_FILE_EXTENSION} {raw_ext!r}: must start with '.'")

        backup_patterns: tuple[str, ...] = self.backup_patterns
        if Toml.KEY_BACKUP_PATTERNS in corpus:
            raw_patterns: Any = corpus[Toml.KEY_BACKUP_PATTERNS]
            if is_any_list(raw_patterns) and all(isinstance(p, str) for p in raw_patterns):
                backup_patterns = tuple(raw_patterns)
            else:
                warn(f"Ignoring {Toml.KEY_BACKUP_PATTERNS}: expected a list of strings")

        strip_dir: Path = self.strip_dir
        raw_out: str | None = get_string_value_or_none(strip, Toml.KEY_OUTPUT_DIR)
        if raw_out is not None:
            if raw_out:
                strip_dir = as_path(raw_out)
            else:
                warn(f"Ignoring empty [{Toml.SECTION_STRIP}] {Toml.KEY_OUTPUT_DIR}")

        return replace(
            self,
            kanji_dir=kanji_dir,
            file_extension=file_extension,
            backup_patterns=backup_patterns,
            strip_dir=strip_dir,
            diagnostics=tuple(diagnostics),
        )

    def to_toml_dict(self) -> TomlTable:
        """Render this configuration as a ``kvgkit.toml`` mapping."""
        return {
            Toml.SECTION_CORPUS: {
                Toml.KEY_KANJI_DIR: str(self.kanji_dir) if self.kanji_dir is not None else "",
                Toml.KEY_FILE_EXTENSION: self.file_extension,
                Toml.KEY_BACKUP_PATTERNS: list(self.backup_patterns),
            },
            Toml.SECTION_STRIP: {
                Toml.KEY_OUTPUT_DIR: str(self.strip_dir),
            },
        }

    def to_toml(self) -> str:
        """Render this configuration as TOML text."""
        return to_toml(self.to_toml_dict())


def extract_kvgkit_table(path: Path, data: TomlTable) -> TomlTable:
    """Return the KvgKit settings of a parsed config file.

    For ``pyproject.toml`` that is the ``[tool.kvgkit]`` table (empty if
    missing); any other file is taken whole.
    """
    if path.name == PYPROJECT_FILE_NAME:
        tool: TomlTable = get_table_value(data, Toml.SECTION_TOOL)
        return get_table_value(tool, Toml.SECTION_KVGKIT)
    return data


def discover_config_file(start: Path) -> Path | None:
    """Find the nearest config file, walking upward from ``start``.

    In each directory ``kvgkit.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it has a ``[tool.kvgkit]`` table.

    Args:
        start (Path): File or directory where the search begins.

    Returns:
        Path | None: The first config file found, or None.
    """
    cur: Path = start.resolve()
    if cur.is_file():
        cur = cur.parent
    while True:
        candidate: Path = cur / CONFIG_FILE_NAME
        if candidate.is_file():
            logger.debug("Discovered config file: %s", candidate)
            return candidate
        pyproject: Path = cur / PYPROJECT_FILE_NAME
        if pyproject.is_file() and extract_kvgkit_table(pyproject, load_toml_dict(pyproject)):
            logger.debug("Discovered config table in: %s", pyproject)
            return pyproject
        parent: Path = cur.parent
        if parent == cur:
            return None
        cur = parent


def load_config(path: Path | None = None, *, start: Path | None = None) -> Config:
    """Resolve the effective configuration.

    Args:
        path (Path | None): Explicit config file; skips discovery.
        start (Path | None): Where discovery begins (current directory by default).

    Returns:
        Config: Defaults overlaid with the explicit or discovered config file.
    """
    if path is None:
        path = discover_config_file(start if start is not None else Path.cwd())
    if path is None:
        logger.debug("No config file found, using defaults")
        return Config.from_defaults()
    return Config.from_toml_file(path)
