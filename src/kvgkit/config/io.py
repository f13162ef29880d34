# topmark:header:start
#
#   project      : KvgKit
#   file         : io.py
#   file_relpath : src/kvgkit/config/io.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""Lightweight TOML I/O helpers for KvgKit configuration.

Pure helpers for reading and writing TOML, kept apart from the config model to
avoid import cycles:

    * `load_defaults_dict` reads the packaged ``kvgkit-default.toml``;
    * `load_toml_dict` reads a user file and never raises;
    * the ``get_*`` helpers extract typed values from parsed tables;
    * `to_toml` renders a mapping, `nest_toml_under_section` wraps an existing
      document under ``[tool.kvgkit]`` without losing its comments.

Parsing and dumping use `toml`; `tomlkit` is only needed where the original
layout of a document must survive.
"""

from __future__ import annotations

from importlib.resources import files
from typing import TYPE_CHECKING, Any, TypeGuard

import toml
import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError
from tomlkit.items import Table

from kvgkit.config.logging import get_logger
from kvgkit.constants import DEFAULT_TOML_CONFIG_NAME, DEFAULT_TOML_CONFIG_PACKAGE

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable
    from pathlib import Path

    from tomlkit.container import Container
    from tomlkit.items import Item

    from kvgkit.config.logging import KvgLogger

logger: KvgLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def is_toml_table(val: Any) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping."""
    return isinstance(val, dict)


def is_any_list(val: Any) -> TypeGuard[list[Any]]:
    """Type guard for a generic list value; item types are not checked."""
    return isinstance(val, list)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table, or an empty dict when missing or not a table.

    Args:
        table (TomlTable): Parent table mapping.
        key (str): Sub-table key.

    Returns:
        TomlTable: The sub-table if present and a mapping, otherwise an empty dict.
    """
    value: Any | None = table.get(key)
    return value if is_toml_table(value) else {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Numbers and booleans are coerced with ``str(...)``. A missing key or a
    value that cannot be coerced yields None.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, bool)):
        return str(value)
    return None


def load_defaults_dict() -> TomlTable:
    """Return the packaged default configuration as a Python dict.

    Raises:
        RuntimeError: If the bundled resource cannot be read or parsed.
    """
    resource: Traversable = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    logger.debug("Loading defaults from package resource: %s", resource)
    try:
        text: str = resource.read_text(encoding="utf8")
    except OSError as exc:
        raise RuntimeError(
            f"Cannot read bundled default config {DEFAULT_TOML_CONFIG_PACKAGE!r}/"
            f"{DEFAULT_TOML_CONFIG_NAME!r}: {exc}"
        ) from exc
    try:
        data: TomlTable = toml.loads(text)
    except toml.TomlDecodeError as exc:
        raise RuntimeError(
            f"Bundled default config {DEFAULT_TOML_CONFIG_PACKAGE!r}/"
            f"{DEFAULT_TOML_CONFIG_NAME!r} is invalid TOML: {exc}"
        ) from exc
    return data


def load_default_toml_text() -> str:
    """Return the packaged default configuration verbatim, comments included."""
    resource: Traversable = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    return resource.read_text(encoding="utf8")


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file.

    Errors are logged and an empty dict is returned on failure.

    Args:
        path (Path): Path to a TOML document (``kvgkit.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.
    """
    try:
        val: TomlTable = toml.load(str(path))
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        val = {}
    except toml.TomlDecodeError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        val = {}
    return val


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string."""
    return toml.dumps(toml_dict)


def nest_toml_under_section(toml_doc: str, section_keys: str) -> str:
    r"""Return ``toml_doc`` nested under a dotted section path.

    ``nest_toml_under_section("a = 1\n", "tool.kvgkit")`` yields a document
    equivalent to::

        [tool.kvgkit]
        a = 1

    Comments before the first key are kept in front of the new table.

    Args:
        toml_doc (str): Original TOML document to nest.
        section_keys (str): Dotted section path such as ``"tool.kvgkit"``.

    Returns:
        str: The nested document.

    Raises:
        ValueError: If ``section_keys`` has no non-empty component.
        RuntimeError: If ``toml_doc`` is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(toml_doc)
    except TomlkitParseError as exc:
        raise RuntimeError(f"Error parsing TOML document: {exc}") from exc

    keys: list[str] = [k for k in section_keys.split(".") if k]
    if not keys:
        raise ValueError("section_keys must contain at least one non-empty component")

    # Leading comments and whitespace, up to the first keyed item.
    start_index: int = len(doc.body)
    for i, (key, _) in enumerate(doc.body):
        if key is not None:
            start_index = i
            break

    new_doc: tomlkit.TOMLDocument = tomlkit.document()
    new_doc.body.extend(doc.body[:start_index])

    current: tomlkit.TOMLDocument | Table = new_doc
    for key in keys:
        if key not in current:
            current.add(key, tomlkit.table(is_super_table=key != keys[-1]))
        next_level: Item | Container = current[key]
        if not isinstance(next_level, Table):
            raise RuntimeError(
                f"Cannot nest configuration under [{section_keys}]: "
                f"intermediate key [{key}] is not a table."
            )
        current = next_level

    for item_key, item_value in doc.items():
        current.add(item_key, item_value)
    return new_doc.as_string()
