# topmark:header:start
#
#   project      : KvgKit
#   file         : naming.py
#   file_relpath : src/kvgkit/naming.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""Identifier and file name grammar of the KanjiVG corpus.

Every KanjiVG file is named after the code point of its character, written as
five lowercase hexadecimal digits, optionally followed by ``-`` and a variant
suffix, then ``.svg``:

    04e00.svg
    05b57-Kaisho.svg

Identifiers inside a file all derive from its *base* identifier:

    base      kvg:<token>              e.g. kvg:05b57, kvg:05b57-Kaisho
    group     <base>-g<n>              e.g. kvg:05b57-g1
    path      <base>-s<n>              e.g. kvg:05b57-s3

The building blocks (`HEX_ID_PATTERN`, `VARIANT_SUFFIXES`, `FILE_EXTENSION`,
the id markers) are defined once here and every regular expression of this
module is assembled from them, so the set of recognized variant suffixes has a
single source of truth.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, Literal

from kvgkit.constants import GROUP_ID_MARKER, KVG_PREFIX, PATH_ID_MARKER
from kvgkit.core.errors import ValidationError

HEX_ID_DIGITS: Final[int] = 5
HEX_ID_PATTERN: Final[str] = f"[0-9a-f]{{{HEX_ID_DIGITS}}}"

FILE_EXTENSION: Final[str] = ".svg"
VARIANT_SEPARATOR: Final[str] = "-"

# Recognized variant suffixes, in no particular order.
VARIANT_SUFFIXES: Final[frozenset[str]] = frozenset(
    {
        "Dg3",
        "DgLst",
        "HzFst",
        "HzFstLeRi",
        "HzFstRiLe",
        "HzFstVtLst",
        "HzLst",
        "Hyougai",
        "Insatsu",
        "Jinmei",
        "Kaisho",
        "LeFst",
        "MdFst",
        "MdFst2",
        "MdLst",
        "MidFst",
        "NoDot",
        "RiLe",
        "Ten3",
        "TenFst",
        "TenLst",
        "Vt4",
        "Vt6",
        "VtFst",
        "VtFstRiLe",
        "VtLst",
    }
)


def _alternation(tokens: frozenset[str]) -> str:
    # Longest first so that e.g. "HzFstLeRi" is never cut short at "HzFst".
    return "|".join(re.escape(t) for t in sorted(tokens, key=lambda t: (-len(t), t)))


_VARIANT_GROUP: Final[str] = f"(?P<variant>{_alternation(VARIANT_SUFFIXES)})"

FILE_NAME_RE: Final[re.Pattern[str]] = re.compile(
    rf"(?:.*/)?(?P<id>(?P<hex>{HEX_ID_PATTERN})"
    rf"(?:{re.escape(VARIANT_SEPARATOR)}{_VARIANT_GROUP})?)"
    rf"(?P<ext>{re.escape(FILE_EXTENSION)})"
)
# Lenient form: any suffix after the hex id.
FILE_CODEPOINT_RE: Final[re.Pattern[str]] = re.compile(
    rf".*(?P<hex>{HEX_ID_PATTERN})(?:{re.escape(VARIANT_SEPARATOR)}.+)?{re.escape(FILE_EXTENSION)}"
)
ELEMENT_ID_RE: Final[re.Pattern[str]] = re.compile(
    rf"{re.escape(KVG_PREFIX)}(?P<hex>{HEX_ID_PATTERN})(?P<tail>.*)"
    rf"(?P<marker>{re.escape(GROUP_ID_MARKER)}|{re.escape(PATH_ID_MARKER)})(?P<number>[0-9]+)"
)
# Editor backups and lock files found next to the corpus files.
BACKUP_RE: Final[re.Pattern[str]] = re.compile(r"/\.#|/#|~$")


@dataclass(frozen=True)
class FileName:
    """The parts of a KanjiVG file name.

    Attributes:
        id (str): Hex id plus variant suffix, e.g. ``05b57-Kaisho``.
        hex_id (str): The five hex digits.
        codepoint (int): The character code point.
        variant (str | None): The variant suffix, if any.
        extension (str): The file extension (``.svg``).
    """

    id: str
    hex_id: str
    codepoint: int
    variant: str | None
    extension: str

    @property
    def character(self) -> str:
        """The character the file describes."""
        return chr(self.codepoint)

    @property
    def base(self) -> str:
        """The base identifier used inside the file, e.g. ``kvg:05b57-Kaisho``."""
        return KVG_PREFIX + self.id


@dataclass(frozen=True)
class ElementId:
    """The parts of a group or path identifier."""

    hex_id: str
    tail: str
    kind: Literal["g", "s"]
    number: int

    @property
    def base(self) -> str:
        """The base identifier the element id was derived from."""
        return f"{KVG_PREFIX}{self.hex_id}{self.tail}"


def is_variant_suffix(token: str) -> bool:
    """Return True if ``token`` is one of the recognized variant suffixes."""
    return token in VARIANT_SUFFIXES


def hex_id_to_codepoint(hex_id: str) -> int:
    """Convert a five-digit hex id to a code point.

    Raises:
        ValidationError: If ``hex_id`` is not five lowercase hex digits.
    """
    if re.fullmatch(HEX_ID_PATTERN, hex_id) is None:
        raise ValidationError(f"Not a {HEX_ID_DIGITS}-digit hex id: {hex_id!r}")
    return int(hex_id, 16)


def codepoint_to_hex_id(codepoint: int) -> str:
    """Format a code point the way KanjiVG file names do (``04e00``)."""
    return f"{codepoint:0{HEX_ID_DIGITS}x}"


def parse_file_name(name: str) -> FileName | None:
    """Split a KanjiVG file name into its parts.

    Leading directories are ignored. Names whose suffix is not a recognized
    variant do not follow the grammar and yield None.

    Args:
        name (str): File name or path, with forward slashes.

    Returns:
        FileName | None: The parts, or None when ``name`` is not a KanjiVG file name.
    """
    m: re.Match[str] | None = FILE_NAME_RE.fullmatch(name)
    if m is None:
        return None
    return FileName(
        id=m.group("id"),
        hex_id=m.group("hex"),
        codepoint=int(m.group("hex"), 16),
        variant=m.group("variant"),
        extension=m.group("ext"),
    )


def file_codepoint(name: str) -> int:
    """Return the code point a file is named after, whatever its suffix.

    Raises:
        ValidationError: If no hex id precedes the ``.svg`` extension.
    """
    m: re.Match[str] | None = FILE_CODEPOINT_RE.fullmatch(name)
    if m is None:
        raise ValidationError(f"No KanjiVG hex id in file name {name!r}")
    return int(m.group("hex"), 16)


def is_backup_file(path: str) -> bool:
    """Return True for editor backup and lock files (``#x#``, ``.#x``, ``x~``)."""
    return BACKUP_RE.search(path) is not None


def parse_element_id(element_id: str) -> ElementId | None:
    """Decompose a group or path identifier.

    Returns:
        ElementId | None: The parts, or None if ``element_id`` is neither a group
            nor a path identifier.
    """
    m: re.Match[str] | None = ELEMENT_ID_RE.fullmatch(element_id)
    if m is None:
        return None
    kind: Literal["g", "s"] = "g" if m.group("marker") == GROUP_ID_MARKER else "s"
    return ElementId(
        hex_id=m.group("hex"),
        tail=m.group("tail"),
        kind=kind,
        number=int(m.group("number")),
    )


def _id_number(element_id: str, kind: Literal["g", "s"]) -> int:
    parsed: ElementId | None = parse_element_id(element_id)
    if parsed is None or parsed.kind != kind:
        what = "group" if kind == "g" else "path"
        raise ValidationError(f"Not a {what} identifier: {element_id!r}")
    return parsed.number


def path_id_number(element_id: str) -> int:
    """Return ``n`` from a path identifier ``<base>-s<n>``.

    Raises:
        ValidationError: If ``element_id`` is not a path identifier.
    """
    return _id_number(element_id, "s")


def group_id_number(element_id: str) -> int:
    """Return ``n`` from a group identifier ``<base>-g<n>``.

    Raises:
        ValidationError: If ``element_id`` is not a group identifier.
    """
    return _id_number(element_id, "g")


def base_tail(base: str) -> str:
    """Return ``base`` without its ``kvg:`` prefix.

    Raises:
        ValidationError: If ``base`` does not start with the prefix.
    """
    if not base.startswith(KVG_PREFIX):
        raise ValidationError(f"Base name {base!r} does not start with {KVG_PREFIX!r}")
    return base[len(KVG_PREFIX) :]
