# topmark:header:start
#
#   project      : KvgKit
#   file         : __init__.py
#   file_relpath : src/kvgkit/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""KvgKit package.

KvgKit reads, canonicalizes and queries KanjiVG files: SVG documents that
describe the strokes of a character and their structural decomposition.

Typical use::

    from kvgkit import decode, encode, find_first_by_element

    with open("05b57.svg", "rb") as f:
        doc = decode(f.read())
    match = find_first_by_element(doc.base_group, "子")
    canonical: bytes = encode(doc)

The core never touches the file system and takes no configuration; the CLI in
`kvgkit.cli` adds file discovery and configuration on top.
"""

from __future__ import annotations

from kvgkit.codec import HEADING, STRIPPED_HEADING, decode, encode
from kvgkit.core.errors import DecodeError, KvgError, ValidationError
from kvgkit.diagnostic.model import DiagnosticLog, StructuralWarning, WarningKind
from kvgkit.model import Child, Document, Group, NodeKind, Path, Text
from kvgkit.naming import (
    file_codepoint,
    group_id_number,
    hex_id_to_codepoint,
    is_variant_suffix,
    parse_element_id,
    parse_file_name,
    path_id_number,
)
from kvgkit.query import (
    ElementMatch,
    Radicals,
    StrokeTypeMatch,
    classify_radicals,
    effective_element,
    expects_radical,
    find_all_by_element,
    find_first_by_element,
    find_first_by_stroke_type,
    flatten_groups,
    flatten_paths,
    groups_by_element,
)
from kvgkit.renumber import BaseId, get_base, renumber, set_base
from kvgkit.strip import encode_stripped, strip_document

__all__ = [
    "HEADING",
    "STRIPPED_HEADING",
    "BaseId",
    "Child",
    "DecodeError",
    "DiagnosticLog",
    "Document",
    "ElementMatch",
    "Group",
    "KvgError",
    "NodeKind",
    "Path",
    "Radicals",
    "StrokeTypeMatch",
    "StructuralWarning",
    "Text",
    "ValidationError",
    "WarningKind",
    "classify_radicals",
    "decode",
    "effective_element",
    "encode",
    "encode_stripped",
    "expects_radical",
    "file_codepoint",
    "find_all_by_element",
    "find_first_by_element",
    "find_first_by_stroke_type",
    "flatten_groups",
    "flatten_paths",
    "get_base",
    "group_id_number",
    "groups_by_element",
    "hex_id_to_codepoint",
    "is_variant_suffix",
    "parse_element_id",
    "parse_file_name",
    "path_id_number",
    "renumber",
    "set_base",
    "strip_document",
]
