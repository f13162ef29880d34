# topmark:header:start
#
#   project      : KvgKit
#   file         : strip.py
#   file_relpath : src/kvgkit/strip.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""Remove the KanjiVG-specific attributes from a document.

Some XML tool chains reject the ``kvg:*`` attributes and the ATTLIST
declarations of the KanjiVG heading. A stripped document keeps the geometry
(paths, labels, identifiers, styles) and drops everything else; it is written
with `kvgkit.codec.heading.STRIPPED_HEADING`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kvgkit.codec.encoder import encode
from kvgkit.codec.heading import STRIPPED_HEADING
from kvgkit.config.logging import get_logger
from kvgkit.query import flatten_groups, flatten_paths

if TYPE_CHECKING:
    from kvgkit.config.logging import KvgLogger
    from kvgkit.diagnostic.model import DiagnosticLog
    from kvgkit.model import Document, Group, Path

logger: KvgLogger = get_logger(__name__)


def strip_document(document: Document) -> None:
    """Clear every ``kvg:*`` attribute of the base subtree in place.

    Raises:
        ValidationError: If the document has no base group.
    """
    base: Group = document.base_group
    groups: list[Group] = flatten_groups(base)
    paths: list[Path] = flatten_paths(base)
    for g in groups:
        g.element = ""
        g.part = ""
        g.variant = False
        g.number = ""
        g.original = ""
        g.partial = False
        g.trad_form = False
        g.position = ""
        g.radical = ""
        g.phon = ""
        g.radical_form = False
    for p in paths:
        p.stroke_type = ""
    logger.debug("Stripped %d group(s) and %d path(s)", len(groups), len(paths))


def encode_stripped(document: Document, diagnostics: DiagnosticLog | None = None) -> bytes:
    """Strip ``document`` in place and encode it with the stripped heading."""
    strip_document(document)
    return encode(document, heading=STRIPPED_HEADING, diagnostics=diagnostics)
