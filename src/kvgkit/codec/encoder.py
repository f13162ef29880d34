# topmark:header:start
#
#   project      : KvgKit
#   file         : encoder.py
#   file_relpath : src/kvgkit/codec/encoder.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""Encode a `kvgkit.model.Document` into canonical KanjiVG bytes.

The corpus is kept under version control, so the byte layout matters. The
encoder reproduces it in three steps:

1. renumber the document (`kvgkit.renumber.renumber`) so identifiers, labels
   and styles are consistent with the base identifier;
2. render the tree with generic indentation, one tab per nesting level;
3. collapse the leading tabs in front of ``<g``, ``</g>``, ``<path`` and
   ``<text`` (see `INDENT_COLLAPSE`), which yields the corpus convention:
   top-level and base groups flush left, strokes and labels one tab in.

The heading is passed explicitly and defaults to `kvgkit.codec.heading.HEADING`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from kvgkit.codec.heading import HEADING
from kvgkit.codec.schema import (
    GROUP_ATTRIBUTES,
    PATH_ATTRIBUTES,
    SVG_ATTRIBUTES,
    TEXT_ATTRIBUTES,
    AttributeSpec,
)
from kvgkit.config.logging import get_logger
from kvgkit.constants import FLAG_TRUE
from kvgkit.model import Group, Path, Text
from kvgkit.renumber import renumber

if TYPE_CHECKING:
    from kvgkit.config.logging import KvgLogger
    from kvgkit.diagnostic.model import DiagnosticLog
    from kvgkit.model import Document

logger: KvgLogger = get_logger(__name__)

INDENT: Final[str] = "\t"

# Applied in order, each replacing every occurrence. Repeated entries are
# intentional: each pass removes one more tab in front of deeper groups.
INDENT_COLLAPSE: Final[tuple[tuple[str, str], ...]] = (
    ("\t<g", "<g"),
    ("\t<g", "<g"),
    ("\t\t<path", "<path"),
    ("\t<text", "<text"),
    ("\t</g>", "</g>"),
    ("\t</g>", "</g>"),
)

_ESCAPES: Final[dict[int, str]] = {
    ord("&"): "&amp;",
    ord("<"): "&lt;",
    ord(">"): "&gt;",
    ord('"'): "&#34;",
    ord("'"): "&#39;",
    ord("\t"): "&#x9;",
    ord("\n"): "&#xA;",
    ord("\r"): "&#xD;",
}


def escape(value: str) -> str:
    """Escape attribute values and character data the way the corpus does."""
    return value.translate(_ESCAPES)


def _attributes(obj: object, specs: tuple[AttributeSpec, ...]) -> str:
    parts: list[str] = []
    for spec in specs:
        value: object = getattr(obj, spec.field)
        if spec.flag:
            if value:
                parts.append(f'{spec.name}="{FLAG_TRUE}"')
            continue
        text = str(value)
        if text or spec.required:
            parts.append(f'{spec.name}="{escape(text)}"')
    return "".join(" " + p for p in parts)


def _render_group(group: Group, depth: int, lines: list[str]) -> None:
    indent: str = INDENT * depth
    attrs: str = _attributes(group, GROUP_ATTRIBUTES)
    if not group.children:
        lines.append(f"{indent}<g{attrs}/>")
        return
    lines.append(f"{indent}<g{attrs}>")
    for child in group.children:
        match child.node:
            case Group() as sub:
                _render_group(sub, depth + 1, lines)
            case Path() as path:
                lines.append(f"{INDENT * (depth + 1)}<path{_attributes(path, PATH_ATTRIBUTES)}/>")
            case Text() as text:
                lines.append(_render_text(text, depth + 1))
    lines.append(f"{indent}</g>")


def _render_text(text: Text, depth: int) -> str:
    indent: str = INDENT * depth
    attrs: str = _attributes(text, TEXT_ATTRIBUTES)
    if not text.content:
        return f"{indent}<text{attrs}/>"
    return f"{indent}<text{attrs}>{escape(text.content)}</text>"


def render_indented(document: Document) -> str:
    """Render ``document`` with generic tab indentation, without heading.

    No renumbering happens here; this is the raw layout `encode` normalizes.
    """
    lines: list[str] = [f"<svg{_attributes(document, SVG_ATTRIBUTES)}>"]
    for group in document.groups:
        _render_group(group, 1, lines)
    lines.append("</svg>")
    return "\n".join(lines)


def collapse_indentation(text: str) -> str:
    """Apply `INDENT_COLLAPSE` to generically indented markup."""
    for old, new in INDENT_COLLAPSE:
        text = text.replace(old, new)
    return text


def encode(
    document: Document,
    *,
    heading: str = HEADING,
    diagnostics: DiagnosticLog | None = None,
) -> bytes:
    """Serialize ``document`` to canonical KanjiVG bytes.

    The document is renumbered in place first, so identifiers, labels and
    styles in the output are always consistent with its base identifier.

    Args:
        document (Document): The document to serialize (mutated by renumbering).
        heading (str): Literal text written before the ``svg`` element.
        diagnostics (DiagnosticLog | None): Optional log receiving structural warnings
            from the renumbering pass.

    Returns:
        bytes: UTF-8 encoded file contents ending with a single newline.

    Raises:
        ValidationError: If the document has no base group.
    """
    renumber(document, diagnostics)
    body: str = collapse_indentation(render_indented(document))
    out: str = heading + body + "\n"
    logger.trace("Encoded document: %d character(s)", len(out))
    return out.encode("utf-8")
