# topmark:header:start
#
#   project      : KvgKit
#   file         : decoder.py
#   file_relpath : src/kvgkit/codec/decoder.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""Decode KanjiVG bytes into a `kvgkit.model.Document`.

The decoder is a SAX content handler running on expat with namespace
processing turned off. KanjiVG declares its ``kvg:`` attributes in the DOCTYPE
internal subset rather than binding the prefix on the root element, which
namespace-aware parsers handle inconsistently; with namespaces off every
attribute arrives under its literal qualified name and is looked up in the
allow-lists of `kvgkit.codec.schema`.

Tolerated oddities (reported as structural warnings, never raised):
    * an attribute outside the allow-list: ignored;
    * an element other than ``g``/``path``/``text`` inside a group, or other
      than ``g`` inside ``svg``: dropped together with its subtree.

Fatal problems raise `kvgkit.core.errors.DecodeError`: markup that is not
well-formed, a root element other than ``svg``, and a number of top-level
groups other than one or two.
"""

from __future__ import annotations

import io
import xml.sax
import xml.sax.handler
from typing import TYPE_CHECKING

from kvgkit.codec.schema import (
    GROUP_ATTRIBUTES,
    PATH_ATTRIBUTES,
    SVG_ATTRIBUTES,
    TEXT_ATTRIBUTES,
    XMLNS_PREFIX,
    AttributeSpec,
    by_name,
)
from kvgkit.config.logging import get_logger
from kvgkit.constants import FLAG_TRUE
from kvgkit.core.errors import DecodeError
from kvgkit.diagnostic.model import WarningKind, report_structural
from kvgkit.model import Document, Group, Path, Text

if TYPE_CHECKING:
    from xml.sax.xmlreader import AttributesImpl, Locator

    from kvgkit.config.logging import KvgLogger
    from kvgkit.diagnostic.model import DiagnosticLog
    from kvgkit.model import Node

logger: KvgLogger = get_logger(__name__)

_SVG_SPECS: dict[str, AttributeSpec] = by_name(SVG_ATTRIBUTES)
_GROUP_SPECS: dict[str, AttributeSpec] = by_name(GROUP_ATTRIBUTES)
_PATH_SPECS: dict[str, AttributeSpec] = by_name(PATH_ATTRIBUTES)
_TEXT_SPECS: dict[str, AttributeSpec] = by_name(TEXT_ATTRIBUTES)


class _SvgRoot:
    """Attribute holder for the ``svg`` element before the Document exists."""

    def __init__(self) -> None:
        self.xmlns: str = ""
        self.width: str = ""
        self.height: str = ""
        self.view_box: str = ""


class KanjiHandler(xml.sax.handler.ContentHandler):
    """SAX handler building the document tree.

    Start and end events are dispatched to ``handle_start_<tag>`` and
    ``handle_end_<tag>`` methods; tags without a handler in the current context
    are reported and skipped with their whole subtree.
    """

    def __init__(self, diagnostics: DiagnosticLog | None = None) -> None:
        super().__init__()
        self.diagnostics: DiagnosticLog | None = diagnostics
        self.root: _SvgRoot | None = None
        self.groups: list[Group] = []
        # Open elements below svg; the last one receives new children.
        self._open: list[Node] = []
        self._skip_depth: int = 0
        self._depth: int = 0
        self._locator: Locator | None = None

    # --- SAX callbacks ---

    def setDocumentLocator(self, locator: Locator) -> None:  # noqa: N802 - SAX API
        self._locator = locator

    def startElement(self, name: str, attrs: AttributesImpl) -> None:  # noqa: N802 - SAX API
        self._depth += 1
        if self._skip_depth:
            self._skip_depth += 1
            return
        if self._depth == 1:
            if name != "svg":
                raise self._error(f"Root element is <{name}>, expected <svg>")
            self.handle_start_svg(attrs)
            return
        if isinstance(self._current, (Path, Text)) or (
            self._current is None and name != "g"
        ):
            self._drop(name)
            return
        handler = getattr(self, f"handle_start_{name}", None)
        if handler is None or name == "svg":
            self._drop(name)
            return
        handler(attrs)

    def endElement(self, name: str) -> None:  # noqa: N802 - SAX API
        self._depth -= 1
        if self._skip_depth:
            self._skip_depth -= 1
            return
        if name != "svg":
            self._open.pop()

    def characters(self, content: str) -> None:
        if self._skip_depth:
            return
        current: Node | None = self._current
        if isinstance(current, Text):
            current.content += content

    # --- element handlers ---

    def handle_start_svg(self, attrs: AttributesImpl) -> None:
        root = _SvgRoot()
        self._read_attributes(root, "svg", attrs, _SVG_SPECS)
        self.root = root

    def handle_start_g(self, attrs: AttributesImpl) -> None:
        group = Group()
        self._read_attributes(group, "g", attrs, _GROUP_SPECS)
        self._attach(group)

    def handle_start_path(self, attrs: AttributesImpl) -> None:
        path = Path()
        self._read_attributes(path, "path", attrs, _PATH_SPECS)
        self._attach(path)

    def handle_start_text(self, attrs: AttributesImpl) -> None:
        text = Text()
        self._read_attributes(text, "text", attrs, _TEXT_SPECS)
        self._attach(text)

    # --- helpers ---

    @property
    def _current(self) -> Node | None:
        return self._open[-1] if self._open else None

    def _attach(self, node: Node) -> None:
        parent: Node | None = self._current
        if parent is None:
            # Only groups are dispatched here at svg level.
            assert isinstance(node, Group)
            self.groups.append(node)
        else:
            assert isinstance(parent, Group)
            parent.append(node)
        self._open.append(node)

    def _drop(self, name: str) -> None:
        where: str = "svg" if self._current is None else f"<{_tag_of(self._current)}>"
        report_structural(
            self.diagnostics,
            WarningKind.UNKNOWN_ELEMENT,
            name,
            f"Unhandled element <{name}> in {where}{self._position()}, dropped",
        )
        self._skip_depth = 1

    def _read_attributes(
        self,
        target: object,
        tag: str,
        attrs: AttributesImpl,
        specs: dict[str, AttributeSpec],
    ) -> None:
        for name in attrs.getNames():
            value: str = attrs.getValue(name)
            spec: AttributeSpec | None = specs.get(name)
            if spec is None:
                if name.startswith(XMLNS_PREFIX):
                    continue
                report_structural(
                    self.diagnostics,
                    WarningKind.UNKNOWN_ATTRIBUTE,
                    name,
                    f"Unhandled attribute {name!r} on <{tag}>{self._position()}, ignored",
                )
                continue
            if spec.flag:
                setattr(target, spec.field, value == FLAG_TRUE)
            else:
                setattr(target, spec.field, value)

    def _position(self) -> str:
        if self._locator is None:
            return ""
        return f" at line {self._locator.getLineNumber()}"

    def _error(self, message: str) -> DecodeError:
        if self._locator is None:
            return DecodeError(message)
        return DecodeError(
            message,
            line=self._locator.getLineNumber(),
            column=self._locator.getColumnNumber(),
        )


def _tag_of(node: Node) -> str:
    match node:
        case Group():
            return "g"
        case Path():
            return "path"
        case Text():
            return "text"


def _make_parser(handler: KanjiHandler) -> xml.sax.xmlreader.XMLReader:
    parser = xml.sax.make_parser()
    parser.setFeature(xml.sax.handler.feature_namespaces, False)
    parser.setFeature(xml.sax.handler.feature_external_ges, False)
    parser.setFeature(xml.sax.handler.feature_external_pes, False)
    parser.setContentHandler(handler)
    return parser


def decode(data: bytes, diagnostics: DiagnosticLog | None = None) -> Document:
    """Parse KanjiVG file contents into a `Document`.

    Args:
        data (bytes): Raw file contents.
        diagnostics (DiagnosticLog | None): Optional log receiving structural warnings.

    Returns:
        Document: The decoded document; every node is freshly allocated.

    Raises:
        DecodeError: If ``data`` is not a well-formed KanjiVG document.
    """
    handler = KanjiHandler(diagnostics)
    parser = _make_parser(handler)
    try:
        parser.parse(io.BytesIO(bytes(data)))
    except xml.sax.SAXParseException as exc:
        raise DecodeError(
            exc.getMessage(),
            line=exc.getLineNumber(),
            column=exc.getColumnNumber(),
        ) from exc
    except xml.sax.SAXException as exc:
        raise DecodeError(str(exc)) from exc

    root: _SvgRoot | None = handler.root
    if root is None:
        raise DecodeError("No <svg> root element")
    if not 1 <= len(handler.groups) <= 2:
        raise DecodeError(
            f"Expected one or two top-level groups, found {len(handler.groups)}"
        )
    logger.debug(
        "Decoded document with %d top-level group(s), %d byte(s)",
        len(handler.groups),
        len(data),
    )
    return Document(
        groups=handler.groups,
        width=root.width,
        height=root.height,
        view_box=root.view_box,
        xmlns=root.xmlns,
    )
