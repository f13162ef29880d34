# topmark:header:start
#
#   project      : KvgKit
#   file         : renumber.py
#   file_relpath : src/kvgkit/renumber.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""Re-derive identifiers, labels and styles from the base identifier.

Every identifier in a KanjiVG document below the base group is a function of
the base group's ``id``:

* groups are numbered ``<base>-g1``, ``<base>-g2``, ...;
* paths are numbered ``<base>-s1``, ``<base>-s2``, ...;

both in depth-first document order over the whole base subtree, with separate
counters. Labels in the stroke numbers group are renumbered ``1..n`` by
position, and the presentation styles of all groups are reset to the corpus
values.

All passes are deterministic and idempotent. They mutate the document in place.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from kvgkit.config.logging import get_logger
from kvgkit.constants import (
    GROUP_ID_MARKER,
    KVG_PREFIX,
    PATH_ID_MARKER,
    STROKE_NUMBERS_PREFIX,
    STROKE_NUMBERS_STYLE,
    STROKE_PATHS_PREFIX,
    STROKE_PATHS_STYLE,
)
from kvgkit.diagnostic.model import WarningKind, report_structural
from kvgkit.model import Group, Path, Text
from kvgkit.naming import base_tail

if TYPE_CHECKING:
    from kvgkit.config.logging import KvgLogger
    from kvgkit.diagnostic.model import DiagnosticLog
    from kvgkit.model import Document

logger: KvgLogger = get_logger(__name__)


class BaseId(NamedTuple):
    """The base identifier of a document, with and without the ``kvg:`` prefix."""

    prefixed: str
    unprefixed: str


class _Counters:
    def __init__(self) -> None:
        self.groups: int = 0
        self.paths: int = 0


def get_base(document: Document) -> BaseId:
    """Return the base identifier of ``document``.

    Raises:
        ValidationError: If the document has no base group.
    """
    base: str = document.base_group.id
    return BaseId(prefixed=base, unprefixed=base.replace(KVG_PREFIX, "", 1))


def _number_ids(group: Group, base: str, counters: _Counters) -> None:
    for child in group.children:
        match child.node:
            case Group() as sub:
                counters.groups += 1
                sub.id = f"{base}{GROUP_ID_MARKER}{counters.groups}"
                _number_ids(sub, base, counters)
            case Path() as path:
                counters.paths += 1
                path.id = f"{base}{PATH_ID_MARKER}{counters.paths}"
            case Text():
                pass


def renumber_ids(document: Document) -> None:
    """Run the identifier walk over the base subtree.

    Raises:
        ValidationError: If the document has no base group.
    """
    base_group: Group = document.base_group
    counters = _Counters()
    _number_ids(base_group, base_group.id, counters)
    logger.trace(
        "Numbered %d group(s) and %d path(s) under %s",
        counters.groups,
        counters.paths,
        base_group.id,
    )


def renumber_labels(document: Document, diagnostics: DiagnosticLog | None = None) -> None:
    """Set each label in the stroke numbers group to its 1-based position.

    Non-text children are reported and left alone; their position still counts.
    Documents without a stroke numbers group are left untouched.
    """
    numbers: Group | None = document.stroke_numbers
    if numbers is None:
        return
    for position, child in enumerate(numbers.children, start=1):
        match child.node:
            case Text() as text:
                text.content = str(position)
            case Group() | Path():
                report_structural(
                    diagnostics,
                    WarningKind.NON_TEXT_LABEL,
                    child.kind.value,
                    f"Stroke numbers group holds a <{child.kind.value}> at position {position}, "
                    "expected <text>",
                )


def _clear_styles(group: Group) -> None:
    for sub in group.child_groups():
        sub.style = ""
        _clear_styles(sub)


def reset_styles(document: Document) -> None:
    """Reset presentation styles to the corpus values.

    The top-level groups receive the stroke paths and stroke numbers styles;
    every group nested below the stroke paths group gets an empty style.
    """
    document.stroke_paths.style = STROKE_PATHS_STYLE
    numbers: Group | None = document.stroke_numbers
    if numbers is not None:
        numbers.style = STROKE_NUMBERS_STYLE
    _clear_styles(document.stroke_paths)


def set_base(
    document: Document,
    base: str,
    diagnostics: DiagnosticLog | None = None,
) -> None:
    """Give ``document`` a new base identifier and renumber its identifiers.

    The top-level groups are renamed ``kvg:StrokePaths_<tail>`` and
    ``kvg:StrokeNumbers_<tail>``, where ``<tail>`` is ``base`` without its
    ``kvg:`` prefix. Labels and styles are not touched; `renumber` (or
    `kvgkit.codec.encode`) takes care of those.

    Args:
        document (Document): The document to update in place.
        base (str): The new base identifier, e.g. ``kvg:05b57-Kaisho``.
        diagnostics (DiagnosticLog | None): Unused by the identifier walk; accepted
            for symmetry with `renumber`.

    Raises:
        ValidationError: If ``base`` lacks the ``kvg:`` prefix or the document has
            no base group.
    """
    del diagnostics
    tail: str = base_tail(base)
    base_group: Group = document.base_group
    logger.debug("Rebasing %r -> %r", base_group.id, base)
    base_group.id = base
    document.stroke_paths.id = STROKE_PATHS_PREFIX + tail
    numbers: Group | None = document.stroke_numbers
    if numbers is not None:
        numbers.id = STROKE_NUMBERS_PREFIX + tail
    renumber_ids(document)


def renumber(document: Document, diagnostics: DiagnosticLog | None = None) -> None:
    """Recompute every derived identifier, label and style of ``document``.

    Args:
        document (Document): The document to update in place.
        diagnostics (DiagnosticLog | None): Optional log receiving
            ``NON_TEXT_LABEL`` warnings.

    Raises:
        ValidationError: If the document has no base group.
    """
    renumber_ids(document)
    renumber_labels(document, diagnostics)
    reset_styles(document)
