# topmark:header:start
#
#   project      : KvgKit
#   file         : query.py
#   file_relpath : src/kvgkit/query.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""Read-only structural queries over a group subtree.

Every query takes a starting `Group` and walks its subtree once. Nothing is
mutated.

Ancestor chains come in two orientations:

* `find_first_by_element` and `find_first_by_stroke_type` report the chain
  innermost first (match, parent, ..., starting group);
* `find_all_by_element` reports each chain root first
  (starting group, ..., match).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from kvgkit.config.logging import get_logger
from kvgkit.diagnostic.model import WarningKind, report_structural
from kvgkit.model import Group, Path, Text

if TYPE_CHECKING:
    from kvgkit.config.logging import KvgLogger
    from kvgkit.diagnostic.model import DiagnosticLog
    from kvgkit.model import Child

logger: KvgLogger = get_logger(__name__)

RADICAL_CATEGORIES: tuple[str, ...] = ("general", "tradit", "nelson", "jis")

# Han script code point ranges (inclusive), from the Unicode Scripts database.
HAN_RANGES: tuple[tuple[int, int], ...] = (
    (0x2E80, 0x2E99),
    (0x2E9B, 0x2EF3),
    (0x2F00, 0x2FD5),
    (0x3005, 0x3005),
    (0x3007, 0x3007),
    (0x3021, 0x3029),
    (0x3038, 0x303B),
    (0x3400, 0x4DBF),
    (0x4E00, 0x9FFF),
    (0xF900, 0xFA6D),
    (0xFA70, 0xFAD9),
    (0x20000, 0x2A6DF),
    (0x2A700, 0x2EBE0),
    (0x2F800, 0x2FA1D),
    (0x30000, 0x3134A),
)

# Han, but never carries a radical.
ITERATION_MARK: str = "々"


@dataclass
class ElementMatch:
    """Result of `find_first_by_element`.

    Attributes:
        found (bool): Whether a matching group exists.
        group (Group | None): The first matching group.
        chain (list[Group]): The match and its ancestors, innermost first, ending
            with the starting group.
    """

    found: bool = False
    group: Group | None = None
    chain: list[Group] = field(default_factory=lambda: [])


@dataclass
class StrokeTypeMatch:
    """Result of `find_first_by_stroke_type`.

    Attributes:
        found (bool): Whether a matching path exists.
        path (Path | None): The first matching path.
        chain (list[Child]): Child wrappers from the path's own outwards to the
            child of the starting group.
    """

    found: bool = False
    path: Path | None = None
    chain: list[Child] = field(default_factory=lambda: [])


@dataclass
class Radicals:
    """Groups classified by their ``kvg:radical`` category."""

    general: list[Group] = field(default_factory=lambda: [])
    tradit: list[Group] = field(default_factory=lambda: [])
    nelson: list[Group] = field(default_factory=lambda: [])
    jis: list[Group] = field(default_factory=lambda: [])


def effective_element(group: Group) -> str:
    """Return ``group.original`` when set, else ``group.element``."""
    return group.effective_element


def flatten_paths(group: Group) -> list[Path]:
    """Return every path below ``group`` in document order."""
    out: list[Path] = []
    for child in group.children:
        match child.node:
            case Group() as sub:
                out.extend(flatten_paths(sub))
            case Path() as path:
                out.append(path)
            case Text():
                pass
    return out


def flatten_groups(group: Group) -> list[Group]:
    """Return every group of the subtree, descendants before their ancestors.

    The starting group is always last.
    """
    out: list[Group] = []
    for sub in group.child_groups():
        out.extend(flatten_groups(sub))
    out.append(group)
    return out


def groups_by_element(group: Group) -> dict[str, list[Group]]:
    """Index the subtree's groups by ``kvg:element``.

    Groups without an element name are collected under ``""``. Within each list
    the order is that of `flatten_groups`.
    """
    index: dict[str, list[Group]] = {}
    for g in flatten_groups(group):
        index.setdefault(g.element, []).append(g)
    return index


def _first_by_element(group: Group, element: str) -> list[Group] | None:
    if group.element == element:
        return [group]
    for sub in group.child_groups():
        chain: list[Group] | None = _first_by_element(sub, element)
        if chain is not None:
            chain.append(group)
            return chain
    return None


def find_first_by_element(group: Group, element: str) -> ElementMatch:
    """Find the first group (``group`` itself included) whose element is ``element``.

    Args:
        group (Group): Where to start.
        element (str): The element name to look for.

    Returns:
        ElementMatch: On success the match and its ancestor chain, innermost
            first, up to and including ``group``.
    """
    chain: list[Group] | None = _first_by_element(group, element)
    if chain is None:
        return ElementMatch()
    return ElementMatch(found=True, group=chain[0], chain=chain)


def _all_by_element(
    group: Group,
    element: str,
    ancestors: list[Group],
    out: list[list[Group]],
) -> None:
    path: list[Group] = [*ancestors, group]
    if group.element == element:
        out.append(path)
    for sub in group.child_groups():
        _all_by_element(sub, element, path, out)


def find_all_by_element(group: Group, element: str) -> list[list[Group]]:
    """Find every group in the subtree whose element is ``element``.

    Matches are searched into as well, so nested matches are all reported.

    Returns:
        list[list[Group]]: One root-first chain ``[group, ..., match]`` per match,
            in document order.
    """
    out: list[list[Group]] = []
    _all_by_element(group, element, [], out)
    return out


def _first_by_stroke_type(group: Group, stroke_type: str) -> list[Child] | None:
    for child in group.children:
        match child.node:
            case Path() as path:
                if path.stroke_type == stroke_type:
                    return [child]
            case Group() as sub:
                chain: list[Child] | None = _first_by_stroke_type(sub, stroke_type)
                if chain is not None:
                    chain.append(child)
                    return chain
            case Text():
                pass
    return None


def find_first_by_stroke_type(group: Group, stroke_type: str) -> StrokeTypeMatch:
    """Find the first path below ``group`` with the given ``kvg:type`` code."""
    chain: list[Child] | None = _first_by_stroke_type(group, stroke_type)
    if chain is None:
        return StrokeTypeMatch()
    path = chain[0].node
    assert isinstance(path, Path)
    return StrokeTypeMatch(found=True, path=path, chain=chain)


def classify_radicals(group: Group, diagnostics: DiagnosticLog | None = None) -> Radicals:
    """Bucket the subtree's groups by their ``kvg:radical`` value.

    Groups are visited in `flatten_groups` order. Groups without a radical are
    skipped; a value outside `RADICAL_CATEGORIES` is reported and dropped.
    """
    radicals = Radicals()
    for g in flatten_groups(group):
        match g.radical:
            case "":
                continue
            case "general":
                radicals.general.append(g)
            case "tradit":
                radicals.tradit.append(g)
            case "nelson":
                radicals.nelson.append(g)
            case "jis":
                radicals.jis.append(g)
            case other:
                report_structural(
                    diagnostics,
                    WarningKind.UNKNOWN_RADICAL,
                    other,
                    f"Unknown radical category {other!r} on group {g.id or g.element!r}",
                )
    return radicals


def is_han(char: str) -> bool:
    """Return True if the single character ``char`` belongs to the Han script."""
    cp: int = ord(char)
    return any(lo <= cp <= hi for lo, hi in HAN_RANGES)


def expects_radical(char: str) -> bool:
    """Return True if a file for ``char`` should declare a radical.

    That is the case for Han characters other than the iteration mark 々.
    Anything that is not a single character yields False.
    """
    if len(char) != 1 or char == ITERATION_MARK:
        return False
    return is_han(char)
