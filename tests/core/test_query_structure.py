# topmark:header:start
#
#   project      : KvgKit
#   file         : test_query_structure.py
#   file_relpath : tests/core/test_query_structure.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""Structural queries over component trees."""

from __future__ import annotations

from kvgkit.codec import decode
from kvgkit.diagnostic.model import DiagnosticLog, WarningKind
from kvgkit.model import Group, Path, Text
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
    is_han,
)
from tests.conftest import parametrize
from tests.samples import JI


def _tree() -> tuple[Group, dict[str, Group]]:
    """Build ``root[a[b[], c[b[]]], d[]]`` with a few attributes set."""
    names: dict[str, Group] = {
        "root": Group(element="root"),
        "a": Group(element="a", radical="tradit"),
        "b1": Group(element="b", radical="general"),
        "c": Group(element="c", radical="general"),
        "b2": Group(element="b", original="B"),
        "d": Group(radical="nelson"),
    }
    names["a"].extend([names["b1"], names["c"]])
    names["a"].insert(1, Path(stroke_type="㇐", d="first"))
    names["c"].append(names["b2"])
    names["c"].append(Path(stroke_type="㇑", d="deep"))
    names["root"].extend([names["a"], Text(content="label"), names["d"]])
    return names["root"], names


def test_flatten_paths_is_preorder() -> None:
    """Every path, in document order."""
    root, _ = _tree()
    assert [p.d for p in flatten_paths(root)] == ["first", "deep"]


def test_flatten_groups_lists_descendants_first() -> None:
    """Each group follows its descendants; the start group is last."""
    root, n = _tree()
    assert flatten_groups(root) == [n["b1"], n["b2"], n["c"], n["a"], n["d"], root]
    assert [g for g in flatten_groups(root) if g is root] == [root]


def test_groups_by_element() -> None:
    """Groups are indexed by element; unnamed ones under the empty string."""
    root, n = _tree()
    index: dict[str, list[Group]] = groups_by_element(root)
    assert index["b"] == [n["b1"], n["b2"]]
    assert index[""] == [n["d"]]
    assert index["root"] == [root]


def test_find_first_by_element_chain_is_innermost_first() -> None:
    """The chain runs from the match up to the start group."""
    root, n = _tree()
    match: ElementMatch = find_first_by_element(root, "b")
    assert match.found
    assert match.group is n["b1"]
    assert match.chain == [n["b1"], n["a"], root]


def test_find_first_by_element_includes_start_group() -> None:
    """The start group itself is tried first."""
    root, _ = _tree()
    match: ElementMatch = find_first_by_element(root, "root")
    assert match.found
    assert match.chain == [root]


def test_find_first_by_element_not_found() -> None:
    """A miss reports nothing."""
    root, _ = _tree()
    match: ElementMatch = find_first_by_element(root, "zzz")
    assert match == ElementMatch(found=False, group=None, chain=[])


def test_find_all_by_element_chains_are_root_first() -> None:
    """All matches, nested ones included, each with a root-first chain."""
    root, n = _tree()
    chains: list[list[Group]] = find_all_by_element(root, "b")
    assert chains == [
        [root, n["a"], n["b1"]],
        [root, n["a"], n["c"], n["b2"]],
    ]
    assert find_all_by_element(root, "zzz") == []


def test_find_all_by_element_searches_into_matches() -> None:
    """A match nested in another match is reported too."""
    outer = Group(element="口")
    inner = Group(element="口")
    outer.append(inner)
    assert find_all_by_element(outer, "口") == [[outer], [outer, inner]]


def test_find_first_by_stroke_type() -> None:
    """The chain holds Child wrappers from the path outwards."""
    root, n = _tree()
    match: StrokeTypeMatch = find_first_by_stroke_type(root, "㇑")
    assert match.found
    assert match.path is not None
    assert match.path.d == "deep"
    assert [c.node for c in match.chain] == [match.path, n["c"], n["a"]]

    assert find_first_by_stroke_type(root, "㇏") == StrokeTypeMatch()


def test_classify_radicals_keeps_flatten_order() -> None:
    """Buckets are filled in `flatten_groups` order."""
    root, n = _tree()
    extra = Group(radical="general")
    n["d"].append(extra)
    radicals: Radicals = classify_radicals(root)
    assert radicals.general == [n["b1"], n["c"], extra]
    assert radicals.tradit == [n["a"]]
    assert radicals.nelson == [n["d"]]
    assert radicals.jis == []


def test_classify_radicals_reports_unknown_values() -> None:
    """Category names are exact; others are reported and dropped."""
    root = Group(radical="General")
    root.append(Group(radical="jis"))
    log = DiagnosticLog()
    radicals: Radicals = classify_radicals(root, log)
    assert len(radicals.jis) == 1
    assert radicals.general == []
    assert [w.element for w in log.warnings_of(WarningKind.UNKNOWN_RADICAL)] == ["General"]


def test_effective_element() -> None:
    """`original` wins when set."""
    _, n = _tree()
    assert effective_element(n["b2"]) == "B"
    assert effective_element(n["b1"]) == "b"


def test_queries_on_decoded_sample() -> None:
    """The 字 sample exposes its 宀 radical."""
    doc = decode(JI)
    match: ElementMatch = find_first_by_element(doc.base_group, "子")
    assert match.found
    assert match.chain[-1] is doc.base_group
    assert [g.element for g in classify_radicals(doc.base_group).general] == ["宀"]


@parametrize(
    ("char", "expected"),
    [
        ("字", True),
        ("𠮟", True),
        ("㐀", True),
        ("々", False),
        ("あ", False),
        ("A", False),
        ("", False),
        ("字字", False),
    ],
)
def test_expects_radical(char: str, expected: bool) -> None:
    """Han characters expect a radical, except the iteration mark."""
    assert expects_radical(char) is expected


def test_iteration_mark_is_still_han() -> None:
    """々 belongs to the Han script even though it has no radical."""
    assert is_han("々")
