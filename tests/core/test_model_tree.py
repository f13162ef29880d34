# topmark:header:start
#
#   project      : KvgKit
#   file         : test_model_tree.py
#   file_relpath : tests/core/test_model_tree.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""Document model: tagged children, parent navigation and structural equality."""

from __future__ import annotations

import pytest

from kvgkit.core.errors import ValidationError
from kvgkit.model import Child, Document, Group, NodeKind, Path, Text


def test_child_kind_follows_node_type() -> None:
    """The discriminant is derived from the wrapped node."""
    assert Child(Group()).kind is NodeKind.GROUP
    assert Child(Path()).kind is NodeKind.PATH
    assert Child(Text()).kind is NodeKind.TEXT


def test_child_rejects_foreign_nodes() -> None:
    """Only Group, Path and Text can be wrapped."""
    with pytest.raises(ValidationError):
        Child("not a node")  # type: ignore[arg-type]


def test_node_cannot_be_attached_twice() -> None:
    """A node belongs to at most one group."""
    path = Path(d="M0,0")
    first = Group()
    first.append(path)
    with pytest.raises(ValidationError):
        Group().append(path)


def test_parent_navigation() -> None:
    """Nodes reach their Child wrapper and containing group."""
    outer = Group(element="字")
    inner = Group(element="子")
    path = Path(stroke_type="㇐")
    child: Child = outer.append(inner)
    inner.append(path)

    assert inner.parent is child
    assert child.parent is outer
    assert inner.container is outer
    assert path.container is inner
    assert outer.container is None


def test_pop_detaches_node() -> None:
    """A popped node can be attached to another group."""
    group = Group()
    group.extend([Path(d="a"), Path(d="b")])
    node = group.pop(0)
    assert node.parent is None
    assert [p.d for p in group.child_paths()] == ["b"]

    other = Group()
    other.insert(0, node)
    assert node.container is other


def test_child_accessors_keep_document_order() -> None:
    """`child_groups` and `child_paths` filter direct children only."""
    group = Group()
    nested = Group(element="a")
    nested.append(Path(d="deep"))
    group.extend([Path(d="1"), nested, Text(content="x"), Path(d="2")])

    assert [g.element for g in group.child_groups()] == ["a"]
    assert [p.d for p in group.child_paths()] == ["1", "2"]


def test_equality_ignores_ids_styles_and_parents() -> None:
    """Derived attributes do not take part in structural equality."""
    a = Group(id="kvg:04e00", element="一", style="x")
    b = Group(id="kvg:other", element="一")
    a.append(Path(id="kvg:04e00-s1", d="M1"))
    b.append(Path(id="kvg:other-s9", d="M1"))
    assert a == b

    b.children[0].node.d = "M2"  # type: ignore[union-attr]
    assert a != b


def test_effective_element_prefers_original() -> None:
    """`original` wins over `element` when set."""
    assert Group(element="亻", original="人").effective_element == "人"
    assert Group(element="口").effective_element == "口"


@pytest.mark.parametrize("n_groups", [0, 3])
def test_document_requires_one_or_two_groups(n_groups: int) -> None:
    """A document holds the stroke paths group and optionally the numbers group."""
    with pytest.raises(ValidationError):
        Document(groups=[Group() for _ in range(n_groups)])


def test_document_accessors() -> None:
    """Top-level and base groups are reachable by name."""
    base = Group(id="kvg:04e00")
    paths = Group()
    paths.append(base)
    numbers = Group()
    doc = Document(groups=[paths, numbers])

    assert doc.stroke_paths is paths
    assert doc.stroke_numbers is numbers
    assert doc.base_group is base
    assert Document(groups=[paths]).stroke_numbers is None


def test_base_group_must_be_a_group() -> None:
    """A missing or non-group base is a caller error."""
    with pytest.raises(ValidationError):
        _ = Document(groups=[Group()]).base_group

    paths = Group()
    paths.append(Path())
    with pytest.raises(ValidationError):
        _ = Document(groups=[paths]).base_group
