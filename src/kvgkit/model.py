# topmark:header:start
#
#   project      : KvgKit
#   file         : model.py
#   file_relpath : src/kvgkit/model.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""In-memory model of a KanjiVG document.

A `Document` holds one or two top-level `Group` objects: the stroke paths
container and, optionally, the stroke numbers container. Groups own an ordered
list of `Child` wrappers, each holding exactly one `Group`, `Path` or `Text`.

Equality is structural. Identifiers and style attributes are derived from the
base identifier by `kvgkit.renumber` and are excluded from comparisons, and so
are the parent back-references used for upward navigation:

    node.parent       -> the Child wrapping the node (or None)
    child.parent      -> the Group containing the child
    node.container    -> shortcut for node.parent.parent

The model performs no I/O and no validation beyond the tagged-union
discriminant and single attachment of nodes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Union

from kvgkit.constants import SVG_NAMESPACE
from kvgkit.core.errors import ValidationError

if TYPE_CHECKING:
    from collections.abc import Iterator


class NodeKind(Enum):
    """Discriminant of a `Child`; the value is the element tag."""

    GROUP = "g"
    PATH = "path"
    TEXT = "text"


class _Attached:
    """Upward navigation shared by the three node types."""

    parent: Child | None

    @property
    def container(self) -> Group | None:
        """The group that contains this node, or None for a detached/top-level node."""
        return self.parent.parent if self.parent is not None else None


@dataclass
class Path(_Attached):
    """A single stroke.

    Attributes:
        id (str): Derived identifier (``<base>-s<n>``).
        stroke_type (str): Stroke classification code (``kvg:type``).
        d (str): SVG path data, kept verbatim.
        css_class (str): Presentation class.
    """

    id: str = field(default="", compare=False)
    stroke_type: str = ""
    d: str = ""
    css_class: str = ""
    parent: Child | None = field(default=None, compare=False, repr=False)


@dataclass
class Text(_Attached):
    """A stroke-order number label."""

    id: str = field(default="", compare=False)
    transform: str = ""
    content: str = ""
    css_class: str = ""
    parent: Child | None = field(default=None, compare=False, repr=False)


@dataclass
class Group(_Attached):
    """A structural component: character, radical, or stroke sub-grouping.

    Attributes mirror the ``kvg:*`` attributes of a ``<g>`` element. The four
    flags are true only when the file spells them ``"true"``.
    """

    id: str = field(default="", compare=False)
    element: str = ""
    part: str = ""
    variant: bool = False
    number: str = ""
    original: str = ""
    partial: bool = False
    trad_form: bool = False
    position: str = ""
    radical: str = ""
    phon: str = ""
    radical_form: bool = False
    style: str = field(default="", compare=False)
    children: list[Child] = field(default_factory=lambda: [])
    parent: Child | None = field(default=None, compare=False, repr=False)

    @property
    def effective_element(self) -> str:
        """The element this group stands for: ``original`` when set, else ``element``."""
        return self.original or self.element

    def append(self, node: Node) -> Child:
        """Attach ``node`` as the last child of this group.

        Args:
            node (Node): A detached Group, Path or Text.

        Returns:
            Child: The wrapper created for ``node``.
        """
        child = Child(node, parent=self)
        self.children.append(child)
        return child

    def extend(self, nodes: list[Node]) -> None:
        """Attach each of ``nodes`` in order."""
        for node in nodes:
            self.append(node)

    def insert(self, index: int, node: Node) -> Child:
        """Attach ``node`` at ``index`` (same semantics as `list.insert`)."""
        child = Child(node, parent=self)
        self.children.insert(index, child)
        return child

    def pop(self, index: int = -1) -> Node:
        """Detach and return the node at ``index``.

        The returned node has no parent and may be attached elsewhere.
        """
        child: Child = self.children.pop(index)
        child.node.parent = None
        return child.node

    def child_groups(self) -> Iterator[Group]:
        """Iterate over the direct Group children, in document order."""
        for child in self.children:
            if isinstance(child.node, Group):
                yield child.node

    def child_paths(self) -> Iterator[Path]:
        """Iterate over the direct Path children, in document order."""
        for child in self.children:
            if isinstance(child.node, Path):
                yield child.node


Node = Union[Group, Path, Text]


@dataclass(frozen=True)
class Child:
    """Tagged union over exactly one of Group, Path or Text.

    The `kind` is computed from ``node`` at construction and never changes.
    Constructing a Child attaches ``node``: its ``parent`` is set to this wrapper.

    Raises:
        ValidationError: If ``node`` is not a Group/Path/Text or is already attached.
    """

    node: Node
    parent: Group | None = field(default=None, compare=False, repr=False)
    kind: NodeKind = field(init=False)

    def __post_init__(self) -> None:
        match self.node:
            case Group():
                kind = NodeKind.GROUP
            case Path():
                kind = NodeKind.PATH
            case Text():
                kind = NodeKind.TEXT
            case _:
                raise ValidationError(f"Cannot wrap {type(self.node).__name__} in a Child")
        if self.node.parent is not None:
            raise ValidationError(f"{kind.value} node is already attached to a group")
        object.__setattr__(self, "kind", kind)
        self.node.parent = self


@dataclass
class Document:
    """A whole KanjiVG file.

    Attributes:
        groups (list[Group]): The stroke paths group, optionally followed by the
            stroke numbers group.
        width (str): ``width`` of the ``svg`` root, copied through.
        height (str): ``height`` of the ``svg`` root, copied through.
        view_box (str): ``viewBox`` of the ``svg`` root (may be empty).
        xmlns (str): Default namespace of the ``svg`` root.

    Raises:
        ValidationError: If there are not one or two top-level groups.
    """

    groups: list[Group]
    width: str = "109"
    height: str = "109"
    view_box: str = "0 0 109 109"
    xmlns: str = SVG_NAMESPACE

    def __post_init__(self) -> None:
        if not 1 <= len(self.groups) <= 2:
            raise ValidationError(
                f"A document holds one or two top-level groups, got {len(self.groups)}"
            )

    @property
    def stroke_paths(self) -> Group:
        """The first top-level group (container of the base group)."""
        return self.groups[0]

    @property
    def stroke_numbers(self) -> Group | None:
        """The second top-level group holding the labels, if present."""
        return self.groups[1] if len(self.groups) > 1 else None

    @property
    def base_group(self) -> Group:
        """The structural root: the first child of the stroke paths group.

        Raises:
            ValidationError: If the stroke paths group is empty or its first child
                is not a Group.
        """
        children: list[Child] = self.stroke_paths.children
        if not children:
            raise ValidationError("The stroke paths group has no children")
        match children[0].node:
            case Group() as base:
                return base
            case Path() | Text():
                raise ValidationError(
                    f"The first child of the stroke paths group is a {children[0].kind.value}, "
                    "not a group"
                )
