# topmark:header:start
#
#   project      : KvgKit
#   file         : schema.py
#   file_relpath : src/kvgkit/codec/schema.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""Attribute allow-lists shared by the decoder and the encoder.

Each tuple lists the XML attributes understood for one element kind, in the
order the encoder writes them. Attribute names are *qualified* names: the
decoder runs without namespace processing, so ``kvg:element`` is matched
literally.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class AttributeSpec:
    """How one XML attribute maps onto a model field.

    Attributes:
        name (str): Qualified XML attribute name.
        field (str): Attribute name on the model object.
        flag (bool): Boolean attribute, true only for the literal ``"true"``.
        required (bool): Written even when empty.
    """

    name: str
    field: str
    flag: bool = False
    required: bool = False


SVG_ATTRIBUTES: Final[tuple[AttributeSpec, ...]] = (
    AttributeSpec("xmlns", "xmlns", required=True),
    AttributeSpec("width", "width", required=True),
    AttributeSpec("height", "height", required=True),
    AttributeSpec("viewBox", "view_box"),
)

GROUP_ATTRIBUTES: Final[tuple[AttributeSpec, ...]] = (
    AttributeSpec("id", "id"),
    AttributeSpec("kvg:element", "element"),
    AttributeSpec("kvg:part", "part"),
    AttributeSpec("kvg:variant", "variant", flag=True),
    AttributeSpec("kvg:number", "number"),
    AttributeSpec("kvg:original", "original"),
    AttributeSpec("kvg:partial", "partial", flag=True),
    AttributeSpec("kvg:tradForm", "trad_form", flag=True),
    AttributeSpec("kvg:position", "position"),
    AttributeSpec("kvg:radical", "radical"),
    AttributeSpec("kvg:phon", "phon"),
    AttributeSpec("kvg:radicalForm", "radical_form", flag=True),
    AttributeSpec("style", "style"),
)

PATH_ATTRIBUTES: Final[tuple[AttributeSpec, ...]] = (
    AttributeSpec("id", "id", required=True),
    AttributeSpec("kvg:type", "stroke_type"),
    AttributeSpec("d", "d", required=True),
    AttributeSpec("class", "css_class"),
)

TEXT_ATTRIBUTES: Final[tuple[AttributeSpec, ...]] = (
    AttributeSpec("id", "id"),
    AttributeSpec("transform", "transform"),
    AttributeSpec("class", "css_class"),
)

# Namespace declarations are accepted on any element without a warning.
XMLNS_PREFIX: Final[str] = "xmlns:"


def by_name(specs: tuple[AttributeSpec, ...]) -> dict[str, AttributeSpec]:
    """Index an allow-list by qualified attribute name."""
    return {spec.name: spec for spec in specs}
