# topmark:header:start
#
#   project      : KvgKit
#   file         : test_codec_properties.py
#   file_relpath : tests/codec/test_codec_properties.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

# pyright: strict

"""Property tests for the codec over generated documents.

For any generated document:
1) encoding is a fixed point: decode then encode reproduces the bytes, and
2) decoding the encoding yields a structurally equal document.
"""

from __future__ import annotations

import copy

import pytest
from hypothesis import HealthCheck, given, settings

from kvgkit.codec import decode, encode
from kvgkit.codec.encoder import render_indented
from kvgkit.model import Document
from kvgkit.query import flatten_paths
from kvgkit.renumber import renumber
from tests.conftest import mark_codec
from tests.strategies_kvg import s_document

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


@mark_codec
@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=60)
@given(doc=s_document())
def test_encode_is_a_fixed_point(doc: Document) -> None:
    """`encode(decode(encode(d))) == encode(d)`."""
    first: bytes = encode(doc)
    assert encode(decode(first)) == first


@mark_codec
@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=60)
@given(doc=s_document())
def test_decode_inverts_encode(doc: Document) -> None:
    """`decode(encode(d)) == d` once `d` has been renumbered."""
    data: bytes = encode(doc)
    assert decode(data) == doc


@settings(deadline=None, max_examples=60)
@given(doc=s_document())
def test_renumber_is_idempotent(doc: Document) -> None:
    """A second renumbering pass changes nothing, identifiers included."""
    renumber(doc)
    snapshot: Document = copy.deepcopy(doc)
    renumber(doc)
    assert render_indented(doc) == render_indented(snapshot)
    assert [p.id for p in flatten_paths(doc.base_group)] == [
        p.id for p in flatten_paths(snapshot.base_group)
    ]
