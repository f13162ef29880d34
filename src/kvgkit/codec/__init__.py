# topmark:header:start
#
#   project      : KvgKit
#   file         : __init__.py
#   file_relpath : src/kvgkit/codec/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""Byte-exact KanjiVG codec: `decode` bytes into a Document, `encode` it back."""

from __future__ import annotations

from kvgkit.codec.decoder import decode
from kvgkit.codec.encoder import encode
from kvgkit.codec.heading import HEADING, STRIPPED_HEADING, strip_attlist

__all__ = [
    "HEADING",
    "STRIPPED_HEADING",
    "decode",
    "encode",
    "strip_attlist",
]
