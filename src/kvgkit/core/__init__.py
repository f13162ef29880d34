# topmark:header:start
#
#   project      : KvgKit
#   file         : __init__.py
#   file_relpath : src/kvgkit/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""Core primitives shared across KvgKit (errors)."""

from __future__ import annotations

from kvgkit.core.errors import DecodeError, KvgError, ValidationError

__all__ = [
    "DecodeError",
    "KvgError",
    "ValidationError",
]
