# topmark:header:start
#
#   project      : KvgKit
#   file         : errors.py
#   file_relpath : src/kvgkit/core/errors.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""Exceptions raised by the KvgKit core.

Usage:
    The core never terminates the process. Fatal conditions surface as one of
    the exceptions below and the caller decides what to do with them. Tolerable
    oddities are *not* raised: they are reported as structural warnings (see
    `kvgkit.diagnostic.model.StructuralWarning`).

Taxonomy:
    * `KvgError`: common base class.
    * `DecodeError`: the input bytes are not a well-formed KanjiVG document.
    * `ValidationError`: the caller asked for something the model cannot do,
      e.g. a base identifier without the ``kvg:`` prefix.
"""

from __future__ import annotations


class KvgError(Exception):
    """Base class for all KvgKit core errors."""


class DecodeError(KvgError, ValueError):
    """Malformed KanjiVG markup.

    Attributes:
        line (int | None): 1-based line of the offending markup, when known.
        column (int | None): 0-based column of the offending markup, when known.
    """

    def __init__(self, message: str, *, line: int | None = None, column: int | None = None):
        super().__init__(message)
        self.line = line
        self.column = column

    def __str__(self) -> str:
        msg: str = super().__str__()
        if self.line is not None:
            return f"{msg} (line {self.line}, column {self.column or 0})"
        return msg


class ValidationError(KvgError, ValueError):
    """Caller misuse of a core operation."""
