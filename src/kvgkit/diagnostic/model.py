# topmark:header:start
#
#   project      : KvgKit
#   file         : model.py
#   file_relpath : src/kvgkit/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""Diagnostic types collected while decoding, renumbering and querying documents.

Core operations never raise on tolerable oddities (an unknown attribute, an
unexpected child tag, a non-text label, an unknown radical category). They log
a warning and, when the caller passes a `DiagnosticLog`, append a
`StructuralWarning` to it so batch tools can count and report them.

Sections:
    * DiagnosticLevel: severity levels with associated terminal colors.
    * WarningKind: the kinds of structural warnings the core emits.
    * Diagnostic / StructuralWarning: immutable diagnostic payloads.
    * DiagnosticStats: aggregated per-level counts.
    * DiagnosticLog: mutable collection with helpers for adding and summarizing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from kvgkit.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from kvgkit.config.logging import KvgLogger


logger: KvgLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics.

    Levels map to terminal colors and are ordered by importance: ERROR > WARNING > INFO.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Intended for human-readable output only.

        Returns:
            Callable[[str], str]: The `yachalk` color function for this level.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


class WarningKind(Enum):
    """Kinds of structural warnings emitted by the core."""

    UNKNOWN_ATTRIBUTE = "unknown-attribute"
    UNKNOWN_ELEMENT = "unknown-element"
    NON_TEXT_LABEL = "non-text-label"
    UNKNOWN_RADICAL = "unknown-radical"


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level and message."""

    level: DiagnosticLevel
    message: str


@dataclass(frozen=True)
class StructuralWarning(Diagnostic):
    """A tolerable shape problem; the offending element was skipped.

    Attributes:
        kind (WarningKind): What kind of oddity was met.
        element (str): Tag, attribute name or value the warning is about.
    """

    kind: WarningKind = WarningKind.UNKNOWN_ELEMENT
    element: str = ""


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_info: int
    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_info + self.n_warning + self.n_error


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics.

    One log is typically used per processed file. It provides helpers for
    adding diagnostics at a given level and simple aggregation helpers
    (`stats`, `to_dict`) for reporting.
    """

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %r", diagnostic.level.value, diagnostic.message)

    def add_info(self, message: str) -> None:
        """Add an ``info`` diagnostic to the log.

        Args:
            message: The diagnostic message.
        """
        self._add(Diagnostic(DiagnosticLevel.INFO, message))

    def add_warning(self, message: str) -> None:
        """Add a ``warning`` diagnostic to the log.

        Args:
            message: The diagnostic message.
        """
        self._add(Diagnostic(DiagnosticLevel.WARNING, message))

    def add_error(self, message: str) -> None:
        """Add an ``error`` diagnostic to the log.

        Args:
            message: The diagnostic message.
        """
        self._add(Diagnostic(DiagnosticLevel.ERROR, message))

    def add_structural(self, kind: WarningKind, element: str, message: str) -> None:
        """Add a `StructuralWarning` to the log.

        Args:
            kind: The kind of structural problem.
            element: The tag, attribute name or value concerned.
            message: Human-readable description.
        """
        self._add(StructuralWarning(DiagnosticLevel.WARNING, message, kind=kind, element=element))

    def warnings_of(self, kind: WarningKind) -> list[StructuralWarning]:
        """Return the structural warnings of the given kind, in insertion order."""
        return [d for d in self.items if isinstance(d, StructuralWarning) and d.kind is kind]

    def stats(self) -> DiagnosticStats:
        """Return per-level counts for diagnostics in this log."""
        return compute_diagnostic_stats(self.items)

    def has_warning(self) -> bool:
        """Return True if the log contains warning diagnostics."""
        return any(d.level == DiagnosticLevel.WARNING for d in self.items)

    def has_error(self) -> bool:
        """Return True if the log contains error diagnostics."""
        return any(d.level == DiagnosticLevel.ERROR for d in self.items)

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by severity.

        Returns:
            Mapping with keys ``"info"``, ``"warning"``, and ``"error"``.
        """
        stats: DiagnosticStats = self.stats()
        return {
            "info": stats.n_info,
            "warning": stats.n_warning,
            "error": stats.n_error,
        }

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics.

    Args:
        diagnostics: the diagnostics to count.

    Returns:
        Per-level counts.
    """
    items: list[Diagnostic] = list(diagnostics)
    n_info: int = sum(1 for d in items if d.level == DiagnosticLevel.INFO)
    n_warn: int = sum(1 for d in items if d.level == DiagnosticLevel.WARNING)
    n_err: int = sum(1 for d in items if d.level == DiagnosticLevel.ERROR)
    return DiagnosticStats(n_info=n_info, n_warning=n_warn, n_error=n_err)


def report_structural(
    diagnostics: DiagnosticLog | None,
    kind: WarningKind,
    element: str,
    message: str,
) -> None:
    """Log a structural warning and record it when a log is supplied.

    Args:
        diagnostics: Optional caller-supplied log.
        kind: The kind of structural problem.
        element: The tag, attribute name or value concerned.
        message: Human-readable description.
    """
    logger.warning("%s", message)
    if diagnostics is not None:
        diagnostics.add_structural(kind, element, message)
