# topmark:header:start
#
#   project      : KvgKit
#   file         : test_diagnostic_log.py
#   file_relpath : tests/core/test_diagnostic_log.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""Diagnostic log: adding, filtering and counting."""

from __future__ import annotations

import logging

import pytest

from kvgkit.diagnostic.model import (
    DiagnosticLevel,
    DiagnosticLog,
    StructuralWarning,
    WarningKind,
    compute_diagnostic_stats,
    report_structural,
)


def test_stats_and_dict() -> None:
    """Counts are kept per severity."""
    log = DiagnosticLog()
    log.add_info("i")
    log.add_warning("w")
    log.add_structural(WarningKind.UNKNOWN_ELEMENT, "circle", "dropped")
    log.add_error("e")

    assert len(log) == 4
    assert log.stats().total == 4
    assert log.to_dict() == {"info": 1, "warning": 2, "error": 1}
    assert log.has_warning()
    assert log.has_error()
    assert compute_diagnostic_stats([]).total == 0


def test_structural_warnings_carry_kind_and_element() -> None:
    """Structural warnings are warnings with extra detail."""
    log = DiagnosticLog()
    log.add_structural(WarningKind.UNKNOWN_RADICAL, "foo", "Unknown radical")
    (item,) = list(log)

    assert isinstance(item, StructuralWarning)
    assert item.level is DiagnosticLevel.WARNING
    assert (item.kind, item.element) == (WarningKind.UNKNOWN_RADICAL, "foo")
    assert log.warnings_of(WarningKind.UNKNOWN_RADICAL) == [item]
    assert log.warnings_of(WarningKind.UNKNOWN_ELEMENT) == []


def test_report_structural_logs_without_a_log(caplog: pytest.LogCaptureFixture) -> None:
    """Warnings always reach the logger, whether or not a log is supplied."""
    with caplog.at_level(logging.WARNING, logger="kvgkit"):
        report_structural(None, WarningKind.NON_TEXT_LABEL, "g", "not a label")
    assert "not a label" in caplog.text


def test_level_colors_are_callables() -> None:
    """Every level maps to a color function."""
    for level in DiagnosticLevel:
        assert isinstance(level.color("x"), str)
