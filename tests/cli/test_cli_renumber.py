# topmark:header:start
#
#   project      : KvgKit
#   file         : test_cli_renumber.py
#   file_relpath : tests/cli/test_cli_renumber.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""CLI `renumber`: dry run by default, rewrite with ``--apply``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from click.testing import Result

from tests.cli.conftest import assert_SUCCESS, assert_WOULD_CHANGE, run_cli, run_cli_in
from tests.conftest import mark_cli
from tests.samples import ICHI, JI

if TYPE_CHECKING:
    from pathlib import Path

# 字 with its two component groups numbered the wrong way round.
JI_SWAPPED: bytes = (
    JI.replace(b'"kvg:05b57-g1"', b'"kvg:05b57-gX"')
    .replace(b'"kvg:05b57-g2"', b'"kvg:05b57-g1"')
    .replace(b'"kvg:05b57-gX"', b'"kvg:05b57-g2"')
)


@mark_cli
def test_dry_run_reports_and_keeps_files(isolation: Path) -> None:
    """Without --apply nothing is written and the exit code signals changes."""
    target: Path = isolation / "05b57.svg"
    target.write_bytes(JI_SWAPPED)

    result: Result = run_cli(["renumber", "05b57.svg"])

    assert_WOULD_CHANGE(result)
    assert "would renumber: 05b57.svg" in result.output
    assert "1 of 1 file(s) would be renumbered." in result.output
    assert target.read_bytes() == JI_SWAPPED


@mark_cli
def test_apply_rewrites_in_canonical_form(isolation: Path) -> None:
    """``--apply`` writes the canonical bytes; a second run has nothing to do."""
    (isolation / "04e00.svg").write_bytes(ICHI)
    target: Path = isolation / "05b57.svg"
    target.write_bytes(JI_SWAPPED)

    result: Result = run_cli(["renumber", "--apply"])

    assert_SUCCESS(result)
    assert "renumbered: 05b57.svg" in result.output
    assert "1 of 2 file(s) renumbered." in result.output
    assert target.read_bytes() == JI

    again: Result = run_cli(["renumber"])
    assert_SUCCESS(again)
    assert "0 of 2 file(s) would be renumbered." in again.output


@mark_cli
def test_quiet_suppresses_the_summary(isolation: Path) -> None:
    """-q keeps only problem reports."""
    (isolation / "04e00.svg").write_bytes(ICHI)

    result: Result = run_cli_in(isolation, ["-q", "renumber"])

    assert_SUCCESS(result)
    assert "file(s)" not in result.output
