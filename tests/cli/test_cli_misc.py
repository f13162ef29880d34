# topmark:header:start
#
#   project      : KvgKit
#   file         : test_cli_misc.py
#   file_relpath : tests/cli/test_cli_misc.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""CLI group behavior: version, bare invocation and global options."""

from __future__ import annotations

from typing import TYPE_CHECKING

from click.testing import Result

from kvgkit.constants import KVGKIT_VERSION
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_version(isolation: Path) -> None:
    """`kvgkit version` prints the installed version."""
    result: Result = run_cli(["version"])

    assert_SUCCESS(result)
    assert result.output.strip() == KVGKIT_VERSION


@mark_cli
def test_verbose_version(isolation: Path) -> None:
    """With -v the version gets a heading."""
    result: Result = run_cli(["-v", "version"])

    assert_SUCCESS(result)
    assert "KvgKit version:" in result.output
    assert KVGKIT_VERSION in result.output


@mark_cli
def test_bare_invocation_prints_hint_and_help(isolation: Path) -> None:
    """Without a subcommand a hint and the help are shown."""
    result: Result = run_cli([])

    assert_SUCCESS(result)
    assert result.output.startswith("Hint: use 'kvgkit check [PATHS...]'")
    assert "Commands:" in result.output
    for name in ("check", "renumber", "rebase", "strip", "config", "version"):
        assert name in result.output


@mark_cli
def test_verbose_and_quiet_conflict(isolation: Path) -> None:
    """-v and -q are mutually exclusive."""
    result: Result = run_cli(["-v", "-q", "version"])

    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.output


@mark_cli
def test_missing_config_file_is_rejected(isolation: Path) -> None:
    """``--config`` must name an existing file."""
    result: Result = run_cli(["--config", "nope.toml", "version"])

    assert result.exit_code != 0
