# topmark:header:start
#
#   project      : KvgKit
#   file         : test_patch_render.py
#   file_relpath : tests/utils/test_patch_render.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""Diff utils: patch creation and rendering."""

from __future__ import annotations

import click

from kvgkit.utils.diff import make_patch, render_patch


def test_make_patch_names_both_sides() -> None:
    """The header lines label the current and canonical versions."""
    patch: list[str] = make_patch(b"a\n\tb\n", b"a\nb\n", "04e00.svg")
    assert patch[0] == "--- 04e00.svg (current)\n"
    assert patch[1] == "+++ 04e00.svg (canonical)\n"
    assert "-\tb\n" in patch
    assert "+b\n" in patch


def test_make_patch_is_empty_for_equal_inputs() -> None:
    """Identical bytes produce no diff."""
    assert make_patch(b"same\n", b"same\n", "x") == []


def test_render_patch_accepts_str_and_list() -> None:
    """`render_patch` should accept both a diff string and a sequence of lines."""
    diff_text = "--- a\n+++ b\n-foo\n+bar\n"
    s1: str = click.unstyle(render_patch(diff_text))
    s2: str = click.unstyle(render_patch(diff_text.splitlines(keepends=True)))
    assert s1 == s2 == diff_text


def test_render_patch_shows_whitespace() -> None:
    """Tabs and carriage returns are made visible."""
    out: str = click.unstyle(render_patch(["+\tx\r\n"]))
    assert out == "+\\tx\\r\n"


def test_render_patch_line_numbers() -> None:
    """Line numbers are zero-padded prefixes."""
    out: str = click.unstyle(render_patch("-a\n+b\n", show_line_numbers=True))
    assert out == "0001|-a\n0002|+b\n"


def test_render_patch_empty_input_is_safe() -> None:
    """Empty diff input should not raise and should return a string."""
    assert render_patch("") == ""
