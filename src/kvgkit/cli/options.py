# topmark:header:start
#
#   project      : KvgKit
#   file         : options.py
#   file_relpath : src/kvgkit/cli/options.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""Common CLI options and their resolution logic.

Reusable option decorators (verbosity, color, config, apply, paths) live here
so that the group and the commands stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from kvgkit.cli.errors import KvgUsageError
from kvgkit.config.logging import TRACE_LEVEL

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v``/``-q`` counts.

    Returns:
        int: ``-1`` when quiet, ``0`` by default, else the number of ``-v`` flags.

    Raises:
        KvgUsageError: If both flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise KvgUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def log_level_for_verbosity(verbosity: int) -> int:
    """Map program-output verbosity onto a logging level.

    ``-vv`` shows debug records and ``-vvv`` trace records; below that only
    critical records are logged.
    """
    if verbosity >= 3:
        return TRACE_LEVEL
    if verbosity == 2:
        return logging.DEBUG
    return logging.CRITICAL


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(*, cli_mode: ColorMode | None, stdout_isatty: bool | None = None) -> bool:
    """Determine whether color output should be enabled.

    Honors ``--color``/``--no-color`` first, then the ``FORCE_COLOR`` and
    ``NO_COLOR`` environment variables, and finally whether stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the mutually exclusive ``-v/--verbose`` and ``-q/--quiet`` counters."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Repeat for debug (-vv) and trace (-vvv) logging.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report problems.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` with choices (auto, always, never) and ``--no-color``."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config FILE``, which replaces config file discovery."""
    return click.option(
        "--config",
        "config_path",
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        default=None,
        help="Config file to use instead of the discovered kvgkit.toml/pyproject.toml.",
    )(f)


def apply_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--apply``; commands default to a dry run."""
    return click.option(
        "--apply",
        "apply_changes",
        is_flag=True,
        help="Write changes to files (off by default).",
    )(f)


def paths_argument(f: Callable[P, R]) -> Callable[P, R]:
    """Add the variadic ``PATHS`` argument (files or directories)."""
    return click.argument(
        "paths",
        nargs=-1,
        type=click.Path(path_type=str),
    )(f)
