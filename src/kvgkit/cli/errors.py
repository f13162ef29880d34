# topmark:header:start
#
#   project      : KvgKit
#   file         : errors.py
#   file_relpath : src/kvgkit/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""Exceptions for the KvgKit CLI.

Raise these from commands to stop with a standardized message and exit code.
Errors are shown through the project console when one is registered on the
Click context, and with Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from kvgkit.cli.exit_codes import ExitCode


class KvgCliError(click.ClickException):
    """Base class for all KvgKit CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text; color is applied in `show()`."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class KvgUsageError(KvgCliError):
    """Invalid flags or arguments (e.g. a base identifier without ``kvg:``)."""

    exit_code = ExitCode.USAGE_ERROR


class KvgDecodeError(KvgCliError):
    """A file could not be decoded as a KanjiVG document."""

    exit_code = ExitCode.DATA_ERROR


class KvgFileNotFoundError(KvgCliError):
    """An input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class KvgIOError(KvgCliError):
    """Reading or writing a file failed."""

    exit_code = ExitCode.IO_ERROR


class KvgConfigError(KvgCliError):
    """The configuration file is missing or invalid."""

    exit_code = ExitCode.CONFIG_ERROR
