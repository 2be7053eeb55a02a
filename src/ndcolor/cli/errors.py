# topmark:header:start
#
#   project      : ndcolor
#   file         : errors.py
#   file_relpath : src/ndcolor/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 ndcolor authors
#
# topmark:header:end

"""Exceptions for the ndcolor CLI.

Usage:
    Raise these exceptions from the command to abort with a standardized
    message and exit code. Malformed JSON is never an error: such lines are
    passed through unchanged.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from ndcolor.cli_shared.exit_codes import ExitCode


class NdcolorError(click.ClickException):
    """Base class for all ndcolor CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            Unlike Click's default, this method does not add color.
            The project console highlights it when color is enabled.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class NdcolorUsageError(NdcolorError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class NdcolorIOError(NdcolorError):
    """Error for failures reading standard input or writing standard output."""

    exit_code = ExitCode.IO_ERROR


class NdcolorEncodingError(NdcolorError):
    """Error for input that is not valid UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR
