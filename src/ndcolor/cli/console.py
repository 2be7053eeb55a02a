# topmark:header:start
#
#   project      : ndcolor
#   file         : console.py
#   file_relpath : src/ndcolor/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 ndcolor authors
#
# topmark:header:end

"""Click-backed console for help text and fatal error messages.

The colorized data stream never goes through this console.
"""

from __future__ import annotations

import sys
from typing import TextIO

import click

from ndcolor.cli_shared.console_api import ConsoleLike


class ClickConsole(ConsoleLike):
    """Writes program messages: help to stdout, errors to stderr.

    Args:
        enable_color (bool): Whether error messages are highlighted.
        out (TextIO | None): Stream for help text, `sys.stdout` by default.
        err (TextIO | None): Stream for errors, `sys.stderr` by default.
    """

    ERROR_COLOR = "bright_red"

    def __init__(
        self,
        *,
        enable_color: bool = False,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "") -> None:
        click.echo(text, file=self.out, color=self.enable_color)

    def error(self, text: str) -> None:
        if self.enable_color:
            text = click.style(text, fg=self.ERROR_COLOR)
        click.echo(text, file=self.err, color=self.enable_color)
