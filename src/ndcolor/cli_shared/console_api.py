# topmark:header:start
#
#   project      : ndcolor
#   file         : console_api.py
#   file_relpath : src/ndcolor/cli_shared/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 ndcolor authors
#
# topmark:header:end

"""Console protocol shared by the command and its error classes."""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """Sink for user-facing messages, kept apart from logging and rendered output."""

    def print(self, text: str = "") -> None:
        """Write a line of help or informational text to stdout."""
        ...

    def error(self, text: str) -> None:
        """Write a line to stderr, highlighted when color is enabled."""
        ...
