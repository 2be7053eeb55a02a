# topmark:header:start
#
#   project      : ndcolor
#   file         : tokens.py
#   file_relpath : src/ndcolor/rendering/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 ndcolor authors
#
# topmark:header:end

"""Token kinds for colorized JSON rendering.

Every span of rendered text belongs to one `TokenKind`. The kind selects the
terminal color for that span; it carries no other meaning.

Design:
    `TokenKind` follows the same shape as a colored string enum: the member's
    `.value` stays a plain `str` (so hashing, equality and `repr` behave
    normally) while the display color is stored separately on the instance.
    The color is a Click color name, and `sgr` renders the matching
    *Select Graphic Rendition* sequence without any trailing reset so the
    color stays active until the next sequence.

Example:
    ```python
    TokenKind.KEY.value  # 'key'
    TokenKind.KEY.sgr  # '\\x1b[93m'
    TokenKind.NONE.sgr  # '\\x1b[0m'
    ```
"""

from __future__ import annotations

from enum import Enum

import click


class TokenKind(str, Enum):
    """Semantic class of a span of rendered text.

    Attributes:
        NONE: Structural punctuation and raw passthrough text (no color).
        KEY: Object keys (intense yellow).
        VALUE: Numbers, booleans and ``null`` (intense green).
        STRING: String contents (intense cyan).
    """

    _value_: str
    _fg: str | None

    def __new__(cls, text: str, fg: str | None) -> TokenKind:
        """Construct a token kind member.

        Args:
            text (str): The textual value for the enum member (stored in `_value_`).
            fg (str | None): Click foreground color name, or `None` for "no color".

        Returns:
            TokenKind: The newly constructed enum member.
        """
        obj: TokenKind = str.__new__(cls, text)
        obj._value_ = text
        obj._fg = fg
        return obj

    NONE = ("none", None)
    KEY = ("key", "bright_yellow")
    VALUE = ("value", "bright_green")
    STRING = ("string", "bright_cyan")

    @property
    def value(self) -> str:
        """Return the textual value of the token kind."""
        return self._value_

    @property
    def fg(self) -> str | None:
        """Return the Click foreground color name, or `None` for plain text."""
        return self._fg

    @property
    def sgr(self) -> str:
        """Return the escape sequence that switches the terminal to this kind.

        Returns:
            str: A foreground color sequence, or the reset-all sequence for `NONE`.
        """
        if self._fg is None:
            return click.style("", reset=True)
        return click.style("", fg=self._fg, reset=False)
