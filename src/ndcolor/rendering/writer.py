# topmark:header:start
#
#   project      : ndcolor
#   file         : writer.py
#   file_relpath : src/ndcolor/rendering/writer.py
#   license      : MIT
#   copyright    : (c) 2025 ndcolor authors
#
# topmark:header:end

"""Deferred color writer.

`DeferredColorWriter` sits between the renderer and the output stream. Callers
announce the kind of the next text with `set_kind()` and then `write()` the
text. A color-control sequence is only emitted when a non-empty write follows
a change of kind, so runs of same-kind text (including structural separators
spread across several calls) cost a single escape sequence.

State machine:
    - ``kind``: the most recently requested `TokenKind`.
    - ``applied``: the kind whose sequence was last written to the sink.
    - ``deferred``: `True` while ``kind`` differs from ``applied``.

Empty writes leave the state untouched; a pending change stays pending until
real text arrives.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ndcolor.config.logging import get_logger
from ndcolor.rendering.tokens import TokenKind

if TYPE_CHECKING:
    from typing import TextIO

    from ndcolor.config.logging import NdcolorLogger

logger: NdcolorLogger = get_logger(__name__)


class DeferredColorWriter:
    """Write text to a stream, emitting color sequences only on kind changes.

    One instance must be used for the whole lifetime of an output stream: the
    writer assumes the terminal is in the state it last put it in.

    Args:
        sink (TextIO): The text stream receiving text and escape sequences.

    Attributes:
        sink (TextIO): The underlying text stream.
        kind (TokenKind): The most recently requested token kind.
        applied (TokenKind): The kind the terminal is currently showing.
        deferred (bool): Whether a color sequence is due before the next write.
    """

    sink: TextIO
    kind: TokenKind
    applied: TokenKind
    deferred: bool

    def __init__(self, sink: TextIO) -> None:
        self.sink = sink
        self.kind = TokenKind.NONE
        self.applied = TokenKind.NONE
        self.deferred = False

    def set_kind(self, kind: TokenKind) -> DeferredColorWriter:
        """Request the kind of the next text without writing anything.

        Args:
            kind (TokenKind): The kind of the text that follows.

        Returns:
            DeferredColorWriter: This writer, so calls can be chained
            (``writer.set_kind(TokenKind.KEY).write(key)``).
        """
        self.kind = kind
        self.deferred = kind != self.applied
        return self

    def write(self, text: str) -> None:
        """Write `text`, preceded by a color sequence if one is due.

        Args:
            text (str): Literal text; written unmodified.

        Raises:
            OSError: Propagated from the sink.
        """
        if not text:
            return
        if self.deferred:
            logger.trace("flush color for kind %s", self.kind.value)
            self.sink.write(self.kind.sgr)
            self.applied = self.kind
            self.deferred = False
        self.sink.write(text)

    def flush(self) -> None:
        """Flush the underlying stream."""
        self.sink.flush()
