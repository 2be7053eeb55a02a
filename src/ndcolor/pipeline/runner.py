# topmark:header:start
#
#   project      : ndcolor
#   file         : runner.py
#   file_relpath : src/ndcolor/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 ndcolor authors
#
# topmark:header:end

"""Stream drivers: colorize a line stream, or copy it through untouched.

The colorizing driver owns exactly one `DeferredColorWriter` per output stream
and processes the input strictly line by line: read, classify, render, flush.
Any I/O error aborts the run and propagates to the caller.
"""

from __future__ import annotations

import shutil
from typing import TYPE_CHECKING

from ndcolor.config.logging import NdcolorLogger, get_logger
from ndcolor.rendering.renderer import render_line
from ndcolor.rendering.writer import DeferredColorWriter

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from typing import BinaryIO, TextIO

logger: NdcolorLogger = get_logger(__name__)


def strip_line_terminator(line: str) -> str:
    """Remove one trailing ``\\n`` (or ``\\r\\n``) from `line`."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def colorize_stream(lines: Iterable[str], sink: TextIO, *, flush: bool = False) -> int:
    """Render every line of `lines` to `sink`.

    Args:
        lines (Iterable[str]): Input lines, with or without line terminators.
        sink (TextIO): Output text stream.
        flush (bool): If True, flush `sink` after every line.

    Returns:
        int: The number of lines processed.
    """
    writer = DeferredColorWriter(sink)
    count: int = 0
    for line in lines:
        render_line(writer, strip_line_terminator(line))
        if flush:
            writer.flush()
        count += 1
    logger.debug("colorized %d line(s)", count)
    return count


def decode_lines(source: BinaryIO) -> Iterator[str]:
    """Yield the lines of a binary stream decoded as strict UTF-8.

    Args:
        source (BinaryIO): Input byte stream.

    Yields:
        str: One decoded line, including its line terminator.

    Raises:
        UnicodeDecodeError: If a line is not valid UTF-8.
    """
    # readline() instead of iteration so interactive pipes are not read ahead
    for raw in iter(source.readline, b""):
        yield raw.decode("utf-8")


def colorize_binary_stream(source: BinaryIO, sink: TextIO) -> int:
    """Colorize a UTF-8 byte stream, flushing after each line.

    Args:
        source (BinaryIO): Input byte stream (standard input).
        sink (TextIO): Output text stream (standard output).

    Returns:
        int: The number of lines processed.
    """
    return colorize_stream(decode_lines(source), sink, flush=True)


def copy_stream(source: BinaryIO, sink: BinaryIO) -> None:
    """Copy `source` to `sink` unchanged (passthrough mode).

    Args:
        source (BinaryIO): Input byte stream.
        sink (BinaryIO): Output byte stream.
    """
    logger.debug("passthrough: copying input unchanged")
    shutil.copyfileobj(source, sink)
    sink.flush()
