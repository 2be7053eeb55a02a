# topmark:header:start
#
#   project      : ndcolor
#   file         : renderer.py
#   file_relpath : src/ndcolor/rendering/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 ndcolor authors
#
# topmark:header:end

"""Recursive, colorized rendering of parsed JSON values.

Rendering rules:
    - strings: unquoted content (`TokenKind.STRING`)
    - numbers, booleans, ``null``: canonical JSON text (`TokenKind.VALUE`)
    - arrays: ``[a, b]``
    - objects: ``{ k: v k2: v2 }``, or ``{}`` when empty
    - the top-level object of a line: ``k: v k2: v2`` (no braces)

Structural punctuation is written as `TokenKind.NONE`. All output goes through
a `DeferredColorWriter`, which decides when escape sequences are needed.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from ndcolor.pipeline.classifier import LineClass, classify_line
from ndcolor.rendering.tokens import TokenKind

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ndcolor.rendering.writer import DeferredColorWriter


def scalar_text(value: Any) -> str:
    """Return the canonical JSON text of a scalar (number, boolean or ``null``).

    Examples:
        >>> scalar_text(100.0)
        '100.0'
        >>> scalar_text(None)
        'null'
    """
    return json.dumps(value)


def render_value(writer: DeferredColorWriter, value: Any) -> None:
    """Render a nested JSON value.

    Args:
        writer (DeferredColorWriter): Destination writer.
        value (Any): A value produced by `json.loads`.
    """
    if isinstance(value, str):
        writer.set_kind(TokenKind.STRING).write(value)
    elif isinstance(value, list):
        writer.set_kind(TokenKind.NONE).write("[")
        for index, item in enumerate(value):
            if index != 0:
                writer.set_kind(TokenKind.NONE).write(", ")
            render_value(writer, item)
        writer.set_kind(TokenKind.NONE).write("]")
    elif isinstance(value, dict):
        if not value:
            writer.set_kind(TokenKind.NONE).write("{}")
        else:
            writer.set_kind(TokenKind.NONE).write("{ ")
            render_pairs(writer, value)
            writer.set_kind(TokenKind.NONE).write(" }")
    else:
        writer.set_kind(TokenKind.VALUE).write(scalar_text(value))


def render_pairs(writer: DeferredColorWriter, mapping: Mapping[str, Any]) -> None:
    """Render the key/value pairs of an object without surrounding braces.

    Args:
        writer (DeferredColorWriter): Destination writer.
        mapping (Mapping[str, Any]): The object's pairs, in document order.
    """
    for index, (key, value) in enumerate(mapping.items()):
        if index != 0:
            writer.set_kind(TokenKind.NONE).write(" ")
        writer.set_kind(TokenKind.KEY).write(key)
        writer.set_kind(TokenKind.NONE).write(": ")
        render_value(writer, value)


def render_line(writer: DeferredColorWriter, line: str) -> None:
    """Classify and render one input line, followed by a newline.

    Raw lines (non-JSON text, empty containers, bare scalars) are written
    unchanged. The trailing newline is always written as `TokenKind.NONE`, which
    leaves the terminal uncolored between lines.

    Args:
        writer (DeferredColorWriter): Destination writer, shared across lines.
        line (str): One input line without its line terminator.
    """
    classified = classify_line(line)
    if classified.kind is LineClass.RAW:
        writer.set_kind(TokenKind.NONE).write(line)
    elif isinstance(classified.value, dict):
        render_pairs(writer, classified.value)
    else:
        render_value(writer, classified.value)
    writer.set_kind(TokenKind.NONE).write("\n")
