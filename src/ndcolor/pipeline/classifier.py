# topmark:header:start
#
#   project      : ndcolor
#   file         : classifier.py
#   file_relpath : src/ndcolor/pipeline/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 ndcolor authors
#
# topmark:header:end

"""Line classification: structured JSON or raw text.

A line is rendered structurally only when it holds exactly one JSON document
whose top-level value is a non-empty object or a non-empty array. Everything
else is RAW and written back unchanged:

- text that is not a single JSON document (including an empty line and a valid
  document followed by trailing garbage),
- ``{}`` and ``[]``,
- bare scalars (``1``, ``"text"``, ``true``, ``null``).

Empty containers and scalars are only RAW at the top level; nested ones are
rendered like any other value.

This module is presentation-free: it knows nothing about colors or writers.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Final, NoReturn, cast

if TYPE_CHECKING:
    from collections.abc import Iterable

from ndcolor.config.logging import NdcolorLogger, get_logger

logger: NdcolorLogger = get_logger(__name__)


class LineClass(Enum):
    """Rendering path chosen for one input line."""

    RAW = "raw"
    STRUCTURED = "structured"


@dataclass(frozen=True)
class ClassifiedLine:
    """Outcome of classifying one line.

    Attributes:
        kind (LineClass): The rendering path.
        value (Any): The parsed document for `LineClass.STRUCTURED` lines (a
            non-empty `dict` or `list`); `None` for raw lines.
    """

    kind: LineClass
    value: Any = None


RAW_LINE: ClassifiedLine = ClassifiedLine(LineClass.RAW)


# Deepest accepted nesting of arrays and objects; one more level fails to parse.
MAX_NESTING_DEPTH: Final[int] = 127


def _reject_constant(name: str) -> NoReturn:
    # NaN / Infinity / -Infinity are accepted by `json` but are not JSON.
    raise ValueError(f"non-standard JSON constant: {name}")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"number out of range: {text}")
    return value


def nesting_depth(value: Any) -> int:
    """Return how many arrays/objects are nested in `value` (0 for a scalar)."""
    depth = 0
    stack: list[tuple[Any, int]] = [(value, 1)]
    while stack:
        item, level = stack.pop()
        if isinstance(item, dict):
            children: Iterable[Any] = cast("dict[str, Any]", item).values()
        elif isinstance(item, list):
            children = cast("list[Any]", item)
        else:
            continue
        depth = max(depth, level)
        stack.extend((child, level + 1) for child in children)
    return depth


def parse_document(line: str) -> Any:
    """Parse `line` as exactly one strict JSON document.

    Numbers that overflow a float, and documents nested deeper than
    `MAX_NESTING_DEPTH`, are rejected like any other malformed input.

    Args:
        line (str): The input line.

    Returns:
        Any: The parsed value.

    Raises:
        ValueError: If the line is not a single valid JSON document
            (`json.JSONDecodeError` is a subclass).
    """
    try:
        value: Any = json.loads(
            line,
            parse_constant=_reject_constant,
            parse_float=_parse_finite_float,
        )
    except RecursionError as exc:
        raise ValueError("document nested too deeply") from exc
    if nesting_depth(value) > MAX_NESTING_DEPTH:
        raise ValueError(f"document nested deeper than {MAX_NESTING_DEPTH} levels")
    if "\\u" in line:
        # `json` decodes unpaired "\ud800" escapes into lone surrogates, which
        # cannot be written as UTF-8.
        try:
            json.dumps(value, ensure_ascii=False).encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ValueError("unpaired surrogate escape in string") from exc
    return value


def classify_line(line: str) -> ClassifiedLine:
    """Decide how `line` is rendered.

    Args:
        line (str): One input line without its line terminator.

    Returns:
        ClassifiedLine: `LineClass.STRUCTURED` with the parsed object or array,
        or `RAW_LINE`.
    """
    try:
        value: Any = parse_document(line)
    except ValueError as exc:
        logger.trace("raw line (not JSON): %s", exc)
        return RAW_LINE

    if isinstance(value, (dict, list)) and value:
        logger.trace("structured line (%s)", type(value).__name__)
        return ClassifiedLine(LineClass.STRUCTURED, value)

    logger.trace("raw line (degenerate JSON value: %r)", value)
    return RAW_LINE
