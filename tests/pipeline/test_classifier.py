# topmark:header:start
#
#   project      : ndcolor
#   file         : test_classifier.py
#   file_relpath : tests/pipeline/test_classifier.py
#   license      : MIT
#   copyright    : (c) 2025 ndcolor authors
#
# topmark:header:end

"""Line classifier: structured documents versus raw lines."""

from __future__ import annotations

import pytest

from ndcolor.pipeline.classifier import (
    MAX_NESTING_DEPTH,
    RAW_LINE,
    LineClass,
    classify_line,
    nesting_depth,
    parse_document,
)


@pytest.mark.parametrize(
    ("line", "value"),
    [
        ('{"a":1}', {"a": 1}),
        ("[1]", [1]),
        ('  {"a": [] }  ', {"a": []}),
        ("[{}]", [{}]),
        ("[null]", [None]),
    ],
)
def test_non_empty_containers_are_structured(line: str, value: object) -> None:
    classified = classify_line(line)
    assert classified.kind is LineClass.STRUCTURED
    assert classified.value == value


@pytest.mark.parametrize(
    "line",
    [
        "",
        "   ",
        "text",
        "{}",
        "[]",
        "0",
        "1.5",
        '"string"',
        "true",
        "false",
        "null",
        '{"a":1} trailing',
        '{"a":1}{"b":2}',
        "[1,]",
        "{'a': 1}",
        "NaN",
        '{"a": Infinity}',
        "[-Infinity]",
        "[1e400]",
        '{"a":-1e400}',
        '["\\ud800"]',
    ],
)
def test_everything_else_is_raw(line: str) -> None:
    classified = classify_line(line)
    assert classified is RAW_LINE
    assert classified.value is None


def test_object_preserves_document_order() -> None:
    classified = classify_line('{"z": 1, "a": 2, "m": 3}')
    assert list(classified.value) == ["z", "a", "m"]


def test_duplicate_key_keeps_last_value() -> None:
    assert classify_line('{"a": 1, "a": 2}').value == {"a": 2}


def test_paired_surrogate_escape_is_accepted() -> None:
    assert parse_document('["\\ud83d\\ude00"]') == ["\U0001f600"]


def test_parse_document_rejects_non_standard_constants() -> None:
    with pytest.raises(ValueError, match="non-standard JSON constant"):
        parse_document("[NaN]")


def test_parse_document_rejects_numbers_out_of_float_range() -> None:
    with pytest.raises(ValueError, match="number out of range"):
        parse_document('{"a": 1e400}')


def test_large_finite_numbers_are_structured() -> None:
    assert classify_line("[1e308, -1.5e-300]").value == [1e308, -1.5e-300]


@pytest.mark.parametrize(
    ("value", "depth"),
    [(1, 0), ([], 1), ({"a": [1, {"b": []}]}, 3), ([[], [[[]]]], 4)],
)
def test_nesting_depth(value: object, depth: int) -> None:
    assert nesting_depth(value) == depth


def test_deepest_accepted_nesting_is_structured() -> None:
    depth = MAX_NESTING_DEPTH
    classified = classify_line("[" * depth + "]" * depth)
    assert classified.kind is LineClass.STRUCTURED


@pytest.mark.parametrize("depth", [MAX_NESTING_DEPTH + 1, 1000, 100_000])
def test_excessive_nesting_is_raw(depth: int) -> None:
    assert classify_line("[" * depth + "]" * depth) is RAW_LINE
    assert classify_line('{"a":' * depth + "1" + "}" * depth) is RAW_LINE
