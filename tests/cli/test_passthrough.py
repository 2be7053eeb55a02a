# topmark:header:start
#
#   project      : ndcolor
#   file         : test_passthrough.py
#   file_relpath : tests/cli/test_passthrough.py
#   license      : MIT
#   copyright    : (c) 2025 ndcolor authors
#
# topmark:header:end

"""CLI test: passthrough when color is disabled.

`CliRunner` output is not a terminal, so the default mode copies standard input
through unchanged, including bytes that are not valid UTF-8.
"""

from __future__ import annotations

import pytest

from tests.cli.conftest import assert_SUCCESS, run_cli

DATA: bytes = b'{"a":1}\r\nplain\n\xff\xfe raw bytes\n{"no":"newline"}'


pytestmark = pytest.mark.cli


@pytest.mark.parametrize(
    ("argv", "env"),
    [
        ([], None),
        (["--color", "auto"], None),
        (["--color", "never"], None),
        (["--no-color"], None),
        (["--no-color"], {"FORCE_COLOR": "1"}),
        ([], {"NO_COLOR": "1"}),
        ([], {"FORCE_COLOR": "0"}),
    ],
)
def test_passthrough_copies_input_unchanged(
    argv: list[str], env: dict[str, str | None] | None
) -> None:
    result = run_cli(argv, input_text=DATA, env=env)
    assert_SUCCESS(result)
    assert result.stdout_bytes == DATA


def test_no_color_wins_over_color_always() -> None:
    result = run_cli(["--color", "always", "--no-color"], input_text=b'{"a":1}\n')
    assert_SUCCESS(result)
    assert result.stdout_bytes == b'{"a":1}\n'
