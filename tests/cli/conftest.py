# topmark:header:start
#
#   project      : ndcolor
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 ndcolor authors
#
# topmark:header:end

"""CLI test helpers for running ndcolor through Click's `CliRunner`.

Under `CliRunner` neither standard input nor standard output is a terminal, so
the command runs in passthrough mode unless a test forces color with
``--color always`` (or ``FORCE_COLOR``).
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any, Sequence

import pytest
from click.testing import CliRunner, Result

from ndcolor.cli.main import cli
from ndcolor.cli_shared.exit_codes import ExitCode
from ndcolor.config import logging

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
    env: Mapping[str, str | None] | None = None,
) -> Result:
    """Invoke the CLI with the given arguments and standard input.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--color", "always"]``.
        input_text (str | bytes | IO[Any] | None): Standard input for the command.
        env (Mapping[str, str | None] | None): Environment overrides for the run.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["--color", "always"], input_text='{"a":1}\\n')
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text, env=env)


def colorize(input_text: str | bytes) -> Result:
    """Run the CLI with color forced on."""
    return run_cli(["--color", "always"], input_text=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit_code(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with `code`.

    Args:
        result (Result): The Result object returned by `run_cli`.
        code (ExitCode): Expected exit code.
    """
    assert result.exit_code == code, result.output


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Detach the log handler the command bound to the runner's stderr.

    Yields:
        None: Control returns to the test.
    """
    yield
    logging.setup_logging(level=logging.logging.CRITICAL)
