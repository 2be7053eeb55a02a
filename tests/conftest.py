# topmark:header:start
#
#   project      : ndcolor
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 ndcolor authors
#
# topmark:header:end

"""Pytest configuration for the ndcolor test suite.

Sets up global fixtures and the logging configuration for test runs, and
provides small helpers shared across test packages.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

import pytest
from hypothesis import settings

from ndcolor.config import logging

if TYPE_CHECKING:
    from collections.abc import Iterator

# `nox -s property_test` selects this profile
settings.register_profile("thorough", max_examples=1000, deadline=None)

SGR_RE: re.Pattern[str] = re.compile(r"\x1b\[[0-9;]*m")


def strip_sgr(text: str) -> str:
    """Remove ANSI color sequences from `text`."""
    return SGR_RE.sub("", text)


def count_sgr(text: str) -> int:
    """Return the number of ANSI color sequences in `text`."""
    return len(SGR_RE.findall(text))


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure the developer's shell does not steer logging or color during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.

    Yields:
        None: Control returns to the test.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    yield


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so diagnostics are captured during tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
