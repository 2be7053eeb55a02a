# topmark:header:start
#
#   project      : ndcolor
#   file         : options.py
#   file_relpath : src/ndcolor/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 ndcolor authors
#
# topmark:header:end

"""Reusable CLI options (verbosity, color) and their resolution logic.

The helpers here are Click-aware; the color decision itself lives in
[`ndcolor.cli_shared.color`][ndcolor.cli_shared.color].
"""

import logging
from typing import Callable, ParamSpec, TypeVar

import click

from ndcolor.cli.errors import NdcolorUsageError
from ndcolor.cli_shared.color import ColorMode
from ndcolor.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")

# Verbosity levels, mapped to standard logging levels
LOG_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "ERROR": logging.ERROR,
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int | None:
    """Resolve the diagnostic logging level from verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level, or None when neither flag was given.

    Raises:
        NdcolorUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set ERROR level.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise NdcolorUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:  # -vv
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:  # -v
        return LOG_LEVELS["INFO"]
    if quiet_count >= 1:  # -q
        return LOG_LEVELS["ERROR"]
    return None


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Log diagnostics to stderr. Repeat for more detail (up to -vvv).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors.",
    )(f)
    return f


def _to_color_mode(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> ColorMode | None:
    return None if value is None else ColorMode(value)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([mode.value for mode in ColorMode], case_sensitive=False),
        default=None,
        callback=_to_color_mode,
        help="Colorize: auto (default, only when stdout is a terminal), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Copy input through unchanged (equivalent to --color=never).",
    )(f)
    return f
