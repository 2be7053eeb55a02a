# topmark:header:start
#
#   project      : ndcolor
#   file         : main.py
#   file_relpath : src/ndcolor/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 ndcolor authors
#
# topmark:header:end

"""The ``ndcolor`` command.

Three modes, decided once per run:

- standard input is a terminal: nothing to read; show the help (when stdout
  is a terminal too) and exit with `ExitCode.FAILURE`;
- color disabled (stdout is not a terminal, ``--color=never``, ``NO_COLOR``):
  copy standard input to standard output byte for byte;
- otherwise: colorize standard input line by line.

Shared state (log level, color decision, console) is placed into ``ctx.obj``.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from ndcolor.cli.console import ClickConsole
from ndcolor.cli.errors import NdcolorEncodingError, NdcolorIOError
from ndcolor.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from ndcolor.cli_shared.color import ColorMode, resolve_color_mode
from ndcolor.cli_shared.exit_codes import ExitCode
from ndcolor.config.logging import get_logger, resolve_env_log_level, setup_logging
from ndcolor.constants import CLI_HELP, CLI_NAME, CLI_USAGE_EXAMPLES, NDCOLOR_VERSION
from ndcolor.pipeline.runner import colorize_binary_stream, copy_stream

if TYPE_CHECKING:
    from ndcolor.cli_shared.console_api import ConsoleLike

logger = get_logger(__name__)


def stdin_isatty() -> bool:
    """Return True if standard input is an interactive terminal."""
    try:
        return sys.stdin.isatty()
    except (AttributeError, OSError, ValueError):
        return False


def stdout_isatty() -> bool:
    """Return True if standard output is an interactive terminal."""
    try:
        return sys.stdout.isatty()
    except (AttributeError, OSError, ValueError):
        return False


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # NDCOLOR_LOG_LEVEL wins over -v/-q
    level_cli = resolve_verbosity(verbose, quiet)
    level_env = resolve_env_log_level()
    log_level = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(
        color_mode_override=effective_color_mode,
        stdout_isatty=stdout_isatty(),
    )
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    logger.debug("color mode %s -> colorize=%s", effective_color_mode.value, enable_color)

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.command(
    name=CLI_NAME,
    context_settings={"help_option_names": ["-h", "--help"]},
    help=CLI_HELP,
    epilog="\b\nExamples:\n" + "\n".join(f"  {example}" for example in CLI_USAGE_EXAMPLES),
)
@click.version_option(NDCOLOR_VERSION, "-V", "--version", prog_name=CLI_NAME)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the ndcolor CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if stdin_isatty():
        logger.info("standard input is a terminal; nothing to read")
        if stdout_isatty():
            console.print(ctx.get_help())
        ctx.exit(ExitCode.FAILURE)

    source = click.get_binary_stream("stdin")
    try:
        if not ctx.obj["color_enabled"]:
            copy_stream(source, click.get_binary_stream("stdout"))
            return
        count = colorize_binary_stream(source, click.get_text_stream("stdout", encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise NdcolorEncodingError(f"input is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise NdcolorIOError(str(exc)) from exc
    logger.info("processed %d line(s)", count)


if __name__ == "__main__":
    cli()
