# topmark:header:start
#
#   project      : ndcolor
#   file         : color.py
#   file_relpath : src/ndcolor/cli_shared/color.py
#   license      : MIT
#   copyright    : (c) 2025 ndcolor authors
#
# topmark:header:end

"""Click-independent color helpers for ndcolor.

This module provides:

- the `ColorMode` enum,
- color-mode resolution based on CLI flags, environment, and TTY status.

The resolved decision selects between the colorizing pipeline and the byte
passthrough copy.
"""

from __future__ import annotations

import os
import sys
from enum import Enum

from ndcolor.config.logging import NdcolorLogger, get_logger

logger: NdcolorLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Colorize only when stdout is a TTY.
        ALWAYS: Force colorization regardless of TTY status (e.g. ``| less -R``).
        NEVER: Never colorize; input is copied through unchanged.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **CLI override**: If `color_mode_override` is `ALWAYS` → True; if `NEVER` → False.
        2. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) → True
            - `NO_COLOR` (set to any value) → False
        3. **Auto**: If none of the above decide, return `stdout.isatty()`.

    Args:
        color_mode_override: Parsed `ColorMode` value from `--color`;
            `None` or `AUTO` defer to the environment and the TTY check.
        stdout_isatty: Optional override for TTY detection. When `None`, the function
            calls `sys.stdout.isatty()` and falls back to `False` on error.

    Returns:
        True if ANSI color should be enabled; False otherwise.

    Examples:
        >>> resolve_color_mode(color_mode_override=ColorMode.NEVER)
        False
        >>> resolve_color_mode(color_mode_override=None, stdout_isatty=True)
        True
    """
    # 1) CLI overrides
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    # 2) Env overrides
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        logger.debug("color forced by FORCE_COLOR=%s", force_color)
        return True
    if os.getenv("NO_COLOR") is not None:
        logger.debug("color disabled by NO_COLOR")
        return False

    # 3) Auto: TTY?
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, OSError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)
