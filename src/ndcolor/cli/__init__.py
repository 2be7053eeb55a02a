# topmark:header:start
#
#   project      : ndcolor
#   file         : __init__.py
#   file_relpath : src/ndcolor/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ndcolor authors
#
# topmark:header:end

"""ndcolor CLI package.

This package holds the Click command definition and supporting utilities
for the ndcolor command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        ndcolor = "ndcolor.cli.main:cli"
"""

from __future__ import annotations
