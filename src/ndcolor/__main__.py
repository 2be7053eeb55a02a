# topmark:header:start
#
#   project      : ndcolor
#   file         : __main__.py
#   file_relpath : src/ndcolor/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 ndcolor authors
#
# topmark:header:end

"""Module entry point for running ndcolor via ``python -m ndcolor``.

It delegates directly to :func:`ndcolor.cli.main.cli`, so both launch styles
share a single CLI entry point.

Examples:
    Colorize a log file::

        python -m ndcolor < app.log
"""

from __future__ import annotations

from ndcolor.cli.main import cli

if __name__ == "__main__":
    cli()
