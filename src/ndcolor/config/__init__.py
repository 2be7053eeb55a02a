# topmark:header:start
#
#   project      : ndcolor
#   file         : __init__.py
#   file_relpath : src/ndcolor/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ndcolor authors
#
# topmark:header:end

"""Runtime configuration for ndcolor.

ndcolor reads no configuration file. Its only runtime knobs are command-line
options and environment variables; this package holds the logging setup that
honors them (see [`ndcolor.config.logging`][ndcolor.config.logging]).
"""

from __future__ import annotations
