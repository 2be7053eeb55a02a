# topmark:header:start
#
#   project      : ndcolor
#   file         : __init__.py
#   file_relpath : src/ndcolor/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ndcolor authors
#
# topmark:header:end

"""Click-independent helpers shared by CLI frontends (color mode, exit codes, console API)."""

from __future__ import annotations
