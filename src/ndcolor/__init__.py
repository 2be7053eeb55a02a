# topmark:header:start
#
#   project      : ndcolor
#   file         : __init__.py
#   file_relpath : src/ndcolor/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ndcolor authors
#
# topmark:header:end

"""ndcolor package.

ndcolor formats and colorizes newline-delimited JSON for better readability.
Each input line that holds a non-empty JSON object or array is rendered as
colored ``key: value`` text; every other line is passed through unchanged.
"""

from __future__ import annotations
