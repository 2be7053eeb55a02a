# topmark:header:start
#
#   project      : ndcolor
#   file         : __init__.py
#   file_relpath : tests/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ndcolor authors
#
# topmark:header:end

"""ndcolor test suite."""
