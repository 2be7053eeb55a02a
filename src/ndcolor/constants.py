# topmark:header:start
#
#   project      : ndcolor
#   file         : constants.py
#   file_relpath : src/ndcolor/constants.py
#   license      : MIT
#   copyright    : (c) 2025 ndcolor authors
#
# topmark:header:end

"""ndcolor Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

NDCOLOR_VERSION: str = get_version("ndcolor")

CLI_NAME: str = "ndcolor"

CLI_HELP: str = (
    "Formats and colorizes newline delimited JSON for better readability.\n\n"
    "The input remains unchanged for non-JSON lines or when stdout isn't a terminal."
)

CLI_USAGE_EXAMPLES: tuple[str, ...] = (
    "ndcolor < file",
    "tail -f file | ndcolor",
    "docker logs --tail 100 -f container 2>&1 | ndcolor",
    "kubectl logs --tail 100 -f pod | ndcolor",
)
