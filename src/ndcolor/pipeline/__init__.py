# topmark:header:start
#
#   project      : ndcolor
#   file         : __init__.py
#   file_relpath : src/ndcolor/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ndcolor authors
#
# topmark:header:end

"""ndcolor line-processing pipeline.

- [`ndcolor.pipeline.classifier`][ndcolor.pipeline.classifier] decides whether a
  line is rendered structurally or passed through.
- [`ndcolor.pipeline.runner`][ndcolor.pipeline.runner] drives the per-line loop
  over a stream, and the byte passthrough copy.
"""

from __future__ import annotations
