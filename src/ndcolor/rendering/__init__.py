# topmark:header:start
#
#   project      : ndcolor
#   file         : __init__.py
#   file_relpath : src/ndcolor/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ndcolor authors
#
# topmark:header:end

"""Rendering helpers for ndcolor.

This package turns parsed JSON values into colored terminal text.

Public modules:
    - ndcolor.rendering.tokens
    - ndcolor.rendering.writer
    - ndcolor.rendering.renderer
"""

from __future__ import annotations
