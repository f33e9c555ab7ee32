"""Helpers for inspecting inline blocks of HTML documents."""

from __future__ import annotations

import re

_SCRIPT_SRC = re.compile(r"\bsrc\s*=", re.IGNORECASE)
_SCRIPT_TYPE = re.compile(r"""\btype\s*=\s*["']?([^"'\s>]+)""", re.IGNORECASE)
_JS_TYPES = frozenset({"text/javascript", "application/javascript", "module"})


def is_inline_javascript(attributes: str) -> bool:
    """Whether a ``<script>`` tag with these attributes holds inline JavaScript."""
    if _SCRIPT_SRC.search(attributes):
        return False
    match = _SCRIPT_TYPE.search(attributes)
    return match is None or match.group(1).lower() in _JS_TYPES
