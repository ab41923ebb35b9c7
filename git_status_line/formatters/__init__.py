"""Formatting utilities for git-status-line.

Renders a parsed Status as the bracketed one-line summary shown in prompts.
"""

from .status_line import (
    format_flags,
    format_merge_state,
    format_short_oid,
    render,
)

__all__ = [
    "format_flags",
    "format_merge_state",
    "format_short_oid",
    "render",
]
