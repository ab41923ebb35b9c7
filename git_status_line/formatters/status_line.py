"""Status line rendering."""

from typing import Optional

from git_status_line.constants import (
    FLAG_SYMBOLS,
    INITIAL_OID,
    SHORT_OID_LENGTH,
    OutputFormat,
)
from git_status_line.models.status import MergeState, Status


def format_short_oid(object_id: str) -> str:
    """
    Abbreviate a commit hash for display.

    Args:
        object_id: Full hash of HEAD, or the "(initial)" sentinel

    Returns:
        First 7 characters of the hash; the sentinel is returned unchanged
    """
    if object_id == INITIAL_OID:
        return object_id
    return object_id[:SHORT_OID_LENGTH]


def format_merge_state(merge_state: Optional[MergeState]) -> str:
    """
    Format the operation in progress as an annotation.

    Returns:
        " (merge)", " (rebase)", or "" when nothing is in progress
    """
    if merge_state is None:
        return ""
    return f" ({merge_state.value})"


def format_flags(status: Status) -> str:
    """
    Format the set flags as a run of symbols.

    Symbols always appear in the order A B + * % ? !, e.g. "AB+*?!".
    """
    return "".join(symbol for attr, symbol in FLAG_SYMBOLS if getattr(status, attr))


def render(status: Status, output_format: str = OutputFormat.BRANCH) -> str:
    """
    Render a status as a single bracketed line.

    Args:
        status: Parsed repository status
        output_format: OutputFormat.BRANCH for "[master 3845e7a AB+*]",
            OutputFormat.FLAGS for "[AB+*]"

    Returns:
        The status line. Missing fields are left out, so a bare Status
        still renders (as "[]").
    """
    flags = format_flags(status)
    if output_format == OutputFormat.FLAGS:
        return f"[{flags}]"

    head = " ".join(
        part
        for part in (status.branch_name, format_short_oid(status.object_id))
        if part
    )
    line = head + format_merge_state(status.merge_state)
    if flags:
        line = f"{line} {flags}" if line else flags
    return f"[{line}]"
