"""Shared constants for git-status-line."""

from typing import List, Tuple


# Sentinels used by `git status --porcelain=2 --branch`
INITIAL_OID = "(initial)"
DETACHED_HEAD = "(detached)"

# Divergence tokens meaning "no commits" on either side of `branch.ab`
AHEAD_NONE = "+0"
BEHIND_NONE = "-0"

# Placeholder in an XY change code for "no change on this side"
UNCHANGED = "."

SHORT_OID_LENGTH = 7


class OutputFormat:
    """Supported renderings of the status line."""

    BRANCH = "branch"  # [master 3845e7a AB+*]
    FLAGS = "flags"  # [AB+*]


OUTPUT_FORMATS: List[str] = [OutputFormat.BRANCH, OutputFormat.FLAGS]

UNTRACKED_FILES_MODES: List[str] = ["all", "normal", "no"]


# Flag symbols in display order, keyed by the Status attribute that backs them
FLAG_SYMBOLS: List[Tuple[str, str]] = [
    ("ahead", "A"),
    ("behind", "B"),
    ("staged", "+"),
    ("unstaged", "*"),
    ("unmerged", "%"),
    ("untracked", "?"),
    ("ignored", "!"),
]


# Files and directories inside the git dir that mark an operation in progress
MERGE_HEAD_FILE = "MERGE_HEAD"
REBASE_DIRS: List[str] = ["rebase-merge", "rebase-apply"]


# Legend text for --help
LEGEND_TEXT = """
Legend:
A = Ahead of upstream      B = Behind upstream
+ = Staged changes         * = Unstaged changes
% = Unmerged (conflicts)   ? = Untracked files
! = Ignored files
"""
