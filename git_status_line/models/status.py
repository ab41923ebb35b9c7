"""Status model and related enums"""
from enum import Enum
from dataclasses import dataclass, field
from typing import Optional

from git_status_line.constants import INITIAL_OID


class MergeState(Enum):
    """Operation in progress in the repository."""
    MERGE = "merge"
    REBASE = "rebase"


@dataclass(frozen=True)
class Upstream:
    """Tracking branch and whether the local branch has diverged from it."""
    name: str
    ahead: bool = False
    behind: bool = False


@dataclass(frozen=True)
class Status:
    """Summary of a repository's state, as parsed from a porcelain v2 report.

    Instances are immutable apart from ``merge_state``, which does not come
    from the report and is applied afterwards with :meth:`set_merge_state`.
    """
    object_id: str
    branch_name: Optional[str] = None  # None = detached HEAD
    upstream: Optional[Upstream] = None
    staged: bool = False
    unstaged: bool = False
    unmerged: bool = False
    untracked: bool = False
    ignored: bool = False
    merge_state: Optional[MergeState] = field(default=None, hash=False)  # set after parsing

    def set_merge_state(self, merge_state: Optional[MergeState]) -> None:
        """Record (or clear) the merge/rebase in progress."""
        object.__setattr__(self, "merge_state", merge_state)

    @property
    def ahead(self) -> bool:
        return self.upstream is not None and self.upstream.ahead

    @property
    def behind(self) -> bool:
        return self.upstream is not None and self.upstream.behind

    @property
    def is_detached(self) -> bool:
        return self.branch_name is None

    @property
    def is_initial(self) -> bool:
        """True when the repository has no commits yet."""
        return self.object_id == INITIAL_OID

    @property
    def is_clean(self) -> bool:
        """True when there is nothing to commit (ignored files don't count)."""
        return not (self.staged or self.unstaged or self.unmerged or self.untracked)

    def __str__(self) -> str:
        from git_status_line.formatters.status_line import render

        return render(self)
