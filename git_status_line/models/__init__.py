"""Data models for git-status-line."""

from .status import MergeState, Status, Upstream

__all__ = ["MergeState", "Status", "Upstream"]
