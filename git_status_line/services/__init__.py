"""Services for git-status-line."""

from .git_service import GitService

__all__ = ["GitService"]
