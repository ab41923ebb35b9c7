"""Custom exceptions for git-status-line"""

from typing import Optional


class GitStatusLineError(Exception):
    """Base exception for all git-status-line errors."""
    pass


class MalformedReportError(GitStatusLineError):
    """Exception raised when a porcelain status report cannot be parsed."""

    def __init__(
        self,
        message: str,
        line: Optional[str] = None,
        line_number: Optional[int] = None,
    ):
        self.message = message
        self.line = line
        self.line_number = line_number

        error_msg = "Malformed status report"
        if line_number is not None:
            error_msg += f" at line {line_number}"
        error_msg += f": {message}"
        if line is not None:
            error_msg += f" ({line!r})"

        super().__init__(error_msg)


class GitCommandFailedError(GitStatusLineError):
    """Exception raised when a git command exits unsuccessfully."""

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class NotAGitRepositoryError(GitStatusLineError):
    """Exception raised when the target path is not inside a git repository."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Not a git repository: {path}")
