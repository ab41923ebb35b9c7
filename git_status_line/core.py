"""Core functionality for git-status-line"""

from typing import Union

from git_status_line.config import Config
from git_status_line.formatters import render
from git_status_line.logging_config import get_logger
from git_status_line.models.status import Status
from git_status_line.services.git_service import GitService

logger = get_logger(__name__)


class StatusLine:
    """Builds the status line for a repository."""

    def __init__(self, repo_path: str, config: Union[Config, dict]):
        """Initialize with a Config, or a plain dict that is validated into one."""
        if isinstance(config, dict):
            config = Config.from_dict(config)
        self.repo_path = repo_path
        self.config = config
        self.git_service = GitService(repo_path, config)

    def get_status(self) -> Status:
        return self.git_service.get_status()

    def get_line(self) -> str:
        """Return the rendered status line."""
        status = self.get_status()
        line = render(status, self.config.output_format)
        logger.info(f"Status line for {self.repo_path}: {line}")
        return line
