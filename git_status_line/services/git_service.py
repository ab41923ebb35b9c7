"""Git operations service"""
import os
import git
from typing import Union, Optional, List, TYPE_CHECKING

from git_status_line.constants import MERGE_HEAD_FILE, REBASE_DIRS
from git_status_line.exceptions import GitCommandFailedError, NotAGitRepositoryError
from git_status_line.logging_config import get_logger
from git_status_line.models.status import MergeState, Status
from git_status_line.parser import parse

if TYPE_CHECKING:
    from git_status_line.config import Config

logger = get_logger(__name__)


class GitService:
    """Service for reading repository state through git."""

    def __init__(self, repo_path: str, config: Union['Config', dict]):
        """Initialize the service.

        Args:
            repo_path: Path inside the git repository (string path, not repo object)
            config: Configuration dictionary or Config object
        """
        self.repo_path = repo_path
        self.config = config
        self.show_ignored = config.get('show_ignored', False)
        self.untracked_files = config.get('untracked_files', 'all')
        logger.debug(f"Git service initialized for {repo_path}")

    def _get_repo(self) -> git.Repo:
        """Open the repository containing repo_path.

        GitPython repos are lightweight - they don't clone, just open the
        existing repo - so a fresh instance is created for each call.

        Raises:
            NotAGitRepositoryError: If repo_path is not inside a git repository
        """
        try:
            return git.Repo(self.repo_path, search_parent_directories=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError):
            raise NotAGitRepositoryError(self.repo_path) from None

    def _status_args(self) -> List[str]:
        args = ["--porcelain=2", "--branch", f"--untracked-files={self.untracked_files}"]
        if self.show_ignored:
            args.append("--ignored")
        return args

    def _read_status_report(self, repo: git.Repo) -> str:
        args = self._status_args()
        logger.debug(f"Running git status {' '.join(args)}")
        try:
            return repo.git.status(*args)
        except git.exc.GitCommandError as e:
            stderr = (e.stderr or "").strip()
            if stderr:
                error_msg = f"exit {e.status}: {stderr}"
            else:
                error_msg = f"exit code {e.status}"
            raise GitCommandFailedError("status", error_msg) from e

    def _detect_merge_state(self, git_dir: str) -> Optional[MergeState]:
        # A rebase that stops on a conflict leaves no MERGE_HEAD
        for name in REBASE_DIRS:
            if os.path.isdir(os.path.join(git_dir, name)):
                logger.debug(f"Found {name} in {git_dir}, rebase in progress")
                return MergeState.REBASE

        if os.path.isfile(os.path.join(git_dir, MERGE_HEAD_FILE)):
            logger.debug(f"Found {MERGE_HEAD_FILE} in {git_dir}, merge in progress")
            return MergeState.MERGE

        return None

    def get_status_report(self) -> str:
        """Run `git status` and return its porcelain v2 report."""
        return self._read_status_report(self._get_repo())

    def get_merge_state(self) -> Optional[MergeState]:
        """Detect a merge or rebase in progress."""
        return self._detect_merge_state(self._get_repo().git_dir)

    def get_status(self) -> Status:
        """Get the parsed status of the repository, with its merge state applied."""
        repo = self._get_repo()
        status = parse(self._read_status_report(repo))
        status.set_merge_state(self._detect_merge_state(repo.git_dir))
        return status
