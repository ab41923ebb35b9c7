"""Pytest fixtures for git-status-line tests"""
import tempfile
from pathlib import Path
import pytest
import git


OID = "3845e7a3c3aadaaebb2d1b261bf07a9357d35a79"


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_config():
    """Create a mock configuration dictionary."""
    return {
        'output_format': 'branch',
        'show_ignored': False,
        'untracked_files': 'all',
        'verbose': False,
        'debug': False,
    }


@pytest.fixture
def clean_report():
    """Report for a clean checkout of master."""
    return (
        f"# branch.oid {OID}\n"
        "# branch.head master\n"
    )


@pytest.fixture
def dirty_report():
    """Report with upstream divergence and every kind of tracked/untracked change."""
    return (
        f"# branch.oid {OID}\n"
        "# branch.head master\n"
        "# branch.upstream origin/master\n"
        "# branch.ab +1 -1\n"
        "1 D. N... 100644 000000 000000 1290f45e7ad7575848a436d8febbd6c4ba07f1f3 "
        "0000000000000000000000000000000000000000 README.md\n"
        "1 .M N... 100644 100644 100644 5e8a8090976077ddf16252a560460a20dbbdd6a5 "
        "5e8a8090976077ddf16252a560460a20dbbdd6a5 gh-pages.sh\n"
        "? foo.txt\n"
        "! ignored.txt\n"
    )


def _configure_user(repo):
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()


@pytest.fixture
def empty_repo(temp_dir):
    """Create a Git repository with no commits."""
    repo_path = temp_dir / "empty_repo"
    repo_path.mkdir()
    repo = git.Repo.init(repo_path)
    _configure_user(repo)

    yield repo

    repo.close()


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with one commit on main."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)
    _configure_user(repo)

    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    # Rename master to main if needed
    repo.git.branch('-M', 'main')

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_upstream(git_repo, temp_dir):
    """Create a repository whose main branch tracks a bare origin."""
    origin_path = temp_dir / "origin.git"
    git.Repo.init(origin_path, bare=True).close()

    git_repo.create_remote('origin', str(origin_path))
    git_repo.git.push('-u', 'origin', 'main')

    yield git_repo


@pytest.fixture
def git_repo_with_conflict(git_repo):
    """Create a repository stopped in the middle of a conflicting merge."""
    repo_path = Path(git_repo.working_dir)
    readme = repo_path / "README.md"

    git_repo.git.checkout('-b', 'feature/conflict')
    readme.write_text("feature side\n")
    git_repo.index.add(["README.md"])
    git_repo.index.commit("Change README on feature")

    git_repo.git.checkout('main')
    readme.write_text("main side\n")
    git_repo.index.add(["README.md"])
    git_repo.index.commit("Change README on main")

    with pytest.raises(git.exc.GitCommandError):
        git_repo.git.merge('feature/conflict')

    yield git_repo
