"""Pytest configuration and shared fixtures."""

import shutil
import subprocess
from pathlib import Path

import pytest
import structlog


class InMemoryMessageSource:
    """MessageSource holding the message and branch in memory."""

    def __init__(self, message: str, branch: str) -> None:
        self.message = message
        self.branch = branch
        self.writes: list[str] = []

    def read_message(self) -> str:
        return self.message

    def write_message(self, text: str) -> None:
        self.writes.append(text)
        self.message = text

    def current_branch(self) -> str:
        return self.branch


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo logging configuration done by CLI invocations."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def make_source():
    """Factory for in-memory message sources."""

    def _make(message: str, branch: str = "master") -> InMemoryMessageSource:
        return InMemoryMessageSource(message, branch)

    return _make


def _git(cwd: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=cwd, check=True, capture_output=True)


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Temporary Git repository with one commit on branch ``master``."""
    if shutil.which("git") is None:
        pytest.skip("git executable not available")

    repo_dir = tmp_path / "repo"
    repo_dir.mkdir()

    _git(repo_dir, "init")
    _git(repo_dir, "config", "user.email", "test@example.com")
    _git(repo_dir, "config", "user.name", "Test User")
    _git(repo_dir, "config", "commit.gpgsign", "false")
    _git(repo_dir, "symbolic-ref", "HEAD", "refs/heads/master")

    (repo_dir / "README.md").write_text("# Test Repository\n")
    _git(repo_dir, "add", "README.md")
    _git(repo_dir, "commit", "-m", "Initial commit #1")

    return repo_dir


@pytest.fixture
def checkout(git_repo: Path):
    """Switch the temporary repository to a new branch."""

    def _checkout(branch: str) -> Path:
        _git(git_repo, "checkout", "-b", branch)
        return git_repo

    return _checkout
