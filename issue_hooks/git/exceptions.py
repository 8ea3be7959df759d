"""Exceptions raised while locating and querying the Git repository.

All errors carry an optional hint that is appended to the string form so
the committer sees how to fix the problem.
"""

from issue_hooks.exceptions import GitOperationError


class GitDiscoveryError(GitOperationError):
    """Base error for repository discovery problems.

    Attributes:
        message: Human-readable error description
        hint: Optional suggestion for resolving the problem
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        """Initialize exception.

        Args:
            message: Error message
            hint: Optional suggestion for resolution
        """
        self.hint = hint
        super().__init__(message)

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message}\n\nHint: {self.hint}"
        return self.message


class NotGitRepositoryError(GitDiscoveryError):
    """The path is not inside a Git repository.

    Attributes:
        path: Path that was searched
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            f"Not a Git repository: {path}",
            hint="Run this command inside a Git repository, or create one with: git init",
        )


class BranchLookupError(GitDiscoveryError):
    """The checked-out branch could not be determined."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(
            f"Cannot determine the current branch of {path}: {reason}",
            hint="Check the repository state with: git status",
        )
