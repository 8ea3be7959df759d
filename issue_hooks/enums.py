"""Enumerations for the git hooks handled by issue-hooks."""

from enum import Enum


class HookName(str, Enum):
    """Git lifecycle hooks that issue-hooks knows how to run.

    Values are the hook file names git uses under ``.git/hooks``.
    """

    COMMIT_MSG = "commit-msg"
    PREPARE_COMMIT_MSG = "prepare-commit-msg"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "HookName | None":
        """Look up a hook by its git file name.

        Args:
            name: Hook name as passed on the command line

        Returns:
            Matching HookName, or None for hooks issue-hooks does not handle
        """
        try:
            return cls(name)
        except ValueError:
            return None
