"""Git integration for issue-hooks.

Everything that touches the outside world lives here: the commit message
file git hands to a hook, and the repository that knows the checked-out
branch and where hooks are installed.

Example:
    >>> from issue_hooks.git import CommitMessageFile, GitMessageSource, GitRepository
    >>> source = GitMessageSource(CommitMessageFile(".git/COMMIT_EDITMSG"), GitRepository())
    >>> source.current_branch()
    'bug-17-null-title'

Error Handling:
    All exceptions inherit from GitDiscoveryError and include a hint.

    >>> from issue_hooks.git import GitRepository, NotGitRepositoryError
    >>> try:
    ...     GitRepository("/tmp").current_branch()
    ... except NotGitRepositoryError as e:
    ...     print(e)
    Not a Git repository: /tmp

    Hint: Run this command inside a Git repository, or create one with: git init
"""

from issue_hooks.git.exceptions import BranchLookupError, GitDiscoveryError, NotGitRepositoryError
from issue_hooks.git.message_file import CommitMessageFile, GitMessageSource
from issue_hooks.git.repository import DETACHED_HEAD, GitRepository

__all__ = [
    # Repository access
    "GitRepository",
    "DETACHED_HEAD",
    # Message source
    "CommitMessageFile",
    "GitMessageSource",
    # Exceptions
    "GitDiscoveryError",
    "NotGitRepositoryError",
    "BranchLookupError",
]
