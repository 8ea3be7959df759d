"""Access to the local Git repository a hook runs in.

Key Exports:
    GitRepository: Lazily opened repository used to read the checked-out
        branch and to locate the hooks directory.

Example:
    >>> from issue_hooks.git.repository import GitRepository
    >>> repository = GitRepository()
    >>> repository.current_branch()
    'issue-42-fix-login'
    >>> repository.hooks_dir()
    PosixPath('/home/me/project/.git/hooks')

Dependencies:
    Requires GitPython (gitpython) package for repository access.
"""

from pathlib import Path

try:
    import git
    from git.exc import GitError, InvalidGitRepositoryError, NoSuchPathError
except ImportError as e:
    raise ImportError("GitPython is required for repository access. Install it with: pip install gitpython") from e

import structlog

from issue_hooks.git.exceptions import BranchLookupError, NotGitRepositoryError

log = structlog.get_logger(__name__)

# Name reported for a detached HEAD, as `git rev-parse --abbrev-ref HEAD` does
DETACHED_HEAD = "HEAD"


class GitRepository:
    """Read-only view of the repository containing ``repo_path``.

    The git.Repo object is opened on first use, so creating an instance
    outside a repository only fails once it is queried.

    Attributes:
        repo_path: Resolved path the repository is searched from
    """

    def __init__(self, repo_path: str | Path = ".") -> None:
        """Initialize for a path inside the repository.

        Args:
            repo_path: Any path within the working tree; parent directories
                are searched automatically. Default is current directory.
        """
        self.repo_path = Path(repo_path).resolve()
        self._repo: git.Repo | None = None

    def _get_repo(self) -> git.Repo:
        """Open the repository, caching it after the first call.

        Raises:
            NotGitRepositoryError: If the path is not within a Git repository.
        """
        if self._repo is None:
            try:
                self._repo = git.Repo(self.repo_path, search_parent_directories=True)
            except (InvalidGitRepositoryError, NoSuchPathError) as e:
                raise NotGitRepositoryError(str(self.repo_path)) from e

        return self._repo

    def current_branch(self) -> str:
        """Return the name of the checked-out branch.

        A branch without commits yet (the first commit of a new repository)
        still reports its name. A detached HEAD is reported as ``"HEAD"``.

        Returns:
            Short branch name, e.g. ``feature-12-search``

        Raises:
            NotGitRepositoryError: If not within a Git repository.
            BranchLookupError: If HEAD cannot be resolved.
        """
        repo = self._get_repo()

        try:
            if repo.head.is_detached:
                log.debug("detached_head", path=str(self.repo_path))
                return DETACHED_HEAD
            branch = repo.active_branch.name
        except (GitError, TypeError, ValueError) as e:
            raise BranchLookupError(str(self.repo_path), str(e)) from e

        log.debug("current_branch", branch=branch)
        return branch

    def hooks_dir(self) -> Path:
        """Return the directory git runs hooks from.

        Honours ``core.hooksPath``; a relative value is taken relative to
        the top of the working tree. Otherwise ``<common git dir>/hooks``,
        which is shared by all worktrees.

        Raises:
            NotGitRepositoryError: If not within a Git repository.
        """
        repo = self._get_repo()

        hooks_path = repo.config_reader().get_value("core", "hooksPath", default="")
        if hooks_path:
            path = Path(str(hooks_path)).expanduser()
            if not path.is_absolute():
                base = repo.working_tree_dir or repo.git_dir
                path = Path(base) / path
            return path

        return Path(repo.common_dir) / "hooks"
