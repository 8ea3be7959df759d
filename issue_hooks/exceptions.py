"""Custom exception hierarchy for issue-hooks.

Exception Hierarchy:
    IssueHooksError (base)
    ├── ConfigurationError
    ├── MissingReferenceError
    ├── HookInstallError
    └── GitOperationError
        └── GitDiscoveryError (see issue_hooks.git.exceptions)

Every exception carries a human-readable ``message`` attribute. The CLI
prints that message prefixed with ``Error:`` and exits non-zero, so callers
can catch ``IssueHooksError`` once at the process boundary.

Example Usage:
    >>> from issue_hooks.exceptions import ConfigurationError
    >>> try:
    ...     load_config(path)
    ... except FileNotFoundError as e:
    ...     raise ConfigurationError(f"Config file not found: {path}") from e
"""

MISSING_REFERENCE_MESSAGE = "Commit message must include a reference to a GitHub issue."


class IssueHooksError(Exception):
    """Base exception for all issue-hooks errors.

    Attributes:
        message: Human-readable error description
    """

    def __init__(self, message: str) -> None:
        """Initialize exception.

        Args:
            message: Error message
        """
        self.message = message
        super().__init__(message)


class ConfigurationError(IssueHooksError):
    """Configuration-related errors.

    Examples:
        - Configuration file not found
        - Invalid YAML syntax
        - Unknown log level
    """

    pass


class MissingReferenceError(IssueHooksError):
    """Neither the commit message nor the branch name references an issue.

    Raised by the validation policy only. It is never caught inside the
    engine; the CLI reports it and rejects the commit.
    """

    def __init__(self, message: str = MISSING_REFERENCE_MESSAGE) -> None:
        super().__init__(message)


class HookInstallError(IssueHooksError):
    """A hook script could not be installed.

    Attributes:
        path: Hook file that was not written
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        """Initialize exception.

        Args:
            message: Error message
            path: Hook file that was not written
        """
        self.path = path
        super().__init__(message)


class GitOperationError(IssueHooksError):
    """Git operation errors.

    Raised when the repository cannot be opened or queried. See
    issue_hooks.git.exceptions for the more specific discovery errors.
    """

    pass
