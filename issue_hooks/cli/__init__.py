"""CLI commands for issue-hooks.

The CLI is built using Click with the main entry point ``issue-hooks``
(see issue_hooks.main).

Key Commands:
    run (issue_hooks.main):
        Executed by git itself through the installed shims.

    install (issue_hooks.cli.install):
        Writes the commit-msg and prepare-commit-msg shims into the
        repository's hooks directory.

Usage Examples:
    Install the hooks::

        $ issue-hooks install

    Run a hook by hand::

        $ issue-hooks run commit-msg .git/COMMIT_EDITMSG
"""

from issue_hooks.cli.install import install_command

__all__ = ["install_command"]
