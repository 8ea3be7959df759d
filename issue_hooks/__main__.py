"""Allow ``python -m issue_hooks``, which is what the installed shims run."""

from issue_hooks.main import cli

if __name__ == "__main__":
    cli(prog_name="issue-hooks")
