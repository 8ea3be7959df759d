"""CLI command for installing the git hook shims."""

import shlex
import sys
from pathlib import Path

import click
import structlog

from issue_hooks.enums import HookName
from issue_hooks.exceptions import HookInstallError
from issue_hooks.git.exceptions import GitDiscoveryError
from issue_hooks.git.repository import GitRepository

log = structlog.get_logger(__name__)

# Marks hook files written by this tool; anything else is left alone
HOOK_MARKER = "# @issue-hooks"

SHIM_TEMPLATE = """#!/bin/sh
{marker}
# Installed by `issue-hooks install`. Remove this file to disable the hook.
exec {python} -m issue_hooks run {hook} "$@"
"""


def render_shim(hook: HookName, python: str | None = None) -> str:
    """Return the shell script git runs for ``hook``.

    Args:
        hook: Hook the script dispatches to
        python: Interpreter to run issue_hooks with (default: the current one)
    """
    return SHIM_TEMPLATE.format(
        marker=HOOK_MARKER,
        python=shlex.quote(python or sys.executable),
        hook=hook.value,
    )


def is_managed_hook(path: Path) -> bool:
    """Whether ``path`` is a hook script previously written by this tool."""
    try:
        head = path.read_text(encoding="utf-8", errors="replace").split("\n")[:5]
    except OSError:
        return False
    return any(line.strip() == HOOK_MARKER for line in head)


class HookInstaller:
    """Writes one shim per supported hook into the repository's hooks directory."""

    def __init__(self, repository: GitRepository, force: bool = False) -> None:
        self.repository = repository
        self.force = force

    def install(self) -> list[Path]:
        """Install every hook in HookName.

        Existing hooks written by another tool are only replaced with
        ``force``. Nothing is written unless every hook can be installed.

        Returns:
            Paths of the hook files written

        Raises:
            NotGitRepositoryError: If not within a Git repository.
            HookInstallError: If a foreign hook is in the way or a file
                cannot be written
        """
        hooks_dir = self.repository.hooks_dir()
        targets = [(hook, hooks_dir / hook.value) for hook in HookName]

        for hook, path in targets:
            if path.exists() and not self.force and not is_managed_hook(path):
                raise HookInstallError(
                    f"A {hook.value} hook already exists at {path}. Use --force to replace it.",
                    path=str(path),
                )

        written = []
        for hook, path in targets:
            try:
                hooks_dir.mkdir(parents=True, exist_ok=True)
                path.write_text(render_shim(hook), encoding="utf-8")
                path.chmod(0o755)
            except OSError as e:
                raise HookInstallError(f"Cannot write {hook.value} hook: {e}", path=str(path)) from e

            log.info("hook_installed", hook=hook.value, path=str(path))
            written.append(path)

        return written


@click.command(name="install")
@click.option(
    "--repo-path",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
    default=None,
    help="Path to Git repository (default: configured repo_path)",
)
@click.option(
    "--force",
    is_flag=True,
    help="Replace existing hooks that were not installed by issue-hooks",
)
@click.pass_context
def install_command(ctx: click.Context, repo_path: Path | None, force: bool) -> None:
    """Install the commit-msg and prepare-commit-msg hooks.

    Examples:

        # Install into the current repository
        issue-hooks install

        # Replace hooks written by another tool
        issue-hooks install --force
    """
    if repo_path is None:
        settings = ctx.obj["settings"] if ctx.obj else None
        repo_path = Path(settings.repo_path) if settings else Path(".")

    try:
        written = HookInstaller(GitRepository(repo_path), force=force).install()
    except GitDiscoveryError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except HookInstallError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    for path in written:
        click.echo(f"Installed {path}")
