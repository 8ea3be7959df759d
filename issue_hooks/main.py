"""CLI entry point for issue-hooks."""

import sys
from pathlib import Path

import click
import structlog

from issue_hooks import __version__
from issue_hooks.cli.install import install_command
from issue_hooks.config.settings import LOG_LEVELS, HookSettings
from issue_hooks.engine.dispatcher import dispatch
from issue_hooks.enums import HookName
from issue_hooks.exceptions import ConfigurationError, IssueHooksError
from issue_hooks.git.message_file import CommitMessageFile, GitMessageSource
from issue_hooks.git.repository import GitRepository
from issue_hooks.utils.logging_config import configure_logging

log = structlog.get_logger(__name__)


@click.group()
@click.option(
    "--config",
    default=None,
    type=click.Path(dir_okay=False),
    help="Path to configuration file (default: .issue-hooks.yaml if present)",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level (overrides the configured level)",
)
@click.version_option(__version__, prog_name="issue-hooks")
@click.pass_context
def cli(ctx: click.Context, config: str | None, log_level: str | None) -> None:
    """issue-hooks: make every commit reference an issue."""
    try:
        settings = HookSettings.load(config)
    except ConfigurationError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    configure_logging(log_level or settings.log_level)
    ctx.obj = {"settings": settings}


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("hook")
@click.argument("message_file", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.argument("extra", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def run(ctx: click.Context, hook: str, message_file: Path | None, extra: tuple[str, ...]) -> None:
    """Run HOOK against the commit message in MESSAGE_FILE.

    \b
    Hooks:
      commit-msg          reject the commit unless it references an issue
      prepare-commit-msg  append the branch's issue number to the message

    Any further arguments git passes (message source, commit SHA) are
    ignored. Hooks issue-hooks does not handle succeed without doing
    anything.
    """
    hook_name = HookName.from_name(hook)
    if hook_name is None:
        log.debug("hook_unknown", hook=hook)
        return

    if message_file is None:
        raise click.UsageError(f"Missing argument 'MESSAGE_FILE' for {hook_name}.")

    settings = ctx.obj["settings"]
    source = GitMessageSource(CommitMessageFile(message_file), GitRepository(settings.repo_path))

    try:
        dispatch(hook_name, source)
    except IssueHooksError as e:
        click.echo(f"Error: {e}", err=True)
        log.debug("hook_failed", hook=str(hook_name), exc_info=True)
        sys.exit(1)
    except OSError as e:
        click.echo(f"Error: {e}", err=True)
        log.error("hook_io_error", hook=str(hook_name), path=str(message_file), exc_info=True)
        sys.exit(1)


cli.add_command(install_command)


if __name__ == "__main__":
    cli()
