"""Configuration for issue-hooks.

Example:
    >>> from issue_hooks.config import HookSettings
    >>> settings = HookSettings.load()
    >>> settings.repo_path
    '.'
"""

from issue_hooks.config.settings import DEFAULT_CONFIG_FILE, HookSettings

__all__ = ["DEFAULT_CONFIG_FILE", "HookSettings"]
