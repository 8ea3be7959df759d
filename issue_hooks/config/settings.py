"""
Configuration for issue-hooks using Pydantic settings.

Settings come from defaults, ``ISSUE_HOOKS_*`` environment variables and an
optional YAML file. Values set in the file win over the environment.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from issue_hooks.exceptions import ConfigurationError

DEFAULT_CONFIG_FILE = ".issue-hooks.yaml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class HookSettings(BaseSettings):
    """Runtime settings for the hook runner.

    Example:
        >>> settings = HookSettings.from_yaml(".issue-hooks.yaml")
        >>> settings.log_level
        'WARNING'
    """

    model_config = SettingsConfigDict(
        env_prefix="ISSUE_HOOKS_",
        case_sensitive=False,
    )

    log_level: str = Field(default="WARNING", description="Minimum level for log output on stderr")
    repo_path: str = Field(default=".", description="Path inside the repository to run against")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise and check the log level name.

        Raises:
            ValueError: If the level is not a standard logging level
        """
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)} (got: {v})")
        return level

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> HookSettings:
        """Load settings from YAML file with environment variable interpolation.

        Supports ${VAR_NAME} syntax for environment variable substitution.
        An empty file yields the defaults.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            HookSettings instance

        Raises:
            ConfigurationError: If config file is invalid or missing
        """
        config_file = Path(config_path)
        if not config_file.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            yaml_content = config_file.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file: {config_path}") from e

        try:
            yaml_content = cls._interpolate_env_vars(yaml_content)
        except ValueError as e:
            raise ConfigurationError(f"Invalid environment variable reference in config: {e}") from e

        try:
            config_dict = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {config_path}: {e}") from e

        if config_dict is None:
            config_dict = {}
        if not isinstance(config_dict, dict):
            raise ConfigurationError("Configuration must be a YAML object, not a list or scalar")

        try:
            return cls(**config_dict)
        except Exception as e:
            raise ConfigurationError(f"Failed to validate configuration: {e}") from e

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> HookSettings:
        """Load settings for a hook run.

        Uses ``config_path`` when given, else ``.issue-hooks.yaml`` in the
        working directory when it exists, else defaults and environment.

        Raises:
            ConfigurationError: If the chosen file is missing or invalid
        """
        if config_path is not None:
            return cls.from_yaml(config_path)

        if Path(DEFAULT_CONFIG_FILE).is_file():
            return cls.from_yaml(DEFAULT_CONFIG_FILE)

        try:
            return cls()
        except Exception as e:
            raise ConfigurationError(f"Failed to validate configuration: {e}") from e

    @staticmethod
    def _interpolate_env_vars(content: str) -> str:
        """Interpolate ${VAR_NAME} placeholders with environment variables.

        Supports two syntaxes:
        - ${VAR_NAME} - Required environment variable (raises if not set)
        - ${VAR_NAME:-default} - Optional with default value

        YAML comment lines are left unchanged.

        Raises:
            ValueError: If a required environment variable is not set
        """
        pattern = re.compile(r"\$\{([A-Z_][A-Z0-9_]*)(?::-([^}]*))?\}")

        def replace_var(match: re.Match[str]) -> str:
            var_name = match.group(1)
            default_value = match.group(2)
            value = os.getenv(var_name)

            if value is not None:
                return value
            elif default_value is not None:
                return default_value
            else:
                raise ValueError(f"Environment variable {var_name} is not set")

        lines = []
        for line in content.splitlines(keepends=True):
            if line.lstrip().startswith("#"):
                lines.append(line)
            else:
                lines.append(pattern.sub(replace_var, line))
        return "".join(lines)
