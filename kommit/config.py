"""Configuration management for kommit.

Handles the optional user-level configuration stored in ~/.kommit/config.yaml.
kommit only reads this file while committing or completing; it is written
by 'kommit config init'.
"""

from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from kommit.constants import (
    DEFAULT_MESSAGE_HISTORY_LIMIT,
    DEFAULT_SCOPE_HISTORY_LIMIT,
    DEFAULT_TYPES,
)


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or is invalid."""
    pass


_CONFIG_DIR = Path.home() / ".kommit"


class KommitConfig(BaseModel):
    """Settings for completion suggestions.

    Attributes:
        types: Commit types offered for the first argument.
        scope_history_limit: Number of parsed commits mined for scopes.
        message_history_limit: Number of recent messages offered.
    """

    types: list[str] = Field(default_factory=lambda: DEFAULT_TYPES.copy())
    scope_history_limit: int = Field(default=DEFAULT_SCOPE_HISTORY_LIMIT, gt=0)
    message_history_limit: int = Field(default=DEFAULT_MESSAGE_HISTORY_LIMIT, gt=0)

    @field_validator("types")
    @classmethod
    def types_must_not_be_blank(cls, v: list[str]) -> list[str]:
        """Strip entries and drop empty ones."""
        cleaned = [t.strip() for t in v if t and t.strip()]
        if not cleaned:
            raise ValueError("types must contain at least one non-empty item")
        return cleaned


def get_config_dir() -> Path:
    """Get the kommit configuration directory.

    Returns:
        Path to ~/.kommit/
    """
    return _CONFIG_DIR


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.kommit/config.yaml
    """
    return get_config_dir() / "config.yaml"


def load_raw_config() -> Dict[str, Any]:
    """Load the configuration file as a dictionary.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        ConfigError: If the file can't be read or is not a YAML mapping.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise ConfigError(f"Failed to load config from {config_file}: expected a mapping")
    return config


def load_config() -> KommitConfig:
    """Load and validate the configuration, filling in defaults.

    Raises:
        ConfigError: If the file can't be read or holds invalid values.
    """
    raw = load_raw_config()
    try:
        return KommitConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {get_config_file_path()}: {e}")


def load_config_or_default() -> KommitConfig:
    """Load the configuration, using defaults if it is unusable.

    Used on paths that must never fail, such as shell completion.
    """
    try:
        return load_config()
    except ConfigError:
        return KommitConfig()


def initialize_default_config() -> bool:
    """Write config.yaml with default values if it doesn't exist.

    Returns:
        True if the file was created, False if it already existed.

    Raises:
        ConfigError: If the file can't be written.
    """
    config_file = get_config_file_path()

    if config_file.exists():
        return False

    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, "w") as f:
            yaml.dump(
                KommitConfig().model_dump(),
                f,
                default_flow_style=False,
                sort_keys=False,
            )
    except OSError as e:
        raise ConfigError(f"Failed to save config to {config_file}: {e}")
    return True
