"""
Configuration Loading and Management Functions.

Handles loading and saving MeetingForge configuration and applying
environment variable overrides.

Configuration precedence: 1. Env vars, 2. YAML file, 3. Defaults

Environment variables
---------------------
    MEETINGFORGE_LOG_LEVEL            logging.level
    MEETINGFORGE_LOG_FILE             logging.file
    MEETINGFORGE_SUMMARY_MAX_LENGTH   summary.default_max_length
"""

import os
import re
from pathlib import Path
from typing import Any, Optional, TYPE_CHECKING

import yaml

from meetingforge.core.exceptions import ConfigurationError
from meetingforge.core.logging import configure_logging, get_logger

if TYPE_CHECKING:
    from meetingforge.core.config import Config

logger = get_logger(__name__)

CONFIG_FILENAMES = ("meetingforge.yaml", "config.yaml")
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def expand_env_vars(value: Any) -> Any:
    """Recursively expand environment variables in config values.

    Strings may use ``${VAR_NAME}`` or ``${VAR_NAME:default}``; dicts and
    lists are walked recursively, other values are returned unchanged.

    Args:
        value: Configuration value (string, dict, list, or primitive)

    Returns:
        Value with all environment variables expanded
    """
    if isinstance(value, str):
        pattern = r"\$\{([^}:]+)(?::([^}]*))?\}"

        def replace_env_var(match: re.Match) -> str:
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)

        return re.sub(pattern, replace_env_var, value)
    elif isinstance(value, dict):
        return {k: expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def _apply_env_overrides(config: "Config") -> "Config":
    """
    Apply environment variable overrides to configuration.

    Invalid values are ignored with a warning rather than failing startup.
    """
    level = os.environ.get("MEETINGFORGE_LOG_LEVEL")
    if level:
        if level.upper() in _LOG_LEVELS:
            config.logging.level = level.upper()
        else:
            logger.warning("Ignoring invalid MEETINGFORGE_LOG_LEVEL", value=level)

    log_file = os.environ.get("MEETINGFORGE_LOG_FILE")
    if log_file:
        config.logging.file = log_file

    max_length = os.environ.get("MEETINGFORGE_SUMMARY_MAX_LENGTH")
    if max_length:
        try:
            parsed = int(max_length)
        except ValueError:
            parsed = -1
        if parsed >= 0:
            config.summary.default_max_length = parsed
        else:
            logger.warning(
                "Ignoring invalid MEETINGFORGE_SUMMARY_MAX_LENGTH", value=max_length
            )
    return config


def find_config_file(base_path: Path) -> Optional[Path]:
    """Return the first known config file present in base_path."""
    for filename in CONFIG_FILENAMES:
        candidate = base_path / filename
        if candidate.exists():
            return candidate
    return None


def load_config(
    config_path: Optional[Path] = None,
    base_path: Optional[Path] = None,
    *,
    strict: bool = False,
) -> "Config":
    """
    Load configuration from YAML file with environment variable overrides.

    Args:
        config_path: Path to config file. Defaults to meetingforge.yaml or
            config.yaml in base_path.
        base_path: Base path for the project. Defaults to current directory.
        strict: Raise ConfigurationError for unreadable or malformed files
            instead of falling back to defaults.

    Returns:
        Config object with all settings.

    Raises:
        ConfigurationError: Unreadable file in strict mode.
        ConfigValidationError: A value is out of range (always raised).
    """
    from meetingforge.core.config import Config

    base_path = base_path or Path.cwd()

    if config_path is None:
        config_path = find_config_file(base_path)
    if config_path is None or not config_path.exists():
        return _create_default_config(base_path)

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        if strict:
            raise ConfigurationError(
                f"Could not load config from {config_path}: {e}"
            ) from e
        logger.warning(
            "Could not load config, using defaults", path=str(config_path), error=str(e)
        )
        return _create_default_config(base_path)

    if not isinstance(data, dict):
        if strict:
            raise ConfigurationError(
                f"Config file {config_path} must contain a mapping at top level"
            )
        logger.warning("Config file is not a mapping, using defaults", path=str(config_path))
        return _create_default_config(base_path)

    config = Config.from_dict(data, base_path)
    return _apply_env_overrides(config)


def _create_default_config(base_path: Path) -> "Config":
    """Create default configuration with environment overrides."""
    from meetingforge.core.config import Config

    config = Config()
    config._base_path = base_path
    return _apply_env_overrides(config)


def save_config(config: "Config", config_path: Optional[Path] = None) -> Path:
    """Save configuration to YAML file and return the path written."""
    if config_path is None:
        config_path = config._base_path / CONFIG_FILENAMES[0]

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
    return config_path


def apply_logging_settings(config: "Config") -> None:
    """Configure package logging from the ``logging`` section of a config."""
    configure_logging(
        level=config.logging.level,
        log_file=config.log_path,
        console=config.logging.console,
    )
