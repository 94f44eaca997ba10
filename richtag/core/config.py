"""
richtag Configuration Management

Logging-related settings loaded from JSON with environment overrides.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import (
    LogLevel,
    DEFAULT_CONFIG_PATH,
    ENV_LOG_LEVEL,
    ENV_LOG_FILE,
)
from .env_loader import get_env_setting
from .exceptions import ConfigurationError, InvalidConfigError
from .logging_config import setup_logging


def _parse_log_level(value: Any) -> LogLevel:
    """Accept a LogLevel, its name (any case) or its numeric value."""
    if isinstance(value, LogLevel):
        return value
    if isinstance(value, str):
        try:
            return LogLevel[value.strip().upper()]
        except KeyError:
            raise InvalidConfigError(f"Unknown log level: {value}")
    try:
        return LogLevel(value)
    except ValueError:
        raise InvalidConfigError(f"Unknown log level: {value}")


@dataclass
class RichTagConfig:
    """Main configuration class for richtag."""

    log_level: LogLevel = LogLevel.INFO
    verbose_logging: bool = False
    log_file: Optional[Path] = None
    console_output: bool = True

    @classmethod
    def from_dict(cls, data: dict) -> 'RichTagConfig':
        """Create RichTagConfig from dictionary."""
        config = cls()

        if 'log_level' in data:
            config.log_level = _parse_log_level(data['log_level'])
        config.verbose_logging = data.get('verbose_logging', config.verbose_logging)
        config.console_output = data.get('console_output', config.console_output)
        if data.get('log_file'):
            config.log_file = Path(data['log_file'])

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'log_level': self.log_level.name,
            'verbose_logging': self.verbose_logging,
            'log_file': str(self.log_file) if self.log_file else None,
            'console_output': self.console_output,
        }


def _apply_env_overrides(config: RichTagConfig) -> RichTagConfig:
    level = get_env_setting(ENV_LOG_LEVEL)
    if level:
        config.log_level = _parse_log_level(level)

    log_file = get_env_setting(ENV_LOG_FILE)
    if log_file:
        config.log_file = Path(log_file)

    return config


def load_config(config_path: Path = None) -> RichTagConfig:
    """
    Load configuration from JSON file, then apply RICHTAG_* environment overrides.

    Args:
        config_path: Path to configuration file. If None, uses default.

    Returns:
        Loaded RichTagConfig instance
    """
    config_path = Path(config_path) if config_path else Path(DEFAULT_CONFIG_PATH)

    if not config_path.exists():
        return _apply_env_overrides(RichTagConfig())

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidConfigError(f"Invalid JSON in config file: {e}")
    except OSError as e:
        raise ConfigurationError(f"Failed to load config: {e}")

    if not isinstance(data, dict):
        raise InvalidConfigError("Config file must contain a JSON object")

    return _apply_env_overrides(RichTagConfig.from_dict(data))


def configure_logging(config: RichTagConfig) -> None:
    """Apply the logging section of a config."""
    setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        verbose=config.verbose_logging,
        console_output=config.console_output,
    )


# Global config instance
_config: Optional[RichTagConfig] = None


def get_config() -> RichTagConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: RichTagConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
