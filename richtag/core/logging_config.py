"""
richtag Logging Configuration

Logging setup for the richtag package. Everything logs under the "richtag"
logger so host applications can route or silence it in one place. The first
get_logger call applies the global RichTagConfig.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from .constants import (
    LogLevel,
    DEFAULT_FORMAT,
    VERBOSE_FORMAT,
    DATE_FORMAT,
    ROOT_LOGGER_NAME,
)

# Logger registry
_loggers: dict = {}
_initialized: bool = False
_log_file: Optional[Path] = None


def setup_logging(
    level: LogLevel = LogLevel.INFO,
    log_file: Optional[Path] = None,
    verbose: bool = False,
    console_output: bool = True
) -> None:
    """
    Set up logging configuration for the package.

    Args:
        level: Minimum log level to capture
        log_file: Optional path to log file
        verbose: If True, use verbose format with line numbers
        console_output: If True, output to console
    """
    global _initialized, _log_file

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level.value)

    # Clear existing handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    log_format = VERBOSE_FORMAT if verbose else DEFAULT_FORMAT
    formatter = logging.Formatter(log_format, datefmt=DATE_FORMAT)

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_file:
        _log_file = Path(log_file)
        _log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(_log_file, encoding='utf-8')
        file_handler.setLevel(level.value)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _initialized = True
    root_logger.debug(f"Logging initialized - Level: {level.name}, Verbose: {verbose}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Name of the module/component

    Returns:
        Configured logger instance
    """
    if not _initialized:
        # config imports this module, so resolve it on first use
        from .config import configure_logging, get_config
        configure_logging(get_config())

    prefix = ROOT_LOGGER_NAME
    full_name = name if name == prefix or name.startswith(prefix + ".") else f"{prefix}.{name}"

    if full_name not in _loggers:
        _loggers[full_name] = logging.getLogger(full_name)

    return _loggers[full_name]


class LogContext:
    """Context manager for temporary log level changes."""

    def __init__(self, logger: logging.Logger, level: LogLevel):
        self.logger = logger
        self.new_level = level.value
        self.old_level = logger.level

    def __enter__(self):
        self.logger.setLevel(self.new_level)
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.logger.setLevel(self.old_level)
        return False
