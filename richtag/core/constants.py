"""
richtag Constants

Global constants used throughout the richtag package.
"""

import logging
from enum import Enum

# =============================================================================
# TAG SYSTEM CONSTANTS
# =============================================================================

OPENING_DELIMITER = '<'
CLOSING_DELIMITER = '>'
END_TAG_DELIMITER = '/'
PARAMETER_DELIMITER = '='
PARAMETER_QUOTE = '"'

# Fully transparent color, used by typewriter effects to hide unrevealed text
CLEAR_COLOR_TAG_TEXT = "<color=#00000000>"

# =============================================================================
# LOGGING CONSTANTS
# =============================================================================

class LogLevel(Enum):
    """Log level enumeration."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
VERBOSE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(funcName)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "richtag"

# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

DEFAULT_CONFIG_PATH = "config/richtag_config.json"
ENV_LOG_LEVEL = "RICHTAG_LOG_LEVEL"
ENV_LOG_FILE = "RICHTAG_LOG_FILE"
