"""
richtag Core Module

Contains core systems including configuration, constants, exceptions, and logging.
"""

from .config import RichTagConfig, load_config, configure_logging, get_config, set_config
from .constants import *
from .exceptions import *
from .logging_config import setup_logging, get_logger, LogContext

__all__ = [
    'RichTagConfig',
    'load_config',
    'configure_logging',
    'get_config',
    'set_config',
    'setup_logging',
    'get_logger',
    'LogContext',
]
