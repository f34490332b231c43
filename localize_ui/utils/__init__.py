"""Utility modules."""

from .colors import Colors
from .config import Config, ConfigValidationError, create_default_config
from .logging import configure_logging, get_logger, get_module_logger

__all__ = [
    'Colors',
    'Config',
    'ConfigValidationError',
    'create_default_config',
    'configure_logging',
    'get_logger',
    'get_module_logger',
]
