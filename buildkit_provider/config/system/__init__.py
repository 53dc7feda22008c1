"""
System configuration domain.

This module provides process-level settings and logging configuration.
"""

from .config import SystemConfig, Environment, LogLevel
from .logging_config import (
    LoggingConfig, LogFormat,
    get_default_logging_config, get_production_logging_config, get_debug_logging_config
)

__all__ = [
    # Configuration classes
    'SystemConfig',
    'Environment',
    'LogLevel',

    # Logging configuration
    'LoggingConfig',
    'LogFormat',
    'get_default_logging_config',
    'get_production_logging_config',
    'get_debug_logging_config'
]
