"""
System domain configuration classes.

This module defines process-level settings for the provider: environment,
debug mode and logging output. All settings can be overridden via
environment variables.

Environment Variables:
----------------------
BUILDKIT_PROVIDER_ENV: Environment (development, test, production). Default: production
BUILDKIT_PROVIDER_DEBUG: Enable debug logging ("1", "true", "yes"). Default: off
LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: INFO
BUILDKIT_PROVIDER_JSON_LOGS: Render logs as JSON ("1", "true", "yes"). Default: off
"""

import os
from dataclasses import dataclass
from typing import Dict, Any, Mapping, Optional
from enum import Enum


TRUTHY = {"1", "true", "yes", "on"}


class Environment(Enum):
    """Environment types."""
    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


class LogLevel(Enum):
    """Logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class SystemConfig:
    """
    Main system configuration class.
    """

    name: str = "buildkit"
    environment: Environment = Environment.PRODUCTION
    debug_mode: bool = False
    log_level: str = LogLevel.INFO.value
    json_logs: bool = False

    def __post_init__(self):
        self.log_level = LogLevel(self.log_level.upper()).value

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'name': self.name,
            'environment': self.environment.value,
            'debug_mode': self.debug_mode,
            'log_level': self.log_level,
            'json_logs': self.json_logs
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SystemConfig':
        """Create configuration from dictionary."""
        config = cls()

        config.name = data.get('name', config.name)
        if 'environment' in data:
            config.environment = Environment(data['environment'])
        config.debug_mode = data.get('debug_mode', config.debug_mode)
        if 'log_level' in data:
            config.log_level = LogLevel(data['log_level'].upper()).value
        config.json_logs = data.get('json_logs', config.json_logs)

        return config

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'SystemConfig':
        """Create configuration from environment variables."""
        if environ is None:
            environ = os.environ

        return cls(
            environment=Environment(environ.get('BUILDKIT_PROVIDER_ENV', Environment.PRODUCTION.value)),
            debug_mode=environ.get('BUILDKIT_PROVIDER_DEBUG', '').lower() in TRUTHY,
            log_level=environ.get('LOG_LEVEL', LogLevel.INFO.value),
            json_logs=environ.get('BUILDKIT_PROVIDER_JSON_LOGS', '').lower() in TRUTHY
        )
