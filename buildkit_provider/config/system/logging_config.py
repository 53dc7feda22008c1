"""
System logging configuration.

This module describes how the provider's structured logging is rendered
and provides presets for the common environments.
"""

from dataclasses import dataclass
from enum import Enum

from .config import SystemConfig, Environment


class LogFormat(Enum):
    """Log format types."""
    CONSOLE = "console"
    JSON = "json"


@dataclass
class LoggingConfig:
    """Logging configuration for the provider process."""

    global_level: str = "INFO"
    format_type: LogFormat = LogFormat.CONSOLE

    @property
    def json_logs(self) -> bool:
        return self.format_type == LogFormat.JSON

    def to_system_config(self, environment: Environment = Environment.PRODUCTION) -> SystemConfig:
        """Build the SystemConfig consumed by init_logger()."""
        return SystemConfig(
            environment=environment,
            debug_mode=self.global_level.upper() == "DEBUG",
            log_level=self.global_level,
            json_logs=self.json_logs
        )


def get_default_logging_config() -> LoggingConfig:
    """Get default logging configuration."""
    return LoggingConfig()


def get_production_logging_config() -> LoggingConfig:
    """Get production logging configuration: JSON output for log shippers."""
    return LoggingConfig(global_level="INFO", format_type=LogFormat.JSON)


def get_debug_logging_config() -> LoggingConfig:
    """Get debug logging configuration."""
    return LoggingConfig(global_level="DEBUG", format_type=LogFormat.CONSOLE)
