import logging
import re
from typing import Any

import structlog
from structlog.types import EventDict, Processor


SENSITIVE_KEYS = frozenset({"password", "token", "secret"})


def redact_sensitive_values(_, __, event_dict: EventDict) -> EventDict:
    """
    Registry credentials travel through the provider configuration, so any
    event key that looks like a secret is masked before rendering.
    """
    for key in event_dict:
        if key in SENSITIVE_KEYS and event_dict[key] is not None:
            event_dict[key] = "***"
    return event_dict


def setup_logging(json_logs: bool = False, log_level: str = "INFO"):
    """Configure structlog for the buildkit_provider package"""

    # The host may already have configured structlog for its own use
    try:
        current_config = structlog.get_config()
        if current_config and redact_sensitive_values in current_config.get('processors', []):
            return
    except (AttributeError, RuntimeError):
        pass

    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        if (isinstance(handler, logging.StreamHandler) and
                isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)):
            return

    timestamper = structlog.processors.TimeStamper(fmt="iso")

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.stdlib.ExtraAdder(),
        redact_sensitive_values,
        timestamper,
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        # Format the exception only for JSON logs, as we want to pretty-print them when
        # using the ConsoleRenderer
        shared_processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    log_renderer: structlog.types.Processor
    if json_logs:
        log_renderer = structlog.processors.JSONRenderer()
    else:
        log_renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        # These run ONLY on `logging` entries that do NOT originate within
        # structlog.
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            log_renderer,
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())


class BuildkitStructLogger:
    """
    Structured logger for the buildkit_provider package.
    Values passed to bind() are kept on the instance and added to every event
    emitted through it, so components can tag their own log lines.
    """

    def __init__(self, log_name: str = "buildkit_provider", **initial_values: Any):
        self.log_name = log_name
        self._context = dict(initial_values)
        # Stays a lazy proxy so loggers built before setup_logging() pick up its configuration
        self.logger = structlog.stdlib.get_logger(log_name, **self._context)

    @staticmethod
    def _to_snake_case(name):
        """Convert CamelCase to snake_case"""
        return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()

    def bind(self, *args, **new_values: Any) -> "BuildkitStructLogger":
        """
        Return a logger with additional context bound.

        Args:
            *args: Objects whose class name becomes a snake_case context key
                   and whose ``type_name`` (or class name) becomes its value
            **new_values: Key-value pairs to bind to the context
        """
        values = dict(self._context)
        for arg in args:
            key = self._to_snake_case(type(arg).__name__)
            values[key] = getattr(arg, "type_name", type(arg).__name__)
        values.update(new_values)

        return BuildkitStructLogger(self.log_name, **values)

    @staticmethod
    def bind_contextvars(**new_values: Any):
        """Bind values to the process-wide logging context"""
        structlog.contextvars.bind_contextvars(**new_values)

    @staticmethod
    def unbind(*keys: str):
        """Unbind keys from the logger context"""
        structlog.contextvars.unbind_contextvars(*keys)

    def debug(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.debug(event, *args, **kw)

    def info(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.info(event, *args, **kw)

    def warning(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.warning(event, *args, **kw)

    warn = warning

    def error(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.error(event, *args, **kw)

    def critical(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.critical(event, *args, **kw)

    def exception(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.exception(event, *args, **kw)


def get_buildkit_logger(log_name: str = "buildkit_provider") -> BuildkitStructLogger:
    """Return a structured logger without touching the global configuration."""
    return BuildkitStructLogger(log_name)


def init_logger(config):
    """
    Initialize the structured logger for buildkit_provider package.

    Args:
        config: SystemConfig (or any object with ``debug_mode``, ``log_level``
                and ``json_logs`` attributes)

    Returns:
        BuildkitStructLogger: Configured structured logger instance
    """
    log_level = "DEBUG" if config.debug_mode else config.log_level

    setup_logging(json_logs=config.json_logs, log_level=log_level)

    return BuildkitStructLogger("buildkit_provider")
