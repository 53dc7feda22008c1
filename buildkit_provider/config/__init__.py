"""
Configuration management system with domain-based architecture.

This module provides:
- Core schema declarations, diagnostics and raw config sources
- The provider domain: schema, canonical configuration and validation
- System-level settings and logging
"""

# Core infrastructure
from .core import (
    Schema, StringAttribute, ListNestedAttribute, NestedAttributeObject,
    RawConfigProvider, FileRawConfigProvider, RuntimeRawConfigProvider,
    ConfigValidator, SchemaValidator, Diagnostic, Diagnostics, ValidationResult
)

# Domain configurations
from .provider import (
    ProviderConfig, RegistryAuth, DEFAULT_BUILDKIT_HOST,
    PROVIDER_SCHEMA, get_provider_schema,
    ProviderConfigValidator, validate_provider_config
)

from .system import (
    SystemConfig, Environment, LogLevel,
    LoggingConfig, LogFormat, get_default_logging_config
)


def get_raw_config_provider(config_file: str = None, initial_config: dict = None) -> RawConfigProvider:
    """Get a raw config source: YAML-backed when a file is given, in-memory otherwise."""
    if config_file is not None:
        return FileRawConfigProvider(config_file=config_file)
    return RuntimeRawConfigProvider(initial_config=initial_config)


__all__ = [
    # Core infrastructure
    'Schema',
    'StringAttribute',
    'ListNestedAttribute',
    'NestedAttributeObject',
    'RawConfigProvider',
    'FileRawConfigProvider',
    'RuntimeRawConfigProvider',
    'ConfigValidator',
    'SchemaValidator',
    'Diagnostic',
    'Diagnostics',
    'ValidationResult',

    # Provider domain
    'ProviderConfig',
    'RegistryAuth',
    'DEFAULT_BUILDKIT_HOST',
    'PROVIDER_SCHEMA',
    'get_provider_schema',
    'ProviderConfigValidator',
    'validate_provider_config',

    # System domain
    'SystemConfig',
    'Environment',
    'LogLevel',
    'LoggingConfig',
    'LogFormat',
    'get_default_logging_config',

    # Convenience functions
    'get_raw_config_provider'
]
