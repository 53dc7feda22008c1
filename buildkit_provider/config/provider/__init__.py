"""
Provider configuration domain.

This module provides the provider's configuration schema, the canonical
configuration classes and the value validator.
"""

from .config import ProviderConfig, RegistryAuth, DEFAULT_BUILDKIT_HOST
from .schema import PROVIDER_SCHEMA, get_provider_schema
from .validator import ProviderConfigValidator, validate_provider_config

__all__ = [
    # Configuration classes
    'ProviderConfig',
    'RegistryAuth',
    'DEFAULT_BUILDKIT_HOST',

    # Schema and validation
    'PROVIDER_SCHEMA',
    'get_provider_schema',
    'ProviderConfigValidator',
    'validate_provider_config'
]
