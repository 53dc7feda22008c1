"""
Core exceptions for the BuildKit provider.

Validation problems in user configuration are reported as diagnostics;
the exceptions below cover lifecycle misuse and unreadable config sources.
"""

from .base import (
    BuildkitProviderError,
    ConfigurationError,
    StateError,
    NotFoundError
)

from .provider import (
    ProviderNotConfiguredError,
    CapabilityNotFoundError
)

__all__ = [
    # Base exceptions
    'BuildkitProviderError',
    'ConfigurationError',
    'StateError',
    'NotFoundError',

    # Provider exceptions
    'ProviderNotConfiguredError',
    'CapabilityNotFoundError'
]
