"""
Core configuration management components.

This module provides the foundational components for configuration management:
- Schema: attribute declarations used for host introspection
- SchemaValidator: shape checks of raw configuration against a Schema
- Diagnostic/Diagnostics: structured validation output
- RawConfigProvider: sources of raw configuration (YAML file, in-memory)
"""

from .schema import (
    Schema, StringAttribute, ListNestedAttribute, NestedAttributeObject, Attribute
)
from .provider import RawConfigProvider, FileRawConfigProvider, RuntimeRawConfigProvider
from .validator import (
    ConfigValidator, SchemaValidator, Diagnostic, Diagnostics, ValidationResult
)

__all__ = [
    # Schema
    'Schema',
    'StringAttribute',
    'ListNestedAttribute',
    'NestedAttributeObject',
    'Attribute',

    # Providers
    'RawConfigProvider',
    'FileRawConfigProvider',
    'RuntimeRawConfigProvider',

    # Validators
    'ConfigValidator',
    'SchemaValidator',
    'Diagnostic',
    'Diagnostics',
    'ValidationResult'
]
