"""
Core enums for the BuildKit provider.
"""

from .provider import (
    CapabilityKind,
    DiagnosticSeverity,
    DiagnosticKind
)

__all__ = [
    'CapabilityKind',
    'DiagnosticSeverity',
    'DiagnosticKind'
]
