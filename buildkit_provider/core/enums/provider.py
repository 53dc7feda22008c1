"""
Provider-related enums.
"""

from enum import Enum


class CapabilityKind(Enum):
    """Categories of capabilities a provider can expose."""
    RESOURCE = "resource"
    DATA_SOURCE = "data_source"
    FUNCTION = "function"


class DiagnosticSeverity(Enum):
    """Severity of a diagnostic returned to the host."""
    ERROR = "error"
    WARNING = "warning"


class DiagnosticKind(Enum):
    """Standardized diagnostic codes."""
    INVALID_REGISTRY_AUTH = "invalid_registry_auth"
    UNKNOWN_ATTRIBUTE = "unknown_attribute"
    INVALID_ATTRIBUTE_TYPE = "invalid_attribute_type"
