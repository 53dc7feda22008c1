"""
Provider lifecycle exceptions.
"""

from .base import StateError, NotFoundError


class ProviderNotConfiguredError(StateError):
    """Raised when provider data is requested before a successful configure."""

    def __init__(self, entity: str = "provider", operation: str = None):
        super().__init__(
            entity=entity,
            current_state="unconfigured",
            required_state="configured",
            operation=operation
        )


class CapabilityNotFoundError(NotFoundError):
    """Raised when no registered capability matches the requested name."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(entity_type=f"{kind} capability", identifier=name)
