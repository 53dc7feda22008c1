"""
Base exception classes for the BuildKit provider.
"""


class BuildkitProviderError(Exception):
    """Base exception for all buildkit_provider errors."""
    pass


class ConfigurationError(BuildkitProviderError):
    """Base exception for configuration errors."""

    def __init__(self, config_key: str = None, source: str = None, reason: str = None):
        self.config_key = config_key
        self.source = source
        self.reason = reason
        message = "Configuration error"
        if config_key:
            message += f" for '{config_key}'"
        if source:
            message += f" in '{source}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class StateError(BuildkitProviderError):
    """Base exception for operations attempted in the wrong lifecycle state."""

    def __init__(self, entity: str, current_state: str, required_state: str = None, operation: str = None):
        self.entity = entity
        self.current_state = current_state
        self.required_state = required_state
        self.operation = operation

        message = f"{entity} is in state '{current_state}'"
        if operation:
            message += f" but operation '{operation}' is not allowed"
        if required_state:
            message += f" (requires state '{required_state}')"
        super().__init__(message)


class NotFoundError(BuildkitProviderError):
    """Base exception for entity not found errors."""

    def __init__(self, entity_type: str, identifier: str = None):
        self.entity_type = entity_type
        self.identifier = identifier
        message = f"{entity_type} not found"
        if identifier:
            message += f" with identifier '{identifier}'"
        super().__init__(message)
