"""
Provider configuration validation.

Turns raw provider configuration into a ProviderConfig, applying defaults
for omitted values and rejecting incomplete registry_auth blocks.
"""

from typing import Dict, Any, Optional, Tuple

from buildkit_provider.config.core import ConfigValidator, Diagnostic, Diagnostics, ValidationResult
from buildkit_provider.core.enums import DiagnosticKind
from .config import ProviderConfig, RegistryAuth, DEFAULT_BUILDKIT_HOST


REGISTRY_AUTH_FIELDS = ("address", "username", "password")


def invalid_registry_auth() -> Diagnostic:
    return Diagnostic.error(
        DiagnosticKind.INVALID_REGISTRY_AUTH,
        "Invalid Registry Auth Configuration",
        "All fields (address, username, password) must be provided for each registry_auth block."
    )


class ProviderConfigValidator(ConfigValidator):
    """
    Value validator for the provider domain.

    Expects input that already passed the schema shape check. Registry auth
    entries are checked in order and validation stops at the first
    incomplete entry with a single diagnostic.
    """

    def __init__(self):
        super().__init__("provider")

    def validate(self, config: Dict[str, Any]) -> ValidationResult[ProviderConfig]:
        result = ValidationResult()

        buildkit_host = config.get("buildkit_host")
        if buildkit_host is None:
            buildkit_host = DEFAULT_BUILDKIT_HOST

        entries = []
        for auth in config.get("registry_auth") or ():
            if any(auth.get(name) is None for name in REGISTRY_AUTH_FIELDS):
                result.diagnostics.append(invalid_registry_auth())
                self.logger.debug("Registry auth validation failed", entries_checked=len(entries) + 1)
                return result
            entries.append(RegistryAuth(
                address=auth["address"],
                username=auth["username"],
                password=auth["password"]
            ))

        result.value = ProviderConfig(
            buildkit_host=buildkit_host,
            registry_auth=tuple(entries)
        )
        return result


def validate_provider_config(config_data: Dict[str, Any]) -> Tuple[Optional[ProviderConfig], Diagnostics]:
    """
    Validate provider configuration data.

    Parameters
    ----------
    config_data : Dict[str, Any]
        Raw provider configuration, already shape-checked against PROVIDER_SCHEMA

    Returns
    -------
    Tuple[Optional[ProviderConfig], Diagnostics]
        The canonical configuration, or None together with the diagnostics
    """
    return ProviderConfigValidator().validate(config_data).as_tuple()
