"""
Provider domain configuration classes.

This module defines the canonical, validated provider configuration that is
handed to every capability instance after a successful configure.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Tuple


DEFAULT_BUILDKIT_HOST = "unix:///var/run/buildkit/buildkitd.sock"


@dataclass(frozen=True)
class RegistryAuth:
    """Credentials for one container registry."""
    address: str
    username: str
    password: str = field(repr=False)

    def to_dict(self, include_sensitive: bool = False) -> Dict[str, Any]:
        """Convert to dictionary; the password is left out unless asked for."""
        data = {
            'address': self.address,
            'username': self.username
        }
        if include_sensitive:
            data['password'] = self.password
        return data


@dataclass(frozen=True)
class ProviderConfig:
    """
    Canonical provider configuration.

    Created once per configure cycle and shared read-only by every
    capability instantiated afterwards.
    """
    buildkit_host: str = DEFAULT_BUILDKIT_HOST
    registry_auth: Tuple[RegistryAuth, ...] = ()

    def registry_addresses(self) -> Tuple[str, ...]:
        return tuple(auth.address for auth in self.registry_auth)

    def to_dict(self, include_sensitive: bool = False) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'buildkit_host': self.buildkit_host,
            'registry_auth': [auth.to_dict(include_sensitive) for auth in self.registry_auth]
        }
