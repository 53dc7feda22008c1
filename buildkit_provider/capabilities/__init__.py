"""
Capabilities the provider exposes to the host.

No resources, data sources or functions are implemented yet; the
registry below is intentionally empty in every category.
"""

from .base import Capability, Resource, DataSource, Function
from .registry import CapabilityRegistry, CapabilityDescriptor, CapabilityFactory, factory_name

RESOURCES = []

DATA_SOURCES = []

FUNCTIONS = []


def default_registry() -> CapabilityRegistry:
    """Registry of the capabilities shipped with this provider."""
    return CapabilityRegistry(
        resources=RESOURCES,
        data_sources=DATA_SOURCES,
        functions=FUNCTIONS
    )


__all__ = [
    'Capability',
    'Resource',
    'DataSource',
    'Function',
    'CapabilityRegistry',
    'CapabilityDescriptor',
    'CapabilityFactory',
    'factory_name',
    'RESOURCES',
    'DATA_SOURCES',
    'FUNCTIONS',
    'default_registry'
]
