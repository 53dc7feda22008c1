"""
Capability registry.

Holds the ordered factory lists the provider advertises to the host, one
per capability category. The lists are assembled once at construction and
are read-only afterwards, so concurrent readers need no locking.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple

from buildkit_provider.core.enums import CapabilityKind
from buildkit_provider.core.exceptions import CapabilityNotFoundError
from .base import Capability, Resource, DataSource, Function

CapabilityFactory = Callable[[], Capability]


def factory_name(factory: CapabilityFactory) -> str:
    """Name a factory by its ``type_name`` attribute, falling back to ``__name__``."""
    name = getattr(factory, "type_name", "")
    if name:
        return name
    return getattr(factory, "__name__", type(factory).__name__)


@dataclass(frozen=True)
class CapabilityDescriptor:
    """A named, categorized capability factory."""
    kind: CapabilityKind
    name: str
    factory: CapabilityFactory


class CapabilityRegistry:
    """
    Static, ordered registry of capability factories.

    Performs no validation, caching or deduplication: factories are
    returned exactly as registered. An empty category is a valid state.
    """

    def __init__(self,
                 resources: Iterable[Callable[[], Resource]] = (),
                 data_sources: Iterable[Callable[[], DataSource]] = (),
                 functions: Iterable[Callable[[], Function]] = ()):
        self._factories = {
            CapabilityKind.RESOURCE: tuple(resources),
            CapabilityKind.DATA_SOURCE: tuple(data_sources),
            CapabilityKind.FUNCTION: tuple(functions)
        }

    def resource_factories(self) -> Tuple[Callable[[], Resource], ...]:
        return self._factories[CapabilityKind.RESOURCE]

    def data_source_factories(self) -> Tuple[Callable[[], DataSource], ...]:
        return self._factories[CapabilityKind.DATA_SOURCE]

    def function_factories(self) -> Tuple[Callable[[], Function], ...]:
        return self._factories[CapabilityKind.FUNCTION]

    def factories(self, kind: CapabilityKind) -> Tuple[CapabilityFactory, ...]:
        return self._factories[kind]

    def descriptors(self, kind: Optional[CapabilityKind] = None) -> Tuple[CapabilityDescriptor, ...]:
        """
        Describe registered factories in registration order.

        Args:
            kind: Restrict to one category; all categories when None

        Returns:
            Tuple of CapabilityDescriptor, resources first, then data
            sources, then functions
        """
        kinds = [kind] if kind is not None else list(CapabilityKind)
        return tuple(
            CapabilityDescriptor(kind=k, name=factory_name(factory), factory=factory)
            for k in kinds
            for factory in self._factories[k]
        )

    def get_factory(self, kind: CapabilityKind, name: str) -> CapabilityFactory:
        """
        Look up a factory by category and name.

        Raises:
            CapabilityNotFoundError: If no factory of that category has that name
        """
        for descriptor in self.descriptors(kind):
            if descriptor.name == name:
                return descriptor.factory
        raise CapabilityNotFoundError(kind.value, name)

    def __len__(self):
        return sum(len(factories) for factories in self._factories.values())
