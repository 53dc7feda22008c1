"""
BuildKit provider lifecycle.

BuildkitProvider is the object a plugin host talks to: it reports metadata
and schema, turns raw configuration into a ProviderConfig, advertises
capability factories and instantiates capabilities with the configuration
injected.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple, TypeVar

from buildkit_provider.capabilities import (
    Capability, Resource, DataSource, Function, CapabilityRegistry, default_registry, factory_name
)
from buildkit_provider.config import (
    Schema, SchemaValidator, Diagnostics, ProviderConfig, ProviderConfigValidator, get_provider_schema
)
from buildkit_provider.core.exceptions import ProviderNotConfiguredError
from buildkit_provider.logger import get_buildkit_logger

TYPE_NAME = "buildkit"

C = TypeVar('C', bound=Capability)


@dataclass(frozen=True)
class ProviderMetadata:
    """Identity reported to the host."""
    type_name: str
    version: str


@dataclass
class ConfigureResponse:
    """Outcome of a configure request."""
    provider_data: Optional[ProviderConfig] = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)

    @property
    def ok(self) -> bool:
        return self.provider_data is not None and not self.diagnostics.has_error()


class BuildkitProvider:
    """
    Plugin provider for a BuildKit daemon.

    Parameters
    ----------
    version : str
        Provider version reported through metadata()
    registry : CapabilityRegistry, optional
        Capability factories to advertise, defaults to the shipped registry
    """

    def __init__(self, version: str, registry: Optional[CapabilityRegistry] = None):
        self._metadata = ProviderMetadata(type_name=TYPE_NAME, version=version)
        self.registry = registry if registry is not None else default_registry()
        self._schema = get_provider_schema()
        self._schema_validator = SchemaValidator("provider", self._schema)
        self._config_validator = ProviderConfigValidator()
        self._provider_data: Optional[ProviderConfig] = None
        self.logger = get_buildkit_logger().bind(component="BuildkitProvider", version=version)

    @property
    def type_name(self) -> str:
        return self._metadata.type_name

    @property
    def version(self) -> str:
        return self._metadata.version

    @property
    def provider_data(self) -> Optional[ProviderConfig]:
        """ProviderConfig from the last successful configure, if any."""
        return self._provider_data

    def metadata(self) -> ProviderMetadata:
        return self._metadata

    def schema(self) -> Schema:
        return self._schema

    def configure(self, raw_config: Optional[Dict[str, Any]]) -> ConfigureResponse:
        """
        Validate raw configuration and keep the result for capabilities.

        The raw input is first checked against the schema (attribute names
        and value types), then handed to the value validator. Any error
        diagnostic stops the cycle: nothing is stored and the diagnostics
        are returned as-is.

        Parameters
        ----------
        raw_config : dict or None
            Configuration as supplied by the host; None means no values

        Returns
        -------
        ConfigureResponse
            The canonical configuration, or the diagnostics that rejected it
        """
        response = ConfigureResponse()
        if raw_config is None:
            raw_config = {}

        self.logger.debug("Configuring provider", attributes=sorted(raw_config) if isinstance(raw_config, dict) else None)

        shape = self._schema_validator.validate(raw_config)
        response.diagnostics.extend(shape.diagnostics)
        if response.diagnostics.has_error():
            self.logger.error("Provider configuration rejected",
                              errors=[str(d) for d in response.diagnostics.errors])
            return response

        provider_data, diagnostics = self._config_validator.validate(raw_config).as_tuple()
        response.diagnostics.extend(diagnostics)
        if response.diagnostics.has_error():
            self.logger.error("Provider configuration rejected",
                              errors=[str(d) for d in response.diagnostics.errors])
            return response

        self._provider_data = provider_data
        response.provider_data = provider_data
        self.logger.info("Provider configured",
                         buildkit_host=provider_data.buildkit_host,
                         registries=list(provider_data.registry_addresses()))
        return response

    def resources(self) -> Tuple[Callable[[], Resource], ...]:
        return self.registry.resource_factories()

    def data_sources(self) -> Tuple[Callable[[], DataSource], ...]:
        return self.registry.data_source_factories()

    def functions(self) -> Tuple[Callable[[], Function], ...]:
        return self.registry.function_factories()

    def instantiate(self, factory: Callable[[], C]) -> C:
        """
        Build a capability and inject the provider configuration.

        Raises
        ------
        ProviderNotConfiguredError
            If configure() has not succeeded yet
        """
        if self._provider_data is None:
            raise ProviderNotConfiguredError(entity=f"{self.type_name} provider",
                                             operation=f"instantiate {factory_name(factory)}")

        capability = factory()
        capability.configure(self._provider_data)
        self.logger.debug("Capability instantiated",
                          capability=factory_name(factory), kind=capability.kind.value)
        return capability

    def new_resource(self, factory: Callable[[], Resource]) -> Resource:
        return self.instantiate(factory)

    def new_data_source(self, factory: Callable[[], DataSource]) -> DataSource:
        return self.instantiate(factory)

    def new_function(self, factory: Callable[[], Function]) -> Function:
        return self.instantiate(factory)


def new(version: str, registry: Optional[CapabilityRegistry] = None) -> Callable[[], BuildkitProvider]:
    """Return the zero-argument provider factory a plugin host expects."""
    def factory() -> BuildkitProvider:
        return BuildkitProvider(version=version, registry=registry)
    return factory
