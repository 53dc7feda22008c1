from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from buildkit_provider.config.provider import ProviderConfig
from buildkit_provider.core.enums import CapabilityKind
from buildkit_provider.core.exceptions import ProviderNotConfiguredError


class Capability(ABC):
	"""
	Common base of every operation the provider can expose to the host.

	Instances are produced by zero-argument factories registered with the
	CapabilityRegistry. Before an instance may operate, the host injects
	the canonical ProviderConfig through configure(); the instance only
	ever reads it.
	"""

	kind: CapabilityKind
	type_name: str = ""

	def __init__(self):
		self._provider_data: Optional[ProviderConfig] = None

	def configure(self, provider_data: ProviderConfig) -> None:
		"""
		Receive the provider configuration produced by a successful configure.

		Parameters
		----------
		provider_data : ProviderConfig
			Canonical provider configuration, shared read-only
		"""
		self._provider_data = provider_data

	@property
	def is_configured(self) -> bool:
		return self._provider_data is not None

	@property
	def provider_data(self) -> ProviderConfig:
		if self._provider_data is None:
			raise ProviderNotConfiguredError(
				entity=self.type_name or type(self).__name__,
				operation="read provider data"
			)
		return self._provider_data


class Resource(Capability):
	"""
	A managed object with a create/read/update/delete lifecycle.
	"""

	kind = CapabilityKind.RESOURCE

	@abstractmethod
	def create(self, plan: Dict[str, Any]) -> Dict[str, Any]:
		"""
		Create the object described by ``plan`` and return its state.
		"""
		raise NotImplementedError("Should implement create()")

	@abstractmethod
	def read(self, state: Dict[str, Any]) -> Optional[Dict[str, Any]]:
		"""
		Refresh ``state``; None means the object no longer exists.
		"""
		raise NotImplementedError("Should implement read()")

	@abstractmethod
	def update(self, state: Dict[str, Any], plan: Dict[str, Any]) -> Dict[str, Any]:
		raise NotImplementedError("Should implement update()")

	@abstractmethod
	def delete(self, state: Dict[str, Any]) -> None:
		raise NotImplementedError("Should implement delete()")


class DataSource(Capability):
	"""
	A read-only lookup.
	"""

	kind = CapabilityKind.DATA_SOURCE

	@abstractmethod
	def read(self, arguments: Dict[str, Any]) -> Dict[str, Any]:
		raise NotImplementedError("Should implement read()")


class Function(Capability):
	"""
	A pure callable exposed to the host.
	"""

	kind = CapabilityKind.FUNCTION

	@abstractmethod
	def run(self, *arguments: Any) -> Any:
		raise NotImplementedError("Should implement run()")
