from buildkit_provider.provider import BuildkitProvider, ConfigureResponse, ProviderMetadata, new
from buildkit_provider.config import ProviderConfig, RegistryAuth, DEFAULT_BUILDKIT_HOST, SystemConfig
from buildkit_provider.logger import init_logger

__version__ = "0.1.0"


def serve(version: str = __version__, system_config: SystemConfig = None) -> BuildkitProvider:
    """
    Set up logging from the environment and build the provider the host will drive.
    """
    if system_config is None:
        system_config = SystemConfig.from_env()
    logger = init_logger(system_config)
    provider = new(version)()
    logger.info("Provider ready", type_name=provider.type_name, version=provider.version,
                environment=system_config.environment.value)
    return provider
