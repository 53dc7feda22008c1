"""
Raw configuration sources.

This module provides the sources a host can use to hand raw provider
configuration to BuildkitProvider.configure().
"""

import copy
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

from buildkit_provider.core.exceptions import ConfigurationError
from buildkit_provider.logger import get_buildkit_logger


class RawConfigProvider(ABC):
    """
    Abstract base class for raw configuration sources.

    Defines the interface that all raw configuration sources must implement.
    """

    def __init__(self, domain: str):
        self.domain = domain
        self.logger = get_buildkit_logger().bind(component=f"RawConfigProvider_{domain}")
        self._lock = threading.RLock()

    @abstractmethod
    def get_config(self) -> Dict[str, Any]:
        """Get the current raw configuration."""
        pass

    @abstractmethod
    def update_config(self, updates: Dict[str, Any]) -> None:
        """Merge top-level values into the raw configuration."""
        pass

    @abstractmethod
    def reset_to_defaults(self) -> None:
        """Drop all supplied values."""
        pass


class FileRawConfigProvider(RawConfigProvider):
    """
    File-based raw configuration source that reads from YAML files.
    """

    def __init__(self, domain: str = "provider", config_dir: str = "settings",
                 config_file: Optional[str] = None):
        super().__init__(domain)
        self.config_dir = Path(config_dir)
        self._config_file = Path(config_file) if config_file else None
        self._config_cache: Optional[Dict[str, Any]] = None
        self._last_modified: Optional[float] = None

    @property
    def config_file(self) -> Path:
        """Get the configuration file path for this domain."""
        if self._config_file is not None:
            return self._config_file
        return self.config_dir / f"{self.domain}.yaml"

    def get_config(self) -> Dict[str, Any]:
        """Get current configuration from file; a missing file means no values."""
        with self._lock:
            self._refresh_cache()
            return copy.deepcopy(self._config_cache) if self._config_cache else {}

    def update_config(self, updates: Dict[str, Any]) -> None:
        """Update configuration and save to file."""
        with self._lock:
            current_config = self.get_config()
            current_config.update(updates)
            self._save_config(current_config)
            self._config_cache = current_config
            self._last_modified = self.config_file.stat().st_mtime
            self.logger.info("Raw config updated", keys=sorted(updates))

    def reset_to_defaults(self) -> None:
        """Reset to defaults by removing the config file."""
        with self._lock:
            if self.config_file.exists():
                self.config_file.unlink()
            self._config_cache = None
            self._last_modified = None

    def _refresh_cache(self):
        """Refresh configuration cache if file has changed."""
        if not self.config_file.exists():
            self._config_cache = None
            self._last_modified = None
            return

        current_mtime = self.config_file.stat().st_mtime
        if self._last_modified is not None and current_mtime <= self._last_modified:
            return

        try:
            with open(self.config_file, 'r') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            self.logger.error("Failed to parse raw config", path=str(self.config_file))
            raise ConfigurationError(source=str(self.config_file), reason=f"invalid YAML ({e})") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                source=str(self.config_file),
                reason=f"top-level document must be a mapping, got {type(data).__name__}"
            )

        self._config_cache = data
        self._last_modified = current_mtime
        self.logger.debug("Raw config loaded", path=str(self.config_file), keys=sorted(data))

    def _save_config(self, config: Dict[str, Any]):
        """Save configuration to file."""
        self.config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, 'w') as f:
            yaml.safe_dump(config, f, default_flow_style=False, indent=2)


class RuntimeRawConfigProvider(RawConfigProvider):
    """
    Runtime raw configuration source that keeps config in memory.
    """

    def __init__(self, domain: str = "provider", initial_config: Optional[Dict[str, Any]] = None):
        super().__init__(domain)
        self._config = copy.deepcopy(initial_config) if initial_config else {}

    def get_config(self) -> Dict[str, Any]:
        """Get current configuration from memory."""
        with self._lock:
            return copy.deepcopy(self._config)

    def update_config(self, updates: Dict[str, Any]) -> None:
        """Update configuration in memory."""
        with self._lock:
            new_config = copy.deepcopy(self._config)
            new_config.update(copy.deepcopy(updates))
            self._config = new_config

    def reset_to_defaults(self) -> None:
        """Reset to empty configuration."""
        with self._lock:
            self._config = {}
