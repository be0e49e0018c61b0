"""
Adapter Configuration

Loads adapter settings from an optional YAML file and environment variables,
and exposes them through the host's dotted-key config lookup.

Example config file:

    adpopcorn:
      server: ssp-web-request.example.com
      host_version: "8.52.0"
"""

import os
from pathlib import Path
from typing import Any

import yaml

from ..errors import ConfigError
from ..logging import config_logger

CONFIG_PATH_ENV = "ADPOPCORN_CONFIG"
SERVER_ENV = "ADPOPCORN_SERVER"
HOST_VERSION_ENV = "ADPOPCORN_HOST_VERSION"

logger = config_logger()


class YamlHostConfig:
    """
    Host config lookup over a nested mapping.

    Keys are dotted paths, e.g. ``adpopcorn.server``.
    """

    def __init__(self, data: dict[str, Any] | None = None):
        self._data = data or {}

    def get_config(self, key: str) -> Any:
        """Look up a dotted key, returning None when any segment is missing."""
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node

    @classmethod
    def from_file(cls, path: Path | str) -> "YamlHostConfig":
        """
        Load from a YAML file.

        Raises:
            ConfigError: If the file cannot be read or is not a mapping
        """
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load config {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config {path} must be a mapping")

        return cls(data)

    @classmethod
    def from_env(cls) -> "YamlHostConfig":
        """Load the file named by ADPOPCORN_CONFIG, then apply env overrides."""
        path = os.environ.get(CONFIG_PATH_ENV)
        config = cls.from_file(path) if path else cls()

        section = config._data.setdefault("adpopcorn", {})
        if not isinstance(section, dict):
            raise ConfigError("The adpopcorn config section must be a mapping")

        server = os.environ.get(SERVER_ENV)
        if server:
            section["server"] = server
        host_version = os.environ.get(HOST_VERSION_ENV)
        if host_version:
            section["host_version"] = host_version

        logger.debug(
            "Adapter config loaded",
            path=path,
            server=section.get("server"),
        )
        return config


# Global host config instance
_host_config: YamlHostConfig | None = None


def get_host_config() -> YamlHostConfig:
    """Get the global host config, loading it on first use."""
    global _host_config
    if _host_config is None:
        _host_config = YamlHostConfig.from_env()
    return _host_config


def reset_host_config() -> None:
    """Drop the cached global host config."""
    global _host_config
    _host_config = None
