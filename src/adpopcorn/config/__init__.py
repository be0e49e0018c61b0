"""
Adapter Configuration Module

Key components:
    - YamlHostConfig: Dotted-key config lookup loaded from YAML and env
    - get_host_config(): Process-wide config instance
"""

from .adapter_config import (
    YamlHostConfig,
    get_host_config,
    reset_host_config,
)

__all__ = [
    "YamlHostConfig",
    "get_host_config",
    "reset_host_config",
]
