"""Cache provider configuration."""

from .config_tree import flatten_config, get_config_section, load_config_file
from .provider_config import RedisProviderConfig, default_pool_size

__all__ = [
    "RedisProviderConfig",
    "default_pool_size",
    "flatten_config",
    "get_config_section",
    "load_config_file",
]
