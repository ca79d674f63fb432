"""Redis cache adapter.

Pluggable cache-store adapter exposing a uniform cache contract
(get, put, get_or_put, delete, exists, flush) over a Redis-compatible store.

Example:
    provider = RedisCacheProvider()
    await provider.initialize("redis1", {"cache": {"redis1": {"provider": "redis"}}})
    users = provider.create(CacheInstanceConfig(name="users", eviction_mode=EvictionMode.SLIDE))
    await users.put("42", {"name": "Jeeva"}, timedelta(minutes=5))
"""

from .__version__ import __version__
from .application import CacheManager
from .core import (
    Cache,
    CacheEntry,
    CacheError,
    CacheInstanceConfig,
    CacheMiss,
    CacheProvider,
    ConfigurationError,
    ConnectivityError,
    DecodingError,
    EncodingError,
    EvictionMode,
)
from .infrastructure import (
    BufferPool,
    EntryCodec,
    RedisCache,
    RedisCacheProvider,
    RedisProviderConfig,
    TypeRegistry,
    default_registry,
    get_config_section,
    load_config_file,
    register_type,
)

__all__ = [
    "__version__",
    "Cache",
    "CacheEntry",
    "CacheError",
    "CacheInstanceConfig",
    "CacheManager",
    "CacheMiss",
    "CacheProvider",
    "ConfigurationError",
    "ConnectivityError",
    "DecodingError",
    "EncodingError",
    "EvictionMode",
    "BufferPool",
    "EntryCodec",
    "RedisCache",
    "RedisCacheProvider",
    "RedisProviderConfig",
    "TypeRegistry",
    "default_registry",
    "get_config_section",
    "load_config_file",
    "register_type",
]
