"""Cache infrastructure.

Entry serialization, provider configuration and the Redis provider.
"""

from .configuration import RedisProviderConfig, get_config_section, load_config_file
from .providers import RedisCache, RedisCacheProvider, create_redis_client
from .serializers import BufferPool, EntryCodec, TypeRegistry, default_registry, register_type

__all__ = [
    "BufferPool",
    "EntryCodec",
    "TypeRegistry",
    "default_registry",
    "register_type",
    "RedisProviderConfig",
    "get_config_section",
    "load_config_file",
    "RedisCache",
    "RedisCacheProvider",
    "create_redis_client",
]
