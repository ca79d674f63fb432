"""Cache providers."""

from .redis_cache import RedisCache
from .redis_provider import PROVIDER_ROLE, RedisCacheProvider, create_redis_client

__all__ = [
    "PROVIDER_ROLE",
    "RedisCache",
    "RedisCacheProvider",
    "create_redis_client",
]
