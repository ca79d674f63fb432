"""Cache protocols."""

from .cache import TTL, Cache
from .cache_provider import CacheProvider

__all__ = ["TTL", "Cache", "CacheProvider"]
