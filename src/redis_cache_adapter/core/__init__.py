"""Cache core domain.

Entities, value objects, protocols and exceptions shared by every
provider implementation.
"""

from .entities import CacheEntry
from .exceptions import (
    CacheError,
    CacheMiss,
    ConfigurationError,
    ConnectivityError,
    DecodingError,
    EncodingError,
)
from .protocols import Cache, CacheProvider
from .value_objects import CacheInstanceConfig, EvictionMode

__all__ = [
    "CacheEntry",
    "CacheError",
    "CacheMiss",
    "ConfigurationError",
    "ConnectivityError",
    "DecodingError",
    "EncodingError",
    "Cache",
    "CacheProvider",
    "CacheInstanceConfig",
    "EvictionMode",
]
