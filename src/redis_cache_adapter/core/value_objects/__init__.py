"""Cache value objects."""

from .cache_instance_config import CacheInstanceConfig
from .eviction_mode import EvictionMode

__all__ = ["CacheInstanceConfig", "EvictionMode"]
