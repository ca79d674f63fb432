"""Cache instance configuration value object.

ONLY the per-instance settings a provider needs to create a named cache.
"""

from dataclasses import dataclass
from typing import Optional

from .eviction_mode import EvictionMode


@dataclass(frozen=True)
class CacheInstanceConfig:
    """Settings for one named cache created from a provider.

    Attributes:
        name: Logical cache name, unique within a manager
        provider_name: Provider instance the cache belongs to (manager routing)
        eviction_mode: Fixed or sliding expiration
    """

    name: str
    provider_name: Optional[str] = None
    eviction_mode: EvictionMode = EvictionMode.FIXED

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Cache name cannot be empty")
        # Accept plain strings such as "slide" from configuration files
        object.__setattr__(self, "eviction_mode", EvictionMode(self.eviction_mode))
