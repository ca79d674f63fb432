"""Cache entry entity.

ONLY the stored unit - a value together with the lifetime it was written
with. The lifetime travels inside the payload so sliding expiration can
re-arm the same TTL on read.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Any


@dataclass(frozen=True)
class CacheEntry:
    """Value stored in the remote store with its creation TTL."""

    ttl: timedelta
    value: Any

    @property
    def never_expires(self) -> bool:
        """Entries written with a zero TTL have no store expiration."""
        return self.ttl == timedelta(0)
