"""Cache miss signal.

ONLY the "key not found" outcome of a store read. It is a distinct variant
from ConnectivityError so the read path never has to inspect error text.
"""

from .base import CacheError


class CacheMiss(CacheError):
    """Raised internally when the store has no value for a key."""

    def __init__(self, key: str):
        super().__init__(f"key({key}) not found", error_code="CACHE_MISS", details={"key": key})
        self.key = key
