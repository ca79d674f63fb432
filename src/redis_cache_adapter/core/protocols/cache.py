"""Cache protocol.

ONLY the uniform cache contract every provider's cache instance implements.
"""

from datetime import timedelta
from typing import Any, Optional, Union
from typing_extensions import Protocol, runtime_checkable

TTL = Union[timedelta, int, float]


@runtime_checkable
class Cache(Protocol):
    """Named cache instance backed by a provider connection."""

    @property
    def name(self) -> str:
        """Logical cache name."""
        ...

    async def get(self, key: str, default: Any = None) -> Any:
        """Return the cached value, or ``default`` on a miss or read failure."""
        ...

    async def put(self, key: str, value: Any, ttl: TTL) -> None:
        """Store a value with the given lifetime.

        Raises:
            EncodingError: If the value cannot be encoded
            ConnectivityError: If the store write fails
        """
        ...

    async def get_or_put(self, key: str, value: Any, ttl: TTL) -> Any:
        """Return the cached value, storing ``value`` first on a miss.

        Not atomic: concurrent callers on an absent key may all store,
        the last write wins.
        """
        ...

    async def delete(self, key: str) -> None:
        """Remove a key. Deleting an absent key succeeds."""
        ...

    async def exists(self, key: str) -> bool:
        """Check key existence. Read failures report ``False``."""
        ...

    async def flush(self) -> None:
        """Delete every entry in the backing database."""
        ...
