"""Redis cache instance.

ONLY the cache contract over a shared Redis connection - key namespacing,
entry encoding, fixed or sliding expiration, and the split error policy:
read failures are logged and degrade to a miss, write failures raise.
"""

import logging
from datetime import timedelta
from typing import Any, Optional, Union

from redis.asyncio import Redis
from redis.exceptions import RedisError

from ...core.entities.cache_entry import CacheEntry
from ...core.exceptions.cache_miss import CacheMiss
from ...core.exceptions.connectivity_error import ConnectivityError
from ...core.exceptions.decoding_error import DecodingError
from ...core.value_objects.eviction_mode import EvictionMode
from ...utils.durations import to_milliseconds, to_timedelta
from ..serializers.entry_codec import EntryCodec


class RedisCache:
    """Named cache instance backed by a provider's Redis client.

    Every logical key is stored as ``<name><separator><key>`` so several
    instances can share one Redis database. The client is owned by the
    provider; this class only borrows it.
    """

    def __init__(
        self,
        name: str,
        client: Redis,
        codec: EntryCodec,
        eviction_mode: EvictionMode = EvictionMode.FIXED,
        key_separator: str = "-",
        logger: Optional[logging.Logger] = None,
    ):
        self._name = name
        self._client = client
        self._codec = codec
        self._eviction_mode = EvictionMode(eviction_mode)
        self._key_prefix = f"{name}{key_separator}"
        self._logger = logger or logging.getLogger(__name__)

    @property
    def name(self) -> str:
        return self._name

    @property
    def key_prefix(self) -> str:
        return self._key_prefix

    @property
    def eviction_mode(self) -> EvictionMode:
        return self._eviction_mode

    def _redis_key(self, key: str) -> str:
        return f"{self._key_prefix}{key}"

    async def get(self, key: str, default: Any = None) -> Any:
        """Get the cached value, or ``default`` when absent.

        Store and decode failures are logged and reported as a miss. With
        sliding eviction a hit re-arms the entry's original TTL.
        """
        entry = await self._lookup(key)
        if entry is None:
            return default
        return entry.value

    async def get_or_put(self, key: str, value: Any, ttl: Union[timedelta, int, float]) -> Any:
        """Get the cached value, storing ``value`` first when absent.

        Check-then-act without atomicity: concurrent callers that all miss
        will all store, and the last write wins.
        """
        entry = await self._lookup(key)
        if entry is not None:
            return entry.value

        await self.put(key, value, ttl)
        return value

    async def put(self, key: str, value: Any, ttl: Union[timedelta, int, float]) -> None:
        """Store a value. A zero TTL stores the entry without expiration.

        Raises:
            EncodingError: If the value's type is not registered
            ConnectivityError: If the store write fails
        """
        delta = to_timedelta(ttl)

        with self._codec.buffer_pool.buffer() as buf:
            self._codec.encode_into(buf, delta, value)
            try:
                if delta:
                    await self._client.set(self._redis_key(key), buf.getvalue(), px=to_milliseconds(delta))
                else:
                    await self._client.set(self._redis_key(key), buf.getvalue())
            except RedisError as e:
                raise ConnectivityError.command(self._name, "set", key, str(e)) from e

    async def delete(self, key: str) -> None:
        """Delete a key. Deleting an absent key is not an error.

        Raises:
            ConnectivityError: If the store command fails
        """
        try:
            await self._client.delete(self._redis_key(key))
        except RedisError as e:
            raise ConnectivityError.command(self._name, "delete", key, str(e)) from e

    async def exists(self, key: str) -> bool:
        """Check whether a key exists. Store failures are logged and reported as False."""
        try:
            return await self._client.exists(self._redis_key(key)) > 0
        except RedisError as e:
            self._logger.error(f"Cache {self._name} exists error for key {key}: {e}")
            return False

    async def flush(self) -> None:
        """Delete every entry in the backing database, other caches' keys included.

        Raises:
            ConnectivityError: If the store command fails
        """
        try:
            await self._client.flushdb()
        except RedisError as e:
            raise ConnectivityError.command(self._name, "flush", None, str(e)) from e

    async def _read(self, key: str) -> CacheEntry:
        try:
            data = await self._client.get(self._redis_key(key))
        except RedisError as e:
            raise ConnectivityError.command(self._name, "get", key, str(e)) from e

        if data is None:
            raise CacheMiss(key)
        return self._codec.decode(data)

    async def _lookup(self, key: str) -> Optional[CacheEntry]:
        try:
            entry = await self._read(key)
        except CacheMiss:
            return None
        except (ConnectivityError, DecodingError) as e:
            self._logger.error(f"Cache {self._name} get error for key {key}: {e}")
            return None

        if self._eviction_mode.is_sliding and not entry.never_expires:
            await self._refresh(key, entry.ttl)
        return entry

    async def _refresh(self, key: str, ttl: timedelta) -> None:
        try:
            await self._client.pexpire(self._redis_key(key), to_milliseconds(ttl))
        except RedisError as e:
            self._logger.error(f"Cache {self._name} expire error for key {key}: {e}")

    def __repr__(self) -> str:
        return f"RedisCache(name={self._name!r}, eviction_mode={self._eviction_mode.value!r})"
