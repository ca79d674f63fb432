"""Pytest configuration and fixtures for redis-cache-adapter tests."""

import asyncio
from typing import Dict, List, Optional, Set, Tuple

import pytest
import pytest_asyncio
from redis.exceptions import ConnectionError as RedisConnectionError

from redis_cache_adapter.core.value_objects import CacheInstanceConfig, EvictionMode
from redis_cache_adapter.infrastructure.providers import RedisCacheProvider
from redis_cache_adapter.infrastructure.serializers import EntryCodec, TypeRegistry


class FakeClock:
    """Manually advanced monotonic clock in seconds."""

    def __init__(self, start: float = 1_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeRedis:
    """In-memory double of the redis.asyncio.Redis commands the adapter issues.

    Expiration follows the injected clock. Every command yields to the event
    loop once so concurrent callers interleave like real round trips.
    Commands listed in ``fail_commands`` raise a redis ConnectionError.
    """

    def __init__(self, clock: FakeClock):
        self.clock = clock
        self.fail_commands: Set[str] = set()
        self.commands: List[Tuple[str, tuple]] = []
        self.closed = False
        self._data: Dict[str, Tuple[bytes, Optional[float]]] = {}

    async def _command(self, name: str, *args) -> None:
        self.commands.append((name, args))
        await asyncio.sleep(0)
        if name in self.fail_commands:
            raise RedisConnectionError(f"Error connecting to localhost:6379 during {name}")

    def _live(self, key: str) -> Optional[Tuple[bytes, Optional[float]]]:
        item = self._data.get(key)
        if item is None:
            return None
        if item[1] is not None and self.clock() >= item[1]:
            del self._data[key]
            return None
        return item

    async def ping(self) -> bool:
        await self._command("ping")
        return True

    async def get(self, key: str) -> Optional[bytes]:
        await self._command("get", key)
        item = self._live(key)
        return None if item is None else item[0]

    async def set(self, key: str, value: bytes, px: Optional[int] = None) -> bool:
        await self._command("set", key, px)
        expires_at = None if px is None else self.clock() + px / 1000
        self._data[key] = (bytes(value), expires_at)
        return True

    async def delete(self, *keys: str) -> int:
        await self._command("delete", *keys)
        removed = 0
        for key in keys:
            if self._live(key) is not None:
                del self._data[key]
                removed += 1
        return removed

    async def exists(self, *keys: str) -> int:
        await self._command("exists", *keys)
        return sum(1 for key in keys if self._live(key) is not None)

    async def pexpire(self, key: str, milliseconds: int) -> bool:
        await self._command("pexpire", key, milliseconds)
        item = self._live(key)
        if item is None:
            return False
        self._data[key] = (item[0], self.clock() + milliseconds / 1000)
        return True

    async def flushdb(self) -> bool:
        await self._command("flushdb")
        self._data.clear()
        return True

    async def aclose(self, close_connection_pool: Optional[bool] = None) -> None:
        self.closed = True

    def raw_keys(self) -> List[str]:
        return sorted(key for key in list(self._data) if self._live(key) is not None)

    def expires_at(self, key: str) -> Optional[float]:
        item = self._live(key)
        return None if item is None else item[1]

    def command_names(self) -> List[str]:
        return [name for name, _ in self.commands]


@pytest.fixture
def clock():
    """Controllable clock driving fake store expiration."""
    return FakeClock()


@pytest.fixture
def fake_redis(clock):
    """In-memory Redis double."""
    return FakeRedis(clock)


@pytest.fixture
def registry():
    """Fresh type registry with standard library types registered."""
    return TypeRegistry.with_builtins()


@pytest.fixture
def codec(registry):
    """Entry codec bound to the test registry."""
    return EntryCodec(registry=registry)


@pytest.fixture
def app_config():
    """Host configuration tree with one redis provider."""
    return {
        "cache": {
            "redis1": {
                "provider": "redis",
                "address": "localhost:6379",
            },
        },
    }


@pytest_asyncio.fixture
async def provider(codec, fake_redis, app_config):
    """Initialized provider whose client is the in-memory double."""
    redis_provider = RedisCacheProvider(codec=codec, client_factory=lambda config: fake_redis)
    await redis_provider.initialize("redis1", app_config)
    yield redis_provider
    await redis_provider.close()


@pytest.fixture
def cache(provider):
    """Fixed-eviction cache instance."""
    return provider.create(CacheInstanceConfig(name="cache1"))


@pytest.fixture
def sliding_cache(provider):
    """Sliding-eviction cache instance."""
    return provider.create(CacheInstanceConfig(name="slidecache", eviction_mode=EvictionMode.SLIDE))
