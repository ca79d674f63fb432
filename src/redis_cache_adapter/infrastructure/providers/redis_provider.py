"""Redis cache provider.

ONLY provider lifecycle - validates the ``cache.<name>`` configuration,
owns the pooled Redis connection, verifies it with PING at initialization,
and creates named cache instances that share it.
"""

import logging
from typing import Any, Callable, Mapping, Optional

from redis.asyncio import BlockingConnectionPool, Redis
from redis.exceptions import RedisError

from ...core.exceptions.configuration_error import ConfigurationError
from ...core.exceptions.connectivity_error import ConnectivityError
from ...core.value_objects.cache_instance_config import CacheInstanceConfig
from ..configuration.config_tree import get_config_section
from ..configuration.provider_config import RedisProviderConfig
from ..serializers.entry_codec import EntryCodec
from .redis_cache import RedisCache

ClientFactory = Callable[[RedisProviderConfig], Redis]

PROVIDER_ROLE = "redis"


def create_redis_client(config: RedisProviderConfig) -> Redis:
    """Create a Redis client over a bounded blocking connection pool."""
    pool = BlockingConnectionPool(**config.to_pool_kwargs())
    return Redis(connection_pool=pool)


class RedisCacheProvider:
    """Redis cache provider.

    Construct, then ``await initialize(...)`` once at application start.
    Initialization fails fast on a wrong provider role, malformed connection
    parameters, or an unreachable server.
    """

    KEY_SEPARATOR = "-"

    def __init__(
        self,
        codec: Optional[EntryCodec] = None,
        client_factory: ClientFactory = create_redis_client,
    ):
        """Initialize Redis cache provider.

        Args:
            codec: Entry codec shared by created caches, defaults to one
                using the process-wide type registry
            client_factory: Builds the Redis client from the parsed config
        """
        self._codec = codec or EntryCodec()
        self._client_factory = client_factory
        self._name: Optional[str] = None
        self._config: Optional[RedisProviderConfig] = None
        self._client: Optional[Redis] = None
        self._logger = logging.getLogger(__name__)

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def config(self) -> Optional[RedisProviderConfig]:
        return self._config

    @property
    def codec(self) -> EntryCodec:
        return self._codec

    @property
    def is_initialized(self) -> bool:
        return self._client is not None

    @property
    def client(self) -> Redis:
        """Underlying Redis client for store-specific operations."""
        if self._client is None:
            raise ConfigurationError("redis provider is not initialized", provider_name=self._name)
        return self._client

    async def initialize(
        self,
        name: str,
        config: Mapping[str, Any],
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """Initialize the provider from the host configuration tree.

        Args:
            name: Provider instance name, selects the ``cache.<name>`` section
            config: Host configuration tree
            logger: Logger shared with created caches

        Raises:
            ConfigurationError: If the provider is already initialized, or the
                section does not select redis or is malformed
            ConnectivityError: If the server does not answer PING
        """
        if self._client is not None:
            raise ConfigurationError(
                f"redis provider already initialized as {self._name!r}", provider_name=name
            )

        self._name = name
        if logger is not None:
            self._logger = logger

        section = get_config_section(config, f"cache.{name}")
        role = str(section.get("provider") or "")
        if role.strip().lower() != PROVIDER_ROLE:
            raise ConfigurationError.invalid_provider(name, role)

        provider_config = RedisProviderConfig.from_section(section, provider_name=name)
        client = self._client_factory(provider_config)

        try:
            await client.ping()
        except RedisError as e:
            await client.aclose(close_connection_pool=True)
            raise ConnectivityError.handshake(name, provider_config.address, str(e)) from e

        self._config = provider_config
        self._client = client
        self._logger.info(f"Cache provider {name} connected successfully with {provider_config.address}")

    def create(self, cache_config: CacheInstanceConfig) -> RedisCache:
        """Create a named cache sharing this provider's connection.

        Raises:
            ConfigurationError: If the provider is not initialized
        """
        cache = RedisCache(
            name=cache_config.name,
            client=self.client,
            codec=self._codec,
            eviction_mode=cache_config.eviction_mode,
            key_separator=self.KEY_SEPARATOR,
            logger=self._logger,
        )
        self._logger.debug(
            f"Cache {cache_config.name} created on provider {self._name} "
            f"(eviction={cache_config.eviction_mode.value})"
        )
        return cache

    async def close(self) -> None:
        """Close the client and its connection pool."""
        if self._client is None:
            return
        client, self._client = self._client, None
        await client.aclose(close_connection_pool=True)
        self._logger.info(f"Cache provider {self._name} connection closed")
