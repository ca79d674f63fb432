"""Cache manager service.

ONLY cache routing - keeps named provider instances and the caches created
from them, and resolves caches by name.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from ...core.exceptions.configuration_error import ConfigurationError
from ...core.protocols.cache import Cache
from ...core.protocols.cache_provider import CacheProvider
from ...core.value_objects.cache_instance_config import CacheInstanceConfig
from ...infrastructure.providers.redis_provider import RedisCacheProvider

logger = logging.getLogger(__name__)


class CacheManager:
    """Registry of cache providers and named cache instances."""

    def __init__(self):
        self._providers: Dict[str, CacheProvider] = {}
        self._caches: Dict[str, Cache] = {}

    def add_provider(self, name: str, provider: CacheProvider) -> None:
        """Register an initialized provider under ``name``.

        Raises:
            ConfigurationError: If the name is already taken
        """
        if name in self._providers:
            raise ConfigurationError(f"cache provider {name!r} already registered", provider_name=name)
        self._providers[name] = provider

    async def initialize_provider(
        self,
        name: str,
        config: Mapping[str, Any],
        provider: Optional[CacheProvider] = None,
        provider_logger: Optional[logging.Logger] = None,
    ) -> CacheProvider:
        """Initialize a provider from the configuration tree and register it.

        Args:
            name: Provider instance name (``cache.<name>`` section)
            config: Host configuration tree
            provider: Provider to initialize, defaults to a new Redis provider
            provider_logger: Logger handed to the provider

        Returns:
            The initialized provider
        """
        if name in self._providers:
            raise ConfigurationError(f"cache provider {name!r} already registered", provider_name=name)

        provider = provider or RedisCacheProvider()
        await provider.initialize(name, config, provider_logger)
        self._providers[name] = provider
        return provider

    def provider(self, name: str) -> Optional[CacheProvider]:
        return self._providers.get(name)

    def create_cache(self, cache_config: CacheInstanceConfig) -> Cache:
        """Create a named cache on its configured provider.

        Raises:
            ConfigurationError: If the cache name exists or the provider is unknown
        """
        if cache_config.name in self._caches:
            raise ConfigurationError(f"cache name {cache_config.name!r} already exists")

        provider = self._providers.get(cache_config.provider_name or "")
        if provider is None:
            raise ConfigurationError(
                f"cache {cache_config.name!r}: provider {cache_config.provider_name!r} not registered",
                provider_name=cache_config.provider_name,
            )

        cache = provider.create(cache_config)
        self._caches[cache_config.name] = cache
        logger.info(f"Cache {cache_config.name} created with provider {cache_config.provider_name}")
        return cache

    def cache(self, name: str) -> Optional[Cache]:
        """Get a cache by name, None if it was never created."""
        return self._caches.get(name)

    def cache_names(self) -> List[str]:
        return sorted(self._caches)

    async def close(self) -> None:
        """Close every provider and forget all caches."""
        for name, provider in list(self._providers.items()):
            await provider.close()
            logger.debug(f"Cache provider {name} closed")
        self._providers.clear()
        self._caches.clear()
