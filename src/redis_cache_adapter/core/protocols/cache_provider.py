"""Cache provider protocol.

ONLY the provider lifecycle contract - initialize from configuration,
create named caches, release the connection.
"""

import logging
from typing import Any, Mapping, Optional
from typing_extensions import Protocol, runtime_checkable

from ..value_objects.cache_instance_config import CacheInstanceConfig
from .cache import Cache


@runtime_checkable
class CacheProvider(Protocol):
    """Provider owning one connection to a remote store."""

    @property
    def name(self) -> str:
        """Provider instance name."""
        ...

    async def initialize(
        self,
        name: str,
        config: Mapping[str, Any],
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """Validate configuration and connect.

        Raises:
            ConfigurationError: If the configuration does not select this provider
            ConnectivityError: If the connection handshake fails
        """
        ...

    def create(self, cache_config: CacheInstanceConfig) -> Cache:
        """Create a named cache instance sharing this provider's connection."""
        ...

    async def close(self) -> None:
        """Release the provider connection."""
        ...
