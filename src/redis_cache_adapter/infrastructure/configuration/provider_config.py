"""Redis provider configuration.

ONLY provider connection settings - reads the ``cache.<name>.*`` section,
applies defaults, and maps the result onto redis-py pool arguments.
Duration options accept Go-style strings; unparsable durations fall back
to their defaults instead of failing initialization.
"""

import os
from datetime import timedelta
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError, field_validator, model_validator
from redis.asyncio.connection import UnixDomainSocketConnection
from redis.asyncio.retry import Retry
from redis.backoff import ExponentialBackoff

from ...core.exceptions.configuration_error import ConfigurationError
from ...utils.durations import parse_duration
from .config_tree import flatten_config

DEFAULT_PORT = 6379

DURATION_FIELDS = (
    "connect_timeout",
    "read_timeout",
    "write_timeout",
    "pool_timeout",
    "idle_timeout",
    "idle_check_interval",
    "min_retry_backoff",
    "max_retry_backoff",
)


def default_pool_size() -> int:
    """Ten connections per available CPU."""
    return 10 * (os.cpu_count() or 1)


class RedisProviderConfig(BaseModel):
    """Connection settings for one Redis provider instance."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    provider: str = ""
    network: str = "tcp"
    address: str = ":6379"
    password: SecretStr = SecretStr("")
    db: int = Field(default=0, ge=0)
    pool_size: int = Field(default_factory=default_pool_size, gt=0)
    max_retries: int = Field(default=0, ge=0)

    connect_timeout: timedelta = Field(default=timedelta(seconds=5), alias="timeout.connect")
    read_timeout: timedelta = Field(default=timedelta(seconds=3), alias="timeout.read")
    write_timeout: timedelta = Field(default=timedelta(seconds=3), alias="timeout.write")
    pool_timeout: timedelta = Field(default=timedelta(seconds=3), alias="timeout.pool")
    idle_timeout: timedelta = Field(default=timedelta(minutes=5), alias="timeout.idle")
    idle_check_interval: timedelta = Field(default=timedelta(minutes=1))
    min_retry_backoff: timedelta = Field(default=timedelta(milliseconds=8), alias="retry_backoff.min")
    max_retry_backoff: timedelta = Field(default=timedelta(milliseconds=512), alias="retry_backoff.max")

    @field_validator(*DURATION_FIELDS, mode="before")
    @classmethod
    def _parse_duration(cls, value: Any, info) -> timedelta:
        return parse_duration(value, cls.model_fields[info.field_name].default)

    @field_validator("network", mode="before")
    @classmethod
    def _validate_network(cls, value: Any) -> str:
        network = str(value).strip().lower()
        if network not in ("tcp", "unix"):
            raise ValueError(f"unsupported network {value!r}, expected 'tcp' or 'unix'")
        return network

    @field_validator("password", mode="before")
    @classmethod
    def _coerce_password(cls, value: Any) -> Any:
        return "" if value is None else value

    @model_validator(mode="after")
    def _validate_address(self) -> "RedisProviderConfig":
        if self.network == "tcp":
            self.host_port()
        elif not self.address:
            raise ValueError("unix network requires a socket path address")
        return self

    @classmethod
    def from_section(cls, section: Mapping[str, Any], provider_name: Optional[str] = None) -> "RedisProviderConfig":
        """Build from a ``cache.<name>`` configuration section.

        Raises:
            ConfigurationError: If a connection parameter is malformed
        """
        try:
            return cls.model_validate(flatten_config(section))
        except ValidationError as e:
            raise ConfigurationError(
                f"invalid redis provider configuration: {e}",
                provider_name=provider_name,
                errors=[
                    {"field": ".".join(str(part) for part in error["loc"]), "message": error["msg"]}
                    for error in e.errors()
                ],
            ) from e

    def host_port(self) -> Tuple[str, int]:
        """Split a ``host:port`` address. An empty host means localhost."""
        host, sep, port = self.address.rpartition(":")
        if not sep:
            raise ValueError(f"address {self.address!r} must be in host:port form")

        host = host.strip("[]") or "localhost"
        try:
            port_number = int(port)
        except ValueError:
            raise ValueError(f"invalid port in address {self.address!r}") from None
        if not 0 < port_number < 65536:
            raise ValueError(f"port out of range in address {self.address!r}")
        return host, port_number

    def build_retry(self) -> Retry:
        """Retry policy with exponential backoff between the configured bounds."""
        backoff = ExponentialBackoff(
            cap=self.max_retry_backoff.total_seconds(),
            base=self.min_retry_backoff.total_seconds(),
        )
        return Retry(backoff, self.max_retries)

    def to_pool_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``redis.asyncio.BlockingConnectionPool``.

        redis-py applies a single socket timeout to reads and writes, so the
        larger of the two configured values is used.
        """
        kwargs: Dict[str, Any] = {
            "max_connections": self.pool_size,
            "timeout": self.pool_timeout.total_seconds(),
            "db": self.db,
            "password": self.password.get_secret_value() or None,
            "socket_connect_timeout": self.connect_timeout.total_seconds(),
            "socket_timeout": max(self.read_timeout, self.write_timeout).total_seconds(),
            "health_check_interval": int(self.idle_check_interval.total_seconds()),
            "retry": self.build_retry(),
        }

        if self.network == "unix":
            kwargs["connection_class"] = UnixDomainSocketConnection
            kwargs["path"] = self.address
        else:
            kwargs["host"], kwargs["port"] = self.host_port()

        return kwargs
