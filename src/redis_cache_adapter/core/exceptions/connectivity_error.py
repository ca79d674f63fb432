"""Connectivity error exception.

ONLY store connectivity errors - handshake or round-trip failures against
the remote store, timeouts included.
"""

from typing import Optional

from .base import CacheError


class ConnectivityError(CacheError):
    """Raised when the remote store cannot be reached or a command fails."""

    def __init__(
        self,
        message: str,
        cache_name: Optional[str] = None,
        key: Optional[str] = None,
        operation: Optional[str] = None,
    ):
        details = {}
        if cache_name is not None:
            details["cache_name"] = cache_name
        if key is not None:
            details["key"] = key
        if operation is not None:
            details["operation"] = operation
        super().__init__(message, error_code="CACHE_CONNECTIVITY_ERROR", details=details)
        self.cache_name = cache_name
        self.key = key
        self.operation = operation

    @classmethod
    def handshake(cls, provider_name: str, address: str, reason: str) -> "ConnectivityError":
        """Create error for a failed PING at initialization."""
        return cls(
            f"{provider_name}: unable to connect to {address}: {reason}",
            operation="ping",
        )

    @classmethod
    def command(cls, cache_name: str, operation: str, key: Optional[str], reason: str) -> "ConnectivityError":
        """Create error for a failed store command."""
        if key is None:
            message = f"{cache_name}: {operation} failed: {reason}"
        else:
            message = f"{cache_name}: key({key}) {operation} failed: {reason}"
        return cls(message, cache_name=cache_name, key=key, operation=operation)
