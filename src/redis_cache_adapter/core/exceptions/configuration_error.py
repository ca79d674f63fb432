"""Configuration error exception.

ONLY configuration errors - raised when a provider is initialized with the
wrong role or malformed connection parameters.
"""

from typing import Optional

from .base import CacheError


class ConfigurationError(CacheError):
    """Fatal configuration error raised at provider initialization."""

    def __init__(self, message: str, provider_name: Optional[str] = None, **details):
        if provider_name is not None:
            details["provider_name"] = provider_name
        super().__init__(message, error_code="CACHE_CONFIGURATION_ERROR", details=details)
        self.provider_name = provider_name

    @classmethod
    def invalid_provider(cls, provider_name: str, role: str) -> "ConfigurationError":
        """Create error for a provider section that does not select redis."""
        return cls(
            f"not a valid provider name, expected 'redis' (got {role!r})",
            provider_name=provider_name,
            role=role,
        )
