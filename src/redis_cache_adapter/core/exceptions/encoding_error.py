"""Encoding error exception.

ONLY encoding errors - raised when a cache entry cannot be framed into bytes,
most often because the value's type was never registered with the codec.
"""

from typing import Any, Optional

from .base import CacheError


class EncodingError(CacheError):
    """Cache entry encoding error."""

    def __init__(self, message: str, value_type: Optional[type] = None):
        details = {}
        if value_type is not None:
            details["value_type"] = f"{value_type.__module__}.{value_type.__qualname__}"
        super().__init__(message, error_code="CACHE_ENCODING_ERROR", details=details)
        self.value_type = value_type

    @classmethod
    def unregistered_type(cls, value: Any) -> "EncodingError":
        """Create error for a value whose type is not in the registry."""
        value_type = type(value)
        return cls(
            f"type not registered for encoding: "
            f"{value_type.__module__}.{value_type.__qualname__}",
            value_type=value_type,
        )
