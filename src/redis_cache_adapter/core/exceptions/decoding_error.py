"""Decoding error exception.

ONLY decoding errors - raised when stored bytes are malformed, truncated,
carry an unknown framing version or reference an unregistered type.
"""

from typing import Optional

from .base import CacheError


class DecodingError(CacheError):
    """Cache entry decoding error."""

    def __init__(self, message: str, data_size: Optional[int] = None, type_name: Optional[str] = None):
        details = {}
        if data_size is not None:
            details["data_size"] = data_size
        if type_name is not None:
            details["type_name"] = type_name
        super().__init__(message, error_code="CACHE_DECODING_ERROR", details=details)
        self.data_size = data_size
        self.type_name = type_name

    @classmethod
    def unregistered_type(cls, type_name: str) -> "DecodingError":
        """Create error for an encoded type name missing from the registry."""
        return cls(f"type not registered for decoding: {type_name}", type_name=type_name)
