"""Base cache exception.

All adapter exceptions inherit from CacheError and carry an error code
and structured details for logging and API responses.
"""

from typing import Any, Dict, Optional


class CacheError(Exception):
    """Base exception for all cache adapter errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def get_error_details(self) -> Dict[str, Any]:
        """Get detailed error information."""
        details = {
            "error_code": self.error_code,
            "message": self.message,
            "type": self.__class__.__name__,
            "details": self.details,
        }

        cause = self.__cause__
        if cause is not None:
            details["original_error"] = {
                "type": type(cause).__name__,
                "message": str(cause),
            }

        return details
