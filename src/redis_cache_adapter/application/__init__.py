"""Cache application layer."""

from .services import CacheManager

__all__ = ["CacheManager"]
