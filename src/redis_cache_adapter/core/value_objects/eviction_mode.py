"""Eviction mode value object.

ONLY eviction policy selection - fixed TTL set once at write time, or
sliding TTL renewed on every successful read.
"""

from enum import Enum


class EvictionMode(str, Enum):
    """How a cache instance treats entry lifetimes."""

    FIXED = "fixed"
    SLIDE = "slide"

    @property
    def is_sliding(self) -> bool:
        """Check if reads renew the entry TTL."""
        return self is EvictionMode.SLIDE
