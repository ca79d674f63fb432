"""Cache adapter exceptions.

One exception per file following maximum separation architecture.
"""

from .base import CacheError
from .cache_miss import CacheMiss
from .configuration_error import ConfigurationError
from .connectivity_error import ConnectivityError
from .decoding_error import DecodingError
from .encoding_error import EncodingError

__all__ = [
    "CacheError",
    "CacheMiss",
    "ConfigurationError",
    "ConnectivityError",
    "DecodingError",
    "EncodingError",
]
