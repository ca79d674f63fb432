"""Cache entry serialization.

Entry codec, its type registry and the shared encode buffer pool.
"""

from .buffer_pool import BufferPool
from .entry_codec import EXT_REGISTERED, FORMAT_VERSION, EntryCodec, create_entry_codec
from .type_registry import (
    RegisteredType,
    TypeRegistry,
    default_registry,
    register_builtin_types,
    register_type,
)

__all__ = [
    "BufferPool",
    "EntryCodec",
    "create_entry_codec",
    "EXT_REGISTERED",
    "FORMAT_VERSION",
    "RegisteredType",
    "TypeRegistry",
    "default_registry",
    "register_builtin_types",
    "register_type",
]
