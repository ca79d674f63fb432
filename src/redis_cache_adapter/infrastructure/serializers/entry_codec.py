"""Cache entry codec.

ONLY entry framing - converts a (ttl, value) pair into the opaque byte
payload stored in the remote store, and back.

Payload layout: one format version byte followed by a MessagePack array
``[ttl_milliseconds, value]``. Instances of registered types travel as
MessagePack extension type ``EXT_REGISTERED`` holding ``[type_name, state]``.
"""

import io
from datetime import timedelta
from typing import Any, Optional, Union

import msgpack

from ...core.entities.cache_entry import CacheEntry
from ...core.exceptions.decoding_error import DecodingError
from ...core.exceptions.encoding_error import EncodingError
from ...utils.durations import to_milliseconds, to_timedelta
from .buffer_pool import BufferPool
from .type_registry import TypeRegistry, default_registry

FORMAT_VERSION = 1
EXT_REGISTERED = 1

_HEADER = bytes([FORMAT_VERSION])


class EntryCodec:
    """Encodes cache entries with an explicit type registry.

    Encoding a value whose concrete type (or any nested type) is neither a
    native MessagePack type nor registered raises EncodingError. Decoding an
    unknown type name raises DecodingError.
    """

    def __init__(
        self,
        registry: Optional[TypeRegistry] = None,
        buffer_pool: Optional[BufferPool] = None,
    ):
        self._registry = registry if registry is not None else default_registry
        self._buffer_pool = buffer_pool if buffer_pool is not None else BufferPool()

    @property
    def registry(self) -> TypeRegistry:
        return self._registry

    @property
    def buffer_pool(self) -> BufferPool:
        return self._buffer_pool

    def encode(self, ttl: Union[timedelta, int, float], value: Any) -> bytes:
        """Encode an entry to bytes using a pooled buffer."""
        with self._buffer_pool.buffer() as buf:
            self.encode_into(buf, ttl, value)
            return buf.getvalue()

    def encode_into(self, buffer: io.BytesIO, ttl: Union[timedelta, int, float], value: Any) -> None:
        """Encode an entry into a caller-supplied buffer.

        Nothing is written to ``buffer`` when encoding fails.

        Raises:
            EncodingError: If the value cannot be encoded
            ValueError: If ``ttl`` is negative
        """
        delta = to_timedelta(ttl)
        payload = self._pack([to_milliseconds(delta), value], value)
        buffer.write(_HEADER)
        buffer.write(payload)

    def decode(self, data: Union[bytes, bytearray, memoryview]) -> CacheEntry:
        """Decode bytes produced by ``encode``.

        Raises:
            DecodingError: If the payload is malformed, truncated or
                references an unregistered type
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise DecodingError(f"payload must be bytes, got {type(data).__name__}")

        raw = bytes(data)
        if not raw:
            raise DecodingError("empty payload", data_size=0)
        if raw[0] != FORMAT_VERSION:
            raise DecodingError(f"unsupported entry format version {raw[0]}", data_size=len(raw))

        frame = self._unpack(raw[1:], data_size=len(raw))

        if (
            not isinstance(frame, list)
            or len(frame) != 2
            or isinstance(frame[0], bool)
            or not isinstance(frame[0], int)
            or frame[0] < 0
        ):
            raise DecodingError("malformed entry frame", data_size=len(raw))

        try:
            ttl = timedelta(milliseconds=frame[0])
        except OverflowError as e:
            raise DecodingError(f"entry ttl out of range: {frame[0]}", data_size=len(raw)) from e

        return CacheEntry(ttl=ttl, value=frame[1])

    def _pack(self, obj: Any, value: Any) -> bytes:
        try:
            return msgpack.packb(
                obj,
                default=self._encode_registered,
                use_bin_type=True,
                strict_types=True,
            )
        except EncodingError:
            raise
        except (TypeError, ValueError, OverflowError) as e:
            raise EncodingError(f"entry encoding failed: {e}", value_type=type(value)) from e

    def _unpack(self, data: bytes, data_size: int) -> Any:
        try:
            return msgpack.unpackb(
                data,
                ext_hook=self._decode_registered,
                raw=False,
                strict_map_key=False,
            )
        except DecodingError:
            raise
        except (ValueError, TypeError, msgpack.exceptions.UnpackException) as e:
            raise DecodingError(f"entry decoding failed: {e}", data_size=data_size) from e

    def _encode_registered(self, obj: Any) -> msgpack.ExtType:
        registered = self._registry.lookup_type(type(obj))
        if registered is None:
            raise EncodingError.unregistered_type(obj)

        state = registered.encoder(obj)
        data = msgpack.packb(
            [registered.name, state],
            default=self._encode_registered,
            use_bin_type=True,
            strict_types=True,
        )
        return msgpack.ExtType(EXT_REGISTERED, data)

    def _decode_registered(self, code: int, data: bytes) -> Any:
        if code != EXT_REGISTERED:
            raise DecodingError(f"unknown extension type code {code}")

        record = msgpack.unpackb(
            data,
            ext_hook=self._decode_registered,
            raw=False,
            strict_map_key=False,
        )
        if not isinstance(record, list) or len(record) != 2 or not isinstance(record[0], str):
            raise DecodingError("malformed registered type record")

        type_name, state = record
        registered = self._registry.lookup_name(type_name)
        if registered is None:
            raise DecodingError.unregistered_type(type_name)

        try:
            return registered.decoder(state)
        except (TypeError, ValueError, KeyError, AttributeError) as e:
            raise DecodingError(
                f"unable to rebuild {type_name}: {e}", type_name=type_name
            ) from e


def create_entry_codec(
    registry: Optional[TypeRegistry] = None,
    max_pooled_buffers: int = 64,
    max_buffer_bytes: int = 64 * 1024,
) -> EntryCodec:
    """Create an entry codec with its own buffer pool.

    Args:
        registry: Type registry, defaults to the process-wide registry
        max_pooled_buffers: Maximum idle buffers kept for reuse
        max_buffer_bytes: Buffers larger than this are not reused

    Returns:
        Configured entry codec
    """
    return EntryCodec(
        registry=registry,
        buffer_pool=BufferPool(max_pooled=max_pooled_buffers, max_buffer_bytes=max_buffer_bytes),
    )
