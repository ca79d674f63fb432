"""Codec type registry.

ONLY type registration - maps concrete Python types to stable names plus
encode/decode hooks so structured values can be rebuilt on read.

Native msgpack types (None, bool, int, float, str, bytes, list, dict) never
need registering. Every other concrete type, subclasses of builtins included,
must be registered before it can be encoded or decoded.
"""

import threading
from dataclasses import dataclass, fields, is_dataclass
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Dict, Optional
from uuid import UUID

from pydantic import BaseModel

Encoder = Callable[[Any], Any]
Decoder = Callable[[Any], Any]


@dataclass(frozen=True)
class RegisteredType:
    """A type known to the codec."""

    cls: type
    name: str
    encoder: Encoder
    decoder: Decoder


def _dataclass_hooks(cls: type):
    init_fields = [f.name for f in fields(cls) if f.init]
    other_fields = [f.name for f in fields(cls) if not f.init]

    def encode(obj: Any) -> Dict[str, Any]:
        return {f.name: getattr(obj, f.name) for f in fields(obj)}

    def decode(state: Dict[str, Any]) -> Any:
        obj = cls(**{name: state[name] for name in init_fields if name in state})
        for name in other_fields:
            if name in state:
                object.__setattr__(obj, name, state[name])
        return obj

    return encode, decode


def _model_hooks(cls: type):
    def encode(obj: BaseModel) -> Dict[str, Any]:
        return obj.model_dump()

    def decode(state: Dict[str, Any]) -> Any:
        return cls.model_validate(state)

    return encode, decode


def _enum_hooks(cls: type):
    return (lambda obj: obj.value), (lambda state: cls(state))


def _object_hooks(cls: type):
    def encode(obj: Any) -> Dict[str, Any]:
        return dict(vars(obj))

    def decode(state: Dict[str, Any]) -> Any:
        obj = cls.__new__(cls)
        obj.__dict__.update(state)
        return obj

    return encode, decode


def _default_hooks(cls: type):
    if is_dataclass(cls):
        return _dataclass_hooks(cls)
    if issubclass(cls, BaseModel):
        return _model_hooks(cls)
    if issubclass(cls, Enum):
        return _enum_hooks(cls)
    if "__dict__" in dir(cls) or not hasattr(cls, "__slots__"):
        return _object_hooks(cls)
    raise TypeError(
        f"{cls.__qualname__} has no instance __dict__; "
        f"register it with explicit encoder and decoder"
    )


class TypeRegistry:
    """Thread-safe registry of encodable types.

    Lookups happen on every encode/decode and are lock-free; registration
    takes a lock so concurrent registrations cannot claim the same name.
    """

    def __init__(self):
        self._by_type: Dict[type, RegisteredType] = {}
        self._by_name: Dict[str, RegisteredType] = {}
        self._lock = threading.Lock()

    @classmethod
    def with_builtins(cls) -> "TypeRegistry":
        """Create a registry pre-loaded with common standard library types."""
        registry = cls()
        register_builtin_types(registry)
        return registry

    def register(
        self,
        cls: type,
        name: Optional[str] = None,
        encoder: Optional[Encoder] = None,
        decoder: Optional[Decoder] = None,
    ) -> RegisteredType:
        """Register a type for encoding and decoding.

        Args:
            cls: Concrete type to register
            name: Stable wire name, defaults to ``module.QualName``
            encoder: Converts an instance to encodable state
            decoder: Rebuilds an instance from decoded state

        Returns:
            The registration record

        Raises:
            TypeError: If ``cls`` is not a class or has no usable default hooks
            ValueError: If the type or name is already registered differently
        """
        if not isinstance(cls, type):
            raise TypeError(f"expected a class, got {cls!r}")

        type_name = name or f"{cls.__module__}.{cls.__qualname__}"

        with self._lock:
            existing = self._by_type.get(cls)
            if existing is not None:
                if existing.name != type_name:
                    raise ValueError(f"{cls.__qualname__} already registered as {existing.name!r}")
                return existing

            if type_name in self._by_name:
                raise ValueError(
                    f"name {type_name!r} already registered for "
                    f"{self._by_name[type_name].cls.__qualname__}"
                )

            if encoder is None or decoder is None:
                default_encoder, default_decoder = _default_hooks(cls)
                encoder = encoder or default_encoder
                decoder = decoder or default_decoder

            registered = RegisteredType(cls=cls, name=type_name, encoder=encoder, decoder=decoder)
            self._by_type[cls] = registered
            self._by_name[type_name] = registered
            return registered

    def lookup_type(self, cls: type) -> Optional[RegisteredType]:
        """Find the registration for an exact type."""
        return self._by_type.get(cls)

    def lookup_name(self, name: str) -> Optional[RegisteredType]:
        """Find the registration for a wire name."""
        return self._by_name.get(name)

    def is_registered(self, cls: type) -> bool:
        return cls in self._by_type

    def __contains__(self, cls: object) -> bool:
        return cls in self._by_type

    def __len__(self) -> int:
        return len(self._by_type)


def register_builtin_types(registry: TypeRegistry) -> None:
    """Register standard library types that msgpack cannot carry natively."""
    registry.register(tuple, "builtins.tuple", encoder=list, decoder=tuple)
    registry.register(set, "builtins.set", encoder=list, decoder=set)
    registry.register(frozenset, "builtins.frozenset", encoder=list, decoder=frozenset)
    registry.register(datetime, "datetime.datetime", encoder=datetime.isoformat, decoder=datetime.fromisoformat)
    registry.register(date, "datetime.date", encoder=date.isoformat, decoder=date.fromisoformat)
    registry.register(time, "datetime.time", encoder=time.isoformat, decoder=time.fromisoformat)
    registry.register(
        timedelta,
        "datetime.timedelta",
        encoder=lambda d: [d.days, d.seconds, d.microseconds],
        decoder=lambda state: timedelta(*state),
    )
    registry.register(Decimal, "decimal.Decimal", encoder=str, decoder=Decimal)
    registry.register(UUID, "uuid.UUID", encoder=str, decoder=UUID)


default_registry = TypeRegistry.with_builtins()


def register_type(
    cls: type,
    name: Optional[str] = None,
    encoder: Optional[Encoder] = None,
    decoder: Optional[Decoder] = None,
) -> RegisteredType:
    """Register a type with the process-wide default registry."""
    return default_registry.register(cls, name=name, encoder=encoder, decoder=decoder)
