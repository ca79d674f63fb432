"""Tests for the codec type registry."""

from dataclasses import dataclass, field
from enum import Enum

import pytest
from pydantic import BaseModel

from redis_cache_adapter.infrastructure.serializers import TypeRegistry


@dataclass
class Point:
    x: int
    y: int
    label: str = field(default="", init=False)


class Color(Enum):
    RED = "red"
    BLUE = "blue"


class Profile(BaseModel):
    name: str
    age: int


class Plain:
    def __init__(self, value):
        self.value = value


class Slotted:
    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value


class TestTypeRegistry:
    """Test cases for TypeRegistry."""

    def test_default_name_is_module_qualname(self):
        registry = TypeRegistry()
        registered = registry.register(Point)

        assert registered.name == f"{Point.__module__}.Point"
        assert registry.lookup_type(Point) is registered
        assert registry.lookup_name(registered.name) is registered
        assert Point in registry

    def test_register_is_idempotent(self):
        """Test registering the same class twice returns the first record."""
        registry = TypeRegistry()
        first = registry.register(Point)
        second = registry.register(Point)

        assert first is second
        assert len(registry) == 1

    def test_name_collision_rejected(self):
        """Test two classes cannot share a wire name."""
        registry = TypeRegistry()
        registry.register(Point, name="shape")

        with pytest.raises(ValueError):
            registry.register(Plain, name="shape")

    def test_renaming_registered_type_rejected(self):
        registry = TypeRegistry()
        registry.register(Point, name="point.v1")

        with pytest.raises(ValueError):
            registry.register(Point, name="point.v2")

    def test_non_class_rejected(self):
        with pytest.raises(TypeError):
            TypeRegistry().register(Point(1, 2))

    def test_dataclass_hooks(self):
        """Test dataclass hooks keep init=False fields."""
        registered = TypeRegistry().register(Point)
        point = Point(1, 2)
        point.label = "origin-ish"

        state = registered.encoder(point)
        rebuilt = registered.decoder(state)

        assert state == {"x": 1, "y": 2, "label": "origin-ish"}
        assert rebuilt == point
        assert rebuilt.label == "origin-ish"

    def test_pydantic_model_hooks(self):
        registered = TypeRegistry().register(Profile)

        rebuilt = registered.decoder(registered.encoder(Profile(name="Jeeva", age=30)))

        assert rebuilt == Profile(name="Jeeva", age=30)

    def test_enum_hooks(self):
        registered = TypeRegistry().register(Color)

        assert registered.encoder(Color.BLUE) == "blue"
        assert registered.decoder("blue") is Color.BLUE

    def test_plain_object_hooks(self):
        registered = TypeRegistry().register(Plain)

        rebuilt = registered.decoder(registered.encoder(Plain(42)))

        assert isinstance(rebuilt, Plain)
        assert rebuilt.value == 42

    def test_slotted_class_needs_explicit_hooks(self):
        registry = TypeRegistry()

        with pytest.raises(TypeError):
            registry.register(Slotted)

        registered = registry.register(
            Slotted, encoder=lambda obj: obj.value, decoder=Slotted
        )
        assert registered.decoder(registered.encoder(Slotted(7))).value == 7

    def test_with_builtins(self):
        """Test standard library types are pre-registered."""
        registry = TypeRegistry.with_builtins()

        for cls in (tuple, set, frozenset):
            assert registry.is_registered(cls)
        assert registry.lookup_name("datetime.datetime") is not None
        assert registry.lookup_name("uuid.UUID") is not None
        assert not registry.is_registered(Point)
