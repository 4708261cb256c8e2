"""Registry mapping JSON-API type strings to resource classes."""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

from .._types import UNKNOWN_TYPE
from .base import Resource

R = TypeVar("R", bound=type[Resource])

_REGISTRY: dict[str, type[Resource]] = {}


def type_name(value: Any) -> str:
    """Normalize a type given as a string, ``ResourceType``, resource class or instance."""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, str):
        return value
    if isinstance(value, Resource):
        return value.get_type()
    if isinstance(value, type) and issubclass(value, Resource):
        return value.type or UNKNOWN_TYPE
    raise TypeError(f"Not a resource type: {value!r}")


def register(cls: R) -> R:
    """Class decorator registering ``cls`` under its ``type``."""
    if not cls.type:
        raise ValueError(f"{cls.__name__} has no type to register under")
    _REGISTRY[type_name(cls.type)] = cls
    return cls


def resource_class(value: Any) -> type[Resource]:
    """Class registered for ``value``, or the untyped ``Resource``."""
    return _REGISTRY.get(type_name(value), Resource)


def is_registered(value: Any) -> bool:
    return type_name(value) in _REGISTRY


def registered_types() -> dict[str, type[Resource]]:
    return dict(sorted(_REGISTRY.items()))
