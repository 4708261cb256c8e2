"""Typed views of the JSON-API resources served under ``/api``."""

from ._registry import is_registered, register, registered_types, resource_class, type_name
from .base import (
    Attribute,
    CurrentReadingMixin,
    DateTimeAttribute,
    EnumAttribute,
    Resource,
    ResourceState,
)
from .bridge import Bridge
from .hvac_unit import HvacUnit
from .puck import Puck
from .remote_sensor import RemoteSensor
from .room import Room
from .structure import FlairMode, Structure, StructureHeatCoolMode
from .thermostat import Thermostat
from .user import User
from .vent import Vent

__all__ = [
    "Attribute",
    "Bridge",
    "CurrentReadingMixin",
    "DateTimeAttribute",
    "EnumAttribute",
    "FlairMode",
    "HvacUnit",
    "Puck",
    "RemoteSensor",
    "Resource",
    "ResourceState",
    "Room",
    "Structure",
    "StructureHeatCoolMode",
    "Thermostat",
    "User",
    "Vent",
    "is_registered",
    "register",
    "registered_types",
    "resource_class",
    "type_name",
]
