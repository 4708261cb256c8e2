from __future__ import annotations

from enum import Enum

from .._types import ResourceType
from ._registry import register
from .base import Attribute, DateTimeAttribute, EnumAttribute, Resource


class StructureHeatCoolMode(str, Enum):
    # The API calls "off" float.
    OFF = "float"
    COOL = "cool"
    HEAT = "heat"
    AUTO = "auto"


class FlairMode(str, Enum):
    MANUAL = "manual"
    AUTO = "auto"


@register
class Structure(Resource):
    """A home: the root that rooms, vents and devices hang from."""

    type = ResourceType.STRUCTURES.value

    name = Attribute("name")
    is_active = Attribute("is-active")
    home = Attribute("home")
    structure_heat_cool_mode = EnumAttribute("structure-heat-cool-mode", StructureHeatCoolMode)
    structure_heat_cool_mode_calculated = EnumAttribute(
        "structure-heat-cool-mode-calculated", StructureHeatCoolMode
    )
    set_point_temperature_c = Attribute("set-point-temperature-c")
    mode = EnumAttribute("mode", FlairMode)
    time_zone = Attribute("time-zone")
    created_at = DateTimeAttribute("created-at")
    updated_at = DateTimeAttribute("updated-at")

    def is_primary_home(self) -> bool:
        return bool(self.home)
