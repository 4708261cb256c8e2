from __future__ import annotations

from .._types import ResourceType
from ._registry import register
from .base import Attribute, DateTimeAttribute, Resource


@register
class Room(Resource):
    type = ResourceType.ROOMS.value

    name = Attribute("name")
    active = Attribute("active")
    current_temperature_c = Attribute("current-temperature-c")
    current_humidity = Attribute("current-humidity")
    set_point_c = Attribute("set-point-c")
    occupancy_mode = Attribute("occupancy-mode")
    created_at = DateTimeAttribute("created-at")
    updated_at = DateTimeAttribute("updated-at")

    @property
    def structure_id(self) -> str | None:
        return self.related_id("structure")

    @property
    def vent_ids(self) -> list[str]:
        return self.related_ids("vents")
