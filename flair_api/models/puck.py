from __future__ import annotations

from .._types import PuckReading, ResourceType
from ._registry import register
from .base import Attribute, CurrentReadingMixin, DateTimeAttribute, Resource


@register
class Puck(CurrentReadingMixin, Resource):
    """A room puck: temperature/humidity sensor and IR blaster for mini-splits."""

    type = ResourceType.PUCKS.value
    reading_class = PuckReading

    name = Attribute("name")
    display_number = Attribute("display-number")
    current_temperature_c = Attribute("current-temperature-c")
    current_humidity = Attribute("current-humidity")
    voltage = Attribute("voltage")
    current_rssi = Attribute("current-rssi")
    inactive = Attribute("inactive")
    orientation = Attribute("orientation")
    temperature_offset_c = Attribute("temperature-offset-override-c")
    created_at = DateTimeAttribute("created-at")
    updated_at = DateTimeAttribute("updated-at")

    @property
    def room_id(self) -> str | None:
        return self.related_id("room")

    @property
    def structure_id(self) -> str | None:
        return self.related_id("structure")
