from __future__ import annotations

from .._types import RemoteSensorReading, ResourceType
from ._registry import register
from .base import Attribute, CurrentReadingMixin, DateTimeAttribute, Resource


@register
class RemoteSensor(CurrentReadingMixin, Resource):
    type = ResourceType.REMOTE_SENSORS.value
    reading_class = RemoteSensorReading

    name = Attribute("name")
    current_temperature_c = Attribute("current-temperature-c")
    current_humidity = Attribute("current-humidity")
    rssi = Attribute("rssi")
    system_voltage = Attribute("system-voltage")
    battery_level = Attribute("battery-level")
    online = Attribute("online")
    last_reading = DateTimeAttribute("last-reading")
    temperature_offset_c = Attribute("temperature-offset-c")
    humidity_offset = Attribute("humidity-offset")
    created_at = DateTimeAttribute("created-at")
    updated_at = DateTimeAttribute("updated-at")

    @property
    def room_id(self) -> str | None:
        return self.related_id("room")

    @property
    def structure_id(self) -> str | None:
        return self.related_id("structure")
