from __future__ import annotations

from .._types import BridgeReading, ResourceType
from ._registry import register
from .base import Attribute, CurrentReadingMixin, DateTimeAttribute, Resource


@register
class Bridge(CurrentReadingMixin, Resource):
    type = ResourceType.BRIDGES.value
    reading_class = BridgeReading

    name = Attribute("name")
    display_number = Attribute("display-number")
    led_brightness = Attribute("led-brightness")
    current_rssi = Attribute("current-rssi")
    inactive = Attribute("inactive")
    created_at = DateTimeAttribute("created-at")
    updated_at = DateTimeAttribute("updated-at")

    @property
    def structure_id(self) -> str | None:
        return self.related_id("structure")
