from __future__ import annotations

from .._types import ResourceType, VentReading
from ._registry import register
from .base import Attribute, CurrentReadingMixin, DateTimeAttribute, Resource


@register
class Vent(CurrentReadingMixin, Resource):
    """A smart vent. Opening is controlled through ``percent-open``."""

    type = ResourceType.VENTS.value
    reading_class = VentReading

    name = Attribute("name")
    percent_open = Attribute("percent-open")
    inactive = Attribute("inactive")
    created_at = DateTimeAttribute("created-at")
    updated_at = DateTimeAttribute("updated-at")

    @property
    def room_id(self) -> str | None:
        return self.related_id("room")

    @property
    def structure_id(self) -> str | None:
        return self.related_id("structure")

    def set_percent_open(self, percent: int) -> Vent:
        """PATCH the opening; accepts 0-100."""
        if not 0 <= percent <= 100:
            raise ValueError(f"percent must be within 0-100, got {percent}")
        return self.update({"percent-open": percent})
