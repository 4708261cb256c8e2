from __future__ import annotations

from .._types import ResourceType
from ._registry import register
from .base import Attribute, DateTimeAttribute, Resource


@register
class Thermostat(Resource):
    type = ResourceType.THERMOSTATS.value

    name = Attribute("name")
    static_vents = Attribute("static-vents")
    make_model = Attribute("make-model")
    created_at = DateTimeAttribute("created-at")
    updated_at = DateTimeAttribute("updated-at")

    @property
    def structure_id(self) -> str | None:
        return self.related_id("structure")

    @property
    def room_id(self) -> str | None:
        return self.related_id("room")
