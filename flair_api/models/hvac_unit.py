from __future__ import annotations

from .._types import ResourceType
from ._registry import register
from .base import Attribute, DateTimeAttribute, Resource


@register
class HvacUnit(Resource):
    type = ResourceType.HVAC_UNITS.value

    name = Attribute("name")
    ir_setup_enabled = Attribute("ir-setup-enabled")
    make_model = Attribute("make-model")
    swing_mode = Attribute("swing-mode")
    system_mode = Attribute("system-mode")
    fan_mode = Attribute("fan-mode")
    set_point_temperature_c = Attribute("set-point-temperature-c")
    current_temperature_c = Attribute("current-temperature-c")
    created_at = DateTimeAttribute("created-at")
    updated_at = DateTimeAttribute("updated-at")
