from __future__ import annotations

from .._types import ResourceType
from ._registry import register
from .base import Attribute, DateTimeAttribute, Resource


@register
class User(Resource):
    type = ResourceType.USERS.value

    name = Attribute("name")
    email = Attribute("email")
    first_name = Attribute("first-name")
    last_name = Attribute("last-name")
    created_at = DateTimeAttribute("created-at")
    updated_at = DateTimeAttribute("updated-at")

    @property
    def structure_ids(self) -> list[str]:
        return self.related_ids("structures")
