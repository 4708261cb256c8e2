"""Encode relationship mappings into JSON-API relationship documents."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .models.base import Resource


def _reference(item: Any) -> Any:
    if isinstance(item, Resource):
        return item.to_relationship()
    return item


def to_relationship_dict(relationships: Mapping[str, Any] | None) -> dict[str, dict[str, Any]]:
    """Wrap each relationship in ``{"data": ...}``.

    Values may be a resource, a ``{"id", "type"}`` literal, or a list of either
    (order preserved, an empty list clears a to-many relationship). Falsy
    values are omitted rather than sent as null.
    """
    result: dict[str, dict[str, Any]] = {}
    for key, value in (relationships or {}).items():
        if isinstance(value, (list, tuple)):
            result[key] = {"data": [_reference(item) for item in value]}
        elif isinstance(value, Resource):
            result[key] = {"data": value.to_relationship()}
        elif value:
            result[key] = {"data": value}
    return result
