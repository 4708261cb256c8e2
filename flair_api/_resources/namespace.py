from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .._client import Client
    from ..models import Resource


class ResourceNamespace:
    """client.<type>: CRUD bound to one resource class."""

    def __init__(self, client: Client, resource_cls: type[Resource]):
        self._client = client
        self.resource_cls = resource_cls

    def list(self) -> list[Resource]:
        result = self._client.get(self.resource_cls)
        if result is None:
            return []
        return result if isinstance(result, list) else [result]

    def get(self, id: str) -> Resource:
        return self._client.get(self.resource_cls, id)

    def create(
        self,
        attributes: Mapping[str, Any] | None = None,
        relationships: Mapping[str, Any] | None = None,
    ) -> Resource:
        return self._client.create(self.resource_cls, attributes, relationships)

    def update(
        self,
        id: str,
        attributes: Mapping[str, Any] | None = None,
        relationships: Mapping[str, Any] | None = None,
    ) -> Resource:
        return self._client.update(self.resource_cls, id, attributes, relationships)

    def delete(self, id: str) -> None:
        self._client.delete(self.resource_cls, id)


class ReadingNamespace(ResourceNamespace):
    """Namespace for types with a ``current-reading`` sub-endpoint."""

    def current_reading(self, id: str) -> Any:
        """Fetch and parse the latest reading into the type's reading dataclass."""
        data = self._client.current_reading(self.resource_cls, id)
        if data is None:
            return None
        return self.resource_cls.reading_class.from_dict(data)
