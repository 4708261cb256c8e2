"""Flair API client: generic JSON-API CRUD over OAuth2 client credentials."""

from __future__ import annotations

from collections.abc import Mapping
import logging
import os
from typing import Any

from ._exceptions import AuthenticationError
from ._http import HTTPClient
from ._relationships import to_relationship_dict
from ._resources import ReadingNamespace, ResourceNamespace
from ._types import ResourceType
from .models import (
    Bridge,
    HvacUnit,
    Puck,
    RemoteSensor,
    Resource,
    Room,
    Structure,
    Thermostat,
    User,
    Vent,
    resource_class,
    type_name,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.flair.co"


def resource_url(resource_type: Any, id: str | None = None) -> str:
    """``/api/<type>``, suffixed with ``/<id>`` when given."""
    path = f"/api/{type_name(resource_type)}"
    if id:
        path += f"/{id}"
    return path


def _data(payload: Any) -> Any:
    # 204 and other bodiless successes carry no envelope.
    return payload.get("data") if isinstance(payload, dict) else None


class Client:
    """Client for the Flair smart-vent API.

    Usage:
        client = Client(client_id="...", client_secret="...")
        for vent in client.get("vents"):
            print(vent.name, vent.percent_open)
        vent.update({"percent-open": 50})
    """

    def __init__(
        self,
        client_id: str | None = None,
        client_secret: str | None = None,
        base_url: str | None = None,
        timeout: float | None = 30,
    ):
        client_id = client_id or os.environ.get("FLAIR_CLIENT_ID")
        client_secret = client_secret or os.environ.get("FLAIR_CLIENT_SECRET")
        if not client_id or not client_secret:
            raise AuthenticationError(
                "No client credentials provided. Pass client_id=/client_secret= or set "
                "FLAIR_CLIENT_ID and FLAIR_CLIENT_SECRET env vars."
            )
        base_url = base_url or os.environ.get("FLAIR_BASE_URL") or DEFAULT_BASE_URL

        self._http = HTTPClient(
            client_id=client_id, client_secret=client_secret, base_url=base_url, timeout=timeout
        )
        self.structures = ResourceNamespace(self, Structure)
        self.rooms = ResourceNamespace(self, Room)
        self.vents = ReadingNamespace(self, Vent)
        self.hvac_units = ResourceNamespace(self, HvacUnit)
        self.thermostats = ResourceNamespace(self, Thermostat)
        self.bridges = ReadingNamespace(self, Bridge)
        self.remote_sensors = ReadingNamespace(self, RemoteSensor)
        self.users = ResourceNamespace(self, User)
        self.pucks = ReadingNamespace(self, Puck)

    def instantiate(self, data: Mapping[str, Any], resource_type: Any = None) -> Resource:
        """Build the registered resource class for a JSON-API resource object."""
        doc_type = data.get("type") or (type_name(resource_type) if resource_type else None)
        if not doc_type:
            return Resource.from_dict(data, client=self)
        resource = resource_class(doc_type).from_dict({**data, "type": doc_type}, client=self)
        logger.debug("Instantiated %r", resource)
        return resource

    def get(self, resource_type: str | ResourceType | type[Resource], id: str | None = None) -> Any:
        """GET a single resource, or a list of resources when the response is a collection."""
        data = _data(self._http.request("GET", resource_url(resource_type, id)))
        if data is None:
            return None
        if isinstance(data, list):
            return [self.instantiate(item, resource_type) for item in data]
        return self.instantiate(data, resource_type)

    def create(
        self,
        resource_type: str | ResourceType | type[Resource],
        attributes: Mapping[str, Any] | None = None,
        relationships: Mapping[str, Any] | None = None,
    ) -> Resource | None:
        name = type_name(resource_type)
        body = {
            "data": {
                "type": name,
                "attributes": dict(attributes or {}),
                "relationships": to_relationship_dict(relationships),
            }
        }
        data = _data(self._http.request("POST", resource_url(name), json=body))
        return self.instantiate(data, name) if data is not None else None

    def update(
        self,
        resource_type: str | ResourceType | type[Resource],
        id: str,
        attributes: Mapping[str, Any] | None = None,
        relationships: Mapping[str, Any] | None = None,
    ) -> Resource | None:
        name = type_name(resource_type)
        body = {
            "data": {
                "id": id,
                "type": name,
                "attributes": dict(attributes or {}),
                "relationships": to_relationship_dict(relationships),
            }
        }
        data = _data(self._http.request("PATCH", resource_url(name, id), json=body))
        return self.instantiate(data, name) if data is not None else None

    def delete(self, resource_type: str | ResourceType | type[Resource], id: str) -> None:
        self._http.request("DELETE", resource_url(resource_type, id))

    def current_reading(
        self, resource_type: str | ResourceType | type[Resource], id: str
    ) -> dict[str, Any]:
        """GET the ``current-reading`` sub-resource; returns its JSON-API data object."""
        return _data(
            self._http.request("GET", f"{resource_url(resource_type, id)}/current-reading")
        )
