"""Generic JSON-API resource.

A resource keeps its attributes in one place, keyed by their wire names. Two
views read and write that storage:

* ``resource.attributes``: a read-only mapping of the wire document.
* flattened fields: ``resource.email``, or ``resource.make_model`` for the
  ``make-model`` key. Typed subclasses declare :class:`Attribute` fields that
  convert values (timestamps, enums) on the way in and out.

Because both views share storage, they stay consistent across every mutation.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, ClassVar

from .._exceptions import MissingIdError, ResourceStateError
from .._types import UNKNOWN_TYPE, format_datetime, parse_datetime

if TYPE_CHECKING:
    from .._client import Client


class ResourceState(str, Enum):
    """Lifecycle of a resource: TRANSIENT -> PERSISTED -> DELETED."""

    TRANSIENT = "transient"
    PERSISTED = "persisted"
    DELETED = "deleted"


class Attribute:
    """Typed field backed by one key of the resource's attribute storage."""

    def __init__(
        self,
        key: str,
        parse: Callable[[Any], Any] | None = None,
        dump: Callable[[Any], Any] | None = None,
    ):
        self.key = key
        self.parse = parse
        self.dump = dump
        self.name = key.replace("-", "_")

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Resource | None, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        value = obj._attributes.get(self.key)
        if value is None or self.parse is None:
            return value
        return self.parse(value)

    def __set__(self, obj: Resource, value: Any) -> None:
        if value is not None and self.dump is not None:
            value = self.dump(value)
        obj._attributes[self.key] = value


class DateTimeAttribute(Attribute):
    """ISO-8601 timestamp, exposed as ``datetime``."""

    def __init__(self, key: str):
        super().__init__(key, parse=parse_datetime, dump=format_datetime)


class EnumAttribute(Attribute):
    """Enum-valued field. Values the enum does not know are returned raw."""

    def __init__(self, key: str, enum_cls: type[Enum]):
        self.enum_cls = enum_cls
        super().__init__(key, parse=self._parse, dump=_enum_value)

    def _parse(self, value: Any) -> Any:
        try:
            return self.enum_cls(value)
        except ValueError:
            return value


def _enum_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


class Resource:
    """One server-side entity: identity, attributes, relationships and lifecycle."""

    type: ClassVar[str | None] = None

    # Instance attributes that live on the object rather than in the attribute storage.
    _INSTANCE_FIELDS: ClassVar[frozenset[str]] = frozenset({"id", "relationships", "deleted"})

    def __init__(
        self,
        id: str | None = None,
        attributes: Mapping[str, Any] | None = None,
        relationships: Mapping[str, Any] | None = None,
        *,
        client: Client | None = None,
        resource_type: str | None = None,
    ):
        object.__setattr__(self, "_attributes", dict(attributes or {}))
        object.__setattr__(self, "_client", client)
        object.__setattr__(self, "_type", str(resource_type) if resource_type else None)
        self.id = id
        self.relationships: dict[str, Any] = dict(relationships or {})
        self.deleted = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], client: Client | None = None) -> Resource:
        """Build a resource from a JSON-API resource object."""
        return cls(
            id=data.get("id"),
            attributes=data.get("attributes") or {},
            relationships=data.get("relationships") or {},
            client=client,
            resource_type=data.get("type"),
        )

    # ── attribute access ─────────────────────────────────────────────

    def _key_for(self, name: str) -> str:
        if name in self._attributes:
            return name
        return name.replace("_", "-")

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails: fall back to the attribute storage.
        attributes = self.__dict__.get("_attributes")
        if name.startswith("_") or attributes is None:
            raise AttributeError(name)
        if name in attributes:
            return attributes[name]
        dashed = name.replace("_", "-")
        if dashed in attributes:
            return attributes[dashed]
        raise AttributeError(f"{type(self).__name__!r} has no attribute {name!r}")

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_") or name in self._INSTANCE_FIELDS or hasattr(type(self), name):
            object.__setattr__(self, name, value)
        else:
            self._attributes[self._key_for(name)] = value

    @property
    def attributes(self) -> Mapping[str, Any]:
        """Read-only view of the attributes in wire form."""
        return MappingProxyType(self._attributes)

    @attributes.setter
    def attributes(self, value: Mapping[str, Any]) -> None:
        object.__setattr__(self, "_attributes", dict(value))

    # ── identity ─────────────────────────────────────────────────────

    @property
    def client(self) -> Client | None:
        return self._client

    def set_client(self, client: Client | None) -> Resource:
        """Bind the client used by refresh/update/delete."""
        object.__setattr__(self, "_client", client)
        return self

    def get_type(self) -> str:
        """The JSON-API type discriminator, or ``"unknown"`` for an untyped resource."""
        return type(self).type or self._type or UNKNOWN_TYPE

    @property
    def state(self) -> ResourceState:
        if self.deleted:
            return ResourceState.DELETED
        if self.id:
            return ResourceState.PERSISTED
        return ResourceState.TRANSIENT

    def to_relationship(self) -> dict[str, str]:
        """Minimal ``{"id", "type"}`` reference to this resource."""
        if not self.id:
            raise MissingIdError("Cannot create relationship without id")
        return {"id": self.id, "type": self.get_type()}

    def related_id(self, name: str) -> str | None:
        """Id of a to-one relationship, if the relationship document carries one."""
        rel = self.relationships.get(name)
        data = rel.get("data") if isinstance(rel, Mapping) else None
        if isinstance(data, Mapping):
            return data.get("id")
        return None

    def related_ids(self, name: str) -> list[str]:
        """Ids of a to-many relationship, in server order."""
        rel = self.relationships.get(name)
        data = rel.get("data") if isinstance(rel, Mapping) else None
        if isinstance(data, list):
            return [item["id"] for item in data if isinstance(item, Mapping) and "id" in item]
        return []

    # ── instance CRUD ────────────────────────────────────────────────

    def _require_client(self, action: str) -> Client:
        if self.deleted:
            raise ResourceStateError(f"Cannot {action}: resource has been deleted")
        if self._client is None or not self.id:
            raise ResourceStateError(f"Cannot {action}: missing client or id")
        return self._client

    def _merge(self, other: Resource | None) -> None:
        """Overwrite same-named fields with ``other``'s; leave the rest untouched."""
        if other is None:
            return
        if other.id:
            self.id = other.id
        self._attributes.update(other._attributes)
        self.relationships.update(other.relationships)

    def refresh(self) -> Resource:
        """Reload server state into this resource."""
        client = self._require_client("refresh")
        self._merge(client.get(self.get_type(), self.id))
        return self

    def update(
        self,
        attributes: Mapping[str, Any] | None = None,
        relationships: Mapping[str, Any] | None = None,
    ) -> Resource:
        """PATCH the given changes and merge the server's response into this resource."""
        client = self._require_client("update")
        self._merge(client.update(self.get_type(), self.id, attributes, relationships))
        return self

    def delete(self) -> None:
        client = self._require_client("delete")
        client.delete(self.get_type(), self.id)
        self.deleted = True

    # ── comparison ───────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Resource):
            return NotImplemented
        if self is other:
            return True
        # Id-less resources are only equal to themselves.
        if not self.id or not other.id:
            return False
        return self.get_type() == other.get_type() and self.id == other.id

    def __hash__(self) -> int:
        # Assigning an id to a transient resource changes its hash: re-insert it
        # into any set or dict it was added to before it was saved.
        if not self.id:
            return object.__hash__(self)
        return hash((self.get_type(), self.id))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} type={self.get_type()!r} id={self.id!r}>"


class CurrentReadingMixin:
    """For resources exposing a ``/current-reading`` sub-endpoint.

    The reading is kept apart from the resource's attributes.
    """

    reading_class: ClassVar[type]
    current_reading: Any = None

    def set_current_reading(self, data: Mapping[str, Any] | None) -> Any:
        """Project a reading document onto ``current_reading``; None clears it."""
        self.current_reading = self.reading_class.from_dict(data) if data is not None else None
        return self.current_reading

    def fetch_current_reading(self) -> Any:
        client = self._require_client("fetch current reading")  # type: ignore[attr-defined]
        data = client.current_reading(self.get_type(), self.id)  # type: ignore[attr-defined]
        return self.set_current_reading(data)

