"""
flair_api - Python client for the Flair smart vent API.

Generic JSON-API CRUD with typed resource models.
"""

__version__ = "0.1.0"

from ._client import Client
from ._exceptions import (
    APIError,
    AuthenticationError,
    ConflictError,
    EmptyBodyError,
    FlairError,
    MissingIdError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    ResourceStateError,
    ValidationError,
)
from ._types import UNKNOWN_TYPE, ResourceType
from .models import (
    Bridge,
    HvacUnit,
    Puck,
    RemoteSensor,
    Resource,
    ResourceState,
    Room,
    Structure,
    Thermostat,
    User,
    Vent,
)

__all__ = [
    "UNKNOWN_TYPE",
    "APIError",
    "AuthenticationError",
    "Bridge",
    # Main client
    "Client",
    "ConflictError",
    "EmptyBodyError",
    "FlairError",
    "HvacUnit",
    "MissingIdError",
    "NotFoundError",
    "PermissionDeniedError",
    "Puck",
    "RateLimitError",
    "RemoteSensor",
    "Resource",
    "ResourceState",
    "ResourceStateError",
    "ResourceType",
    "Room",
    "Structure",
    "Thermostat",
    "User",
    "ValidationError",
    "Vent",
]
