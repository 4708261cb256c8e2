"""Dataclass models for the token exchange and current-reading documents."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

# Explicit variant for resources whose type is not known to the registry.
UNKNOWN_TYPE = "unknown"


class ResourceType(str, Enum):
    """JSON-API type discriminators served under ``/api``."""

    STRUCTURES = "structures"
    ROOMS = "rooms"
    VENTS = "vents"
    HVAC_UNITS = "hvac-units"
    THERMOSTATS = "thermostats"
    BRIDGES = "bridges"
    REMOTE_SENSORS = "remote-sensors"
    USERS = "users"
    PUCKS = "pucks"

    def __str__(self) -> str:
        return self.value


def parse_datetime(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp as sent by the API; None passes through."""
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def format_datetime(value: datetime | str | None) -> str | None:
    if isinstance(value, datetime):
        return value.isoformat()
    return value


@dataclass
class Token:
    """OAuth2 client-credentials token."""

    access_token: str
    token_type: str
    expires_in: int | None

    @classmethod
    def from_dict(cls, data: dict) -> Token:
        return cls(
            access_token=data["access_token"],
            token_type=data.get("token_type", "Bearer"),
            expires_in=data.get("expires_in"),
        )

    @property
    def authorization(self) -> str:
        """Value for the ``Authorization`` header."""
        return f"{self.token_type} {self.access_token}"


def _attrs(data: dict) -> dict:
    return data.get("attributes") or {}


@dataclass
class VentReading:
    """Latest telemetry reported by a vent."""

    id: str | None
    percent_open: int | None
    duct_temperature_c: float | None
    duct_pressure: float | None
    system_voltage: float | None
    rssi: float | None
    created_at: datetime | None

    @classmethod
    def from_dict(cls, data: dict) -> VentReading:
        a = _attrs(data)
        return cls(
            id=data.get("id"),
            percent_open=a.get("percent-open"),
            duct_temperature_c=a.get("duct-temperature-c"),
            duct_pressure=a.get("duct-pressure"),
            system_voltage=a.get("system-voltage"),
            rssi=a.get("rssi"),
            created_at=parse_datetime(a.get("created-at")),
        )


@dataclass
class PuckReading:
    """Latest telemetry reported by a puck."""

    id: str | None
    room_temperature_c: float | None
    humidity: float | None
    system_voltage: float | None
    rssi: float | None
    created_at: datetime | None

    @classmethod
    def from_dict(cls, data: dict) -> PuckReading:
        a = _attrs(data)
        return cls(
            id=data.get("id"),
            room_temperature_c=a.get("room-temperature-c"),
            humidity=a.get("humidity"),
            system_voltage=a.get("system-voltage"),
            rssi=a.get("rssi"),
            created_at=parse_datetime(a.get("created-at")),
        )


@dataclass
class BridgeReading:
    """Latest signal and display state reported by a bridge."""

    id: str | None
    rssi: float | None
    display_number: str | None
    led_brightness: int | None
    created_at: datetime | None

    @classmethod
    def from_dict(cls, data: dict) -> BridgeReading:
        a = _attrs(data)
        return cls(
            id=data.get("id"),
            rssi=a.get("rssi"),
            display_number=a.get("display-number"),
            led_brightness=a.get("led-brightness"),
            created_at=parse_datetime(a.get("created-at")),
        )


@dataclass
class RemoteSensorReading:
    """Latest telemetry reported by a remote sensor."""

    id: str | None
    room_temperature_c: float | None
    humidity: float | None
    system_voltage: float | None
    rssi: float | None
    created_at: datetime | None

    @classmethod
    def from_dict(cls, data: dict) -> RemoteSensorReading:
        a = _attrs(data)
        return cls(
            id=data.get("id"),
            room_temperature_c=a.get("room-temperature-c"),
            humidity=a.get("humidity"),
            system_voltage=a.get("system-voltage"),
            rssi=a.get("rssi"),
            created_at=parse_datetime(a.get("created-at")),
        )
