"""Tests for the typed resource models, current readings and the type registry."""

from datetime import datetime, timezone

import pytest
import responses

from flair_api._exceptions import ResourceStateError
from flair_api._types import (
    BridgeReading,
    PuckReading,
    RemoteSensorReading,
    ResourceType,
    VentReading,
)
from flair_api.models import (
    Bridge,
    FlairMode,
    HvacUnit,
    Puck,
    RemoteSensor,
    Resource,
    Room,
    Structure,
    StructureHeatCoolMode,
    Thermostat,
    User,
    Vent,
    is_registered,
    register,
    registered_types,
    resource_class,
    type_name,
)
from tests.conftest import BASE, resource_doc


class TestRegistry:
    def test_all_known_types_registered(self):
        expected = {
            "structures": Structure,
            "rooms": Room,
            "vents": Vent,
            "hvac-units": HvacUnit,
            "thermostats": Thermostat,
            "bridges": Bridge,
            "remote-sensors": RemoteSensor,
            "users": User,
            "pucks": Puck,
        }
        types = registered_types()
        for name, cls in expected.items():
            assert types[name] is cls

    def test_enum_covers_registry(self):
        for member in ResourceType:
            assert is_registered(member)

    def test_unregistered_falls_back_to_resource(self):
        assert resource_class("schedules") is Resource
        assert not is_registered("schedules")

    def test_type_name_normalization(self):
        assert type_name("vents") == "vents"
        assert type_name(ResourceType.HVAC_UNITS) == "hvac-units"
        assert type_name(Puck) == "pucks"
        assert type_name(Room(id="1")) == "rooms"
        assert type_name(Resource) == "unknown"
        with pytest.raises(TypeError):
            type_name(42)

    def test_register_requires_type(self):
        with pytest.raises(ValueError):

            @register
            class Untyped(Resource):
                pass


class TestStructure:
    def test_fields(self):
        s = Structure.from_dict(
            resource_doc(
                "1",
                "structures",
                {
                    "name": "Home",
                    "is-active": True,
                    "home": True,
                    "structure-heat-cool-mode": "float",
                    "structure-heat-cool-mode-calculated": None,
                    "set-point-temperature-c": 21.5,
                    "mode": "manual",
                    "created-at": "2024-01-01T00:00:00Z",
                },
            )
        )
        assert s.name == "Home"
        assert s.is_active is True
        assert s.is_primary_home()
        assert s.structure_heat_cool_mode is StructureHeatCoolMode.OFF
        assert s.structure_heat_cool_mode_calculated is None
        assert s.set_point_temperature_c == 21.5
        assert s.mode is FlairMode.MANUAL
        assert s.created_at == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert s.updated_at is None

    def test_setting_enum_writes_wire_value(self):
        s = Structure(id="1")
        s.mode = FlairMode.AUTO
        s.structure_heat_cool_mode = StructureHeatCoolMode.HEAT
        assert s.attributes == {"mode": "auto", "structure-heat-cool-mode": "heat"}

    def test_unknown_enum_value_returned_raw(self):
        s = Structure(attributes={"mode": "eco"})
        assert s.mode == "eco"


class TestTypedFields:
    def test_thermostat_relationship_ids(self):
        t = Thermostat.from_dict(
            resource_doc(
                "5",
                "thermostats",
                {"name": "Hall", "make-model": "ecobee3", "static-vents": 2},
                {
                    "structure": {"data": {"id": "s1", "type": "structures"}},
                    "room": {"data": {"id": "r1", "type": "rooms"}},
                },
            )
        )
        assert t.make_model == "ecobee3"
        assert t.static_vents == 2
        assert t.structure_id == "s1"
        assert t.room_id == "r1"

    def test_missing_relationship_is_none(self):
        assert Bridge(id="1").structure_id is None
        assert Room(id="1", relationships={"structure": {"data": None}}).structure_id is None

    def test_to_many_ids(self):
        room = Room(
            id="1",
            relationships={
                "vents": {"data": [{"id": "v1", "type": "vents"}, {"id": "v2", "type": "vents"}]}
            },
        )
        assert room.vent_ids == ["v1", "v2"]

    def test_typed_field_and_bag_stay_in_sync(self):
        h = HvacUnit.from_dict(resource_doc("1", "hvac-units", {"fan-mode": "low"}))
        h.fan_mode = "high"
        assert h.attributes["fan-mode"] == "high"
        h.attributes = {"fan-mode": "auto"}
        assert h.fan_mode == "auto"

    def test_datetime_field_round_trips(self):
        r = RemoteSensor(id="1")
        when = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
        r.last_reading = when
        assert r.attributes["last-reading"] == "2024-05-01T12:30:00+00:00"
        assert r.last_reading == when

    def test_undeclared_attribute_still_flattened(self):
        u = User.from_dict(resource_doc("1", "users", {"email": "a@b.c", "locale": "en"}))
        assert u.email == "a@b.c"
        assert u.locale == "en"


class TestVent:
    def test_set_percent_open(self, client, mock_api):
        vent = Vent(id="v1", client=client)
        mock_api.add(
            responses.PATCH,
            f"{BASE}/api/vents/v1",
            json={"data": resource_doc("v1", "vents", {"percent-open": 50})},
        )
        assert vent.set_percent_open(50).percent_open == 50

    def test_set_percent_open_out_of_range(self, client, mock_api):
        with pytest.raises(ValueError):
            Vent(id="v1", client=client).set_percent_open(101)
        assert len(mock_api.calls) == 0


class TestCurrentReading:
    def test_bridge_projection_leaves_attributes(self):
        bridge = Bridge(id="b1", attributes={"current-rssi": -80})
        reading = bridge.set_current_reading(
            {"id": "r1", "attributes": {"rssi": -55, "display-number": "A1", "led-brightness": 40}}
        )
        assert isinstance(reading, BridgeReading)
        assert bridge.current_reading.rssi == -55
        assert bridge.current_reading.display_number == "A1"
        assert bridge.current_rssi == -80
        assert "current_reading" not in bridge.attributes

    def test_reading_classes(self):
        assert Vent.reading_class is VentReading
        assert Puck.reading_class is PuckReading
        assert RemoteSensor.reading_class is RemoteSensorReading

    def test_fetch_current_reading(self, client, mock_api):
        vent = Vent(id="v1", client=client)
        mock_api.add(
            responses.GET,
            f"{BASE}/api/vents/v1/current-reading",
            json={
                "data": {
                    "id": "r9",
                    "type": "vent-readings",
                    "attributes": {
                        "percent-open": 75,
                        "duct-temperature-c": 18.5,
                        "created-at": "2024-01-01T00:00:00Z",
                    },
                }
            },
        )
        reading = vent.fetch_current_reading()
        assert reading.percent_open == 75
        assert reading.duct_temperature_c == 18.5
        assert reading.created_at == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert vent.current_reading is reading
        assert "percent-open" not in vent.attributes

    def test_fetch_current_reading_without_content(self, client, mock_api):
        vent = Vent(id="v1", client=client)
        vent.current_reading = VentReading.from_dict({"id": "old", "attributes": {}})
        mock_api.add(responses.GET, f"{BASE}/api/vents/v1/current-reading", status=204)
        assert vent.fetch_current_reading() is None
        assert vent.current_reading is None

    def test_fetch_current_reading_requires_client(self, mock_api):
        with pytest.raises(ResourceStateError):
            Puck(id="p1").fetch_current_reading()
        assert len(mock_api.calls) == 0
