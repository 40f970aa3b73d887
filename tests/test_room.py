"""Unit tests for Room."""

import pytest

from smarthome.device.device import Device, Socket, Thermometer
from smarthome.errors import DuplicateDeviceError, DuplicateNameError
from smarthome.house.room import Room


def _make_room(name: str = "Boiler", *devices: Device) -> Room:
    """Helper to create a room with the given devices plugged in order."""
    room = Room(name)
    for device in devices:
        room.plug(device)
    return room


# ===================================================================
# plug
# ===================================================================
class TestRoomPlug:
    def test_new_room_is_empty(self):
        room = Room("Boiler")
        assert room.devices() == []
        assert len(room) == 0

    def test_plug_keeps_insertion_order(self):
        room = _make_room("Boiler", Thermometer("Thermometer 1"), Socket("Main socket"))
        assert room.devices() == ["Thermometer 1", "Main socket"]

    def test_duplicate_rejected(self):
        """Concrete scenario: re-plugging 'Main socket' fails and the room is unchanged."""
        room = _make_room("Boiler", Thermometer("Thermometer 1"), Socket("Main socket"))

        with pytest.raises(DuplicateDeviceError) as excinfo:
            room.plug(Socket("Main socket"))

        assert excinfo.value.name == "Main socket"
        assert str(excinfo.value) == "Device with name Main socket already plugged"
        assert room.devices() == ["Thermometer 1", "Main socket"]

    def test_duplicate_across_kinds_rejected(self):
        """Uniqueness is by name, not by kind."""
        room = _make_room("Boiler", Socket("X"))
        with pytest.raises(DuplicateDeviceError):
            room.plug(Thermometer("X"))
        assert len(room) == 1

    def test_duplicate_is_value_error(self):
        room = _make_room("Boiler", Socket("S1"))
        with pytest.raises(ValueError):
            room.plug(Socket("S1"))
        with pytest.raises(DuplicateNameError):
            room.plug(Socket("S1"))

    def test_repeated_failures_never_mutate(self):
        room = _make_room("Boiler", Socket("S1"), Thermometer("T1"))
        for _ in range(5):
            with pytest.raises(DuplicateDeviceError):
                room.plug(Socket("S1"))
        assert room.devices() == ["S1", "T1"]

    def test_same_name_allowed_in_other_room(self):
        first = _make_room("A", Socket("S1"))
        second = _make_room("B")
        second.plug(Socket("S1"))
        assert first.devices() == second.devices() == ["S1"]

    def test_plug_shares_device(self):
        """The room holds the caller's object, not a copy."""
        socket = Socket("S1")
        room = _make_room("Boiler", socket)
        assert next(iter(room)) is socket


# ===================================================================
# Inspection
# ===================================================================
class TestRoomInspection:
    def test_is_connected(self):
        room = _make_room("Boiler", Socket("S1"))
        assert room.is_connected(Socket("S1"))
        assert not room.is_connected(Socket("S2"))

    def test_is_connected_by_name_not_instance(self):
        room = _make_room("Boiler", Socket("X"))
        assert room.is_connected(Thermometer("X"))

    def test_iteration_is_read_only_snapshot(self):
        room = _make_room("Boiler", Socket("S1"))
        devices = list(room)
        devices.append(Socket("S2"))
        assert room.devices() == ["S1"]

    def test_display(self):
        assert str(Room("Boiler")) == "--> Room: Boiler\n"
