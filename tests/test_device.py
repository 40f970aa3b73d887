"""Unit tests for the device variants."""

import dataclasses

import pytest

from smarthome.device.device import DEVICE_KINDS, Device, Socket, Thermometer


class TestDeviceIdentity:
    def test_name(self):
        assert Socket("Main socket").name == "Main socket"

    def test_same_name_same_device(self):
        assert Socket("S1") == Socket("S1")

    def test_identity_ignores_kind(self):
        """A socket and a thermometer with the same name are the same device."""
        assert Socket("X") == Thermometer("X")
        assert hash(Socket("X")) == hash(Thermometer("X"))

    def test_different_names(self):
        assert Socket("S1") != Socket("S2")

    def test_not_equal_to_plain_string(self):
        assert Socket("S1") != "S1"

    def test_name_is_immutable(self):
        socket = Socket("S1")
        with pytest.raises(dataclasses.FrozenInstanceError):
            socket.name = "S2"

    def test_base_class_is_abstract(self):
        with pytest.raises(TypeError):
            Device("anything")


class TestDeviceDisplay:
    def test_socket(self):
        assert str(Socket("Main socket")) == "----> Device: Socket[Main socket]\n"

    def test_thermometer(self):
        assert str(Thermometer("Thermometer 1")) == "----> Device: Thermometer[Thermometer 1]\n"

    def test_kinds(self):
        assert DEVICE_KINDS == ("Socket", "Thermometer")
