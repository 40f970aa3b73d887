"""Smart-home entities (devices, rooms, houses) and placement reports."""

from smarthome.device import DEVICE_KINDS, Device, Socket, Thermometer
from smarthome.errors import (
    DuplicateDeviceError,
    DuplicateNameError,
    DuplicateRoomError,
    ReportError,
    SmartHomeError,
)
from smarthome.house import House, Room
from smarthome.report import (
    BorrowingDeviceInfoProvider,
    InventoryReport,
    OwningDeviceInfoProvider,
    ReportStrategy,
    device_counts,
    inventory,
)

__all__ = [
    "DEVICE_KINDS",
    "BorrowingDeviceInfoProvider",
    "Device",
    "DuplicateDeviceError",
    "DuplicateNameError",
    "DuplicateRoomError",
    "House",
    "InventoryReport",
    "OwningDeviceInfoProvider",
    "ReportError",
    "ReportStrategy",
    "Room",
    "SmartHomeError",
    "Socket",
    "Thermometer",
    "device_counts",
    "inventory",
]
