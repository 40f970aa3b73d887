from smarthome.device.device import DEVICE_KINDS, Device, Socket, Thermometer

__all__ = [
    "DEVICE_KINDS",
    "Device",
    "Socket",
    "Thermometer",
]
