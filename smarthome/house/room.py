import logging
from collections.abc import Iterator

from smarthome.device.device import Device
from smarthome.errors import DuplicateDeviceError

logger = logging.getLogger(__name__)


class Room:
    """A named room holding an ordered set of devices.

    Devices are kept in plug order and must have unique names within the
    room. The same device name may still appear in another room.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._devices: list[Device] = []

    def plug(self, device: Device) -> None:
        """Connect a device to the room.

        The device object is shared, not copied, so the caller can keep its
        own reference for later lookups.

        Raises:
            DuplicateDeviceError: a device with the same name is already
                plugged. The room is left unchanged.
        """
        if any(d.name == device.name for d in self._devices):
            raise DuplicateDeviceError(device.name)

        self._devices.append(device)
        logger.debug("plugged %s[%s] into room %s", device.kind, device.name, self.name)

    def is_connected(self, device: Device) -> bool:
        return any(d.name == device.name for d in self._devices)

    def devices(self) -> list[str]:
        return [d.name for d in self._devices]

    def __iter__(self) -> Iterator[Device]:
        return iter(tuple(self._devices))

    def __len__(self) -> int:
        return len(self._devices)

    def __repr__(self) -> str:
        return f"Room(name={self.name!r}, devices={self.devices()!r})"

    def __str__(self) -> str:
        return f"--> Room: {self.name}\n"
