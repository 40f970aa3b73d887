import logging
from dataclasses import dataclass

from smarthome.device.device import Device
from smarthome.errors import ReportError
from smarthome.house.house import House
from smarthome.report.report import ReportStrategy, segment

logger = logging.getLogger(__name__)


@dataclass
class OwningDeviceInfoProvider(ReportStrategy):
    """Reports the room of a device the provider holds itself.

    The provider keeps its own device, so it does not depend on any other
    holder of that device and can outlive the house it reported on.
    """

    device: Device

    def make(self, house: House) -> str:
        # first match in room insertion order wins
        for room in house.rooms:
            if room.is_connected(self.device):
                logger.debug("%s found in room %s of house %s", self.device.name, room.name, house.name)
                return segment(house, room, self.device)

        raise ReportError("Device not found")
