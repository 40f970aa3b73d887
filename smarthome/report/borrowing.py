import logging
from dataclasses import dataclass

from smarthome.device.device import Socket, Thermometer
from smarthome.errors import ReportError
from smarthome.house.house import House
from smarthome.house.room import Room
from smarthome.report.report import ReportStrategy, segment

logger = logging.getLogger(__name__)


@dataclass
class BorrowingDeviceInfoProvider(ReportStrategy):
    """Reports the rooms of a socket and a thermometer owned elsewhere.

    The provider only references the two devices. They must stay alive
    (and keep their names) for as long as the provider is used.

    Every room is visited for both devices. If a device name is plugged into
    several rooms, the last of them in insertion order is reported.
    """

    socket: Socket
    thermo: Thermometer

    def make(self, house: House) -> str:
        socket_room: Room | None = None
        thermo_room: Room | None = None

        for room in house.rooms:
            if room.is_connected(self.socket):
                socket_room = room
            if room.is_connected(self.thermo):
                thermo_room = room

        if socket_room is None and thermo_room is None:
            raise ReportError("Devices not found")

        logger.debug(
            "house %s: socket %s in %s, thermometer %s in %s",
            house.name,
            self.socket.name,
            socket_room.name if socket_room is not None else None,
            self.thermo.name,
            thermo_room.name if thermo_room is not None else None,
        )

        if socket_room is not None and thermo_room is not None:
            if socket_room.name == thermo_room.name:
                return f"{house} {socket_room} {self.socket} {self.thermo}"
            return f"{segment(house, socket_room, self.socket)} {segment(house, thermo_room, self.thermo)}"

        if socket_room is not None:
            out = segment(house, socket_room, self.socket)
        else:
            out = f"not found {self.socket}"

        if thermo_room is not None:
            out = f"{out}\n {segment(house, thermo_room, self.thermo)}"
        else:
            out = f"{out} not found {self.thermo}"

        return out
