import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from smarthome.errors import DuplicateRoomError
from smarthome.house.room import Room

if TYPE_CHECKING:
    from smarthome.report.report import ReportStrategy

logger = logging.getLogger(__name__)


class House:
    """A named house owning an ordered set of uniquely named rooms."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._rooms: list[Room] = []

    def add(self, room: Room) -> None:
        """Add a room to the house.

        Raises:
            DuplicateRoomError: a room with the same name already exists.
                The house is left unchanged.
        """
        if any(r.name == room.name for r in self._rooms):
            raise DuplicateRoomError(room.name)

        self._rooms.append(room)
        logger.debug("added room %s to house %s", room.name, self.name)

    @property
    def rooms(self) -> tuple[Room, ...]:
        return tuple(self._rooms)

    def room_names(self) -> list[str]:
        return [r.name for r in self._rooms]

    def devices(self, room: str) -> list[str]:
        """Device names of the named room, or an empty list if there is no such room."""
        for r in self._rooms:
            if r.name == room:
                return r.devices()
        return []

    def create_report(self, report: "ReportStrategy") -> str:
        """Render a report with the given strategy.

        Raises:
            ReportError: the strategy could not locate its devices.
        """
        return report.make(self)

    def __iter__(self) -> Iterator[Room]:
        return iter(self.rooms)

    def __len__(self) -> int:
        return len(self._rooms)

    def __repr__(self) -> str:
        return f"House(name={self.name!r}, rooms={self.room_names()!r})"

    def __str__(self) -> str:
        return f"-> House: {self.name}\n"
