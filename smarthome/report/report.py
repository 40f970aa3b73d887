from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from smarthome.house.house import House


class ReportStrategy(ABC):
    """Abstract base class for report strategies.

    Implementations locate the devices they care about in a house and render
    a human-readable placement report. Pass an instance to
    ``House.create_report``.
    """

    @abstractmethod
    def make(self, house: "House") -> str:
        """Render the report for ``house``.

        Raises:
            ReportError: the devices of interest are not plugged into any
                room of the house.
        """


def segment(house, room, device) -> str:
    "Positive placement line for one device"
    return f"{house} {room} {device}"
