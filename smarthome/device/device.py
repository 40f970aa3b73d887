from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, eq=False)
class Device(ABC):
    """A named device that can be plugged into a room.

    Identity is the name: two devices are the same device if their names are
    equal, regardless of their kind.
    """

    name: str

    @property
    @abstractmethod
    def kind(self) -> str:
        "Variant tag used when rendering the device"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Device):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return f"----> Device: {self.kind}[{self.name}]\n"


@dataclass(frozen=True, eq=False)
class Socket(Device):
    kind: ClassVar[str] = "Socket"


@dataclass(frozen=True, eq=False)
class Thermometer(Device):
    kind: ClassVar[str] = "Thermometer"


DEVICE_KINDS: tuple[str, ...] = (Socket.kind, Thermometer.kind)
