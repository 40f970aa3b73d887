from smarthome.house.house import House
from smarthome.house.room import Room

__all__ = [
    "House",
    "Room",
]
