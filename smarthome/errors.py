class SmartHomeError(Exception):
    """Base class for all errors raised by the smarthome package."""


class DuplicateNameError(SmartHomeError, ValueError):
    """An entity with the same name is already present in its container.

    Attributes:
        name: The rejected name.
    """

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name


class DuplicateRoomError(DuplicateNameError):
    def __init__(self, name: str) -> None:
        super().__init__(name, f"room {name} already constructed")


class DuplicateDeviceError(DuplicateNameError):
    def __init__(self, name: str) -> None:
        super().__init__(name, f"Device with name {name} already plugged")


class ReportError(SmartHomeError, LookupError):
    """A report strategy could not locate its devices in the house."""
