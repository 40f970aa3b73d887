import pandas as pd

from smarthome.device.device import DEVICE_KINDS
from smarthome.errors import ReportError
from smarthome.house.house import House
from smarthome.report.report import ReportStrategy

INVENTORY_COLUMNS = ["house", "room", "device", "kind"]


def inventory(house: House) -> pd.DataFrame:
    """One row per plugged device, in room order and then plug order.

    Columns: ``house``, ``room``, ``device`` (device name) and ``kind``.
    """
    rows = [(house.name, room.name, device.name, device.kind) for room in house for device in room]
    return pd.DataFrame(rows, columns=INVENTORY_COLUMNS)


def device_counts(house: House) -> pd.DataFrame:
    """Number of devices of each kind per room.

    Rooms without devices are included with zero counts. The index is named
    ``room`` and keeps the insertion order of the house.
    """
    rows = []
    for room in house:
        kinds = [device.kind for device in room]
        rows.append([kinds.count(kind) for kind in DEVICE_KINDS])

    index = pd.Index(house.room_names(), name="room")
    return pd.DataFrame(rows, index=index, columns=list(DEVICE_KINDS), dtype="int64")


class InventoryReport(ReportStrategy):
    """Plain-text table of every device installed in the house."""

    def make(self, house: House) -> str:
        df = inventory(house)
        if df.empty:
            raise ReportError("No devices installed")
        return df.to_string(index=False)
