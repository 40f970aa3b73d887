from smarthome.report.borrowing import BorrowingDeviceInfoProvider
from smarthome.report.inventory import InventoryReport, device_counts, inventory
from smarthome.report.owning import OwningDeviceInfoProvider
from smarthome.report.report import ReportStrategy

__all__ = [
    "BorrowingDeviceInfoProvider",
    "InventoryReport",
    "OwningDeviceInfoProvider",
    "ReportStrategy",
    "device_counts",
    "inventory",
]
