import logging

from smarthome.device.device import Socket, Thermometer
from smarthome.house.house import House
from smarthome.house.room import Room
from smarthome.report.borrowing import BorrowingDeviceInfoProvider
from smarthome.report.inventory import InventoryReport, device_counts
from smarthome.report.owning import OwningDeviceInfoProvider

logging.basicConfig(level=logging.DEBUG)

socket = Socket("Main socket")
thermo = Thermometer("Thermometer 1")

boiler = Room("Boiler")
boiler.plug(thermo)
boiler.plug(socket)

kitchen = Room("Kitchen")
kitchen.plug(Socket("Kettle socket"))

house = House("Home")
house.add(boiler)
house.add(kitchen)

print(house.create_report(OwningDeviceInfoProvider(Socket("Kettle socket"))))
print(house.create_report(BorrowingDeviceInfoProvider(socket=socket, thermo=thermo)))
print(house.create_report(InventoryReport()))
print(device_counts(house))
