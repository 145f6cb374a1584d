from .exceptions import (
    ParkingLotError,
    DuplicateParkingError,
    NoAvailableSlotError,
    VehicleNotFoundError,
    InvalidCapacityError,
    InvalidVehicleError,
    InvalidInputError,
    SlotPoolError,
)
from .types import SlotSize, Vehicle

__all__ = [
    "ParkingLotError",
    "DuplicateParkingError",
    "NoAvailableSlotError",
    "VehicleNotFoundError",
    "InvalidCapacityError",
    "InvalidVehicleError",
    "InvalidInputError",
    "SlotPoolError",
    "SlotSize",
    "Vehicle",
]
