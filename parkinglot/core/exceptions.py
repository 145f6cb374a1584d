"""Custom exceptions for the parking lot system."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .types.slot_size import SlotSize


class ParkingLotError(Exception):
    """Base exception for parking lot errors."""
    pass


class DuplicateParkingError(ParkingLotError):
    """Raised when a vehicle that is already parked is parked again."""

    def __init__(self, vehicle_number: str, message: str = "Vehicle is already parked."):
        super().__init__(message)
        self.vehicle_number = vehicle_number


class NoAvailableSlotError(ParkingLotError):
    """Raised when every slot class the vehicle fits in is full."""

    def __init__(self, vehicle_number: str, required_size: Optional['SlotSize'] = None,
                 message: str = "No slot available for this vehicle type."):
        super().__init__(message)
        self.vehicle_number = vehicle_number
        self.required_size = required_size


class VehicleNotFoundError(ParkingLotError):
    """Raised when removing a vehicle that is not parked."""

    def __init__(self, vehicle_number: str, message: str = "Vehicle not found."):
        super().__init__(message)
        self.vehicle_number = vehicle_number


class InvalidCapacityError(ParkingLotError, ValueError):
    """Raised when a parking lot is built with a non-positive slot count."""
    pass


class InvalidVehicleError(ParkingLotError, ValueError):
    """Raised when a vehicle has a blank number or an unknown size."""
    pass


class InvalidInputError(ParkingLotError, ValueError):
    """Raised when console input cannot be parsed."""
    pass


class SlotPoolError(ParkingLotError):
    """Raised when a slot pool is released past its capacity."""
    pass
