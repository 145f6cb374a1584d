from dataclasses import dataclass

from ..exceptions import InvalidVehicleError
from .slot_size import SlotSize


@dataclass(frozen=True)
class Vehicle:
    """
    A vehicle asking for a slot.

    🚗 `vehicle_number` identifies the vehicle inside the lot; two vehicles
    with the same number are the same vehicle as far as parking goes.
    📏 `size` is the smallest slot class the vehicle fits in.
    """

    vehicle_number: str
    size: SlotSize

    def __post_init__(self):
        if not isinstance(self.vehicle_number, str) or not self.vehicle_number.strip():
            raise InvalidVehicleError(
                "Vehicle number cannot be null or empty.")

        if not isinstance(self.size, SlotSize):
            raise InvalidVehicleError(
                f"Vehicle size must be a SlotSize, got {self.size!r}")

    def __str__(self) -> str:
        return f"Vehicle({self.vehicle_number}, {self.size.name})"
