import threading
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from ..core.exceptions import (
    DuplicateParkingError,
    InvalidCapacityError,
    NoAvailableSlotError,
    VehicleNotFoundError,
)
from ..core.types import SlotSize, Vehicle
from .slot_pool import SlotPool
from .status import LotStatus


def distribute_capacity(total_slots: int) -> Dict[SlotSize, int]:
    """
    Split a lot's slots across the size classes.

    Every class gets total_slots // 3; the remainder goes to the last class
    (OVERSIZE).

        distribute_capacity(9)  -> SMALL 3, LARGE 3, OVERSIZE 3
        distribute_capacity(10) -> SMALL 3, LARGE 3, OVERSIZE 4
    """
    if isinstance(total_slots, bool) or not isinstance(total_slots, int):
        raise InvalidCapacityError(
            f"Total slots must be an integer, got {total_slots!r}")
    if total_slots <= 0:
        raise InvalidCapacityError(
            f"Total slots must be positive, got {total_slots}")

    sizes = list(SlotSize)
    per_class, remainder = divmod(total_slots, len(sizes))

    allotment = {size: per_class for size in sizes}
    allotment[sizes[-1]] += remainder
    return allotment


class SlotAllocator:
    """
    Assigns parked vehicles to slot classes.

    The allocator owns one SlotPool per size class and the occupancy map
    (vehicle number -> slot class held). Placement follows the smallest
    sufficient class first:

    ```
    required   tried in order
    SMALL      SMALL -> LARGE -> OVERSIZE
    LARGE      LARGE -> OVERSIZE
    OVERSIZE   OVERSIZE
    ```

    Invariant, per class and at all times:
        free_count(size) + vehicles parked in `size` == capacity(size)

    park() and remove() are the only mutation paths. Both run under one
    lock that covers the pools and the occupancy map together, and leave
    the state untouched when they raise.
    """

    def __init__(self, total_slots: int):
        allotment = distribute_capacity(total_slots)

        self._total_slots = total_slots
        # Indexed by SlotSize.rank
        self._pools: Tuple[SlotPool, ...] = tuple(
            SlotPool(allotment[size]) for size in SlotSize)
        self._occupancy: Dict[str, SlotSize] = {}
        self._lock = threading.RLock()

    # =================== MUTATIONS ===================

    def park(self, vehicle: Vehicle) -> SlotSize:
        """
        Park a vehicle in the smallest free slot class that fits it.

        Args:
            vehicle: The vehicle to park

        Returns:
            The slot class the vehicle was placed in

        Raises:
            DuplicateParkingError: If the vehicle number is already parked
            NoAvailableSlotError: If every class the vehicle fits in is full
        """
        number = vehicle.vehicle_number

        with self._lock:
            if number in self._occupancy:
                raise DuplicateParkingError(number)

            for size in vehicle.size.fallback_chain():
                if self._pool(size).allocate():
                    self._occupancy[number] = size
                    return size

            raise NoAvailableSlotError(number, vehicle.size)

    def remove(self, vehicle_number: str) -> SlotSize:
        """
        Release the slot held by a vehicle.

        Returns:
            The slot class that was freed

        Raises:
            VehicleNotFoundError: If the vehicle is not parked
        """
        with self._lock:
            size = self._occupancy.get(vehicle_number)
            if size is None:
                raise VehicleNotFoundError(vehicle_number)

            self._pool(size).release()
            del self._occupancy[vehicle_number]
            return size

    # =================== QUERIES ===================

    def is_parked(self, vehicle_number: str) -> bool:
        with self._lock:
            return vehicle_number in self._occupancy

    def free_count(self, size: SlotSize) -> int:
        """Number of free slots left in a class."""
        with self._lock:
            return self._pool(size).free_count

    def capacity(self, size: SlotSize) -> int:
        """Number of slots the class was given at construction."""
        return self._pool(size).capacity

    @property
    def total_capacity(self) -> int:
        return self._total_slots

    def snapshot(self) -> Mapping[str, SlotSize]:
        """Read-only copy of the occupancy map."""
        with self._lock:
            return MappingProxyType(dict(self._occupancy))

    def status(self) -> LotStatus:
        """Free counts per class and the occupancy, taken together."""
        with self._lock:
            return LotStatus(
                free_counts={size: self._pool(size).free_count for size in SlotSize},
                occupancy=dict(self._occupancy),
            )

    def _pool(self, size: SlotSize) -> SlotPool:
        return self._pools[size.rank]

    def __len__(self) -> int:
        with self._lock:
            return len(self._occupancy)

    def __repr__(self) -> str:
        with self._lock:
            free = ", ".join(
                f"{size.name}={self._pool(size).free_count}" for size in SlotSize)
        return f"SlotAllocator(total={self._total_slots}, free=[{free}])"
