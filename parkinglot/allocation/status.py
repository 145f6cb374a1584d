from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping

from ..core.types import SlotSize


@dataclass(frozen=True)
class LotStatus:
    """
    Point-in-time view of a parking lot.

    📊 `free_counts` holds the free slots left in every class.
    🚗 `occupancy` maps each parked vehicle number to the class it holds.

    Both mappings are read-only copies; the allocator keeps changing after
    the status is taken, the status does not.
    """

    free_counts: Mapping[SlotSize, int]
    occupancy: Mapping[str, SlotSize]

    def __post_init__(self):
        object.__setattr__(self, "free_counts",
                           MappingProxyType(dict(self.free_counts)))
        object.__setattr__(self, "occupancy",
                           MappingProxyType(dict(self.occupancy)))

    @property
    def total_free(self) -> int:
        return sum(self.free_counts.values())

    @property
    def parked_count(self) -> int:
        return len(self.occupancy)

    def vehicles_in(self, size: SlotSize) -> List[str]:
        """Vehicle numbers parked in slots of the given class."""
        return [number for number, slot in self.occupancy.items() if slot is size]
