from .slot_allocator import SlotAllocator, distribute_capacity
from .slot_pool import SlotPool
from .status import LotStatus

__all__ = ["SlotAllocator", "distribute_capacity",
           "SlotPool", "LotStatus"]
