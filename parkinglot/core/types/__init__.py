from .slot_size import SlotSize
from .vehicle import Vehicle

__all__ = [
    'SlotSize',
    'Vehicle',
]
