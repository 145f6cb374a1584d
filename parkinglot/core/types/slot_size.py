from enum import Enum
from typing import Tuple


class SlotSize(Enum):
    """
    Enum for slot size classes.

    Members are declared smallest first. A vehicle that needs a smaller
    class may use a larger one, never the reverse.
    """
    SMALL = "small"
    LARGE = "large"
    OVERSIZE = "oversize"

    @property
    def rank(self) -> int:
        """Position of the class in capacity order (SMALL = 0)."""
        return _ORDER.index(self)

    @property
    def choice(self) -> str:
        """Menu choice number for this class."""
        return str(self.rank + 1)

    def get_label(self) -> str:
        """Get the menu label describing vehicles of this class."""
        label_map = {
            SlotSize.SMALL: "SMALL (Small and compact car)",
            SlotSize.LARGE: "LARGE (Full-size car)",
            SlotSize.OVERSIZE: "OVERSIZE (SUV or Truck)",
        }

        return label_map[self]

    def can_hold(self, required: 'SlotSize') -> bool:
        """Check whether a slot of this class fits a vehicle needing `required`."""
        return self.rank >= required.rank

    def fallback_chain(self) -> Tuple['SlotSize', ...]:
        """
        Slot classes a vehicle of this size may use, in the order they are tried.

        SMALL  -> SMALL, LARGE, OVERSIZE
        LARGE  -> LARGE, OVERSIZE
        OVERSIZE -> OVERSIZE
        """
        return _ORDER[self.rank:]

    @classmethod
    def from_choice(cls, choice: str) -> 'SlotSize':
        """Resolve a menu choice ("1", "2", "3") to a slot class."""
        for size in _ORDER:
            if size.choice == choice:
                return size
        raise ValueError(f"Unknown slot size choice: {choice!r}")


_ORDER: Tuple[SlotSize, ...] = tuple(SlotSize)
