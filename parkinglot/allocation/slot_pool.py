from ..core.exceptions import SlotPoolError


class SlotPool:
    """
    🗂️ Tracks free slots of a single size class 🗂️

    Slots are counted, not addressed: the pool only knows how many of its
    slots are taken. Allocation and release move one slot at a time.

    Pool with capacity 4, one slot taken:
    -----------------------------------------
     capacity: 4
     used:     1   ■ □ □ □
     free:     3
    -----------------------------------------

    The pool is not thread-safe on its own; the owner serialises access.
    """

    def __init__(self, capacity: int):
        if capacity < 0:
            raise SlotPoolError(
                f"Slot pool capacity must be non-negative, got {capacity}")

        self._capacity = capacity
        self._free = capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def free_count(self) -> int:
        return self._free

    @property
    def used_count(self) -> int:
        return self._capacity - self._free

    def is_exhausted(self) -> bool:
        """Check if every slot in the pool is taken."""
        return self._free == 0

    def allocate(self) -> bool:
        """
        Take one slot.

        Returns:
            True if a slot was taken, False if the pool is exhausted
            (nothing changes in that case)
        """
        if self._free == 0:
            return False
        self._free -= 1
        return True

    def release(self) -> None:
        """Give one slot back to the pool."""
        if self._free >= self._capacity:
            raise SlotPoolError(
                f"Cannot release slot: pool already has all {self._capacity} slots free")
        self._free += 1

    def __repr__(self) -> str:
        return f"SlotPool(free={self._free}, capacity={self._capacity})"
