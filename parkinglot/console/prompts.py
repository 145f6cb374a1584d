"""Parsing of raw console input into allocator arguments."""

from ..core.exceptions import InvalidInputError
from ..core.types import SlotSize


def parse_slot_count(text: str) -> int:
    """Parse the total slot count for a new lot; must be a positive integer."""
    try:
        count = int(text.strip())
    except (AttributeError, ValueError):
        raise InvalidInputError("Invalid input. Please enter a number.")

    if count <= 0:
        raise InvalidInputError("Please enter a positive number.")
    return count


def parse_vehicle_number(text: str) -> str:
    """Parse a vehicle number, dropping surrounding whitespace."""
    number = (text or "").strip()
    if not number:
        raise InvalidInputError(
            "Vehicle number cannot be null or empty. Please try again.")
    return number


def parse_size_choice(text: str) -> SlotSize:
    """Parse a size menu choice ("1", "2" or "3")."""
    try:
        return SlotSize.from_choice((text or "").strip())
    except ValueError:
        raise InvalidInputError("Invalid choice. Please enter 1, 2, or 3.")


def is_confirmation(text: str) -> bool:
    """Y/y confirms, anything else declines."""
    return (text or "").strip().upper() == "Y"
