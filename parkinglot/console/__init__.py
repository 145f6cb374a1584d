from .menu import ParkingLotConsole
from .prompts import (
    parse_slot_count,
    parse_vehicle_number,
    parse_size_choice,
    is_confirmation,
)
from .render import render_status

__all__ = [
    "ParkingLotConsole",
    "parse_slot_count",
    "parse_vehicle_number",
    "parse_size_choice",
    "is_confirmation",
    "render_status",
]
