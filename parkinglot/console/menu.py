"""
Interactive text menu for the parking lot.

The console owns the allocator it drives. Resetting the lot throws the old
allocator away and builds a new one from a freshly entered slot count.
"""

from typing import Callable, Dict, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from ..allocation import SlotAllocator
from ..config import Settings
from ..core.exceptions import (
    DuplicateParkingError,
    InvalidInputError,
    NoAvailableSlotError,
    VehicleNotFoundError,
)
from ..core.types import SlotSize, Vehicle
from ..utils import get_logger
from .prompts import (
    is_confirmation,
    parse_size_choice,
    parse_slot_count,
    parse_vehicle_number,
)
from .render import render_status

logger = get_logger(__name__)

InputFunc = Callable[[str], str]


class ParkingLotConsole:
    """Menu loop translating user choices into allocator calls."""

    MENU_OPTIONS = (
        ("1", "Park Vehicle"),
        ("2", "Remove Vehicle"),
        ("3", "Display Status"),
        ("4", "Reset Parking Lot"),
        ("5", "Exit"),
    )
    EXIT_CHOICE = "5"

    def __init__(self, console: Optional[Console] = None,
                 input_func: Optional[InputFunc] = None,
                 settings: Optional[Settings] = None):
        self.console = console or Console()
        self._input = input_func or self.console.input
        self.settings = settings or Settings()
        self.allocator: Optional[SlotAllocator] = None

        self._handlers: Dict[str, Callable[[], object]] = {
            "1": self.handle_parking,
            "2": self.handle_removal,
            "3": self.handle_status,
            "4": self.handle_reset,
        }

    def run(self) -> int:
        """Run the menu until the user exits. Returns the exit code."""
        self.console.print(Panel(
            "[bold blue]Welcome to Parking Lot Management System[/bold blue]",
            style="bright_blue",
            box=box.DOUBLE,
        ))

        try:
            if self.settings.total_slots:
                self.create_parking_lot(self.settings.total_slots)
            else:
                self.init_parking_lot()

            while True:
                self._print_menu()
                choice = self._ask("\nYour choice (Enter number): ").strip()

                if choice == self.EXIT_CHOICE:
                    self.console.print("Exiting the application. Goodbye!")
                    return 0

                handler = self._handlers.get(choice)
                if handler is None:
                    self._print_error("Invalid choice. Please try again.")
                    continue
                handler()

        except (EOFError, KeyboardInterrupt):
            logger.debug("Input closed, leaving menu loop")
            self.console.print("\nInput stream ended. Goodbye!")
            return 0

    # =================== LOT LIFECYCLE ===================

    def init_parking_lot(self) -> SlotAllocator:
        """Ask for a slot count until a positive number is given, then build the lot."""
        while True:
            text = self._ask("Enter total number of parking slots: ")
            try:
                total_slots = parse_slot_count(text)
            except InvalidInputError as e:
                self._print_error(str(e))
                continue
            return self.create_parking_lot(total_slots)

    def create_parking_lot(self, total_slots: int) -> SlotAllocator:
        self.allocator = SlotAllocator(total_slots)
        logger.info("Parking lot created with %d total slots.", total_slots)
        self._print_success(
            f"Parking lot created with {total_slots} total slots.")
        return self.allocator

    # =================== MENU ACTIONS ===================

    def handle_parking(self) -> bool:
        number = self._ask_vehicle_number()
        size = self._ask_vehicle_size()

        try:
            slot = self.allocator.park(Vehicle(number, size))
        except (NoAvailableSlotError, DuplicateParkingError) as e:
            logger.warning("Could not park vehicle %s (%s): %s",
                           number, size.name, e)
            self._print_error(f"Error: {e}")
            return False

        logger.info("Parked vehicle %s in %s slot", number, slot.name)
        self._print_success(f"Successfully parked vehicle: {escape(number)}")
        if slot is not size:
            self.console.print(
                f"[dim]No {size.name} slot free, parked in a {slot.name} slot.[/dim]")
        return True

    def handle_removal(self) -> bool:
        number = self._ask_vehicle_number()

        try:
            freed = self.allocator.remove(number)
        except VehicleNotFoundError as e:
            logger.warning("Could not remove vehicle %s: %s", number, e)
            self._print_error(f"Error: {e}")
            return False

        logger.info("Vehicle %s removed from %s slot.", number, freed.name)
        self._print_success(
            f"Successfully removed vehicle from parking: {escape(number)}")
        return True

    def handle_status(self) -> None:
        self.console.print(render_status(self.allocator.status()))

    def handle_reset(self) -> bool:
        answer = self._ask(
            "Are you sure you want to reset the parking lot? (Y/N): ")
        if not is_confirmation(answer):
            self.console.print("Reset cancelled.")
            return False

        logger.info("Resetting parking lot")
        self.init_parking_lot()
        return True

    # =================== INPUT ===================

    def _ask(self, prompt: str) -> str:
        return self._input(prompt)

    def _ask_vehicle_number(self) -> str:
        while True:
            try:
                return parse_vehicle_number(self._ask("Enter Vehicle Number: "))
            except InvalidInputError as e:
                self._print_error(str(e))

    def _ask_vehicle_size(self) -> SlotSize:
        while True:
            self.console.print("\n[bold]Select Vehicle Size:[/bold]")
            for size in SlotSize:
                self.console.print(f"{size.choice}. {size.get_label()}")

            try:
                return parse_size_choice(self._ask("\nYour choice (Enter number): "))
            except InvalidInputError as e:
                self._print_error(str(e))

    # =================== OUTPUT ===================

    def _print_menu(self) -> None:
        self.console.print("\n[bold yellow]Choose your action:[/bold yellow]")
        for key, label in self.MENU_OPTIONS:
            self.console.print(f"{key}. {label}")

    def _print_success(self, message: str) -> None:
        self.console.print(f"[bold green]✓[/bold green] {message}")

    def _print_error(self, message: str) -> None:
        self.console.print(f"[bold red]✗[/bold red] {escape(message)}")
