from rich import box
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..allocation import LotStatus
from ..core.types import SlotSize


def create_free_slots_table(status: LotStatus) -> Table:
    """Table of available slots per size class."""
    table = Table(title="Available Slots", box=box.ROUNDED)
    table.add_column("Slot Size", style="cyan", no_wrap=True)
    table.add_column("Free", justify="right", style="green")

    for size in SlotSize:
        table.add_row(size.name, str(status.free_counts[size]))

    table.add_row("TOTAL", str(status.total_free), style="bold")
    return table


def create_parked_vehicles_table(status: LotStatus) -> Table:
    """Table of parked vehicles and the slot class each one holds."""
    table = Table(title="Parked Vehicles", box=box.ROUNDED)
    table.add_column("Vehicle", style="magenta")
    table.add_column("Parked In Slot Type", style="yellow")

    for number, size in sorted(status.occupancy.items()):
        table.add_row(number, size.name)
    return table


def render_status(status: LotStatus) -> Panel:
    """Full parking lot status panel."""
    if status.parked_count:
        vehicles = create_parked_vehicles_table(status)
    else:
        vehicles = Text("No vehicles currently parked.", style="dim")

    return Panel(
        Group(create_free_slots_table(status), vehicles),
        title="[bold blue]Parking Lot Status[/bold blue]",
        box=box.DOUBLE,
        expand=False,
    )
