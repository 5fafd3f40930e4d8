"""
Main CLI application using Typer.
"""

import asyncio
import logging
from pathlib import Path
from typing import List, Optional, Annotated

import pendulum
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..adapters.yaml_store import ConfigAvailabilityStore
from ..config import AppConfig, get_default_config_path
from ..domain.exceptions import BookingRejectedError
from ..domain.formatting import format_time_slot_to_12_hour
from ..domain.models import SlotState, UserRole
from ..domain.normalization import convert_slots_to_ranges
from ..domain.weekly import day_key_for, normalize_day_key
from ..services.booking_planner import BookingPlanner

app = typer.Typer(
    name="lessonslots",
    help="Inspect teacher availability and validate class bookings",
    add_completion=False
)

console = Console()

STATE_STYLES = {
    SlotState.AVAILABLE: "green",
    SlotState.BOOKED: "yellow",
    SlotState.UNAVAILABLE: "dim",
}

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")
]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging.")]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_config(config_file: Optional[Path]) -> AppConfig:
    config_path = config_file or get_default_config_path()
    return AppConfig.load_from_yaml(config_path)


def _determine_day(
    *,
    tz: str,
    date_option: Optional[str],
    day_option: Optional[str]
) -> str:
    """
    Resolve the weekday key from --date, --day or today's date.
    """
    if date_option and day_option:
        console.print("[red]Error: --date and --day cannot be used together.[/red]")
        raise typer.Exit(1)

    if day_option:
        return normalize_day_key(day_option)

    if date_option:
        try:
            date = pendulum.from_format(date_option, "YYYY-MM-DD", tz=tz)
        except ValueError as e:
            console.print(f"[red]Error parsing date: {e}[/red]")
            raise typer.Exit(1)
        return day_key_for(date)

    return day_key_for(pendulum.now(tz))


@app.command()
def grid(
    teacher: Annotated[str, typer.Argument(help="Teacher name or email")],
    config_file: ConfigOption = None,
    date: Annotated[Optional[str], typer.Option("--date", help="Date (YYYY-MM-DD)")] = None,
    day: Annotated[Optional[str], typer.Option("--day", help="Weekday, e.g. monday")] = None,
    duration: Annotated[Optional[int], typer.Option("--duration", "-d", help="Class duration in minutes")] = None,
    role: Annotated[UserRole, typer.Option("--role", "-r", case_sensitive=False, help="Viewer role")] = UserRole.STUDENT,
    twelve_hour: Annotated[bool, typer.Option("--12h", help="Show times in 12-hour format.")] = False,
    verbose: VerboseOption = False,
):
    """
    Show a teacher's slot grid for one day.

    Examples:

        lessonslots grid ana --day monday
        lessonslots grid ana --date 2024-11-25 --duration 90
        lessonslots grid ana --role teacher --12h
    """
    _configure_logging(verbose)

    try:
        config = _load_config(config_file)
        day_key = _determine_day(tz=config.timezone, date_option=date, day_option=day)
        entry = config.resolve_teacher(teacher)

        planner = BookingPlanner(
            store=ConfigAvailabilityStore(config),
            settings=config.calendar
        )
        cells = asyncio.run(
            planner.day_grid(
                teacher=entry.name,
                day=day_key,
                role=role,
                duration_minutes=duration
            )
        )

    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if not cells:
        console.print(f"[yellow]No slots to show for {entry.name} on {day_key}.[/yellow]")
        return

    table = Table(
        title=f"{entry.name} - {day_key.capitalize()}",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Slot", style="bold")
    table.add_column("State")

    for cell in cells:
        label = format_time_slot_to_12_hour(cell.slot) if twelve_hour else cell.slot
        style = STATE_STYLES[cell.state]
        table.add_row(label, f"[{style}]{cell.state.value}[/{style}]")

    console.print()
    console.print(table)
    console.print()


@app.command()
def check(
    teacher: Annotated[str, typer.Argument(help="Teacher name or email")],
    start: Annotated[str, typer.Argument(help="Requested start time (HH:MM)")],
    config_file: ConfigOption = None,
    date: Annotated[Optional[str], typer.Option("--date", help="Date (YYYY-MM-DD)")] = None,
    day: Annotated[Optional[str], typer.Option("--day", help="Weekday, e.g. monday")] = None,
    duration: Annotated[Optional[int], typer.Option("--duration", "-d", help="Class duration in minutes")] = None,
    active_bookings: Annotated[int, typer.Option("--active-bookings", help="Bookings the student already holds")] = 0,
    verbose: VerboseOption = False,
):
    """
    Check whether a class can be booked and print the slot to store.
    """
    _configure_logging(verbose)

    try:
        config = _load_config(config_file)
        day_key = _determine_day(tz=config.timezone, date_option=date, day_option=day)
        entry = config.resolve_teacher(teacher)

        planner = BookingPlanner(
            store=ConfigAvailabilityStore(config),
            settings=config.calendar
        )
        slot = asyncio.run(
            planner.plan_booking(
                teacher=entry.name,
                day=day_key,
                start_time=start,
                duration_minutes=config.calendar.slot_duration if duration is None else duration,
                active_bookings=active_bookings
            )
        )

    except BookingRejectedError as e:
        console.print(f"[bold red]✗ Not bookable:[/bold red] {e}")
        raise typer.Exit(1)

    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    console.print(f"[green]✓ Bookable:[/green] {slot} ({day_key})")


@app.command()
def ranges(
    slots: Annotated[List[str], typer.Argument(help="Slots such as 09:00-10:00")],
):
    """
    Print the minimal availability ranges covering the given slots.
    """
    try:
        result = convert_slots_to_ranges(slots)
    except ValueError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    for availability in result:
        console.print(str(availability))


@app.command()
def list_teachers(
    config_file: ConfigOption = None,
):
    """
    List all configured teachers.
    """
    try:
        config = _load_config(config_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if not config.teachers:
        console.print("[yellow]No teachers defined in the config file.[/yellow]")
        return

    table = Table(
        title="Configured teachers",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Name", style="bold yellow")
    table.add_column("E-Mail", style="dim")
    table.add_column("Days")

    for entry in config.teachers:
        table.add_row(
            entry.name,
            entry.email,
            ", ".join(entry.availability)
        )

    console.print()
    console.print(table)
    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]lessonslots[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
