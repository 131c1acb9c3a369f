"""
Main CLI application using Typer.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..config import AppConfig, get_default_config_path
from ..domain.exceptions import CalendarSpotsError
from ..adapters.json_repository import JsonCalendarRepository
from ..services.calendar_spots import CalendarSpotsService

app = typer.Typer(
    name="calendarspots",
    help="Find available appointment slots in a calendar",
    add_completion=False
)

console = Console()

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")
]
CalendarsDirOption = Annotated[
    Optional[Path],
    typer.Option("--calendars-dir", help="Directory with calendar.<id>.json files (overrides config)")
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Log slot decisions to stderr.")
]


def _load_config(config_file: Optional[Path], calendars_dir: Optional[Path]) -> AppConfig:
    """
    Resolve the configuration for a command.

    An explicit --config must exist. Without it the default config file is
    used when present, built-in defaults otherwise. --calendars-dir always
    selects the file store.
    """
    if config_file is not None:
        config = AppConfig.load_from_yaml(config_file)
    else:
        default_path = get_default_config_path()
        config = AppConfig.load_from_yaml(default_path) if default_path.exists() else AppConfig()

    if calendars_dir is not None:
        config.calendars_dir = calendars_dir
        config.calendars_url = None

    return config


def _configure_logging(config: AppConfig, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def spots(
    calendar_id: Annotated[str, typer.Argument(help="Calendar identifier (e.g. 1)")],
    date: Annotated[str, typer.Argument(help="Day to search (DD-MM-YYYY)")],
    duration: Annotated[Optional[int], typer.Option("--duration", "-d", help="Session duration in minutes")] = None,
    config_file: ConfigOption = None,
    calendars_dir: CalendarsDirOption = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print results as JSON.")] = False,
    verbose: VerboseOption = False,
):
    """
    Find the available slots of a calendar on a given day.

    Examples:

        calendarspots spots 1 10-04-2023 --duration 30

        calendarspots spots 2 13-04-2023 -d 25 --json
    """
    try:
        config = _load_config(config_file, calendars_dir)
        _configure_logging(config, verbose)

        duration_in_min = duration if duration is not None else config.defaults.duration_minutes
        service = CalendarSpotsService(
            repository=config.build_repository(),
            timezone=config.timezone,
        )
        available = service.get_available_spots(calendar_id, date, duration_in_min)

    except (CalendarSpotsError, FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps([slot.to_dict() for slot in available], indent=2))
        return

    if not available:
        console.print(
            f"[yellow]⚠ No available slots on {date} for {duration_in_min} minutes.[/yellow]"
        )
        return

    table = Table(
        title=f"Calendar {calendar_id} – {date} ({duration_in_min} min)",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("#", style="dim")
    table.add_column("Provider window", style="bold yellow")
    table.add_column("Client session")

    for idx, slot in enumerate(available, 1):
        table.add_row(
            str(idx),
            f"{slot.start_hour.format('HH:mm')} – {slot.end_hour.format('HH:mm')}",
            f"{slot.client_start_hour.format('HH:mm')} – {slot.client_end_hour.format('HH:mm')}",
        )

    console.print()
    console.print(table)
    console.print(f"[bold green]✓ {len(available)} available slot(s)[/bold green]\n")


@app.command()
def show(
    calendar_id: Annotated[str, typer.Argument(help="Calendar identifier")],
    config_file: ConfigOption = None,
    calendars_dir: CalendarsDirOption = None,
):
    """
    Show the buffers, bookable slots and booked sessions of a calendar.
    """
    try:
        config = _load_config(config_file, calendars_dir)
        _configure_logging(config, verbose=False)
        calendar = config.build_repository().load(calendar_id)
    except (CalendarSpotsError, FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(Panel.fit(
        f"[bold]Buffer before:[/bold] {calendar.duration_before} min\n"
        f"[bold]Buffer after:[/bold] {calendar.duration_after} min",
        title=f"Calendar {calendar_id}"
    ))

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Day", style="bold yellow")
    table.add_column("Slots")
    table.add_column("Sessions", style="dim")

    for day in calendar.days():
        table.add_row(
            day,
            "\n".join(slot.format() for slot in calendar.slots_for(day)) or "-",
            "\n".join(session.format() for session in calendar.sessions_for(day)) or "-",
        )

    console.print(table)


@app.command()
def list_calendars(
    config_file: ConfigOption = None,
    calendars_dir: CalendarsDirOption = None,
):
    """
    List the calendars found in the calendar directory.
    """
    try:
        config = _load_config(config_file, calendars_dir)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    repository = JsonCalendarRepository(calendars_dir=config.calendars_dir)
    calendar_ids = repository.available_ids()

    if not calendar_ids:
        console.print(f"[yellow]No calendars found in {config.calendars_dir}.[/yellow]")
        return

    for calendar_id in calendar_ids:
        console.print(f"  {calendar_id}")


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]calendarspots[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
