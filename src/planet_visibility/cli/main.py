"""
Planet Visibility CLI - Main Application

This is the main entry point for the planet-visibility command-line interface.
"""

from __future__ import annotations

import json
import logging

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from ..api.bodies import get_planet
from ..api.coordinates import equatorial_position
from ..api.core.config import get_settings
from ..api.core.exceptions import InvalidInputError
from ..api.ephemeris import load_ephemeris
from ..api.visibility import PlanetReport, VisibilityResponse, compute_visibility


app = typer.Typer(
    name="planet-visibility",
    help="Planet rise/set times and dark-sky viewing windows",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()

# Global state for CLI
state: dict[str, bool] = {
    "verbose": False,
}


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """
    Planet Visibility CLI

    Find out which planets you can see tonight from any location.

    [bold green]Examples:[/bold green]

        planet-visibility report --lat 45.0105 --lon -93.4556 --date 2024-06-21
        planet-visibility serve --port 8000

    [bold blue]Environment Variables:[/bold blue]

        SKYFIELD_DIR                 - Ephemeris cache directory
        PLANET_VISIBILITY_EPHEMERIS  - SPICE kernel to use (default: de440s.bsp)
    """
    state["verbose"] = verbose

    load_dotenv()
    logging.basicConfig(level=logging.DEBUG if verbose else get_settings().log_level)

    if verbose:
        console.print("[dim]Verbose mode enabled[/dim]")


def _format_time(value: str | None) -> str:
    if value is None:
        return "[dim]-[/dim]"
    return value[11:16] + " UTC"


def _format_windows(report: PlanetReport) -> str:
    if not report.nighttime_windows:
        return "[dim]none[/dim]"
    return ", ".join(f"{w.start:%H:%M}-{w.end:%H:%M}" for w in report.nighttime_windows)


def _show_report(output_console: Console, response: VisibilityResponse) -> None:
    """Display the visibility report as a table."""
    data = response.to_dict()
    location = data["location"]
    output_console.print(
        f"\n[bold cyan]Planet visibility for {location['lat']:.4f}°, {location['lon']:.4f}°[/bold cyan]"
    )
    output_console.print(f"[dim]Reference time {data['referenceTime']} (day {response.day.start:%Y-%m-%d} UTC)[/dim]\n")

    table = Table(show_header=True, header_style="bold")
    table.add_column("Planet", style="cyan")
    table.add_column("Rise")
    table.add_column("Transit")
    table.add_column("Set")
    table.add_column("Alt", justify="right")
    table.add_column("Az", justify="right")
    table.add_column("Peak", justify="right")
    table.add_column("Mag", justify="right")
    table.add_column("Now", justify="center")
    table.add_column("Dark-sky windows (UTC)")

    for report, planet in zip(response.planets, data["planets"], strict=True):
        table.add_row(
            f"{planet['symbol']} {planet['name']}",
            _format_time(planet["rise"]),
            _format_time(planet["transit"]),
            _format_time(planet["set"]),
            f"{planet['altitude']:.1f}°",
            f"{planet['azimuth']:.1f}° {planet['direction']}",
            f"{planet['maxAltitude']:.1f}°",
            f"{planet['magnitude']:.1f}" if planet["magnitude"] is not None else "[dim]-[/dim]",
            "[green]✓[/green]" if planet["visibleNow"] else "[dim]✗[/dim]",
            _format_windows(report),
        )

    output_console.print(table)


@app.command("report")
def report(
    lat: float = typer.Option(..., "--lat", help="Observer latitude in degrees (-90 to 90)"),
    lon: float = typer.Option(..., "--lon", help="Observer longitude in degrees (-180 to 180)"),
    date: str | None = typer.Option(None, "--date", "-d", help="ISO-8601 reference date (default: now)"),
    planet: str | None = typer.Option(None, "--planet", "-p", help="Show position details for a single planet"),
    as_json: bool = typer.Option(False, "--json", help="Print the HTTP JSON body instead of a table"),
) -> None:
    """Show rise/set/transit times and dark-sky windows for all planets."""
    descriptor = get_planet(planet) if planet else None
    if planet and descriptor is None:
        console.print(f"[red]Error: Unknown planet '{planet}'[/red]")
        raise typer.Exit(1)

    try:
        response = compute_visibility(lat, lon, date)
    except InvalidInputError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from None

    if as_json:
        typer.echo(json.dumps(response.to_dict(), ensure_ascii=False, indent=2))
        return

    if descriptor is None:
        _show_report(console, response)
        return

    planet_report = next(r for r in response.planets if r.planet.key == descriptor.key)
    ephemeris = load_ephemeris(get_settings().ephemeris_file)
    radec = equatorial_position(ephemeris, descriptor.key, response.reference_time, response.observer)
    data = planet_report.to_dict()

    console.print(f"\n[bold cyan]{descriptor.symbol} {descriptor.name}[/bold cyan]")
    console.print(f"[dim]{descriptor.tip}[/dim]\n")
    console.print(f"  RA/Dec:    {radec.ra_hours:.3f}h {radec.dec_degrees:+.2f}°")
    console.print(f"  Alt/Az:    {data['altitude']:.1f}° / {data['azimuth']:.1f}° ({data['direction']})")
    console.print(f"  Rise:      {_format_time(data['rise'])}")
    console.print(f"  Transit:   {_format_time(data['transit'])} (peak {data['maxAltitude']:.1f}°)")
    console.print(f"  Set:       {_format_time(data['set'])}")
    console.print(f"  Windows:   {_format_windows(planet_report)}")


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind"),
    port: int = typer.Option(8000, "--port", help="Port to listen on"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the HTTP API."""
    import uvicorn

    console.print(f"[green]Serving planet visibility on http://{host}:{port}/api/planets[/green]")
    uvicorn.run("planet_visibility.server.app:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
