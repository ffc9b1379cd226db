"""
Massing Studio CLI.

Command-line access to the material catalog, the sun calculator and the
proxy engine for exported models.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .analysis.performance import compute_performance, summary_rows
from .analysis.proxies import operational_proxy, orientation_factor, recommended_wwr, solar_index
from .analysis.solar import light_position, sun_position
from .core.config import settings
from .core.materials import MATERIAL_CATALOG, get_material, list_materials
from .core.units import format_feet_inches
from .export.model_json import ModelJSONExporter, restore_model
from .geometry.grid import generate_grid_model, grid_footprint
from .utils.logging_config import ensure_logging
from .utils.rounding import round_half_away
from .utils.validation import ValidationError, validate_coordinates, validate_material_id
from .visualization.scene import build_scene

app = typer.Typer(
    name="massing",
    help="Massing Studio - grid massing with carbon, daylight and energy proxies",
    add_completion=False,
)
console = Console()

DATETIME_FORMATS = ["%Y-%m-%dT%H:%M", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M", "%Y-%m-%d"]


@app.callback()
def _setup() -> None:
    ensure_logging()


@app.command()
def materials():
    """List the material catalog."""
    table = Table(title="Material Catalog")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="white")
    table.add_column("U (W/m²K)", justify="right")
    table.add_column("R (m²K/W)", justify="right")
    table.add_column("EC (kgCO₂e/m²)", justify="right")

    for material in list_materials():
        table.add_row(
            material.id,
            material.name,
            f"{material.U:.2f}",
            f"{material.r_value:.2f}",
            f"{material.EC:g}",
        )

    console.print(table)


@app.command()
def sun(
    lat: float = typer.Option(settings.latitude, "--lat", help="Latitude (deg)"),
    lon: float = typer.Option(settings.longitude, "--lon", help="Longitude (deg)"),
    at: Optional[datetime] = typer.Option(
        None, "--at", formats=DATETIME_FORMATS, help="Local date and time (ISO)"
    ),
):
    """Show sun angles and direction for a site and time."""
    try:
        lat, lon = validate_coordinates(lat, lon)
    except ValidationError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    moment = at or datetime.now()
    position = sun_position(lat, lon, moment)
    dx, dy, dz = position.direction

    console.print(f"[cyan]Site:[/cyan] {lat:.4f}, {lon:.4f}  [cyan]Time:[/cyan] {moment:%Y-%m-%d %H:%M}")
    console.print(f"  Altitude: {position.altitude_deg:.1f}°")
    console.print(f"  Azimuth:  {position.azimuth_deg:.1f}°")
    console.print(f"  Direction: ({dx:.3f}, {dy:.3f}, {dz:.3f})")
    lx, ly, lz = light_position(position.direction)
    console.print(f"  [dim]Light at ({lx:.1f}, {ly:.1f}, {lz:.1f})[/dim]")
    if not position.above_horizon:
        console.print("  [yellow]Sun is below the horizon[/yellow]")


@app.command()
def advise(
    lat: float = typer.Option(settings.latitude, "--lat", help="Latitude (deg)"),
    orientation: float = typer.Option(180.0, "--orientation", "-o", help="Facade azimuth (0=N, 180=S)"),
):
    """Solar index and suggested window-to-wall ratio for a facade."""
    index = solar_index(lat, orientation)
    wwr = recommended_wwr(lat, orientation)

    console.print(Panel.fit(
        f"Solar index: [bold]{index}[/bold]\n"
        f"Orientation factor: {orientation_factor(orientation):.2f}\n"
        f"Suggested WWR: [bold]~{round_half_away(wwr * 100):.0f}%[/bold]",
        title=f"Facade {orientation:g}° at {lat:g}°",
        border_style="green",
    ))
    console.print("[dim]Reduce east/west glazing; add shading in hot climates.[/dim]")


@app.command()
def metrics(
    input_file: Path = typer.Argument(..., help="Exported model JSON"),
    lat: float = typer.Option(settings.latitude, "--lat", help="Latitude (deg)"),
    hdd: float = typer.Option(settings.heating_degree_days, "--hdd", help="Heating degree-days"),
    cdd: float = typer.Option(settings.cooling_degree_days, "--cdd", help="Cooling degree-days"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
):
    """Compute performance proxies for an exported model."""
    if not input_file.exists():
        console.print(f"[red]File not found: {input_file}[/red]")
        raise typer.Exit(1)

    record = ModelJSONExporter(quiet=True).load(input_file)
    model = restore_model(record)
    summary = compute_performance(model, latitude=lat, hdd=hdd, cdd=cdd)

    if as_json:
        typer.echo(summary.model_dump_json(indent=2))
        return

    table = Table(title=f"Performance - {record.name}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="white")
    for label, value in summary_rows(summary):
        table.add_row(label, value)
    console.print(table)

    for mass in model.masses:
        console.print(
            f"  [dim]{mass.id[:8]}: {format_feet_inches(mass.w)} × {format_feet_inches(mass.d)}"
            f", h {format_feet_inches(mass.h)}, {len(mass.openings)} openings[/dim]"
        )


@app.command()
def grid(
    cols: int = typer.Option(4, "--cols", min=1, max=12, help="Grid columns"),
    rows: int = typer.Option(3, "--rows", min=1, max=8, help="Grid rows"),
    module: float = typer.Option(6.0, "--module", "-m", help="Module size (m)"),
    storeys: int = typer.Option(2, "--storeys", "-s", min=1, max=10, help="Storeys"),
    material: str = typer.Option("insulated-wood", "--material", help="Wall material id"),
    lat: float = typer.Option(40.0, "--lat", help="Latitude (deg)"),
    orientation: float = typer.Option(180.0, "--orientation", help="Facade azimuth (0=N, 180=S)"),
    name: str = typer.Option("My Model", "--name", "-n", help="Model name"),
    output_dir: Optional[Path] = typer.Option(None, "--output", "-o", help="Write model JSON here"),
):
    """Parametric grid massing with quick proxies."""
    try:
        validate_material_id(material, MATERIAL_CATALOG)
    except ValidationError as e:
        console.print(f"[red]{e}[/red]")
        for suggestion in e.suggestions:
            console.print(f"  [dim]{suggestion}[/dim]")
        raise typer.Exit(1)

    mat = get_material(material)
    area = grid_footprint(cols, rows, module)
    gross = area * storeys
    embodied = round_half_away(mat.EC * area, 1)
    operational = operational_proxy(mat.U, area, storeys)

    table = Table(title=f"Model: {name}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("Grid", f"{cols} × {rows} @ {module:g} m")
    table.add_row("Floors", f"{storeys} • Gross area: {gross:g} m²")
    table.add_row("Material", f"{mat.name} • U={mat.U} W/m²K • Embodied={mat.EC:g} kgCO₂e/m²")
    table.add_row("Embodied CO₂ (proxy)", f"{embodied} kgCO₂e")
    table.add_row("Operational proxy", f"{operational} kWh/yr (approx)")
    table.add_row("Solar Index (relative)", f"{solar_index(lat, orientation)}")
    console.print(table)

    if output_dir is not None:
        model = generate_grid_model(cols, rows, module, storeys, wall_material_id=material)
        ModelJSONExporter().export(model, name, output_dir)


@app.command()
def scene(
    input_file: Path = typer.Argument(..., help="Exported model JSON"),
    output: Path = typer.Option(Path("scene.json"), "--output", "-o", help="Output scene JSON"),
    lat: float = typer.Option(settings.latitude, "--lat", help="Latitude (deg)"),
    lon: float = typer.Option(settings.longitude, "--lon", help="Longitude (deg)"),
    at: Optional[datetime] = typer.Option(
        None, "--at", formats=DATETIME_FORMATS, help="Local date and time (ISO)"
    ),
):
    """Write renderer scene data for an exported model."""
    model = ModelJSONExporter(quiet=True).load_model(input_file)
    direction = sun_position(lat, lon, at or datetime.now()).direction
    data = build_scene(model, sun_position=light_position(direction))

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(data, indent=2), encoding="utf-8")
    console.print(f"[green]Scene written:[/green] {output}")


@app.command()
def version():
    """Show version information."""
    from . import __version__
    console.print(f"Massing Studio v{__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
