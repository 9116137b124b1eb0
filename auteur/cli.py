"""
auteur.cli - Typer CLI entry point.

Provides the subcommands for browsing the director catalog, matching a
script vector, blending directors and rendering the constellation map.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.table import Table

from auteur import __version__
from auteur.blend import blend_vectors, snap_blend_weight
from auteur.catalog import Catalog, default_catalog, load_catalog
from auteur.classify import Cluster, emotion_tier, vector_to_quadrant
from auteur.config import (
    CONFIG_FILENAME,
    AuteurConfig,
    create_default_config,
    find_config,
    load_config,
    write_config,
)
from auteur.exceptions import AuteurError
from auteur.io import read_vector, write_json
from auteur.logging import configure_logging, logger
from auteur.optics import derive_camera_template
from auteur.selection import SelectionState, analyze_fit, build_selection
from auteur.utils import format_distance, get_distance_class, parse_genres, parse_vector_arg
from auteur.vector import AXIS_LABELS, StyleVector, composite_xy
from auteur.viewport import initial_state

app = typer.Typer(
    name="auteur",
    help="Director style matching and blending.\n\n"
    "Ranks a catalog of film directors against a script's style vector, "
    "blends two directors, and renders the director constellation map.",
    add_completion=False,
)
console = Console()

DISTANCE_STYLES = {"close": "green", "near": "yellow", "far": "red"}


def version_callback(value: bool) -> None:
    if value:
        console.print(f"auteur {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Auteur - director style matching and blending."""
    configure_logging(verbose)


def load_context() -> tuple[AuteurConfig, Catalog]:
    """Load the nearest auteur.yaml (or defaults) and its director catalog."""
    config_file = find_config()
    config = load_config(config_file) if config_file else AuteurConfig()
    catalog_path = config.resolve_catalog_path()
    catalog = load_catalog(catalog_path) if catalog_path else default_catalog()
    logger.debug("Using %s with %d directors", config_file or "default config", len(catalog))
    return config, catalog


def resolve_vector(vector: str | None, file: Path | None) -> StyleVector:
    """Build a StyleVector from ``--vector`` text or a ``--file`` JSON path."""
    if vector and file:
        raise typer.BadParameter("Use either --vector or --file, not both")
    if file:
        return read_vector(file)
    if vector:
        return StyleVector(parse_vector_arg(vector))
    raise typer.BadParameter("A style vector is required (--vector or --file)")


def snap_weight(config: AuteurConfig, weight: float | None) -> float:
    """Snap a blend weight to the slider range and step from config."""
    if weight is None:
        return config.blend.default_weight
    b = config.blend
    return snap_blend_weight(weight, b.ui_min, b.ui_max, b.ui_step)


def fail(message: str) -> NoReturn:
    console.print(f"[red]Error: {message}[/red]")
    raise typer.Exit(1)


@app.command("init")
def init_project(
    name: str = typer.Argument(..., help="Project name"),
    profile: str = typer.Option(
        "panel",
        "--profile",
        "-p",
        help="Map profile: panel or wide",
    ),
    path: str = typer.Option(".", "--path", "-d", help="Directory to create project in"),
) -> None:
    """Create a new auteur project with a default auteur.yaml."""
    project_path = Path(path) / name

    if project_path.exists():
        fail(f"Directory '{project_path}' already exists")

    try:
        config = create_default_config(name, profile)
        write_config(config, project_path / CONFIG_FILENAME)
    except AuteurError as e:
        fail(str(e))

    console.print(f"[green]✓[/green] Created project '{name}' with map profile '{profile}'")
    console.print(f"[dim]  {project_path / CONFIG_FILENAME}[/dim]")
    console.print("\nNext steps:")
    console.print(f"  cd {name}")
    console.print("  auteur match --vector scale=7,spectacle=6,structure=5,genre_fluidity=4,emotion=6")


@app.command("directors")
def list_directors(
    cluster: str | None = typer.Option(None, "--cluster", "-c", help="Only list one cluster"),
) -> None:
    """List the directors in the catalog."""
    try:
        _, catalog = load_context()
        if cluster:
            try:
                directors = catalog.by_cluster(cluster)
            except ValueError:
                choices = ", ".join(c.value for c in Cluster)
                fail(f"Unknown cluster '{cluster}'. Choose from: {choices}")
        else:
            directors = list(catalog)
    except AuteurError as e:
        fail(str(e))

    table = Table(title=f"Directors ({len(directors)})")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Cluster", style="magenta")
    table.add_column("Quadrant")
    table.add_column("Emotion")
    table.add_column("Known for", style="dim")

    for d in directors:
        table.add_row(
            d.id,
            d.name,
            d.cluster.label,
            d.quadrant.label,
            d.emotional_depth.value,
            ", ".join(d.known_for),
        )

    console.print(table)


@app.command("match")
def match_script(
    vector: str | None = typer.Option(None, "--vector", help="axis=value pairs, comma-separated"),
    file: Path | None = typer.Option(None, "--file", "-f", help="JSON file holding a style vector"),
    genre: list[str] | None = typer.Option(None, "--genre", "-g", help="Film genre (repeatable)"),
    top: int | None = typer.Option(None, "--top", "-n", min=1, help="Number of matches to show"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the fit analysis as JSON"),
) -> None:
    """Rank directors against a script's style vector."""
    try:
        config, catalog = load_context()
        script = resolve_vector(vector, file)
        genres = parse_genres(genre) if config.matching.use_genres else []
        fit = analyze_fit(
            script,
            catalog,
            genres,
            top_n=top or config.matching.top_n,
            shortlist=config.matching.shortlist,
            recommended_weight=config.blend.default_weight,
        )
    except AuteurError as e:
        fail(str(e))

    console.print(
        f"Script: [bold]{fit.quadrant.label}[/bold] · emotional tier [bold]{fit.emotional_tier.value}[/bold]"
    )
    if genres:
        console.print(f"[dim]Genres: {', '.join(genres)}[/dim]")

    table = Table(title="Director Matches")
    table.add_column("#", justify="right")
    table.add_column("Director", style="cyan")
    table.add_column("Cluster", style="magenta")
    table.add_column("Quadrant")
    table.add_column("Distance", justify="right")

    for rank, m in enumerate(fit.matches, start=1):
        style = DISTANCE_STYLES[get_distance_class(m.distance)]
        table.add_row(
            str(rank),
            m.director.name,
            m.director.cluster.label,
            m.director.quadrant.label,
            f"[{style}]{format_distance(m.distance)}[/{style}]",
        )

    console.print(table)

    blend = fit.recommended_blend
    if blend is not None:
        pct = round(blend.weight * 100)
        console.print(
            f"\nRecommended blend: [cyan]{blend.primary.name}[/cyan] {pct}% × "
            f"[cyan]{blend.secondary.name}[/cyan] {100 - pct}% "
            f"({vector_to_quadrant(blend.vector).label})"
        )

    if output:
        write_json(output, fit.to_dict())
        console.print(f"[green]✓[/green] Wrote {output}")


@app.command("blend")
def blend_directors(
    primary: str = typer.Argument(..., help="Primary director id"),
    secondary: str = typer.Argument(..., help="Secondary director id"),
    weight: float | None = typer.Option(
        None, "--weight", "-w", min=0.0, max=1.0, help="Primary influence (0-1)"
    ),
) -> None:
    """Blend two directors' style vectors.

    The weight is snapped to the blend slider's range and step.
    """
    try:
        config, catalog = load_context()
        weight = snap_weight(config, weight)
        a = catalog.get(primary)
        b = catalog.get(secondary)
        blended = blend_vectors(a.vector, b.vector, weight)
    except AuteurError as e:
        fail(str(e))

    pct = round(weight * 100)
    table = Table(title=f"{a.name} {pct}% × {b.name} {100 - pct}%")
    table.add_column("Axis")
    table.add_column(a.short_name, justify="right")
    table.add_column(b.short_name, justify="right")
    table.add_column("Blend", justify="right", style="bold yellow")

    for axis in blended.axes:
        table.add_row(
            AXIS_LABELS.get(axis, axis),
            f"{a.vector[axis]:g}",
            f"{b.vector[axis]:g}",
            f"{blended[axis]:.2f}",
        )

    console.print(table)
    console.print(
        f"Quadrant: [bold]{vector_to_quadrant(blended).label}[/bold] · "
        f"emotional tier [bold]{emotion_tier(blended.emotion).value}[/bold]"
    )


@app.command("classify")
def classify_vector(
    vector: str | None = typer.Option(None, "--vector", help="axis=value pairs, comma-separated"),
    file: Path | None = typer.Option(None, "--file", "-f", help="JSON file holding a style vector"),
) -> None:
    """Show where a style vector sits on the constellation map."""
    try:
        script = resolve_vector(vector, file)
    except AuteurError as e:
        fail(str(e))

    x, y = composite_xy(script)
    console.print(f"Position: x={x:.2f} (intimacy → spectacle), y={y:.2f} (classical → experimental)")
    console.print(f"Quadrant: [bold]{vector_to_quadrant(script).label}[/bold]")
    console.print(f"Emotional tier: [bold]{emotion_tier(script.emotion).value}[/bold]")


@app.command("select")
def select_directors(
    primary: str = typer.Argument(..., help="Primary director id"),
    secondary: str | None = typer.Argument(None, help="Optional secondary director id"),
    weight: float | None = typer.Option(
        None, "--weight", "-w", min=0.0, max=1.0, help="Primary influence (0-1)"
    ),
    script: Path | None = typer.Option(None, "--script", "-s", help="JSON file holding the script vector"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the selection as JSON"),
) -> None:
    """Build a director selection record for a film."""
    try:
        config, catalog = load_context()
        weight = config.blend.default_weight if weight is None else weight
        script_vector = read_vector(script) if script else None
        selection = build_selection(catalog, primary, secondary, weight, script_vector)
    except AuteurError as e:
        fail(str(e))

    record = selection.model_dump(mode="json")
    if output:
        write_json(output, record)
        console.print(f"[green]✓[/green] Wrote selection to {output}")
    else:
        console.print_json(json.dumps(record))


@app.command("optics")
def show_optics(
    director_id: str = typer.Argument(..., help="Director id"),
) -> None:
    """Show the camera template derived from a director's visual mandate."""
    try:
        _, catalog = load_context()
        template = derive_camera_template(catalog.get(director_id))
    except AuteurError as e:
        fail(str(e))

    table = Table(title=f"{template.label} · {template.subtitle}", show_header=False)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    for key, value in template.to_dict().items():
        if key in ("id", "label", "subtitle"):
            continue
        if isinstance(value, list):
            value = ", ".join(value) or "-"
        elif isinstance(value, dict):
            value = ", ".join(f"{k} {v}" for k, v in value.items())
        table.add_row(key.replace("_", " "), str(value))

    console.print(table)


@app.command("map")
def render_map(
    script: Path | None = typer.Option(None, "--script", "-s", help="JSON file holding the script vector"),
    genre: list[str] | None = typer.Option(None, "--genre", "-g", help="Film genre (repeatable)"),
    primary: str | None = typer.Option(None, "--primary", help="Primary director id"),
    secondary: str | None = typer.Option(None, "--secondary", help="Secondary director id"),
    weight: float | None = typer.Option(
        None, "--weight", "-w", min=0.0, max=1.0, help="Primary influence (0-1)"
    ),
    zoom: float | None = typer.Option(None, "--zoom", "-z", help="Initial zoom level"),
    output: Path = typer.Option(Path("constellation.html"), "--output", "-o", help="HTML output path"),
    open_report: bool = typer.Option(False, "--open", help="Open in browser"),
) -> None:
    """Render the director constellation map to an HTML report."""
    from auteur.reports import generate_constellation_report

    try:
        config, catalog = load_context()
        script_vector = read_vector(script) if script else None
        if weight is not None:
            weight = snap_weight(config, weight)
        viewport = config.viewport
        if zoom is not None:
            viewport = viewport.model_copy(update={"default_zoom": zoom})
        state = initial_state(config.geometry, viewport)
        selection = None
        if primary:
            catalog.get(primary)
            if secondary:
                catalog.get(secondary)
            selection = SelectionState(primary_id=primary, secondary_id=secondary)
        path = generate_constellation_report(
            catalog,
            config,
            output,
            script_vector=script_vector,
            film_genres=parse_genres(genre),
            selection=selection,
            weight=weight,
            state=state,
            open_browser=open_report,
        )
    except AuteurError as e:
        fail(str(e))

    console.print(f"[green]✓[/green] Constellation map: {path}")
    console.print(f"[dim]  {len(catalog)} directors · zoom {state.zoom:g}[/dim]")


if __name__ == "__main__":
    app()
