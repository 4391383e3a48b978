"""Typer CLI for corpus panel layout."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from corpus.application import BuildLayoutCommand, CorpusEditor, EditResult
from corpus.application.config import (
    ConfigError,
    config_to_registry,
    load_config,
    registry_to_config,
    save_config,
)
from corpus.cli.commands import display_load_error, validate_command
from corpus.domain import (
    PanelCandidate,
    PanelRegistry,
    PanelType,
    available_types_to_add,
    default_candidate,
)
from corpus.infrastructure import (
    ElevationDiagramFormatter,
    JsonExporter,
    LayoutReportFormatter,
    PanelTableFormatter,
    StlExporter,
)
from corpus.infrastructure.exporters import ExporterRegistry, ExportManager

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="corpus",
    help="Lay out the panels of a furniture corpus and annotate its spacing.",
)

app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Lay out the panels of a furniture corpus and annotate its spacing."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_registry(corpus_file: Path, missing_ok: bool = False) -> tuple[PanelRegistry, str]:
    """Load a corpus file as a registry, exiting with code 1 on failure.

    Returns:
        Tuple of (registry, project name). The name falls back to the file
        stem.
    """
    if missing_ok and not corpus_file.exists():
        logger.debug(f"{corpus_file} does not exist, starting an empty corpus")
        return PanelRegistry(), corpus_file.stem
    try:
        config = load_config(corpus_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)
    return config_to_registry(config), config.name or corpus_file.stem


def _save_registry(registry: PanelRegistry, corpus_file: Path, name: str) -> None:
    try:
        save_config(registry_to_config(registry, name=name), corpus_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _resolve_panel_id(registry: PanelRegistry, token: str) -> str:
    """Accept a full panel id or a unique prefix of one."""
    if registry.get(token) is not None:
        return token
    matches = [p.id for p in registry if p.id.startswith(token)]
    if len(matches) == 1:
        return matches[0]
    if len(matches) > 1:
        typer.echo(f"Error: Panel id '{token}' is ambiguous", err=True)
        raise typer.Exit(code=1)
    return token


def _finish_edit(result: EditResult, corpus_file: Path, name: str) -> None:
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)
    _save_registry(result.registry, corpus_file, name)
    for warning in result.warnings:
        typer.echo(f"Warning: {warning}")


@app.command()
def show(
    corpus_file: Annotated[Path, typer.Argument(help="Path to the JSON corpus file")],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = "text",
    stl: Annotated[
        Path | None,
        typer.Option("--stl", help="Also write an STL model to this path"),
    ] = None,
) -> None:
    """Show the layout of a corpus: envelope, panels, spacings and diagram."""
    if output_format not in ("text", "json"):
        typer.echo(f"Unknown format: {output_format}. Use text or json.", err=True)
        raise typer.Exit(code=1)

    registry, _ = _load_registry(corpus_file)
    layout = BuildLayoutCommand().execute(registry)

    if output_format == "json":
        typer.echo(JsonExporter().export_string(layout))
    else:
        typer.echo(LayoutReportFormatter().format(layout))
        typer.echo()
        typer.echo(PanelTableFormatter().format(registry))
        typer.echo()
        typer.echo(ElevationDiagramFormatter().format(layout))

    if stl is not None:
        StlExporter().export_to_file(layout, stl)
        typer.echo(f"STL file saved to: {stl}", err=output_format == "json")


@app.command()
def add(
    corpus_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON corpus file (created if missing)"),
    ],
    panel_type: Annotated[
        PanelType,
        typer.Option("--type", "-t", help="Panel type to add"),
    ],
    width: Annotated[float | None, typer.Option("--width", help="Width in mm")] = None,
    height: Annotated[float | None, typer.Option("--height", help="Height in mm")] = None,
    depth: Annotated[float | None, typer.Option("--depth", help="Depth in mm")] = None,
    thickness: Annotated[
        float | None, typer.Option("--thickness", help="Thickness in mm")
    ] = None,
) -> None:
    """Add a panel. Sizes not given use the defaults for the panel type."""
    registry, name = _load_registry(corpus_file, missing_ok=True)

    defaults = default_candidate(panel_type)
    candidate = PanelCandidate(
        panel_type=panel_type,
        width=width if width is not None else defaults.width,
        height=height if height is not None else defaults.height,
        depth=depth if depth is not None else defaults.depth,
        thickness=thickness if thickness is not None else defaults.thickness,
    )

    result = CorpusEditor().add(registry, candidate)
    _finish_edit(result, corpus_file, name)
    typer.echo(f"Added {panel_type.label.lower()} panel {result.panel_id}")


@app.command()
def remove(
    corpus_file: Annotated[Path, typer.Argument(help="Path to the JSON corpus file")],
    panel_id: Annotated[str, typer.Argument(help="Panel id (or a unique prefix)")],
) -> None:
    """Remove a panel. Removing a shelf re-spreads the remaining shelves."""
    registry, name = _load_registry(corpus_file)
    panel_id = _resolve_panel_id(registry, panel_id)

    result = CorpusEditor().remove(registry, panel_id)
    _finish_edit(result, corpus_file, name)
    typer.echo(f"Removed panel {panel_id}")


@app.command()
def move(
    corpus_file: Annotated[Path, typer.Argument(help="Path to the JSON corpus file")],
    panel_id: Annotated[str, typer.Argument(help="Shelf id (or a unique prefix)")],
    y_position: Annotated[float, typer.Argument(help="New shelf center in mm")],
) -> None:
    """Move a shelf to a new height. Overlaps are reported but still saved."""
    registry, name = _load_registry(corpus_file)
    panel_id = _resolve_panel_id(registry, panel_id)

    result = CorpusEditor().move(registry, panel_id, y_position)
    _finish_edit(result, corpus_file, name)
    moved = result.registry.get(panel_id)
    typer.echo(f"Moved shelf {panel_id} to {moved.y_position:g} mm")


@app.command()
def types(
    corpus_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON corpus file (may not exist yet)"),
    ],
) -> None:
    """List the panel types that can still be added."""
    registry, _ = _load_registry(corpus_file, missing_ok=True)
    for panel_type in available_types_to_add(registry):
        typer.echo(f"{panel_type.value:<12} {panel_type.label}")


@app.command()
def export(
    corpus_file: Annotated[Path, typer.Argument(help="Path to the JSON corpus file")],
    formats: Annotated[
        str,
        typer.Option(
            "--formats",
            help="Comma-separated formats to export, or 'all'",
        ),
    ] = "all",
    output_dir: Annotated[
        Path,
        typer.Option("--output-dir", "-o", help="Directory for exported files"),
    ] = Path("."),
) -> None:
    """Export the layout to one or more file formats."""
    available = ExporterRegistry.available_formats()
    if formats.lower() == "all":
        selected = available
    else:
        selected = [f.strip().lower() for f in formats.split(",") if f.strip()]

    invalid = [f for f in selected if f not in available]
    if invalid or not selected:
        typer.echo(f"Unknown formats: {', '.join(invalid) or formats}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    registry, name = _load_registry(corpus_file)
    layout = BuildLayoutCommand().execute(registry)
    results = ExportManager(output_dir).export_all(selected, layout, project_name=name)
    for format_name, path in results.items():
        typer.echo(f"{format_name}: {path}")


if __name__ == "__main__":
    app()
