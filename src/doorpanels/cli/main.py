"""Typer CLI for door panel layouts."""

from pathlib import Path
from typing import Annotated

import typer

from doorpanels.application import CalculateLayoutCommand
from doorpanels.application.config import (
    ConfigError,
    MAX_PANEL_COUNT,
    DoorPanelConfiguration,
    load_config,
    load_config_from_dict,
    merge_config_with_cli,
)
from doorpanels.cli.commands import display_load_error, validate_command
from doorpanels.domain.services import (
    PROPORTION_DESCRIPTIONS,
    generate_weights,
    normalize_weights,
)
from doorpanels.infrastructure.exporters import Exporter, ExporterRegistry

app = typer.Typer(
    name="doorpanels",
    help="Lay out decorative panels on a door, with optional peephole placement.",
)

# Register validate command
app.command(name="validate")(validate_command)


def _create_exporter(format_name: str, config: DoorPanelConfiguration) -> Exporter:
    """Instantiate the exporter for a format with options from the config."""
    exporter_class = ExporterRegistry.get(format_name)
    if format_name == "svg":
        return exporter_class(preview_width=config.output.preview_width)
    return exporter_class()


@app.command()
def calculate(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    width: Annotated[
        float | None,
        typer.Option("--width", "-w", help="Door width"),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", "-h", help="Door height"),
    ] = None,
    panels: Annotated[
        int | None,
        typer.Option("--panels", "-n", help="Number of panels"),
    ] = None,
    edge: Annotated[
        float | None,
        typer.Option("--edge", help="Edge distance (manual spacing)"),
    ] = None,
    gap: Annotated[
        float | None,
        typer.Option("--gap", help="Gap between panels (manual spacing)"),
    ] = None,
    proportion: Annotated[
        str | None,
        typer.Option(
            "--proportion",
            "-p",
            help="Proportion: equal, golden, reverse, classic, fibonacci",
        ),
    ] = None,
    auto_spacing: Annotated[
        bool | None,
        typer.Option(
            "--auto-spacing/--manual-spacing",
            help="Solve edge and gap from the target ratio",
        ),
    ] = None,
    target_ratio: Annotated[
        float | None,
        typer.Option("--target-ratio", help="Panel area / negative space (default φ)"),
    ] = None,
    peephole_diameter: Annotated[
        float | None,
        typer.Option("--peephole-diameter", help="Peephole diameter (adds a peephole)"),
    ] = None,
    peephole_top: Annotated[
        float | None,
        typer.Option("--peephole-top", help="Peephole top from the door top"),
    ] = None,
    auto_center: Annotated[
        bool | None,
        typer.Option(
            "--auto-center/--fixed-peephole",
            help="Search panel and gap centers for the peephole",
        ),
    ] = None,
    prefer_gap: Annotated[
        bool | None,
        typer.Option(
            "--prefer-gap/--prefer-panel",
            help="Try gap centers before panel centers",
        ),
    ] = None,
    min_edge_distance: Annotated[
        float | None,
        typer.Option("--min-edge-distance", help="Minimum peephole clearance"),
    ] = None,
    conflict_model: Annotated[
        str | None,
        typer.Option("--conflict-model", help="Clearance model: radius_aware, legacy"),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: text, json, svg, dxf"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to this file"),
    ] = None,
) -> None:
    """Calculate a door panel layout.

    Input comes from a configuration file, command-line options, or both
    (options override the file). An overflowing layout is reported, not
    treated as an error.

    Examples:
        doorpanels calculate --width 103 --height 201 --panels 3
        doorpanels calculate --config front-door.json --format svg -o door.svg
        doorpanels calculate -w 90 -h 210 --auto-spacing --auto-center
    """
    try:
        if config_file is not None:
            config = load_config(config_file)
        else:
            if width is None or height is None:
                typer.echo(
                    "Error: --width and --height are required when --config is not provided",
                    err=True,
                )
                raise typer.Exit(code=1)
            config = load_config_from_dict(
                {"schema_version": "1.0", "door": {"width": width, "height": height}}
            )

        config = merge_config_with_cli(
            config,
            width=width,
            height=height,
            panel_count=panels,
            proportion=proportion,
            edge_distance=edge,
            panel_gap=gap,
            auto_calculate=auto_spacing,
            target_ratio=target_ratio,
            peephole_diameter=peephole_diameter,
            peephole_top=peephole_top,
            auto_center=auto_center,
            prefer_gap_placement=prefer_gap,
            min_edge_distance=min_edge_distance,
            conflict_model=conflict_model,
            output_format=output_format,
            output_file=output_file,
        )
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    output = CalculateLayoutCommand().execute(config)
    if not output.is_valid or output.result is None:
        for error in output.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    exporter = _create_exporter(config.output.format, config)
    if config.output.output_file:
        path = Path(config.output.output_file)
        exporter.export(output.result, path)
        typer.echo(f"Wrote {config.output.format} output to {path}")
    else:
        typer.echo(exporter.export_string(output.result))

    for warning in output.validation.warnings:
        typer.echo(f"Warning: {warning.message}", err=True)


@app.command()
def proportions(
    panels: Annotated[
        int,
        typer.Option(
            "--panels",
            "-n",
            min=1,
            max=MAX_PANEL_COUNT,
            help="Number of panels to show weights for",
        ),
    ] = 3,
) -> None:
    """List the proportion types with their height shares."""
    typer.echo(f"Proportions for {panels} panel(s):")
    typer.echo()
    for proportion_type, description in PROPORTION_DESCRIPTIONS.items():
        weights = generate_weights(panels, proportion_type)
        shares = normalize_weights(weights)
        typer.echo(f"{proportion_type.value:<10} {description}")
        typer.echo(f"{'':<10} Ratios: {' : '.join(f'{w:.2f}' for w in weights)}")
        typer.echo(f"{'':<10} Shares: {' : '.join(f'{s:.1%}' for s in shares)}")


@app.command()
def formats() -> None:
    """List the available output formats."""
    for format_name in ExporterRegistry.available_formats():
        exporter_class = ExporterRegistry.get(format_name)
        typer.echo(f"{format_name:<6} .{exporter_class.file_extension}")


if __name__ == "__main__":
    app()
