"""platequant lanes / colonies — quantify blot lanes or count plate colonies."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import click
from rich.table import Table

from platequant.cli.utils import check_output_path, console, error_handler, print_notes
from platequant.measure.params import ImageAnalysisParams


def _load_params(params_file: str | None) -> ImageAnalysisParams:
    if params_file is None:
        return ImageAnalysisParams()
    from platequant.io.serialization import params_from_yaml

    return params_from_yaml(Path(params_file))


@click.command()
@click.argument("image", type=click.Path(exists=True, dir_okay=False))
@click.option("--lanes", "lane_count", type=int, default=None, help="Number of lanes [default: 8].")
@click.option("--control", "control_lane", type=int, default=None, help="1-based control lane [default: 1].")
@click.option(
    "--params", "params_file", default=None, type=click.Path(exists=True, dir_okay=False),
    help="YAML parameter file; command-line options take precedence.",
)
@click.option("-o", "--output", default=None, type=click.Path(), help="Write lane results to this CSV.")
@click.option("--overlay", default=None, type=click.Path(), help="Write an annotated image (PNG/TIFF).")
@click.option("--overwrite", is_flag=True, help="Overwrite output files if they exist.")
@error_handler
def lanes(
    image: str,
    lane_count: int | None,
    control_lane: int | None,
    params_file: str | None,
    output: str | None,
    overlay: str | None,
    overwrite: bool,
) -> None:
    """Quantify band darkness per lane of a blot image."""
    from platequant.io import draw_lane_overlay, export_csv, lanes_to_frame, read_image, save_overlay
    from platequant.pipeline import analyze_image

    params = _load_params(params_file)
    overrides = {"lane_count": lane_count, "control_lane": control_lane}
    lane_params = replace(params.lanes, **{k: v for k, v in overrides.items() if v is not None})
    params = replace(params, mode="lanes", lanes=lane_params)

    out_path = check_output_path(output, overwrite) if output else None
    overlay_path = check_output_path(overlay, overwrite) if overlay else None

    pixels = read_image(Path(image))
    result = analyze_image(pixels, params)

    table = Table(show_header=True, title=f"Lanes — {Path(image).name}")
    table.add_column("Lane", style="bold")
    table.add_column("Columns")
    table.add_column("Integrated intensity")
    table.add_column("Relative density")
    for lane in result.lanes:
        rel = f"{lane.relative_density:.3f}" if lane.relative_density is not None else "-"
        marker = " (control)" if lane.lane_index == result.control_lane else ""
        table.add_row(
            f"{lane.lane_index}{marker}",
            f"{lane.x_start}-{lane.x_end}",
            f"{lane.integrated_intensity:.0f}",
            rel,
        )
    console.print(table)
    print_notes(result.notes)

    if out_path is not None:
        export_csv(lanes_to_frame(result.lanes), out_path)
        console.print(f"[green]Exported lane results to {out_path}[/green]")
    if overlay_path is not None:
        save_overlay(draw_lane_overlay(pixels, result.lanes, result.control_lane), overlay_path)
        console.print(f"[green]Saved overlay to {overlay_path}[/green]")


@click.command()
@click.argument("image", type=click.Path(exists=True, dir_okay=False))
@click.option("--threshold", type=int, default=None, help="Foreground threshold 0-255 [default: 140].")
@click.option("--min-area", type=int, default=None, help="Minimum colony area in pixels [default: 18].")
@click.option(
    "--params", "params_file", default=None, type=click.Path(exists=True, dir_okay=False),
    help="YAML parameter file; command-line options take precedence.",
)
@click.option("-o", "--output", default=None, type=click.Path(), help="Write colony results to this CSV.")
@click.option("--overlay", default=None, type=click.Path(), help="Write an annotated image (PNG/TIFF).")
@click.option("--overwrite", is_flag=True, help="Overwrite output files if they exist.")
@error_handler
def colonies(
    image: str,
    threshold: int | None,
    min_area: int | None,
    params_file: str | None,
    output: str | None,
    overlay: str | None,
    overwrite: bool,
) -> None:
    """Count bright colonies on a plate image."""
    from platequant.io import colonies_to_frame, draw_colony_overlay, export_csv, read_image, save_overlay
    from platequant.pipeline import analyze_image

    params = _load_params(params_file)
    overrides = {"threshold": threshold, "min_area": min_area}
    colony_params = replace(params.colonies, **{k: v for k, v in overrides.items() if v is not None})
    params = replace(params, mode="colonies", colonies=colony_params)

    out_path = check_output_path(output, overwrite) if output else None
    overlay_path = check_output_path(overlay, overwrite) if overlay else None

    pixels = read_image(Path(image))
    result = analyze_image(pixels, params)

    console.print(f"\n[bold]{Path(image).name}[/bold]")
    console.print(f"  Colonies: {len(result.colonies)}")
    console.print(f"  Components found: {result.components_found}")
    console.print(f"  Foreground pixels: {result.foreground_pixels}")
    print_notes(result.notes)

    if out_path is not None:
        export_csv(colonies_to_frame(result.colonies), out_path)
        console.print(f"[green]Exported colony results to {out_path}[/green]")
    if overlay_path is not None:
        save_overlay(draw_colony_overlay(pixels, result.colonies), overlay_path)
        console.print(f"[green]Saved overlay to {overlay_path}[/green]")
