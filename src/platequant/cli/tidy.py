"""platequant tidy — normalize a plate-reader export and fit growth rates."""

from __future__ import annotations

from pathlib import Path

import click
from rich.table import Table

from platequant.cli.utils import check_output_path, console, error_handler, print_notes


@click.command()
@click.argument("data", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-m", "--metadata", default=None, type=click.Path(exists=True, dir_okay=False),
    help="Sample sheet with Well and Group/Condition/Sample columns.",
)
@click.option(
    "-o", "--output", default=None, type=click.Path(),
    help="Write tidy records (Well, Time, Value, Group) to this CSV.",
)
@click.option(
    "--fits", "fits_output", default=None, type=click.Path(),
    help="Write growth fits to this CSV.",
)
@click.option(
    "--overwrite", is_flag=True,
    help="Overwrite output files if they exist.",
)
@error_handler
def tidy(
    data: str,
    metadata: str | None,
    output: str | None,
    fits_output: str | None,
    overwrite: bool,
) -> None:
    """Convert a plate-reader export to tidy rows and fit growth rates."""
    from platequant.io import export_csv, fits_to_frame, read_grid, records_to_frame
    from platequant.pipeline import analyze_plate_grid

    out_path = check_output_path(output, overwrite) if output else None
    fits_path = check_output_path(fits_output, overwrite) if fits_output else None

    with console.status("[bold blue]Reading table..."):
        grid = read_grid(Path(data))
        metadata_grid = read_grid(Path(metadata), all_sheets=False) if metadata else None

    analysis = analyze_plate_grid(grid, metadata_grid)

    console.print(f"\n[bold]{Path(data).name}[/bold]")
    print_notes(analysis.notes)

    if not analysis.records:
        console.print("[yellow]No tidy rows found. Check the file layout.[/yellow]")
        return

    wells = {r.well for r in analysis.records}
    console.print(f"  Rows: {len(analysis.records)}  Wells: {len(wells)}")

    if analysis.fits:
        table = Table(show_header=True, title="Growth fits")
        table.add_column("Well", style="bold")
        table.add_column("Growth rate")
        table.add_column("R²")
        table.add_column("Doubling time")
        for fit in analysis.fits:
            doubling = f"{fit.doubling_time:.3g}" if fit.doubling_time is not None else "-"
            table.add_row(fit.well, f"{fit.growth_rate:.4g}", f"{fit.r_squared:.3f}", doubling)
        console.print(table)

    if out_path is not None:
        export_csv(records_to_frame(analysis.records), out_path)
        console.print(f"[green]Exported tidy rows to {out_path}[/green]")
    if fits_path is not None:
        export_csv(fits_to_frame(analysis.fits), fits_path)
        console.print(f"[green]Exported growth fits to {fits_path}[/green]")
