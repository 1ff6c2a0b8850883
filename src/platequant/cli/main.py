"""PlateQuant CLI — top-level Click group."""

from __future__ import annotations

import logging

import click


@click.group()
@click.version_option(package_name="platequant")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logs and full tracebacks on errors.")
def cli(verbose: bool) -> None:
    """PlateQuant — plate-reader and gel/plate image quantification."""
    from platequant.cli import utils

    utils.verbose = verbose
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _register_commands() -> None:
    """Attach the tidy, lanes and colonies subcommands."""
    from platequant.cli.image import colonies, lanes
    from platequant.cli.tidy import tidy

    cli.add_command(colonies)
    cli.add_command(lanes)
    cli.add_command(tidy)


_register_commands()
