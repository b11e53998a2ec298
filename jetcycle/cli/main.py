"""JetCycle command-line interface.

Entry point for the ``jetcycle`` CLI tool.
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from jetcycle import __app_name__, __version__

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name=__app_name__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """JetCycle — Turbojet and Turbofan Cycle Analysis.

    Station-by-station Brayton cycle analysis of afterburning turbojet
    and mixed-exhaust turbofan engines.
    """
    ctx.ensure_object(dict)
    ctx.obj["console"] = console
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


# Import and register sub-command groups
from jetcycle.cli.analyze_cmd import analyze  # noqa: E402
from jetcycle.cli.params_cmd import params  # noqa: E402
from jetcycle.cli.sweep_cmd import sweep  # noqa: E402

cli.add_command(analyze)
cli.add_command(params)
cli.add_command(sweep)


def main() -> None:
    """Convenience wrapper for entry-point scripts."""
    cli()
