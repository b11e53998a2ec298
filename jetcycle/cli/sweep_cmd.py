"""CLI command for one-parameter sweeps."""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from jetcycle.cli.common import load_params, params_options
from jetcycle.core.config import save_results_json
from jetcycle.cycle.sweep import linear_sweep
from jetcycle.utils.constants import TSFC_TO_MG


@click.command("sweep")
@click.argument("engine", type=click.Choice(["turbojet", "turbofan"], case_sensitive=False))
@params_options
@click.option("--vary", required=True, help="Parameter to sweep (e.g. T_t4, pi_fan).")
@click.option("--start", type=float, required=True, help="First value [SI].")
@click.option("--stop", type=float, required=True, help="Last value [SI].")
@click.option("--points", "-n", type=int, default=11, show_default=True, help="Number of points.")
@click.option("--output", "-o", type=click.Path(), default=None, help="Output file (JSON).")
@click.pass_context
def sweep(
    ctx: click.Context,
    engine: str,
    params_path: str | None,
    overrides: tuple[str, ...],
    vary: str,
    start: float,
    stop: float,
    points: int,
    output: str | None,
) -> None:
    """Sweep one parameter and tabulate specific thrust and TSFC."""
    console: Console = ctx.obj.get("console", Console())
    params = load_params(console, params_path, overrides)

    try:
        result = linear_sweep(params, engine, vary, start, stop, points)
    except (KeyError, ValueError) as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1)

    table = Table(title=f"{engine.title()} — {vary} sweep")
    table.add_column(vary, style="cyan", justify="right")
    table.add_column("Specific Thrust [N/(kg/s)]", style="green", justify="right")
    table.add_column("TSFC [mg/(N·s)]", style="green", justify="right")
    table.add_column("f total", justify="right")
    for value, fs, tsfc, f in zip(
        result.values, result.specific_thrust, result.tsfc, result.fuel_air_total
    ):
        table.add_row(f"{value:g}", f"{fs:.2f}", f"{tsfc * TSFC_TO_MG:.3f}", f"{f:.5f}")
    console.print(table)

    if output:
        save_results_json(result.to_dict(), output)
        console.print(f"\n[dim]Saved to {output}[/dim]")
