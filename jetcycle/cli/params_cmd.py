"""CLI commands for creating and inspecting parameter files."""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from jetcycle.core.config import (
    PARAMETER_NAMES,
    PARAMETER_UNITS,
    ParametersNotReadyError,
    load_parameter_builder,
    reference_parameters,
    save_parameters_json,
)

_GROUPS = {
    "Gas Properties": ("gamma_air", "gamma_gas", "cp_air", "cp_gas", "R_air", "fuel_heating_value"),
    "Flight Condition": ("mach0", "ambient_temperature", "ambient_pressure"),
    "Efficiencies": tuple(n for n in PARAMETER_NAMES if n.startswith("eta_")),
    "Loss Ratios & Limits": ("pi_combustor", "pi_afterburner", "pi_mixer", "T_t4", "T_t7"),
    "Engine Specific": ("pi_compressor_turbojet", "bypass_ratio", "pi_fan", "pi_compressor_turbofan"),
}


@click.group("params")
@click.pass_context
def params(ctx: click.Context) -> None:
    """Create and inspect parameter files."""
    pass


@params.command("template")
@click.option("--output", "-o", type=click.Path(), default="params.json", show_default=True,
              help="Output file (JSON).")
@click.pass_context
def params_template(ctx: click.Context, output: str) -> None:
    """Write the reference design point as a parameter file."""
    console: Console = ctx.obj.get("console", Console())
    save_parameters_json(reference_parameters(), output)
    console.print(f"[green]Parameter template saved:[/green] {output}")


@params.command("show")
@click.argument("path", type=click.Path(exists=True))
@click.pass_context
def params_show(ctx: click.Context, path: str) -> None:
    """Display and validate a parameter file."""
    console: Console = ctx.obj.get("console", Console())
    try:
        builder = load_parameter_builder(path)
    except (KeyError, ValueError) as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1)

    values = builder.values
    tree = Tree(f"[bold]{path}[/bold]")
    for group, names in _GROUPS.items():
        node = tree.add(f"[cyan]{group}[/cyan]")
        for name in names:
            unit = PARAMETER_UNITS.get(name, "")
            if name in values:
                node.add(f"{name}: {values[name]:g} {unit}".rstrip())
            else:
                node.add(f"[red]{name}: missing[/red]")
    console.print(tree)

    result = builder.validate()
    for msg in result.warnings:
        console.print(f"[yellow]Warning:[/yellow] {msg.message}")

    try:
        builder.build()
    except ParametersNotReadyError as exc:
        console.print(f"[red]Not ready:[/red] {escape(str(exc))}")
        raise SystemExit(1)
    console.print("[green]Parameters are complete.[/green]")
