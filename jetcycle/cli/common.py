"""Helpers shared by the CLI commands: parameter loading and tables."""

from __future__ import annotations

from typing import Callable, Sequence

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from jetcycle.core.config import (
    EngineParameters,
    ParameterBuilder,
    ParametersNotReadyError,
    load_parameter_builder,
    reference_parameters,
)
from jetcycle.cycle.results import CycleResults
from jetcycle.reports.summary import station_name
from jetcycle.utils.constants import PA_TO_KPA


def params_options(func: Callable) -> Callable:
    """Attach the --params / --set options used by every analysis command."""
    func = click.option(
        "--set",
        "overrides",
        multiple=True,
        metavar="NAME=VALUE",
        help="Override one parameter (repeatable). Values may carry units, e.g. T_t4='1800 K'.",
    )(func)
    func = click.option(
        "--params",
        "params_path",
        type=click.Path(),
        default=None,
        help="Parameter file (JSON). Defaults to the reference design point.",
    )(func)
    return func


def load_params(
    console: Console, params_path: str | None, overrides: Sequence[str] = ()
) -> EngineParameters:
    """Build the parameter set for a command, exiting with status 1 on failure."""
    try:
        if params_path:
            builder = load_parameter_builder(params_path)
        else:
            builder = ParameterBuilder.from_parameters(reference_parameters())
        for item in overrides:
            name, sep, value = item.partition("=")
            if not sep:
                raise ValueError(f"Override '{item}' is not of the form NAME=VALUE")
            builder.set(name.strip(), value.strip())
        return builder.build()
    except FileNotFoundError:
        console.print(f"[red]Error:[/red] parameter file not found: {params_path}")
        raise SystemExit(1)
    except ParametersNotReadyError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1)
    except (KeyError, ValueError) as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1)


def station_table(result: CycleResults) -> Table:
    """Station temperatures and pressures as a rich Table."""
    table = Table(title=f"{result.engine_type.value.title()} Stations")
    table.add_column("Station", style="cyan")
    table.add_column("Location", style="dim")
    table.add_column("T_t [K]", style="green", justify="right")
    table.add_column("P_t [kPa]", style="green", justify="right")
    for state in result.stations:
        table.add_row(
            state.station,
            station_name(state.station),
            f"{state.temperature:.2f}",
            f"{state.pressure * PA_TO_KPA:.3f}",
        )
    return table


def performance_table(results: Sequence[CycleResults]) -> Table:
    """Performance figures of one or more engines side by side."""
    table = Table(title="Performance")
    table.add_column("Parameter", style="cyan")
    for r in results:
        table.add_column(r.engine_type.value.title(), style="green", justify="right")
    table.add_column("Unit", style="dim")

    rows = [
        ("V0", lambda r: f"{r.inlet_velocity:.2f}", "m/s"),
        ("V9", lambda r: f"{r.exit_velocity:.2f}", "m/s"),
        ("f combustor", lambda r: f"{r.fuel_air_combustor:.5f}", "—"),
        ("f afterburner", lambda r: f"{r.fuel_air_afterburner:.5f}", "—"),
        ("f total", lambda r: f"{r.fuel_air_total:.5f}", "—"),
        ("Specific Thrust", lambda r: f"{r.specific_thrust:.2f}", "N/(kg/s)"),
        ("TSFC", lambda r: f"{r.tsfc_mg:.3f}", "mg/(N·s)"),
    ]
    for label, fmt, unit in rows:
        table.add_row(label, *[fmt(r) for r in results], unit)
    return table
