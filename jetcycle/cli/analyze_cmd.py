"""CLI commands for engine cycle analysis."""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape

from jetcycle.cli.common import load_params, params_options, performance_table, station_table
from jetcycle.core.config import save_results_json
from jetcycle.cycle.results import EngineType
from jetcycle.cycle.solver import analyze as run_analysis
from jetcycle.reports.summary import save_text_report


@click.group("analyze")
@click.pass_context
def analyze(ctx: click.Context) -> None:
    """Engine cycle analysis commands."""
    pass


def _engine_command(engine_type: EngineType) -> click.Command:
    """Build the analysis command for one engine type."""

    @click.command(engine_type.value)
    @params_options
    @click.option("--debug", is_flag=True, help="Show per-stage station values.")
    @click.option("--output", "-o", type=click.Path(), default=None, help="Output file (JSON).")
    @click.option("--report", type=click.Path(), default=None, help="Write a text report.")
    @click.pass_context
    def command(
        ctx: click.Context,
        params_path: str | None,
        overrides: tuple[str, ...],
        debug: bool,
        output: str | None,
        report: str | None,
    ) -> None:
        console: Console = ctx.obj.get("console", Console())
        params = load_params(console, params_path, overrides)

        result = run_analysis(params, engine_type, debug=debug)

        console.print(f"\n[bold]JetCycle — {engine_type.value.title()} Analysis[/bold]\n")
        if debug:
            for entry in result.trace:
                console.print(f"[dim]{escape(entry.describe())}[/dim]")
            console.print()
        console.print(station_table(result))
        console.print(performance_table([result]))
        if result.guard_engaged:
            console.print(
                "[yellow]Warning:[/yellow] fuel heating value cannot reach a temperature "
                "limit; fuel-air ratios are non-physical."
            )

        if output:
            save_results_json(
                {"parameters": params.to_dict(), "results": result.to_dict()}, output
            )
            console.print(f"\n[dim]Saved to {output}[/dim]")
        if report:
            save_text_report(result, report, params)
            console.print(f"[green]Text report saved:[/green] {report}")

    command.help = f"Analyze an afterburning {engine_type.value}."
    return command


analyze.add_command(_engine_command(EngineType.TURBOJET))
analyze.add_command(_engine_command(EngineType.TURBOFAN))


@analyze.command("compare")
@params_options
@click.option("--output", "-o", type=click.Path(), default=None, help="Output file (JSON).")
@click.option("--report", type=click.Path(), default=None, help="Write a text report.")
@click.pass_context
def compare_cmd(
    ctx: click.Context,
    params_path: str | None,
    overrides: tuple[str, ...],
    output: str | None,
    report: str | None,
) -> None:
    """Run both engines on one parameter set and compare."""
    console: Console = ctx.obj.get("console", Console())
    params = load_params(console, params_path, overrides)

    results = [run_analysis(params, engine) for engine in EngineType]

    console.print("\n[bold]JetCycle — Turbojet vs Turbofan[/bold]\n")
    console.print(performance_table(results))

    if output:
        save_results_json(
            {
                "parameters": params.to_dict(),
                "results": {r.engine_type.value: r.to_dict() for r in results},
            },
            output,
        )
        console.print(f"\n[dim]Saved to {output}[/dim]")
    if report:
        save_text_report(results, report, params)
        console.print(f"[green]Text report saved:[/green] {report}")
