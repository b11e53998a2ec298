"""Cycle analysis report generation for JetCycle.

Produces plain-text reports from CycleResults, summarising the input
parameters, station states, and performance figures.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Sequence

from jetcycle import __version__
from jetcycle.core.config import EngineParameters
from jetcycle.cycle.results import CycleResults, EngineType
from jetcycle.utils.constants import PA_TO_KPA

_STATION_NAMES = {
    "0": "Free stream",
    "2": "Inlet exit",
    "13": "Fan exit",
    "2.5": "Core inlet",
    "3": "Compressor exit",
    "4": "Turbine inlet",
    "5": "Turbine exit",
    "6": "Mixer exit",
    "7": "Afterburner exit",
    "9": "Nozzle exit",
}


def station_name(label: str) -> str:
    """Human-readable name of a station label."""
    return _STATION_NAMES.get(label, f"Station {label}")


# --- Plain-text report ---


def generate_text_report(
    results: CycleResults | Sequence[CycleResults],
    params: EngineParameters | None = None,
) -> str:
    """Generate a plain-text cycle analysis report.

    Args:
        results: One or more CycleResults (e.g. turbojet and turbofan).
        params: Parameter set used for the runs, listed if given.

    Returns:
        Multi-line text report string.
    """
    runs = [results] if isinstance(results, CycleResults) else list(results)
    lines: list[str] = []
    _hr = "=" * 60

    lines.append(_hr)
    lines.append("  JetCycle — Cycle Analysis Report")
    lines.append("  " + ", ".join(r.engine_type.value.title() for r in runs))
    lines.append(_hr)
    lines.append("")

    if params is not None:
        p = params.to_dict()
        lines.append("FLIGHT CONDITION")
        lines.append("-" * 40)
        _add_param(lines, "Mach", p, "mach0")
        _add_param(lines, "Ambient Temp", p, "ambient_temperature", "K")
        _add_param(lines, "Ambient Pressure", p, "ambient_pressure", "kPa", PA_TO_KPA)
        _add_param(lines, "T_t4 limit", p, "T_t4", "K")
        _add_param(lines, "T_t7 limit", p, "T_t7", "K")
        lines.append("")

    for run in runs:
        lines.extend(_engine_section(run))

    lines.append(_hr)
    lines.append(f"  Generated: {datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M UTC')}")
    lines.append(f"  JetCycle v{__version__}")
    lines.append(_hr)

    return "\n".join(lines)


def _engine_section(run: CycleResults) -> list[str]:
    lines: list[str] = []
    title = run.engine_type.value.upper()

    lines.append(f"{title} STATIONS")
    lines.append("-" * 40)
    lines.append(f"  {'Station':<20s} {'T_t [K]':>12} {'P_t [kPa]':>12}")
    for state in run.stations:
        label = f"{state.station} {station_name(state.station)}"
        lines.append(
            f"  {label:<20s} {state.temperature:>12.2f} {state.pressure * PA_TO_KPA:>12.3f}"
        )
    lines.append("")

    d = run.to_dict()
    lines.append(f"{title} PERFORMANCE")
    lines.append("-" * 40)
    _add_param(lines, "V0", d, "inlet_velocity", "m/s")
    _add_param(lines, "V9", d, "exit_velocity", "m/s")
    _add_param(lines, "f combustor", d, "fuel_air_combustor")
    _add_param(lines, "f afterburner", d, "fuel_air_afterburner")
    total_label = "f total" if run.engine_type == EngineType.TURBOJET else "f overall"
    _add_param(lines, total_label, d, "fuel_air_total")
    _add_param(lines, "Specific Thrust", d, "specific_thrust", "N/(kg/s)")
    _add_param(lines, "TSFC", d, "tsfc_mg", "mg/(N·s)")
    if run.guard_engaged:
        _add_param_str(lines, "Warning", "fuel-air denominator clamped")
    lines.append("")
    return lines


def _add_param(
    lines: list[str],
    label: str,
    data: dict[str, Any],
    key: str,
    unit: str = "",
    scale: float = 1.0,
) -> None:
    """Add a parameter line if the key exists in data."""
    val = data.get(key)
    if val is not None:
        scaled = val * scale
        unit_str = f" {unit}" if unit else ""
        if isinstance(scaled, float):
            lines.append(f"  {label:<20s} {scaled:>12.4f}{unit_str}")
        else:
            lines.append(f"  {label:<20s} {scaled!s:>12}{unit_str}")


def _add_param_str(lines: list[str], label: str, value: str) -> None:
    """Add a string parameter line."""
    lines.append(f"  {label:<20s} {value:>12}")


def save_text_report(
    results: CycleResults | Sequence[CycleResults],
    filepath: str,
    params: EngineParameters | None = None,
) -> None:
    """Generate and save a plain-text report to a file."""
    report = generate_text_report(results, params)
    with open(filepath, "w") as f:
        f.write(report)
