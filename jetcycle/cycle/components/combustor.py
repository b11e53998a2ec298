"""Heat-addition stage: main combustor and afterburner.

The exit temperature is a design limit; the stage solves for the
fuel-air ratio that reaches it from a steady-flow energy balance.
"""

from __future__ import annotations

from dataclasses import dataclass

from jetcycle.cycle.components.base import StationState
from jetcycle.utils.numerics import guard_denominator


@dataclass(frozen=True)
class CombustionResult:
    """Combustor or afterburner analysis result."""

    inlet: StationState
    outlet: StationState
    fuel_air_ratio: float  # kg fuel / kg of the stream entering the stage
    denominator_clamped: bool = False


def burn(
    inlet: StationState,
    exit_temperature: float,
    cp_in: float,
    cp_out: float,
    efficiency: float,
    heating_value: float,
    pressure_ratio: float,
    station: str = "4",
) -> CombustionResult:
    """Burn fuel to raise the stream to *exit_temperature*.

        f = (cp_out · T_out - cp_in · T_in) / (η · Q_HV - cp_out · T_out)
        P_out = π · P_in

    When η · Q_HV cannot exceed cp_out · T_out the denominator is
    clamped to machine epsilon, giving a huge but finite ratio.

    Args:
        inlet: Stagnation state entering the burner.
        exit_temperature: Target exit stagnation temperature [K].
        cp_in: Specific heat of the entering stream [J/(kg·K)].
        cp_out: Specific heat of the products [J/(kg·K)].
        efficiency: Burner efficiency.
        heating_value: Fuel lower heating value [J/kg].
        pressure_ratio: Total pressure ratio across the burner.
        station: Label of the exit station ("4" or "7").

    Returns:
        CombustionResult with the exit state and fuel-air ratio.
    """
    raw = efficiency * heating_value - cp_out * exit_temperature
    denominator = guard_denominator(raw, f"station {station} fuel-air denominator")
    f = (cp_out * exit_temperature - cp_in * inlet.temperature) / denominator

    return CombustionResult(
        inlet=inlet,
        outlet=StationState(station, exit_temperature, inlet.pressure * pressure_ratio),
        fuel_air_ratio=f,
        denominator_clamped=raw <= 0.0,
    )
