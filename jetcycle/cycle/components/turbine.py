"""Turbine component model for JetCycle cycle analysis.

The turbine temperature drop is fixed by the shaft power balance; the
isentropic efficiency only sets how much pressure the expansion costs.
"""

from __future__ import annotations

from dataclasses import dataclass

from jetcycle.cycle.components.base import StationState
from jetcycle.utils.numerics import guard_denominator, safe_pow


@dataclass(frozen=True)
class TurbineResult:
    """Turbine analysis result."""

    inlet: StationState
    outlet: StationState
    shaft_work: float  # J per kg of core air
    ideal_temperature: float  # K, isentropic exit temperature
    expansion_ratio: float  # P_out / P_in


def expand(
    inlet: StationState,
    shaft_work: float,
    fuel_air_ratio: float,
    gamma: float,
    cp: float,
    efficiency: float,
) -> TurbineResult:
    """Expand combustion gas to deliver *shaft_work*.

    Per kg of core air the turbine passes (1 + f) kg of gas:
        T_out = T_in - W / ((1 + f) · cp)
        T_out_ideal = T_in - (T_in - T_out) / η
        P_out = P_in · (T_out_ideal / T_in)^(γ/(γ-1))

    Args:
        inlet: Turbine inlet state (station 4).
        shaft_work: Work demanded by the compressor(s) [J/kg core air].
        fuel_air_ratio: Combustor fuel-air ratio.
        gamma: Ratio of specific heats of the gas.
        cp: Specific heat of the gas [J/(kg·K)].
        efficiency: Isentropic efficiency.

    Returns:
        TurbineResult with the exit state (station 5).
    """
    T_in = inlet.temperature
    mass_ratio = 1.0 + fuel_air_ratio

    T_out = T_in - shaft_work / guard_denominator(mass_ratio * cp, "turbine gas heat capacity")
    T_ideal = T_in - (T_in - T_out) / guard_denominator(efficiency, "turbine efficiency")
    ratio = safe_pow(T_ideal / guard_denominator(T_in, "turbine inlet temperature"), gamma / (gamma - 1.0))

    return TurbineResult(
        inlet=inlet,
        outlet=StationState("5", T_out, inlet.pressure * ratio),
        shaft_work=shaft_work,
        ideal_temperature=T_ideal,
        expansion_ratio=ratio,
    )
