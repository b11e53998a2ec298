"""Exhaust nozzle stage, assuming full expansion to ambient pressure."""

from __future__ import annotations

from dataclasses import dataclass

from jetcycle.cycle.components.base import StationState
from jetcycle.utils.numerics import safe_pow, safe_sqrt


@dataclass(frozen=True)
class NozzleResult:
    """Nozzle analysis result."""

    inlet: StationState  # station 7
    outlet: StationState  # station 9 (stagnation)
    exit_static_temperature: float  # K
    ideal_exit_temperature: float  # K
    exit_velocity: float  # m/s


def expand_nozzle(
    inlet: StationState,
    ambient_pressure: float,
    gamma: float,
    cp: float,
    efficiency: float,
) -> NozzleResult:
    """Expand the exhaust to ambient pressure.

        P_t9 = max(P_t7, P0)
        T9_ideal = T_t7 · (P0/P_t9)^((γ-1)/γ)
        T9 = T_t7 - η · (T_t7 - T9_ideal)
        V9 = sqrt(2 · cp · (T_t7 - T9))

    The pressure floor keeps the expansion ratio at or below one, so a
    nozzle fed below ambient pressure produces zero exit velocity rather
    than a recompression.

    Args:
        inlet: Nozzle inlet state (station 7).
        ambient_pressure: Static back pressure [Pa].
        gamma: Ratio of specific heats of the gas.
        cp: Specific heat of the gas [J/(kg·K)].
        efficiency: Nozzle efficiency.

    Returns:
        NozzleResult with station 9 and the exit velocity.
    """
    T_t = inlet.temperature
    P_t9 = max(inlet.pressure, ambient_pressure)
    T_ideal = T_t * safe_pow(ambient_pressure / P_t9, (gamma - 1.0) / gamma)
    T_exit = T_t - efficiency * (T_t - T_ideal)
    V9 = safe_sqrt(2.0 * cp * (T_t - T_exit))

    return NozzleResult(
        inlet=inlet,
        outlet=StationState("9", T_t, P_t9),
        exit_static_temperature=T_exit,
        ideal_exit_temperature=T_ideal,
        exit_velocity=V9,
    )
