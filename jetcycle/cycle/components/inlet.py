"""Inlet (diffuser) stage.

Brings the free stream to stagnation conditions and applies the inlet
pressure recovery. No temperature loss is modelled.
"""

from __future__ import annotations

from dataclasses import dataclass

from jetcycle.cycle.components.base import StationState
from jetcycle.utils.numerics import safe_pow, safe_sqrt


@dataclass(frozen=True)
class InletResult:
    """Inlet analysis result."""

    freestream: StationState  # station 0
    outlet: StationState  # station 2
    flight_velocity: float  # m/s


def analyze_inlet(
    mach: float,
    ambient_temperature: float,
    ambient_pressure: float,
    gamma: float,
    R: float,
    efficiency: float,
) -> InletResult:
    """Compute free-stream stagnation state and inlet exit state.

        V0   = M0 · sqrt(γ · R · T0)
        T_t0 = T0 · (1 + (γ-1)/2 · M0²)
        P_t0 = P0 · (T_t0/T0)^(γ/(γ-1))
        T_t2 = T_t0,  P_t2 = η_inlet · P_t0

    Args:
        mach: Flight Mach number.
        ambient_temperature: Static ambient temperature [K].
        ambient_pressure: Static ambient pressure [Pa].
        gamma: Ratio of specific heats of air.
        R: Gas constant of air [J/(kg·K)].
        efficiency: Inlet pressure recovery.

    Returns:
        InletResult with stations 0 and 2 and the flight velocity.
    """
    V0 = mach * safe_sqrt(gamma * R * ambient_temperature)
    T_t0 = ambient_temperature * (1.0 + (gamma - 1.0) / 2.0 * mach * mach)
    P_t0 = ambient_pressure * safe_pow(T_t0 / ambient_temperature, gamma / (gamma - 1.0))

    return InletResult(
        freestream=StationState("0", T_t0, P_t0),
        outlet=StationState("2", T_t0, P_t0 * efficiency),
        flight_velocity=V0,
    )
