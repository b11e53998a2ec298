"""Mixer stage joining the bypass stream and the core exhaust."""

from __future__ import annotations

from dataclasses import dataclass

from jetcycle.cycle.components.base import StationState
from jetcycle.utils.numerics import guard_denominator


@dataclass(frozen=True)
class MixerResult:
    """Mixer analysis result."""

    bypass: StationState  # station 13
    core: StationState  # station 5
    outlet: StationState  # station 6
    mixed_mass: float  # kg per kg of core air


def mix(
    bypass: StationState,
    core: StationState,
    bypass_ratio: float,
    fuel_air_ratio: float,
    cp_air: float,
    cp_gas: float,
    pressure_ratio: float,
) -> MixerResult:
    """Mass-weighted enthalpy balance of the two streams.

        T_t6 = (BPR·cp_air·T_t13 + (1+f)·cp_gas·T_t5) / ((BPR+1+f)·cp_gas)
        P_t6 = π_m · P_t13

    The exit pressure takes the bypass-duct pressure with a loss ratio;
    there is no momentum balance between the streams.
    """
    core_mass = 1.0 + fuel_air_ratio
    mixed_mass = bypass_ratio + core_mass
    enthalpy = bypass_ratio * cp_air * bypass.temperature + core_mass * cp_gas * core.temperature
    T_mix = enthalpy / guard_denominator(mixed_mass * cp_gas, "mixer heat capacity")

    return MixerResult(
        bypass=bypass,
        core=core,
        outlet=StationState("6", T_mix, bypass.pressure * pressure_ratio),
        mixed_mass=mixed_mass,
    )
