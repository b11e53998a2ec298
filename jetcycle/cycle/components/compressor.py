"""Compressor / fan stage.

One model serves the turbojet compressor, the turbofan fan, and the
turbofan core compressor.
"""

from __future__ import annotations

from dataclasses import dataclass

from jetcycle.cycle.components.base import StationState
from jetcycle.utils.numerics import guard_denominator, safe_pow


@dataclass(frozen=True)
class CompressionResult:
    """Compressor or fan analysis result."""

    inlet: StationState
    outlet: StationState
    specific_work: float  # J/kg of air through the stage
    ideal_temperature: float  # K, isentropic exit temperature


def compress(
    inlet: StationState,
    pressure_ratio: float,
    gamma: float,
    cp: float,
    efficiency: float,
    station: str = "3",
) -> CompressionResult:
    """Compress air through a pressure ratio with isentropic efficiency.

    For an ideal gas compressed through a pressure ratio π:
        P_out = π · P_in
        T_out_ideal = T_in · π^((γ-1)/γ)
        T_out = T_in + (T_out_ideal - T_in) / η
        W = cp · (T_out - T_in)

    A non-positive π makes the isentropic term zero rather than NaN.

    Args:
        inlet: Stagnation state entering the stage.
        pressure_ratio: Stage total pressure ratio.
        gamma: Ratio of specific heats.
        cp: Specific heat at constant pressure [J/(kg·K)].
        efficiency: Isentropic efficiency.
        station: Label of the exit station ("3" or "13").

    Returns:
        CompressionResult with exit state and absorbed specific work.
    """
    T_in = inlet.temperature
    T_ideal = T_in * safe_pow(pressure_ratio, (gamma - 1.0) / gamma)
    T_out = T_in + (T_ideal - T_in) / guard_denominator(efficiency, f"station {station} efficiency")

    return CompressionResult(
        inlet=inlet,
        outlet=StationState(station, T_out, inlet.pressure * pressure_ratio),
        specific_work=cp * (T_out - T_in),
        ideal_temperature=T_ideal,
    )
