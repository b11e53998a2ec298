"""Base types shared by the cycle stages.

Stations follow the usual gas-turbine numbering: 0 free stream, 2 inlet
exit, 13 fan exit, 3 compressor exit, 4 turbine inlet, 5 turbine exit,
6 mixer exit, 7 afterburner exit, 9 nozzle exit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class StationState:
    """Stagnation state at a named engine station.

    All properties in SI units.
    """

    station: str
    temperature: float  # K, stagnation
    pressure: float  # Pa, stagnation

    def to_dict(self) -> dict[str, Any]:
        return {
            "station": self.station,
            "temperature": self.temperature,
            "pressure": self.pressure,
        }


@dataclass(frozen=True)
class StageTrace:
    """Diagnostic record of one stage, captured in debug mode."""

    stage: str
    station: str
    temperature: float  # K
    pressure: float  # Pa
    fuel_air_ratio: float | None = None
    specific_work: float | None = None  # J/kg

    def describe(self) -> str:
        text = f"[{self.stage}] T_t{self.station}={self.temperature:.2f} K P_t{self.station}={self.pressure:.1f} Pa"
        if self.fuel_air_ratio is not None:
            text += f" f={self.fuel_air_ratio:.6f}"
        if self.specific_work is not None:
            text += f" W={self.specific_work:.1f} J/kg"
        return text
