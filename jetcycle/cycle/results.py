"""Result records for JetCycle.

Each analysis run returns one immutable CycleResults.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from jetcycle.cycle.components.base import StageTrace, StationState
from jetcycle.utils.constants import TSFC_TO_MG


class EngineType(Enum):
    """Engine cycle architecture."""

    TURBOJET = "turbojet"
    TURBOFAN = "turbofan"


@dataclass(frozen=True)
class CycleResults:
    """Station states and performance of one engine at one operating point."""

    engine_type: EngineType
    stations: tuple[StationState, ...]
    inlet_velocity: float  # m/s
    exit_velocity: float  # m/s
    fuel_air_combustor: float
    fuel_air_afterburner: float
    fuel_air_total: float  # total (turbojet) or overall (turbofan)
    specific_thrust: float  # N·s/kg
    tsfc: float  # kg/(N·s)
    compressor_work: float = 0.0  # J/kg core air
    fan_work: float = 0.0  # J/kg fan air
    shaft_work: float = 0.0  # J/kg core air
    bypass_ratio: float = 0.0
    guard_engaged: bool = False  # a fuel-air denominator was clamped
    trace: tuple[StageTrace, ...] = ()

    @property
    def tsfc_mg(self) -> float:
        """TSFC in mg/(N·s)."""
        return self.tsfc * TSFC_TO_MG

    @property
    def station_labels(self) -> list[str]:
        return [s.station for s in self.stations]

    def station(self, label: str) -> StationState:
        """Look up a station by label (e.g. "4" or "13").

        Raises:
            KeyError: If the engine has no such station.
        """
        for state in self.stations:
            if state.station == label:
                return state
        raise KeyError(
            f"No station '{label}' in {self.engine_type.value}. Available: {self.station_labels}"
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form for JSON output."""
        return {
            "engine_type": self.engine_type.value,
            "stations": [s.to_dict() for s in self.stations],
            "inlet_velocity": self.inlet_velocity,
            "exit_velocity": self.exit_velocity,
            "fuel_air_combustor": self.fuel_air_combustor,
            "fuel_air_afterburner": self.fuel_air_afterburner,
            "fuel_air_total": self.fuel_air_total,
            "specific_thrust": self.specific_thrust,
            "tsfc": self.tsfc,
            "tsfc_mg": self.tsfc_mg,
            "compressor_work": self.compressor_work,
            "fan_work": self.fan_work,
            "shaft_work": self.shaft_work,
            "bypass_ratio": self.bypass_ratio,
            "guard_engaged": self.guard_engaged,
        }
