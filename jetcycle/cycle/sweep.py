"""One-parameter sweeps over the cycle analysis.

Evaluates the forward pass at each value of a single parameter while
holding the rest fixed, and collects the performance figures as numpy
arrays for tabulation or plotting.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from jetcycle.core.config import PARAMETER_NAMES, EngineParameters
from jetcycle.cycle.results import CycleResults, EngineType
from jetcycle.cycle.solver import analyze

logger = logging.getLogger(__name__)


@dataclass
class SweepResult:
    """Performance of one engine across a swept parameter."""

    engine_type: EngineType
    parameter: str
    values: np.ndarray = field(default_factory=lambda: np.array([]))
    results: list[CycleResults] = field(default_factory=list)

    @property
    def specific_thrust(self) -> np.ndarray:
        return np.array([r.specific_thrust for r in self.results])

    @property
    def tsfc(self) -> np.ndarray:
        return np.array([r.tsfc for r in self.results])

    @property
    def fuel_air_total(self) -> np.ndarray:
        return np.array([r.fuel_air_total for r in self.results])

    @property
    def exit_velocity(self) -> np.ndarray:
        return np.array([r.exit_velocity for r in self.results])

    def to_dict(self) -> dict:
        return {
            "engine_type": self.engine_type.value,
            "parameter": self.parameter,
            "values": self.values,
            "specific_thrust": self.specific_thrust,
            "tsfc": self.tsfc,
            "fuel_air_total": self.fuel_air_total,
            "exit_velocity": self.exit_velocity,
        }


def sweep_parameter(
    params: EngineParameters,
    engine_type: EngineType | str,
    parameter: str,
    values: np.ndarray | list[float],
) -> SweepResult:
    """Run the engine at each value of *parameter*.

    Args:
        params: Baseline parameter set.
        engine_type: Engine to analyse.
        parameter: Name of the EngineParameters field to vary.
        values: Values to assign, in SI units.

    Returns:
        SweepResult holding one CycleResults per value.

    Raises:
        KeyError: If *parameter* is not a parameter field.
        ParametersNotReadyError: If a swept value is outside its declared range.
    """
    if parameter not in PARAMETER_NAMES:
        raise KeyError(f"Unknown parameter '{parameter}'. Available: {list(PARAMETER_NAMES)}")
    if isinstance(engine_type, str):
        engine_type = EngineType(engine_type.lower())

    grid = np.asarray(values, dtype=float)
    sweep = SweepResult(engine_type=engine_type, parameter=parameter, values=grid)
    for value in grid:
        point = params.replace(**{parameter: float(value)})
        sweep.results.append(analyze(point, engine_type))

    logger.info("Swept %s over %d points for %s", parameter, len(grid), engine_type.value)
    return sweep


def linear_sweep(
    params: EngineParameters,
    engine_type: EngineType | str,
    parameter: str,
    start: float,
    stop: float,
    n_points: int = 11,
) -> SweepResult:
    """Sweep *parameter* over ``np.linspace(start, stop, n_points)``."""
    if n_points < 1:
        raise ValueError(f"n_points must be >= 1, got {n_points}")
    return sweep_parameter(params, engine_type, parameter, np.linspace(start, stop, n_points))
