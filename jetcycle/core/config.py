"""Engine parameter sets and project I/O for JetCycle.

Handles construction of validated, immutable parameter sets and
saving/loading them (and analysis results) as JSON.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping

import numpy as np

from jetcycle.utils.constants import CP_AIR, CP_GAS, GAMMA_AIR, GAMMA_GAS, Q_HV_JET_A, R_AIR
from jetcycle.utils.units import parse_quantity
from jetcycle.utils.validation import ValidationResult, validate_parameters

logger = logging.getLogger(__name__)


class ParametersNotReadyError(ValueError):
    """Raised when analysis is requested against an incomplete parameter set."""

    def __init__(self, missing: list[str], errors: list[str] | None = None):
        self.missing = list(missing)
        self.errors = list(errors or [])
        parts = []
        if self.missing:
            parts.append("missing: " + ", ".join(self.missing))
        if self.errors:
            parts.append("invalid: " + "; ".join(self.errors))
        super().__init__("Parameters are not ready (" + " | ".join(parts) + ")")


# --- Parameter set ---


@dataclass(frozen=True)
class EngineParameters:
    """Gas properties, flight condition, and component data for one analysis.

    Shared by the turbojet and turbofan models; each model reads the
    engine-specific fields it needs. All properties in SI units.
    """

    # Gas properties
    gamma_air: float
    gamma_gas: float
    cp_air: float  # J/(kg·K)
    cp_gas: float  # J/(kg·K)
    R_air: float  # J/(kg·K)
    fuel_heating_value: float  # J/kg

    # Flight condition
    mach0: float
    ambient_temperature: float  # K
    ambient_pressure: float  # Pa

    # Component efficiencies
    eta_inlet: float
    eta_compressor: float
    eta_fan: float
    eta_combustor: float
    eta_turbine: float
    eta_afterburner: float
    eta_nozzle: float

    # Pressure loss ratios
    pi_combustor: float
    pi_afterburner: float
    pi_mixer: float

    # Temperature limits
    T_t4: float  # K, turbine inlet
    T_t7: float  # K, afterburner exit

    # Engine-specific
    pi_compressor_turbojet: float
    bypass_ratio: float
    pi_fan: float
    pi_compressor_turbofan: float

    def replace(self, **changes: float) -> EngineParameters:
        """Return a validated copy with some fields changed."""
        builder = ParameterBuilder.from_parameters(self)
        builder.update(changes)
        return builder.build()

    def validate(self) -> ValidationResult:
        """Run range checks on this parameter set."""
        return validate_parameters(asdict(self))

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


PARAMETER_NAMES: tuple[str, ...] = tuple(f.name for f in fields(EngineParameters))

# SI unit of each field, used to convert unit strings in parameter files.
PARAMETER_UNITS: dict[str, str] = {
    "cp_air": "J/(kg*K)",
    "cp_gas": "J/(kg*K)",
    "R_air": "J/(kg*K)",
    "fuel_heating_value": "J/kg",
    "ambient_temperature": "K",
    "ambient_pressure": "Pa",
    "T_t4": "K",
    "T_t7": "K",
}


class ParameterBuilder:
    """Accumulates parameter values and yields an EngineParameters once complete.

    Usage::

        builder = ParameterBuilder()
        builder.set("gamma_air", 1.4)
        builder.update({"ambient_pressure": "22.632 kPa", ...})
        params = builder.build()  # raises ParametersNotReadyError if incomplete
    """

    def __init__(self, values: Mapping[str, Any] | None = None):
        self._values: dict[str, float] = {}
        if values:
            self.update(values)

    @classmethod
    def from_parameters(cls, params: EngineParameters) -> ParameterBuilder:
        return cls(asdict(params))

    def set(self, name: str, value: float | int | str) -> ParameterBuilder:
        """Set one field. Strings may carry a unit (``"216.65 K"``).

        Raises:
            KeyError: If *name* is not a parameter field.
            ValueError: If a unit string cannot be converted.
        """
        if name not in PARAMETER_NAMES:
            raise KeyError(f"Unknown parameter '{name}'. Available: {list(PARAMETER_NAMES)}")
        self._values[name] = parse_quantity(value, PARAMETER_UNITS.get(name, ""))
        return self

    def update(self, values: Mapping[str, Any]) -> ParameterBuilder:
        for name, value in values.items():
            self.set(name, value)
        return self

    @property
    def values(self) -> dict[str, float]:
        """Copy of the values set so far, in SI units."""
        return dict(self._values)

    @property
    def missing(self) -> list[str]:
        return [name for name in PARAMETER_NAMES if name not in self._values]

    @property
    def is_ready(self) -> bool:
        return not self.missing and self.validate().is_valid

    def validate(self) -> ValidationResult:
        return validate_parameters(self._values)

    def build(self) -> EngineParameters:
        """Produce the immutable parameter set.

        Raises:
            ParametersNotReadyError: If a field is missing or outside its
                declared range.
        """
        result = self.validate()
        missing = self.missing
        if missing or not result.is_valid:
            raise ParametersNotReadyError(missing, [m.message for m in result.errors])
        for msg in result.warnings:
            logger.warning("%s", msg.message)
        return EngineParameters(**self._values)


def reference_parameters() -> EngineParameters:
    """Return the reference design point: M0.85 cruise at 11 km."""
    return EngineParameters(
        gamma_air=GAMMA_AIR,
        gamma_gas=GAMMA_GAS,
        cp_air=CP_AIR,
        cp_gas=CP_GAS,
        R_air=R_AIR,
        fuel_heating_value=Q_HV_JET_A,
        mach0=0.85,
        ambient_temperature=216.7,
        ambient_pressure=22632.0,
        eta_inlet=0.98,
        eta_compressor=0.90,
        eta_fan=0.92,
        eta_combustor=0.99,
        eta_turbine=0.92,
        eta_afterburner=0.97,
        eta_nozzle=0.98,
        pi_combustor=0.96,
        pi_afterburner=0.94,
        pi_mixer=0.98,
        T_t4=1700.0,
        T_t7=2000.0,
        pi_compressor_turbojet=30.0,
        bypass_ratio=1.0,
        pi_fan=3.5,
        pi_compressor_turbofan=10.0,
    )


# --- JSON serialization ---


class _NumpyEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy types."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if isinstance(obj, (np.integer,)):
            return int(obj)
        if isinstance(obj, (np.floating,)):
            return float(obj)
        return super().default(obj)


def save_parameters_json(params: EngineParameters, path: str | Path) -> None:
    """Save a parameter set to a JSON file (SI values)."""
    path = Path(path)
    with open(path, "w") as f:
        json.dump({"parameters": params.to_dict()}, f, indent=2, cls=_NumpyEncoder)
    logger.info("Saved parameters to %s", path)


def load_parameter_builder(path: str | Path) -> ParameterBuilder:
    """Read a parameter file into a builder without finalising it.

    Accepts either a flat mapping or one nested under ``"parameters"``.
    Values may be numbers (SI) or strings with units.
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)
    if isinstance(data, dict) and isinstance(data.get("parameters"), dict):
        data = data["parameters"]
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object of parameters")
    return ParameterBuilder(data)


def load_parameters_json(path: str | Path) -> EngineParameters:
    """Load and validate a parameter set from a JSON file.

    Raises:
        ParametersNotReadyError: If the file does not define every field.
    """
    params = load_parameter_builder(path).build()
    logger.info("Loaded parameters from %s", path)
    return params


def save_results_json(payload: dict[str, Any], path: str | Path) -> None:
    """Save analysis results (already converted to plain dicts) to JSON."""
    path = Path(path)
    with open(path, "w") as f:
        json.dump(payload, f, indent=2, cls=_NumpyEncoder)
    logger.info("Saved results to %s", path)
