"""Input validation for JetCycle parameter sets."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class Severity(Enum):
    """Severity level for validation messages."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding."""

    severity: Severity
    parameter: str
    message: str
    value: Any = None
    limit: Any = None


@dataclass
class ValidationResult:
    """Aggregated validation result."""

    messages: list[ValidationMessage] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not any(m.severity == Severity.ERROR for m in self.messages)

    @property
    def has_warnings(self) -> bool:
        return any(m.severity == Severity.WARNING for m in self.messages)

    @property
    def errors(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    def add(self, severity: Severity, parameter: str, message: str, **kwargs: Any) -> None:
        self.messages.append(
            ValidationMessage(severity=severity, parameter=parameter, message=message, **kwargs)
        )

    def error(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.ERROR, parameter, message, **kwargs)

    def warning(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.WARNING, parameter, message, **kwargs)

    def info(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.INFO, parameter, message, **kwargs)

    def merge(self, other: ValidationResult) -> None:
        self.messages.extend(other.messages)


# --- Common validators ---


def validate_finite(name: str, value: float, result: ValidationResult) -> bool:
    """Validate that a value is a finite number. Returns False on failure."""
    if not math.isfinite(value):
        result.error(name, f"{name} must be finite, got {value}", value=value)
        return False
    return True


def validate_positive(name: str, value: float, result: ValidationResult) -> None:
    """Validate that a value is strictly positive."""
    if value <= 0:
        result.error(name, f"{name} must be positive, got {value}", value=value, limit=0.0)


def validate_non_negative(name: str, value: float, result: ValidationResult) -> None:
    """Validate that a value is zero or positive."""
    if value < 0:
        result.error(name, f"{name} must be >= 0, got {value}", value=value, limit=0.0)


def validate_greater_than(
    name: str, value: float, low: float, result: ValidationResult
) -> None:
    """Validate that a value is strictly greater than *low*."""
    if value <= low:
        result.error(name, f"{name} must be > {low}, got {value}", value=value, limit=low)


def validate_range(
    name: str,
    value: float,
    low: float,
    high: float,
    result: ValidationResult,
    severity: Severity = Severity.ERROR,
) -> None:
    """Validate that a value falls within [low, high]."""
    if value < low or value > high:
        result.add(severity, name, f"{name} = {value} is outside [{low}, {high}]", value=value)


# --- Parameter set checks ---

_GAMMA_FIELDS = ("gamma_air", "gamma_gas")
_POSITIVE_FIELDS = (
    "cp_air",
    "cp_gas",
    "R_air",
    "fuel_heating_value",
    "ambient_temperature",
    "ambient_pressure",
    "T_t4",
    "T_t7",
)
_NON_NEGATIVE_FIELDS = ("mach0", "bypass_ratio")
_EFFICIENCY_FIELDS = (
    "eta_inlet",
    "eta_compressor",
    "eta_fan",
    "eta_combustor",
    "eta_turbine",
    "eta_afterburner",
    "eta_nozzle",
)
_LOSS_RATIO_FIELDS = ("pi_combustor", "pi_afterburner", "pi_mixer")


def validate_parameters(values: Mapping[str, float]) -> ValidationResult:
    """Run range checks on a (possibly partial) parameter mapping.

    Values outside the declared ranges are errors: they would make the
    cycle arithmetic undefined (γ = 1, T0 = 0, ...). Values that are merely
    unusual (efficiency above one, a pressure "loss" ratio above one, a fuel
    that cannot reach its temperature limit) are warnings.

    Missing keys are skipped; completeness is the builder's concern.
    """
    result = ValidationResult()
    finite = {
        name: value for name, value in values.items() if validate_finite(name, value, result)
    }

    for name in _GAMMA_FIELDS:
        if name in finite:
            validate_greater_than(name, finite[name], 1.0, result)

    for name in _POSITIVE_FIELDS:
        if name in finite:
            validate_positive(name, finite[name], result)

    for name in _NON_NEGATIVE_FIELDS:
        if name in finite:
            validate_non_negative(name, finite[name], result)

    for name in _EFFICIENCY_FIELDS:
        value = finite.get(name)
        if value is not None and (value <= 0.0 or value > 1.0):
            result.warning(name, f"{name} = {value} is outside (0, 1]", value=value)

    for name in _LOSS_RATIO_FIELDS:
        value = finite.get(name)
        if value is not None:
            validate_range(name, value, 0.0, 1.0, result, Severity.WARNING)

    _check_heat_release(finite, "eta_combustor", "T_t4", result)
    _check_heat_release(finite, "eta_afterburner", "T_t7", result)

    t4, t7 = finite.get("T_t4"), finite.get("T_t7")
    if t4 is not None and t7 is not None and t7 < t4:
        result.warning(
            "T_t7",
            f"Afterburner exit temperature {t7:.0f} K is below turbine inlet {t4:.0f} K",
            value=t7,
            limit=t4,
        )

    return result


def _check_heat_release(
    values: Mapping[str, float], eta_name: str, limit_name: str, result: ValidationResult
) -> None:
    """Warn when η·Q_HV cannot exceed cp_gas·T_limit."""
    try:
        capacity = values[eta_name] * values["fuel_heating_value"]
        sensible = values["cp_gas"] * values[limit_name]
    except KeyError:
        return
    if capacity - sensible <= 0.0:
        result.warning(
            limit_name,
            f"Heat release {capacity:.3g} J/kg cannot reach {limit_name}; "
            "fuel-air ratio will be non-physical",
            value=values[limit_name],
        )
