"""Tests for utility modules."""

import logging
import math

import pytest

from jetcycle.core.config import reference_parameters
from jetcycle.utils.constants import (
    CP_AIR,
    CP_GAS,
    DENOMINATOR_FLOOR,
    GAMMA_AIR,
    GAMMA_GAS,
    Q_HV_JET_A,
    R_AIR,
    THRUST_FLOOR,
)
from jetcycle.utils.numerics import guard_denominator, guard_thrust, safe_pow, safe_sqrt
from jetcycle.utils.units import parse_quantity
from jetcycle.utils.validation import (
    Severity,
    ValidationResult,
    validate_parameters,
    validate_positive,
    validate_range,
)


class TestConstants:
    def test_reference_gas_properties(self):
        p = reference_parameters()
        assert (p.gamma_air, p.cp_air, p.R_air) == (GAMMA_AIR, CP_AIR, R_AIR)
        assert (p.gamma_gas, p.cp_gas) == (GAMMA_GAS, CP_GAS)
        assert p.fuel_heating_value == Q_HV_JET_A

    def test_floors_positive(self):
        assert DENOMINATOR_FLOOR > 0
        assert THRUST_FLOOR > 0


class TestNumerics:
    def test_safe_pow_positive(self):
        assert safe_pow(4.0, 0.5) == pytest.approx(2.0)

    def test_safe_pow_non_positive(self):
        assert safe_pow(0.0, 0.5) == 0.0
        assert safe_pow(-2.0, 1.0 / 3.0) == 0.0

    def test_safe_pow_overflow(self):
        assert safe_pow(6.0, 1001.0) == math.inf

    def test_safe_sqrt(self):
        assert safe_sqrt(9.0) == 3.0
        assert safe_sqrt(-1.0) == 0.0

    def test_guard_denominator_passthrough(self):
        assert guard_denominator(2.5) == 2.5

    def test_guard_denominator_clamps(self, caplog):
        with caplog.at_level(logging.WARNING, logger="jetcycle.utils.numerics"):
            assert guard_denominator(-3.0, "test denom") == DENOMINATOR_FLOOR
            assert guard_denominator(0.0) == DENOMINATOR_FLOOR
        assert "test denom" in caplog.text

    def test_guard_thrust(self):
        assert guard_thrust(-5.0) == THRUST_FLOOR
        assert guard_thrust(1000.0) == 1000.0
        assert math.isfinite(0.05 / guard_thrust(0.0))


class TestUnits:
    def test_parse_plain_number(self):
        assert parse_quantity(1.4, "") == 1.4
        assert parse_quantity(216, "K") == 216.0
        assert parse_quantity("1.4", "") == 1.4

    def test_parse_quantity_strings(self):
        assert parse_quantity("22.632 kPa", "Pa") == pytest.approx(22632.0)
        assert parse_quantity("-56.45 degC", "K") == pytest.approx(216.7)
        assert parse_quantity("43.1 MJ/kg", "J/kg") == pytest.approx(43.1e6)
        assert parse_quantity("1.005 kJ/(kg*K)", "J/(kg*K)") == pytest.approx(1005.0)

    def test_parse_wrong_dimension(self):
        with pytest.raises(ValueError):
            parse_quantity("10 kg", "Pa")

    def test_parse_garbage(self):
        with pytest.raises(ValueError):
            parse_quantity("lots of thrust", "Pa")

    def test_parse_bool_rejected(self):
        with pytest.raises(ValueError):
            parse_quantity(True, "")


class TestValidation:
    def test_positive_ok(self):
        r = ValidationResult()
        validate_positive("x", 1.0, r)
        assert r.is_valid

    def test_positive_fail(self):
        r = ValidationResult()
        validate_positive("x", -1.0, r)
        assert not r.is_valid
        assert len(r.errors) == 1

    def test_range_warning(self):
        r = ValidationResult()
        validate_range("x", 15.0, 0.0, 10.0, r, Severity.WARNING)
        assert r.is_valid
        assert r.has_warnings

    def test_merge(self):
        r1 = ValidationResult()
        r1.error("a", "fail")
        r2 = ValidationResult()
        r2.warning("b", "warn")
        r1.merge(r2)
        assert len(r1.messages) == 2

    def test_reference_parameters_clean(self):
        r = validate_parameters(reference_parameters().to_dict())
        assert r.is_valid
        assert r.messages == []

    def test_gamma_must_exceed_one(self):
        r = validate_parameters({"gamma_air": 1.0})
        assert not r.is_valid
        assert r.errors[0].parameter == "gamma_air"

    def test_declared_range_errors(self):
        r = validate_parameters(
            {"cp_gas": 0.0, "mach0": -0.1, "bypass_ratio": -1.0, "ambient_pressure": -5.0}
        )
        assert {m.parameter for m in r.errors} == {"cp_gas", "mach0", "bypass_ratio", "ambient_pressure"}

    def test_non_finite_error(self):
        r = validate_parameters({"T_t4": float("nan")})
        assert not r.is_valid

    def test_efficiency_warning(self):
        r = validate_parameters({"eta_turbine": 1.2, "eta_fan": 0.0})
        assert r.is_valid
        assert {m.parameter for m in r.warnings} == {"eta_turbine", "eta_fan"}

    def test_loss_ratio_warning(self):
        r = validate_parameters({"pi_mixer": 1.1})
        assert r.is_valid
        assert r.warnings[0].parameter == "pi_mixer"

    def test_weak_fuel_warning(self):
        values = reference_parameters().to_dict()
        values["fuel_heating_value"] = 1.0e6
        r = validate_parameters(values)
        assert r.is_valid
        assert {m.parameter for m in r.warnings} == {"T_t4", "T_t7"}

    def test_afterburner_below_turbine_limit(self):
        r = validate_parameters({"T_t4": 1700.0, "T_t7": 1500.0})
        assert r.warnings[0].parameter == "T_t7"
