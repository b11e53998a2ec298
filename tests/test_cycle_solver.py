"""Tests for the turbojet and turbofan cycle solver."""

import logging
import math

import numpy as np
import pytest

from jetcycle.core.config import ParameterBuilder, ParametersNotReadyError, reference_parameters
from jetcycle.cycle.performance import reduce_turbofan, reduce_turbojet
from jetcycle.cycle.results import CycleResults, EngineType
from jetcycle.cycle.solver import analyze, analyze_turbofan, analyze_turbojet
from jetcycle.cycle.sweep import linear_sweep


@pytest.fixture
def params():
    return reference_parameters()


class TestTurbojet:
    """Test the afterburning turbojet pipeline."""

    def test_reference_design_point(self, params):
        r = analyze_turbojet(params)

        assert r.engine_type == EngineType.TURBOJET
        assert r.inlet_velocity == pytest.approx(250.81, rel=1e-3)
        assert r.station("3").temperature == pytest.approx(700.66, rel=1e-3)
        assert r.fuel_air_combustor == pytest.approx(0.030636, rel=2e-3)
        assert r.station("5").temperature == pytest.approx(1315.5, rel=1e-3)
        assert r.fuel_air_afterburner == pytest.approx(0.019888, rel=5e-3)
        assert r.exit_velocity == pytest.approx(1470.4, rel=5e-3)
        assert r.specific_thrust == pytest.approx(1294.8, rel=5e-3)
        assert r.tsfc == pytest.approx(3.949e-5, rel=1e-2)

    def test_station_order(self, params):
        r = analyze_turbojet(params)
        assert r.station_labels == ["0", "2", "3", "4", "5", "7", "9"]

    def test_temperature_limits_fixed(self, params):
        r = analyze_turbojet(params)
        assert r.station("4").temperature == params.T_t4
        assert r.station("7").temperature == params.T_t7
        assert r.station("9").temperature == params.T_t7

    def test_turbine_drives_compressor(self, params):
        r = analyze_turbojet(params)
        T4 = r.station("4").temperature
        T5 = r.station("5").temperature
        delivered = params.cp_gas * (T4 - T5) * (1.0 + r.fuel_air_combustor)
        assert delivered == pytest.approx(r.compressor_work, rel=1e-12)
        assert r.shaft_work == r.compressor_work

    def test_total_fuel_air_ratio(self, params):
        r = analyze_turbojet(params)
        expected = r.fuel_air_combustor + (1.0 + r.fuel_air_combustor) * r.fuel_air_afterburner
        assert r.fuel_air_total == pytest.approx(expected)

    def test_static_run(self, params):
        r = analyze_turbojet(params.replace(mach0=0.0))
        assert r.inlet_velocity == 0.0
        assert r.station("2").temperature == params.ambient_temperature

    def test_unity_compressor(self, params):
        r = analyze_turbojet(params.replace(pi_compressor_turbojet=1.0))
        assert r.compressor_work == 0.0
        assert r.station("3").temperature == r.station("2").temperature


class TestTurbofan:
    """Test the mixed-exhaust afterburning turbofan pipeline."""

    def test_reference_design_point(self, params):
        r = analyze_turbofan(params)

        assert r.engine_type == EngineType.TURBOFAN
        assert r.station("13").temperature == pytest.approx(364.03, rel=1e-3)
        assert r.station("3").temperature == pytest.approx(740.47, rel=1e-3)
        assert r.fuel_air_combustor == pytest.approx(0.029654, rel=2e-3)
        assert r.station("5").temperature == pytest.approx(1182.7, rel=1e-3)
        assert r.station("6").temperature == pytest.approx(757.0, rel=1e-3)
        assert r.fuel_air_afterburner == pytest.approx(0.036116, rel=5e-3)
        assert r.exit_velocity == pytest.approx(1224.7, rel=5e-3)
        assert r.specific_thrust == pytest.approx(1036.9, rel=5e-3)
        assert r.tsfc == pytest.approx(4.9645e-5, rel=1e-2)

    def test_station_order(self, params):
        r = analyze_turbofan(params)
        assert r.station_labels == ["0", "2", "13", "2.5", "3", "4", "5", "6", "7", "9"]

    def test_core_inlet_equals_fan_exit(self, params):
        r = analyze_turbofan(params)
        assert r.station("2.5").temperature == r.station("13").temperature
        assert r.station("2.5").pressure == r.station("13").pressure
        assert r.station("3").pressure == pytest.approx(
            r.station("2.5").pressure * params.pi_compressor_turbofan
        )

    def test_shaft_work_balance(self, params):
        r = analyze_turbofan(params)
        expected = (1.0 + params.bypass_ratio) * r.fan_work + r.compressor_work
        assert r.shaft_work == pytest.approx(expected)
        T4 = r.station("4").temperature
        T5 = r.station("5").temperature
        delivered = params.cp_gas * (T4 - T5) * (1.0 + r.fuel_air_combustor)
        assert delivered == pytest.approx(r.shaft_work, rel=1e-12)

    def test_mixer_pressure_from_bypass(self, params):
        r = analyze_turbofan(params)
        assert r.station("6").pressure == pytest.approx(r.station("13").pressure * params.pi_mixer)

    def test_zero_bypass_no_mixing(self, params):
        r = analyze_turbofan(params.replace(bypass_ratio=0.0))
        assert r.station("6").temperature == pytest.approx(r.station("5").temperature, rel=1e-12)

    def test_overall_fuel_air_ratio(self, params):
        r = analyze_turbofan(params)
        bpr = params.bypass_ratio
        mixed = bpr + 1.0 + r.fuel_air_combustor
        fuel = r.fuel_air_combustor + mixed * r.fuel_air_afterburner
        assert r.fuel_air_total == pytest.approx(fuel / (1.0 + bpr))


class TestConcreteScenario:
    """Both engines at the reference design point."""

    def test_both_positive_and_finite(self, params):
        for engine in EngineType:
            r = analyze(params, engine)
            assert math.isfinite(r.specific_thrust) and r.specific_thrust > 0
            assert math.isfinite(r.tsfc) and r.tsfc > 0

    def test_afterburning_ordering(self, params):
        """Reheating the colder, heavier mixed stream costs the turbofan more fuel."""
        jet = analyze(params, EngineType.TURBOJET)
        fan = analyze(params, EngineType.TURBOFAN)
        assert fan.specific_thrust < jet.specific_thrust
        assert fan.fuel_air_afterburner > jet.fuel_air_afterburner
        assert fan.tsfc > jet.tsfc


class TestDispatch:
    """Test engine dispatch and input checks."""

    def test_string_engine_type(self, params):
        assert analyze(params, "turbojet") == analyze(params, EngineType.TURBOJET)
        assert analyze(params, "TurboFan").engine_type == EngineType.TURBOFAN

    def test_unknown_engine(self, params):
        with pytest.raises(ValueError, match="Unknown engine type"):
            analyze(params, "ramjet")

    def test_incomplete_builder_rejected(self):
        builder = ParameterBuilder({"gamma_air": 1.4})
        with pytest.raises(ParametersNotReadyError) as exc_info:
            analyze(builder, EngineType.TURBOJET)
        assert "gamma_gas" in exc_info.value.missing

    def test_complete_builder_accepted(self, params):
        builder = ParameterBuilder.from_parameters(params)
        assert analyze(builder, "turbojet") == analyze(params, "turbojet")

    def test_non_parameter_object_rejected(self):
        with pytest.raises(ParametersNotReadyError):
            analyze({"gamma_air": 1.4}, EngineType.TURBOFAN)


class TestDeterminism:
    """Runs are pure functions of the parameters."""

    def test_repeat_runs_identical(self, params):
        for engine in EngineType:
            assert analyze(params, engine) == analyze(params, engine)

    def test_debug_does_not_change_results(self, params):
        for engine in EngineType:
            plain = analyze(params, engine)
            traced = analyze(params, engine, debug=True)
            assert plain.to_dict() == traced.to_dict()
            assert plain.trace == ()
            assert len(traced.trace) == len(traced.stations)

    def test_results_frozen(self, params):
        r = analyze(params, EngineType.TURBOJET)
        with pytest.raises(AttributeError):
            r.tsfc = 0.0


class TestDebugTrace:
    """Test the diagnostic hook."""

    def test_turbojet_stages(self, params):
        r = analyze(params, EngineType.TURBOJET, debug=True)
        assert [t.stage for t in r.trace] == [
            "Freestream", "Inlet", "Compressor", "Combustor", "Turbine", "Afterburner", "Nozzle",
        ]

    def test_turbofan_stages(self, params):
        r = analyze(params, EngineType.TURBOFAN, debug=True)
        stages = [t.stage for t in r.trace]
        assert stages[2:5] == ["Fan", "Core Inlet", "Compressor"]
        assert "Mixer" in stages

    def test_trace_carries_fuel_air_ratio(self, params):
        r = analyze(params, EngineType.TURBOJET, debug=True)
        combustor = next(t for t in r.trace if t.stage == "Combustor")
        assert combustor.fuel_air_ratio == r.fuel_air_combustor
        assert combustor.pressure == r.station("4").pressure

    def test_stage_values_logged(self, params, caplog):
        with caplog.at_level(logging.DEBUG, logger="jetcycle.cycle.solver"):
            analyze(params, EngineType.TURBOJET)
        assert "[Combustor]" in caplog.text
        assert "[Nozzle]" in caplog.text


class TestGuards:
    """Degenerate inputs degrade to finite numbers."""

    def test_weak_fuel_finite(self, params):
        weak = params.replace(fuel_heating_value=1.0e6)
        for engine in EngineType:
            r = analyze(weak, engine)
            assert math.isfinite(r.fuel_air_combustor)
            assert math.isfinite(r.fuel_air_afterburner)
            assert math.isfinite(r.specific_thrust)
            assert math.isfinite(r.tsfc)
            assert r.guard_engaged is True

    def test_extreme_ram_pressure_finite(self, params):
        """γ near one at very high Mach overflows the ram pressure ratio."""
        extreme = params.replace(gamma_air=1.001, mach0=100.0)
        for engine in EngineType:
            r = analyze(extreme, engine)
            assert r.station("0").pressure == math.inf
            assert math.isfinite(r.exit_velocity)
            assert math.isfinite(r.specific_thrust)
            assert math.isfinite(r.tsfc)

    def test_guard_logs_warning(self, params, caplog):
        weak = params.replace(fuel_heating_value=1.0e6)
        with caplog.at_level(logging.WARNING, logger="jetcycle.utils.numerics"):
            analyze(weak, EngineType.TURBOJET)
        assert "non-positive" in caplog.text

    def test_reference_not_guarded(self, params):
        assert analyze(params, EngineType.TURBOJET).guard_engaged is False

    def test_zero_thrust_tsfc_finite(self):
        perf = reduce_turbojet(300.0, 0.0, 0.03, 0.02)
        assert perf.specific_thrust < 0
        assert math.isfinite(perf.tsfc)

    def test_turbofan_thrust_guard(self):
        perf = reduce_turbofan(300.0, 0.0, 0.03, 0.02, 1.0)
        assert perf.specific_thrust < 0
        assert math.isfinite(perf.tsfc)


class TestMonotonicity:
    """Trends with turbine inlet temperature."""

    def test_fuel_air_increases_with_tt4(self, params):
        for engine in EngineType:
            sweep = linear_sweep(params, engine, "T_t4", 1400.0, 1900.0, 6)
            f_comb = np.array([r.fuel_air_combustor for r in sweep.results])
            assert np.all(np.diff(f_comb) > 0)

    def test_turbojet_thrust_increases_with_tt4(self, params):
        sweep = linear_sweep(params, EngineType.TURBOJET, "T_t4", 1400.0, 1900.0, 6)
        assert np.all(np.diff(sweep.specific_thrust) > 0)


class TestResultsRecord:
    """Test CycleResults helpers."""

    def test_tsfc_mg(self, params):
        r = analyze(params, EngineType.TURBOJET)
        assert r.tsfc_mg == pytest.approx(r.tsfc * 1e6)

    def test_unknown_station(self, params):
        r = analyze(params, EngineType.TURBOJET)
        with pytest.raises(KeyError):
            r.station("13")

    def test_to_dict(self, params):
        d = analyze(params, EngineType.TURBOFAN).to_dict()
        assert d["engine_type"] == "turbofan"
        assert len(d["stations"]) == 10
        assert d["bypass_ratio"] == 1.0

    def test_is_cycle_results(self, params):
        assert isinstance(analyze(params, "turbofan"), CycleResults)
