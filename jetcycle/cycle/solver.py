"""Thermodynamic cycle solver for JetCycle.

Chains the stage models into complete engine cycles and reduces the
station states to specific thrust and TSFC.

Supported cycle architectures:
- Turbojet: inlet → compressor → combustor → turbine → afterburner → nozzle
- Turbofan: inlet → fan → compressor → combustor → turbine → mixer
            → afterburner → nozzle (single mixed exhaust)

Each run is a single forward pass with no iteration; the turbine
temperature drop comes straight from the shaft power balance.
"""

from __future__ import annotations

import logging
from typing import Any

from jetcycle.core.config import EngineParameters, ParameterBuilder, ParametersNotReadyError
from jetcycle.cycle.components.base import StageTrace, StationState
from jetcycle.cycle.components.combustor import burn
from jetcycle.cycle.components.compressor import compress
from jetcycle.cycle.components.inlet import analyze_inlet
from jetcycle.cycle.components.mixer import mix
from jetcycle.cycle.components.nozzle import expand_nozzle
from jetcycle.cycle.components.turbine import expand
from jetcycle.cycle.performance import reduce_turbofan, reduce_turbojet
from jetcycle.cycle.results import CycleResults, EngineType

logger = logging.getLogger(__name__)


class _StationLog:
    """Per-run accumulator of station states and debug traces."""

    def __init__(self, debug: bool):
        self.debug = debug
        self.stations: list[StationState] = []
        self.trace: list[StageTrace] = []

    def record(
        self,
        stage: str,
        state: StationState,
        fuel_air_ratio: float | None = None,
        specific_work: float | None = None,
    ) -> StationState:
        self.stations.append(state)
        entry = StageTrace(
            stage=stage,
            station=state.station,
            temperature=state.temperature,
            pressure=state.pressure,
            fuel_air_ratio=fuel_air_ratio,
            specific_work=specific_work,
        )
        if self.debug:
            self.trace.append(entry)
        logger.debug("%s", entry.describe())
        return state


def analyze(
    params: EngineParameters | ParameterBuilder,
    engine_type: EngineType | str,
    debug: bool = False,
) -> CycleResults:
    """Run the cycle analysis for one engine.

    Dispatches to the appropriate pipeline based on engine type.

    Args:
        params: Complete parameter set. A ParameterBuilder is accepted and
                built first, so an incomplete one fails here.
        engine_type: EngineType or its string value.
        debug: Record per-stage station values on the result.

    Returns:
        CycleResults with every station and the performance figures.

    Raises:
        ParametersNotReadyError: If the parameters are incomplete.
        ValueError: If the engine type is unknown.
    """
    params = _require_parameters(params)
    if isinstance(engine_type, str):
        try:
            engine_type = EngineType(engine_type.lower())
        except ValueError:
            raise ValueError(f"Unknown engine type: {engine_type}") from None

    if engine_type == EngineType.TURBOJET:
        return analyze_turbojet(params, debug=debug)
    elif engine_type == EngineType.TURBOFAN:
        return analyze_turbofan(params, debug=debug)
    else:
        raise ValueError(f"Unknown engine type: {engine_type}")


def _require_parameters(params: Any) -> EngineParameters:
    if isinstance(params, EngineParameters):
        return params
    if isinstance(params, ParameterBuilder):
        return params.build()
    raise ParametersNotReadyError(
        ["<all>"], [f"expected EngineParameters, got {type(params).__name__}"]
    )


# --- Turbojet ---


def analyze_turbojet(params: EngineParameters, debug: bool = False) -> CycleResults:
    """Analyze a single-spool afterburning turbojet.

    The turbine drives the compressor only.
    """
    p = params
    log = _StationLog(debug)

    inlet = analyze_inlet(
        p.mach0, p.ambient_temperature, p.ambient_pressure, p.gamma_air, p.R_air, p.eta_inlet
    )
    log.record("Freestream", inlet.freestream)
    log.record("Inlet", inlet.outlet)

    comp = compress(
        inlet.outlet, p.pi_compressor_turbojet, p.gamma_air, p.cp_air, p.eta_compressor, station="3"
    )
    log.record("Compressor", comp.outlet, specific_work=comp.specific_work)

    comb = burn(
        comp.outlet, p.T_t4, p.cp_air, p.cp_gas, p.eta_combustor,
        p.fuel_heating_value, p.pi_combustor, station="4",
    )
    log.record("Combustor", comb.outlet, fuel_air_ratio=comb.fuel_air_ratio)

    turb = expand(
        comb.outlet, comp.specific_work, comb.fuel_air_ratio, p.gamma_gas, p.cp_gas, p.eta_turbine
    )
    log.record("Turbine", turb.outlet, specific_work=turb.shaft_work)

    ab = burn(
        turb.outlet, p.T_t7, p.cp_gas, p.cp_gas, p.eta_afterburner,
        p.fuel_heating_value, p.pi_afterburner, station="7",
    )
    log.record("Afterburner", ab.outlet, fuel_air_ratio=ab.fuel_air_ratio)

    nozzle = expand_nozzle(ab.outlet, p.ambient_pressure, p.gamma_gas, p.cp_gas, p.eta_nozzle)
    log.record("Nozzle", nozzle.outlet)

    perf = reduce_turbojet(
        inlet.flight_velocity, nozzle.exit_velocity, comb.fuel_air_ratio, ab.fuel_air_ratio
    )
    logger.debug(
        "[Turbojet] F_s=%.2f N·s/kg TSFC=%.4g kg/(N·s)", perf.specific_thrust, perf.tsfc
    )

    return CycleResults(
        engine_type=EngineType.TURBOJET,
        stations=tuple(log.stations),
        inlet_velocity=inlet.flight_velocity,
        exit_velocity=nozzle.exit_velocity,
        fuel_air_combustor=comb.fuel_air_ratio,
        fuel_air_afterburner=ab.fuel_air_ratio,
        fuel_air_total=perf.fuel_air_ratio,
        specific_thrust=perf.specific_thrust,
        tsfc=perf.tsfc,
        compressor_work=comp.specific_work,
        shaft_work=turb.shaft_work,
        guard_engaged=comb.denominator_clamped or ab.denominator_clamped,
        trace=tuple(log.trace),
    )


# --- Turbofan ---


def analyze_turbofan(params: EngineParameters, debug: bool = False) -> CycleResults:
    """Analyze a mixed-exhaust afterburning turbofan.

    The fan compresses the whole inlet flow (1 + BPR per kg of core air);
    the core compressor is fed from the fan exit. The turbine drives both,
    its exhaust mixes with the bypass stream, and the mixed stream passes
    through the afterburner and a single nozzle.
    """
    p = params
    log = _StationLog(debug)

    inlet = analyze_inlet(
        p.mach0, p.ambient_temperature, p.ambient_pressure, p.gamma_air, p.R_air, p.eta_inlet
    )
    log.record("Freestream", inlet.freestream)
    log.record("Inlet", inlet.outlet)

    fan = compress(inlet.outlet, p.pi_fan, p.gamma_air, p.cp_air, p.eta_fan, station="13")
    log.record("Fan", fan.outlet, specific_work=fan.specific_work)

    # core stream leaves the fan exit unchanged
    core_inlet = log.record(
        "Core Inlet", StationState("2.5", fan.outlet.temperature, fan.outlet.pressure)
    )

    comp = compress(
        core_inlet, p.pi_compressor_turbofan, p.gamma_air, p.cp_air, p.eta_compressor, station="3"
    )
    log.record("Compressor", comp.outlet, specific_work=comp.specific_work)

    comb = burn(
        comp.outlet, p.T_t4, p.cp_air, p.cp_gas, p.eta_combustor,
        p.fuel_heating_value, p.pi_combustor, station="4",
    )
    log.record("Combustor", comb.outlet, fuel_air_ratio=comb.fuel_air_ratio)

    shaft_work = (1.0 + p.bypass_ratio) * fan.specific_work + comp.specific_work
    turb = expand(comb.outlet, shaft_work, comb.fuel_air_ratio, p.gamma_gas, p.cp_gas, p.eta_turbine)
    log.record("Turbine", turb.outlet, specific_work=turb.shaft_work)

    mixer = mix(
        fan.outlet, turb.outlet, p.bypass_ratio, comb.fuel_air_ratio,
        p.cp_air, p.cp_gas, p.pi_mixer,
    )
    log.record("Mixer", mixer.outlet)

    ab = burn(
        mixer.outlet, p.T_t7, p.cp_gas, p.cp_gas, p.eta_afterburner,
        p.fuel_heating_value, p.pi_afterburner, station="7",
    )
    log.record("Afterburner", ab.outlet, fuel_air_ratio=ab.fuel_air_ratio)

    nozzle = expand_nozzle(ab.outlet, p.ambient_pressure, p.gamma_gas, p.cp_gas, p.eta_nozzle)
    log.record("Nozzle", nozzle.outlet)

    perf = reduce_turbofan(
        inlet.flight_velocity, nozzle.exit_velocity, comb.fuel_air_ratio,
        ab.fuel_air_ratio, p.bypass_ratio,
    )
    logger.debug(
        "[Turbofan] F_s=%.2f N·s/kg TSFC=%.4g kg/(N·s)", perf.specific_thrust, perf.tsfc
    )

    return CycleResults(
        engine_type=EngineType.TURBOFAN,
        stations=tuple(log.stations),
        inlet_velocity=inlet.flight_velocity,
        exit_velocity=nozzle.exit_velocity,
        fuel_air_combustor=comb.fuel_air_ratio,
        fuel_air_afterburner=ab.fuel_air_ratio,
        fuel_air_total=perf.fuel_air_ratio,
        specific_thrust=perf.specific_thrust,
        tsfc=perf.tsfc,
        compressor_work=comp.specific_work,
        fan_work=fan.specific_work,
        shaft_work=shaft_work,
        bypass_ratio=p.bypass_ratio,
        guard_engaged=comb.denominator_clamped or ab.denominator_clamped,
        trace=tuple(log.trace),
    )
