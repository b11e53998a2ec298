"""Reduction of station results to specific thrust and TSFC.

All mass flows are per kg/s of air through the engine core; the turbofan
figures are then referred to the total (core + bypass) inlet flow.
"""

from __future__ import annotations

from dataclasses import dataclass

from jetcycle.utils.numerics import guard_thrust


@dataclass(frozen=True)
class Performance:
    """Engine-level performance figures."""

    specific_thrust: float  # N per kg/s of inlet air
    tsfc: float  # kg/(N·s)
    fuel_air_ratio: float  # total fuel / inlet air
    inlet_mass_flow: float  # kg/s per kg/s core air
    fuel_mass_flow: float  # kg/s per kg/s core air
    exit_mass_flow: float  # kg/s per kg/s core air


def reduce_turbojet(
    flight_velocity: float,
    exit_velocity: float,
    f_combustor: float,
    f_afterburner: float,
) -> Performance:
    """Turbojet: afterburner fuel is burned into the (1 + f_comb) core gas.

        f_total = f_comb + (1 + f_comb) · f_ab
        F_s = (1 + f_total) · V9 - V0
        TSFC = f_total / F_s
    """
    f_total = f_combustor + (1.0 + f_combustor) * f_afterburner
    m_exit = 1.0 + f_total
    specific_thrust = m_exit * exit_velocity - flight_velocity

    return Performance(
        specific_thrust=specific_thrust,
        tsfc=f_total / guard_thrust(specific_thrust),
        fuel_air_ratio=f_total,
        inlet_mass_flow=1.0,
        fuel_mass_flow=f_total,
        exit_mass_flow=m_exit,
    )


def reduce_turbofan(
    flight_velocity: float,
    exit_velocity: float,
    f_combustor: float,
    f_afterburner: float,
    bypass_ratio: float,
) -> Performance:
    """Mixed-flow turbofan: afterburner fuel is burned into the mixed stream.

    Per kg/s of core air the inlet swallows (1 + BPR), the mixer delivers
    BPR + 1 + f_comb, and the afterburner adds f_ab times that.
    """
    m_inlet = 1.0 + bypass_ratio
    m_fuel_combustor = f_combustor
    m_mixed = m_inlet + m_fuel_combustor
    m_fuel_afterburner = m_mixed * f_afterburner
    m_fuel = m_fuel_combustor + m_fuel_afterburner
    m_exit = m_mixed + m_fuel_afterburner

    net_thrust = m_exit * exit_velocity - m_inlet * flight_velocity
    specific_thrust = net_thrust / m_inlet
    f_overall = m_fuel / m_inlet

    return Performance(
        specific_thrust=specific_thrust,
        tsfc=f_overall / guard_thrust(specific_thrust),
        fuel_air_ratio=f_overall,
        inlet_mass_flow=m_inlet,
        fuel_mass_flow=m_fuel,
        exit_mass_flow=m_exit,
    )
