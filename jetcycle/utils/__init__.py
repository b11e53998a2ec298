"""Utility modules for JetCycle."""

from jetcycle.utils.numerics import guard_denominator, guard_thrust, safe_pow, safe_sqrt
from jetcycle.utils.units import parse_quantity

__all__ = ["guard_denominator", "guard_thrust", "parse_quantity", "safe_pow", "safe_sqrt"]
