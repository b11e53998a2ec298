"""Guarded arithmetic for the cycle stages.

Every fractional power and every division whose denominator depends on
user input goes through these helpers, so a degenerate input yields a
finite (if non-physical) number instead of NaN, Inf, or an exception.
"""

from __future__ import annotations

import logging
import math

from jetcycle.utils.constants import DENOMINATOR_FLOOR, THRUST_FLOOR

logger = logging.getLogger(__name__)


def safe_pow(base: float, exponent: float) -> float:
    """Return ``base ** exponent``, 0.0 when ``base <= 0``, inf on overflow."""
    if base <= 0.0:
        return 0.0
    try:
        return base**exponent
    except OverflowError:
        return math.inf


def safe_sqrt(value: float) -> float:
    """Return ``sqrt(value)``, or 0.0 when ``value <= 0``."""
    if value <= 0.0:
        return 0.0
    return math.sqrt(value)


def guard_denominator(value: float, label: str = "denominator") -> float:
    """Clamp a non-positive denominator to machine epsilon.

    Args:
        value: Denominator to check.
        label: Name used in the log message when the clamp engages.

    Returns:
        *value* if strictly positive, else ``DENOMINATOR_FLOOR``.
    """
    if value <= 0.0:
        logger.warning("%s is non-positive (%g); clamped to %g", label, value, DENOMINATOR_FLOOR)
        return DENOMINATOR_FLOOR
    return value


def guard_thrust(specific_thrust: float) -> float:
    """Floor specific thrust before it divides a fuel-air ratio."""
    return max(THRUST_FLOOR, specific_thrust)
