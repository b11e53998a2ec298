"""Unit conversion utilities for JetCycle.

Provides a lightweight unit conversion layer built on top of pint, used
when reading parameter files whose values carry unit strings.
"""

from __future__ import annotations

import pint

# Module-level unit registry (singleton)
_ureg = pint.UnitRegistry()
Q_ = _ureg.Quantity


def parse_quantity(raw: float | int | str, si_unit: str) -> float:
    """Read a parameter value that may carry a unit string.

    Plain numbers are taken to be in *si_unit* already. Strings such as
    ``"22.632 kPa"`` or ``"-56.5 degC"`` are parsed by pint and converted.
    Offset units (degC, degF) are handled by building the quantity from
    magnitude and unit separately, since pint refuses to multiply them.

    Args:
        raw: Number or string from a parameter file.
        si_unit: Target unit (e.g. "Pa", "K", "J/kg", "" for dimensionless).

    Returns:
        Magnitude in *si_unit*.

    Raises:
        ValueError: If the string cannot be parsed or has the wrong dimension.
    """
    if isinstance(raw, bool):
        raise ValueError(f"Expected a number or quantity string, got {raw!r}")
    if isinstance(raw, (int, float)):
        return float(raw)

    text = str(raw).strip()
    magnitude_text, _, unit_text = text.partition(" ")
    try:
        magnitude = float(magnitude_text)
    except ValueError:
        magnitude = None

    try:
        if magnitude is not None and unit_text:
            quantity = Q_(magnitude, unit_text.strip())
        elif magnitude is not None:
            return magnitude
        else:
            quantity = _ureg.parse_expression(text)
        target = si_unit or "dimensionless"
        return float(quantity.to(target).magnitude)
    except (pint.errors.PintError, AttributeError) as exc:
        raise ValueError(f"Cannot convert {text!r} to {si_unit or 'dimensionless'}: {exc}") from exc
