"""
Unit conversion between the registered quantity tables.

Linear quantities convert through the ratio of their SI factors; temperature
converts through Kelvin with the exact affine formulas.
"""

import math
from typing import List, Optional

from .errors import IncompatibleUnitsError, UnknownUnitError
from .tables import (
    SI_UNITS,
    TEMPERATURE_UNITS,
    UNIT_ALIASES,
    UNIT_TYPE_REGISTRY,
)

ZERO_C = 273.15  # K


def normalize_unit(unit: str) -> str:
    """
    Return the canonical token for a unit spelling.

    Temperature letters are case-insensitive; a handful of typographic
    variants (``Pa·s``, ``m²``, ``°C`` ...) map to the ASCII tokens used in
    the factor tables. Unknown tokens are returned unchanged.
    """
    if not isinstance(unit, str) or not unit.strip():
        raise UnknownUnitError(unit)
    unit = unit.strip()
    if unit.upper() in TEMPERATURE_UNITS:
        return unit.upper()
    return UNIT_ALIASES.get(unit, unit)


def unit_type_of(unit: str) -> str:
    """Return the quantity type a unit belongs to."""
    unit = normalize_unit(unit)
    if unit in TEMPERATURE_UNITS:
        return "temperature"
    for unit_type, factors in UNIT_TYPE_REGISTRY.items():
        if unit in factors:
            return unit_type
    raise UnknownUnitError(unit)


def available_units(unit_type: str) -> List[str]:
    """
    List the units registered for a quantity type.

    The type name is matched ignoring case, spaces and underscores, so
    "Kinematic Viscosity" and "kinematic_viscosity" are equivalent.
    """
    key = unit_type.strip().lower().replace(" ", "_")
    if key in ("flow_rate", "flowrate"):
        key = "flow"
    if key == "temperature":
        return list(TEMPERATURE_UNITS)
    lookup = {k.replace("_", ""): k for k in UNIT_TYPE_REGISTRY}
    key = lookup.get(key.replace("_", ""), key)
    if key not in UNIT_TYPE_REGISTRY:
        raise ValueError(
            f"Unsupported unit type {unit_type!r}. Available types: "
            f"{', '.join(['temperature', *UNIT_TYPE_REGISTRY])}"
        )
    return list(UNIT_TYPE_REGISTRY[key])


def is_valid_unit(unit: str, unit_type: str) -> bool:
    try:
        return normalize_unit(unit) in available_units(unit_type)
    except ValueError:
        return False


def temperature_to_kelvin(value: float, unit: str) -> float:
    if unit == "K":
        return value
    if unit == "C":
        return value + ZERO_C
    if unit == "F":
        return (value - 32.0) * 5.0 / 9.0 + ZERO_C
    raise UnknownUnitError(unit)


def temperature_from_kelvin(value: float, unit: str) -> float:
    if unit == "K":
        return value
    if unit == "C":
        return value - ZERO_C
    if unit == "F":
        return (value - ZERO_C) * 9.0 / 5.0 + 32.0
    raise UnknownUnitError(unit)


def convert(from_unit: str, to_unit: str, value: float) -> float:
    """
    Convert a value from one unit to another.

    Parameters:
    -----------
    from_unit : str
        Source unit token (e.g. "mm", "bar", "C")
    to_unit : str
        Target unit token
    value : float
        Finite value to convert

    Returns:
    --------
    float
        Converted value

    Raises:
    -------
    UnknownUnitError
        If either unit is not registered
    IncompatibleUnitsError
        If the units measure different quantities
    ValueError
        If value is not a finite number

    Examples:
    ---------
    >>> convert("C", "F", 0.0)
    32.0
    >>> convert("bar", "Pa", 2.5)
    250000.0
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        try:
            value = float(value)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid value for conversion: {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"Invalid value for conversion: {value!r}")

    source = normalize_unit(from_unit)
    target = normalize_unit(to_unit)
    source_type = unit_type_of(source)
    target_type = unit_type_of(target)

    if source == target:
        return value

    if source_type != target_type:
        raise IncompatibleUnitsError(
            from_unit, to_unit, source_type, target_type
        )

    if source_type == "temperature":
        return temperature_from_kelvin(
            temperature_to_kelvin(value, source), target
        )

    factors = UNIT_TYPE_REGISTRY[source_type]
    return value * (factors[source] / factors[target])


def to_si(value: float, unit: str, unit_type: Optional[str] = None) -> float:
    """Convert a value to the SI base unit of its quantity."""
    quantity = unit_type_of(unit)
    if unit_type is not None and quantity != unit_type:
        raise IncompatibleUnitsError(
            unit, SI_UNITS.get(unit_type, unit_type), quantity, unit_type
        )
    return convert(unit, SI_UNITS[quantity], value)


def from_si(value: float, unit: str) -> float:
    """Convert a value in SI base units to the given unit."""
    return convert(SI_UNITS[unit_type_of(unit)], unit, value)
