"""
Hydro Units Module

Static conversion factor tables for the quantities used by the hydraulic
calculators, and the conversion functions built on them.

Quantities:
-----------
length, area, density, kinematic_viscosity, dynamic_viscosity, volume,
flow, mass_flow, velocity, pressure, force (linear factor tables) and
temperature (C, F, K via Kelvin).

Functions:
----------
convert : Convert a value between two units of the same quantity
normalize_unit : Map a unit spelling to its canonical token
unit_type_of : Quantity type of a unit
available_units : Units registered for a quantity type
is_valid_unit : Check a unit against a quantity type
to_si, from_si : Convert to/from the SI base unit of a quantity
"""

from .converter import (
    available_units,
    convert,
    from_si,
    is_valid_unit,
    normalize_unit,
    to_si,
    unit_type_of,
)
from .errors import IncompatibleUnitsError, UnknownUnitError
from .tables import SI_UNITS, TEMPERATURE_UNITS, UNIT_TYPE_REGISTRY

__version__ = "0.1.0"

__all__ = [
    "convert",
    "normalize_unit",
    "unit_type_of",
    "available_units",
    "is_valid_unit",
    "to_si",
    "from_si",
    # Errors
    "UnknownUnitError",
    "IncompatibleUnitsError",
    # Tables
    "UNIT_TYPE_REGISTRY",
    "SI_UNITS",
    "TEMPERATURE_UNITS",
]
