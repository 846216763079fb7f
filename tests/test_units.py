"""Tests for hydro_units conversion tables."""

import math

import pint
import pytest

from hydro_units import (
    IncompatibleUnitsError,
    SI_UNITS,
    UNIT_TYPE_REGISTRY,
    UnknownUnitError,
    available_units,
    convert,
    from_si,
    is_valid_unit,
    normalize_unit,
    to_si,
    unit_type_of,
)

ALL_UNITS = [
    unit for factors in UNIT_TYPE_REGISTRY.values() for unit in factors
] + ["C", "F", "K"]


@pytest.mark.parametrize("unit", ALL_UNITS)
def test_convert_identity(unit):
    """Test that converting a unit to itself returns the value unchanged."""
    assert convert(unit, unit, 12.345) == 12.345
    assert convert(unit, unit, -3.0) == -3.0


@pytest.mark.parametrize("unit_type", list(UNIT_TYPE_REGISTRY))
def test_convert_round_trip(unit_type):
    """Test round trips between every pair of units of one quantity."""
    units = list(UNIT_TYPE_REGISTRY[unit_type])
    for a in units:
        for b in units:
            value = convert(a, b, convert(b, a, 7.5))
            assert value == pytest.approx(7.5, rel=1e-12)


def test_temperature_fixed_points():
    """Test exact temperature conversions through Kelvin."""
    assert convert("C", "F", 0) == 32
    assert convert("K", "C", 273.15) == 0
    assert convert("F", "C", 212.0) == pytest.approx(100.0)
    assert convert("C", "K", -40.0) == pytest.approx(233.15)
    assert convert("F", "C", -40.0) == pytest.approx(-40.0)


@pytest.mark.parametrize("x", [-40.0, 0.0, 37.5, 451.0])
def test_temperature_round_trip(x):
    """Test C -> F -> C and K -> F -> K round trips."""
    assert convert("C", "F", convert("F", "C", x)) == pytest.approx(x)
    assert convert("F", "K", convert("K", "F", x)) == pytest.approx(x)


def test_linear_conversions():
    """Test a few factor-ratio conversions against known values."""
    assert convert("bar", "Pa", 2.5) == 250000.0
    assert convert("psi", "kPa", 1.0) == pytest.approx(6.894757293168)
    assert convert("in", "mm", 1.0) == pytest.approx(25.4)
    assert convert("m^3/h", "L/min", 3.6) == pytest.approx(60.0)
    assert convert("cSt", "mm^2/s", 46.0) == pytest.approx(46.0)
    assert convert("cP", "Pa*s", 40.0) == pytest.approx(0.04)


def test_unknown_unit():
    """Test that unregistered units raise UnknownUnitError."""
    with pytest.raises(UnknownUnitError):
        convert("furlong", "m", 1.0)
    with pytest.raises(UnknownUnitError):
        convert("m", "furlong", 1.0)
    with pytest.raises(UnknownUnitError):
        unit_type_of("parsec")


def test_incompatible_units():
    """Test that units of different quantities cannot be converted."""
    with pytest.raises(IncompatibleUnitsError) as excinfo:
        convert("m", "Pa", 1.0)
    assert excinfo.value.from_type == "length"
    assert excinfo.value.to_type == "pressure"

    # Mass flow is kept apart from volumetric flow
    with pytest.raises(IncompatibleUnitsError):
        convert("kg/s", "m^3/s", 1.0)
    with pytest.raises(IncompatibleUnitsError):
        convert("C", "m", 1.0)


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, "abc"])
def test_non_finite_value(value):
    """Test that non-finite values are rejected."""
    with pytest.raises(ValueError):
        convert("m", "mm", value)


def test_normalize_unit_aliases():
    """Test that typographic variants map to canonical tokens."""
    assert normalize_unit("Pa·s") == "Pa*s"
    assert normalize_unit("m²") == "m^2"
    assert normalize_unit("°C") == "C"
    assert normalize_unit("c") == "C"
    assert normalize_unit("k") == "K"
    assert normalize_unit("cst") == "cSt"
    assert normalize_unit(" mm ") == "mm"
    assert convert("Pa·s", "cP", 1.0) == pytest.approx(1000.0)

    with pytest.raises(UnknownUnitError):
        normalize_unit("")


def test_available_units():
    """Test listing units by quantity type."""
    assert available_units("temperature") == ["C", "F", "K"]
    assert "L/min" in available_units("Flow Rate")
    assert "cSt" in available_units("Kinematic Viscosity")
    assert "kg/s" in available_units("mass_flow")
    assert "kg/s" not in available_units("flow")

    with pytest.raises(ValueError):
        available_units("luminosity")


def test_is_valid_unit_and_type():
    """Test unit validation and type lookup."""
    assert is_valid_unit("mm", "length")
    assert is_valid_unit("°F", "temperature")
    assert not is_valid_unit("mm", "pressure")
    assert not is_valid_unit("zzz", "length")
    assert not is_valid_unit("mm", "luminosity")

    assert unit_type_of("kg/s") == "mass_flow"
    assert unit_type_of("ft/s") == "velocity"
    assert unit_type_of("mPa·s") == "dynamic_viscosity"


def test_to_si_from_si():
    """Test conversion to and from the SI base unit of a quantity."""
    assert to_si(25.0, "mm") == pytest.approx(0.025)
    assert to_si(40.0, "C") == pytest.approx(313.15)
    assert to_si(2.0, "bar", "pressure") == pytest.approx(2e5)
    assert from_si(313.15, "C") == pytest.approx(40.0)
    assert from_si(1e5, "kPa") == pytest.approx(100.0)

    with pytest.raises(IncompatibleUnitsError):
        to_si(1.0, "bar", "length")


def test_si_units_have_unit_factor():
    """Test that every SI base unit has factor 1 in its table."""
    for unit_type, factors in UNIT_TYPE_REGISTRY.items():
        assert factors[SI_UNITS[unit_type]] == 1.0


PINT_EQUIVALENTS = [
    ("in", "inch"),
    ("ft", "foot"),
    ("in^2", "inch**2"),
    ("ft^2", "foot**2"),
    ("lb/ft^3", "pound/foot**3"),
    ("g/cm^3", "gram/centimeter**3"),
    ("cSt", "centistokes"),
    ("cP", "centipoise"),
    ("in^3", "inch**3"),
    ("gal(US)", "gallon"),
    ("gal(UK)", "imperial_gallon"),
    ("gpm", "gallon/minute"),
    ("gal/h", "gallon/hour"),
    ("L/min", "liter/minute"),
    ("ft^3/s", "foot**3/second"),
    ("lb/s", "pound/second"),
    ("km/h", "kilometer/hour"),
    ("ft/s", "foot/second"),
    ("psi", "psi"),
    ("atm", "atm"),
    ("bar", "bar"),
    ("lbf", "pound_force"),
    ("kgf", "kilogram_force"),
]


@pytest.mark.parametrize("unit,pint_expr", PINT_EQUIVALENTS)
def test_factors_match_pint(unit, pint_expr):
    """Test the factor tables against pint's unit definitions."""
    ureg = pint.UnitRegistry()
    factors = UNIT_TYPE_REGISTRY[unit_type_of(unit)]

    expected = ureg.Quantity(1.0, pint_expr).to_base_units().magnitude

    assert factors[unit] == pytest.approx(expected, rel=1e-8)
