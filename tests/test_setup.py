"""Tests for porous_media.setup parameter readers."""

import pytest

from hydro_units import UnknownUnitError
from porous_media.setup import read_param_values, read_param_values_si


def test_read_param_values_basic():
    """Test basic flattening with two levels (units as strings)."""
    params = {
        "fluid": {
            "temperature": {"value": 40, "units": "C"},
            "density": {"value": 868, "units": "kg/m^3"},
        },
        "sample": {"length": {"value": 25, "units": "mm"}},
    }

    result = read_param_values(params)

    # Check keys
    assert "fluid_temperature" in result
    assert "fluid_density" in result
    assert "sample_length" in result

    # Check structure and values (units should be strings)
    assert result["fluid_temperature"]["value"] == 40
    assert result["fluid_temperature"]["units"] == "C"
    assert result["fluid_density"]["value"] == 868
    assert result["sample_length"]["units"] == "mm"


def test_read_param_values_plain_values():
    """Test that non-dict leaves are stored without units."""
    result = read_param_values({"fluid": {"name": "ISO VG 46"}})

    assert result["fluid_name"] == {"value": "ISO VG 46", "units": None}


def test_read_param_values_extra_fields_and_sep():
    """Test that extra fields are kept and the separator is used."""
    params = {
        "sample": {
            "length": {"value": 25, "units": "mm", "desc": "Disc thickness"}
        }
    }

    result = read_param_values(params, sep=".")

    assert result["sample.length"]["desc"] == "Disc thickness"


def test_read_param_values_si():
    """Test conversion of every parameter to SI units."""
    params = {
        "fluid": {
            "name": "ISO VG 46",
            "temperature": {"value": 40, "units": "C"},
            "viscosity": {"value": 40, "units": "cP"},
        },
        "sample": {"length": {"value": 100, "units": "mm"}},
    }

    result = read_param_values_si(params)

    assert result["sample_length"] == {
        "value": pytest.approx(0.1),
        "units": "m",
        "input_units": "mm",
    }
    assert result["fluid_temperature"]["value"] == pytest.approx(313.15)
    assert result["fluid_temperature"]["units"] == "K"
    assert result["fluid_viscosity"]["value"] == pytest.approx(0.04)
    assert result["fluid_viscosity"]["units"] == "Pa*s"
    assert result["fluid_name"]["value"] == "ISO VG 46"


def test_read_param_values_si_unknown_unit():
    """Test that unknown units are reported."""
    with pytest.raises(UnknownUnitError):
        read_param_values_si(
            {"sample": {"length": {"value": 1, "units": "ly"}}}
        )


def test_read_param_values_si_leaves_input_unchanged():
    """Test that converting to SI does not modify the case parameters."""
    params = {"sample": {"length": {"value": 25, "units": "mm"}}}

    read_param_values_si(params)

    assert params == {"sample": {"length": {"value": 25, "units": "mm"}}}
