"""Tests for the hydrofit command line interface."""

import pandas as pd
import pytest

from porous_media.cli import build_parser, main
from porous_media.config import VAR_INFO, column_label

CASE_YAML = """\
name: Filter disc A
fluid:
  name: ISO VG 46
  temperature: {value: 40, units: C}
sample:
  length: {value: 25, units: mm}
samples:
  units: {velocity: m/s, pressure_loss: kPa}
  data:
    - [0.5, 10.2]
    - [1.0, 25.5]
    - [1.5, 45.8]
"""


def test_parser_requires_command():
    """Test that a subcommand is required."""
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_fluids(capsys):
    """Test listing the packaged fluids."""
    assert main(["fluids"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert "ISO VG 46" in lines
    assert lines == sorted(lines)


def test_fluids_custom_table(fluid_json, capsys):
    """Test listing fluids from another reference table."""
    assert main(["--data", str(fluid_json), "fluids"]) == 0

    assert capsys.readouterr().out.split("\n")[:2] == [
        "Test Oil 32",
        "Test Oil 68",
    ]


def test_props(capsys):
    """Test properties at the density reference temperature."""
    assert main(["props", "ISO VG 46", "15"]) == 0

    out = capsys.readouterr().out
    assert "Fluid: ISO VG 46" in out
    assert "Fluid Density [kg/m^3]: 868.00" in out
    assert "(288.15 K)" in out


def test_props_fahrenheit(capsys):
    """Test a temperature given in Fahrenheit."""
    assert main(["props", "ISO VG 46", "104", "--unit", "F"]) == 0

    out = capsys.readouterr().out
    assert "40.00 °C" in out
    assert "Kinematic Viscosity [mm^2/s]: 46.0000" in out


def test_props_unknown_fluid(capsys):
    """Test that lookup errors are reported with exit status 1."""
    assert main(["props", "Olive Oil", "40"]) == 1

    captured = capsys.readouterr()
    assert captured.err.startswith("Error: Unknown fluid")
    assert captured.out == ""


def test_missing_data_file(tmp_path, capsys):
    """Test that an unreadable reference table is reported."""
    status = main(["--data", str(tmp_path / "none.json"), "fluids"])

    assert status == 1
    assert "Error: Failed to load fluid data" in capsys.readouterr().err


def test_table_csv(tmp_path, capsys):
    """Test writing a property table to CSV."""
    out_path = tmp_path / "out" / "vg46.csv"

    status = main(
        [
            "table", "ISO VG 46",
            "--t-min", "0", "--t-max", "100", "--step", "10",
            "--csv", str(out_path),
        ]
    )

    assert status == 0
    assert "Property table saved" in capsys.readouterr().out
    table = pd.read_csv(out_path)
    assert len(table) == 11
    assert table["density"].iloc[0] > table["density"].iloc[-1]


def test_table_kelvin(capsys):
    """Test a temperature range given in Kelvin."""
    status = main(
        [
            "table", "ISO VG 32",
            "--t-min", "313.15", "--t-max", "373.15", "--step", "30",
            "--unit", "K",
        ]
    )

    assert status == 0
    out = capsys.readouterr().out
    assert "kinematic_viscosity" in out
    # header plus 40, 70 and 100°C
    assert len(out.strip().splitlines()) == 4


def test_fit_yaml_case(tmp_path, capsys):
    """Test fitting a YAML case file."""
    path = tmp_path / "case.yaml"
    path.write_text(CASE_YAML)

    assert main(["fit", str(path)]) == 0

    out = capsys.readouterr().out
    assert "Case: Filter disc A" in out
    assert "Darcy Coefficient [1/m^2]" in out
    assert "Forchheimer Coefficient [1/m]" in out


def test_fit_csv(tmp_path, capsys):
    """Test fitting a CSV with explicit fluid properties."""
    samples = tmp_path / "samples.csv"
    samples.write_text(
        "velocity,pressure_loss\n0.5,10.2\n1.0,25.5\n1.5,45.8\n"
    )
    results = tmp_path / "results.csv"

    status = main(
        [
            "fit", str(samples),
            "--length", "100", "--length-unit", "mm",
            "--density", "998", "--viscosity", "0.001",
            "--curve-points", "4",
            "--csv-out", str(results),
        ]
    )

    assert status == 0
    assert "Results saved to" in capsys.readouterr().out
    df = pd.read_csv(results)
    assert df["A"].iloc[0] == pytest.approx(18.2625 / 1.1875)
    assert df["darcy_d"].iloc[0] == pytest.approx(
        (18.2625 / 1.1875) / (0.001 * 0.1)
    )


def test_fit_csv_with_fluid(tmp_path, capsys):
    """Test fitting a CSV using the fluid database."""
    samples = tmp_path / "samples.csv"
    samples.write_text(
        "velocity,pressure_loss\n0.5,10.2\n1.0,25.5\n1.5,45.8\n"
    )

    status = main(
        [
            "fit", str(samples), "--length", "0.025",
            "--fluid", "ISO VG 46", "--temperature", "40",
            "--pressure-unit", "kPa",
        ]
    )

    assert status == 0
    assert "Permeability [m^2]" in capsys.readouterr().out


def test_fit_csv_requires_length(tmp_path, capsys):
    """Test that CSV input without a sample length fails cleanly."""
    samples = tmp_path / "samples.csv"
    samples.write_text("velocity,pressure_loss\n0.5,1\n1.0,2\n1.5,4\n")

    assert main(["fit", str(samples)]) == 1
    assert "--length" in capsys.readouterr().err


def test_fit_too_few_samples(tmp_path, capsys):
    """Test that fitting errors are reported."""
    samples = tmp_path / "samples.csv"
    samples.write_text("velocity,pressure_loss\n0.5,1\n1.0,2\n")

    status = main(
        [
            "fit", str(samples), "--length", "0.1",
            "--density", "998", "--viscosity", "0.001",
        ]
    )

    assert status == 1
    assert "At least 3 data points" in capsys.readouterr().err


def test_fit_case_with_short_row(tmp_path, capsys):
    """Test that a malformed case row gives an error, not a traceback."""
    path = tmp_path / "case.yaml"
    path.write_text(CASE_YAML.replace("- [1.0, 25.5]", "- [1.0]"))

    assert main(["fit", str(path)]) == 1

    err = capsys.readouterr().err
    assert err.startswith("Error: samples.data row 2")


def test_result_labels():
    """Test labels built from the result metadata."""
    assert "darcy_d" in VAR_INFO
    assert column_label("permeability") == "Permeability [m^2]"
    assert column_label("unlisted") == "unlisted"
