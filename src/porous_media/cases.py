"""
YAML case files for porous media tests.

A case file describes one permeability test:

    name: Filter disc A
    fluid:
      name: ISO VG 46
      temperature: {value: 40, units: C}
    sample:
      length: {value: 25, units: mm}
      area: {value: 19.6, units: cm^2}     # only for flow-rate data
    samples:
      units: {velocity: m/s, pressure_loss: kPa}
      data:
        - [0.5, 10.2]
        - [1.0, 25.5]
        - [1.5, 45.8]

``fluid.density`` and ``fluid.viscosity`` may be given to override the
fluid database. When ``samples.units`` has a ``flow`` entry instead of
``velocity`` the first column is a flow rate and ``sample.area`` is used to
compute the velocity.
"""

from pathlib import Path
from typing import Dict, Optional, Union

import yaml

from hydro_units import to_si
from oil_fluids import FluidDatabase

from .analysis import CurveFitAnalysis, analyze_samples
from .coefficients import velocities_from_flow
from .curve_fit import Sample
from .setup import read_param_values_si

REQUIRED_SECTIONS = ["sample", "samples"]


def load_case_spec(yaml_path: Union[str, Path]) -> Dict:
    """Load and validate a case specification from YAML."""
    with open(yaml_path, "r") as f:
        spec = yaml.safe_load(f)

    if not isinstance(spec, dict):
        raise ValueError(f"Case file {yaml_path} must contain a mapping")

    for section in REQUIRED_SECTIONS:
        if section not in spec:
            raise ValueError(f"Missing required section: {section}")

    return spec


def case_samples(spec: Dict, params: Dict) -> list:
    """Samples of a case in SI units."""
    samples_spec = spec["samples"]
    units = samples_spec.get("units", {}) or {}
    data = samples_spec.get("data") or []
    if not isinstance(data, list):
        raise ValueError("samples.data must be a list of rows")
    for i, row in enumerate(data, start=1):
        if not isinstance(row, (list, tuple)) or len(row) != 2:
            raise ValueError(
                f"samples.data row {i} must be [x, pressure_loss], "
                f"got {row!r}"
            )

    pressure_unit = units.get("pressure_loss", "Pa")
    pressures = [to_si(row[1], pressure_unit, "pressure") for row in data]

    if "flow" in units:
        if "sample_area" not in params:
            raise ValueError("sample.area is required for flow-rate data")
        flows = [to_si(row[0], units["flow"], "flow") for row in data]
        velocities = velocities_from_flow(
            flows, params["sample_area"]["value"]
        )
    else:
        velocity_unit = units.get("velocity", "m/s")
        velocities = [
            to_si(row[0], velocity_unit, "velocity") for row in data
        ]

    return [Sample(u, p) for u, p in zip(velocities, pressures)]


def run_case(
    spec: Dict, database: Optional[FluidDatabase] = None
) -> CurveFitAnalysis:
    """Run the analysis described by a loaded case specification."""
    params = read_param_values_si(
        {k: v for k, v in spec.items() if k in ("fluid", "sample")}
    )

    if "sample_length" not in params:
        raise ValueError("Missing required parameter: sample.length")

    def value(key):
        return params[key]["value"] if key in params else None

    return analyze_samples(
        case_samples(spec, params),
        length=value("sample_length"),
        fluid=value("fluid_name"),
        temperature=value("fluid_temperature"),
        density=value("fluid_density"),
        viscosity=value("fluid_viscosity"),
        database=database,
    )
