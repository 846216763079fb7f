"""Shared fixtures for the hydrofit test suite."""

import json

import pytest

from oil_fluids import FluidDatabase

SMALL_TABLE = {
    "Test Oil 32": {
        "DensityAt15C": 860.0,
        "Kinematic Viscosity Limits": [
            {"temperature": 313.15, "kinematicViscosity": 32.0},
            {"temperature": 373.15, "kinematicViscosity": 5.4},
        ],
    },
    "Test Oil 68": {
        "DensityAt15C": 875.0,
        "Kinematic Viscosity Limits": [
            {"temperature": 313.15, "kinematicViscosity": 68.0},
            {"temperature": 373.15, "kinematicViscosity": 8.7},
        ],
    },
}


@pytest.fixture
def fluid_json(tmp_path):
    """Small fluid reference table written to a temporary file."""
    path = tmp_path / "fluids.json"
    path.write_text(json.dumps(SMALL_TABLE))
    return path


@pytest.fixture
def fluid_db():
    """Database loaded from the packaged reference table."""
    db = FluidDatabase()
    db.load_sync()
    return db
