"""Pipe flow and Reynolds number calculators."""

from .pipe_flow import (
    LAMINAR_LIMIT,
    TURBULENT_LIMIT,
    circle_area,
    circle_area_units,
    circle_diameter,
    flow_regime,
    pipe_diameter,
    pipe_diameter_units,
    pipe_flow_rate,
    pipe_flow_rate_units,
    pipe_velocity,
    pipe_velocity_units,
    reynolds_number,
    reynolds_number_units,
)

__all__ = [
    "circle_area",
    "circle_diameter",
    "pipe_velocity",
    "pipe_diameter",
    "pipe_flow_rate",
    "reynolds_number",
    "flow_regime",
    "circle_area_units",
    "pipe_velocity_units",
    "pipe_diameter_units",
    "pipe_flow_rate_units",
    "reynolds_number_units",
    "LAMINAR_LIMIT",
    "TURBULENT_LIMIT",
]
