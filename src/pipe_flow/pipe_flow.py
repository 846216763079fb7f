"""
Pipe flow calculators.

Relations between diameter, mean velocity and volumetric flow rate in a
circular pipe, and the Reynolds number with its flow regime. All functions
take SI values; the ``*_units`` variants accept (value, unit) pairs and
return the result in a requested unit.
"""

import math
from typing import Tuple

from hydro_units import from_si, to_si

LAMINAR_LIMIT = 2300.0
TURBULENT_LIMIT = 4000.0

Quantity = Tuple[float, str]


def _require_positive(name, value):
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{name} must be positive, got {value!r}")


def circle_area(diameter):
    """
    Cross-sectional area of a circle, A = pi * (D/2)**2

    Parameters:
    -----------
    diameter : float
        Diameter [m]

    Returns:
    --------
    area : float
        Area [m²]
    """
    if not math.isfinite(diameter) or diameter < 0:
        raise ValueError(f"Diameter must be non-negative, got {diameter!r}")
    return math.pi * (diameter / 2) ** 2


def circle_diameter(area):
    """Diameter [m] of a circle with the given area [m²], D = 2*sqrt(A/pi)"""
    if not math.isfinite(area) or area < 0:
        raise ValueError(f"Area must be non-negative, got {area!r}")
    return 2 * math.sqrt(area / math.pi)


def pipe_velocity(diameter, flow_rate):
    """
    Mean velocity in a pipe, V = Q / A

    Parameters:
    -----------
    diameter : float
        Pipe inner diameter [m]
    flow_rate : float
        Volumetric flow rate [m³/s]

    Returns:
    --------
    velocity : float
        Mean velocity [m/s]
    """
    _require_positive("Diameter", diameter)
    return flow_rate / circle_area(diameter)


def pipe_diameter(velocity, flow_rate):
    """Pipe inner diameter [m] for a flow rate [m³/s] at a velocity [m/s]"""
    _require_positive("Velocity", velocity)
    area = flow_rate / velocity
    if area < 0:
        raise ValueError("Flow rate and velocity must have the same sign")
    return circle_diameter(area)


def pipe_flow_rate(diameter, velocity):
    """Volumetric flow rate [m³/s] through a pipe, Q = V * A"""
    _require_positive("Diameter", diameter)
    return velocity * circle_area(diameter)


def reynolds_number(fluid_density, velocity, pipe_diameter, fluid_viscosity):
    """
    Calculate Reynolds number for pipe flow, Re = rho * V * D / mu

    Parameters:
    -----------
    fluid_density : float
        Fluid density [kg/m³]
    velocity : float
        Fluid velocity [m/s]
    pipe_diameter : float
        Pipe inner diameter [m]
    fluid_viscosity : float
        Dynamic viscosity [Pa·s]

    Returns:
    --------
    Re : float
        Reynolds number [-]; inf for an inviscid fluid
    """
    for name, value in (
        ("Density", fluid_density),
        ("Velocity", velocity),
        ("Diameter", pipe_diameter),
        ("Viscosity", fluid_viscosity),
    ):
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite, got {value!r}")
    if fluid_viscosity == 0:
        return math.inf
    return fluid_density * velocity * pipe_diameter / fluid_viscosity


def flow_regime(reynolds_number):
    """
    Determine flow regime based on Reynolds number

    Returns:
    --------
    regime : str
        Flow regime: 'laminar', 'transitional', or 'turbulent'
    """
    Re = abs(reynolds_number)
    if Re < LAMINAR_LIMIT:
        return "laminar"
    elif Re <= TURBULENT_LIMIT:
        return "transitional"
    else:
        return "turbulent"


def pipe_velocity_units(
    diameter: Quantity, flow_rate: Quantity, velocity_unit: str = "m/s"
) -> float:
    """pipe_velocity with (value, unit) inputs, result in velocity_unit."""
    D = to_si(*diameter, unit_type="length")
    Q = to_si(*flow_rate, unit_type="flow")
    return from_si(pipe_velocity(D, Q), velocity_unit)


def pipe_diameter_units(
    velocity: Quantity, flow_rate: Quantity, diameter_unit: str = "m"
) -> float:
    """pipe_diameter with (value, unit) inputs, result in diameter_unit."""
    V = to_si(*velocity, unit_type="velocity")
    Q = to_si(*flow_rate, unit_type="flow")
    return from_si(pipe_diameter(V, Q), diameter_unit)


def pipe_flow_rate_units(
    diameter: Quantity, velocity: Quantity, flow_unit: str = "m^3/s"
) -> float:
    """pipe_flow_rate with (value, unit) inputs, result in flow_unit."""
    D = to_si(*diameter, unit_type="length")
    V = to_si(*velocity, unit_type="velocity")
    return from_si(pipe_flow_rate(D, V), flow_unit)


def circle_area_units(diameter: Quantity, area_unit: str = "m^2") -> float:
    """circle_area with a (value, unit) diameter, result in area_unit."""
    D = to_si(*diameter, unit_type="length")
    return from_si(circle_area(D), area_unit)


def reynolds_number_units(
    density: Quantity,
    velocity: Quantity,
    diameter: Quantity,
    viscosity: Quantity,
) -> float:
    """reynolds_number with (value, unit) inputs."""
    return reynolds_number(
        to_si(*density, unit_type="density"),
        to_si(*velocity, unit_type="velocity"),
        to_si(*diameter, unit_type="length"),
        to_si(*viscosity, unit_type="dynamic_viscosity"),
    )
