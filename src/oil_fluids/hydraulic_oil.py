"""
Hydraulic Oil Properties

Fluid model for hydraulic and lubricating oils described the way product
data sheets describe them:

- Density at 15°C [kg/m³]
- Kinematic viscosity at two temperatures [mm²/s], usually 40°C and 100°C

Density follows linear thermal expansion from the 15°C value and kinematic
viscosity follows the Walther equation through the two reference points.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List

import numpy as np

from .errors import InsufficientViscosityDataError, InvalidFluidDataError
from .fluid_properties import (
    REFERENCE_TEMP_K,
    ZERO_C,
    FluidProperties,
    LinearExpansionDensity,
    WaltherViscosity,
)

logger = logging.getLogger(__name__)

DENSITY_KEY = "DensityAt15C"
VISCOSITY_KEY = "Kinematic Viscosity Limits"


@dataclass(frozen=True)
class FluidSnapshot:
    """Properties of one fluid evaluated at one temperature."""

    fluid: str
    temperature: float  # K
    density: float  # kg/m³
    kinematic_viscosity: float  # mm²/s
    dynamic_viscosity: float  # Pa·s

    @property
    def temperature_C(self) -> float:
        return self.temperature - ZERO_C


class HydraulicOil(FluidProperties):
    """
    Hydraulic oil defined by its 15°C density and two viscosity points.

    Properties modeled:
    - Density [kg/m³] (linear thermal expansion)
    - Kinematic viscosity [mm²/s] (Walther equation)
    - Dynamic viscosity [Pa·s] (derived)
    """

    def __init__(
        self,
        name: str,
        density_15C: float,
        viscosity_points: List[Dict],
    ):
        """
        Initialize hydraulic oil properties

        Parameters:
        -----------
        name : str
            Fluid name as listed in the reference table
        density_15C : float
            Density at 15°C [kg/m³]
        viscosity_points : list of dict
            Reference points [{"temperature": K, "kinematicViscosity": mm²/s}]
        """
        super().__init__(name=name)

        self.density_reference = density_15C  # kg/m³ at 15°C
        self.viscosity_points = list(viscosity_points or [])

        self.set_density(
            LinearExpansionDensity(
                rho_ref=density_15C,
                T_ref=REFERENCE_TEMP_K,
                name=f"Density_{name}",
            )
        )

        # Viscosity is left undefined for records with fewer than two or
        # malformed points so density queries still work
        self.viscosity_error = None
        if len(self.viscosity_points) >= 2:
            try:
                self.set_kinematic_viscosity(
                    WaltherViscosity.from_points(
                        self.viscosity_points, name=f"Walther_{name}"
                    )
                )
            except InvalidFluidDataError as e:
                logger.warning("%s: %s", name, e)
                self.viscosity_error = str(e)

    @classmethod
    def from_record(cls, name: str, record: Dict) -> "HydraulicOil":
        """Build from one entry of the fluid reference table."""
        if not isinstance(record, dict):
            raise InvalidFluidDataError(
                f"Record for {name!r} must be a mapping"
            )
        density = record.get(DENSITY_KEY)
        if density is None:
            raise InvalidFluidDataError(
                f"Fluid {name!r} is missing {DENSITY_KEY!r}"
            )
        try:
            density = float(density)
        except (TypeError, ValueError) as e:
            raise InvalidFluidDataError(
                f"Invalid {DENSITY_KEY} for {name!r}: {density!r}"
            ) from e
        points = record.get(VISCOSITY_KEY) or []
        return cls(name, density, points)

    def kinematic_viscosity(self, T):
        """Get kinematic viscosity [mm²/s] at temperature T [K]"""
        if self.viscosity_error is not None:
            raise InvalidFluidDataError(self.viscosity_error)
        if "kinematic_viscosity" not in self.correlations:
            raise InsufficientViscosityDataError(
                f"Insufficient viscosity data for {self.name}: "
                f"{len(self.viscosity_points)} reference point(s)"
            )
        return super().kinematic_viscosity(T)

    def snapshot(self, T: float) -> FluidSnapshot:
        """Evaluate all properties at a single temperature T [K]."""
        if np.ndim(T) != 0:
            raise ValueError("snapshot() takes a single temperature")
        rho = self.density(T)
        nu = self.kinematic_viscosity(T)
        return FluidSnapshot(
            fluid=self.name,
            temperature=float(T),
            density=rho,
            kinematic_viscosity=nu,
            dynamic_viscosity=nu * 1e-6 * rho,
        )

    def to_record(self) -> Dict:
        """Inverse of from_record."""
        return {
            DENSITY_KEY: self.density_reference,
            VISCOSITY_KEY: [dict(p) for p in self.viscosity_points],
        }

    def summary(self):
        """Print a data-sheet style summary."""
        print(f"{self.name} Hydraulic Oil")
        print("=" * 40)
        print(f"Density at 15°C: {self.density_reference:.1f} kg/m³")
        for point in self.viscosity_points[:2]:
            print(
                f"Kinematic viscosity at "
                f"{point['temperature'] - ZERO_C:.0f}°C: "
                f"{point['kinematicViscosity']:.2f} mm²/s"
            )
        print()
        super().summary()
