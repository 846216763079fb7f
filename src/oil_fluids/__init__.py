"""
Oil Fluids Module

Temperature-dependent properties of hydraulic oils from a small reference
table (density at 15°C and two kinematic viscosity points per fluid).

This module provides:
- Property correlations for density (linear thermal expansion) and
  kinematic viscosity (Walther equation)
- FluidProperties base class and the HydraulicOil fluid model
- FluidDatabase, the name-keyed reference table with a single-flight loader

Classes:
--------
PropertyCorrelation : ABC
    Abstract base class for property correlations
LinearExpansionDensity : PropertyCorrelation
    rho(T) = rho_15 * (1 - alpha * (T - 288.15))
WaltherViscosity : PropertyCorrelation
    log10(log10(nu + 0.8)) = m * log10(T) + n
FluidProperties : Base class for fluid modeling
HydraulicOil : FluidProperties
    Oil defined by its data-sheet density and viscosity points
FluidSnapshot : Properties of one fluid at one temperature
FluidDatabase : Reference table of hydraulic oils
"""

from .database import FLUID_DATA_PATH, FluidDatabase, read_fluid_data
from .errors import (
    DataLoadError,
    InsufficientViscosityDataError,
    InvalidFluidDataError,
    InvalidTemperatureError,
    UnknownFluidError,
)
from .fluid_properties import (
    DENSITY_COEFFICIENT,
    REFERENCE_TEMP_K,
    WALTHER_CONSTANT,
    WALTHER_ERROR_THRESHOLD,
    FluidProperties,
    LinearExpansionDensity,
    PropertyCorrelation,
    WaltherViscosity,
    inverse_walther_transform,
    walther_transform,
)
from .hydraulic_oil import FluidSnapshot, HydraulicOil

__version__ = "0.1.0"

__all__ = [
    # Base classes
    "PropertyCorrelation",
    "FluidProperties",
    # Correlation types
    "LinearExpansionDensity",
    "WaltherViscosity",
    "walther_transform",
    "inverse_walther_transform",
    # Fluids
    "HydraulicOil",
    "FluidSnapshot",
    "FluidDatabase",
    "read_fluid_data",
    "FLUID_DATA_PATH",
    # Constants
    "DENSITY_COEFFICIENT",
    "REFERENCE_TEMP_K",
    "WALTHER_CONSTANT",
    "WALTHER_ERROR_THRESHOLD",
    # Errors
    "UnknownFluidError",
    "InvalidTemperatureError",
    "InsufficientViscosityDataError",
    "InvalidFluidDataError",
    "DataLoadError",
]
