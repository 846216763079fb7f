"""
Porous Media Module

Darcy-Forchheimer analysis of pressure loss measurements through a porous
sample.

This module provides:
- Closed-form least-squares fit of dP = A*u + B*u**2 (no intercept)
- Goodness of fit and plotting curve generation
- Darcy (viscous) and Forchheimer (inertial) coefficients from A and B
- End-to-end analysis combining the fit with oil_fluids properties
- YAML case files and CSV sample loading

Classes:
--------
Sample : One (velocity, pressure_loss) measurement
FitResult : Fitted A and B
PorousMediaCoefficients : Darcy d, Forchheimer f and permeability
CurveFitAnalysis : Complete result of analyze_samples
"""

from .analysis import CurveFitAnalysis, analyze_samples, load_samples_csv
from .cases import case_samples, load_case_spec, run_case
from .config import VAR_INFO, column_label
from .coefficients import (
    PorousMediaCoefficients,
    derive_porous_coefficients,
    velocities_from_flow,
)
from .curve_fit import (
    DEFAULT_CURVE_POINTS,
    MIN_SAMPLES,
    SINGULAR_EPSILON,
    FitResult,
    Sample,
    as_samples,
    fit,
    fit_statistics,
    generate_curve,
    goodness_of_fit,
)
from .errors import (
    DegenerateInputError,
    InsufficientDataError,
    SingularSystemError,
    UndefinedFitError,
)
from .setup import read_param_values, read_param_values_si

__version__ = "0.1.0"

__all__ = [
    # Curve fitting
    "Sample",
    "FitResult",
    "as_samples",
    "fit",
    "goodness_of_fit",
    "fit_statistics",
    "generate_curve",
    "MIN_SAMPLES",
    "SINGULAR_EPSILON",
    "DEFAULT_CURVE_POINTS",
    # Coefficients
    "PorousMediaCoefficients",
    "derive_porous_coefficients",
    "velocities_from_flow",
    # Analysis
    "CurveFitAnalysis",
    "analyze_samples",
    "load_samples_csv",
    "load_case_spec",
    "case_samples",
    "run_case",
    "read_param_values",
    "read_param_values_si",
    "VAR_INFO",
    "column_label",
    # Errors
    "InsufficientDataError",
    "SingularSystemError",
    "UndefinedFitError",
    "DegenerateInputError",
]
