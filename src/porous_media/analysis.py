"""
Complete Darcy-Forchheimer analysis of a porous sample.

Combines the curve fit, its goodness of fit, the fluid properties at the
test temperature and the sample length into one result.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

import pandas as pd

from hydro_units import to_si
from oil_fluids import FluidDatabase, FluidSnapshot

from .coefficients import (
    PorousMediaCoefficients,
    derive_porous_coefficients,
    velocities_from_flow,
)
from .curve_fit import (
    FitResult,
    Sample,
    SampleLike,
    as_samples,
    fit,
    fit_statistics,
    generate_curve,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurveFitAnalysis:
    """Result of analyze_samples."""

    samples: tuple
    fit: FitResult
    r_squared: float
    rmse: float
    length: float  # m
    density: float  # kg/m³
    dynamic_viscosity: float  # Pa·s
    coefficients: PorousMediaCoefficients
    fluid: Optional[str] = None
    temperature: Optional[float] = None  # K

    def curve(self, count: int = 100):
        """Fitted curve over the sampled velocity range."""
        velocities = [s.velocity for s in self.samples]
        return generate_curve(
            self.fit.A, self.fit.B, min(velocities), max(velocities), count
        )

    def to_dict(self) -> Dict:
        d = self.coefficients.d
        return {
            "fluid": self.fluid,
            "temperature_K": self.temperature,
            "n_samples": len(self.samples),
            "A": self.fit.A,
            "B": self.fit.B,
            "r_squared": self.r_squared,
            "rmse": self.rmse,
            "length_m": self.length,
            "density": self.density,
            "dynamic_viscosity": self.dynamic_viscosity,
            "darcy_d": d,
            "forchheimer_f": self.coefficients.f,
            "permeability": 1.0 / d if d != 0.0 else float("nan"),
        }

    def to_series(self) -> pd.Series:
        return pd.Series(self.to_dict())


def analyze_samples(
    samples: Iterable[SampleLike],
    length: float,
    fluid: Optional[str] = None,
    temperature: Optional[float] = None,
    *,
    density: Optional[float] = None,
    viscosity: Optional[float] = None,
    database: Optional[FluidDatabase] = None,
) -> CurveFitAnalysis:
    """
    Fit the samples and derive the porous media coefficients

    Parameters:
    -----------
    samples : iterable of (velocity [m/s], pressure_loss [Pa])
        Measured data, at least three points
    length : float
        Sample length [m]
    fluid : str, optional
        Fluid name in the database; needed unless density and viscosity
        are both given
    temperature : float, optional
        Test temperature [K]; needed together with fluid
    density : float, optional
        Density [kg/m³], overrides the fluid database value
    viscosity : float, optional
        Dynamic viscosity [Pa·s], overrides the fluid database value
    database : FluidDatabase, optional
        Loaded fluid database; the packaged table is read if omitted

    Returns:
    --------
    CurveFitAnalysis
    """
    samples = tuple(as_samples(samples))
    result = fit(samples)
    stats = fit_statistics(samples, result)

    if density is None or viscosity is None:
        if fluid is None or temperature is None:
            raise ValueError(
                "Either a fluid and temperature or explicit density and "
                "viscosity are required"
            )
        if database is None:
            database = FluidDatabase()
        database.load_sync()
        snapshot: FluidSnapshot = database.snapshot(fluid, temperature)
        if density is None:
            density = snapshot.density
        if viscosity is None:
            viscosity = snapshot.dynamic_viscosity

    coefficients = derive_porous_coefficients(
        result.A, result.B, viscosity, density, length
    )
    logger.info(
        "Fit of %d samples: A=%.4e B=%.4e R²=%.6f",
        len(samples),
        result.A,
        result.B,
        stats["r_squared"],
    )

    return CurveFitAnalysis(
        samples=samples,
        fit=result,
        r_squared=stats["r_squared"],
        rmse=stats["rmse"],
        length=length,
        density=density,
        dynamic_viscosity=viscosity,
        coefficients=coefficients,
        fluid=fluid,
        temperature=temperature,
    )


def load_samples_csv(
    path: Union[str, Path],
    velocity_col: str = "velocity",
    pressure_col: str = "pressure_loss",
    *,
    flow_col: Optional[str] = None,
    area: Optional[float] = None,
    velocity_unit: str = "m/s",
    flow_unit: str = "m^3/s",
    pressure_unit: str = "Pa",
) -> List[Sample]:
    """
    Read samples from a CSV file.

    Velocities are read from velocity_col, or computed from flow_col and
    the cross-sectional area [m²] when flow_col is given. Values are
    converted to m/s and Pa; rows with a missing value are dropped.
    """
    df = pd.read_csv(path)

    x_col = flow_col if flow_col is not None else velocity_col
    missing = [c for c in (x_col, pressure_col) if c not in df.columns]
    if missing:
        raise ValueError(f"Missing columns in {path}: {', '.join(missing)}")

    df = df[[x_col, pressure_col]].apply(pd.to_numeric, errors="coerce")
    n_rows = len(df)
    df = df.dropna()
    if len(df) < n_rows:
        logger.info(
            "Dropped %d incomplete rows from %s", n_rows - len(df), path
        )

    pressures = [
        to_si(p, pressure_unit, "pressure") for p in df[pressure_col]
    ]
    if flow_col is not None:
        if area is None:
            raise ValueError("area is required to convert flow rates")
        flows = [to_si(q, flow_unit, "flow") for q in df[flow_col]]
        velocities = velocities_from_flow(flows, area)
    else:
        velocities = [
            to_si(u, velocity_unit, "velocity") for u in df[velocity_col]
        ]

    return [Sample(u, p) for u, p in zip(velocities, pressures)]
