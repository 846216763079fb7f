"""
Darcy and Forchheimer coefficients of a porous sample.

From the fitted pressure loss dP = A*u + B*u**2 over a sample of length L,
the Darcy-Forchheimer equation

    dP / L = mu * d * u + (rho / 2) * f * u**2

gives d = A / (mu * L) and f = 2 * B / (rho * L).
"""

import math
from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List

from .errors import DegenerateInputError


@dataclass(frozen=True)
class PorousMediaCoefficients:
    """Viscous (Darcy) and inertial (Forchheimer) resistance."""

    d: float  # Darcy coefficient [1/m²]
    f: float  # Forchheimer coefficient [1/m]

    @property
    def permeability(self) -> float:
        """Permeability kappa = 1/d [m²]"""
        if self.d == 0.0:
            raise DegenerateInputError(
                "Permeability is undefined for a zero Darcy coefficient"
            )
        return 1.0 / self.d

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def _check_finite(**values):
    for name, value in values.items():
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite, got {value!r}")


def derive_porous_coefficients(
    A: float,
    B: float,
    mu: float,
    rho: float,
    length: float,
) -> PorousMediaCoefficients:
    """
    Darcy and Forchheimer coefficients from fitted A and B

    Parameters:
    -----------
    A : float
        Linear fit coefficient [Pa·s/m]
    B : float
        Quadratic fit coefficient [Pa·s²/m²]
    mu : float
        Dynamic viscosity [Pa·s]
    rho : float
        Density [kg/m³]
    length : float
        Sample length in the flow direction [m]

    Returns:
    --------
    PorousMediaCoefficients
        d = A / (mu * L) [1/m²], f = 2B / (rho * L) [1/m]

    Raises:
    -------
    DegenerateInputError
        If mu * L or rho * L is zero
    """
    _check_finite(A=A, B=B, mu=mu, rho=rho, length=length)

    viscous = mu * length
    inertial = rho * length
    if viscous == 0.0:
        raise DegenerateInputError(
            "Darcy coefficient needs a non-zero viscosity and length"
        )
    if inertial == 0.0:
        raise DegenerateInputError(
            "Forchheimer coefficient needs a non-zero density and length"
        )
    return PorousMediaCoefficients(d=A / viscous, f=2.0 * B / inertial)


def velocities_from_flow(
    flow_rates: Iterable[float], area: float
) -> List[float]:
    """Superficial velocities u = Q / A [m/s] from flow rates [m³/s]."""
    if not math.isfinite(area) or area <= 0:
        raise ValueError(f"Cross-sectional area must be positive, got {area}")
    return [q / area for q in flow_rates]
