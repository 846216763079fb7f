"""Tests for Darcy and Forchheimer coefficient derivation."""

import pytest

from porous_media import (
    DegenerateInputError,
    PorousMediaCoefficients,
    derive_porous_coefficients,
    velocities_from_flow,
)


def test_derive_porous_coefficients():
    """Test d = A/(mu L) and f = 2B/(rho L)."""
    coeffs = derive_porous_coefficients(
        A=2.5, B=0.8, mu=0.001, rho=998.0, length=0.1
    )

    assert coeffs.d == pytest.approx(25000.0)
    assert coeffs.f == pytest.approx(1.6 / 99.8)
    assert coeffs.f == pytest.approx(0.016032, rel=1e-4)


@pytest.mark.parametrize(
    "mu,rho,length",
    [(0.0, 998.0, 0.1), (0.001, 0.0, 0.1), (0.001, 998.0, 0.0)],
)
def test_derive_degenerate(mu, rho, length):
    """Test that zero divisors raise DegenerateInputError."""
    with pytest.raises(DegenerateInputError):
        derive_porous_coefficients(2.5, 0.8, mu, rho, length)

    # Also catchable as a plain ZeroDivisionError
    with pytest.raises(ZeroDivisionError):
        derive_porous_coefficients(2.5, 0.8, mu, rho, length)


def test_derive_non_finite():
    """Test that non-finite inputs raise ValueError."""
    with pytest.raises(ValueError):
        derive_porous_coefficients(float("inf"), 0.8, 0.001, 998.0, 0.1)


def test_permeability():
    """Test permeability as the inverse Darcy coefficient."""
    coeffs = PorousMediaCoefficients(d=25000.0, f=0.016)

    assert coeffs.permeability == pytest.approx(4e-5)
    assert coeffs.to_dict() == {"d": 25000.0, "f": 0.016}

    with pytest.raises(DegenerateInputError):
        PorousMediaCoefficients(d=0.0, f=1.0).permeability


def test_velocities_from_flow():
    """Test superficial velocity from flow rate and area."""
    velocities = velocities_from_flow([1e-3, 2e-3], area=0.01)

    assert velocities == pytest.approx([0.1, 0.2])

    with pytest.raises(ValueError):
        velocities_from_flow([1e-3], area=0.0)
