"""
Least-squares fit of the Darcy-Forchheimer pressure loss model.

The measured pressure loss over a porous sample is modelled as

    dP = A * u + B * u**2

with no intercept (zero flow, zero loss). Minimising
S = sum((y_i - A*x_i - B*x_i**2)**2) and setting dS/dA = dS/dB = 0 gives the
normal equations

    A * sum(x**2) + B * sum(x**3) = sum(x*y)
    A * sum(x**3) + B * sum(x**4) = sum(x**2 * y)

which are solved in closed form by Cramer's rule.
"""

from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List, NamedTuple, Tuple, Union

import numpy as np

from .errors import (
    InsufficientDataError,
    SingularSystemError,
    UndefinedFitError,
)

MIN_SAMPLES = 3
SINGULAR_EPSILON = 1e-10
DEFAULT_CURVE_POINTS = 100


class Sample(NamedTuple):
    """One measurement: superficial velocity [m/s] and pressure loss [Pa]."""

    velocity: float
    pressure_loss: float


@dataclass(frozen=True)
class FitResult:
    """Fitted coefficients of dP = A*u + B*u**2."""

    A: float  # linear coefficient [Pa·s/m]
    B: float  # quadratic coefficient [Pa·s²/m²]

    def predict(
        self, u: Union[float, np.ndarray]
    ) -> Union[float, np.ndarray]:
        return self.A * u + self.B * u * u

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


SampleLike = Union[Sample, Tuple[float, float]]


def as_samples(samples: Iterable[SampleLike]) -> List[Sample]:
    """Convert (velocity, pressure_loss) pairs to Sample tuples."""
    result = []
    for i, s in enumerate(samples):
        try:
            velocity, pressure_loss = s
        except (TypeError, ValueError):
            raise ValueError(
                f"Sample {i} must be a (velocity, pressure_loss) pair, "
                f"got {s!r}"
            ) from None
        result.append(Sample(velocity, pressure_loss))
    return result


def samples_to_arrays(
    samples: Iterable[SampleLike],
) -> Tuple[np.ndarray, np.ndarray]:
    """Split (velocity, pressure_loss) pairs into two float arrays."""
    pairs = [tuple(s) for s in samples]
    if not pairs:
        return np.empty(0), np.empty(0)
    try:
        data = np.asarray(pairs, dtype=float)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Samples must be numeric pairs: {e}") from e
    if data.ndim != 2 or data.shape[1] != 2:
        raise ValueError(
            "Each sample must be a (velocity, pressure_loss) pair"
        )
    if not np.all(np.isfinite(data)):
        raise ValueError("Samples must be finite numbers")
    return data[:, 0], data[:, 1]


def fit(samples: Iterable[SampleLike], relative: bool = False) -> FitResult:
    """
    Fit dP = A*u + B*u**2 to measured samples

    Parameters:
    -----------
    samples : iterable of (velocity, pressure_loss)
        At least MIN_SAMPLES measurements. Order does not matter and
        duplicates are allowed.
    relative : bool, default False
        Compare the determinant to SINGULAR_EPSILON * sum(x**2) * sum(x**4)
        instead of SINGULAR_EPSILON, so that very small velocity scales
        are not rejected.

    Returns:
    --------
    FitResult
        Linear coefficient A and quadratic coefficient B

    Raises:
    -------
    InsufficientDataError
        If fewer than three samples are given
    SingularSystemError
        If the velocities cannot separate A from B (e.g. all equal), i.e.
        the determinant magnitude is below SINGULAR_EPSILON
    """
    x, y = samples_to_arrays(samples)
    n = len(x)
    if n < MIN_SAMPLES:
        raise InsufficientDataError(
            f"At least {MIN_SAMPLES} data points required for curve "
            f"fitting, got {n}"
        )

    x2 = x * x
    sum_x2 = float(np.sum(x2))
    sum_x3 = float(np.sum(x2 * x))
    sum_x4 = float(np.sum(x2 * x2))
    sum_xy = float(np.sum(x * y))
    sum_x2y = float(np.sum(x2 * y))

    det = sum_x2 * sum_x4 - sum_x3 * sum_x3
    threshold = SINGULAR_EPSILON
    if relative:
        threshold *= sum_x2 * sum_x4
    if det == 0.0 or abs(det) < threshold:
        raise SingularSystemError(
            "Singular matrix - cannot solve for coefficients"
        )

    A = (sum_xy * sum_x4 - sum_x3 * sum_x2y) / det
    B = (sum_x2 * sum_x2y - sum_x3 * sum_xy) / det
    return FitResult(A=A, B=B)


def goodness_of_fit(
    samples: Iterable[SampleLike], A: float, B: float
) -> float:
    """
    Coefficient of determination R² = 1 - SS_res / SS_tot

    When every pressure loss is the same SS_tot is zero: R² is 1.0 if the
    model reproduces them exactly and UndefinedFitError is raised otherwise.
    """
    x, y = samples_to_arrays(samples)
    if len(x) == 0:
        raise InsufficientDataError("No samples to score")

    y_pred = A * x + B * x * x
    ss_res = float(np.sum((y - y_pred) ** 2))

    if np.all(y == y[0]):
        if ss_res == 0.0:
            return 1.0
        raise UndefinedFitError(
            "R² is undefined when all pressure losses are equal"
        )

    ss_tot = float(np.sum((y - np.mean(y)) ** 2))
    return 1.0 - ss_res / ss_tot


def fit_statistics(
    samples: Iterable[SampleLike], result: FitResult
) -> Dict[str, float]:
    """R², RMSE and MAE of a fit against its samples."""
    samples = list(samples)
    x, y = samples_to_arrays(samples)
    residuals = y - result.predict(x)
    return {
        "r_squared": goodness_of_fit(samples, result.A, result.B),
        "rmse": float(np.sqrt(np.mean(residuals**2))),
        "mae": float(np.mean(np.abs(residuals))),
        "n_samples": len(x),
    }


def generate_curve(
    A: float,
    B: float,
    x_min: float,
    x_max: float,
    count: int = DEFAULT_CURVE_POINTS,
) -> List[Tuple[float, float]]:
    """
    Points on the fitted curve for plotting.

    Returns count + 1 evenly spaced (x, y) pairs from x_min to x_max, both
    ends included. A new list is built on every call.
    """
    if int(count) != count or count < 1:
        raise ValueError(f"count must be a positive integer, got {count!r}")
    if not (np.isfinite(x_min) and np.isfinite(x_max)):
        raise ValueError("Curve bounds must be finite")
    xs = np.linspace(x_min, x_max, int(count) + 1)
    ys = A * xs + B * xs * xs
    return [(float(xi), float(yi)) for xi, yi in zip(xs, ys)]
