import json
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Tuple, Union

import numpy as np
import pandas as pd

from .errors import (
    InsufficientViscosityDataError,
    InvalidFluidDataError,
    InvalidTemperatureError,
)

logger = logging.getLogger(__name__)

ZERO_C = 273.15  # K
REFERENCE_TEMP_K = 288.15  # 15°C, reference for density data
DENSITY_COEFFICIENT = 0.00065  # 1/K, linear thermal expansion of oils
WALTHER_CONSTANT = 0.8  # mm²/s
WALTHER_ERROR_THRESHOLD = 5.0  # percent
TEMP_RANGE_C = (-40.0, 100.0)  # default tabulation range


def _check_temperature(
    T: Union[float, np.ndarray],
) -> Tuple[np.ndarray, bool]:
    """Validate absolute temperatures, return (array, is_scalar)."""
    is_scalar = np.ndim(T) == 0
    try:
        T_arr = np.atleast_1d(np.asarray(T, dtype=float))
    except (TypeError, ValueError):
        raise InvalidTemperatureError(f"Invalid temperature: {T!r}")
    if not np.all(np.isfinite(T_arr)):
        raise InvalidTemperatureError(f"Invalid temperature: {T!r}")
    if np.any(T_arr <= 0.0):
        raise InvalidTemperatureError(
            f"Absolute temperature must be positive, got {T!r} K"
        )
    return T_arr, is_scalar


def _unwrap(result: np.ndarray, is_scalar: bool) -> Union[float, np.ndarray]:
    return float(result[0]) if is_scalar else result


class PropertyCorrelation(ABC):
    """
    Abstract base class for property correlations
    """

    @abstractmethod
    def evaluate(
        self, T: Union[float, np.ndarray]
    ) -> Union[float, np.ndarray]:
        """Evaluate property at temperature T [K]"""
        pass

    @abstractmethod
    def get_valid_range(self) -> Tuple[float, float]:
        """Return valid temperature range (T_min, T_max)"""
        pass

    @abstractmethod
    def to_dict(self) -> Dict:
        """Serialize correlation to dictionary"""
        pass


class LinearExpansionDensity(PropertyCorrelation):
    """
    Linear thermal expansion: rho(T) = rho_ref * (1 - alpha * (T - T_ref))

    The standard approximation for mineral and synthetic hydraulic oils,
    referenced to the density at 15°C found on product data sheets.
    """

    def __init__(
        self,
        rho_ref: float,
        alpha: float = DENSITY_COEFFICIENT,
        T_ref: float = REFERENCE_TEMP_K,
        T_min: float = TEMP_RANGE_C[0] + ZERO_C,
        T_max: float = TEMP_RANGE_C[1] + ZERO_C,
        name: str = "LinearExpansion",
    ):
        if not np.isfinite(float(rho_ref)) or rho_ref <= 0:
            raise InvalidFluidDataError(
                f"Reference density must be positive, got {rho_ref!r}"
            )
        self.rho_ref = float(rho_ref)
        self.alpha = alpha
        self.T_ref = T_ref
        self.T_min = T_min
        self.T_max = T_max
        self.name = name

    def evaluate(
        self, T: Union[float, np.ndarray]
    ) -> Union[float, np.ndarray]:
        T_arr, is_scalar = _check_temperature(T)
        result = self.rho_ref * (1.0 - self.alpha * (T_arr - self.T_ref))
        return _unwrap(result, is_scalar)

    def get_valid_range(self) -> Tuple[float, float]:
        return (self.T_min, self.T_max)

    def to_dict(self) -> Dict:
        return {
            "type": "linear_expansion",
            "rho_ref": self.rho_ref,
            "alpha": self.alpha,
            "T_ref": self.T_ref,
            "T_min": self.T_min,
            "T_max": self.T_max,
            "name": self.name,
        }


def walther_transform(nu: Union[float, np.ndarray]):
    """W(nu) = log10(log10(nu + 0.8)), nu in mm²/s"""
    return np.log10(np.log10(nu + WALTHER_CONSTANT))


def inverse_walther_transform(W: Union[float, np.ndarray]):
    """nu(W) = 10**(10**W) - 0.8, nu in mm²/s"""
    return 10.0 ** (10.0**W) - WALTHER_CONSTANT


class WaltherViscosity(PropertyCorrelation):
    """
    Walther (ASTM D341) kinematic viscosity correlation:

        log10(log10(nu + 0.8)) = m * log10(T) + n

    with nu in mm²/s and T in K. The two parameters are determined exactly
    from two reference points (T1, nu1), (T2, nu2), usually the 40°C and
    100°C grade viscosities.

    After construction, ``reference_errors`` holds the percent error of the
    fitted line at the two reference temperatures. Errors above
    WALTHER_ERROR_THRESHOLD are logged as a warning and never raised.
    """

    def __init__(
        self,
        T1: float,
        nu1: float,
        T2: float,
        nu2: float,
        T_min: float = TEMP_RANGE_C[0] + ZERO_C,
        T_max: float = TEMP_RANGE_C[1] + ZERO_C,
        name: str = "Walther",
    ):
        try:
            values = np.array([T1, nu1, T2, nu2], dtype=float)
        except (TypeError, ValueError) as e:
            raise InvalidFluidDataError(
                f"Invalid viscosity data for {name}: {e}"
            ) from e
        if not np.all(np.isfinite(values)):
            raise InvalidFluidDataError(
                f"Invalid viscosity data for {name}: {values.tolist()}"
            )
        if T1 <= 0 or T2 <= 0:
            raise InvalidFluidDataError(
                f"Reference temperatures must be positive K for {name}"
            )
        if T1 == T2:
            raise InvalidFluidDataError(
                f"Reference temperatures must differ for {name}"
            )
        # log10(nu + 0.8) must be positive for the double logarithm
        if nu1 <= 1.0 - WALTHER_CONSTANT or nu2 <= 1.0 - WALTHER_CONSTANT:
            raise InvalidFluidDataError(
                f"Kinematic viscosity must exceed "
                f"{1.0 - WALTHER_CONSTANT:.1f} mm²/s for {name}"
            )

        self.T1, self.nu1 = float(T1), float(nu1)
        self.T2, self.nu2 = float(T2), float(nu2)
        self.T_min = T_min
        self.T_max = T_max
        self.name = name

        W1 = walther_transform(self.nu1)
        W2 = walther_transform(self.nu2)
        self.m = float((W2 - W1) / (np.log10(self.T2) - np.log10(self.T1)))
        self.n = float(W1 - self.m * np.log10(self.T1))

        self.reference_errors = self.validate()

    @classmethod
    def from_points(cls, points: List[Dict], **kwargs) -> "WaltherViscosity":
        """
        Build from reference points as stored in the fluid table:
        [{"temperature": K, "kinematicViscosity": mm²/s}, ...]

        Only the first two points are used.
        """
        if points is None or len(points) < 2:
            n_points = 0 if points is None else len(points)
            raise InsufficientViscosityDataError(
                f"Walther fit needs two reference points, got {n_points}"
            )
        if len(points) > 2:
            logger.debug(
                "%s: %d viscosity points given, using the first two",
                kwargs.get("name", cls.__name__),
                len(points),
            )
        try:
            (T1, nu1), (T2, nu2) = (
                (p["temperature"], p["kinematicViscosity"])
                for p in points[:2]
            )
        except (KeyError, TypeError) as e:
            raise InvalidFluidDataError(
                f"Malformed viscosity reference point: {e}"
            ) from e
        return cls(T1, nu1, T2, nu2, **kwargs)

    def _evaluate_line(self, T_arr: np.ndarray) -> np.ndarray:
        return inverse_walther_transform(self.m * np.log10(T_arr) + self.n)

    def validate(self) -> Tuple[float, float]:
        """Percent error of the fitted line at both reference points."""
        check = self._evaluate_line(np.array([self.T1, self.T2]))
        err1 = abs((check[0] - self.nu1) / self.nu1) * 100
        err2 = abs((check[1] - self.nu2) / self.nu2) * 100

        logger.debug(
            "Walther params for %s: m = %.6f, n = %.6f", self.name, self.m,
            self.n,
        )
        if err1 > WALTHER_ERROR_THRESHOLD or err2 > WALTHER_ERROR_THRESHOLD:
            logger.warning(
                "Walther transform accuracy warning for %s: "
                "errors %.2f%%, %.2f%%",
                self.name,
                err1,
                err2,
            )
        return float(err1), float(err2)

    def evaluate(
        self, T: Union[float, np.ndarray]
    ) -> Union[float, np.ndarray]:
        """Kinematic viscosity [mm²/s] at temperature T [K]"""
        T_arr, is_scalar = _check_temperature(T)
        return _unwrap(self._evaluate_line(T_arr), is_scalar)

    def get_valid_range(self) -> Tuple[float, float]:
        return (self.T_min, self.T_max)

    def to_dict(self) -> Dict:
        return {
            "type": "walther",
            "reference_points": [
                {"temperature": self.T1, "kinematicViscosity": self.nu1},
                {"temperature": self.T2, "kinematicViscosity": self.nu2},
            ],
            "m": self.m,
            "n": self.n,
            "T_min": self.T_min,
            "T_max": self.T_max,
            "name": self.name,
        }


class FluidProperties:
    """
    Fluid property model with temperature-dependent correlations

    Properties:
    - density (rho) [kg/m³]
    - kinematic_viscosity (nu) [mm²/s]
    - dynamic_viscosity (mu) [Pa·s], derived as nu * 1e-6 * rho
    """

    def __init__(self, name: str):
        self.name = name

        # Property correlations
        self.correlations: Dict[str, PropertyCorrelation] = {}

        # Reference conditions
        self.T_reference = REFERENCE_TEMP_K  # K

    def set_density(self, correlation: PropertyCorrelation):
        """Set density correlation"""
        self.correlations["density"] = correlation

    def set_kinematic_viscosity(self, correlation: PropertyCorrelation):
        """Set kinematic viscosity correlation"""
        self.correlations["kinematic_viscosity"] = correlation

    def density(self, T: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        """Get density [kg/m³] at temperature T [K]"""
        if "density" not in self.correlations:
            raise ValueError(
                f"Density correlation not defined for {self.name}"
            )
        return self.correlations["density"].evaluate(T)

    def kinematic_viscosity(
        self, T: Union[float, np.ndarray]
    ) -> Union[float, np.ndarray]:
        """Get kinematic viscosity [mm²/s] at temperature T [K]"""
        if "kinematic_viscosity" not in self.correlations:
            raise ValueError(
                f"Kinematic viscosity correlation not defined for {self.name}"
            )
        return self.correlations["kinematic_viscosity"].evaluate(T)

    def dynamic_viscosity(
        self, T: Union[float, np.ndarray]
    ) -> Union[float, np.ndarray]:
        """Get dynamic viscosity [Pa·s] at temperature T [K]"""
        return self.kinematic_viscosity(T) * 1e-6 * self.density(T)

    def get_all_properties(self, T: Union[float, np.ndarray]) -> Dict:
        """Get all properties at temperature T [K]"""
        props = {}

        if "density" in self.correlations:
            props["density"] = self.density(T)
        if "kinematic_viscosity" in self.correlations:
            props["kinematic_viscosity"] = self.kinematic_viscosity(T)

        # Derived properties
        if "density" in props and "kinematic_viscosity" in props:
            props["dynamic_viscosity"] = (
                props["kinematic_viscosity"] * 1e-6 * props["density"]
            )

        return props

    def property_table(
        self,
        T_min_C: float = TEMP_RANGE_C[0],
        T_max_C: float = TEMP_RANGE_C[1],
        step_C: float = 1.0,
    ) -> pd.DataFrame:
        """
        Tabulate properties over a temperature range

        Parameters:
        -----------
        T_min_C, T_max_C : float
            Temperature range [°C], both ends included
        step_C : float, default 1.0
            Temperature increment [°C]

        Returns:
        --------
        pd.DataFrame
            Columns T_C, T_K and one column per available property,
            in the units of the correlations (SI except mm²/s for nu)
        """
        if step_C <= 0:
            raise ValueError(f"step_C must be positive, got {step_C}")
        if T_max_C < T_min_C:
            raise ValueError("T_max_C must not be lower than T_min_C")

        n_steps = int(np.floor((T_max_C - T_min_C) / step_C + 1e-9))
        T_C = T_min_C + step_C * np.arange(n_steps + 1)
        T_K = T_C + ZERO_C

        data = {"T_C": T_C, "T_K": T_K}
        data.update(self.get_all_properties(T_K))
        return pd.DataFrame(data)

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "T_reference": self.T_reference,
            "correlations": {
                name: corr.to_dict()
                for name, corr in self.correlations.items()
            },
        }

    def save_to_json(self, filename: str):
        """Save fluid properties to JSON file"""
        with open(filename, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

        logger.info("Fluid properties saved to %s", filename)

    def summary(self):
        """Print summary of defined properties"""
        print(f"Fluid: {self.name}")
        print(f"  Reference temperature: T = {self.T_reference:.2f} K")
        print("\nDefined properties:")

        for prop_name, corr in self.correlations.items():
            T_min, T_max = corr.get_valid_range()
            print(
                f"  • {prop_name}: {corr.name} "
                f"({T_min - ZERO_C:.1f}°C to {T_max - ZERO_C:.1f}°C)"
            )
