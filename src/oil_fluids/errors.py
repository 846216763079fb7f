"""Exceptions raised by the fluid property model."""


class UnknownFluidError(KeyError, ValueError):
    """Fluid name is not in the loaded reference table."""

    def __init__(self, name):
        self.name = name
        super().__init__(name)

    def __str__(self):
        return f"Unknown fluid: {self.name!r}"


class InvalidTemperatureError(ValueError):
    """Temperature is non-finite or not a positive absolute temperature."""


class InsufficientViscosityDataError(ValueError):
    """Fewer than two kinematic viscosity reference points are available."""


class InvalidFluidDataError(ValueError):
    """A reference record holds values the correlations cannot use."""


class DataLoadError(RuntimeError):
    """The fluid reference table could not be read or parsed."""
