"""Exceptions raised by the curve fitting engine."""


class InsufficientDataError(ValueError):
    """Too few samples to determine the fit."""


class SingularSystemError(ValueError):
    """The normal-equation matrix is (numerically) singular."""


class UndefinedFitError(ValueError):
    """R² is undefined: all pressure losses are equal but not fitted."""


class DegenerateInputError(ZeroDivisionError):
    """A coefficient would require dividing by zero."""
