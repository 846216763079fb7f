"""Exceptions raised by the unit conversion table."""


class UnknownUnitError(ValueError):
    """Unit token is not registered in any quantity table."""

    def __init__(self, unit):
        self.unit = unit
        super().__init__(f"Unknown unit: {unit!r}")


class IncompatibleUnitsError(ValueError):
    """Both units are known but belong to different quantities."""

    def __init__(self, from_unit, to_unit, from_type=None, to_type=None):
        self.from_unit = from_unit
        self.to_unit = to_unit
        self.from_type = from_type
        self.to_type = to_type
        super().__init__(
            f"Cannot convert {from_unit!r} ({from_type}) "
            f"to {to_unit!r} ({to_type})"
        )
