"""Long names and units of the quantities reported by an analysis."""

VAR_INFO = {
    "A": {
        "long_name": "Linear Fit Coefficient",
        "units": "Pa*s/m",
        "description": "Viscous term of the fitted pressure loss",
    },
    "B": {
        "long_name": "Quadratic Fit Coefficient",
        "units": "Pa*s^2/m^2",
        "description": "Inertial term of the fitted pressure loss",
    },
    "r_squared": {
        "long_name": "Coefficient of Determination",
        "units": "-",
        "description": "Fraction of pressure loss variance explained",
    },
    "density": {
        "long_name": "Fluid Density",
        "units": "kg/m^3",
        "description": "Density of the test fluid at test temperature",
    },
    "kinematic_viscosity": {
        "long_name": "Kinematic Viscosity",
        "units": "mm^2/s",
        "description": "Kinematic viscosity from the Walther equation",
    },
    "dynamic_viscosity": {
        "long_name": "Dynamic Viscosity",
        "units": "Pa*s",
        "description": "Kinematic viscosity times density",
    },
    "darcy_d": {
        "long_name": "Darcy Coefficient",
        "units": "1/m^2",
        "description": "Viscous resistance, inverse permeability",
    },
    "forchheimer_f": {
        "long_name": "Forchheimer Coefficient",
        "units": "1/m",
        "description": "Inertial resistance of the porous sample",
    },
    "permeability": {
        "long_name": "Permeability",
        "units": "m^2",
        "description": "Inverse of the Darcy coefficient",
    },
}


def column_label(key):
    """Column heading 'Long Name [units]' for a result key."""
    info = VAR_INFO.get(key)
    if info is None:
        return key
    return f"{info['long_name']} [{info['units']}]"
