"""
Conversion factor tables.

Every linear quantity maps each unit token to its multiplicative factor
relative to the SI base unit of that quantity, so that

    value_SI = value * FACTORS[unit]

Temperature is affine and handled separately (see converter.py).
"""

from typing import Dict

# Length (base unit: m)
LENGTH_FACTORS = {
    "m": 1.0,
    "cm": 0.01,
    "mm": 0.001,
    "in": 0.0254,
    "ft": 0.3048,
}

# Area (base unit: m^2)
AREA_FACTORS = {
    "m^2": 1.0,
    "cm^2": 1e-4,
    "mm^2": 1e-6,
    "in^2": 0.00064516,
    "ft^2": 0.09290304,
}

# Density (base unit: kg/m^3)
DENSITY_FACTORS = {
    "kg/m^3": 1.0,
    "g/cm^3": 1000.0,
    "lb/ft^3": 16.01846337,
}

# Kinematic viscosity (base unit: m^2/s)
KINEMATIC_VISCOSITY_FACTORS = {
    "m^2/s": 1.0,
    "mm^2/s": 1e-6,
    "cSt": 1e-6,
}

# Dynamic viscosity (base unit: Pa*s)
DYNAMIC_VISCOSITY_FACTORS = {
    "Pa*s": 1.0,
    "mPa*s": 1e-3,
    "cP": 1e-3,
}

# Volume (base unit: m^3)
VOLUME_FACTORS = {
    "m^3": 1.0,
    "L": 1e-3,
    "mL": 1e-6,
    "in^3": 1.6387064e-5,
    "ft^3": 0.028316846592,
    "gal(US)": 0.003785411784,
    "gal(UK)": 0.00454609,
}

# Volumetric flow rate (base unit: m^3/s)
FLOW_FACTORS = {
    "m^3/s": 1.0,
    "m^3/h": 1.0 / 3600,
    "L/s": 1e-3,
    "L/min": 1e-3 / 60,
    "gpm": 0.003785411784 / 60,
    "gal/h": 0.003785411784 / 3600,
    "ft^3/s": 0.028316846592,
}

# Mass flow rate (base unit: kg/s)
MASS_FLOW_FACTORS = {
    "kg/s": 1.0,
    "kg/h": 1.0 / 3600,
    "lb/s": 0.45359237,
}

# Velocity (base unit: m/s)
VELOCITY_FACTORS = {
    "m/s": 1.0,
    "cm/s": 0.01,
    "mm/s": 0.001,
    "km/h": 1.0 / 3.6,
    "ft/s": 0.3048,
    "in/s": 0.0254,
}

# Pressure (base unit: Pa)
PRESSURE_FACTORS = {
    "Pa": 1.0,
    "kPa": 1e3,
    "MPa": 1e6,
    "GPa": 1e9,
    "bar": 1e5,
    "psi": 6894.757293168,
    "atm": 101325.0,
}

# Force (base unit: N)
FORCE_FACTORS = {
    "N": 1.0,
    "kN": 1e3,
    "lbf": 4.4482216152605,
    "kgf": 9.80665,
}

TEMPERATURE_UNITS = ("C", "F", "K")

# Registry of linear quantity tables, keyed by quantity type
UNIT_TYPE_REGISTRY: Dict[str, Dict[str, float]] = {
    "length": LENGTH_FACTORS,
    "area": AREA_FACTORS,
    "density": DENSITY_FACTORS,
    "kinematic_viscosity": KINEMATIC_VISCOSITY_FACTORS,
    "dynamic_viscosity": DYNAMIC_VISCOSITY_FACTORS,
    "volume": VOLUME_FACTORS,
    "flow": FLOW_FACTORS,
    "mass_flow": MASS_FLOW_FACTORS,
    "velocity": VELOCITY_FACTORS,
    "pressure": PRESSURE_FACTORS,
    "force": FORCE_FACTORS,
}

# SI base unit of each quantity type
SI_UNITS = {
    "length": "m",
    "area": "m^2",
    "density": "kg/m^3",
    "kinematic_viscosity": "m^2/s",
    "dynamic_viscosity": "Pa*s",
    "volume": "m^3",
    "flow": "m^3/s",
    "mass_flow": "kg/s",
    "velocity": "m/s",
    "pressure": "Pa",
    "force": "N",
    "temperature": "K",
}

# Spellings accepted on input, mapped to the canonical token
UNIT_ALIASES = {
    "Pa·s": "Pa*s",
    "Pa.s": "Pa*s",
    "mPa·s": "mPa*s",
    "mPa.s": "mPa*s",
    "m²": "m^2",
    "cm²": "cm^2",
    "mm²": "mm^2",
    "in²": "in^2",
    "ft²": "ft^2",
    "m³": "m^3",
    "in³": "in^3",
    "ft³": "ft^3",
    "kg/m³": "kg/m^3",
    "g/cm³": "g/cm^3",
    "lb/ft³": "lb/ft^3",
    "m²/s": "m^2/s",
    "mm²/s": "mm^2/s",
    "m³/s": "m^3/s",
    "m³/h": "m^3/h",
    "ft³/s": "ft^3/s",
    "l": "L",
    "l/s": "L/s",
    "l/min": "L/min",
    "cst": "cSt",
    "cp": "cP",
    "°C": "C",
    "°F": "F",
    "degC": "C",
    "degF": "F",
}
