"""Parameter utilities for porous media case files."""

from hydro_units import SI_UNITS, to_si, unit_type_of


def read_param_values(params_dict, parent_key="", sep="_"):
    """
    Flatten a case file section into {'fluid_temperature': {...}, ...}.

    Leaves are either {value, units, ...} mappings, copied as they are, or
    plain values such as a fluid name, stored as {'value': v, 'units': None}.
    Nested keys are joined with sep.

    >>> read_param_values({'sample': {'length': {'value': 25, 'units': 'mm'}}})
    {'sample_length': {'value': 25, 'units': 'mm'}}
    """
    flat = {}
    for key, value in params_dict.items():
        name = f"{parent_key}{sep}{key}" if parent_key else key
        if not isinstance(value, dict):
            flat[name] = {"value": value, "units": None}
        elif "value" in value:
            flat[name] = dict(value)
        else:
            flat.update(read_param_values(value, parent_key=name, sep=sep))
    return flat


def read_param_values_si(params_dict, parent_key="", sep="_"):
    """
    Flatten nested parameter dictionary and convert values to SI units.

    Like read_param_values, but every parameter with a 'units' field is
    converted to the SI base unit of its quantity (temperatures to K) using
    the hydro_units tables. The returned 'units' field holds the SI unit
    token; the original spelling is kept under 'input_units'.

    Examples
    --------
    >>> params = {'sample': {'length': {'value': 100, 'units': 'mm'}}}
    >>> result = read_param_values_si(params)
    >>> result['sample_length']
    {'value': 0.1, 'units': 'm', 'input_units': 'mm'}

    See Also
    --------
    read_param_values : Flatten without converting units
    """
    params_flat = read_param_values(
        params_dict, parent_key=parent_key, sep=sep
    )

    for param in params_flat.values():
        units = param.get("units")
        if units is None:
            continue
        quantity = unit_type_of(units)
        param["value"] = to_si(param["value"], units)
        param["input_units"] = units
        param["units"] = SI_UNITS[quantity]

    return params_flat
