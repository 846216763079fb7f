"""
Command line interface for the hydraulic calculators.

Examples:
  hydrofit fluids
  hydrofit props "ISO VG 46" 40
  hydrofit table "ISO VG 46" --t-min 0 --t-max 100 --step 10 --csv vg46.csv
  hydrofit fit case.yaml
  hydrofit fit samples.csv --fluid "ISO VG 46" --temperature 40 \\
      --length 25 --length-unit mm --pressure-unit kPa --csv-out result.csv
"""

import argparse
import logging
import sys
from pathlib import Path

import pandas as pd

from hydro_units import convert, to_si
from oil_fluids import FLUID_DATA_PATH, FluidDatabase

from .analysis import analyze_samples, load_samples_csv
from .cases import load_case_spec, run_case
from .config import column_label

logger = logging.getLogger(__name__)

TEMPERATURE_CHOICES = ["C", "F", "K"]


def build_parser():
    parser = argparse.ArgumentParser(
        prog="hydrofit",
        description="Hydraulic oil properties and porous media curve fits",
        epilog=__doc__.split("Examples:", 1)[1].rstrip(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Show log messages (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--data",
        type=Path,
        default=FLUID_DATA_PATH,
        help="Fluid reference table (JSON)",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    sub.add_parser("fluids", help="List the fluids in the reference table")

    p_props = sub.add_parser(
        "props", help="Fluid properties at one temperature"
    )
    p_props.add_argument("name", help="Fluid name, e.g. 'ISO VG 46'")
    p_props.add_argument("temperature", type=float)
    p_props.add_argument(
        "--unit", choices=TEMPERATURE_CHOICES, default="C",
        help="Temperature unit (default C)",
    )

    p_table = sub.add_parser(
        "table", help="Fluid properties over a temperature range"
    )
    p_table.add_argument("name", help="Fluid name")
    p_table.add_argument("--t-min", type=float, default=-40.0)
    p_table.add_argument("--t-max", type=float, default=100.0)
    p_table.add_argument("--step", type=float, default=1.0)
    p_table.add_argument(
        "--unit", choices=TEMPERATURE_CHOICES, default="C",
        help="Unit of --t-min, --t-max and --step (default C)",
    )
    p_table.add_argument("--csv", type=Path, help="Write the table to CSV")

    p_fit = sub.add_parser(
        "fit",
        help="Fit dP = A*u + B*u^2 and derive Darcy-Forchheimer "
        "coefficients",
    )
    p_fit.add_argument(
        "input", type=Path, help="YAML case file or CSV of samples"
    )
    p_fit.add_argument("--fluid", help="Fluid name (CSV input)")
    p_fit.add_argument("--temperature", type=float, help="Test temperature")
    p_fit.add_argument(
        "--temperature-unit", choices=TEMPERATURE_CHOICES, default="C"
    )
    p_fit.add_argument("--length", type=float, help="Sample length")
    p_fit.add_argument("--length-unit", default="m")
    p_fit.add_argument(
        "--density", type=float, help="Density override [kg/m^3]"
    )
    p_fit.add_argument(
        "--viscosity", type=float, help="Dynamic viscosity override [Pa*s]"
    )
    p_fit.add_argument("--velocity-col", default="velocity")
    p_fit.add_argument("--pressure-col", default="pressure_loss")
    p_fit.add_argument(
        "--flow-col", help="Read flow rates from this column instead"
    )
    p_fit.add_argument("--area", type=float, help="Cross-sectional area")
    p_fit.add_argument("--area-unit", default="m^2")
    p_fit.add_argument("--velocity-unit", default="m/s")
    p_fit.add_argument("--flow-unit", default="m^3/s")
    p_fit.add_argument("--pressure-unit", default="Pa")
    p_fit.add_argument(
        "--curve-points", type=int, default=0,
        help="Also print this many intervals of the fitted curve",
    )
    p_fit.add_argument("--csv-out", type=Path, help="Write results to CSV")

    return parser


def _to_celsius(value, unit):
    return convert(unit, "C", value)


def cmd_fluids(args, db):
    for name in db.fluid_names():
        print(name)


def cmd_props(args, db):
    T = convert(args.unit, "K", args.temperature)
    snap = db.snapshot(args.name, T)
    print(f"Fluid: {snap.fluid}")
    print(f"  Temperature: {snap.temperature_C:.2f} °C ({T:.2f} K)")
    print(f"  {column_label('density')}: {snap.density:.2f}")
    print(
        f"  {column_label('kinematic_viscosity')}: "
        f"{snap.kinematic_viscosity:.4f}"
    )
    print(
        f"  {column_label('dynamic_viscosity')}: "
        f"{snap.dynamic_viscosity:.6g}"
    )


def cmd_table(args, db):
    T_min_C = _to_celsius(args.t_min, args.unit)
    T_max_C = _to_celsius(args.t_max, args.unit)
    step_C = _to_celsius(args.t_min + args.step, args.unit) - T_min_C
    table = db.get(args.name).property_table(T_min_C, T_max_C, step_C)

    if args.csv:
        args.csv.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(args.csv, index=False)
        print(f"Property table saved to {args.csv}")
    else:
        print(table.to_string(index=False))


def _fit_from_csv(args, db):
    if args.length is None:
        raise ValueError("--length is required for CSV input")
    area = None
    if args.area is not None:
        area = to_si(args.area, args.area_unit, "area")
    samples = load_samples_csv(
        args.input,
        velocity_col=args.velocity_col,
        pressure_col=args.pressure_col,
        flow_col=args.flow_col,
        area=area,
        velocity_unit=args.velocity_unit,
        flow_unit=args.flow_unit,
        pressure_unit=args.pressure_unit,
    )
    temperature = None
    if args.temperature is not None:
        temperature = convert(args.temperature_unit, "K", args.temperature)
    return analyze_samples(
        samples,
        length=to_si(args.length, args.length_unit, "length"),
        fluid=args.fluid,
        temperature=temperature,
        density=args.density,
        viscosity=args.viscosity,
        database=db,
    )


def cmd_fit(args, db):
    if args.input.suffix.lower() in (".yaml", ".yml"):
        spec = load_case_spec(args.input)
        print(f"Case: {spec.get('name', args.input.stem)}")
        analysis = run_case(spec, database=db)
    else:
        analysis = _fit_from_csv(args, db)

    results = analysis.to_series()
    for key, value in results.items():
        if value is None:
            continue
        if isinstance(value, float):
            value = f"{value:.6g}"
        print(f"  {column_label(key)}: {value}")

    if args.curve_points:
        curve = pd.DataFrame(
            analysis.curve(args.curve_points),
            columns=["velocity", "pressure_loss"],
        )
        print()
        print(curve.to_string(index=False))

    if args.csv_out:
        args.csv_out.parent.mkdir(parents=True, exist_ok=True)
        results.to_frame().T.to_csv(args.csv_out, index=False)
        print(f"Results saved to {args.csv_out}")


COMMANDS = {
    "fluids": cmd_fluids,
    "props": cmd_props,
    "table": cmd_table,
    "fit": cmd_fit,
}


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(
        args.verbose, logging.DEBUG
    )
    logging.basicConfig(
        level=level, format="%(levelname)s %(name)s: %(message)s"
    )

    db = FluidDatabase(args.data)
    try:
        db.load_sync()
        COMMANDS[args.cmd](args, db)
    except (ValueError, ZeroDivisionError, RuntimeError, OSError) as e:
        logger.debug("Command %s failed", args.cmd, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
