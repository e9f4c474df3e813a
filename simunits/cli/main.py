"""
Command-line interface for simunits.

Usage:
    python -m simunits list
    python -m simunits convert FAMILY FUNCTION VALUE [--metric | --imperial] [--json]
    python -m simunits pressure VALUE [--from UNIT] --to UNIT [--json]
    python -m simunits format STYLE VALUE [--metric | --imperial]
    python -m simunits format-pressure VALUE --from UNIT [--to UNIT] [--no-unit]
    python -m simunits compare-times T1 T2 [--json]
    python -m simunits serve [--port 8000]
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from simunits import __version__
from simunits.config import Settings, apply_number_locale, build_formatter, get_settings
from simunits.conversions import CANONICAL_UNITS, list_conversions
from simunits.formatting import FORMAT_STYLES
from simunits.models.inputs import (
    ConversionRequest,
    PressureConversionRequest,
    TimeComparisonRequest,
)
from simunits.operations import run_conversion, run_pressure_conversion, run_time_comparison
from simunits.pressure_registry import PressureUnit, UnsupportedUnitError, parse_pressure

logger = logging.getLogger(__name__)

PRESSURE_UNIT_CHOICES = [unit.value for unit in PressureUnit]


def _add_unit_system_flags(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--metric",
        dest="is_metric",
        action="store_const",
        const=True,
        default=None,
        help="Use metric units (default from SIMUNITS_IS_METRIC)",
    )
    group.add_argument(
        "--imperial",
        dest="is_metric",
        action="store_const",
        const=False,
        help="Use imperial units",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="simunits",
        description="Unit conversion and display formatting for vehicle simulation values.",
    )
    parser.add_argument("--version", action="version", version=f"simunits {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # list command
    subparsers.add_parser("list", help="List quantity families and their conversion functions")

    # convert command
    convert_parser = subparsers.add_parser("convert", help="Apply one conversion function")
    convert_parser.add_argument("family", help="Quantity family, e.g. length")
    convert_parser.add_argument("function", help="Function name, e.g. to_mi")
    convert_parser.add_argument("value", type=float, help="Value to convert")
    _add_unit_system_flags(convert_parser)
    convert_parser.add_argument("--json", action="store_true", help="Print the result as JSON")

    # pressure command
    pressure_parser = subparsers.add_parser(
        "pressure",
        help="Convert a pressure between units",
    )
    pressure_parser.add_argument(
        "value",
        help='Pressure value, either a number (see --from) or text such as "30 psi"',
    )
    pressure_parser.add_argument(
        "--from",
        dest="from_unit",
        choices=PRESSURE_UNIT_CHOICES,
        default=None,
        help="Unit of a plain numeric value (default: kpa)",
    )
    pressure_parser.add_argument("--to", dest="to_unit", choices=PRESSURE_UNIT_CHOICES, required=True)
    pressure_parser.add_argument("--json", action="store_true", help="Print the result as JSON")

    # format command
    format_parser = subparsers.add_parser(
        "format",
        help="Format a speed (m/s), distance (m) or mass (kg) for display",
    )
    format_parser.add_argument("style", choices=sorted(FORMAT_STYLES))
    format_parser.add_argument("value", type=float, help="Value in canonical units")
    _add_unit_system_flags(format_parser)

    # format-pressure command
    format_pressure_parser = subparsers.add_parser(
        "format-pressure",
        help="Format a pressure in another unit",
    )
    format_pressure_parser.add_argument("value", type=float)
    format_pressure_parser.add_argument(
        "--from", dest="from_unit", choices=PRESSURE_UNIT_CHOICES, required=True
    )
    format_pressure_parser.add_argument(
        "--to",
        dest="to_unit",
        choices=PRESSURE_UNIT_CHOICES,
        default=None,
        help="Display unit (default from SIMUNITS_PRESSURE_UNIT)",
    )
    format_pressure_parser.add_argument(
        "--no-unit",
        dest="unit_displayed",
        action="store_false",
        help="Omit the unit label",
    )

    # compare-times command
    compare_parser = subparsers.add_parser(
        "compare-times",
        help="Order two times of day (night runs past midnight)",
    )
    compare_parser.add_argument("time1", help="Seconds since midnight or HH:MM[:SS]")
    compare_parser.add_argument("time2", help="Seconds since midnight or HH:MM[:SS]")
    compare_parser.add_argument("--json", action="store_true", help="Print the result as JSON")

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Start the FastAPI web server")
    serve_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    serve_parser.add_argument(
        "--port", "-p",
        type=int,
        default=8000,
        help="Port to listen on (default: 8000)",
    )
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )

    return parser


def cmd_list(args: argparse.Namespace, settings: Settings) -> int:
    """List conversion functions per family."""
    for family, functions in list_conversions().items():
        print(f"{family} [{CANONICAL_UNITS[family]}]")
        for name in functions:
            print(f"  {name}")
    return 0


def cmd_convert(args: argparse.Namespace, settings: Settings) -> int:
    """Apply one conversion function."""
    is_metric = settings.is_metric if args.is_metric is None else args.is_metric
    request = ConversionRequest(
        family=args.family,
        function=args.function,
        value=args.value,
        is_metric=is_metric,
    )
    try:
        result = run_conversion(request)
    except KeyError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        print("Run 'python -m simunits list' to see available conversions.", file=sys.stderr)
        return 1

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        print(f"{result.result:.6g}")
    return 0


def cmd_pressure(args: argparse.Namespace, settings: Settings) -> int:
    """Convert a pressure between units."""
    try:
        value = float(args.value)
        from_unit = PressureUnit(args.from_unit or PressureUnit.KPA)
    except ValueError:
        if args.from_unit:
            print("Error: --from cannot be combined with a value that has a unit", file=sys.stderr)
            return 1
        value, from_unit = parse_pressure(args.value)

    request = PressureConversionRequest(
        value=value,
        from_unit=from_unit,
        to_unit=PressureUnit(args.to_unit),
    )
    result = run_pressure_conversion(request)

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        print(f"{result.result:.6g}")
    return 0


def cmd_format(args: argparse.Namespace, settings: Settings) -> int:
    """Format a speed, distance or mass."""
    is_metric = settings.is_metric if args.is_metric is None else args.is_metric
    formatter = build_formatter(settings)
    print(formatter.format_quantity(args.style, args.value, is_metric))
    return 0


def cmd_format_pressure(args: argparse.Namespace, settings: Settings) -> int:
    """Format a pressure."""
    formatter = build_formatter(settings)
    output_unit = PressureUnit(args.to_unit) if args.to_unit else settings.pressure_unit
    print(
        formatter.format_pressure(
            args.value,
            PressureUnit(args.from_unit),
            output_unit,
            args.unit_displayed,
        )
    )
    return 0


def cmd_compare_times(args: argparse.Namespace, settings: Settings) -> int:
    """Order two times of day."""
    request = TimeComparisonRequest(time1=args.time1, time2=args.time2)
    result = run_time_comparison(request)

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        print(f"earliest: {result.earliest_clock}")
        print(f"latest:   {result.latest_clock}")
    return 0


def cmd_serve(args: argparse.Namespace, settings: Settings) -> int:
    """Start the FastAPI web server."""
    try:
        import uvicorn

        print("\nStarting simunits API", file=sys.stderr)
        print(f"API: http://{args.host}:{args.port}/", file=sys.stderr)
        print(f"Docs: http://{args.host}:{args.port}/docs", file=sys.stderr)
        print("\nPress Ctrl+C to stop\n", file=sys.stderr)

        uvicorn.run(
            "simunits.api.server:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
            log_level=settings.log_level.lower(),
        )
        return 0

    except ImportError as e:
        print(f"Error: Missing dependency: {e}", file=sys.stderr)
        print("Install with: pip install uvicorn fastapi", file=sys.stderr)
        return 1


def cli(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    apply_number_locale(settings)
    logger.debug("Running %r with %r", args.command, settings)

    commands = {
        "list": cmd_list,
        "convert": cmd_convert,
        "pressure": cmd_pressure,
        "format": cmd_format,
        "format-pressure": cmd_format_pressure,
        "compare-times": cmd_compare_times,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args, settings)
    except UnsupportedUnitError as e:
        print(f"Unit Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        # pydantic ValidationError is a ValueError too
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1


def main():
    """Console script entrypoint wrapper."""
    return cli()


if __name__ == "__main__":
    sys.exit(cli())
