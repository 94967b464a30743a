"""Command line front end for quick angle conversions.

Usage:
    anglekit convert 180 degrees --to radians
    anglekit convert 450 degrees --to revolutions --normalize
    anglekit table 1.5 radians

The ``convert`` command prints a single converted value; ``table`` renders the
value in all six units with their normalized counterparts.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from math import isfinite

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from anglekit.angle_type import AngleType
from anglekit.config import DISPLAY_PRECISION
from anglekit.exceptions import AngleError
from anglekit.unit import UnitFloat
from anglekit.unit.unit_float import describe_raw

logger = logging.getLogger(__name__)

UNIT_CHOICES = ", ".join(member.value for member in AngleType)


def _format(value: float) -> str:
    if not isfinite(value):
        return describe_raw(value)
    return f"{value:.{DISPLAY_PRECISION}g}"


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the anglekit command."""
    parser = argparse.ArgumentParser(prog="anglekit", description="Convert angles between units")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    convert = commands.add_parser("convert", help="convert a value into another unit")
    convert.add_argument("value", type=float, help="raw value")
    convert.add_argument("unit", help=f"unit of the value ({UNIT_CHOICES})")
    convert.add_argument("--to", dest="target", required=True, help="target unit")
    convert.add_argument("--normalize", action="store_true", help="wrap the result into one turn")
    convert.add_argument("--tolerance", type=float, default=None, help="comparison tolerance of the value")

    table = commands.add_parser("table", help="show a value in every unit")
    table.add_argument("value", type=float, help="raw value")
    table.add_argument("unit", help=f"unit of the value ({UNIT_CHOICES})")
    table.add_argument("--tolerance", type=float, default=None, help="comparison tolerance of the value")
    return parser


def conversion_table(angle: UnitFloat) -> Table:
    """Render an angle in all six units.

    Args:
        angle: Angle of any unit.

    Returns:
        Table: rich table with one row per unit.
    """
    source = AngleType.of(angle)
    table = Table(title=f"{_format(float(angle))} {source.description}")
    table.add_column("Unit")
    table.add_column("Value", justify="right")
    table.add_column("Normalized", justify="right")
    table.add_column("Tolerance", justify="right")
    for member in AngleType:
        converted = angle.convert(member)
        table.add_row(
            member.description,
            _format(float(converted)),
            _format(float(converted.normalized())),
            f"{converted.tolerance:.3g}",
        )
    return table


def run(args: argparse.Namespace, console: Console) -> int:
    """Execute a parsed command and return its exit status."""
    angle = AngleType.parse(args.unit).init_angle(args.value, tolerance=args.tolerance)
    logger.debug("Parsed %r", angle)

    if args.command == "convert":
        result = angle.convert(AngleType.parse(args.target))
        if args.normalize:
            result = result.normalized()
        console.print(f"{_format(float(result))} {AngleType.of(result).description}")
    else:
        console.print(conversion_table(angle))
    return 0


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """Entry point of the anglekit command.

    Args:
        argv: Arguments without the program name; defaults to sys.argv[1:].
        console: Console to print to; defaults to standard output.

    Returns:
        int: 0 on success, 2 when a unit name is not recognized.
    """
    args = build_parser().parse_args(argv)
    console = console or Console()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    try:
        return run(args, console)
    except AngleError as exc:
        Console(stderr=True).print(f"[bold red]error:[/] {exc}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
