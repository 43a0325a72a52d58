"""
geodist CLI entrypoint.

Quick great-circle distance lookups from the shell. All math is delegated to
`geodist.core.geo.Location`.
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any, get_args

from geodist.config.settings import LogLevel, get_settings
from geodist.core.geo import KILOMETERS, MILES, NAUTICAL_MILES, UNIT_RADII
from geodist.core.logging import configure_logging
from geodist.domain.models import Coordinates, DistanceRequest, compute_distance

logger = logging.getLogger(__name__)


def _cmd_distance(args: argparse.Namespace) -> int:
    """Handle the `distance` subcommand."""
    settings = get_settings()

    unit = args.unit or settings.distance.default_unit
    single = bool(args.single_precision or settings.distance.single_precision)
    request = DistanceRequest(
        start=Coordinates(lat=args.start[0], lon=args.start[1]),
        end=Coordinates(lat=args.end[0], lon=args.end[1]),
        unit=unit,
        single_precision=single,
    )
    result = compute_distance(request)
    logger.debug(
        "distance %s -> %s: %r %s (angle=%r rad, single_precision=%s)",
        result.start.model_dump(),
        result.end.model_dump(),
        result.distance,
        result.unit,
        result.central_angle_rad,
        single,
    )

    if args.json:
        print(json.dumps(result.model_dump(mode="json"), indent=2))
        return 0

    print(f"{result.distance:.{settings.distance.precision}f} {result.unit}")
    return 0


def _cmd_constants(args: argparse.Namespace) -> int:
    constants = {"km": KILOMETERS, "mi": MILES, "nmi": NAUTICAL_MILES}
    if args.json:
        print(json.dumps(constants, indent=2))
        return 0
    for unit, radius in constants.items():
        print(f"{unit:>3}: {radius!r}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the geodist CLI."""
    parser = argparse.ArgumentParser(prog="geodist")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=list(get_args(LogLevel)),
        default=None,
        help="Override GEODIST_LOG_LEVEL / config.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    dist = sub.add_parser("distance", help="Great-circle distance between two points (haversine).")
    dist.add_argument(
        "--from", dest="start", nargs=2, type=float, required=True, metavar=("LAT", "LON")
    )
    dist.add_argument("--to", dest="end", nargs=2, type=float, required=True, metavar=("LAT", "LON"))
    dist.add_argument(
        "--unit", choices=list(UNIT_RADII), default=None, help="Defaults to distance.default_unit from config."
    )
    dist.add_argument(
        "--single-precision",
        action="store_true",
        help="Round coordinates to float32 and widen back before computing.",
    )
    dist.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    dist.set_defaults(func=_cmd_distance)

    const = sub.add_parser("constants", help="Print the mean Earth radius used for each unit.")
    const.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    const.set_defaults(func=_cmd_constants)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m geodist.cli`."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    func: Any = getattr(args, "func")
    return int(func(args))


if __name__ == "__main__":
    raise SystemExit(main())
