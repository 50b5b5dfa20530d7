"""CLI entry point for rendering both views to PNG.

Usage:
    siderealday-chart                                  # t=0 at the default location
    siderealday-chart --time 86164 --location "Tokyo, Japan"
    siderealday-chart --day 10 --step-mode sidereal    # ten sidereal days after noon
    siderealday-chart --place "Reykjavik"              # look up a place by name
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from siderealday.astronomy import rad2deg  # noqa: E402
from siderealday.compute import compute_orbital_data, compute_sky_data  # noqa: E402
from siderealday.config import (  # noqa: E402
    NOON_SECONDS,
    PRESET_LOCATIONS,
    UnknownLocationError,
    default_location,
    get_preset_location,
    log_level,
)
from siderealday.drift import cumulative_drift, instantaneous_drift  # noqa: E402
from siderealday.geocode import GeocodingError, geocode_location  # noqa: E402
from siderealday.models import ReferenceConvention, StepMode, VisualOptions  # noqa: E402
from siderealday.playback import get_effective_time  # noqa: E402
from siderealday.renderers.static import save_charts  # noqa: E402

log = logging.getLogger("siderealday.starchart")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the orbital view and the local sky for one instant.",
    )
    when = parser.add_mutually_exclusive_group()
    when.add_argument(
        "--time",
        "-t",
        type=float,
        metavar="SECONDS",
        help="Continuous simulation time; t=0 is Greenwich solar noon.",
    )
    when.add_argument(
        "--day",
        "-d",
        type=int,
        metavar="N",
        help="Day count for day stepping; combine with --time-of-day and --step-mode.",
    )
    parser.add_argument(
        "--time-of-day",
        type=float,
        default=NOON_SECONDS,
        metavar="SECONDS",
        help=f"Seconds after midnight when using --day (default: {NOON_SECONDS}).",
    )
    parser.add_argument(
        "--step-mode",
        choices=[m.value for m in StepMode],
        default=StepMode.SOLAR.value,
        help="Length of one day step when using --day (default: solar).",
    )
    where = parser.add_mutually_exclusive_group()
    where.add_argument(
        "--location",
        "-l",
        metavar="PRESET",
        help=f"Preset location: {', '.join(PRESET_LOCATIONS)}.",
    )
    where.add_argument(
        "--place",
        "-p",
        metavar="NAME",
        help="Look up a place by name (needs network access).",
    )
    parser.add_argument(
        "--out",
        "-o",
        type=Path,
        default=None,
        metavar="DIR",
        help="Output directory (default: results/).",
    )
    parser.add_argument(
        "--high-contrast",
        action="store_true",
        help="Use the high-contrast palette.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s  %(levelname)-7s  %(message)s",
        datefmt="%H:%M:%S",
    )
    args = parse_args(argv)

    try:
        if args.place:
            location = geocode_location(args.place)
        elif args.location:
            location = get_preset_location(args.location)
        else:
            location = default_location()
    except (GeocodingError, UnknownLocationError) as e:
        log.error("Cannot resolve location: %s", e)
        return 1

    if args.day is not None:
        t = get_effective_time(args.day, args.time_of_day, StepMode(args.step_mode))
        convention = ReferenceConvention.MIDNIGHT_AT_ZERO
        log.info("Day %d (%s steps): drift %d s", args.day, args.step_mode, cumulative_drift(args.day))
    else:
        t = args.time or 0.0
        convention = ReferenceConvention.NOON_AT_ZERO
        log.info("t=%.0f s: drift %.1f s", t, instantaneous_drift(t))

    orbital = compute_orbital_data(t, location, convention)
    sky = compute_sky_data(t, location, convention)
    log.info(
        "%s: %d stars above the horizon, Sun altitude %.1f°",
        location.name,
        len(sky.stars),
        rad2deg(sky.sun.altitude),
    )

    orbital_path, sky_path = save_charts(
        orbital, sky, args.out, VisualOptions(high_contrast=args.high_contrast)
    )
    print(f"Saved: {orbital_path}")
    print(f"Saved: {sky_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
