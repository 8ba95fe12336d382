#!/usr/bin/env python3
"""CLI for printing period boundaries around a point in time.

Usage:
    # All five periods for an epoch, in UTC
    python scripts/periods/show_period_bounds.py --epoch 1409529600

    # Civil time in a named zone, one period
    python scripts/periods/show_period_bounds.py --at 2003-04-06T03:59:59 \\
        --tz America/Chicago --period day

    # Show fallback scanning decisions
    python scripts/periods/show_period_bounds.py --at 2013-10-20T12:00 \\
        --tz America/Sao_Paulo --verbose

Environment Variables:
    TZPERIOD_DEFAULT_TZ: Zone used when --tz is omitted (default: UTC)
"""

import argparse
import logging
import sys
import time
from pathlib import Path

from dateutil import parser as dateutil_parser

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from tzperiod import (
    Instant,
    NonexistentLocalTime,
    UnknownPeriod,
    UnknownTimeZone,
    format_period_display,
    period_identifier,
    period_keys,
)
from tzperiod.config import get_default_time_zone


def _parse_instant(args) -> Instant:
    if args.at:
        return Instant.from_datetime(dateutil_parser.isoparse(args.at), time_zone=args.tz)
    epoch = args.epoch if args.epoch is not None else int(time.time())
    return Instant.from_epoch(epoch, time_zone=args.tz)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='Print start/end of the periods containing a point in time',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    when = parser.add_mutually_exclusive_group()
    when.add_argument(
        '--epoch', '-e',
        type=float,
        help='POSIX seconds (default: now)'
    )
    when.add_argument(
        '--at', '-a',
        help='Civil time in ISO 8601 form, e.g. 2019-04-07T02:44'
    )
    parser.add_argument(
        '--tz', '-z',
        default=get_default_time_zone(),
        help='IANA time zone name (default: %(default)s)'
    )
    parser.add_argument(
        '--period', '-p',
        action='append',
        help=f'Period key, repeatable (default: all of {period_keys()})'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log fallback scanning at DEBUG level'
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        instant = _parse_instant(args)
    except (UnknownTimeZone, NonexistentLocalTime, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(f"{instant.isoformat()} ({instant.time_zone}, epoch {instant.epoch})")
    for key in args.period or period_keys():
        try:
            period = period_identifier(instant, key)
        except UnknownPeriod as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
        print(f"  {format_period_display(period)}  [{period['duration_seconds']}s]")

    return 0


if __name__ == "__main__":
    sys.exit(main())
