"""Period Resolution
-----------------

Start and end boundaries of the period containing an Instant.

Supports:
  - "10 minutes": start of the 10-minute bucket
  - "hour":       top of the hour
  - "day":        midnight
  - "week":       Monday at midnight
  - "month":      1st day at midnight

The end of a period is the start of the next one (exclusive bound).

Key Design Principles:
  1. Fast path first: truncate / advance on the civil layer
  2. When the boundary wall time falls in a DST gap the fast path returns
     None and the fallback scanner finds the boundary instead
  3. Ambiguous wall times resolve to the later instant; starts that land
     after the input are walked back so that start <= instant always holds
  4. Inputs are never mutated; every call returns a new Instant
"""

import logging

from tzperiod.civil import Instant
from tzperiod.period.periodregistry import PeriodKind, PeriodLike, coerce_period
from tzperiod.period.periodscanner import safe_end, safe_start

logger = logging.getLogger(__name__)

# Civil unit names used for truncation and advancement per period
_TRUNCATE_TO = {
    PeriodKind.DAY: "day",
    PeriodKind.WEEK: "week",
    PeriodKind.MONTH: "month",
}
_ADVANCE_BY = {
    PeriodKind.DAY: {"days": 1},
    PeriodKind.WEEK: {"weeks": 1},
    PeriodKind.MONTH: {"months": 1},
}


# ---- Start ----

def _settle(dt: Instant, instant: Instant, **step) -> Instant:
    """Move dt by whole fixed steps until dt <= instant < dt + step."""
    # Truncation resolves a repeated wall time to its later occurrence, which
    # can be after the input
    while dt > instant:
        dt = dt.subtract(**step)
    # An overlap not aligned to the step (Pacific/Chatham repeats 02:45-03:45)
    # can leave the truncated wall time more than one step behind
    while dt.add(**step) <= instant:
        dt = dt.add(**step)
    return dt


def _start_of_ten_minutes(instant: Instant) -> Instant:
    dt = instant.try_truncate("minute")
    if dt is None:
        dt = instant.subtract(seconds=instant.second, microseconds=instant.microsecond)
    dt = dt.subtract(minutes=dt.minute % 10)
    return _settle(dt, instant, minutes=10)


def _start_of_hour(instant: Instant) -> Instant:
    dt = instant.try_truncate("hour")
    if dt is None:
        # The top of the hour was skipped (e.g. America/Goose_Bay 2010-03-14,
        # 00:01 -> 01:01); the hour starts where the current civil hour began
        logger.debug(f"top of hour missing for {instant!r}, zeroing minutes instead")
        dt = instant.subtract(
            minutes=instant.minute,
            seconds=instant.second,
            microseconds=instant.microsecond,
        )
        if dt.minute != 0:
            # Gap shorter than an hour (Australia/Lord_Howe 02:00 -> 02:30):
            # zeroing lands mid-hour, so take the first instant of this hour
            logger.debug(f"partial-hour gap before {instant!r}, scanning")
            return safe_start(instant, PeriodKind.HOUR)
    return _settle(dt, instant, hours=1)


def _start_of_unit(instant: Instant, kind: PeriodKind) -> Instant:
    dt = instant.try_truncate(_TRUNCATE_TO[kind])
    if dt is None:
        logger.debug(f"{kind} start of {instant!r} falls in a DST gap, scanning")
        return safe_start(instant, kind)
    if dt > instant:
        # Boundary wall time is repeated and resolved to its second occurrence
        logger.debug(f"{kind} start of {instant!r} is ambiguous, scanning")
        return safe_start(instant, kind)
    return dt


def get_start(instant: Instant, period: PeriodLike) -> Instant:
    """
    Return the start of the period containing ``instant``.

    The start date/time depends on the period:
      - "10 minutes": minute rounded down to a multiple of 10
      - "hour": top of the hour
      - "day": midnight of that day
      - "week": Monday at midnight of that week
      - "month": 1st day at midnight of that month

    Where that wall time does not exist (DST gap) the start is the first
    instant that does, e.g. 01:00 on a day whose midnight was skipped.

    Args:
        instant: Instant to resolve
        period: PeriodKind or period key ("10 minutes", "hour", "day",
                "week", "month")

    Returns:
        New Instant in the same time zone, never after ``instant``

    Raises:
        UnknownPeriod: if period is not a supported key

    Examples:
        >>> t = Instant.from_epoch(1409529600 + 23 * 3600, time_zone="UTC")
        >>> get_start(t, "day").epoch
        1409529600

        >>> t = Instant(2013, 10, 20, 15, 0, time_zone="America/Sao_Paulo")
        >>> get_start(t, "day").isoformat()
        '2013-10-20T01:00:00-02:00'
    """
    kind = coerce_period(period)

    if kind is PeriodKind.TEN_MINUTES:
        return _start_of_ten_minutes(instant)
    if kind is PeriodKind.HOUR:
        return _start_of_hour(instant)
    return _start_of_unit(instant, kind)


# ---- End ----

def _end_of_hour(start: Instant) -> Instant:
    dt = start.add(hours=1)
    if _start_of_hour(dt) != dt:
        # Hour shortened by a partial-hour shift (Australia/Lord_Howe 02:00 -> 02:30):
        # the next hour begins before start + 1h
        logger.debug(f"hour after {start!r} does not start at {dt!r}, scanning")
        return safe_end(start, PeriodKind.HOUR)
    return dt


def _end_of_unit(start: Instant, kind: PeriodKind) -> Instant:
    dt = start.try_add(**_ADVANCE_BY[kind])
    if dt is not None and dt.hour + dt.minute + dt.second > 0:
        # Start was not at midnight (gap); pull the next start back to its boundary
        dt = dt.try_truncate(_TRUNCATE_TO[kind])

    if dt is None:
        logger.debug(f"{kind} end after {start!r} falls in a DST gap, scanning")
        return safe_end(start, kind)
    return dt


def get_end(instant: Instant, period: PeriodLike) -> Instant:
    """
    Return the end of the period containing ``instant``.

    The end is the first instant after the period, i.e. the start of the
    next period:
      - "10 minutes": start + 10 minutes
      - "hour": start + 1 hour, or the next top of the hour when a
        partial-hour shift makes the hour shorter
      - "day": midnight of the next day
      - "week": Monday at midnight of the following week
      - "month": 1st day at midnight of the following month

    Args:
        instant: Instant to resolve
        period: PeriodKind or period key

    Returns:
        New Instant in the same time zone, always after ``instant``

    Raises:
        UnknownPeriod: if period is not a supported key

    Examples:
        >>> t = Instant(2003, 4, 6, 3, 59, 59, time_zone="America/Chicago")
        >>> get_end(t, "day").epoch - get_start(t, "day").epoch
        82800
    """
    kind = coerce_period(period)
    start = get_start(instant, kind)

    if kind is PeriodKind.TEN_MINUTES:
        return start.add(minutes=10)
    if kind is PeriodKind.HOUR:
        return _end_of_hour(start)
    return _end_of_unit(start, kind)


def get_bounds(instant: Instant, period: PeriodLike) -> tuple:
    """Return ``(get_start(instant, period), get_end(instant, period))``."""
    return get_start(instant, period), get_end(instant, period)


__all__ = [
    "get_start",
    "get_end",
    "get_bounds",
]
