"""Fallback Scanner
----------------

Brute-force boundary search used only when the fast path in
``periodresolver`` is undefined because the boundary wall time falls inside a
DST gap (e.g. midnight in America/Sao_Paulo on a spring-forward day).

The scan walks the absolute time line in fixed 5-minute steps and watches the
civil field that identifies the period:

  - hour:  hour of day
  - day:   day of month
  - week:  ISO week
  - month: month of year

The first step that changes the field has crossed a boundary; the result is
snapped to the start of its 10-minute bucket.

Assumes zone offsets shift on a 10-minute grid; sub-5-minute historical
offsets are not handled.
"""

import logging
from typing import Callable, Dict

from tzperiod.civil import Instant
from tzperiod.exceptions import UnknownPeriod
from tzperiod.period.periodregistry import PeriodKind, PeriodLike, coerce_period

logger = logging.getLogger(__name__)

SCAN_STEP_MINUTES = 5

# 32 days of 5-minute steps covers the longest month plus a 25-hour day
MAX_SCAN_STEPS = 32 * 24 * 60 // SCAN_STEP_MINUTES

_FIELDS: Dict[PeriodKind, Callable[[Instant], object]] = {
    PeriodKind.HOUR: lambda t: t.hour,
    PeriodKind.DAY: lambda t: t.day,
    PeriodKind.WEEK: lambda t: t.iso_week,
    PeriodKind.MONTH: lambda t: t.month,
}


def _snap(instant: Instant) -> Instant:
    from tzperiod.period.periodresolver import get_start

    return get_start(instant, PeriodKind.TEN_MINUTES)


def _field_for(period: PeriodLike) -> Callable:
    kind = coerce_period(period)
    if kind not in _FIELDS:
        raise UnknownPeriod(period)
    return _FIELDS[kind]


def safe_start(instant: Instant, period: PeriodLike) -> Instant:
    """
    Find the start of the hour, day, week or month containing ``instant`` by
    scanning.

    Steps backward 5 minutes at a time until the period field changes, keeps
    the last step still inside the period, and snaps it to its 10-minute
    bucket.

    Args:
        instant: Any instant inside the period
        period: "hour", "day", "week" or "month"

    Returns:
        First instant of the period

    Raises:
        UnknownPeriod: for any other period key

    Example:
        >>> t = Instant(2013, 10, 20, 15, 0, time_zone="America/Sao_Paulo")
        >>> safe_start(t, "day").isoformat()  # midnight was skipped
        '2013-10-20T01:00:00-02:00'
    """
    field = _field_for(period)
    value = field(instant)

    current = instant
    for steps in range(1, MAX_SCAN_STEPS + 1):
        previous = current.subtract(minutes=SCAN_STEP_MINUTES)
        if field(previous) != value:
            logger.debug(
                f"safe_start: {period} boundary in {instant.time_zone} "
                f"found after {steps} steps back from {instant.isoformat()}"
            )
            return _snap(current)
        current = previous

    raise RuntimeError(
        f"safe_start: no {period} boundary within {MAX_SCAN_STEPS} steps "
        f"of {instant.isoformat()}"
    )


def safe_end(instant: Instant, period: PeriodLike) -> Instant:
    """
    Find the first instant after the hour, day, week or month containing
    ``instant`` by scanning.

    Steps forward 5 minutes at a time until the period field changes and
    snaps that step to its 10-minute bucket. The result is the exclusive end
    of the period, i.e. the start of the next one.

    Args:
        instant: Any instant inside the period
        period: "hour", "day", "week" or "month"

    Returns:
        Start of the next period

    Raises:
        UnknownPeriod: for any other period key

    Example:
        >>> t = Instant(2013, 10, 19, 9, 30, time_zone="America/Sao_Paulo")
        >>> safe_end(t, "day").isoformat()
        '2013-10-20T01:00:00-02:00'
    """
    field = _field_for(period)
    value = field(instant)

    current = instant
    for steps in range(1, MAX_SCAN_STEPS + 1):
        current = current.add(minutes=SCAN_STEP_MINUTES)
        if field(current) != value:
            logger.debug(
                f"safe_end: {period} boundary in {instant.time_zone} "
                f"found after {steps} steps forward from {instant.isoformat()}"
            )
            return _snap(current)

    raise RuntimeError(
        f"safe_end: no {period} boundary within {MAX_SCAN_STEPS} steps "
        f"of {instant.isoformat()}"
    )


__all__ = [
    "SCAN_STEP_MINUTES",
    "MAX_SCAN_STEPS",
    "safe_start",
    "safe_end",
]
