"""Period boundary API.

Public API for resolving the start and end of a period around an Instant,
in any time zone, across DST transitions.
"""

from typing import Iterator, Optional

from tzperiod.civil import Instant
from tzperiod.period.periodregistry import (
    PeriodKind,
    PeriodLike,
    coerce_period,
    period_keys,
    period_label,
)
from tzperiod.period.periodresolver import get_bounds, get_end, get_start


def period_identifier(instant: Instant, period: PeriodLike) -> dict:
    """
    Resolve the period containing ``instant`` to a canonical dict.

    Args:
        instant: Instant to resolve
        period: PeriodKind or period key ("10 minutes", "hour", "day",
                "week", "month")

    Returns:
        Period dict with structure:
        {
            "period_type": "10 minutes|hour|day|week|month",
            "label": str,            # "Day", "Week", ...
            "start_ts": datetime,    # Aware, in the instant's zone
            "end_ts": datetime,      # Exclusive; start of the next period
            "start_epoch": int,
            "end_epoch": int,
            "duration_seconds": int, # 82800 for a spring-forward day
            "timezone": str,
        }

    Raises:
        UnknownPeriod: if period is not a supported key

    Examples:
        >>> t = Instant.from_epoch(1409529600, time_zone="UTC")
        >>> result = period_identifier(t, "day")
        >>> result["label"], result["duration_seconds"]
        ('Day', 86400)
    """
    kind = coerce_period(period)
    start, end = get_bounds(instant, kind)

    return {
        "period_type": kind.value,
        "label": period_label(kind),
        "start_ts": start.to_datetime(),
        "end_ts": end.to_datetime(),
        "start_epoch": start.epoch,
        "end_epoch": end.epoch,
        "duration_seconds": end.epoch - start.epoch,
        "timezone": instant.time_zone,
    }


def iter_periods(start: Instant, end: Instant, period: PeriodLike) -> Iterator[Instant]:
    """
    Yield consecutive period starts covering ``[start, end)``.

    The first value is the start of the period containing ``start``, which
    may be before ``start``.

    Examples:
        >>> a = Instant(2003, 4, 5, 12, time_zone="America/Chicago")
        >>> b = Instant(2003, 4, 7, time_zone="America/Chicago")
        >>> [t.isoformat() for t in iter_periods(a, b, "day")]
        ['2003-04-05T00:00:00-06:00', '2003-04-06T00:00:00-06:00']
    """
    kind = coerce_period(period)
    current = get_start(start, kind)
    while current < end:
        yield current
        current = get_end(current, kind)


def format_period_display(period: Optional[dict]) -> str:
    """
    Format period dict for human-readable display.

    Examples:
        >>> t = Instant.from_epoch(1409529600, time_zone="UTC")
        >>> format_period_display(period_identifier(t, "day"))
        'Day 2014-09-01 00:00:00 - 2014-09-02 00:00:00 (UTC)'
    """
    if not period:
        return ""

    start = period["start_ts"].strftime("%Y-%m-%d %H:%M:%S")
    end = period["end_ts"].strftime("%Y-%m-%d %H:%M:%S")
    return f"{period['label']} {start} - {end} ({period['timezone']})"


__all__ = [
    "PeriodKind",
    "get_start",
    "get_end",
    "get_bounds",
    "period_keys",
    "period_label",
    "period_identifier",
    "iter_periods",
    "format_period_display",
]
