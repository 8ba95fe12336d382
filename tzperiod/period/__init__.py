"""Period module for DST-safe period boundaries.

This module resolves the start and end of the 10-minute bucket, hour, day,
week or month containing an Instant, in any time zone.

Public API:
    get_start(instant, period) -> Instant
        Start of the period containing instant

    get_end(instant, period) -> Instant
        End of the period (exclusive; start of the next period)

    period_keys() -> list[str]
        ['10 minutes', 'hour', 'day', 'week', 'month']

    period_label(key) -> str
        Display label ('Hour', 'Day', ...)

    period_identifier(instant, period) -> dict
        Start/end/duration of the period as a dict

Examples:
    >>> from tzperiod.civil import Instant
    >>> from tzperiod.period import get_start, get_end
    >>>
    >>> # Spring-forward day in Chicago is 23 hours long
    >>> t = Instant(2003, 4, 6, 3, 59, 59, time_zone="America/Chicago")
    >>> get_end(t, "day").epoch - get_start(t, "day").epoch
    82800
    >>>
    >>> # Midnight skipped in Sao Paulo, the day starts at 01:00
    >>> t = Instant(2013, 10, 20, 12, time_zone="America/Sao_Paulo")
    >>> get_start(t, "day").hour
    1
"""

from tzperiod.period.periodapi import (
    PeriodKind,
    get_start,
    get_end,
    get_bounds,
    period_keys,
    period_label,
    period_identifier,
    iter_periods,
    format_period_display,
)

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
