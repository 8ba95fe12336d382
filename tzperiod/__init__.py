"""tzperiod - DST-safe period boundaries

Public API for the start and end of 10-minute buckets, hours, days, weeks and
months in any time zone, including days whose midnight does not exist and
hours that occur twice.

Usage:
    from tzperiod import Instant, get_start, get_end

    t = Instant.from_epoch(1409529600, time_zone="Europe/London")

    # Start of the month containing t
    start = get_start(t, "month")   # Instant('2014-09-01T00:00:00+01:00', ...)

    # End of the month (start of the next one)
    end = get_end(t, "month")       # Instant('2014-10-01T00:00:00+01:00', ...)

    # All period keys, in order
    period_keys()  # ['10 minutes', 'hour', 'day', 'week', 'month']

Environment Variables:
    TZPERIOD_DEFAULT_TZ: Time zone used when none is given (default: UTC)
"""

__version__ = "0.0.1"

# ============================================================================
# Civil-time layer
# ============================================================================

from .civil.civilinstant import Instant

# ============================================================================
# Period Resolution API
# ============================================================================

from .period.periodapi import (
    PeriodKind,              # Enum of the five supported periods
    get_start,               # Primary API - start of the containing period
    get_end,                 # Primary API - end (exclusive) of the period
    get_bounds,              # (start, end) in one call
    period_keys,             # Ordered period keys
    period_label,            # Display label for a key
    period_identifier,       # Period as a dict with start/end/duration
    iter_periods,            # Consecutive period starts over a range
    format_period_display,   # Format period dict for display
)

# ============================================================================
# Errors
# ============================================================================

from .exceptions import (
    UnknownPeriod,
    UnknownTimeZone,
    NonexistentLocalTime,
)

__all__ = [
    # Version
    "__version__",

    # ========================================================================
    # PRIMARY APIS - Start here!
    # ========================================================================
    "Instant",       # Civil-time point in a named zone
    "get_start",     # Start of the containing period
    "get_end",       # End of the containing period

    # ========================================================================
    # Period Registry
    # ========================================================================
    "PeriodKind",
    "period_keys",
    "period_label",

    # ========================================================================
    # Helpers
    # ========================================================================
    "get_bounds",
    "period_identifier",
    "iter_periods",
    "format_period_display",

    # ========================================================================
    # Errors
    # ========================================================================
    "UnknownPeriod",
    "UnknownTimeZone",
    "NonexistentLocalTime",
]
