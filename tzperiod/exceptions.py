"""Exceptions raised by tzperiod.

All errors derive from ValueError so callers that already guard period and
timezone input with ``except ValueError`` keep working.
"""

from datetime import datetime


class UnknownPeriod(ValueError):
    """Raised when a period key is not one of the supported periods."""

    def __init__(self, key):
        self.key = key
        super().__init__(f"found unknown period '{key}'")


class UnknownTimeZone(ValueError):
    """Raised when a timezone name cannot be found in the timezone database."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown time zone '{name}'")


class NonexistentLocalTime(ValueError):
    """Raised when a wall-clock time falls inside a DST gap.

    The period resolver never lets this escape; it uses the ``try_*``
    variants on Instant and switches to the fallback scanner instead.
    """

    def __init__(self, local: datetime, time_zone: str):
        self.local = local
        self.time_zone = time_zone
        super().__init__(
            f"Invalid local time {local.isoformat()} for time zone '{time_zone}'"
        )


__all__ = [
    "UnknownPeriod",
    "UnknownTimeZone",
    "NonexistentLocalTime",
]
