"""Civil-time layer: time zones and the Instant value type.

Public API:
    Instant(year, month, day, hour=0, minute=0, second=0, time_zone=None)
    Instant.from_epoch(epoch, time_zone=None)
    Instant.from_datetime(dt, time_zone=None)
    get_zone(name) -> tzinfo
"""

from tzperiod.civil.civilinstant import Instant
from tzperiod.civil.civilzone import get_zone, localize

__all__ = [
    "Instant",
    "get_zone",
    "localize",
]
