"""Civil-time Instant
------------------

An Instant is a point on the absolute time line viewed through a time zone.
It exposes the civil (wall-clock) fields of that point and the small set of
calendar operations the period resolver needs.

Arithmetic rules:
  - hours, minutes, seconds, microseconds are fixed durations added on the
    absolute time line; always defined
  - days, weeks, months are civil: applied to the wall-clock fields, then
    resolved back into the zone; undefined when the result falls in a DST gap

Truncation zeroes the finer civil fields (week: back to Monday) and is
undefined when the truncated wall time falls in a DST gap.

Ambiguous wall times (DST overlap) always resolve to the later instant.

Instants are immutable. Every operation returns a new Instant.
"""

from __future__ import annotations

from datetime import datetime, time, timedelta
from typing import Optional

try:
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

try:
    from isoweek import Week
except ImportError as e:
    raise ImportError("isoweek not installed. pip install isoweek") from e

from tzperiod.civil.civilzone import UTC, get_zone, localize
from tzperiod.config import get_default_time_zone
from tzperiod.exceptions import NonexistentLocalTime

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

CIVIL_UNITS = ("months", "weeks", "days")
FIXED_UNITS = ("hours", "minutes", "seconds", "microseconds")
TRUNCATE_UNITS = ("minute", "hour", "day", "week", "month")


class Instant:
    """
    Immutable civil-time point in a named time zone.

    Construct from civil fields (raises NonexistentLocalTime inside a DST
    gap), or with ``from_epoch`` / ``from_datetime``.

    Examples:
        >>> t = Instant(2014, 9, 1, time_zone="Europe/London")
        >>> t.epoch
        1409526000
        >>> t.add(hours=23).hour
        23
        >>> Instant.from_epoch(1409529600).isoformat()
        '2014-09-01T00:00:00+00:00'
    """

    __slots__ = ("_utc", "_local", "_zone", "_time_zone")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
        time_zone: Optional[str] = None,
    ):
        name = time_zone or get_default_time_zone()
        zone = get_zone(name)
        local = datetime(year, month, day, hour, minute, second, microsecond)
        utc = localize(local, zone)
        if utc is None:
            raise NonexistentLocalTime(local, name)
        self._init(utc, zone, name)

    def _init(self, utc: datetime, zone, name: str) -> None:
        self._utc = utc
        self._local = utc.astimezone(zone)
        self._zone = zone
        self._time_zone = name

    @classmethod
    def _from_utc(cls, utc: datetime, zone, name: str) -> "Instant":
        obj = cls.__new__(cls)
        obj._init(utc, zone, name)
        return obj

    # ---- Construction ----

    @classmethod
    def from_epoch(cls, epoch: float, time_zone: Optional[str] = None) -> "Instant":
        """Create an Instant from POSIX seconds, viewed in ``time_zone``."""
        name = time_zone or get_default_time_zone()
        utc = _EPOCH + timedelta(seconds=epoch)
        return cls._from_utc(utc, get_zone(name), name)

    @classmethod
    def from_datetime(cls, dt: datetime, time_zone: Optional[str] = None) -> "Instant":
        """
        Create an Instant from a datetime.

        Aware datetimes keep their absolute point and are viewed in
        ``time_zone``. Naive datetimes are read as wall-clock fields in
        ``time_zone``.
        """
        name = time_zone or get_default_time_zone()
        if dt.tzinfo is None:
            return cls(
                dt.year, dt.month, dt.day,
                dt.hour, dt.minute, dt.second, dt.microsecond,
                time_zone=name,
            )
        return cls._from_utc(dt.astimezone(UTC), get_zone(name), name)

    def copy(self) -> "Instant":
        return self._from_utc(self._utc, self._zone, self._time_zone)

    # ---- Arithmetic ----

    def _shift(self, units: dict) -> tuple[Optional[datetime], Optional[datetime]]:
        # Returns (wall-clock target of the civil step, resulting UTC point).
        unknown = set(units) - set(CIVIL_UNITS) - set(FIXED_UNITS)
        if unknown:
            raise TypeError(f"unsupported units: {sorted(unknown)}")

        utc = self._utc
        target = None
        civil = {k: units[k] for k in CIVIL_UNITS if units.get(k)}
        if civil:
            target = self._local.replace(tzinfo=None) + relativedelta(**civil)
            utc = localize(target, self._zone)
            if utc is None:
                return target, None

        fixed = {k: units[k] for k in FIXED_UNITS if units.get(k)}
        if fixed:
            utc = utc + timedelta(**fixed)
        return target, utc

    def try_add(self, **units) -> Optional["Instant"]:
        """Add units; None if a civil step lands in a DST gap."""
        _, utc = self._shift(units)
        if utc is None:
            return None
        return self._from_utc(utc, self._zone, self._time_zone)

    def try_subtract(self, **units) -> Optional["Instant"]:
        return self.try_add(**{k: -v for k, v in units.items()})

    def add(self, **units) -> "Instant":
        """
        Add units (months, weeks, days, hours, minutes, seconds, microseconds).

        Raises:
            NonexistentLocalTime: if a civil step lands in a DST gap
        """
        target, utc = self._shift(units)
        if utc is None:
            raise NonexistentLocalTime(target, self._time_zone)
        return self._from_utc(utc, self._zone, self._time_zone)

    def subtract(self, **units) -> "Instant":
        return self.add(**{k: -v for k, v in units.items()})

    # ---- Truncation ----

    def _truncated_local(self, to: str) -> datetime:
        local = self._local.replace(tzinfo=None)
        if to == "minute":
            return local.replace(second=0, microsecond=0)
        if to == "hour":
            return local.replace(minute=0, second=0, microsecond=0)
        if to == "day":
            return datetime.combine(local.date(), time.min)
        if to == "week":
            # ISO weeks start on Monday
            return datetime.combine(Week.withdate(local.date()).monday(), time.min)
        if to == "month":
            return datetime.combine(local.date().replace(day=1), time.min)
        raise ValueError(f"cannot truncate to '{to}', expected one of {TRUNCATE_UNITS}")

    def try_truncate(self, to: str) -> Optional["Instant"]:
        """Truncate to ``to``; None if the truncated wall time is in a DST gap."""
        utc = localize(self._truncated_local(to), self._zone)
        if utc is None:
            return None
        return self._from_utc(utc, self._zone, self._time_zone)

    def truncate(self, to: str) -> "Instant":
        """
        Truncate to the start of a minute, hour, day, week or month.

        Raises:
            NonexistentLocalTime: if the truncated wall time is in a DST gap
        """
        local = self._truncated_local(to)
        utc = localize(local, self._zone)
        if utc is None:
            raise NonexistentLocalTime(local, self._time_zone)
        return self._from_utc(utc, self._zone, self._time_zone)

    # ---- Field accessors ----

    @property
    def time_zone(self) -> str:
        return self._time_zone

    @property
    def epoch(self) -> int:
        """Whole POSIX seconds (floor)."""
        return (self._utc - _EPOCH) // timedelta(seconds=1)

    @property
    def year(self) -> int:
        return self._local.year

    @property
    def month(self) -> int:
        return self._local.month

    @property
    def day(self) -> int:
        return self._local.day

    @property
    def hour(self) -> int:
        return self._local.hour

    @property
    def minute(self) -> int:
        return self._local.minute

    @property
    def second(self) -> int:
        return self._local.second

    @property
    def microsecond(self) -> int:
        return self._local.microsecond

    @property
    def day_of_week(self) -> int:
        """1 = Monday ... 7 = Sunday."""
        return self._local.isoweekday()

    @property
    def week_of_year(self) -> int:
        """ISO 8601 week number."""
        return self._local.isocalendar()[1]

    @property
    def iso_week(self) -> Week:
        """ISO week (year and number) containing this instant."""
        return Week.withdate(self._local.date())

    @property
    def utc_offset(self) -> timedelta:
        return self._local.utcoffset()

    def to_datetime(self) -> datetime:
        """Aware datetime in this instant's zone."""
        return self._local

    def isoformat(self) -> str:
        return self._local.isoformat()

    # ---- Comparison ----

    def __eq__(self, other):
        if not isinstance(other, Instant):
            return NotImplemented
        return self._utc == other._utc and self._time_zone == other._time_zone

    def __lt__(self, other):
        if not isinstance(other, Instant):
            return NotImplemented
        return self._utc < other._utc

    def __le__(self, other):
        if not isinstance(other, Instant):
            return NotImplemented
        return self._utc <= other._utc

    def __gt__(self, other):
        if not isinstance(other, Instant):
            return NotImplemented
        return self._utc > other._utc

    def __ge__(self, other):
        if not isinstance(other, Instant):
            return NotImplemented
        return self._utc >= other._utc

    def __hash__(self):
        return hash((self._utc, self._time_zone))

    def __repr__(self):
        return f"Instant('{self.isoformat()}', time_zone='{self._time_zone}')"


__all__ = [
    "Instant",
    "CIVIL_UNITS",
    "FIXED_UNITS",
    "TRUNCATE_UNITS",
]
