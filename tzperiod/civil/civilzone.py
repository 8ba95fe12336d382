"""Time zone lookup and wall-clock resolution.

Zones come from ``dateutil.tz``, which reads the system zoneinfo files and
falls back to the tarball bundled with python-dateutil.

Wall-clock resolution policy:
  - a wall time inside a DST gap has no instant; ``localize`` returns None
  - a wall time inside a DST overlap occurs twice; ``localize`` returns the
    later of the two instants
"""

from datetime import datetime, tzinfo
from functools import lru_cache
from typing import Optional

try:
    from dateutil import tz
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from tzperiod.exceptions import UnknownTimeZone

UTC = tz.UTC

_UTC_NAMES = {"utc", "z", "gmt", "etc/utc", "etc/gmt"}


@lru_cache(maxsize=256)
def get_zone(name: str) -> tzinfo:
    """
    Look up a time zone by IANA name.

    Args:
        name: IANA zone name (e.g. "America/Chicago"), "UTC", or "local"
              for the host's zone

    Returns:
        dateutil tzinfo instance (cached per name)

    Raises:
        UnknownTimeZone: if the name is empty or not in the zone database

    Examples:
        >>> get_zone("UTC") is UTC
        True
        >>> get_zone("Pacific/Chatham").utcoffset(datetime(2019, 1, 1))
        datetime.timedelta(seconds=49500)
    """
    if not name or not name.strip():
        raise UnknownTimeZone(name)

    key = name.strip()
    if key.lower() in _UTC_NAMES:
        return UTC
    if key.lower() == "local":
        return tz.tzlocal()

    zone = tz.gettz(key)
    if zone is None:
        raise UnknownTimeZone(name)
    return zone


def localize(local: datetime, zone: tzinfo) -> Optional[datetime]:
    """
    Resolve a naive wall-clock time in ``zone`` to an aware UTC datetime.

    Returns None when the wall time does not exist (DST gap). When it
    exists twice (DST overlap) the later instant is returned.
    """
    local = local.replace(tzinfo=None, fold=0)
    if not tz.datetime_exists(local, tz=zone):
        return None

    aware = local.replace(tzinfo=zone)
    if tz.datetime_ambiguous(aware):
        aware = tz.enfold(aware, fold=1)
    return aware.astimezone(UTC)


__all__ = [
    "UTC",
    "get_zone",
    "localize",
]
