"""Environment-driven defaults.

Environment Variables:
    TZPERIOD_DEFAULT_TZ: Time zone used when none is given (default: UTC)
"""

import os

DEFAULT_TZ_ENV = "TZPERIOD_DEFAULT_TZ"
DEFAULT_TIME_ZONE = "UTC"


def get_default_time_zone() -> str:
    """Return the configured default time zone name.

    Read on every call so tests and long-running processes can change it.
    """
    value = os.environ.get(DEFAULT_TZ_ENV, "").strip()
    return value or DEFAULT_TIME_ZONE


__all__ = [
    "DEFAULT_TZ_ENV",
    "DEFAULT_TIME_ZONE",
    "get_default_time_zone",
]
