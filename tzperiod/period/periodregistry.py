"""Period Registry
---------------

The five supported periods, their keys and display labels.

Keys and labels, in preserved order:
  - "10 minutes" -> "10 minutes"
  - "hour"       -> "Hour"
  - "day"        -> "Day"
  - "week"       -> "Week"
  - "month"      -> "Month"

The registry is built once at import and is read-only afterwards.
"""

from enum import Enum
from types import MappingProxyType
from typing import List, Union

from tzperiod.exceptions import UnknownPeriod


class PeriodKind(str, Enum):
    """Supported periods, ordered from shortest to longest."""

    TEN_MINUTES = "10 minutes"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"

    def __str__(self) -> str:
        return self.value

    @property
    def rank(self) -> int:
        """Position in declaration order (TEN_MINUTES = 0)."""
        return _RANKS[self]

    # str ordering would sort alphabetically; order by declaration instead.
    # Plain string keys are coerced, so unknown keys raise UnknownPeriod.
    def __lt__(self, other):
        if not isinstance(other, str):
            return NotImplemented
        return self.rank < coerce_period(other).rank

    def __le__(self, other):
        if not isinstance(other, str):
            return NotImplemented
        return self.rank <= coerce_period(other).rank

    def __gt__(self, other):
        if not isinstance(other, str):
            return NotImplemented
        return self.rank > coerce_period(other).rank

    def __ge__(self, other):
        if not isinstance(other, str):
            return NotImplemented
        return self.rank >= coerce_period(other).rank


_RANKS = MappingProxyType({kind: index for index, kind in enumerate(PeriodKind)})


PERIOD_LABELS = MappingProxyType({
    PeriodKind.TEN_MINUTES: "10 minutes",
    PeriodKind.HOUR: "Hour",
    PeriodKind.DAY: "Day",
    PeriodKind.WEEK: "Week",
    PeriodKind.MONTH: "Month",
})

PeriodLike = Union[PeriodKind, str]


def coerce_period(key: PeriodLike) -> PeriodKind:
    """
    Convert a period key to PeriodKind.

    Raises:
        UnknownPeriod: if key is not one of the five supported keys

    Examples:
        >>> coerce_period("day")
        <PeriodKind.DAY: 'day'>
        >>> coerce_period(PeriodKind.HOUR)
        <PeriodKind.HOUR: 'hour'>
    """
    if isinstance(key, PeriodKind):
        return key
    try:
        return PeriodKind(key)
    except ValueError:
        raise UnknownPeriod(key) from None


def period_keys() -> List[str]:
    """
    Return all period keys in preserved order.

    Examples:
        >>> period_keys()
        ['10 minutes', 'hour', 'day', 'week', 'month']
    """
    return [kind.value for kind in PERIOD_LABELS]


def period_label(key: PeriodLike) -> str:
    """
    Return the display label for a period key.

    Raises:
        UnknownPeriod: if key is not one of the five supported keys

    Examples:
        >>> period_label("hour")
        'Hour'
    """
    return PERIOD_LABELS[coerce_period(key)]


__all__ = [
    "PeriodKind",
    "PeriodLike",
    "PERIOD_LABELS",
    "coerce_period",
    "period_keys",
    "period_label",
]
