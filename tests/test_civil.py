"""Tests for the civil-time layer (Instant and zone lookup).

Covers construction, DST gap/overlap resolution, civil vs fixed arithmetic,
truncation and field accessors.

Run with: pytest tests/test_civil.py -v
"""

import pytest
from datetime import datetime, timedelta, timezone

from isoweek import Week

from tzperiod import Instant, NonexistentLocalTime, UnknownTimeZone
from tzperiod.civil import get_zone, localize
from tzperiod.config import DEFAULT_TZ_ENV


# ============================================================================
# Construction
# ============================================================================

class TestInstantConstruction:
    """Test the ways to build an Instant"""

    def test_from_epoch_utc(self):
        """Epoch 1409529600 is 2014-09-01 00:00 UTC"""
        t = Instant.from_epoch(1409529600, time_zone="UTC")
        assert (t.year, t.month, t.day, t.hour, t.minute, t.second) == (2014, 9, 1, 0, 0, 0)
        assert t.epoch == 1409529600
        assert t.time_zone == "UTC"

    def test_from_fields(self):
        """Civil fields resolve through the zone offset"""
        t = Instant(2014, 9, 1, time_zone="Europe/London")
        assert t.epoch == 1409529600 - 3600
        assert t.utc_offset == timedelta(hours=1)

    def test_default_zone_is_utc(self):
        """Omitting the zone uses UTC"""
        assert Instant.from_epoch(0).time_zone == "UTC"

    def test_default_zone_from_environment(self, monkeypatch):
        """TZPERIOD_DEFAULT_TZ overrides the default zone"""
        monkeypatch.setenv(DEFAULT_TZ_ENV, "America/Chicago")
        t = Instant(2014, 1, 1)
        assert t.time_zone == "America/Chicago"
        assert t.utc_offset == timedelta(hours=-6)

    def test_from_aware_datetime(self):
        """Aware datetimes keep their absolute point"""
        dt = datetime(2014, 9, 1, tzinfo=timezone.utc)
        t = Instant.from_datetime(dt, time_zone="America/Chicago")
        assert t.epoch == 1409529600
        assert (t.day, t.hour) == (31, 19)

    def test_from_naive_datetime(self):
        """Naive datetimes are read as wall-clock fields"""
        t = Instant.from_datetime(datetime(2003, 4, 6, 3, 59, 59), time_zone="America/Chicago")
        assert (t.hour, t.minute, t.second) == (3, 59, 59)
        assert t.utc_offset == timedelta(hours=-5)

    def test_microseconds(self):
        """Fractional epochs keep microseconds; epoch floors"""
        t = Instant.from_epoch(1409529600.25, time_zone="UTC")
        assert t.microsecond == 250000
        assert t.epoch == 1409529600

    def test_unknown_zone(self):
        """Unknown zone names raise UnknownTimeZone"""
        with pytest.raises(UnknownTimeZone):
            Instant.from_epoch(0, time_zone="Mars/Olympus_Mons")

    def test_copy(self):
        """copy() returns an equal, distinct Instant"""
        t = Instant(2014, 9, 1, 12, time_zone="Europe/London")
        c = t.copy()
        assert c == t
        assert c is not t


class TestLocalTimeResolution:
    """Test DST gap and overlap handling"""

    def test_gap_raises(self):
        """02:30 on the Chicago spring-forward day does not exist"""
        with pytest.raises(NonexistentLocalTime) as excinfo:
            Instant(2003, 4, 6, 2, 30, time_zone="America/Chicago")
        assert excinfo.value.time_zone == "America/Chicago"
        assert excinfo.value.local == datetime(2003, 4, 6, 2, 30)

    def test_gap_is_value_error(self):
        """NonexistentLocalTime can be caught as ValueError"""
        with pytest.raises(ValueError):
            Instant(2013, 10, 20, 0, 30, time_zone="America/Sao_Paulo")

    def test_overlap_resolves_later(self):
        """01:30 on the New York fall-back day resolves to EST (the later one)"""
        t = Instant(2014, 11, 2, 1, 30, time_zone="America/New_York")
        assert t.utc_offset == timedelta(hours=-5)

    def test_overlap_first_occurrence_from_epoch(self):
        """Epochs inside the first occurrence keep the daylight offset"""
        dt = datetime(2014, 11, 2, 5, 30, tzinfo=timezone.utc)
        t = Instant.from_datetime(dt, time_zone="America/New_York")
        assert (t.hour, t.minute) == (1, 30)
        assert t.utc_offset == timedelta(hours=-4)

    def test_zone_lookup(self):
        """Zone names resolve through dateutil; UTC aliases share one zone"""
        assert get_zone("UTC") is get_zone("utc")
        assert get_zone("Pacific/Chatham").utcoffset(datetime(2019, 1, 1)) == timedelta(hours=13, minutes=45)

    def test_localize(self):
        """Gaps give None; overlaps give the later UTC point"""
        zone = get_zone("America/New_York")
        assert localize(datetime(2014, 3, 9, 2, 30), zone) is None
        assert localize(datetime(2014, 11, 2, 1, 30), zone) == datetime(2014, 11, 2, 6, 30, tzinfo=timezone.utc)
        assert localize(datetime(2014, 7, 1, 12), zone) == datetime(2014, 7, 1, 16, tzinfo=timezone.utc)


# ============================================================================
# Arithmetic
# ============================================================================

class TestArithmetic:
    """Test civil (days/weeks/months) vs fixed (hours/minutes) units"""

    def test_civil_day_across_spring_forward(self):
        """Adding a day keeps the wall clock; only 23 hours pass"""
        t = Instant(2003, 4, 5, 12, time_zone="America/Chicago")
        n = t.add(days=1)
        assert (n.day, n.hour) == (6, 12)
        assert n.epoch - t.epoch == 23 * 3600

    def test_fixed_hours_across_spring_forward(self):
        """Adding 24 hours moves the wall clock an hour further"""
        t = Instant(2003, 4, 5, 12, time_zone="America/Chicago")
        n = t.add(hours=24)
        assert (n.day, n.hour) == (6, 13)
        assert n.epoch - t.epoch == 24 * 3600

    def test_civil_add_into_gap(self):
        """A civil step landing in a gap is undefined"""
        t = Instant(2003, 4, 5, 2, 30, time_zone="America/Chicago")
        assert t.try_add(days=1) is None
        with pytest.raises(NonexistentLocalTime):
            t.add(days=1)

    def test_fixed_add_through_gap(self):
        """Fixed steps are always defined"""
        t = Instant(2003, 4, 6, 1, 30, time_zone="America/Chicago")
        n = t.add(hours=1)
        assert (n.hour, n.minute) == (3, 30)

    def test_month_and_week(self):
        """Months and weeks are civil units"""
        t = Instant(2014, 1, 31, 8, time_zone="UTC")
        assert t.add(months=1).day == 28
        assert t.add(weeks=1).month == 2
        assert t.subtract(months=1).month == 12

    def test_subtract(self):
        """subtract() is add() with negated units"""
        t = Instant(2014, 9, 1, 0, 5, time_zone="UTC")
        assert t.subtract(minutes=5) == Instant(2014, 9, 1, time_zone="UTC")
        assert t.try_subtract(days=1).day == 31

    def test_unsupported_unit(self):
        """Unknown unit names raise TypeError"""
        with pytest.raises(TypeError):
            Instant.from_epoch(0).add(years=1)

    def test_inputs_not_mutated(self):
        """Operations return new Instants and leave the original intact"""
        t = Instant(2014, 9, 1, 12, 34, time_zone="UTC")
        before = t.epoch
        t.add(days=3)
        t.truncate("month")
        assert t.epoch == before
        assert (t.hour, t.minute) == (12, 34)


# ============================================================================
# Truncation
# ============================================================================

class TestTruncation:
    """Test truncation to minute, hour, day, week and month"""

    def test_truncate_units(self):
        """Finer fields are zeroed"""
        t = Instant(2014, 9, 17, 13, 47, 21, 5000, time_zone="UTC")
        assert t.truncate("minute") == Instant(2014, 9, 17, 13, 47, time_zone="UTC")
        assert t.truncate("hour") == Instant(2014, 9, 17, 13, time_zone="UTC")
        assert t.truncate("day") == Instant(2014, 9, 17, time_zone="UTC")
        assert t.truncate("week") == Instant(2014, 9, 15, time_zone="UTC")
        assert t.truncate("month") == Instant(2014, 9, 1, time_zone="UTC")

    def test_truncate_week_across_year(self):
        """ISO week of 2015-01-01 starts on Monday 2014-12-29"""
        t = Instant(2015, 1, 1, 9, time_zone="UTC")
        assert t.truncate("week") == Instant(2014, 12, 29, time_zone="UTC")

    def test_truncate_into_gap(self):
        """Midnight on the Sao Paulo spring-forward day does not exist"""
        t = Instant(2013, 10, 20, 12, time_zone="America/Sao_Paulo")
        assert t.try_truncate("day") is None
        with pytest.raises(NonexistentLocalTime):
            t.truncate("day")

    def test_truncate_unknown_unit(self):
        """Unknown truncation units raise ValueError"""
        with pytest.raises(ValueError):
            Instant.from_epoch(0).truncate("year")


# ============================================================================
# Fields and comparison
# ============================================================================

class TestFields:
    """Test field accessors"""

    def test_day_of_week(self):
        """Monday is 1, Sunday is 7"""
        assert Instant(2014, 9, 1, time_zone="UTC").day_of_week == 1
        assert Instant(2014, 9, 7, time_zone="UTC").day_of_week == 7

    def test_iso_week(self):
        """ISO week number and isoweek.Week"""
        t = Instant(2014, 9, 1, time_zone="UTC")
        assert t.week_of_year == 36
        assert t.iso_week == Week(2014, 36)
        assert Instant(2015, 1, 1, time_zone="UTC").iso_week == Week(2015, 1)

    def test_to_datetime(self):
        """to_datetime() is aware and in the instant's zone"""
        t = Instant(2014, 9, 1, 9, time_zone="Europe/London")
        dt = t.to_datetime()
        assert dt.tzinfo is not None
        assert dt.hour == 9
        assert dt == datetime(2014, 9, 1, 8, tzinfo=timezone.utc)

    def test_isoformat(self):
        """isoformat() includes the offset"""
        assert Instant.from_epoch(1409529600).isoformat() == "2014-09-01T00:00:00+00:00"


class TestComparison:
    """Test equality and ordering"""

    def test_equality_needs_same_zone(self):
        """Same point in different zones is ordered equal but not equal"""
        a = Instant.from_epoch(1409529600, time_zone="UTC")
        b = Instant.from_epoch(1409529600, time_zone="Europe/London")
        assert a != b
        assert not a < b and not b < a

    def test_ordering_is_absolute(self):
        """Ordering compares the absolute point, not wall clocks"""
        first = Instant.from_datetime(datetime(2014, 11, 2, 5, 30, tzinfo=timezone.utc),
                                      time_zone="America/New_York")
        second = Instant(2014, 11, 2, 1, 10, time_zone="America/New_York")
        assert first.minute > second.minute
        assert first < second

    def test_hashable(self):
        """Equal instants hash equal"""
        a = Instant.from_epoch(0, time_zone="UTC")
        b = Instant(1970, 1, 1, time_zone="UTC")
        assert len({a, b}) == 1

    def test_compare_other_types(self):
        """Comparing with a non-Instant is not equal"""
        assert Instant.from_epoch(0) != 0
