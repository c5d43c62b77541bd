"""Tests for utility functions (datetime and mtime conversions)."""

import calendar
from datetime import datetime, timedelta, timezone

import pytest

from dos_datetime.errors import InvalidArgumentError
from dos_datetime.models import DateTimeFields
from dos_datetime.utils import (
    clamp_fields,
    datetime_to_dos,
    dos_to_datetime,
    dos_to_mtime,
    mtime_to_dos,
)


class TestDatetimeConversions:
    """Test datetime <-> DOS conversion with clamping."""

    def test_datetime_to_dos(self):
        """A datetime encodes like its fields."""
        pair = datetime_to_dos(datetime(2024, 6, 15, 13, 30, 45, 999000))
        assert pair.value == 0x58CF6BD6

    def test_clamp_before_1980(self):
        """Dates before 1980 become 1980-01-01 00:00:00."""
        pair = datetime_to_dos(datetime(1970, 1, 1))

        assert pair.date == 0x0021
        assert pair.time == 0x0000

    def test_clamp_after_2107(self):
        """Dates after 2107 become 2107-12-31 23:59:58."""
        pair = datetime_to_dos(datetime(2108, 1, 1))

        assert pair.date == 0xFF9F
        assert pair.time == 0xBF7D

    def test_no_clamp_raises(self):
        """Without clamping, out-of-range years are an error."""
        with pytest.raises(InvalidArgumentError):
            datetime_to_dos(datetime(1979, 12, 31, 23, 59, 59), clamp=False)

    def test_timezone_not_converted(self):
        """The wall-clock fields of an aware datetime are used unchanged."""
        tz = timezone(timedelta(hours=5))
        aware = datetime(2024, 6, 15, 13, 30, 45, tzinfo=tz)
        assert datetime_to_dos(aware) == datetime_to_dos(aware.replace(tzinfo=None))

    def test_clamp_fields_in_range(self, sample_fields):
        """In-range fields are encoded normally."""
        assert clamp_fields(sample_fields).value == 0x58CF6BD6

    def test_clamp_fields_still_checks_other_fields(self):
        """Clamping only covers the year."""
        with pytest.raises(InvalidArgumentError):
            clamp_fields(DateTimeFields(2000, 13, 1))

    def test_dos_to_datetime(self):
        """Decoding gives a naive datetime with an even second."""
        assert dos_to_datetime(0x58CF6BD6) == datetime(2024, 6, 15, 13, 30, 44)

    def test_dos_to_datetime_invalid(self):
        """Zero is not a calendar date."""
        with pytest.raises(InvalidArgumentError):
            dos_to_datetime(0)


class TestMtimeConversions:
    """Test os.stat mtime <-> DOS conversion."""

    def test_mtime_to_dos(self):
        """A known UTC timestamp maps to a known DOS value."""
        mtime = calendar.timegm((2024, 6, 15, 13, 30, 45, 0, 0, 0))
        assert mtime_to_dos(mtime) == 0x58CF6BD6

    def test_mtime_fraction_ignored(self):
        """Sub-second parts of the mtime never change the result."""
        mtime = calendar.timegm((2024, 6, 15, 13, 30, 45, 0, 0, 0))
        assert mtime_to_dos(mtime + 0.9) == mtime_to_dos(mtime)

    def test_unix_epoch_clamped(self):
        """The Unix epoch predates DOS and is clamped."""
        assert mtime_to_dos(0) == 0x00210000

    def test_unix_epoch_no_clamp(self):
        """Without clamping the Unix epoch is rejected."""
        with pytest.raises(InvalidArgumentError):
            mtime_to_dos(0, clamp=False)

    def test_round_trip(self):
        """Converting back and forth loses at most one second."""
        for mtime in (315532800, 946684800, 1718458245, 1718458246):
            recovered = dos_to_mtime(mtime_to_dos(mtime))
            assert mtime - 1 <= recovered <= mtime
            assert recovered % 2 == 0

    def test_dos_to_mtime(self):
        """The DOS epoch is 1980-01-01T00:00:00Z."""
        assert dos_to_mtime(0x00210000) == 315532800

    def test_dos_to_mtime_invalid(self):
        """Values that are not calendar dates raise."""
        with pytest.raises(InvalidArgumentError):
            dos_to_mtime(0)
