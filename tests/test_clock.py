"""Tests for current-time providers."""

from datetime import datetime, timezone

from dos_datetime.clock import FixedClock, SystemClock
from dos_datetime.codec import encode
from dos_datetime.models import DateTimeFields


def test_fixed_clock(sample_fields):
    """FixedClock always returns the same fields."""
    clock = FixedClock(sample_fields)
    assert clock.now() == sample_fields
    assert clock.now() == clock.now()


def test_system_clock_is_utc():
    """SystemClock reports UTC wall-clock time."""
    before = datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0)
    fields = SystemClock().now()
    after = datetime.now(timezone.utc).replace(tzinfo=None)

    assert isinstance(fields, DateTimeFields)
    assert before <= fields.to_datetime() <= after


def test_system_clock_encodable():
    """The current time is inside the DOS range."""
    dos_date, _ = encode(SystemClock().now())
    assert dos_date > 0x0021
