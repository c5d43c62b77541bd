"""Current-time providers.

The codec never reads the clock itself. Callers that need "now" (the CLI when
no fields are given) take a Clock so tests can substitute a fixed instant.
"""

from datetime import datetime, timezone
from typing import Protocol

from .models import DateTimeFields


class Clock(Protocol):
    def now(self) -> DateTimeFields: ...


class SystemClock:
    """Wall clock in UTC, like GetSystemTime. No timezone conversion is done."""

    def now(self) -> DateTimeFields:
        return DateTimeFields.from_datetime(datetime.now(timezone.utc))


class FixedClock:
    """Clock that always reports the same instant."""

    def __init__(self, fields: DateTimeFields):
        self.fields = fields

    def now(self) -> DateTimeFields:
        return self.fields
