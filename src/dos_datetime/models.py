"""Value types for DOS date/time conversion.

All types are immutable and compare by value:
    DateTimeFields: separated calendar fields (year .. millisecond)
    DosDate: 16-bit packed date word
    DosTime: 16-bit packed time word
    DosDateTime: the (date, time) pair and its 32-bit concatenation
"""

import enum
import struct
from datetime import datetime
from typing import NamedTuple

from .constants import (
    DAY_MASK,
    DISPLAY_FORMAT,
    DOS_EPOCH_YEAR,
    DWORD_MAX,
    HOUR_MASK,
    HOUR_SHIFT,
    MINUTE_MASK,
    MINUTE_SHIFT,
    MONTH_MASK,
    MONTH_SHIFT,
    SECOND_MASK,
    SECOND_RESOLUTION,
    WORD_MAX,
    YEAR_MASK,
    YEAR_SHIFT,
    ZIP_STRUCT_FORMAT,
)
from .errors import InvalidArgumentError


class ValidationMode(enum.Enum):
    """How much input checking the encoder performs.

    STRICT rejects any field outside its natural range. LOOSE packs whatever
    it is given, like the legacy tool, and lets bits alias.
    """

    STRICT = "strict"
    LOOSE = "loose"


class DateTimeFields(NamedTuple):
    """Calendar date/time split into separate integer fields."""

    year: int = DOS_EPOCH_YEAR
    month: int = 1
    day: int = 1
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0

    @classmethod
    def from_datetime(cls, dt: datetime) -> "DateTimeFields":
        """Split a datetime into fields. Timezone info is ignored."""
        return cls(
            dt.year,
            dt.month,
            dt.day,
            dt.hour,
            dt.minute,
            dt.second,
            dt.microsecond // 1000,
        )

    def to_datetime(self) -> datetime:
        """Build a naive datetime from the fields.

        Raises:
            InvalidArgumentError: If the fields do not name a real calendar date
        """
        try:
            return datetime(
                self.year,
                self.month,
                self.day,
                self.hour,
                self.minute,
                self.second,
                self.millisecond * 1000,
            )
        except (ValueError, OverflowError) as e:
            raise InvalidArgumentError(
                "datetime", self.format(), message=f"Not a valid calendar date: {e}"
            ) from e

    def replace(self, **changes: int) -> "DateTimeFields":
        return self._replace(**changes)

    def format(self) -> str:
        """Return the fields as 'DD.MM.YYYY  HH:MM:SS.mmm'."""
        return DISPLAY_FORMAT.format(**self._asdict())


class _Word(int):
    """Unsigned 16-bit integer."""

    field = "word"

    def __new__(cls, value: int):
        value = int(value)
        if not 0 <= value <= WORD_MAX:
            raise InvalidArgumentError(cls.field, value, 0, WORD_MAX)
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(0x{int(self):04x})"


class DosDate(_Word):
    """Packed DOS date: 7-bit year offset, 4-bit month, 5-bit day."""

    field = "dos_date"

    @property
    def year(self) -> int:
        return DOS_EPOCH_YEAR + ((self >> YEAR_SHIFT) & YEAR_MASK)

    @property
    def month(self) -> int:
        return (self >> MONTH_SHIFT) & MONTH_MASK

    @property
    def day(self) -> int:
        return self & DAY_MASK


class DosTime(_Word):
    """Packed DOS time: 5-bit hour, 6-bit minute, 5-bit halved second."""

    field = "dos_time"

    @property
    def hour(self) -> int:
        return (self >> HOUR_SHIFT) & HOUR_MASK

    @property
    def minute(self) -> int:
        return (self >> MINUTE_SHIFT) & MINUTE_MASK

    @property
    def second(self) -> int:
        return (self & SECOND_MASK) * SECOND_RESOLUTION


class DosDateTime(NamedTuple):
    """A DOS date word and time word.

    Unpacks like the plain (dos_date, dos_time) pair the encoder returns.
    """

    date: DosDate
    time: DosTime

    @property
    def value(self) -> int:
        """The 32-bit concatenation, date in the high word."""
        return (int(self.date) << 16) | int(self.time)

    @classmethod
    def from_value(cls, value: int) -> "DosDateTime":
        """Split a 32-bit packed value into its date and time words.

        Raises:
            InvalidArgumentError: If value is not an unsigned 32-bit integer
        """
        if not 0 <= value <= DWORD_MAX:
            raise InvalidArgumentError("value", value, 0, DWORD_MAX)
        return cls(DosDate(value >> 16), DosTime(value & WORD_MAX))

    def to_zip_bytes(self) -> bytes:
        """Encode as the 4 bytes ZIP headers use (time first, little-endian)."""
        return struct.pack(ZIP_STRUCT_FORMAT, self.time, self.date)

    @classmethod
    def from_zip_bytes(cls, data: bytes) -> "DosDateTime":
        """Decode the 4-byte "last mod file time/date" pair of a ZIP header."""
        if len(data) != struct.calcsize(ZIP_STRUCT_FORMAT):
            raise InvalidArgumentError(
                "data", data.hex(), message=f"Expected 4 bytes, got {len(data)}"
            )
        dos_time, dos_date = struct.unpack(ZIP_STRUCT_FORMAT, data)
        return cls(DosDate(dos_date), DosTime(dos_time))

    def __str__(self) -> str:
        return f"0x{self.value:08x}"
