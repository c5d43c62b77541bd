"""Conversion between calendar fields and the packed DOS date/time encoding.

The DOS encoding is what FAT directory entries and ZIP headers store:

    date word: bits 15-9 year - 1980, bits 8-5 month, bits 4-0 day
    time word: bits 15-11 hour, bits 10-5 minute, bits 4-0 second / 2

Encoding is lossy. Seconds are floor-divided by two, so odd seconds are
indistinguishable from the even second before them, and milliseconds are
dropped entirely.

Usage:
    dos_date, dos_time = encode(DateTimeFields(2024, 6, 15, 13, 30, 45))
    # (0x58cf, 0x6bd6)

    fields = decode(0x58CF, 0x6BD6)
    # DateTimeFields(year=2024, month=6, day=15, hour=13, minute=30, second=44, millisecond=0)
"""

import logging

from .constants import (
    DOS_EPOCH_YEAR,
    FIELD_RANGES,
    HOUR_SHIFT,
    MINUTE_SHIFT,
    MONTH_SHIFT,
    SECOND_RESOLUTION,
    WORD_MASK,
    YEAR_SHIFT,
)
from .errors import InvalidArgumentError
from .models import DateTimeFields, DosDate, DosDateTime, DosTime, ValidationMode


def validate(fields: DateTimeFields) -> None:
    """Check every field against its natural range.

    Args:
        fields: Field values to check

    Raises:
        InvalidArgumentError: For the first field outside its range
    """
    for name, (minimum, maximum) in FIELD_RANGES.items():
        value = getattr(fields, name)
        if not minimum <= value <= maximum:
            raise InvalidArgumentError(name, value, minimum, maximum)


def _check_representable(fields: DateTimeFields) -> None:
    # Loose packing still needs non-negative bit patterns
    if fields.year < DOS_EPOCH_YEAR:
        raise InvalidArgumentError(
            "year",
            fields.year,
            message=f"Invalid year '{fields.year}'. Year must be at least {DOS_EPOCH_YEAR}",
        )
    for name in ("month", "day", "hour", "minute", "second", "millisecond"):
        value = getattr(fields, name)
        if value < 0:
            raise InvalidArgumentError(
                name, value, message=f"Invalid {name} '{value}'. Value must not be negative"
            )


def pack_date(year: int, month: int, day: int) -> int:
    """Pack a date without range checks, truncated to 16 bits."""
    return (((year - DOS_EPOCH_YEAR) << YEAR_SHIFT) | (month << MONTH_SHIFT) | day) & WORD_MASK


def pack_time(hour: int, minute: int, second: int) -> int:
    """Pack a time without range checks, truncated to 16 bits."""
    return ((hour << HOUR_SHIFT) | (minute << MINUTE_SHIFT) | (second // SECOND_RESOLUTION)) & WORD_MASK


class DosDateTimeCodec:
    """Stateless encoder/decoder for DOS date/time words.

    The instance only remembers which validation contract ``encode`` applies;
    it holds no other state and can be shared between threads.
    """

    def __init__(self, mode: ValidationMode = ValidationMode.STRICT):
        self.mode = ValidationMode(mode)

    @property
    def strict(self) -> bool:
        return self.mode is ValidationMode.STRICT

    def encode(self, fields: DateTimeFields) -> DosDateTime:
        """Pack calendar fields into a DOS date word and time word.

        In strict mode every field must lie in its natural range. In loose
        mode the fields are packed as given, so out-of-range values alias
        into neighbouring bits, matching the legacy tool.

        Args:
            fields: Calendar fields; millisecond is ignored

        Returns:
            DosDateTime pair, unpackable as (dos_date, dos_time)

        Raises:
            InvalidArgumentError: If a field fails the active contract
        """
        if self.strict:
            validate(fields)
        else:
            _check_representable(fields)

        dos_date = pack_date(fields.year, fields.month, fields.day)
        dos_time = pack_time(fields.hour, fields.minute, fields.second)
        logging.debug(
            "Encoded %s as date=0x%04x time=0x%04x (%s)",
            fields.format(),
            dos_date,
            dos_time,
            self.mode.value,
        )
        return DosDateTime(DosDate(dos_date), DosTime(dos_time))

    def decode(self, dos_date: int, dos_time: int) -> DateTimeFields:
        """Unpack a DOS date word and time word.

        No calendar validation is done; bit patterns never produced by
        ``encode`` decode to whatever they say (month 0, hour 31, ...).
        The millisecond is always 0 and the second always even.

        Raises:
            InvalidArgumentError: If either value is not a 16-bit word
        """
        date = DosDate(dos_date)
        time = DosTime(dos_time)
        return DateTimeFields(
            date.year,
            date.month,
            date.day,
            time.hour,
            time.minute,
            time.second,
            0,
        )


default_codec = DosDateTimeCodec()
loose_codec = DosDateTimeCodec(ValidationMode.LOOSE)


def get_codec(mode: ValidationMode | str = ValidationMode.STRICT) -> DosDateTimeCodec:
    """Return the shared codec for a validation mode."""
    if ValidationMode(mode) is ValidationMode.LOOSE:
        return loose_codec
    return default_codec


def encode(
    fields: DateTimeFields, mode: ValidationMode | str = ValidationMode.STRICT
) -> DosDateTime:
    """Encode with the shared codec for ``mode``. See DosDateTimeCodec.encode."""
    return get_codec(mode).encode(fields)


def decode(dos_date: int, dos_time: int) -> DateTimeFields:
    """Decode with the shared codec. See DosDateTimeCodec.decode."""
    return default_codec.decode(dos_date, dos_time)


def pack(dos_date: int, dos_time: int) -> int:
    """Concatenate a date word and time word into one 32-bit value."""
    return DosDateTime(DosDate(dos_date), DosTime(dos_time)).value


def unpack(value: int) -> DosDateTime:
    """Split a 32-bit value into its date word and time word."""
    return DosDateTime.from_value(value)


def decode_value(value: int) -> DateTimeFields:
    """Decode a 32-bit concatenated DOS date/time value."""
    return decode(*unpack(value))
