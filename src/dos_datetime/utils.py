import logging
import time
from datetime import datetime, timezone

from .codec import decode_value, encode
from .constants import DOS_EPOCH_YEAR, DOS_MAX_VALUE, DOS_MAX_YEAR, DOS_MIN_VALUE
from .errors import InvalidArgumentError
from .models import DateTimeFields, DosDateTime


def clamp_fields(fields: DateTimeFields) -> DosDateTime:
    """Encode fields, pinning years outside 1980-2107 to the nearest limit.

    Args:
        fields: Calendar fields (all but the year must be in range)

    Returns:
        DosDateTime, 1980-01-01 00:00:00 for early years and
        2107-12-31 23:59:58 for late ones
    """
    if fields.year < DOS_EPOCH_YEAR:
        logging.debug("Clamping %s to the DOS minimum", fields.format())
        return DosDateTime.from_value(DOS_MIN_VALUE)
    if fields.year > DOS_MAX_YEAR:
        logging.debug("Clamping %s to the DOS maximum", fields.format())
        return DosDateTime.from_value(DOS_MAX_VALUE)
    return encode(fields)


def datetime_to_dos(dt: datetime, clamp: bool = True) -> DosDateTime:
    """Convert a datetime to a DOS date/time pair.

    Timezone info is ignored; the wall-clock fields are encoded as they are.

    Args:
        dt: Date and time to convert
        clamp: Pin out-of-range years to the DOS limits instead of raising

    Returns:
        DosDateTime pair

    Raises:
        InvalidArgumentError: If clamp is False and the year is out of range
    """
    fields = DateTimeFields.from_datetime(dt)
    if clamp:
        return clamp_fields(fields)
    return encode(fields)


def dos_to_datetime(value: int) -> datetime:
    """Convert a 32-bit DOS date/time value to a naive datetime.

    Raises:
        InvalidArgumentError: If the value does not decode to a calendar date
    """
    return decode_value(value).to_datetime()


def mtime_to_dos(mtime: float, clamp: bool = True) -> int:
    """Convert from the mtime returned by os.stat to a 32-bit DOS value.

    The timestamp is read as UTC.

    Args:
        mtime: Modification time from os.stat()
        clamp: Pin out-of-range years to the DOS limits instead of raising

    Returns:
        DOS date/time as a 32-bit integer
    """
    year, month, day, hour, minute, second = time.gmtime(mtime)[:6]
    fields = DateTimeFields(year, month, day, hour, minute, second)
    if clamp:
        return clamp_fields(fields).value
    return encode(fields).value


def dos_to_mtime(value: int) -> float:
    """Convert a 32-bit DOS value to a Unix timestamp, reading it as UTC.

    Raises:
        InvalidArgumentError: If the value does not decode to a calendar date
    """
    try:
        return dos_to_datetime(value).replace(tzinfo=timezone.utc).timestamp()
    except InvalidArgumentError:
        logging.debug("DOS value 0x%08x is not a calendar date", value)
        raise
