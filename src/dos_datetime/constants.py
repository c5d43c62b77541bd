# DOS dates count years from 1980 in a 7-bit field, so 1980 + 127 = 2107
DOS_EPOCH_YEAR = 1980
DOS_MAX_YEAR = 2107

# Bit layout of the date word: yyyyyyym mmmddddd
YEAR_SHIFT = 9
MONTH_SHIFT = 5
YEAR_MASK = 0x7F
MONTH_MASK = 0x0F
DAY_MASK = 0x1F

# Bit layout of the time word: hhhhhmmm mmmsssss (seconds stored halved)
HOUR_SHIFT = 11
MINUTE_SHIFT = 5
HOUR_MASK = 0x1F
MINUTE_MASK = 0x3F
SECOND_MASK = 0x1F
SECOND_RESOLUTION = 2

WORD_MASK = 0xFFFF
WORD_MAX = 0xFFFF
DWORD_MAX = 0xFFFFFFFF

# Inclusive (minimum, maximum) accepted by the strict contract
FIELD_RANGES = {
    "year": (DOS_EPOCH_YEAR, DOS_MAX_YEAR),
    "month": (1, 12),
    "day": (1, 31),
    "hour": (0, 23),
    "minute": (0, 59),
    "second": (0, 59),
    "millisecond": (0, 999),
}

FIELD_NAMES = tuple(FIELD_RANGES)

# Clamp targets for timestamps outside the representable range
DOS_MIN_VALUE = 0x00210000  # 1980-01-01 00:00:00
DOS_MAX_VALUE = 0xFF9FBF7D  # 2107-12-31 23:59:58

# ZIP local/central headers store the time word first, then the date word
ZIP_STRUCT_FORMAT = "<HH"

DISPLAY_FORMAT = "{day:02d}.{month:02d}.{year}  {hour:02d}:{minute:02d}:{second:02d}.{millisecond:03d}"
