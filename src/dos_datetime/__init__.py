"""DOS date/time codec.

Converts between calendar date/time fields and the packed 32-bit DOS
date/time encoding used by FAT filesystems and ZIP archives.

Main modules:
    codec: DosDateTimeCodec, encode/decode and 32-bit pack/unpack
    models: DateTimeFields, DosDate, DosTime, DosDateTime value types
    cli: Command-line interface (dosdt command)

Core modules:
    clock: Current-time providers
    config: Configuration management
    constants: Bit layout and range limits
    errors: Exception hierarchy
    utils: datetime and mtime conversions with clamping
"""

try:
    from importlib.metadata import version, PackageNotFoundError

    __version__ = version("dos-datetime")
except PackageNotFoundError:
    # Package not installed, read directly from pyproject.toml
    try:
        from pathlib import Path
        import tomllib

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            __version__ = tomllib.load(f)["project"]["version"]
    except (OSError, KeyError, ValueError):
        __version__ = "unknown"

from .codec import (
    DosDateTimeCodec,
    decode,
    decode_value,
    encode,
    get_codec,
    pack,
    unpack,
    validate,
)
from .errors import DosDateTimeError, InvalidArgumentError
from .models import DateTimeFields, DosDate, DosDateTime, DosTime, ValidationMode

__all__ = [
    "__version__",
    "DosDateTimeCodec",
    "encode",
    "decode",
    "decode_value",
    "get_codec",
    "pack",
    "unpack",
    "validate",
    "DateTimeFields",
    "DosDate",
    "DosTime",
    "DosDateTime",
    "ValidationMode",
    "DosDateTimeError",
    "InvalidArgumentError",
]
