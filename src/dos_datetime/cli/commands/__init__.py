"""CLI command implementations.

Each module in this package implements a dosdt subcommand:
    encode.py: Pack date/time fields into DOS date and time words
    decode.py: Unpack DOS date and time words into fields
"""

from .encode import cmd_encode
from .decode import cmd_decode

__all__ = [
    "cmd_encode",
    "cmd_decode",
]
