"""Command-line interface for the DOS date/time codec (dosdt).

This package provides the 'dosdt' command-line tool with two subcommands:
    encode: Pack date/time fields (or the current time) into DOS words
    decode: Unpack DOS words into date/time fields

Modules:
    commands/: Command implementations (encode, decode)
    display.py: Shared table rendering
    schemas.py: Pydantic models for --json output
    utils.py: Logging setup, exit codes and JSON output
"""

import argparse
import logging
import sys
from typing import Optional

from rich_argparse import RichHelpFormatter

from .. import __version__
from ..clock import Clock
from .utils import ExitCode, setup_logging
from .commands import cmd_encode, cmd_decode

__all__ = [
    "main",
    "cmd_encode",
    "cmd_decode",
    "setup_logging",
]


class RichRawHelpFormatter(RichHelpFormatter, argparse.RawDescriptionHelpFormatter):
    """Combines Rich formatting with the ability to keep line breaks (Raw)."""
    pass


def main(clock: Optional[Clock] = None) -> None:
    """Main CLI entry point.

    Args:
        clock: Time source for 'encode' without arguments (default: system clock)
    """

    # Parent parser for shared options. SUPPRESS keeps a subcommand's
    # defaults from overwriting values given before the subcommand.
    parent_parser = argparse.ArgumentParser(add_help=False)

    parent_parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parent_parser.add_argument(
        "-l",
        "--log-level",
        default=argparse.SUPPRESS,
        help="Set logging level (disabled by default)",
    )
    parent_parser.add_argument(
        "-c",
        "--config",
        default=argparse.SUPPRESS,
        help="Path to configuration file (default: ~/.dosdt/config.toml)",
    )

    # Options shared by both subcommands
    codec_parser = argparse.ArgumentParser(add_help=False)
    codec_parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON document instead of a table",
    )

    parser = argparse.ArgumentParser(
        prog="dosdt",
        usage="dosdt <command> [options]",
        description=(
            "DOS date/time codec - Convert between calendar dates and the\n"
            "packed 32-bit DOS date/time used by FAT filesystems and ZIP archives"
        ),
        formatter_class=RichRawHelpFormatter,
        parents=[parent_parser],
    )

    subparsers = parser.add_subparsers(
        title="Commands",
        dest="command",
        metavar="",
    )

    # ──────────────────────────────
    # encode
    # ──────────────────────────────
    encode_parser = subparsers.add_parser(
        "encode",
        help="Encode date/time fields into DOS date and time words",
        usage="dosdt encode [Year] [Month] [Day] [Hour] [Minute] [Second] [Milliseconds] [options]",
        description=(
            "Pack up to seven integer fields into a DOS date word and time word.\n"
            "Omitted fields default to 1980-01-01 00:00:00.000; with no fields\n"
            "at all the current time (UTC) is used. Milliseconds never affect\n"
            "the result and seconds are stored with 2-second resolution."
        ),
        parents=[parent_parser, codec_parser],
        formatter_class=RichRawHelpFormatter,
    )
    encode_parser.add_argument(
        "values",
        nargs="*",
        metavar="field",
        help="Year (1980-2107), Month, Day, Hour, Minute, Second, Milliseconds",
    )
    mode_group = encode_parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "--strict",
        dest="mode",
        action="store_const",
        const="strict",
        help="Reject any field outside its natural range (default)",
    )
    mode_group.add_argument(
        "--loose",
        dest="mode",
        action="store_const",
        const="loose",
        help=(
            "Legacy behaviour: only check Year, Month >= 1 and Day >= 1, "
            "and let other out-of-range fields alias into neighbouring bits"
        ),
    )
    encode_parser.set_defaults(func=cmd_encode)

    # ──────────────────────────────
    # decode
    # ──────────────────────────────
    decode_parser = subparsers.add_parser(
        "decode",
        help="Decode DOS date and time words into fields",
        usage="dosdt decode <DosDateTime> | <DosDate> <DosTime> [options]",
        description=(
            "Unpack a 32-bit DOS date/time value, or a 16-bit date word and\n"
            "time word. Values may be decimal or 0x-prefixed hexadecimal."
        ),
        parents=[parent_parser, codec_parser],
        formatter_class=RichRawHelpFormatter,
    )
    decode_parser.add_argument(
        "values",
        nargs="+",
        metavar="value",
        help="32-bit DOS date/time, or DOS date followed by DOS time",
    )
    decode_parser.set_defaults(func=cmd_decode)

    # Parse args
    args = parser.parse_args()
    args.clock = clock

    # Show help if no command is provided
    if not args.command:
        parser.print_help()
        sys.exit(ExitCode.ERROR)

    # Logging setup
    log_level = getattr(args, "log_level", None)
    if log_level:
        setup_logging(log_level)
    else:
        setup_logging("critical")

    # Execute command
    try:
        args.func(args)
    except KeyboardInterrupt:
        logging.info("\nOperation cancelled by user")
        sys.exit(ExitCode.INTERRUPTED)
    except Exception as e:
        logging.error(f"Error: {e}", exc_info=log_level == "debug")
        sys.exit(ExitCode.ERROR)


if __name__ == "__main__":
    main()
