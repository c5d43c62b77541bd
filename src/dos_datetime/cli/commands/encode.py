"""Encode command - Pack date/time fields into DOS date and time words."""

import argparse
import logging
import sys
from typing import List, NoReturn

from rich.console import Console
from rich.markup import escape

from ...clock import SystemClock
from ...codec import get_codec
from ...constants import DOS_EPOCH_YEAR, DOS_MAX_YEAR, FIELD_NAMES, WORD_MAX
from ...errors import InvalidArgumentError
from ...models import DateTimeFields
from ..display import packed_table, packed_values
from ..schemas import EncodeSuccessResponse, ErrorResponse, FieldsModel
from ..utils import ExitCode, json_output, resolve_options

USAGE = (
    "Usage: dosdt encode [1980<=Year<=2107] [Month=1] [Day=1] "
    "[Hour] [Minute] [Second] [Milliseconds]\n"
    "       When no args are supplied, current time (UTC) will be used.\n"
    "       Unsupplied args are set to 0"
)


def _fail(console: Console, use_json: bool, error: str, message: str) -> NoReturn:
    if use_json:
        json_output(ErrorResponse(error=error, message=message), ExitCode.ERROR)
    logging.debug("encode rejected input: %s", message)
    console.print(f"[red]{escape(message)}[/red]", highlight=False, soft_wrap=True)
    console.print(USAGE, markup=False, highlight=False, soft_wrap=True)
    sys.exit(ExitCode.ERROR)


def parse_fields(values: List[str]) -> DateTimeFields:
    """Turn positional argument strings into fields.

    Missing trailing values keep the DateTimeFields defaults
    (1980-01-01 00:00:00.000). Every value must be a decimal integer that
    fits an unsigned 16-bit word.

    Raises:
        InvalidArgumentError: Naming the argument that failed to parse
    """
    parsed = []
    for name, text in zip(FIELD_NAMES, values):
        label = "Milliseconds" if name == "millisecond" else name.capitalize()
        try:
            number = int(text)
        except ValueError:
            raise InvalidArgumentError(
                name, text, message=f"Failed to parse {label} argument '{text}'"
            ) from None
        if not 0 <= number <= WORD_MAX:
            raise InvalidArgumentError(
                name, number, message=f"Failed to parse {label} argument '{text}'"
            )
        parsed.append(number)
    return DateTimeFields(*parsed)


def check_fields(fields: DateTimeFields) -> None:
    """Apply the coarse checks every mode performs.

    Raises:
        InvalidArgumentError: If year, month or day is unusable
    """
    if not DOS_EPOCH_YEAR <= fields.year <= DOS_MAX_YEAR:
        raise InvalidArgumentError(
            "year",
            fields.year,
            DOS_EPOCH_YEAR,
            DOS_MAX_YEAR,
            message=(
                f"Invalid Year argument '{fields.year}'. "
                f"Year must be between {DOS_EPOCH_YEAR} and {DOS_MAX_YEAR}"
            ),
        )
    if fields.month < 1:
        raise InvalidArgumentError(
            "month",
            fields.month,
            1,
            12,
            message=f"Invalid Month argument '{fields.month}'. Month must be between 1 and 12",
        )
    if fields.day < 1:
        raise InvalidArgumentError(
            "day",
            fields.day,
            1,
            31,
            message=f"Invalid Day argument '{fields.day}'. Day must be between 1 and 31",
        )


def cmd_encode(args: argparse.Namespace) -> None:
    """Encode date/time fields and print the DOS words.

    Args:
        args: Parsed command-line arguments

    Exit Codes:
        0: Success
        1: Bad arguments or a field rejected by the active contract
    """
    console = Console()
    mode, use_json = resolve_options(args)
    values = args.values or []

    if len(values) > len(FIELD_NAMES):
        _fail(console, use_json, "too_many_arguments", "Too many arguments")

    if values:
        source = "arguments"
        try:
            fields = parse_fields(values)
        except InvalidArgumentError as e:
            _fail(console, use_json, "parse_error", str(e))
    else:
        source = "clock"
        clock = getattr(args, "clock", None) or SystemClock()
        fields = clock.now()
        logging.info("No fields given, using current time %s", fields.format())

    try:
        check_fields(fields)
        pair = get_codec(mode).encode(fields)
    except InvalidArgumentError as e:
        _fail(console, use_json, "invalid_argument", str(e))

    if use_json:
        json_output(
            EncodeSuccessResponse(
                mode=mode.value,
                source=source,
                time=fields.format(),
                fields=FieldsModel.from_fields(fields),
                **packed_values(pair),
            ),
            ExitCode.SUCCESS,
        )

    console.print(packed_table(f"DOS date/time ({mode.value})", fields, pair))
