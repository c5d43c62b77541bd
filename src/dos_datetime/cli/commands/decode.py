"""Decode command - Unpack DOS date and time words into fields."""

import argparse
import logging
import sys
from typing import NoReturn

from rich.console import Console
from rich.markup import escape

from ...codec import decode
from ...errors import InvalidArgumentError
from ...models import DosDate, DosDateTime, DosTime
from ..display import packed_table, packed_values
from ..schemas import DecodeSuccessResponse, ErrorResponse, FieldsModel
from ..utils import ExitCode, json_output, resolve_options

USAGE = (
    "Usage: dosdt decode <DosDateTime>\n"
    "       dosdt decode <DosDate> <DosTime>\n"
    "       Values may be decimal or 0x-prefixed hexadecimal."
)


def _fail(console: Console, use_json: bool, error: str, message: str) -> NoReturn:
    if use_json:
        json_output(ErrorResponse(error=error, message=message), ExitCode.ERROR)
    console.print(f"[red]{escape(message)}[/red]", highlight=False, soft_wrap=True)
    console.print(USAGE, markup=False, highlight=False, soft_wrap=True)
    sys.exit(ExitCode.ERROR)


def _parse_int(label: str, text: str) -> int:
    try:
        return int(text, 0)
    except ValueError:
        raise InvalidArgumentError(
            label, text, message=f"Failed to parse {label} argument '{text}'"
        ) from None


def cmd_decode(args: argparse.Namespace) -> None:
    """Decode a packed DOS date/time and print its fields.

    Args:
        args: Parsed command-line arguments

    Exit Codes:
        0: Success (also for bit patterns that are not calendar dates)
        1: Unparsable or out-of-range values
    """
    console = Console()
    _, use_json = resolve_options(args)
    values = args.values

    if len(values) > 2:
        _fail(console, use_json, "too_many_arguments", "Too many arguments")

    labels = ("DosDateTime",) if len(values) == 1 else ("DosDate", "DosTime")
    try:
        numbers = [_parse_int(label, text) for label, text in zip(labels, values)]
    except InvalidArgumentError as e:
        _fail(console, use_json, "parse_error", str(e))

    try:
        if len(numbers) == 1:
            pair = DosDateTime.from_value(numbers[0])
        else:
            pair = DosDateTime(DosDate(numbers[0]), DosTime(numbers[1]))
    except InvalidArgumentError as e:
        _fail(console, use_json, "invalid_argument", str(e))

    fields = decode(pair.date, pair.time)

    try:
        fields.to_datetime()
        valid_date = True
    except InvalidArgumentError as e:
        logging.info("Decoded value is not a calendar date: %s", e)
        valid_date = False

    if use_json:
        json_output(
            DecodeSuccessResponse(
                time=fields.format(),
                fields=FieldsModel.from_fields(fields),
                valid_date=valid_date,
                **packed_values(pair),
            ),
            ExitCode.SUCCESS,
        )

    console.print(packed_table("Decoded DOS date/time", fields, pair))
    if not valid_date:
        console.print("[yellow]Warning: not a valid calendar date[/yellow]")
