"""Utility functions for CLI operations."""

import argparse
import enum
import json
import logging
import sys
from typing import Any, Dict, NoReturn, Tuple, Union

from pydantic import BaseModel

from ..config import Config
from ..models import ValidationMode


class ExitCode(enum.IntEnum):
    """Process exit codes used by every dosdt command."""

    SUCCESS = 0
    ERROR = 1
    INTERRUPTED = 130


def setup_logging(level: str) -> None:
    """Configure logging based on user-specified level.

    Args:
        level: Logging level (debug, info, warning, error, critical)
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # basicConfig is a no-op once handlers exist
    logging.getLogger().setLevel(numeric_level)


def resolve_options(args: argparse.Namespace) -> Tuple[ValidationMode, bool]:
    """Work out the validation mode and JSON flag for a command.

    Command-line flags win; anything not given falls back to the config file.

    Returns:
        Tuple of (mode, use_json)
    """
    config = Config(getattr(args, "config", None))

    mode = getattr(args, "mode", None)
    mode = ValidationMode(mode) if mode else config.get_mode()

    use_json = getattr(args, "json", False) or config.get_json_output()

    # Keep stdout clean for JSON consumers
    if use_json and logging.getLogger().level < logging.WARNING:
        logging.getLogger().setLevel(logging.WARNING)

    return mode, use_json


def json_output(
    response: Union[BaseModel, Dict[str, Any]], exit_code: int = ExitCode.SUCCESS
) -> NoReturn:
    """Print a response as JSON on stdout and exit.

    Args:
        response: Pydantic model or plain dict to serialize
        exit_code: Process exit code
    """
    if isinstance(response, BaseModel):
        text = response.model_dump_json(exclude_none=True, indent=2)
    else:
        text = json.dumps(response, indent=2)
    print(text)
    sys.exit(exit_code)
