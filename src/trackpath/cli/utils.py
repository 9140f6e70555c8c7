"""Utility functions for CLI operations."""

import argparse
import enum
import logging
import sys
from typing import NoReturn, Optional, Tuple

from pydantic import BaseModel

from ..config import Config
from ..organize import OrganizeFormat
from ..sanitize import SanitizationConfig


class ExitCode(enum.IntEnum):
    """Process exit codes, stable for scripting."""

    SUCCESS = 0
    INVALID_INPUT = 10
    DATA_ERROR = 20
    RENDER_FAILED = 30
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
    logging.getLogger().setLevel(numeric_level)


def json_output(response: BaseModel, exit_code: ExitCode = ExitCode.SUCCESS) -> NoReturn:
    """Print a JSON response and exit."""
    print(response.model_dump_json(exclude_none=True, indent=2))
    sys.exit(exit_code)


def quiet_logs_for_json(args: argparse.Namespace) -> bool:
    """Return True in --json mode, raising the log level so stdout stays parseable."""
    use_json = getattr(args, "json", False)
    if use_json and logging.getLogger().level < logging.WARNING:
        logging.getLogger().setLevel(logging.WARNING)
    return use_json


def load_config(args: argparse.Namespace) -> Config:
    return Config(getattr(args, "config", None))


def build_organize_format(
    args: argparse.Namespace, config: Optional[Config] = None
) -> Tuple[OrganizeFormat, Optional[str]]:
    """Create the OrganizeFormat and forced extension for a command.

    Options given on the command line win over the configuration file.

    Returns:
        (OrganizeFormat, extension or None)
    """
    if config is None:
        config = load_config(args)

    options = config.get_sanitization_config()._asdict()
    for name in SanitizationConfig._fields:
        value = getattr(args, name, None)
        if value is not None:
            options[name] = value

    pattern = getattr(args, "format", None) or config.get_format()
    extension = getattr(args, "extension", None) or config.get_extension()
    if extension:
        extension = extension.lstrip(".")

    logging.debug("Using format %r with %r", pattern, options)
    return OrganizeFormat(pattern, SanitizationConfig(**options)), extension or None


def add_sanitize_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the --[no-]<restriction> switches to <parser>."""
    group = parser.add_argument_group("path restrictions (default: from config)")
    for name, help_text in (
        ("remove_problematic", "Remove characters that are unsafe on some systems"),
        ("remove_non_fat", "Remove characters FAT filesystems can't store"),
        ("remove_non_ascii", "Remove non-ASCII characters"),
        ("allow_ascii_ext", "Keep extended ASCII when removing non-ASCII characters"),
        ("replace_spaces", "Replace whitespace with underscores"),
    ):
        group.add_argument(
            "--" + name.replace("_", "-"),
            dest=name,
            action=argparse.BooleanOptionalAction,
            default=None,
            help=help_text,
        )
