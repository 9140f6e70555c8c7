"""Config command - Show or change the saved settings."""

import argparse
import logging
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...organizeformat import ValidationState, validate
from ...sanitize import SanitizationConfig
from ..schemas import ConfigResponse, ErrorResponse
from ..utils import ExitCode, json_output, load_config, quiet_logs_for_json


def cmd_config(args: argparse.Namespace) -> None:
    """Show the configuration, updating it first if options were given.

    Args:
        args: Parsed command-line arguments
    """
    use_json = quiet_logs_for_json(args)
    config = load_config(args)

    try:
        if args.format is not None:
            if validate(args.format.replace("\\", "/")) is not ValidationState.ACCEPTABLE:
                raise ValueError(f"Invalid format: {args.format}")
            config.set_format(args.format)
        if args.extension is not None:
            config.set_extension(args.extension)
        for name in SanitizationConfig._fields:
            value = getattr(args, name, None)
            if value is not None:
                config.set_sanitization_option(name, value)
    except ValueError as e:
        if use_json:
            json_output(ErrorResponse(error="invalid_input", message=str(e)), ExitCode.INVALID_INPUT)
        logging.error("%s", e)
        print(e, file=sys.stderr)
        sys.exit(ExitCode.INVALID_INPUT)

    saved = False
    if config.is_dirty():
        if not config.save():
            if use_json:
                json_output(
                    ErrorResponse(error="data_error", message=f"Could not write {config.config_path}"),
                    ExitCode.DATA_ERROR,
                )
            logging.error("Could not write %s", config.config_path)
            sys.exit(ExitCode.DATA_ERROR)
        saved = True

    sanitize = config.get_sanitization_config()._asdict()
    if use_json:
        json_output(
            ConfigResponse(
                config_path=str(config.config_path),
                format=config.get_format(),
                extension=config.get_extension(),
                sanitize=sanitize,
                saved=saved,
            )
        )

    console = Console()
    table = Table(title="Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")
    table.add_row("file", escape(str(config.config_path)))
    table.add_row("format", escape(config.get_format()))
    table.add_row("extension", escape(config.get_extension() or "(from source file)"))
    for name, enabled in sanitize.items():
        table.add_row(name, "on" if enabled else "off")
    console.print(table)
    if saved:
        console.print("[green]✓ Configuration saved[/green]")
