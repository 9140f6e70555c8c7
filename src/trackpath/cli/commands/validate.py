"""Validate command - Check an organize format for mistakes."""

import argparse
import sys

from rich.console import Console
from rich.markup import escape

from ...organizeformat import ValidationState, validate
from ...organizeformat.validator import unknown_tags
from ..schemas import ValidateResponse
from ..utils import ExitCode, json_output, quiet_logs_for_json


def cmd_validate(args: argparse.Namespace) -> None:
    """Validate a format string.

    Args:
        args: Parsed command-line arguments

    Exit Codes:
        0: Format is acceptable
        10: Format is incomplete or invalid
    """
    use_json = quiet_logs_for_json(args)
    pattern = args.format.replace("\\", "/")
    state = validate(pattern)
    unknown = unknown_tags(pattern)
    exit_code = ExitCode.SUCCESS if state is ValidationState.ACCEPTABLE else ExitCode.INVALID_INPUT

    if use_json:
        json_output(
            ValidateResponse(status=state.name.lower(), format=pattern, unknown_tags=unknown),
            exit_code,
        )

    console = Console()
    console.print(f"\n[cyan]Format:[/cyan] {escape(pattern)}\n", highlight=False)
    if state is ValidationState.ACCEPTABLE:
        console.print("[green bold]✓ Format is valid[/green bold]")
    elif state is ValidationState.INTERMEDIATE:
        console.print("[yellow bold]… Format is incomplete[/yellow bold] (unclosed block?)")
    else:
        console.print("[red bold]✗ Format is invalid[/red bold]")

    if unknown:
        console.print("\n[red]Unknown tags:[/red]")
        for tag in unknown:
            console.print(f"  [red]•[/red] %{escape(tag)}", highlight=False)
    console.print()
    sys.exit(exit_code)
