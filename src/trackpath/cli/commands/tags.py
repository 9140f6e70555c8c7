"""Tags command - List the tags an organize format can use."""

import argparse

from rich.console import Console
from rich.table import Table

from ...constants import KNOWN_TAGS, NUMERIC_TAGS, UNIQUE_TAGS


def cmd_tags(args: argparse.Namespace) -> None:
    """Print the known tags.

    Args:
        args: Parsed command-line arguments
    """
    console = Console()
    table = Table(title="Known Tags")
    table.add_column("Tag", style="cyan")
    table.add_column("Type")
    table.add_column("Unique", justify="center")
    for tag in KNOWN_TAGS:
        table.add_row(
            f"%{tag}",
            "number" if tag in NUMERIC_TAGS else "text",
            "✓" if tag in UNIQUE_TAGS else "",
        )
    console.print(table)
    console.print(
        "\nWrap text in {...} to make it optional: it is left out when a tag "
        "inside it is empty, e.g. [cyan]%title{ (%year)}[/cyan]",
        highlight=False,
    )
