"""Render command - Show where audio files would be organized to."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import mutagen
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...organize import OrganizeFormat
from ...song import Song
from ..schemas import RenderedPath, RenderResponse
from ..utils import ExitCode, build_organize_format, json_output, quiet_logs_for_json


def render_song(
    organize_format: OrganizeFormat,
    song: Song,
    source: str,
    extension: Optional[str] = None,
) -> RenderedPath:
    result = organize_format.get_filename_for_song(song, extension)
    if result is None:
        logging.warning("No usable path for %s", source)
        return RenderedPath(source=source, error="no usable path")
    return RenderedPath(source=source, path=result.path, unique=result.unique)


def report(
    organize_format: OrganizeFormat,
    results: List[RenderedPath],
    use_json: bool,
) -> None:
    """Print results as a table (or JSON) and exit with a matching code."""
    failed = sum(1 for r in results if r.error)
    rendered = len(results) - failed
    if not failed:
        status, exit_code = "success", ExitCode.SUCCESS
    elif rendered:
        status, exit_code = "completed_with_errors", ExitCode.SUCCESS
    else:
        status, exit_code = "failed", ExitCode.RENDER_FAILED

    if use_json:
        json_output(
            RenderResponse(
                status=status,
                format=organize_format.format,
                rendered=rendered,
                failed=failed,
                results=results,
            ),
            exit_code,
        )

    console = Console()
    table = Table(title="Rendered Paths")
    table.add_column("Source", style="cyan")
    table.add_column("Path", style="green")
    table.add_column("Unique", justify="center")
    for r in results:
        if r.error:
            table.add_row(escape(r.source), f"[red]✗ {escape(r.error)}[/red]", "")
        else:
            table.add_row(escape(r.source), escape(r.path), "✓" if r.unique else "[yellow]✗[/yellow]")
    console.print(table)

    if failed:
        console.print(f"[yellow]{failed} of {len(results)} could not be rendered[/yellow]")
    sys.exit(exit_code)


def cmd_render(args: argparse.Namespace) -> None:
    """Render the organized path of each audio file.

    Args:
        args: Parsed command-line arguments

    Exit Codes:
        0: At least one file rendered
        10: Invalid input (format or arguments)
        30: No file could be rendered
    """
    use_json = quiet_logs_for_json(args)
    organize_format, extension = build_organize_format(args)

    if not organize_format.is_valid():
        logging.warning("Format is not valid, rendering anyway: %s", organize_format.format)

    results = []
    for filename in args.files:
        path = Path(filename)
        if not path.is_file():
            logging.error("Not a file: %s", path)
            results.append(RenderedPath(source=filename, error="not a file"))
            continue

        try:
            song = Song.from_file(str(path))
        except mutagen.MutagenError as e:
            logging.error("Failed to read tags from %s: %s", path, e)
            results.append(RenderedPath(source=filename, error=f"unreadable: {e}"))
            continue
        if song is None:
            results.append(RenderedPath(source=filename, error="unrecognised audio file"))
            continue

        results.append(render_song(organize_format, song, filename, extension))

    report(organize_format, results, use_json)
