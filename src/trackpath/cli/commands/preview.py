"""Preview command - Render a format from tags given on the command line."""

import argparse
import logging
import sys

from ...song import Song
from ..schemas import ErrorResponse
from ..utils import ExitCode, build_organize_format, json_output, quiet_logs_for_json
from .render import render_song, report


def parse_tags(pairs):
    """Turn ["artist=Foo", "track=3"] into a dict.

    Raises:
        ValueError: If an item has no "="
    """
    tags = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Expected KEY=VALUE, got {pair!r}")
        tags[key.strip()] = value
    return tags


def cmd_preview(args: argparse.Namespace) -> None:
    """Render the format for a song described by --tag options.

    Args:
        args: Parsed command-line arguments
    """
    use_json = quiet_logs_for_json(args)

    try:
        song = Song.from_mapping(parse_tags(args.tag))
    except (ValueError, TypeError) as e:
        if use_json:
            json_output(ErrorResponse(error="invalid_input", message=str(e)), ExitCode.INVALID_INPUT)
        logging.error("Invalid tags: %s", e)
        print(f"Invalid tags: {e}", file=sys.stderr)
        sys.exit(ExitCode.INVALID_INPUT)

    organize_format, extension = build_organize_format(args)
    report(organize_format, [render_song(organize_format, song, "<tags>", extension)], use_json)
