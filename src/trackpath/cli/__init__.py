"""Command-line interface for trackpath.

This package provides the 'trackpath' command-line tool with subcommands:
    render: Render organized paths for audio files
    preview: Render a path from tags given on the command line
    validate: Check a format string
    tags: List the tags a format can use
    config: Show or change saved settings

Modules:
    commands/: Command implementations
    schemas.py: Pydantic models for --json output
    utils.py: CLI utility functions
"""

import argparse
import logging
import sys

from rich_argparse import RichHelpFormatter

from .. import __version__
from .utils import ExitCode, add_sanitize_arguments, setup_logging
from .commands import (
    cmd_render,
    cmd_preview,
    cmd_validate,
    cmd_tags,
    cmd_config,
)

__all__ = [
    "main",
    "cmd_render",
    "cmd_preview",
    "cmd_validate",
    "cmd_tags",
    "cmd_config",
    "setup_logging",
    "__version__",
]


class RichRawHelpFormatter(RichHelpFormatter, argparse.RawDescriptionHelpFormatter):
    """Combines Rich formatting with the ability to keep line breaks (Raw)."""
    pass


def main() -> None:
    """Main CLI entry point."""

    # Parent parser for shared options
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
        default=None,
        help="Set logging level (disabled by default)",
    )

    # Options shared by the commands that render
    render_parent = argparse.ArgumentParser(add_help=False)
    render_parent.add_argument(
        "-f",
        "--format",
        help="Organize format (default: from config)",
    )
    render_parent.add_argument(
        "-e",
        "--extension",
        help="Force this extension on rendered paths (default: keep the source's)",
    )
    render_parent.add_argument("-c", "--config", help="Path to configuration file")
    render_parent.add_argument("--json", action="store_true", help="Output results as JSON")
    add_sanitize_arguments(render_parent)

    parser = argparse.ArgumentParser(
        prog="trackpath",
        usage="trackpath <command> [options]",
        description=(
            "trackpath - Render file paths for music tracks from a format string\n\n"
            "Example format: %albumartist/%album/{%track - }%title"
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
    # render
    # ──────────────────────────────
    render_parser = subparsers.add_parser(
        "render",
        help="Render organized paths for audio files",
        usage="trackpath render <files...> [options]",
        description="Read tags from audio files and print the path each would be organized to",
        parents=[parent_parser, render_parent],
        formatter_class=RichHelpFormatter,
    )
    render_parser.add_argument("files", nargs="+", help="Audio files to render")
    render_parser.set_defaults(func=cmd_render)

    # ──────────────────────────────
    # preview
    # ──────────────────────────────
    preview_parser = subparsers.add_parser(
        "preview",
        help="Render a path from tags given on the command line",
        usage="trackpath preview --tag KEY=VALUE [--tag KEY=VALUE ...] [options]",
        description="Render the format for a song described with --tag options",
        parents=[parent_parser, render_parent],
        formatter_class=RichHelpFormatter,
    )
    preview_parser.add_argument(
        "-t",
        "--tag",
        action="append",
        metavar="KEY=VALUE",
        help="Tag value, e.g. --tag title='So What' --tag track=1 (repeatable)",
    )
    preview_parser.set_defaults(func=cmd_preview)

    # ──────────────────────────────
    # validate
    # ──────────────────────────────
    validate_parser = subparsers.add_parser(
        "validate",
        help="Check a format string",
        usage="trackpath validate <format> [options]",
        description="Check that braces match and that every tag is known",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    validate_parser.add_argument("format", help="Format string to check")
    validate_parser.add_argument("--json", action="store_true", help="Output result as JSON")
    validate_parser.set_defaults(func=cmd_validate)

    # ──────────────────────────────
    # tags
    # ──────────────────────────────
    tags_parser = subparsers.add_parser(
        "tags",
        help="List the tags a format can use",
        usage="trackpath tags",
        description="List known tags and the ones that make a path unique",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    tags_parser.set_defaults(func=cmd_tags)

    # ──────────────────────────────
    # config
    # ──────────────────────────────
    config_parser = subparsers.add_parser(
        "config",
        help="Show or change saved settings",
        usage="trackpath config [options]",
        description="Show the configuration; options given are saved first",
        parents=[parent_parser, render_parent],
        formatter_class=RichHelpFormatter,
    )
    config_parser.set_defaults(func=cmd_config)

    # Parse args
    args = parser.parse_args()

    # Show help if no command is provided
    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Logging setup
    if args.log_level:
        setup_logging(args.log_level)
    else:
        setup_logging("critical")

    # Execute command
    try:
        args.func(args)
    except KeyboardInterrupt:
        logging.info("\nOperation cancelled by user")
        sys.exit(ExitCode.INTERRUPTED)
    except Exception as e:
        logging.error(f"Error: {e}", exc_info=args.log_level == "debug")
        sys.exit(1)


if __name__ == "__main__":
    main()
