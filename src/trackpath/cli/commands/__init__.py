"""CLI command implementations.

Each module in this package implements a specific trackpath subcommand:
    render.py: Render paths for audio files
    preview.py: Render a path from tags given on the command line
    validate.py: Check a format string
    tags.py: List known tags
    config.py: Show or change saved settings
"""

from .render import cmd_render
from .preview import cmd_preview
from .validate import cmd_validate
from .tags import cmd_tags
from .config import cmd_config

__all__ = [
    "cmd_render",
    "cmd_preview",
    "cmd_validate",
    "cmd_tags",
    "cmd_config",
]
