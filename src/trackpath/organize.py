"""Build a relative file path for a song from an organize format."""

import logging
from typing import NamedTuple, Optional

from . import organizeformat
from .constants import DEFAULT_FORMAT
from .organizeformat.expansion import Expansion
from .organizeformat.validator import ValidationState
from .sanitize import SanitizationConfig, sanitize
from .song import Song

logger = logging.getLogger(__name__)


class RenderResult(NamedTuple):
    """A rendered path.

    <unique> is True when a title or track number went into the path, which
    makes it likely to tell songs apart.  Callers that see False should
    expect collisions and deduplicate the name themselves.
    """

    path: str
    unique: bool = False


def _is_degenerate(path: str) -> bool:
    """True if <path> can't name a file.

    That is an empty path, a path with no file name, or one whose directory
    part is nothing but separators (e.g. "/name").
    """
    directory, sep, name = path.rpartition("/")
    if not name:
        return True
    return bool(sep) and not directory.strip("/")


class OrganizeFormat:
    """An organize format together with the restrictions used to clean paths."""

    def __init__(
        self,
        format: str = DEFAULT_FORMAT,
        config: Optional[SanitizationConfig] = None,
    ):
        self.format = format
        self.config = config if config is not None else SanitizationConfig()

    def get_format(self) -> str:
        return self.__format

    def set_format(self, format: str) -> None:
        # Users may type either path separator
        self.__format = format.replace("\\", "/")
        self.__compiled = organizeformat.compile(self.__format)

    format = property(get_format, set_format)

    def is_valid(self) -> bool:
        return organizeformat.validate(self.format) is ValidationState.ACCEPTABLE

    def tag_value(self, tag: str, song: Song) -> str:
        return organizeformat.tag_value(tag, song, self.config.remove_problematic)

    def parse_block(self, block: str, song: Song) -> Expansion:
        """Expand an arbitrary piece of format text for <song>."""
        return organizeformat.format(block, song, self.config.remove_problematic)

    def get_filename_for_song(
        self, song: Song, extension: Optional[str] = None
    ) -> Optional[RenderResult]:
        """Render the path <song> should be stored at.

        Args:
            song: Song to render
            extension: Extension to force (without the dot); by default the
                extension comes from the format or the song's file

        Returns:
            RenderResult, or None if no usable path could be produced
        """
        expansion = self.__compiled.format(song, self.config.remove_problematic)
        filepath = expansion.text

        if not filepath:
            filepath = song.basefilename

        directory, sep, name = filepath.rpartition("/")
        base = name.rpartition(".")[0] if "." in name else name
        if not base:
            # Avoid empty filenames, or filenames with an extension only:
            # keep the original file name instead.
            filepath = song.basefilename
            if sep:
                filepath = directory + "/" + filepath

        if _is_degenerate(filepath):
            logger.debug("No usable path for %r from %r", song, self.format)
            return None

        filepath = sanitize(filepath, self.config, extension, song.extension)
        logger.debug("Rendered %r", filepath)
        return RenderResult(filepath, expansion.unique)

    def __repr__(self):
        return f"OrganizeFormat({self.format!r}, {self.config!r})"
