"""Turn an expanded organize format into a path that is safe to create.

The passes in sanitize() run in a fixed order, and the order matters:
transliteration has to happen before FAT and non-ASCII stripping so that
"é" survives as "e" instead of being dropped, and the extension has to be
split off before the per-segment prefix fixups so that a name like
".mp3" is not mistaken for a hidden file.
"""

import re
import unicodedata
from typing import NamedTuple, Optional, Tuple

from unidecode import unidecode

from .constants import (
    ASCII_LIMIT,
    EXTENDED_ASCII_LIMIT,
    INVALID_DIR_CHARACTERS_REGEX,
    INVALID_FAT_CHARACTERS_REGEX,
    INVALID_PREFIX_CHARACTERS,
    PROBLEMATIC_CHARACTERS_REGEX,
)

_PROBLEMATIC_CHARACTERS = re.compile(PROBLEMATIC_CHARACTERS_REGEX, re.IGNORECASE)
_INVALID_FAT_CHARACTERS = re.compile(INVALID_FAT_CHARACTERS_REGEX, re.IGNORECASE)
_INVALID_DIR_CHARACTERS = re.compile(INVALID_DIR_CHARACTERS_REGEX)
_WHITESPACE = re.compile(r"\s")


class SanitizationConfig(NamedTuple):
    """Which restrictions to apply when cleaning a path.

    remove_problematic  strip characters that are unsafe on some OS
    remove_non_fat      strip characters FAT can't store (implies transliteration)
    remove_non_ascii    strip characters outside ASCII, keeping base letters
    allow_ascii_ext     with remove_non_ascii, allow up to code point 254
    replace_spaces      turn whitespace into underscores
    """

    remove_problematic: bool = False
    remove_non_fat: bool = False
    remove_non_ascii: bool = False
    allow_ascii_ext: bool = False
    replace_spaces: bool = True


def transliterate(text: str) -> str:
    """Replace non-ASCII characters with their closest ASCII spelling."""
    return "".join(
        c if ord(c) < ASCII_LIMIT else _INVALID_DIR_CHARACTERS.sub("", unidecode(c))
        for c in text
    )


def _decomposition_base(c: str) -> Optional[str]:
    """First character of the Unicode decomposition of <c>, if it has one."""
    for part in unicodedata.decomposition(c).split():
        if part.startswith("<"):
            # Compatibility formatting tag, e.g. <compat> or <super>
            continue
        return chr(int(part, 16))
    return None


def strip_non_ascii(text: str, limit: int = ASCII_LIMIT) -> str:
    """Drop characters at or above <limit>.

    A dropped character is replaced by the first character of its
    decomposition when that one is below the limit (so "é" becomes "e").
    """
    stripped = []
    for c in text:
        if ord(c) < limit:
            stripped.append(c)
            continue
        base = _decomposition_base(c)
        if base is not None and ord(base) < limit:
            stripped.append(base)
    return "".join(stripped)


def simplify(text: str) -> str:
    """Trim <text> and collapse every run of whitespace into one space."""
    return " ".join(text.split())


def split_extension(
    path: str, extension: Optional[str] = None, fallback_extension: str = ""
) -> Tuple[str, str]:
    """Remove the suffix from the last segment of <path>.

    Returns:
        (path without suffix, extension to append later).  The extension is
        <extension> if given, else the suffix that was removed, else
        <fallback_extension>.
    """
    directory, sep, name = path.rpartition("/")
    base, dot, suffix = name.rpartition(".")
    if not dot:
        base, suffix = name, ""

    if not extension:
        extension = suffix or fallback_extension

    if sep and directory != ".":
        return directory + "/" + base, extension
    return base, extension


def fix_prefixes(path: str) -> str:
    """Strip one invalid leading character and surrounding blanks per segment."""
    parts = []
    for part in path.split("/"):
        if part.startswith(tuple(INVALID_PREFIX_CHARACTERS)):
            part = part[1:]
        parts.append(part.strip())
    return "/".join(parts)


def sanitize(
    path: str,
    config: SanitizationConfig = SanitizationConfig(),
    extension: Optional[str] = None,
    fallback_extension: str = "",
) -> str:
    """Clean an expanded path according to <config>.

    Args:
        path: Relative path produced by an organize format
        config: Restrictions to apply
        extension: Extension to force on the result (without the dot)
        fallback_extension: Extension used when <path> has none

    Returns:
        The cleaned path, with the extension (if any) appended last
    """
    if config.remove_problematic:
        path = _PROBLEMATIC_CHARACTERS.sub("", path)

    if config.remove_non_fat or (config.remove_non_ascii and not config.allow_ascii_ext):
        path = transliterate(path)

    if config.remove_non_fat:
        path = _INVALID_FAT_CHARACTERS.sub("", path)

    if config.remove_non_ascii:
        limit = EXTENDED_ASCII_LIMIT if config.allow_ascii_ext else ASCII_LIMIT
        path = strip_non_ascii(path, limit)

    # Remove repeated whitespace
    path = simplify(path)

    path, extension = split_extension(path, extension, fallback_extension)
    path = fix_prefixes(path)

    if config.replace_spaces:
        path = _WHITESPACE.sub("_", path)

    if extension:
        path += "." + extension
    return path
