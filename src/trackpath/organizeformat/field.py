import re
from typing import Callable

from ..constants import (
    INVALID_DIR_CHARACTERS_REGEX,
    NSEC_PER_SEC,
    UNIQUE_TAGS,
    UNSET_VALUES,
    VARIOUS_ARTISTS,
)
from .expansion import Expansion

_TAG_NAME = re.compile(r"[a-zA-Z]*")
_INVALID_DIR_CHARACTERS = re.compile(INVALID_DIR_CHARACTERS_REGEX, re.IGNORECASE)
_LEADING_THE = re.compile(r"^the\s+", re.IGNORECASE)


def parse(string, start=0):
    """Parse an organize format field starting at <start>.

    Return a tuple: (Field, length of string parsed)

    The string should have the following format:
        '%' [a-zA-Z]*

    A lone '%' is a field with an empty name.
    """
    assert string.startswith("%", start), 'Missing starting "%"'
    name = _TAG_NAME.match(string, start + 1).group()
    return Field(name), len(name) + 1  # one %


def normalize(name, value, remove_problematic=False):
    """Apply the rules every tag value goes through before it is inserted."""
    if value in UNSET_VALUES:
        value = ""

    # Prepend a 0 to single-digit track numbers
    if name == "track" and len(value) == 1:
        value = "0" + value

    # Characters that really shouldn't be in a directory name
    value = _INVALID_DIR_CHARACTERS.sub("", value)
    if remove_problematic:
        value = value.replace(".", "")
    return value.strip()


class Field:
    """An organize format object that references a tag."""

    def __init__(self, name):
        self.name = name

    # The "format" function will adapt based on what "name" is set to
    def get_name(self):
        return self.__name

    def set_name(self, name):
        self.__name = name
        try:
            self.function = self.func_map[name]
        except KeyError:
            # Unknown tags silently resolve to nothing
            self.function = unknown_field

    name = property(get_name, set_name)

    @property
    def is_known(self):
        return self.name in self.func_map

    def value(self, song, remove_problematic=False):
        return normalize(self.name, self.function(song), remove_problematic)

    def format(self, song, remove_problematic=False):
        value = self.value(song, remove_problematic)
        return Expansion(
            value,
            any_empty=not value,
            unique=bool(value) and self.name in UNIQUE_TAGS,
        )

    def __repr__(self):
        return f"Field({repr(self.name)})"

    def __eq__(self, other):
        return isinstance(other, Field) and other.name == self.name

    def to_string(self):
        return "%" + self.name

    func_map: dict[str, Callable] = {}

    @classmethod
    def RegisterField(cls, name, function):
        cls.func_map[name] = function

    @classmethod
    def RegisterSimpleField(cls, name, attribute=None):
        attribute = attribute or name

        def getter(song):
            return getattr(song, attribute)

        getter.__name__ = f"get_{name}"
        cls.RegisterField(name, getter)

    @classmethod
    def RegisterNumberField(cls, name, attribute=None):
        attribute = attribute or name

        def getter(song):
            return str(getattr(song, attribute))

        getter.__name__ = f"get_{name}"
        cls.RegisterField(name, getter)


def unknown_field(song):
    return ""


def tag_value(name, song, remove_problematic=False):
    """Resolve a single tag for a song, normalized and ready to insert."""
    return Field(name).value(song, remove_problematic)


# ---------------------------------------------------------------------------
# Known tags
# ---------------------------------------------------------------------------

for name in (
    "title",
    "album",
    "artist",
    "composer",
    "performer",
    "grouping",
    "lyrics",
    "genre",
    "comment",
    "extension",
):
    Field.RegisterSimpleField(name)

for name, attribute in {
    "year": "year",
    "originalyear": "effective_originalyear",
    "track": "track",
    "disc": "disc",
    "bitrate": "bitrate",
    "samplerate": "samplerate",
    "bitdepth": "bitdepth",
}.items():
    Field.RegisterNumberField(name, attribute)


def get_length(song):
    nanosec = song.length_nanosec
    seconds = abs(nanosec) // NSEC_PER_SEC
    return str(-seconds if nanosec < 0 else seconds)


Field.RegisterField("length", get_length)


def get_artistinitial(song):
    value = song.effective_albumartist.strip()
    if not value:
        return ""
    value = _LEADING_THE.sub("", value)
    # upper() may return more than one character, e.g. for "ß"
    return value[0].upper()[0]


def get_albumartist(song):
    if song.is_compilation:
        return VARIOUS_ARTISTS
    return song.effective_albumartist


Field.RegisterField("artistinitial", get_artistinitial)
Field.RegisterField("albumartist", get_albumartist)
