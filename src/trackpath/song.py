"""Track metadata as seen by the organize format.

A Song is a read-only bag of fields.  String fields default to the empty
string, numeric fields to -1 ("not set").  The "effective" accessors apply
the same fallbacks a music library would: the original year falls back to
the release year when it is not set at all (-1), and the album artist falls
back to the track artist.
"""

import logging
from pathlib import PurePosixPath
from typing import Any, Dict, Mapping, Optional

import mutagen

logger = logging.getLogger(__name__)

STRING_FIELDS = (
    "title",
    "album",
    "artist",
    "albumartist",
    "composer",
    "performer",
    "grouping",
    "lyrics",
    "genre",
    "comment",
    "url",
)

NUMBER_FIELDS = (
    "year",
    "originalyear",
    "track",
    "disc",
    "length_nanosec",
    "bitrate",
    "samplerate",
    "bitdepth",
)


def conv_number(value: Any) -> int:
    """Leniently convert a tag value to an int.

    Lists use their first item, and anything after the leading number is
    ignored, so "3/12" gives 3 and "2009-05-01" gives 2009.  Returns -1 when
    no number can be found.
    """
    if isinstance(value, (list, tuple)):
        value = value[0] if value else ""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)

    value = str(value).strip()
    sign = ""
    if value.startswith("-") or value.startswith("+"):
        sign = value[0]
        value = value[1:]
    i = 0
    while i < len(value) and value[i].isdigit():
        i += 1
    try:
        return int(sign + value[:i])
    except ValueError:
        return -1


def conv_string(value: Any) -> str:
    """First item of a tag list as a string, or "" if missing."""
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        value = value[0] if value else ""
    return str(value)


def conv_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return conv_string(value).strip().lower() in ("1", "true", "yes")


class Song:
    """Metadata for a single track."""

    def __init__(self, **fields: Any):
        unknown = set(fields) - set(STRING_FIELDS) - set(NUMBER_FIELDS) - {"compilation"}
        if unknown:
            raise TypeError(f"Unknown song fields: {', '.join(sorted(unknown))}")

        self._fields: Dict[str, Any] = {}
        for name in STRING_FIELDS:
            self._fields[name] = conv_string(fields.get(name, ""))
        for name in NUMBER_FIELDS:
            self._fields[name] = conv_number(fields.get(name, -1))
        self._fields["compilation"] = conv_bool(fields.get("compilation", False))

    def __getattr__(self, name: str) -> Any:
        try:
            return self.__dict__["_fields"][name]
        except KeyError:
            raise AttributeError(name) from None

    def __repr__(self):
        return "Song({})".format(
            ", ".join(f"{k}={v!r}" for k, v in self._fields.items() if v not in ("", -1, False))
        )

    # "Effective" fields
    # ------------------

    @property
    def effective_originalyear(self) -> int:
        if self.originalyear < 0:
            return self.year
        return self.originalyear

    @property
    def effective_albumartist(self) -> str:
        return self.albumartist if self.albumartist else self.artist

    @property
    def is_compilation(self) -> bool:
        return self.compilation

    # Source file
    # -----------

    @property
    def basefilename(self) -> str:
        """File name of the source, extension included."""
        return PurePosixPath(self.url.replace("\\", "/")).name if self.url else ""

    @property
    def extension(self) -> str:
        """Suffix of the source file name, without the dot."""
        name = self.basefilename
        if "." not in name:
            return ""
        return name.rsplit(".", 1)[1]

    # Construction helpers
    # --------------------

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "Song":
        """Build a song from loosely-named values (e.g. command-line tags).

        Keys are case-insensitive; "path", "file" and "filename" are accepted
        for the source url, and "length" (seconds) for the duration.
        """
        fields: Dict[str, Any] = {}
        for key, value in values.items():
            key = key.strip().lower().replace(" ", "").replace("_", "")
            if key in ("path", "file", "filename"):
                key = "url"
            elif key == "length":
                seconds = conv_number(value)
                fields["length_nanosec"] = seconds * 1_000_000_000 if seconds >= 0 else -1
                continue
            elif key == "lengthnanosec":
                key = "length_nanosec"
            elif key in ("tracknumber",):
                key = "track"
            elif key in ("discnumber",):
                key = "disc"
            elif key == "date":
                key = "year"
            fields[key] = value
        return cls(**fields)

    @classmethod
    def from_file(cls, filename: str) -> Optional["Song"]:
        """Read a song's metadata from an audio file.

        Args:
            filename: Path to the audio file

        Returns:
            Song, or None if mutagen does not recognise the file
        """
        audio = mutagen.File(filename, easy=True)
        if audio is None:
            logger.warning("Unrecognised audio file: %s", filename)
            return None

        tags = audio.tags or {}

        def get(key):
            try:
                return tags.get(key)
            except (KeyError, ValueError):
                return None

        info = audio.info
        length = getattr(info, "length", None)
        bitrate = getattr(info, "bitrate", None)

        song = cls(
            title=get("title"),
            album=get("album"),
            artist=get("artist"),
            albumartist=get("albumartist") or get("album artist"),
            composer=get("composer"),
            performer=get("performer"),
            grouping=get("grouping"),
            lyrics=get("lyrics"),
            genre=get("genre"),
            comment=get("comment") or get("description"),
            year=get("date") or -1,
            originalyear=get("originaldate") or -1,
            track=get("tracknumber") or -1,
            disc=get("discnumber") or -1,
            compilation=get("compilation") or False,
            length_nanosec=int(length * 1_000_000_000) if length else -1,
            bitrate=bitrate // 1000 if bitrate else -1,
            samplerate=getattr(info, "sample_rate", None) or -1,
            bitdepth=getattr(info, "bits_per_sample", None) or -1,
            url=str(filename),
        )
        logger.debug("Read %r", song)
        return song
