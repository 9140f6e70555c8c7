# Tags understood by the organize format, in the order they are listed to users
KNOWN_TAGS = [
    "title",
    "album",
    "artist",
    "artistinitial",
    "albumartist",
    "composer",
    "track",
    "disc",
    "year",
    "originalyear",
    "genre",
    "comment",
    "length",
    "bitrate",
    "samplerate",
    "bitdepth",
    "extension",
    "performer",
    "grouping",
    "lyrics",
]

# A non-empty value for any of these marks a rendered name as distinguishing
UNIQUE_TAGS = frozenset(["title", "track"])

NUMERIC_TAGS = frozenset(
    ["year", "originalyear", "track", "disc", "length", "bitrate", "samplerate", "bitdepth"]
)

# Values the metadata layer uses for "not set"
UNSET_VALUES = frozenset(["0", "-1"])

VARIOUS_ARTISTS = "Various Artists"

NSEC_PER_SEC = 1_000_000_000

DEFAULT_FORMAT = (
    "%albumartist/%album{ (Disc %disc)}/{%track - }{%albumartist - }"
    "%album{ (Disc %disc)} - %title.%extension"
)

# Character classes used when cleaning paths.
# Problematic: unsafe on at least one common OS.
PROBLEMATIC_CHARACTERS_REGEX = r'[:?*"<>|]'
# FAT: anything outside the set FAT accepts (letters, digits, a few symbols,
# path separator, dot and space).
INVALID_FAT_CHARACTERS_REGEX = r"[^a-z0-9!#$%&'()\-@\^_`{}~/. ]"
# Never allowed inside a single directory component.
INVALID_DIR_CHARACTERS_REGEX = r"[/\\]"
# Stripped (once) from the start of every path segment.
INVALID_PREFIX_CHARACTERS = "."

ASCII_LIMIT = 128
EXTENDED_ASCII_LIMIT = 255

# Blocks nested deeper than this are kept as literal text
MAX_BLOCK_DEPTH = 100
