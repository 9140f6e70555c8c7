"""trackpath.

Render file paths for music tracks from a user-defined organize format such
as "%albumartist/%album/{%track - }%title".  Optional blocks disappear when
a tag inside them is missing, and the result is cleaned so it can be created
on FAT, ASCII-only or otherwise restricted filesystems.

Main modules:
    organize: OrganizeFormat and RenderResult
    organizeformat: Format parsing, tag resolution and validation
    sanitize: Path cleaning passes and SanitizationConfig
    song: Track metadata (Song), read with mutagen
    cli: Command-line interface (trackpath command)

Core modules:
    config: Configuration management
    constants: Known tags and character classes
"""

try:
    from importlib.metadata import version, PackageNotFoundError

    __version__ = version("trackpath")
except (PackageNotFoundError, ImportError):
    # Package not installed; read directly from pyproject.toml
    try:
        from pathlib import Path
        import tomllib

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            pyproject_data = tomllib.load(f)
            __version__ = pyproject_data["project"]["version"]
    except (OSError, KeyError, ValueError):
        __version__ = "unknown"

from .organize import OrganizeFormat, RenderResult
from .sanitize import SanitizationConfig, sanitize
from .song import Song

__all__ = [
    "OrganizeFormat",
    "RenderResult",
    "SanitizationConfig",
    "Song",
    "sanitize",
    "__version__",
]
