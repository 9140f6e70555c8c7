"""Pytest configuration and fixtures."""

import pytest

from trackpath.config import Config
from trackpath.song import Song


@pytest.fixture
def song():
    """A fully tagged song."""
    return Song(
        title="So What",
        album="Kind of Blue",
        artist="Miles Davis",
        albumartist="Miles Davis",
        genre="Jazz",
        year=1959,
        track=1,
        disc=1,
        length_nanosec=562_000_000_000,
        bitrate=320,
        samplerate=44100,
        bitdepth=16,
        url="/music/incoming/01 so what.mp3",
    )


@pytest.fixture
def bare_song():
    """A song with nothing but a file name."""
    return Song(url="/music/incoming/track01.flac")


@pytest.fixture
def config_path(tmp_path):
    """Location for a throwaway configuration file."""
    return tmp_path / "config.toml"


@pytest.fixture
def config(config_path):
    """A Config that never touches the user's home directory."""
    return Config(config_path)
