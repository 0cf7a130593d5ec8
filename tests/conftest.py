import os
from datetime import datetime, timezone

import pytest

from musiccatalog.core.exceptions import ExtractionError
from musiccatalog.core.models import RawTags


FIXED_TIME = datetime(2026, 10, 18, 12, 0, 0, tzinfo=timezone.utc)


class FakeExtractor:
    """Returns canned tags per filename; unknown files fail like unreadable audio"""

    def __init__(self, tags_by_filename=None):
        self.tags_by_filename = tags_by_filename or {}
        self.calls = []

    def extract(self, filepath):
        self.calls.append(filepath)
        filename = os.path.basename(filepath)
        value = self.tags_by_filename.get(filename)
        if value is None:
            raise ExtractionError("Could not read audio file", filepath=filepath)
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    # Record every MUSIC_CATALOG_* variable so teardown restores the original state
    for name in [
        'MUSIC_CATALOG_INPUT_DIR', 'MUSIC_CATALOG_OUTPUT', 'MUSIC_CATALOG_GENRE',
        'MUSIC_CATALOG_BASE_DIR', 'MUSIC_CATALOG_SHAPE', 'MUSIC_CATALOG_WORKERS',
        'MUSIC_CATALOG_LOG_LEVEL', 'MUSIC_CATALOG_LOG_DIR',
    ]:
        monkeypatch.setenv(name, 'placeholder')
        monkeypatch.delenv(name)


@pytest.fixture
def clock():
    return lambda: FIXED_TIME


@pytest.fixture
def audio_dir(tmp_path):
    """An empty directory named like the default collection"""
    path = tmp_path / "bedroompop"
    path.mkdir()
    return path


def touch(directory, *filenames):
    for filename in filenames:
        (directory / filename).write_bytes(b"\x00" * 16)


@pytest.fixture
def motion_sickness_tags():
    return RawTags(
        title="Motion Sickness",
        artist="Phoebe Bridgers",
        album="Stranger in the Alps",
        year=2017,
        genre=("indie rock", "folk"),
        duration=192.7,
        bitrate=320000,
        sample_rate=44100,
    )
