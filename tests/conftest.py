"""Shared fixtures: a content-driven fake tag reader and source-tree helpers.

Fake audio files are plain text:
    "TAGS:<artist>|<album>|<title>" -- audio with those tags
    "NOTAGS"                        -- audio without a tag container
    anything else                   -- not audio
"""

import os
from pathlib import Path

import pytest

from music_sorter.config import SorterConfig
from music_sorter.models import TagProbe, Tags


def fake_probe(path: Path) -> TagProbe:
    try:
        content = path.read_text()
    except (OSError, UnicodeDecodeError):
        return TagProbe(is_audio=False)
    if content == "NOTAGS":
        return TagProbe(is_audio=True, tags=None)
    if content.startswith("TAGS:"):
        artist, album, title = content[len("TAGS:"):].split("|")
        return TagProbe(is_audio=True, tags=Tags(artist=artist, album=album, title=title))
    return TagProbe(is_audio=False)


def write_track(path: Path, artist: str = "", album: str = "", title: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"TAGS:{artist}|{album}|{title}")
    return path


def write_untagged(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("NOTAGS")
    return path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Drop MUSIC_SORTER_* vars so tests see defaults."""
    for var in list(os.environ):
        if var.startswith("MUSIC_SORTER_"):
            monkeypatch.delenv(var, raising=False)


@pytest.fixture
def config(tmp_path):
    return SorterConfig(
        _env_file=None,
        log_dir=tmp_path / "logs",
        show_progress=False,
    )


@pytest.fixture
def roots(tmp_path):
    src = tmp_path / "src"
    dest = tmp_path / "dest"
    src.mkdir()
    dest.mkdir()
    return src, dest


@pytest.fixture
def fake_reader():
    return fake_probe


@pytest.fixture
def make_track():
    return write_track


@pytest.fixture
def make_untagged():
    return write_untagged
