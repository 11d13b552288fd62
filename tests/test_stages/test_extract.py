"""Tests for the extract stage -- fallbacks, extension policy, destination."""

from pathlib import Path

import pytest

from music_sorter.models import AudioFile, RunContext, TagProbe, Tags
from music_sorter.stages.extract import run

DEST = Path("/library")


def _extract(config, *files: AudioFile, reader=None) -> RunContext:
    ctx = RunContext(source_root=Path("/music"), destination_root=DEST, files=list(files))
    delta = run(ctx, config, tag_reader=reader)
    assert delta.as_dict() == {"found": 0, "copied": 0, "skipped": 0, "failed": 0}
    return ctx


def _file(name: str, tags: Tags | None, is_audio: bool = True) -> AudioFile:
    return AudioFile(
        source_path=Path("/music") / name,
        probe=TagProbe(is_audio=is_audio, tags=tags),
    )


class TestFullTags:
    def test_uses_tags_verbatim(self, config):
        audio = _file("01.flac", Tags("Muse", "Origin of Symmetry", "Bliss"))
        _extract(config, audio)
        assert (audio.artist, audio.album, audio.title) == ("Muse", "Origin of Symmetry", "Bliss")
        assert audio.extension == ".flac"
        assert audio.title_from_filename is False
        assert audio.destination_path == Path("/library/Muse/Origin of Symmetry/Bliss.flac")


class TestFallbacks:
    def test_missing_artist_and_album(self, config):
        audio = _file("01.mp3", Tags("", "", "Song"))
        _extract(config, audio)
        assert audio.artist == "Unknown"
        assert audio.album == "Unknown"
        assert audio.destination_path == Path("/library/Unknown/Unknown/Song.mp3")

    def test_missing_title_uses_file_name_without_extension_suffix(self, config):
        audio = _file("track07.mp3", Tags("Muse", "Absolution", ""))
        _extract(config, audio)
        assert audio.title == "track07.mp3"
        assert audio.title_from_filename is True
        assert audio.extension == ""
        assert audio.destination_path == Path("/library/Muse/Absolution/track07.mp3")

    def test_no_tag_container(self, config):
        audio = _file("track07.mp3", None)
        _extract(config, audio)
        assert (audio.artist, audio.album, audio.title) == ("Unknown", "Unknown", "track07.mp3")
        assert audio.extension == ""
        assert audio.destination_path == Path("/library/Unknown/Unknown/track07.mp3")

    def test_reader_failure(self, config):
        audio = _file("gone.ogg", None, is_audio=False)
        _extract(config, audio)
        assert (audio.artist, audio.album, audio.title) == ("Unknown", "Unknown", "gone.ogg")

    def test_custom_unknown_value(self, config):
        config.unknown_value = "Misc"
        audio = _file("a.mp3", Tags("", "", "T"))
        _extract(config, audio)
        assert audio.artist == audio.album == "Misc"

    @pytest.mark.parametrize(
        "tags",
        [Tags("", "", ""), Tags("A", "", ""), Tags("", "B", "C"), None],
    )
    def test_fields_never_empty(self, config, tags):
        audio = _file("x.wma", tags)
        _extract(config, audio)
        assert audio.artist and audio.album and audio.title


class TestTagTitleWithoutSuffix:
    def test_extensionless_source(self, config):
        audio = _file("README", Tags("A", "B", "C"))
        _extract(config, audio)
        assert audio.extension == ""
        assert audio.destination_path == Path("/library/A/B/C")


class TestProbeReuse:
    def test_cached_probe_not_reread(self, config):
        def exploding_reader(path):
            raise AssertionError("should not reopen")

        audio = _file("a.mp3", Tags("A", "B", "C"))
        _extract(config, audio, reader=exploding_reader)
        assert audio.title == "C"

    def test_probes_when_no_cache(self, config):
        audio = AudioFile(source_path=Path("/music/a.mp3"))
        _extract(config, audio, reader=lambda p: TagProbe(True, Tags("X", "Y", "Z")))
        assert audio.destination_path == Path("/library/X/Y/Z.mp3")


class TestSanitize:
    def test_off_by_default(self, config):
        audio = _file("a.mp3", Tags("AC/DC", "Back in Black", "Shoot: to Thrill"))
        _extract(config, audio)
        assert audio.destination_path == Path("/library/AC/DC/Back in Black/Shoot: to Thrill.mp3")

    def test_enabled(self, config):
        config.sanitize_paths = True
        audio = _file("a.mp3", Tags("AC/DC", "Back in Black", "Shoot: to Thrill"))
        _extract(config, audio)
        assert audio.destination_path == Path("/library/AC_DC/Back in Black/Shoot_ to Thrill.mp3")

    def test_enabled_dot_title_falls_back_to_stem(self, config):
        config.sanitize_paths = True
        audio = _file("song.mp3", Tags("A", "..", ".."))
        _extract(config, audio)
        assert audio.album == "Unknown"
        assert audio.title == "song"


class TestDeterminism:
    def test_order_and_paths_preserved(self, config):
        files = [_file(f"{n}.mp3", Tags("A", "B", n)) for n in ("c", "a", "b")]
        _extract(config, *files)
        assert [f.destination_path.name for f in files] == ["c.mp3", "a.mp3", "b.mp3"]
