"""Tests for config.py -- defaults, env var overrides."""

from pathlib import Path

from music_sorter.config import SorterConfig


class TestDefaults:
    def test_default_values(self):
        config = SorterConfig(_env_file=None)
        assert config.dry_run is False
        assert config.verbose is False
        assert config.show_progress is True
        assert config.strict_exit is False
        assert config.unknown_value == "Unknown"
        assert config.sanitize_paths is False
        assert config.atomic_copy is True
        assert config.log_level == "INFO"

    def test_log_file_under_log_dir(self, tmp_path):
        config = SorterConfig(_env_file=None, log_dir=tmp_path)
        assert config.log_file == tmp_path / "music-sorter.log"


class TestOverrides:
    def test_constructor_override(self):
        config = SorterConfig(_env_file=None, dry_run=True, unknown_value="Misc")
        assert config.dry_run is True
        assert config.unknown_value == "Misc"

    def test_env_var_override(self, monkeypatch):
        monkeypatch.setenv("MUSIC_SORTER_DRY_RUN", "true")
        monkeypatch.setenv("MUSIC_SORTER_SANITIZE_PATHS", "1")
        config = SorterConfig(_env_file=None)
        assert config.dry_run is True
        assert config.sanitize_paths is True

    def test_unprefixed_env_ignored(self, monkeypatch):
        monkeypatch.setenv("DRY_RUN", "true")
        config = SorterConfig(_env_file=None)
        assert config.dry_run is False

    def test_path_from_env(self, monkeypatch):
        monkeypatch.setenv("MUSIC_SORTER_LOG_DIR", "/tmp/sorter-logs")
        config = SorterConfig(_env_file=None)
        assert config.log_dir == Path("/tmp/sorter-logs")

    def test_env_file(self, tmp_path):
        env_file = tmp_path / "sorter.env"
        env_file.write_text("MUSIC_SORTER_STRICT_EXIT=true\n")
        config = SorterConfig(_env_file=env_file)
        assert config.strict_exit is True
