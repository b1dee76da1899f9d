"""Tests for INI-backed settings."""

from pathlib import Path

import pytest

from pixelfilter.services import Settings


class TestSettings:
    """Test settings persistence and fallbacks."""

    def test_creates_defaults(self, temp_dir):
        path = temp_dir / "settings.ini"
        settings = Settings(path)

        assert path.exists()
        assert settings.get_max_workers() is None
        assert settings.get_chunk_size() == 65536
        assert settings.get_presets_file() is None
        assert settings.get_log_level() == "INFO"

    def test_values_persist(self, temp_dir):
        path = temp_dir / "settings.ini"
        settings = Settings(path)
        settings.set_max_workers(3)
        settings.set_chunk_size(1024)
        settings.set_presets_file(temp_dir / "presets.json")
        settings.set_log_level("debug")

        reloaded = Settings(path)
        assert reloaded.get_max_workers() == 3
        assert reloaded.get_chunk_size() == 1024
        assert reloaded.get_presets_file() == Path(temp_dir / "presets.json")
        assert reloaded.get_log_level() == "DEBUG"

    def test_automatic_workers(self, temp_dir):
        settings = Settings(temp_dir / "settings.ini")
        settings.set_max_workers(None)
        assert settings.get_max_workers() is None

    def test_invalid_values_fall_back(self, temp_dir):
        path = temp_dir / "settings.ini"
        path.write_text(
            "[processing]\n"
            "max_workers = lots\n"
            "chunk_size = 0\n"
            "log_level = chatty\n"
        )
        settings = Settings(path)

        assert settings.get_max_workers() is None
        assert settings.get_chunk_size() == 65536
        assert settings.get_log_level() == "INFO"

    def test_missing_section_falls_back(self, temp_dir):
        path = temp_dir / "settings.ini"
        path.write_text("[other]\nkey = value\n")
        settings = Settings(path)
        assert settings.get_chunk_size() == 65536

    def test_rejects_bad_setters(self, temp_dir):
        settings = Settings(temp_dir / "settings.ini")
        with pytest.raises(ValueError):
            settings.set_chunk_size(0)
        with pytest.raises(ValueError):
            settings.set_log_level("LOUD")

    def test_default_location_is_not_created(self, temp_dir, monkeypatch):
        monkeypatch.chdir(temp_dir)
        settings = Settings()

        assert settings.get_chunk_size() == 65536
        assert not (temp_dir / "settings.ini").exists()

    def test_default_location_written_on_set(self, temp_dir, monkeypatch):
        monkeypatch.chdir(temp_dir)
        Settings().set_chunk_size(2048)

        assert Settings().get_chunk_size() == 2048
