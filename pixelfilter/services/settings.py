"""
Settings management for the pixel filter toolkit.

Handles persistent storage of processing preferences in settings.ini.
"""

import logging
from configparser import ConfigParser, Error as ConfigParserError
from pathlib import Path
from typing import Optional, Union


logger = logging.getLogger(__name__)


class Settings:
    """Manages processing settings via settings.ini."""

    # Default settings file location (current working directory)
    SETTINGS_FILE = Path("settings.ini")

    # Section and keys
    SECTION = "processing"
    KEY_MAX_WORKERS = "max_workers"
    KEY_CHUNK_SIZE = "chunk_size"
    KEY_PRESETS_FILE = "presets_file"
    KEY_LOG_LEVEL = "log_level"

    DEFAULTS = {
        KEY_MAX_WORKERS: "0",
        KEY_CHUNK_SIZE: "65536",
        KEY_PRESETS_FILE: "",
        KEY_LOG_LEVEL: "INFO",
    }

    LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

    def __init__(self, settings_file: Optional[Union[str, Path]] = None):
        """Initialize settings from file or create defaults."""
        self.settings_file = Path(settings_file) if settings_file else self.SETTINGS_FILE
        self._explicit = bool(settings_file)
        self.config = ConfigParser()
        self._load()

    def _load(self) -> None:
        """Load settings from file or create defaults."""
        if self.settings_file.exists():
            try:
                self.config.read(self.settings_file)
            except ConfigParserError as e:
                logger.warning("Ignoring unreadable settings file %s: %s", self.settings_file, e)
                self.config = ConfigParser()
        else:
            self.config.add_section(self.SECTION)
            for key, value in self.DEFAULTS.items():
                self.config.set(self.SECTION, key, value)
            # Defaults are only written to a file the caller named
            if self._explicit:
                self._save()

    def _save(self) -> None:
        """Save settings to file."""
        self.settings_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.settings_file, "w") as f:
            self.config.write(f)

    def _get(self, key: str) -> str:
        return self.config.get(self.SECTION, key, fallback=self.DEFAULTS[key])

    def _set(self, key: str, value: str) -> None:
        if not self.config.has_section(self.SECTION):
            self.config.add_section(self.SECTION)
        self.config.set(self.SECTION, key, value)
        self._save()

    def _get_positive_int(self, key: str, allow_zero: bool = False) -> int:
        raw = self._get(key)
        try:
            value = int(raw)
        except ValueError:
            logger.warning("Invalid %s %r in %s, using default", key, raw, self.settings_file)
            return int(self.DEFAULTS[key])
        if value < 0 or (value == 0 and not allow_zero):
            logger.warning("Out-of-range %s %r in %s, using default", key, raw, self.settings_file)
            return int(self.DEFAULTS[key])
        return value

    def get_max_workers(self) -> Optional[int]:
        """Get worker thread count (None = automatic)."""
        value = self._get_positive_int(self.KEY_MAX_WORKERS, allow_zero=True)
        return value or None

    def set_max_workers(self, workers: Optional[int]) -> None:
        """Set and save worker thread count (None or 0 = automatic)."""
        self._set(self.KEY_MAX_WORKERS, str(workers or 0))

    def get_chunk_size(self) -> int:
        """Get pixels per worker task (default: 65536)."""
        return self._get_positive_int(self.KEY_CHUNK_SIZE)

    def set_chunk_size(self, chunk_size: int) -> None:
        """Set and save pixels per worker task."""
        if chunk_size < 1:
            raise ValueError("chunk_size must be >= 1")
        self._set(self.KEY_CHUNK_SIZE, str(chunk_size))

    def get_presets_file(self) -> Optional[Path]:
        """Get presets file path, if configured."""
        val = self._get(self.KEY_PRESETS_FILE)
        return Path(val) if val else None

    def set_presets_file(self, path: Optional[Union[str, Path]]) -> None:
        """Set and save presets file path."""
        self._set(self.KEY_PRESETS_FILE, str(path) if path else "")

    def get_log_level(self) -> str:
        """Get log level name (default: 'INFO')."""
        level = self._get(self.KEY_LOG_LEVEL).upper()
        if level not in self.LOG_LEVELS:
            logger.warning("Unknown log_level %r in %s, using INFO", level, self.settings_file)
            return self.DEFAULTS[self.KEY_LOG_LEVEL]
        return level

    def set_log_level(self, level: str) -> None:
        """Set and save log level name."""
        level = level.upper()
        if level not in self.LOG_LEVELS:
            raise ValueError(f"log level must be one of: {', '.join(self.LOG_LEVELS)}")
        self._set(self.KEY_LOG_LEVEL, level)
