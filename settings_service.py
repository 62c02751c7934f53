"""Centralized settings loader for the application.

Infrastructure-level module — must not import from services/, facades/,
or logging_config.py to avoid circular imports.
"""

import tomllib
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

SETTINGS_PATH = Path(__file__).resolve().parent / "settings.toml"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_cached_settings: dict | None = None


def _load_settings(settings_path: Path = SETTINGS_PATH) -> dict:
    """Load and cache settings from the TOML file."""
    global _cached_settings
    if _cached_settings is not None:
        return _cached_settings
    try:
        with open(settings_path, "rb") as f:
            _cached_settings = tomllib.load(f)
            return _cached_settings
    except Exception as e:
        logger.error("Failed to load settings from %s: %s", settings_path, e)
        raise


def clear_settings_cache() -> None:
    """Drop the cached settings so the next read goes back to disk."""
    global _cached_settings
    _cached_settings = None


class SettingsService:
    """Read-only accessor for application settings.

    Settings are cached at module level after the first read.
    """

    def __init__(self, settings_path: str | Path = SETTINGS_PATH):
        self.settings = _load_settings(Path(settings_path))

    @property
    def settings_dict(self) -> dict:
        return self.settings

    @property
    def log_level(self) -> str:
        return self.settings["env"]["log_level"]

    @property
    def log_file(self) -> str:
        return self.settings["logging"]["log_file"]

    @property
    def max_bytes(self) -> int:
        return self.settings["logging"]["max_bytes"]

    @property
    def backup_count(self) -> int:
        return self.settings["logging"]["backup_count"]
