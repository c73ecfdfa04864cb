"""
Service for reading, migrating and persisting the reload configuration document.
"""
import json
import logging
import math
from pathlib import Path
from typing import Any, Dict, Optional

from siege_reload import __version__
from siege_reload.core.config import settings
from siege_reload.models.reload_settings import ReloadSettings
from siege_reload.models.weapon import (
    DEFAULT_BALLISTA_RELOAD_TIME,
    DEFAULT_CATAPULT_RELOAD_TIME,
)

logger = logging.getLogger(__name__)

# Stored documents older than this are discarded in favour of defaults
MIGRATION_THRESHOLD_VERSION = "1.0.0"


def is_version_older(stored: Optional[str], current: str) -> bool:
    """
    Compare version tags using plain string ordering.

    A missing tag sorts before every other version.
    """
    return (stored or "") < current


class SettingsStore:
    """Persisted settings store with forced write-back on load."""

    VERSION_KEY = "Version"
    CATAPULT_KEY = "Catapult Reload Duration Seconds"
    BALLISTA_KEY = "Ballista Reload Duration Seconds"

    DURATION_DEFAULTS = (
        (CATAPULT_KEY, DEFAULT_CATAPULT_RELOAD_TIME),
        (BALLISTA_KEY, DEFAULT_BALLISTA_RELOAD_TIME),
    )

    def __init__(self, path: Optional[Path] = None, current_version: str = __version__):
        self.path = Path(path) if path is not None else settings.get_config_path()
        self.current_version = current_version

    def defaults(self) -> ReloadSettings:
        return ReloadSettings(
            version=self.current_version,
            catapult_reload_seconds=DEFAULT_CATAPULT_RELOAD_TIME,
            ballista_reload_seconds=DEFAULT_BALLISTA_RELOAD_TIME,
        )

    def load(self) -> ReloadSettings:
        """
        Load settings from disk, migrating stale documents.

        The result is always written back so the stored copy carries the
        current version tag.
        """
        document = self._read_document()
        if document is None:
            loaded = self.defaults()
        else:
            loaded = self._from_document(document)
            if is_version_older(loaded.version, self.current_version):
                loaded = self._update(loaded)

        self.save(loaded)
        return loaded

    def save(self, reload_settings: ReloadSettings) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as fh:
            json.dump(reload_settings.to_document(), fh, indent=2)
            fh.write("\n")
        logger.debug(f"Saved reload settings to {self.path}")

    def _update(self, stored: ReloadSettings) -> ReloadSettings:
        logger.warning("Config changes detected! Updating...")

        previous_version = stored.version or "unknown"
        updated = stored
        if is_version_older(stored.version, MIGRATION_THRESHOLD_VERSION):
            updated = self.defaults()

        logger.warning(
            f"Config update complete! Updated from version {previous_version} to {self.current_version}"
        )
        return updated.with_version(self.current_version)

    def _read_document(self) -> Optional[Dict[str, Any]]:
        if not self.path.exists():
            logger.info(f"No config found at {self.path}, creating default configuration")
            return None

        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                document = json.load(fh)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read config {self.path}, falling back to defaults: {e}")
            return None

        if not isinstance(document, dict):
            logger.error(f"Config {self.path} is not a key/value document, falling back to defaults")
            return None
        return document

    def _from_document(self, document: Dict[str, Any]) -> ReloadSettings:
        version = document.get(self.VERSION_KEY)
        values: Dict[str, Any] = {
            self.VERSION_KEY: "" if version is None else str(version),
        }
        for key, default in self.DURATION_DEFAULTS:
            values[key] = self._parse_duration(document.get(key), key, default)
        return ReloadSettings.model_validate(values)

    def _parse_duration(self, raw: Any, key: str, default: float) -> float:
        if raw is None:
            logger.warning(f'"{key}" is missing, using default {default}')
            return default
        try:
            value = float(raw)
        except (TypeError, ValueError, OverflowError):
            logger.warning(f'"{key}" value {raw!r} is not a number, using default {default}')
            return default
        if isinstance(raw, bool) or not math.isfinite(value) or value <= 0:
            logger.warning(f'"{key}" must be a positive number of seconds, got {raw!r}; using default {default}')
            return default
        return value
