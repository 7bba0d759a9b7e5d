#!/usr/bin/env python3
"""
Preference Storage for Alert Settings
Handles persistent storage of alert preferences using XDG standards
"""

import json
import logging
import os
import shutil
import tempfile
from typing import Any, Dict, Optional
from pathlib import Path


logger = logging.getLogger(__name__)

APP_DIR_NAME = 'alert-settings'
PREFERENCES_FILE = 'preferences.json'
STORE_VERSION = "1.0"


class AlertSettingsError(Exception):
    """Base error for the alert settings package"""


class StorageWriteFailure(AlertSettingsError):
    """A preference could not be durably recorded"""

    def __init__(self, key: str, path: Path, cause: Exception):
        super().__init__(f"Failed to persist '{key}' to {path}: {cause}")
        self.key = key
        self.path = path


class DeviceProfileError(AlertSettingsError):
    """An explicitly requested device profile could not be loaded"""


def get_config_dir(config_home: Optional[str] = None) -> Path:
    """Get configuration directory following XDG standards"""
    # Use XDG_CONFIG_HOME if set, otherwise default to ~/.config
    config_home = config_home or os.environ.get('XDG_CONFIG_HOME')
    if config_home:
        return Path(config_home) / APP_DIR_NAME
    return Path.home() / '.config' / APP_DIR_NAME


class PreferenceStore:
    """Typed key-value preference storage backed by a JSON file.

    Reads never fail: a missing key (or a value of the wrong type) yields the
    caller's default. Writes are synchronous and raise StorageWriteFailure
    when the file cannot be written; the in-memory cache is rolled back so it
    never disagrees with what is on disk.
    """

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = Path(config_path) if config_path else self._get_config_path()
        self.config_data = self._load_config()

    def _get_config_path(self) -> Path:
        config_dir = get_config_dir()
        # Create directory if it doesn't exist
        config_dir.mkdir(parents=True, exist_ok=True, mode=0o700)
        return config_dir / PREFERENCES_FILE

    @property
    def backup_path(self) -> Path:
        return self.config_path.with_suffix('.json.backup')

    def _load_config(self) -> Dict:
        """Load preferences from file, falling back to the backup, then to an empty store"""
        config = self._read_file(self.config_path)
        if config is None and self.backup_path.exists():
            config = self._read_file(self.backup_path)
            if config is not None:
                logger.warning("Recovered preferences from backup %s", self.backup_path)
        if config is None:
            return {
                "version": STORE_VERSION,
                "preferences": {}
            }
        return config

    def _read_file(self, path: Path) -> Optional[Dict]:
        if not path.exists():
            return None
        try:
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Error loading preferences from %s: %s", path, e)
            return None
        # Validate config structure
        if isinstance(config, dict) and isinstance(config.get("preferences"), dict):
            logger.info("Loaded preferences from %s", path)
            return config
        logger.warning("Invalid preference structure in %s", path)
        return None

    def _save_config(self) -> None:
        """Save preferences to file, raising OSError on failure.

        The new contents go to a temporary file in the same directory which
        replaces the primary only once it is complete, so a failure at any
        step leaves the primary file as it was.
        """
        config_dir = self.config_path.parent
        config_dir.mkdir(parents=True, exist_ok=True, mode=0o700)

        fd, tmp_name = tempfile.mkstemp(dir=config_dir, prefix='.preferences-', suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(self.config_data, f, indent=2, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())

            # Set proper permissions (read/write for owner only)
            os.chmod(tmp_name, 0o600)

            # Keep a copy of the last good file
            if self.config_path.exists():
                shutil.copy2(self.config_path, self.backup_path)

            os.replace(tmp_name, self.config_path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise

    @property
    def _preferences(self) -> Dict[str, Any]:
        return self.config_data.setdefault('preferences', {})

    def contains(self, key: str) -> bool:
        """Check if a value has been persisted under key"""
        return key in self._preferences

    def all(self) -> Dict[str, Any]:
        """Get a copy of every persisted preference"""
        return dict(self._preferences)

    def get_boolean(self, key: str, default: bool) -> bool:
        return self._get_typed(key, default, bool)

    def get_string(self, key: str, default: str) -> str:
        return self._get_typed(key, default, str)

    def set_boolean(self, key: str, value: bool) -> None:
        self._put(key, bool(value))

    def set_string(self, key: str, value: str) -> None:
        self._put(key, str(value))

    def _get_typed(self, key: str, default, expected: type):
        if key not in self._preferences:
            return default
        value = self._preferences[key]
        if not isinstance(value, expected):
            logger.warning(
                "Ignoring stored value %r for '%s': expected %s",
                value, key, expected.__name__,
            )
            return default
        return value

    def _put(self, key: str, value: Any) -> None:
        prefs = self._preferences
        missing = key not in prefs
        previous = prefs.get(key)
        prefs[key] = value
        try:
            self._save_config()
        except OSError as e:
            if missing:
                del prefs[key]
            else:
                prefs[key] = previous
            logger.error("Error saving preference '%s' to %s: %s", key, self.config_path, e)
            raise StorageWriteFailure(key, self.config_path, e) from e
