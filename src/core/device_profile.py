from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence

from config import DeviceProfileError, get_config_dir
from .settings_schema import (
    AlertDefaults,
    ReminderIntervalOptions,
    coerce_fields,
    KEY_MASTER_TOGGLE,
    KEY_EMERGENCY_ALERTS,
    KEY_AMBER_ALERTS,
    KEY_EXTREME_ALERTS,
    KEY_SEVERE_ALERTS,
    KEY_PRESIDENTIAL_ALERTS,
    KEY_PUBLIC_SAFETY_MESSAGES,
    KEY_PUBLIC_SAFETY_MESSAGES_FULL_SCREEN,
    KEY_TEST_ALERTS,
    KEY_EXERCISE_ALERTS,
    KEY_OPERATOR_DEFINED_ALERTS,
    KEY_STATE_LOCAL_TEST_ALERTS,
    KEY_ALERT_VIBRATE,
    KEY_RECEIVE_CMAS_IN_SECOND_LANGUAGE,
    KEY_OVERRIDE_DND,
)


logger = logging.getLogger(__name__)

PROFILE_FILE = "device-profile.json"


@dataclass(frozen=True)
class ScreenConfig:
    """Which optional preferences this device shows. Computed once."""

    show_master_toggle: bool = True
    show_emergency_alerts: bool = True
    show_amber: bool = True
    show_extreme: bool = True
    show_severe: bool = True
    show_presidential: bool = False
    show_public_safety_messages: bool = True
    show_public_safety_messages_full_screen: bool = False
    show_test: bool = False
    show_exercise_test: bool = False
    show_operator_defined: bool = False
    show_state_local_test: bool = False
    show_enable_vibrate: bool = True
    show_receive_cmas_in_second_language: bool = False
    show_override_dnd: bool = False

    def visible(self, key: str) -> bool:
        """Visibility of the preference stored under key.

        Preferences without a flag are always shown.
        """
        flag = _VISIBILITY_FLAGS.get(key)
        if flag is None:
            return True
        return getattr(self, flag)

    def as_mapping(self) -> Mapping[str, bool]:
        return MappingProxyType(asdict(self))


_VISIBILITY_FLAGS: Dict[str, str] = {
    KEY_MASTER_TOGGLE: "show_master_toggle",
    KEY_EMERGENCY_ALERTS: "show_emergency_alerts",
    KEY_AMBER_ALERTS: "show_amber",
    KEY_EXTREME_ALERTS: "show_extreme",
    KEY_SEVERE_ALERTS: "show_severe",
    KEY_PRESIDENTIAL_ALERTS: "show_presidential",
    KEY_PUBLIC_SAFETY_MESSAGES: "show_public_safety_messages",
    KEY_PUBLIC_SAFETY_MESSAGES_FULL_SCREEN: "show_public_safety_messages_full_screen",
    KEY_TEST_ALERTS: "show_test",
    KEY_EXERCISE_ALERTS: "show_exercise_test",
    KEY_OPERATOR_DEFINED_ALERTS: "show_operator_defined",
    KEY_STATE_LOCAL_TEST_ALERTS: "show_state_local_test",
    KEY_ALERT_VIBRATE: "show_enable_vibrate",
    KEY_RECEIVE_CMAS_IN_SECOND_LANGUAGE: "show_receive_cmas_in_second_language",
    KEY_OVERRIDE_DND: "show_override_dnd",
}


@dataclass(frozen=True)
class DeviceProfile:
    """Everything the settings model needs to know about the device."""

    defaults: AlertDefaults = field(default_factory=AlertDefaults)
    screen: ScreenConfig = field(default_factory=ScreenConfig)
    reminder_interval: ReminderIntervalOptions = field(default_factory=ReminderIntervalOptions)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DeviceProfile":
        sections = {
            "defaults": AlertDefaults,
            "screen": ScreenConfig,
            "reminder_interval": ReminderIntervalOptions,
        }
        for name in data:
            if name not in sections:
                logger.warning("Ignoring unknown device profile section '%s'", name)

        built: Dict[str, Any] = {}
        for name, section_cls in sections.items():
            raw = data.get(name) or {}
            if not isinstance(raw, dict):
                raise DeviceProfileError(f"Profile section '{name}' must be an object")
            try:
                known, unknown = coerce_fields(section_cls, raw)
            except (TypeError, ValueError) as e:
                raise DeviceProfileError(f"Invalid value in profile section '{name}': {e}") from e
            for key in unknown:
                logger.warning("Ignoring unknown field '%s' in profile section '%s'", key, name)
            built[name] = section_cls(**known)
        return cls(**built)


def default_profile_path() -> Path:
    return get_config_dir() / PROFILE_FILE


def load_device_profile(path: Optional[Path] = None) -> DeviceProfile:
    """Load the device profile overlay.

    With no explicit path, a missing or unreadable profile in the config
    directory falls back to built-in defaults. An explicitly requested path
    must exist and parse, otherwise DeviceProfileError is raised.
    """
    explicit = path is not None
    profile_path = Path(path) if explicit else default_profile_path()

    if not profile_path.exists():
        if explicit:
            raise DeviceProfileError(f"Device profile does not exist: {profile_path}")
        return DeviceProfile()

    try:
        with open(profile_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        if explicit:
            raise DeviceProfileError(f"Error loading device profile {profile_path}: {e}") from e
        logger.warning("Error loading device profile %s: %s, using defaults", profile_path, e)
        return DeviceProfile()

    if not isinstance(data, dict):
        raise DeviceProfileError(f"Device profile {profile_path} must contain a JSON object")
    logger.info("Loaded device profile from %s", profile_path)
    return DeviceProfile.from_dict(data)


def active_interval_entries(
    active_values: Sequence[str],
    all_values: Sequence[str],
    all_entries: Sequence[str],
) -> List[str]:
    """Display labels for the active reminder interval values.

    Labels come from the position of each active value in the full table; a
    value missing from the table gets an empty label.
    """
    entries: List[str] = []
    for value in active_values:
        try:
            index = list(all_values).index(value)
            entries.append(all_entries[index])
        except (ValueError, IndexError):
            logger.error("Can't find reminder interval entry for %s", value)
            entries.append("")
    return entries
