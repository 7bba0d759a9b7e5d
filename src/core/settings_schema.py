from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, List, Tuple


# Switch preferences
KEY_MASTER_TOGGLE = "enable_alerts_master_toggle"
KEY_EMERGENCY_ALERTS = "enable_emergency_alerts"
KEY_AMBER_ALERTS = "enable_cmas_amber_alerts"
KEY_EXTREME_ALERTS = "enable_cmas_extreme_threat_alerts"
KEY_SEVERE_ALERTS = "enable_cmas_severe_threat_alerts"
KEY_PRESIDENTIAL_ALERTS = "enable_cmas_presidential_alerts"
KEY_PUBLIC_SAFETY_MESSAGES = "enable_public_safety_messages"
KEY_PUBLIC_SAFETY_MESSAGES_FULL_SCREEN = "enable_public_safety_messages_full_screen"
KEY_TEST_ALERTS = "enable_test_alerts"
KEY_EXERCISE_ALERTS = "enable_exercise_alerts"
KEY_OPERATOR_DEFINED_ALERTS = "enable_operator_defined_alerts"
KEY_STATE_LOCAL_TEST_ALERTS = "enable_state_local_test_alerts"
KEY_AREA_UPDATE_INFO_ALERTS = "enable_area_update_info_alerts"
KEY_ALERT_VIBRATE = "enable_alert_vibrate"
KEY_RECEIVE_CMAS_IN_SECOND_LANGUAGE = "receive_cmas_in_second_language"
KEY_OVERRIDE_DND = "override_dnd"
KEY_ALERT_SPEECH = "enable_alert_speech"
KEY_SHOW_CMAS_OPT_OUT_DIALOG = "show_cmas_opt_out_dialog"

# List preferences
KEY_ALERT_REMINDER_INTERVAL = "alert_reminder_interval"

# Markers written outside of any node
KEY_OVERRIDE_DND_SETTINGS_CHANGED = "override_dnd_settings_changed"
KEY_ANY_PREFERENCE_CHANGED_BY_USER = "any_preference_changed_by_user"

MARKER_KEYS: Tuple[str, ...] = (
    KEY_OVERRIDE_DND_SETTINGS_CHANGED,
    KEY_ANY_PREFERENCE_CHANGED_BY_USER,
)

# Disabled and unchecked together with the master toggle, in this order.
SUB_ALERT_KEYS: Tuple[str, ...] = (
    KEY_EMERGENCY_ALERTS,
    KEY_AMBER_ALERTS,
    KEY_EXTREME_ALERTS,
    KEY_SEVERE_ALERTS,
    KEY_PUBLIC_SAFETY_MESSAGES,
    KEY_TEST_ALERTS,
    KEY_EXERCISE_ALERTS,
    KEY_OPERATOR_DEFINED_ALERTS,
    KEY_STATE_LOCAL_TEST_ALERTS,
    KEY_AREA_UPDATE_INFO_ALERTS,
)


@dataclass(frozen=True)
class AlertDefaults:
    """Product defaults, normally overlaid from the device profile."""

    master_toggle_enabled: bool = True
    emergency_alerts_enabled: bool = True
    amber_alerts_enabled: bool = True
    extreme_threat_alerts_enabled: bool = True
    severe_threat_alerts_enabled: bool = True
    public_safety_messages_enabled: bool = True
    public_safety_messages_full_screen_enabled: bool = False
    test_exercise_alerts_enabled: bool = False
    test_operator_defined_alerts_enabled: bool = False
    state_local_test_alerts_enabled: bool = False
    override_dnd: bool = False
    # Rule switches rather than initial values
    disable_severe_when_extreme_disabled: bool = True
    disable_extreme_alert_settings: bool = False


@dataclass(frozen=True)
class ReminderIntervalOptions:
    default: str = "0"
    values: Tuple[str, ...] = ("0", "1", "2", "15", "-1")
    entries: Tuple[str, ...] = (
        "Once",
        "Every 1 minute",
        "Every 2 minutes",
        "Every 15 minutes",
        "Every minute until dismissed",
    )
    active_values: Tuple[str, ...] = ("0", "2", "15")


def switch_defaults(d: AlertDefaults) -> Dict[str, bool]:
    """Initial values of every switch preference, keyed by preference key."""
    return {
        KEY_MASTER_TOGGLE: d.master_toggle_enabled,
        KEY_EMERGENCY_ALERTS: d.emergency_alerts_enabled,
        KEY_AMBER_ALERTS: d.amber_alerts_enabled,
        KEY_EXTREME_ALERTS: d.extreme_threat_alerts_enabled,
        KEY_SEVERE_ALERTS: d.severe_threat_alerts_enabled,
        KEY_PRESIDENTIAL_ALERTS: True,
        KEY_PUBLIC_SAFETY_MESSAGES: d.public_safety_messages_enabled,
        KEY_PUBLIC_SAFETY_MESSAGES_FULL_SCREEN: d.public_safety_messages_full_screen_enabled,
        KEY_TEST_ALERTS: False,
        KEY_EXERCISE_ALERTS: d.test_exercise_alerts_enabled,
        KEY_OPERATOR_DEFINED_ALERTS: d.test_operator_defined_alerts_enabled,
        KEY_STATE_LOCAL_TEST_ALERTS: d.state_local_test_alerts_enabled,
        KEY_AREA_UPDATE_INFO_ALERTS: True,
        KEY_ALERT_VIBRATE: True,
        KEY_RECEIVE_CMAS_IN_SECOND_LANGUAGE: False,
        KEY_OVERRIDE_DND: d.override_dnd,
        KEY_ALERT_SPEECH: True,
        KEY_SHOW_CMAS_OPT_OUT_DIALOG: True,
    }


def coerce_fields(cls, raw: Dict[str, Any]) -> Tuple[Dict[str, Any], List[str]]:
    """Split raw overrides into known dataclass fields and unknown names.

    Values are coerced to the type of the field's default so that a profile
    written by hand ("true", 1) still yields the declared type.
    """
    known: Dict[str, Any] = {}
    unknown: List[str] = []
    defaults = cls()
    names = {f.name for f in fields(cls)}
    for name, value in raw.items():
        if name not in names:
            unknown.append(name)
            continue
        current = getattr(defaults, name)
        if isinstance(current, bool):
            known[name] = _to_bool(value)
        elif isinstance(current, tuple):
            if isinstance(value, str):
                raise ValueError(f"'{name}' must be a list, got {value!r}")
            known[name] = tuple(str(v) for v in value)
        else:
            known[name] = type(current)(value)
    return known, unknown


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)
